import dataclasses

import pytest

from decimal96.core import Decimal96

NEGATIVE = 2147483648


@pytest.mark.parametrize(
    "bits",
    [
        (1, 1, 1, 65536),
        (24, 1, 1, 2147549184),
        (4294967295, 4294967295, 4294967295, 0),
        (1, 2, 3, 917504),
        (2818572289, 2606532082, 1355252715, 2149318656),
    ],
)
def test_bits_round_trip(bits):
    assert Decimal96.from_bits(bits).to_bits() == bits


def test_from_bits_accepts_signed_words():
    value = Decimal96.from_bits((1, 1, 1, -2147418112))
    assert value.to_bits() == (1, 1, 1, 2147549184)
    assert value.negative is True


def test_from_bits_all_ones_signed():
    value = Decimal96.from_bits((-1, -1, -1, -2147483648))
    assert value.to_bits() == (4294967295, 4294967295, 4294967295, NEGATIVE)


def test_from_bits_reads_scale():
    value = Decimal96.from_bits((613478421, 0, 0, 196608))
    assert value.scale == 3
    assert value.mantissa == 613478421
    assert value.negative is False


def test_negative_infinity_bits():
    assert Decimal96.infinity(True).to_bits() == (0, 0, 0, 2164195328)


def test_infinity_flags():
    positive = Decimal96.infinity()
    negative = Decimal96.infinity(True)
    assert positive.is_infinite() and negative.is_infinite()
    assert not positive.negative
    assert negative.negative
    assert not positive.is_nan()
    assert Decimal96.from_bits(negative.to_bits()) == negative


def test_nan_detected():
    nan = Decimal96.from_bits((0, 0, 2147483648, 255 << 16))
    assert nan.is_nan()
    assert not nan.is_infinite()


def test_ordinary_value_is_not_special():
    value = Decimal96.from_bits((15, 0, 0, 65536))
    assert not value.is_nan()
    assert not value.is_infinite()


@pytest.mark.parametrize(
    "bits, expected",
    [
        ((0, 0, 0, 0), True),
        ((0, 0, 0, 2147549184), True),
        ((1, 0, 0, 0), False),
        ((0, 0, 1, 0), False),
    ],
)
def test_is_zero(bits, expected):
    assert Decimal96.from_bits(bits).is_zero() is expected


@pytest.mark.parametrize(
    "kwargs",
    [
        {"mantissa": 1 << 96},
        {"mantissa": -1},
        {"scale": 256},
        {"scale": -1},
    ],
)
def test_out_of_range_fields_rejected(kwargs):
    with pytest.raises(ValueError):
        Decimal96(**kwargs)


def test_from_bits_needs_four_words():
    with pytest.raises(ValueError):
        Decimal96.from_bits((1, 2, 3))


def test_values_are_immutable_and_compare_by_field():
    first = Decimal96.from_bits((5, 0, 0, NEGATIVE))
    second = Decimal96(mantissa=5, scale=0, negative=True)
    assert first == second
    with pytest.raises(dataclasses.FrozenInstanceError):
        first.mantissa = 6  # type: ignore[misc]