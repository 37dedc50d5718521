"""Subtraction of decimals."""

from __future__ import annotations

from decimal96.core import (
    MAX_MANTISSA,
    DecimalError,
    Decimal96,
    NegativeOverflowError,
    PositiveOverflowError,
)

_MAX_SCALE = 28


def _signed(value: Decimal96, scale: int) -> int:
    magnitude = value.mantissa * 10 ** (scale - value.scale)
    return -magnitude if value.negative else magnitude


def _round_half_even(mantissa: int, digits: int) -> int:
    if digits == 0:
        return mantissa
    divisor = 10**digits
    quotient, remainder = divmod(mantissa, divisor)
    half = divisor // 2
    if remainder > half or (remainder == half and quotient & 1):
        quotient += 1
    return quotient


def _build(difference: int, scale: int) -> Decimal96:
    """Turn a signed exact difference at ``scale`` into a decimal."""
    if difference == 0:
        return Decimal96()
    negative = difference < 0
    magnitude = abs(difference)
    dropped = 0
    while True:
        reduced = _round_half_even(magnitude, dropped)
        new_scale = scale - dropped
        if new_scale <= _MAX_SCALE and (reduced <= MAX_MANTISSA or new_scale == 0):
            break
        if reduced <= MAX_MANTISSA and new_scale <= scale and scale <= _MAX_SCALE:
            break
        dropped += 1
    if reduced > MAX_MANTISSA:
        if negative:
            raise NegativeOverflowError("difference too small")
        raise PositiveOverflowError("difference too large")
    if reduced == 0:
        return Decimal96()
    return Decimal96(mantissa=reduced, scale=new_scale, negative=negative)


def _check_finite(*values: Decimal96) -> None:
    for value in values:
        if value.is_nan() or value.is_infinite():
            raise DecimalError("special values cannot be subtracted")


def subtract(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return ``a - b`` at the larger of the two scales.

    A zero difference is a positive zero of scale 0. A difference too
    large for 96 bits is rounded half to even to fewer decimal places,
    and raises an overflow error if it does not fit even as an integer.
    """
    _check_finite(a, b)
    scale = max(a.scale, b.scale)
    return _build(_signed(a, scale) - _signed(b, scale), scale)


def subtract_unscaled(a: Decimal96, b: Decimal96) -> Decimal96:
    """Subtract the signed mantissas, ignoring both scales.

    The result always has scale 0.
    """
    _check_finite(a, b)
    return _build(_signed(a, a.scale) - _signed(b, b.scale), 0)