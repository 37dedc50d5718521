"""Multiplication of decimals."""

from __future__ import annotations

from decimal96.core import (
    MAX_MANTISSA,
    DecimalError,
    Decimal96,
    NegativeOverflowError,
    PositiveOverflowError,
)

MAX_RESULT_SCALE = 28


def _round_half_even(mantissa: int, digits: int) -> int:
    """Drop ``digits`` decimal digits from ``mantissa``, rounding half to even."""
    if digits == 0:
        return mantissa
    divisor = 10**digits
    quotient, remainder = divmod(mantissa, divisor)
    half = divisor // 2
    if remainder > half or (remainder == half and quotient & 1):
        quotient += 1
    return quotient


def _fit(mantissa: int, scale: int) -> tuple[int, int]:
    """Reduce the scale until the value fits in 96 bits and 28 decimal places.

    Returns the new mantissa and scale; the mantissa may still be too large
    when the scale has reached zero.
    """
    dropped = 0
    while True:
        reduced = _round_half_even(mantissa, dropped)
        new_scale = scale - dropped
        if new_scale <= MAX_RESULT_SCALE and (reduced <= MAX_MANTISSA or new_scale == 0):
            return reduced, new_scale
        dropped += 1


def _check_finite(*values: Decimal96) -> None:
    for value in values:
        if value.is_nan() or value.is_infinite():
            raise DecimalError("special values cannot be multiplied")


def result_scale(a: Decimal96, b: Decimal96) -> int:
    """Return the scale of the exact product, before any rounding."""
    return a.scale + b.scale


def multiply(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return ``a * b``.

    Products with more than 28 decimal places, or too large for 96 bits,
    are rounded half to even. A product that does not fit even as an
    integer raises an overflow error whose direction follows the sign of
    ``a`` alone.
    """
    _check_finite(a, b)
    mantissa, scale = _fit(a.mantissa * b.mantissa, result_scale(a, b))
    if mantissa > MAX_MANTISSA:
        if a.negative:
            raise NegativeOverflowError("product too small")
        raise PositiveOverflowError("product too large")
    return Decimal96(mantissa=mantissa, scale=scale, negative=a.negative != b.negative)