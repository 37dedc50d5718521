"""Conversions between decimals and Python ints and floats."""

from __future__ import annotations

import math
import struct

from decimal96.core import ConversionError, Decimal96

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1
_MAX_DIVIDING_SCALE = 28
_SMALLEST_MAGNITUDE = 1e-28
_LARGEST_MAGNITUDE = 2.0**96


def _single(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def from_int(value: int) -> Decimal96:
    """Convert a 32-bit signed integer.

    Magnitudes of 2**31 - 1 and above are rejected, except the most
    negative 32-bit integer itself.
    """
    if not isinstance(value, int):
        raise TypeError("value must be an int")
    if value == _INT_MIN:
        return Decimal96(mantissa=-_INT_MIN, negative=True)
    magnitude = abs(value)
    if magnitude >= _INT_MAX:
        raise ConversionError(f"integer out of range: {value}")
    return Decimal96(mantissa=magnitude, negative=value < 0)


def to_int(value: Decimal96) -> int:
    """Convert to a 32-bit signed integer, truncating any fraction.

    Only the low 32 bits of the mantissa may be set; scales above 28
    are not applied.
    """
    if value.mantissa >> 32:
        raise ConversionError("mantissa does not fit in 32 bits")
    result = value.mantissa
    if 0 < value.scale <= _MAX_DIVIDING_SCALE:
        result //= 10**value.scale
    limit = -_INT_MIN if value.negative else _INT_MAX
    if result > limit:
        raise ConversionError("value does not fit in a 32-bit integer")
    return -result if value.negative else result


def to_float(value: Decimal96) -> float:
    """Convert to a single-precision value, returned as a Python float."""
    total = 0.0
    for bit in range(value.mantissa.bit_length()):
        if value.mantissa >> bit & 1:
            total = _single(total + 2.0**bit)
    result = _single(total / float(10**value.scale))
    return -result if value.negative else result


def from_float(value: float) -> Decimal96:
    """Convert a float, first rounded to single precision.

    The decimal keeps the seven significant digits of the value. NaN,
    infinities, nonzero magnitudes below 1e-28 and magnitudes of 2**96
    or more are rejected.
    """
    try:
        value = float(value)
    except OverflowError as exc:
        raise ConversionError("value too large") from exc
    if math.isnan(value) or math.isinf(value):
        raise ConversionError(f"cannot convert {value}")
    try:
        single = _single(value)
    except OverflowError as exc:
        raise ConversionError("value too large") from exc

    magnitude = abs(single)
    if 0 < magnitude < _SMALLEST_MAGNITUDE or magnitude >= _LARGEST_MAGNITUDE:
        raise ConversionError(f"value out of range: {value}")

    digits, _, exponent = f"{magnitude:e}".partition("e")
    significand = digits.replace(".", "").rstrip("0") or "0"
    power = int(exponent) - (len(significand) - 1)
    mantissa = int(significand)
    if power >= 0:
        return Decimal96(mantissa=mantissa * 10**power, negative=single < 0)
    return Decimal96(mantissa=mantissa, scale=-power, negative=single < 0)