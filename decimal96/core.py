"""The 96-bit scaled decimal value and the errors raised by its operations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

MANTISSA_BITS = 96
MAX_MANTISSA = (1 << MANTISSA_BITS) - 1
MAX_SCALE = 255

_WORD_MASK = 0xFFFFFFFF
_SCALE_SHIFT = 16
_SCALE_MASK = 0xFF
_SIGN_SHIFT = 31
_SPECIAL_SCALE = 255
_NAN_MANTISSA = 0x80000000 << 64


class DecimalError(Exception):
    """Base class for every error raised by this package."""


class DecimalOverflowError(DecimalError, OverflowError):
    """A result does not fit in 96 bits."""


class PositiveOverflowError(DecimalOverflowError):
    """A result is too large."""


class NegativeOverflowError(DecimalOverflowError):
    """A result is too small (a negative value of too great magnitude)."""


class ConversionError(DecimalError, ValueError):
    """A value cannot be converted to or from a decimal."""


@dataclass(frozen=True)
class Decimal96:
    """A sign, a 96-bit unsigned mantissa and a power-of-ten scale.

    The value is ``(-1 if negative else 1) * mantissa / 10 ** scale``.
    A scale of 255 marks the special values: a zero mantissa is infinity,
    a mantissa with only its top bit set is NaN.
    """

    mantissa: int = 0
    scale: int = 0
    negative: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.mantissa, int) or isinstance(self.mantissa, bool):
            raise TypeError("mantissa must be an int")
        if not isinstance(self.scale, int) or isinstance(self.scale, bool):
            raise TypeError("scale must be an int")
        if not 0 <= self.mantissa <= MAX_MANTISSA:
            raise ValueError(f"mantissa out of range: {self.mantissa}")
        if not 0 <= self.scale <= MAX_SCALE:
            raise ValueError(f"scale out of range: {self.scale}")
        object.__setattr__(self, "negative", bool(self.negative))

    @classmethod
    def from_bits(cls, bits: Iterable[int]) -> Decimal96:
        """Build a decimal from its four 32-bit words, low word first.

        Words may be given signed or unsigned; only their low 32 bits count.
        """
        words = tuple(bits)
        if len(words) != 4:
            raise ValueError(f"expected 4 words, got {len(words)}")
        if not all(isinstance(word, int) for word in words):
            raise TypeError("words must be ints")
        low, middle, high, flags = (word & _WORD_MASK for word in words)
        return cls(
            mantissa=low | (middle << 32) | (high << 64),
            scale=(flags >> _SCALE_SHIFT) & _SCALE_MASK,
            negative=bool(flags >> _SIGN_SHIFT),
        )

    def to_bits(self) -> tuple[int, int, int, int]:
        """Return the four unsigned 32-bit words, low word first."""
        flags = (self.scale << _SCALE_SHIFT) | (int(self.negative) << _SIGN_SHIFT)
        return (
            self.mantissa & _WORD_MASK,
            (self.mantissa >> 32) & _WORD_MASK,
            (self.mantissa >> 64) & _WORD_MASK,
            flags,
        )

    @classmethod
    def infinity(cls, negative: bool = False) -> Decimal96:
        """Return positive or negative infinity."""
        return cls(mantissa=0, scale=_SPECIAL_SCALE, negative=negative)

    def is_infinite(self) -> bool:
        """True for either infinity."""
        return self.scale == _SPECIAL_SCALE and self.mantissa == 0

    def is_nan(self) -> bool:
        """True for the NaN marker, whatever its sign."""
        return self.scale == _SPECIAL_SCALE and self.mantissa == _NAN_MANTISSA

    def is_zero(self) -> bool:
        """True when the mantissa is zero, whatever the sign and scale."""
        return self.mantissa == 0