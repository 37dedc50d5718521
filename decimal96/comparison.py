"""Ordering of decimals, with and without regard to scale."""

from __future__ import annotations

from decimal96.core import Decimal96


def _sign(value: Decimal96) -> int:
    """Return 1 or -1; a finite zero always counts as positive."""
    if value.is_zero() and not value.is_infinite():
        return 1
    return -1 if value.negative else 1


def _infinity(value: Decimal96) -> int:
    """Return 1 for positive infinity, -1 for negative, 0 otherwise."""
    if not value.is_infinite():
        return 0
    return -1 if value.negative else 1


def _by_sign_and_infinity(a: Decimal96, b: Decimal96) -> int | None:
    """Decide the order from signs and infinities alone, if they suffice."""
    sign_a, sign_b = _sign(a), _sign(b)
    inf_a, inf_b = _infinity(a), _infinity(b)
    if (inf_a == 1 and inf_b == 0) or (inf_a == 0 and inf_b == -1) or sign_a > sign_b:
        return 1
    if (inf_a == 0 and inf_b == 1) or (inf_a == -1 and inf_b == 0) or sign_a < sign_b:
        return -1
    return None


def _order(left: int, right: int) -> int:
    return (left > right) - (left < right)


def compare(a: Decimal96, b: Decimal96) -> int:
    """Return -1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``.

    Values of different scales are compared by their numeric value.
    """
    decided = _by_sign_and_infinity(a, b)
    if decided is not None:
        return decided
    scale = max(a.scale, b.scale)
    left = a.mantissa * 10 ** (scale - a.scale)
    right = b.mantissa * 10 ** (scale - b.scale)
    result = _order(left, right)
    return -result if _sign(a) == -1 else result


def compare_unscaled(a: Decimal96, b: Decimal96) -> int:
    """Like :func:`compare`, but compare the mantissas and ignore the scales."""
    decided = _by_sign_and_infinity(a, b)
    if decided is not None:
        return decided
    result = _order(a.mantissa, b.mantissa)
    return -result if _sign(a) == -1 else result


def is_equal(a: Decimal96, b: Decimal96) -> bool:
    """True when ``a == b``."""
    return compare(a, b) == 0


def is_not_equal(a: Decimal96, b: Decimal96) -> bool:
    """True when ``a != b``."""
    return compare(a, b) != 0


def is_less(a: Decimal96, b: Decimal96) -> bool:
    """True when ``a < b``."""
    return compare(a, b) < 0


def is_less_or_equal(a: Decimal96, b: Decimal96) -> bool:
    """True when ``a <= b``."""
    return compare(a, b) <= 0


def is_greater(a: Decimal96, b: Decimal96) -> bool:
    """True when ``a > b``."""
    return compare(a, b) > 0


def is_greater_or_equal(a: Decimal96, b: Decimal96) -> bool:
    """True when ``a >= b``."""
    return compare(a, b) >= 0