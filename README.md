# decimal96

A decimal number made of a sign, a 96-bit unsigned mantissa and a
power-of-ten scale. The package provides the operations that compare it,
convert it to and from Python numbers, subtract it and multiply it.

## Installing

```
pip install .
```

## The value type

`decimal96.core.Decimal96` is a frozen dataclass with the fields
`mantissa`, `scale` and `negative`. Its value is
`(-1 if negative else 1) * mantissa / 10 ** scale`. The mantissa must lie
between 0 and 2**96 - 1 and the scale between 0 and 255. If either is
outside its range, `ValueError` is raised.

A scale of 255 marks the special values. With a zero mantissa the value is
infinity. With only the top mantissa bit set it is NaN.

A value can be built from four 32-bit words and turned back into them.
Three words hold the mantissa, low word first. The fourth holds the scale
in bits 16–23 and the sign in bit 31. Each word may be given signed or
unsigned.

```python
from decimal96.core import Decimal96

value = Decimal96.from_bits([15, 0, 0, 65536])   # 1.5
value.to_bits()                                   # (15, 0, 0, 65536)
value.is_zero()                                   # False

inf = Decimal96.infinity(negative=True)
inf.is_infinite()                                 # True
inf.is_nan()                                      # False
```

### Errors

All errors derive from `DecimalError`:

- `DecimalOverflowError` is also an `OverflowError`. It has two subclasses:
  - `PositiveOverflowError`
  - `NegativeOverflowError`
- `ConversionError` is also a `ValueError`.

## Converting

```python
from decimal96.convert import from_int, to_int, from_float, to_float

to_int(from_int(-42))        # -42
to_float(from_float(2.5))    # 2.5
```

`from_int` accepts 32-bit signed integers. It raises `ConversionError` for
magnitudes of 2**31 - 1 and above, except that -2**31 itself is accepted.

`to_int` truncates any fraction. It does not apply scales above 28. It
raises `ConversionError` in two cases:

- the mantissa does not fit in 32 bits;
- the result does not fit in a 32-bit signed integer.

`from_float` first rounds the float to single precision. It keeps the
significant digits that the float prints with, and drops trailing zeros.
It raises `ConversionError` for:

- NaN and the infinities;
- nonzero magnitudes below 1e-28;
- magnitudes of 2**96 or more.

`to_float` computes in single precision and returns a Python float.

## Comparing

`decimal96.comparison.compare(a, b)` returns -1, 0 or 1. Values of
different scales are compared by their numeric value, and positive and
negative zero are equal. Infinities sort above and below every finite
value.

The package also has the predicates `is_equal`, `is_not_equal`, `is_less`,
`is_less_or_equal`, `is_greater` and `is_greater_or_equal`, which all
return `bool`.

`compare_unscaled(a, b)` compares signs and mantissas and ignores the
scales.

## Arithmetic

```python
from decimal96.convert import from_int
from decimal96.subtract import subtract
from decimal96.multiply import multiply

subtract(from_int(2), from_int(5))   # Decimal96(mantissa=3, scale=0, negative=True)
multiply(from_int(6), from_int(7))   # Decimal96(mantissa=42, scale=0, negative=False)
```

### Subtraction

`subtract(a, b)` works at the larger of the two scales. A zero difference
is a positive zero of scale 0. A difference too large for 96 bits is
rounded half to even to fewer decimal places. If it does not fit even as
an integer, `subtract` raises `PositiveOverflowError` or
`NegativeOverflowError`, following the sign of the difference.

`subtract_unscaled(a, b)` subtracts the signed mantissas, ignores both
scales and returns a result of scale 0.

### Multiplication

`multiply(a, b)` takes the product of the mantissas at scale
`result_scale(a, b)`. That scale is the sum of the two scales. If the
product has more than 28 decimal places, or is too large for 96 bits, it
is rounded half to even.

If the product does not fit even as an integer, `multiply` raises an
overflow error. The direction of the error follows the sign of `a` alone:

- `NegativeOverflowError` if `a` is negative;
- `PositiveOverflowError` otherwise.

Both `subtract` and `multiply` raise `DecimalError` when either operand is
infinite or NaN.

## What it does not do

The package has no addition, no division and no separate rounding,
truncation or negation functions. It does not parse decimals from strings
or format them as text. Values are built from their fields, from four
words, or from ints and floats.

## Running the tests

```
pip install .[test]
pytest
```