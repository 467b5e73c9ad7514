# bitdecimal

A decimal number stored as a 96-bit unsigned mantissa, a scale (the power of
ten the mantissa is divided by) and a sign, packed into four 32-bit words:
three mantissa words, low to high, and a flags word holding the scale in
bits 16-23 and the sign in bit 31. Besides finite values it can represent
positive infinity, negative infinity and NaN, all with scale 255.

## Installing

```
pip install .
```

## Values

`Decimal` is a frozen dataclass with the fields `mantissa`, `scale` and
`negative`. It is built from, and turned back into, its four words:

```python
from bitdecimal.decimal import Decimal

# 12.5: mantissa 125, scale 1, positive
x = Decimal.from_bits([125, 0, 0, 1 << 16])
x.to_bits()          # (125, 0, 0, 65536)

x.is_zero()          # False
x.sign               # 1
x.with_sign(True)    # -12.5
x.with_scale(2)      # 1.25

Decimal.infinity(False).is_inf()   # True
Decimal.nan().is_nan()             # True
```

A mantissa outside 0 to 2**96 - 1 or a scale outside 0 to 255 raises
`ValueError`. `Decimal.special(kind)` gives the value for a `Special`
member (`POSITIVE_INFINITY`, `NEGATIVE_INFINITY`, `NAN`).

Helpers in `bitdecimal.decimal`:

- `bank_round(mantissa)` divides a mantissa by ten and rounds the quotient
  up when it is odd and the dropped digit is five or more.
- `compare_magnitude(a, b)` returns -1, 0 or 1 comparing the signed
  mantissas, ignoring scales; infinities lie beyond every finite value,
  zeros of either sign are equal, and NaN raises `ValueError`.
- `check_add`, `check_mul` and `check_div` decide what an operation on
  infinities or NaN gives, as a `Special` member, or `None` when both
  operands are ordinary.
- `raise_for(special)` raises the error matching a `Special` member and does
  nothing for `None`.

## Division

```python
from bitdecimal.decimal import Decimal
from bitdecimal.arithmetic import divide

ten = Decimal.from_bits([10, 0, 0, 0])
three = Decimal.from_bits([3, 0, 0, 0])

divide(ten, three).to_bits()
# (894784853, 3475376110, 1807003620, 1835008)   i.e. 3.333... to 28 places
```

`divide` first brings both operands to a common scale, then extends the
quotient one decimal place at a time, up to 28 places or until it would no
longer fit in 96 bits, and rounds on the digit that follows. A finite value
divided by an infinity gives a zero carrying the combined sign.

Also in `bitdecimal.arithmetic`:

- `normalize_scales(a, b)` brings two finite values to a common scale,
  multiplying the one with the smaller scale by ten while it fits and
  rounding away digits of the other for whatever difference is left.
- `integer_divide(a, b)` divides the mantissas as whole numbers, giving a
  scale-0 result; a zero divisor raises `ZeroDivisionError`.
- `integer_mod(a, b)` gives the remainder of that division, or `a` itself
  when `b` is the greater of the two.

### Errors

Failures are raised rather than returned:

| Exception                 | When                                             |
|---------------------------|--------------------------------------------------|
| `PositiveOverflowError`   | the result is too large, or is +infinity         |
| `NegativeOverflowError`   | the result is too negative, is -infinity, or underflows to zero |
| `NotANumberError`         | division by zero, a NaN operand, infinity / infinity |

All three derive from `DecimalError` (an `ArithmeticError`) and carry a
`code` (1, 2, 3) and the matching `special` member.

```python
from bitdecimal.decimal import Decimal, NotANumberError
from bitdecimal.arithmetic import divide

try:
    divide(Decimal.from_bits([1, 0, 0, 0]), Decimal.from_bits([0, 0, 0, 0]))
except NotANumberError:
    ...
```

## What it does not do

The package offers division, remainder of mantissas and the checks for
special operands. It has no addition, subtraction or multiplication, no
comparison operators or ordering on `Decimal`, no rounding functions such as
floor or truncate, and no conversion to or from `int`, `float` or strings.

## Running the tests

```
pip install .[test]
pytest
```