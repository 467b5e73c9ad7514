"""A 96-bit decimal value with an explicit scale, sign and special states."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable

MANTISSA_BITS = 96
MANTISSA_LIMIT = 1 << MANTISSA_BITS
WORD_MASK = 0xFFFFFFFF
SPECIAL_SCALE = 255
_SIGN_BIT = 1 << 31
_NAN_MANTISSA = 1 << 95


class Special(Enum):
    """Special results an operation can produce; the value is the status code."""

    POSITIVE_INFINITY = 1
    NEGATIVE_INFINITY = 2
    NAN = 3


class DecimalError(ArithmeticError):
    """Base class for errors raised by decimal arithmetic."""

    code = 0
    special: Special | None = None


class PositiveOverflowError(DecimalError):
    """The result is too large or is positive infinity."""

    code = 1
    special = Special.POSITIVE_INFINITY


class NegativeOverflowError(DecimalError):
    """The result is too small or is negative infinity."""

    code = 2
    special = Special.NEGATIVE_INFINITY


class NotANumberError(DecimalError):
    """The result is not a number, e.g. a division by zero."""

    code = 3
    special = Special.NAN


_ERRORS = {
    Special.POSITIVE_INFINITY: PositiveOverflowError,
    Special.NEGATIVE_INFINITY: NegativeOverflowError,
    Special.NAN: NotANumberError,
}


@dataclass(frozen=True)
class Decimal:
    """An unsigned 96-bit mantissa with a scale (power of ten) and a sign."""

    mantissa: int = 0
    scale: int = 0
    negative: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.mantissa < MANTISSA_LIMIT:
            raise ValueError(f"mantissa out of range: {self.mantissa}")
        if not 0 <= self.scale <= SPECIAL_SCALE:
            raise ValueError(f"scale out of range: {self.scale}")

    @classmethod
    def from_bits(cls, bits: Iterable[int]) -> Decimal:
        """Build a value from four 32-bit words: three mantissa words and a flags word."""
        words = [int(word) & WORD_MASK for word in bits]
        if len(words) != 4:
            raise ValueError(f"expected 4 words, got {len(words)}")
        low, mid, high, flags = words
        return cls(
            mantissa=low | (mid << 32) | (high << 64),
            scale=(flags >> 16) & 0xFF,
            negative=bool(flags & _SIGN_BIT),
        )

    def to_bits(self) -> tuple[int, int, int, int]:
        """Return the four 32-bit words of this value."""
        flags = (self.scale << 16) | (_SIGN_BIT if self.negative else 0)
        return (
            self.mantissa & WORD_MASK,
            (self.mantissa >> 32) & WORD_MASK,
            (self.mantissa >> 64) & WORD_MASK,
            flags,
        )

    @classmethod
    def infinity(cls, negative: bool = False) -> Decimal:
        """Return positive or negative infinity."""
        return cls(mantissa=0, scale=SPECIAL_SCALE, negative=negative)

    @classmethod
    def nan(cls) -> Decimal:
        """Return the not-a-number value."""
        return cls(mantissa=_NAN_MANTISSA, scale=SPECIAL_SCALE, negative=False)

    @classmethod
    def special(cls, kind: Special) -> Decimal:
        """Return the value that stands for a special result."""
        if kind is Special.NAN:
            return cls.nan()
        return cls.infinity(negative=kind is Special.NEGATIVE_INFINITY)

    def is_zero(self) -> bool:
        """True when the mantissa is zero, whatever the scale and sign."""
        return self.mantissa == 0

    def is_inf(self) -> bool:
        """True for positive or negative infinity."""
        return self.scale == SPECIAL_SCALE and self.mantissa == 0

    def is_nan(self) -> bool:
        """True for the not-a-number value."""
        return self.scale == SPECIAL_SCALE and self.mantissa != 0

    def with_sign(self, negative: bool) -> Decimal:
        """Return a copy with the given sign."""
        return replace(self, negative=bool(negative))

    def with_scale(self, scale: int) -> Decimal:
        """Return a copy with the given scale."""
        return replace(self, scale=scale)

    @property
    def sign(self) -> int:
        """1 for a positive value, -1 for a negative one."""
        return -1 if self.negative else 1


def bank_round(mantissa: int) -> int:
    """Drop the last decimal digit, rounding up when the quotient is odd and the digit is 5 or more."""
    if mantissa < 0:
        raise ValueError("mantissa must not be negative")
    quotient, digit = divmod(mantissa, 10)
    if quotient % 2 == 1 and digit >= 5:
        quotient += 1
    return quotient


def _rank(value: Decimal) -> int:
    if value.is_nan():
        raise ValueError("NaN cannot be compared")
    if value.is_inf():
        return -1 if value.negative else 1
    return 0


def compare_magnitude(value_1: Decimal, value_2: Decimal) -> int:
    """Compare signed mantissas, ignoring the scale; infinities lie beyond every finite value.

    Returns -1, 0 or 1. Zeros compare equal whatever their sign.
    """
    rank_1, rank_2 = _rank(value_1), _rank(value_2)
    if rank_1 != rank_2:
        return 1 if rank_1 > rank_2 else -1
    signed_1 = -value_1.mantissa if value_1.negative else value_1.mantissa
    signed_2 = -value_2.mantissa if value_2.negative else value_2.mantissa
    return (signed_1 > signed_2) - (signed_1 < signed_2)


def _infinity_of_sign(sign: int) -> Special:
    return Special.POSITIVE_INFINITY if sign == 1 else Special.NEGATIVE_INFINITY


def check_add(value_1: Decimal, value_2: Decimal) -> Special | None:
    """Return the special result of adding these operands, or None if the sum is ordinary."""
    if value_1.is_nan() or value_2.is_nan():
        return Special.NAN
    if value_1.is_inf():
        infinite, other = value_1, value_2
    elif value_2.is_inf():
        infinite, other = value_2, value_1
    else:
        return None
    if other.is_inf() and other.sign != infinite.sign:
        return Special.NAN
    return _infinity_of_sign(infinite.sign)


def check_mul(value_1: Decimal, value_2: Decimal) -> Special | None:
    """Return the special result of multiplying these operands, or None."""
    if value_1.is_nan() or value_2.is_nan():
        return Special.NAN
    if value_1.is_inf() or value_2.is_inf():
        return _infinity_of_sign(value_1.sign * value_2.sign)
    return None


def check_div(value_1: Decimal, value_2: Decimal) -> Special | None:
    """Return the special result of dividing these operands, or None.

    A finite value divided by an infinity reports the infinity of the
    combined sign; the caller turns that into a signed zero.
    """
    if value_1.is_nan() or value_2.is_nan():
        return Special.NAN
    if value_1.is_inf():
        if value_2.is_inf():
            return Special.NAN
        return _infinity_of_sign(value_1.sign * value_2.sign)
    if value_2.is_inf():
        return _infinity_of_sign(value_1.sign * value_2.sign)
    return None


def raise_for(special: Special | None) -> None:
    """Raise the error that matches a special result; do nothing for None."""
    if special is None:
        return
    raise _ERRORS[special]()