"""Division and remainder for 96-bit decimals."""

from __future__ import annotations

from bitdecimal.decimal import (
    MANTISSA_LIMIT,
    Decimal,
    NegativeOverflowError,
    NotANumberError,
    PositiveOverflowError,
    Special,
    bank_round,
    check_div,
    compare_magnitude,
    raise_for,
)

MAX_SCALE = 28


def _overflow(negative: bool) -> Exception:
    return NegativeOverflowError() if negative else PositiveOverflowError()


def integer_divide(dividend: Decimal, divisor: Decimal) -> Decimal:
    """Divide the mantissas as whole numbers, ignoring the scales.

    The quotient has scale 0 and is negative when exactly one operand is.
    """
    if divisor.is_zero():
        raise ZeroDivisionError("integer division by a zero mantissa")
    negative = dividend.negative != divisor.negative
    return Decimal(dividend.mantissa // divisor.mantissa, 0, negative)


def integer_mod(dividend: Decimal, divisor: Decimal) -> Decimal:
    """Remainder of the whole-number division of the mantissas.

    When the divisor is greater than the dividend (signs counted, scales
    ignored) the dividend itself is returned unchanged.
    """
    if compare_magnitude(divisor, dividend) > 0:
        return dividend
    quotient = integer_divide(dividend, divisor)
    signed_dividend = -dividend.mantissa if dividend.negative else dividend.mantissa
    signed_divisor = -divisor.mantissa if divisor.negative else divisor.mantissa
    signed_quotient = -quotient.mantissa if quotient.negative else quotient.mantissa
    remainder = signed_dividend - signed_divisor * signed_quotient
    return Decimal(abs(remainder), 0, remainder < 0)


def normalize_scales(value_1: Decimal, value_2: Decimal) -> tuple[Decimal, Decimal]:
    """Bring two finite values to a common scale.

    The value with the smaller scale is multiplied by ten as long as it
    fits; whatever difference is left is removed from the other value by
    dropping digits with rounding.
    """
    for value in (value_1, value_2):
        if value.is_inf() or value.is_nan():
            raise ValueError("only finite values can be normalized")
    if value_1.scale == value_2.scale:
        return value_1, value_2
    swapped = value_1.scale > value_2.scale
    low, high = (value_2, value_1) if swapped else (value_1, value_2)

    mantissa, scale = low.mantissa, low.scale
    while scale < high.scale and mantissa * 10 < MANTISSA_LIMIT:
        mantissa *= 10
        scale += 1
    low = Decimal(mantissa, scale, low.negative)

    high_mantissa = high.mantissa
    for _ in range(high.scale - scale):
        high_mantissa = bank_round(high_mantissa)
    high = Decimal(high_mantissa, scale, high.negative)

    return (high, low) if swapped else (low, high)


def divide(value_1: Decimal, value_2: Decimal) -> Decimal:
    """Divide value_1 by value_2 with up to 28 decimal places.

    Raises NotANumberError for a zero divisor or undefined operands,
    PositiveOverflowError or NegativeOverflowError when the result does
    not fit, and NegativeOverflowError when it underflows to zero.
    """
    special = check_div(value_1, value_2)
    if special is not None:
        if special is not Special.NAN and not value_1.is_inf():
            return Decimal(0, 0, special is Special.NEGATIVE_INFINITY)
        raise_for(special)

    if value_2.is_zero():
        raise NotANumberError()

    value_1, value_2 = normalize_scales(value_1, value_2)
    negative = value_1.negative != value_2.negative
    if value_2.is_zero():
        raise _overflow(negative)

    divisor = value_2.mantissa
    quotient, remainder = divmod(value_1.mantissa, divisor)
    power = 0
    while remainder and power != MAX_SCALE and quotient * 10 < MANTISSA_LIMIT:
        remainder *= 10
        power += 1
        digit, remainder = divmod(remainder, divisor)
        quotient = quotient * 10 + digit
        if quotient >= MANTISSA_LIMIT:
            raise _overflow(negative)

    if remainder and (remainder * 10) // divisor >= 5:
        quotient += 1
        if quotient >= MANTISSA_LIMIT:
            raise _overflow(negative)

    if quotient == 0 and power >= MAX_SCALE:
        raise NegativeOverflowError()
    return Decimal(quotient, power, negative)