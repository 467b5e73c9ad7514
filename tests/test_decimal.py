import pytest

from bitdecimal.decimal import (
    Decimal,
    DecimalError,
    NegativeOverflowError,
    NotANumberError,
    PositiveOverflowError,
    Special,
    bank_round,
    check_add,
    check_div,
    check_mul,
    compare_magnitude,
    raise_for,
)

POS_INF = Decimal.infinity(False)
NEG_INF = Decimal.infinity(True)
NAN = Decimal.nan()
FIVE = Decimal(5)
MINUS_FIVE = Decimal(5, negative=True)


@pytest.mark.parametrize(
    "bits",
    [
        (200, 0, 0, 2147483648),
        (4294967295, 4294967295, 4294967295, 196608),
        (1, 10, 1, 2147483648 + (15 << 16)),
        (0, 0, 0, 0),
    ],
)
def test_bits_round_trip(bits):
    assert Decimal.from_bits(bits).to_bits() == bits


def test_from_bits_fields():
    value = Decimal.from_bits([4294967295, 4294967295, 4294967295, 196608])
    assert value.mantissa == (1 << 96) - 1
    assert value.scale == 3
    assert value.negative is False
    negative = Decimal.from_bits([200, 0, 0, 2147483648])
    assert negative.mantissa == 200
    assert negative.negative is True


def test_from_bits_masks_signed_words():
    assert Decimal.from_bits([-1, -1, -1, 0]) == Decimal.from_bits(
        [0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0]
    )
    assert Decimal.from_bits([4, 0, 0, -2147483648]).negative is True


def test_from_bits_wrong_length():
    with pytest.raises(ValueError):
        Decimal.from_bits([1, 2, 3])


def test_mantissa_out_of_range():
    with pytest.raises(ValueError):
        Decimal(1 << 96)
    with pytest.raises(ValueError):
        Decimal(-1)


def test_infinity_bits():
    assert POS_INF.to_bits() == (0, 0, 0, 255 << 16)
    assert NEG_INF.to_bits() == (0, 0, 0, (255 << 16) | 2147483648)


def test_nan_bits():
    assert NAN.to_bits() == (0, 0, 2147483648, 255 << 16)


def test_special_predicates():
    assert POS_INF.is_inf() and NEG_INF.is_inf()
    assert not POS_INF.is_nan()
    assert NAN.is_nan() and not NAN.is_inf()
    assert not FIVE.is_inf() and not FIVE.is_nan()


def test_special_constructor_matches():
    assert Decimal.special(Special.NAN) == NAN
    assert Decimal.special(Special.NEGATIVE_INFINITY) == NEG_INF
    assert Decimal.special(Special.POSITIVE_INFINITY) == POS_INF


def test_is_zero_ignores_sign_and_scale():
    assert Decimal.from_bits([0, 0, 0, 2147483648 | (3 << 16)]).is_zero()
    assert not FIVE.is_zero()


def test_with_sign_and_scale():
    value = FIVE.with_sign(True).with_scale(28)
    assert value.negative is True
    assert value.scale == 28
    assert value.mantissa == FIVE.mantissa
    assert value.with_sign(False).negative is False
    assert FIVE.negative is False


def test_with_scale_rejects_negative():
    with pytest.raises(ValueError):
        FIVE.with_scale(-1)


def test_bank_round_odd_quotient_rounds_up():
    assert bank_round(35) == 4


def test_bank_round_even_quotient_kept():
    assert bank_round(25) == 2
    assert bank_round(26) == 2


def test_bank_round_small_digit_truncates():
    assert bank_round(34) == bank_round(30)


def test_bank_round_rejects_negative():
    with pytest.raises(ValueError):
        bank_round(-15)


def test_compare_ignores_scale():
    assert compare_magnitude(Decimal(5, scale=3), FIVE) == 0


def test_compare_signs():
    assert compare_magnitude(FIVE, MINUS_FIVE) == 1
    assert compare_magnitude(MINUS_FIVE, FIVE) == -1
    assert compare_magnitude(Decimal(2, negative=True), MINUS_FIVE) == 1


def test_compare_zeros_of_both_signs_equal():
    assert compare_magnitude(Decimal(0), Decimal(0, negative=True)) == 0


def test_compare_infinities():
    assert compare_magnitude(POS_INF, FIVE) == 1
    assert compare_magnitude(NEG_INF, MINUS_FIVE) == -1
    assert compare_magnitude(POS_INF, POS_INF) == 0
    assert compare_magnitude(NEG_INF, POS_INF) == -1


def test_compare_antisymmetric():
    values = [FIVE, MINUS_FIVE, Decimal(7), POS_INF, NEG_INF, Decimal(0)]
    for a in values:
        for b in values:
            assert compare_magnitude(a, b) == -compare_magnitude(b, a)


def test_compare_nan_rejected():
    with pytest.raises(ValueError):
        compare_magnitude(NAN, FIVE)


def test_check_add():
    assert check_add(FIVE, MINUS_FIVE) is None
    assert check_add(NAN, FIVE) is Special.NAN
    assert check_add(POS_INF, POS_INF) is Special.POSITIVE_INFINITY
    assert check_add(NEG_INF, NEG_INF) is Special.NEGATIVE_INFINITY
    assert check_add(POS_INF, NEG_INF) is Special.NAN
    assert check_add(MINUS_FIVE, POS_INF) is Special.POSITIVE_INFINITY
    assert check_add(NEG_INF, FIVE) is Special.NEGATIVE_INFINITY


def test_check_mul():
    assert check_mul(FIVE, MINUS_FIVE) is None
    assert check_mul(FIVE, NAN) is Special.NAN
    assert check_mul(POS_INF, MINUS_FIVE) is Special.NEGATIVE_INFINITY
    assert check_mul(NEG_INF, MINUS_FIVE) is Special.POSITIVE_INFINITY


def test_check_div():
    assert check_div(FIVE, MINUS_FIVE) is None
    assert check_div(NAN, FIVE) is Special.NAN
    assert check_div(POS_INF, NEG_INF) is Special.NAN
    assert check_div(NEG_INF, FIVE) is Special.NEGATIVE_INFINITY
    assert check_div(FIVE, POS_INF) is Special.POSITIVE_INFINITY
    assert check_div(FIVE, NEG_INF) is Special.NEGATIVE_INFINITY


def test_raise_for_none_returns():
    assert raise_for(None) is None


@pytest.mark.parametrize(
    "special, error, code",
    [
        (Special.POSITIVE_INFINITY, PositiveOverflowError, 1),
        (Special.NEGATIVE_INFINITY, NegativeOverflowError, 2),
        (Special.NAN, NotANumberError, 3),
    ],
)
def test_raise_for_special(special, error, code):
    with pytest.raises(error) as info:
        raise_for(special)
    assert isinstance(info.value, DecimalError)
    assert info.value.code == code
    assert info.value.special is special
    assert special.value == code