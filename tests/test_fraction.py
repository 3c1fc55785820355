import pytest

from sharecheck.errors import DivisionByZero, InvalidFraction
from sharecheck.fraction import Rational


def test_canonical_form_moves_sign_to_numerator():
    value = Rational(6, -4)
    assert value.numerator == -3
    assert value.denominator == 2


def test_zero_is_normalised():
    value = Rational(0, -7)
    assert value.numerator == 0
    assert value.denominator == 1
    assert value.is_integer()


def test_zero_denominator_rejected():
    with pytest.raises(InvalidFraction):
        Rational(1, 0)


def test_divide_by_zero_fraction():
    with pytest.raises(DivisionByZero):
        Rational(3, 4).divide(Rational(0, 5))
    with pytest.raises(ZeroDivisionError):
        Rational(3, 4) / 0


def test_arithmetic_is_exact():
    a = Rational(1, 3)
    b = Rational(1, 6)
    assert a.add(b) == Rational(1, 2)
    assert a.subtract(b) == Rational(1, 6)
    assert a.multiply(b) == Rational(1, 18)
    assert a.divide(b) == Rational(2)
    assert (a + b) * 2 == 1
    assert 1 - a == Rational(2, 3)
    assert 1 / a == 3
    assert -a == Rational(-1, 3)


def test_big_values_stay_exact():
    big = 10**60 + 7
    value = Rational(big * 3, 3)
    assert value.is_integer()
    assert value.numerator == big
    assert not Rational(big, 10**60).is_integer()


def test_equality_and_hash_follow_canonical_pair():
    assert Rational(2, 4) == Rational(-1, -2)
    assert hash(Rational(2, 4)) == hash(Rational(1, 2))
    assert Rational(1, 2) != Rational(1, 3)
    assert Rational(4, 2) == 2


def test_string_rendering():
    assert str(Rational(10, 2)) == "5"
    assert str(Rational(-3, 6)) == "-1/2"
    assert repr(Rational(1, 2)) == "Rational(1, 2)"


def test_rejects_non_integers():
    with pytest.raises(TypeError):
        Rational(1.5, 2)
    with pytest.raises(TypeError):
        Rational(1, 2).add(0.5)
