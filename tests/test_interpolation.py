import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sharecheck.errors import DegenerateSubset
from sharecheck.fraction import Rational
from sharecheck.interpolation import value_at, value_at_zero
from sharecheck.models import Share


def f(x):
    return 2 * x * x - 3 * x + 5


def test_value_at_zero_recovers_constant_term():
    points = [(1, 4), (2, 7), (3, 14)]
    assert value_at_zero(points) == Rational(5)


def test_accepts_share_objects():
    shares = [Share(x, f(x)) for x in (2, 3, 4)]
    assert value_at_zero(shares) == 5
    assert value_at(shares, 1) == 4
    assert value_at(shares, 10) == f(10)


def test_fractional_constant_term():
    # line through (1, 1) and (3, 2) crosses x=0 at 1/2
    assert value_at_zero([(1, 1), (3, 2)]) == Rational(1, 2)
    assert value_at([(1, 1), (3, 2)], 2) == Rational(3, 2)


def test_repeated_x_is_degenerate():
    with pytest.raises(DegenerateSubset):
        value_at_zero([(1, 4), (1, 5), (2, 7)])
    with pytest.raises(DegenerateSubset):
        value_at([(2, 7), (2, 7)], 3)


@settings(max_examples=50, deadline=None)
@given(
    coeffs=st.lists(st.integers(min_value=-(10**30), max_value=10**30), min_size=2, max_size=5),
    data=st.data(),
)
def test_order_invariant_and_exact(coeffs, data):
    k = len(coeffs)
    xs = data.draw(
        st.lists(st.integers(min_value=1, max_value=200), min_size=k, max_size=k, unique=True)
    )
    points = [(x, sum(c * x**i for i, c in enumerate(coeffs))) for x in xs]
    shuffled = data.draw(st.permutations(points))
    assert value_at_zero(points) == value_at_zero(shuffled) == Rational(coeffs[0])
