import math
from fractions import Fraction

import pytest

from twine_models.constraint import (
    Constrained,
    ConstraintError,
    ConstraintKind,
    NonNegative,
    NonPositive,
    NonZero,
    StrictlyNegative,
    StrictlyPositive,
)


def _kind(constraint, value):
    with pytest.raises(ConstraintError) as info:
        constraint.new(value)
    return info.value.kind


# NonNegative


def test_non_negative_integers():
    one = Constrained(1, NonNegative)
    assert one.into_inner() == 1

    two = NonNegative.new(2)
    assert two.value == 2

    zero = NonNegative.zero()
    assert zero.into_inner() == 0
    assert zero.is_zero()

    total = one + two + zero
    assert total.into_inner() == 3
    assert total.constraint is NonNegative

    assert _kind(NonNegative, -1) is ConstraintKind.NEGATIVE


def test_non_negative_floats():
    assert Constrained(2.0, NonNegative).into_inner() == 2.0
    assert NonNegative.new(0.0).into_inner() == 0.0
    assert _kind(NonNegative, -2.0) is ConstraintKind.NEGATIVE
    assert _kind(NonNegative, math.nan) is ConstraintKind.NOT_A_NUMBER


def test_non_negative_rationals():
    assert NonNegative.new(Fraction(5, 1)).into_inner() == Fraction(5)
    assert NonNegative.new(Fraction(0)).is_zero()
    assert _kind(NonNegative, Fraction(-2)) is ConstraintKind.NEGATIVE


def test_non_negative_builtin_sum():
    values = [NonNegative.new(x) for x in (1.5, 2.5, 0.0)]
    assert sum(values).into_inner() == 4.0
    assert sum(values, NonNegative.zero()).into_inner() == 4.0


# NonPositive


def test_non_positive_integers():
    neg_one = Constrained(-1, NonPositive)
    assert neg_one.into_inner() == -1

    neg_two = NonPositive.new(-2)
    assert neg_two.value == -2

    zero = NonPositive.zero()
    assert zero.into_inner() == 0

    total = neg_one + neg_two + zero
    assert total.into_inner() == -3

    assert _kind(NonPositive, 2) is ConstraintKind.POSITIVE


def test_non_positive_floats():
    assert Constrained(-2.0, NonPositive).into_inner() == -2.0
    assert NonPositive.new(0.0).into_inner() == 0.0
    assert _kind(NonPositive, 2.0) is ConstraintKind.POSITIVE
    assert _kind(NonPositive, math.nan) is ConstraintKind.NOT_A_NUMBER


def test_non_positive_powers():
    assert NonPositive.new(Fraction(-5)).into_inner() == Fraction(-5)
    assert NonPositive.new(Fraction(0)).is_zero()
    assert _kind(NonPositive, Fraction(2)) is ConstraintKind.POSITIVE


# NonZero


def test_non_zero_integers():
    one = Constrained(1, NonZero)
    assert one.into_inner() == 1

    neg_one = NonZero.new(-1)
    assert neg_one.value == -1

    assert _kind(NonZero, 0) is ConstraintKind.ZERO


def test_non_zero_floats():
    assert Constrained(2.0, NonZero).into_inner() == 2.0
    assert NonZero.new(-3.5).into_inner() == -3.5
    assert _kind(NonZero, 0.0) is ConstraintKind.ZERO
    assert _kind(NonZero, math.nan) is ConstraintKind.NOT_A_NUMBER


def test_non_zero_is_not_additive():
    with pytest.raises(TypeError):
        NonZero.new(1) + NonZero.new(2)


# StrictlyNegative


def test_strictly_negative_integers():
    x = Constrained(-1, StrictlyNegative)
    assert x.into_inner() == -1

    y = StrictlyNegative.new(-42)
    assert y.value == -42

    assert _kind(StrictlyNegative, 0) is ConstraintKind.ZERO
    assert _kind(StrictlyNegative, 2) is ConstraintKind.NEGATIVE


def test_strictly_negative_floats():
    assert Constrained(-1.0, StrictlyNegative).into_inner() == -1.0
    assert StrictlyNegative.new(-0.1).into_inner() == -0.1
    assert _kind(StrictlyNegative, 0.0) is ConstraintKind.ZERO
    assert _kind(StrictlyNegative, 5.0) is ConstraintKind.NEGATIVE
    assert _kind(StrictlyNegative, math.nan) is ConstraintKind.NOT_A_NUMBER


def test_strictly_negative_addition():
    total = StrictlyNegative.new(-1) + StrictlyNegative.new(-4)
    assert total.into_inner() == -5
    assert total.constraint is StrictlyNegative


# StrictlyPositive


def test_strictly_positive_integers():
    x = Constrained(1, StrictlyPositive)
    assert x.into_inner() == 1

    y = StrictlyPositive.new(42)
    assert y.value == 42

    assert _kind(StrictlyPositive, 0) is ConstraintKind.ZERO
    assert _kind(StrictlyPositive, -2) is ConstraintKind.NEGATIVE


def test_strictly_positive_floats():
    assert Constrained(1.0, StrictlyPositive).into_inner() == 1.0
    assert StrictlyPositive.new(0.1).into_inner() == 0.1
    assert _kind(StrictlyPositive, 0.0) is ConstraintKind.ZERO
    assert _kind(StrictlyPositive, -5.0) is ConstraintKind.NEGATIVE
    assert _kind(StrictlyPositive, math.nan) is ConstraintKind.NOT_A_NUMBER


def test_strictly_positive_mass_rates():
    assert StrictlyPositive.new(Fraction(5)).into_inner() == Fraction(5)
    assert _kind(StrictlyPositive, Fraction(0)) is ConstraintKind.ZERO
    assert _kind(StrictlyPositive, Fraction(-2)) is ConstraintKind.NEGATIVE


# Wrapper behaviour


def test_adding_different_constraints_fails():
    with pytest.raises(TypeError):
        NonNegative.new(1) + StrictlyPositive.new(1)


def test_equality_and_ordering():
    assert NonNegative.new(3) == NonNegative.new(3)
    assert NonNegative.new(3) != StrictlyPositive.new(3)
    assert NonNegative.new(1) < NonNegative.new(2)
    assert max([NonNegative.new(1), NonNegative.new(7), NonNegative.new(4)]).into_inner() == 7


def test_error_message_and_type():
    with pytest.raises(ValueError, match="value must not be negative"):
        NonNegative.new(-1)
    with pytest.raises(ConstraintError, match="value is not a number"):
        StrictlyPositive.new(math.nan)


def test_error_equality_by_kind():
    assert ConstraintError(ConstraintKind.ZERO) == ConstraintError(ConstraintKind.ZERO)
    assert ConstraintError(ConstraintKind.ZERO) != ConstraintError(ConstraintKind.NEGATIVE)


def test_check_directly():
    with pytest.raises(ConstraintError) as info:
        NonZero.check(0)
    assert info.value.kind is ConstraintKind.ZERO
    with pytest.raises(ConstraintError) as info:
        StrictlyPositive.check(-3)
    assert info.value.kind is ConstraintKind.NEGATIVE