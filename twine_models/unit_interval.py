"""Constraints that keep a value within the unit interval.

Four variants are provided, one for each combination of open and closed
endpoints: ``[0, 1]``, ``(0, 1)``, ``(0, 1]`` and ``[0, 1)``.
"""

from __future__ import annotations

from typing import Any, ClassVar

from twine_models.constraint import (
    Constrained,
    Constraint,
    ConstraintError,
    ConstraintKind,
)

_ZERO = 0.0
_ONE = 1.0


def _compare(value: Any, bound: float) -> int | None:
    """Order ``value`` against ``bound``; ``None`` when the comparison is undefined."""
    if value < bound:
        return -1
    if value > bound:
        return 1
    if value == bound:
        return 0
    return None


class _UnitBounded(Constraint):
    """Shared check for the unit interval variants."""

    lower_inclusive: ClassVar[bool] = True
    upper_inclusive: ClassVar[bool] = True

    @classmethod
    def check(cls, value: Any) -> None:
        low = _compare(value, _ZERO)
        high = _compare(value, _ONE)
        if low is None or high is None:
            raise ConstraintError(ConstraintKind.NOT_A_NUMBER)
        if low < 0 or (low == 0 and not cls.lower_inclusive):
            raise ConstraintError(ConstraintKind.BELOW_MINIMUM)
        if high > 0 or (high == 0 and not cls.upper_inclusive):
            raise ConstraintError(ConstraintKind.ABOVE_MAXIMUM)

    @classmethod
    def new(cls, value: Any) -> Constrained:
        """Wrap ``value`` if it lies within the interval."""
        return Constrained(value, cls)


class UnitInterval(_UnitBounded):
    """Closed unit interval: ``0 <= x <= 1``."""

    lower_inclusive = True
    upper_inclusive = True

    @classmethod
    def check(cls, value: Any) -> None:
        super().check(value)

    @classmethod
    def new(cls, value: Any) -> Constrained:
        """Wrap ``value`` if ``0 <= value <= 1``."""
        return Constrained(value, cls)

    @classmethod
    def zero(cls) -> Constrained:
        """Return the lower bound as a constrained value."""
        return Constrained(_ZERO, cls)

    @classmethod
    def one(cls) -> Constrained:
        """Return the upper bound as a constrained value."""
        return Constrained(_ONE, cls)


class UnitIntervalOpen(_UnitBounded):
    """Open unit interval: ``0 < x < 1``."""

    lower_inclusive = False
    upper_inclusive = False

    @classmethod
    def check(cls, value: Any) -> None:
        super().check(value)

    @classmethod
    def new(cls, value: Any) -> Constrained:
        """Wrap ``value`` if ``0 < value < 1``."""
        return Constrained(value, cls)


class UnitIntervalLowerOpen(_UnitBounded):
    """Lower-open unit interval: ``0 < x <= 1``."""

    lower_inclusive = False
    upper_inclusive = True

    @classmethod
    def check(cls, value: Any) -> None:
        super().check(value)

    @classmethod
    def new(cls, value: Any) -> Constrained:
        """Wrap ``value`` if ``0 < value <= 1``."""
        return Constrained(value, cls)

    @classmethod
    def one(cls) -> Constrained:
        """Return the upper bound as a constrained value."""
        return Constrained(_ONE, cls)


class UnitIntervalUpperOpen(_UnitBounded):
    """Upper-open unit interval: ``0 <= x < 1``."""

    lower_inclusive = True
    upper_inclusive = False

    @classmethod
    def check(cls, value: Any) -> None:
        super().check(value)

    @classmethod
    def new(cls, value: Any) -> Constrained:
        """Wrap ``value`` if ``0 <= value < 1``."""
        return Constrained(value, cls)

    @classmethod
    def zero(cls) -> Constrained:
        """Return the lower bound as a constrained value."""
        return Constrained(_ZERO, cls)