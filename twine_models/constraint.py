"""Numeric constraints enforced when a value is wrapped.

A :class:`Constrained` value always satisfies the constraint it was built
with. Constraints are expressed as subclasses of :class:`Constraint`, each
providing a ``check`` class method that raises :class:`ConstraintError`
when a value does not satisfy it.
"""

from __future__ import annotations

import enum
import functools
from abc import ABC, abstractmethod
from typing import Any, ClassVar


class ConstraintKind(enum.Enum):
    """The reason a value failed a constraint."""

    NEGATIVE = "value must not be negative"
    POSITIVE = "value must not be positive"
    ZERO = "value must not be zero"
    NOT_A_NUMBER = "value is not a number"
    BELOW_MINIMUM = "value is below the minimum allowed"
    ABOVE_MAXIMUM = "value is above the maximum allowed"

    @property
    def message(self) -> str:
        return self.value


class ConstraintError(ValueError):
    """Raised when a value violates a constraint."""

    def __init__(self, kind: ConstraintKind) -> None:
        super().__init__(kind.message)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConstraintError):
            return self.kind is other.kind
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.kind)


def _sign(value: Any) -> int | None:
    """Compare ``value`` with zero; ``None`` when the comparison is undefined."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    if value == 0:
        return 0
    return None


class Constraint(ABC):
    """Base class for numeric constraints.

    Subclasses implement :meth:`check`. Constraints that are preserved under
    addition set ``additive`` to true, enabling ``+`` and ``sum()`` on the
    wrapped values.
    """

    additive: ClassVar[bool] = False

    @classmethod
    @abstractmethod
    def check(cls, value: Any) -> None:
        """Raise :class:`ConstraintError` if ``value`` violates the constraint."""


@functools.total_ordering
class Constrained:
    """A value that is guaranteed to satisfy a constraint."""

    __slots__ = ("_value", "_constraint")

    def __init__(self, value: Any, constraint: type[Constraint]) -> None:
        constraint.check(value)
        self._value = value
        self._constraint = constraint

    @property
    def value(self) -> Any:
        """The wrapped value."""
        return self._value

    @property
    def constraint(self) -> type[Constraint]:
        """The constraint the value satisfies."""
        return self._constraint

    def into_inner(self) -> Any:
        """Return the wrapped value."""
        return self._value

    def is_zero(self) -> bool:
        """Return whether the wrapped value equals zero."""
        return self._value == 0

    def __add__(self, other: object) -> Constrained:
        if not isinstance(other, Constrained) or other._constraint is not self._constraint:
            return NotImplemented
        if not self._constraint.additive:
            return NotImplemented
        return Constrained(self._value + other._value, self._constraint)

    def __radd__(self, other: object) -> Constrained:
        # Lets the built-in sum() start from its integer zero.
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            if not self._constraint.additive:
                return NotImplemented
            return self
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Constrained):
            return self._constraint is other._constraint and self._value == other._value
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Constrained) and other._constraint is self._constraint:
            return self._value < other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._constraint, self._value))

    def __repr__(self) -> str:
        return f"Constrained({self._value!r}, {self._constraint.__name__})"


class NonNegative(Constraint):
    """Zero or greater."""

    additive = True

    @classmethod
    def check(cls, value: Any) -> None:
        sign = _sign(value)
        if sign is None:
            raise ConstraintError(ConstraintKind.NOT_A_NUMBER)
        if sign < 0:
            raise ConstraintError(ConstraintKind.NEGATIVE)

    @classmethod
    def new(cls, value: Any) -> Constrained:
        """Wrap ``value`` if it is non-negative."""
        return Constrained(value, cls)

    @classmethod
    def zero(cls) -> Constrained:
        """Return zero as a non-negative value."""
        return Constrained(0, cls)


class NonPositive(Constraint):
    """Zero or less."""

    additive = True

    @classmethod
    def check(cls, value: Any) -> None:
        sign = _sign(value)
        if sign is None:
            raise ConstraintError(ConstraintKind.NOT_A_NUMBER)
        if sign > 0:
            raise ConstraintError(ConstraintKind.POSITIVE)

    @classmethod
    def new(cls, value: Any) -> Constrained:
        """Wrap ``value`` if it is non-positive."""
        return Constrained(value, cls)

    @classmethod
    def zero(cls) -> Constrained:
        """Return zero as a non-positive value."""
        return Constrained(0, cls)


class NonZero(Constraint):
    """Not equal to zero."""

    @classmethod
    def check(cls, value: Any) -> None:
        sign = _sign(value)
        if sign is None:
            raise ConstraintError(ConstraintKind.NOT_A_NUMBER)
        if sign == 0:
            raise ConstraintError(ConstraintKind.ZERO)

    @classmethod
    def new(cls, value: Any) -> Constrained:
        """Wrap ``value`` if it is not zero."""
        return Constrained(value, cls)


class StrictlyNegative(Constraint):
    """Less than zero."""

    additive = True

    @classmethod
    def check(cls, value: Any) -> None:
        sign = _sign(value)
        if sign is None:
            raise ConstraintError(ConstraintKind.NOT_A_NUMBER)
        if sign == 0:
            raise ConstraintError(ConstraintKind.ZERO)
        if sign > 0:
            raise ConstraintError(ConstraintKind.NEGATIVE)

    @classmethod
    def new(cls, value: Any) -> Constrained:
        """Wrap ``value`` if it is strictly negative."""
        return Constrained(value, cls)


class StrictlyPositive(Constraint):
    """Greater than zero."""

    additive = True

    @classmethod
    def check(cls, value: Any) -> None:
        sign = _sign(value)
        if sign is None:
            raise ConstraintError(ConstraintKind.NOT_A_NUMBER)
        if sign == 0:
            raise ConstraintError(ConstraintKind.ZERO)
        if sign < 0:
            raise ConstraintError(ConstraintKind.NEGATIVE)

    @classmethod
    def new(cls, value: Any) -> Constrained:
        """Wrap ``value`` if it is strictly positive."""
        return Constrained(value, cls)