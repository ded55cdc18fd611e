"""Directional heat transfer rate between the two streams of an exchanger.

Values are plain floats in watts. Direction is carried by
:class:`HeatFlowDirection` rather than by sign, so a nonzero rate always
stores a strictly positive power.

The "top" and "bottom" labels refer to the physical stream assignment,
not necessarily the hot or cold side of the heat exchanger.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from twine_models.constraint import (
    Constrained,
    ConstraintError,
    ConstraintKind,
    StrictlyPositive,
)


class HeatFlowDirection(enum.Enum):
    """Which way heat flows between the streams."""

    TOP_TO_BOTTOM = "top_to_bottom"
    BOTTOM_TO_TOP = "bottom_to_top"
    NONE = "none"


@dataclass(frozen=True)
class HeatTransferRate:
    """Heat transfer rate with an explicit direction.

    ``power`` is in watts and is strictly positive unless the direction is
    :attr:`HeatFlowDirection.NONE`, in which case it is zero.
    """

    direction: HeatFlowDirection
    power: float = 0.0

    @classmethod
    def top_to_bottom(cls, q_dot: float) -> HeatTransferRate:
        """Heat flowing from the top stream to the bottom stream.

        Raises :class:`ConstraintError` if ``q_dot`` is not strictly positive.
        """
        return cls.top_to_bottom_from_constrained(StrictlyPositive.new(q_dot))

    @classmethod
    def top_to_bottom_from_constrained(cls, q_dot: Constrained) -> HeatTransferRate:
        """Heat flowing from top to bottom, from a pre-validated power."""
        return cls(HeatFlowDirection.TOP_TO_BOTTOM, q_dot.into_inner())

    @classmethod
    def bottom_to_top(cls, q_dot: float) -> HeatTransferRate:
        """Heat flowing from the bottom stream to the top stream.

        Raises :class:`ConstraintError` if ``q_dot`` is not strictly positive.
        """
        return cls.bottom_to_top_from_constrained(StrictlyPositive.new(q_dot))

    @classmethod
    def bottom_to_top_from_constrained(cls, q_dot: Constrained) -> HeatTransferRate:
        """Heat flowing from bottom to top, from a pre-validated power."""
        return cls(HeatFlowDirection.BOTTOM_TO_TOP, q_dot.into_inner())

    @classmethod
    def none(cls) -> HeatTransferRate:
        """No heat transfer."""
        return cls(HeatFlowDirection.NONE, 0.0)

    @classmethod
    def from_signed_top_to_bottom(cls, q_dot: float) -> HeatTransferRate:
        """Build from a signed power; positive means top to bottom.

        Raises :class:`ConstraintError` if ``q_dot`` is not a number.
        """
        if math.isnan(q_dot):
            raise ConstraintError(ConstraintKind.NOT_A_NUMBER)
        if q_dot > 0:
            return cls(HeatFlowDirection.TOP_TO_BOTTOM, q_dot)
        if q_dot < 0:
            return cls(HeatFlowDirection.BOTTOM_TO_TOP, -q_dot)
        return cls.none()

    def signed_top_to_bottom(self) -> float:
        """Signed power in watts; positive means top to bottom."""
        if self.direction is HeatFlowDirection.TOP_TO_BOTTOM:
            return self.power
        if self.direction is HeatFlowDirection.BOTTOM_TO_TOP:
            return -self.power
        return 0.0

    def magnitude(self) -> float:
        """Non-negative power in watts."""
        if self.direction is HeatFlowDirection.NONE:
            return 0.0
        return self.power