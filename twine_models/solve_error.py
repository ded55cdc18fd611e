"""Errors raised while solving a discretized heat exchanger."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from twine_models.heat_transfer_rate import HeatFlowDirection
from twine_models.results import MinDeltaT

if TYPE_CHECKING:
    from twine_models.resolved import Resolved


class SolveError(Exception):
    """Base class for discretized heat exchanger solve failures."""


class SecondLawViolation(SolveError):
    """Heat would flow from cold to hot, or the stream temperatures cross.

    This also covers a computed heat transfer rate that is not a number,
    which usually points to non-physical states. Any of the reported values
    may be NaN. Temperatures are in kelvin and ``q_dot`` in watts, signed so
    that positive means top to bottom. ``min_delta_t`` is ``T_hot - T_cold``;
    a negative value marks the violation. ``violation_node`` is ``None`` when
    the violation was found while resolving the outlets.
    """

    def __init__(
        self,
        top_outlet_temp: Optional[float],
        bottom_outlet_temp: Optional[float],
        q_dot: float,
        min_delta_t: float,
        violation_node: Optional[int],
    ) -> None:
        super().__init__(f"second law violation: min_delta_t={min_delta_t!r}")
        self.top_outlet_temp = top_outlet_temp
        self.bottom_outlet_temp = bottom_outlet_temp
        self.q_dot = q_dot
        self.min_delta_t = min_delta_t
        self.violation_node = violation_node


class ThermoModelFailed(SolveError):
    """A property evaluation or state construction failed."""

    def __init__(self, context: str, source: BaseException) -> None:
        super().__init__(f"thermodynamic model failed: {context}")
        self.context = context
        self.source = source
        self.__cause__ = source


def check_second_law(resolved: Resolved[Any, Any], min_delta_t: MinDeltaT) -> None:
    """Check that heat flows from hot to cold with no temperature crossover.

    Raises :class:`SecondLawViolation` when either condition fails.
    """
    direction = resolved.q_dot.direction
    if direction is HeatFlowDirection.NONE:
        return

    top_is_hot = resolved.top.inlet.temperature >= resolved.bottom.inlet.temperature
    if direction is HeatFlowDirection.TOP_TO_BOTTOM:
        direction_mismatch = not top_is_hot
    else:
        direction_mismatch = top_is_hot

    negative_delta_t = min_delta_t.value < 0.0

    if direction_mismatch or negative_delta_t:
        raise SecondLawViolation(
            top_outlet_temp=resolved.top.outlet.temperature,
            bottom_outlet_temp=resolved.bottom.outlet.temperature,
            q_dot=resolved.q_dot.signed_top_to_bottom(),
            min_delta_t=min_delta_t.value,
            violation_node=min_delta_t.node,
        )