"""Flow arrangements and thermodynamic model contract for discretized solvers.

The top stream always flows left to right (node 0 to node N-1). The bottom
stream's direction depends on the arrangement.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any, TypeVar

T = TypeVar("T")


class DiscretizedArrangement(enum.Enum):
    """Flow arrangement of a discretized heat exchanger."""

    COUNTER_FLOW = "counter_flow"
    PARALLEL_FLOW = "parallel_flow"

    def bottom_flows_left_to_right(self) -> bool:
        """True if the bottom stream flows from node 0 to node N-1."""
        return self is DiscretizedArrangement.PARALLEL_FLOW

    def bottom_select(self, forward: T, reverse: T) -> T:
        """Return ``forward`` if the bottom stream flows left to right, else ``reverse``."""
        return forward if self.bottom_flows_left_to_right() else reverse


class ThermoModel(ABC):
    """Property model required by the discretized solver.

    States are opaque to the solver apart from two attributes: ``temperature``
    in kelvin and ``fluid``. Units are SI: pascals and J/kg. Any method may
    raise an exception when a property cannot be evaluated.
    """

    @abstractmethod
    def pressure(self, state: Any) -> float:
        """Pressure of ``state`` in pascals."""

    @abstractmethod
    def enthalpy(self, state: Any) -> float:
        """Specific enthalpy of ``state`` in J/kg."""

    @abstractmethod
    def state_from_temperature_pressure(self, fluid: Any, temperature: float, pressure: float) -> Any:
        """State of ``fluid`` at the given temperature and pressure."""

    @abstractmethod
    def state_from_pressure_enthalpy(self, fluid: Any, pressure: float, enthalpy: float) -> Any:
        """State of ``fluid`` at the given pressure and specific enthalpy."""