"""Inputs that define a discretized heat exchanger problem.

All quantities are plain floats in SI units: kelvin, watts, kg/s and pascals.
The "top" and "bottom" labels refer to the physical stream assignment,
not necessarily the hot or cold side of the heat exchanger.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from twine_models.constraint import Constrained, NonNegative, StrictlyPositive
from twine_models.heat_transfer_rate import HeatTransferRate

TopState = TypeVar("TopState")
BottomState = TypeVar("BottomState")


class GivenKind(enum.Enum):
    """Which additional quantity closes the energy balance."""

    TOP_OUTLET_TEMP = "top_outlet_temp"
    BOTTOM_OUTLET_TEMP = "bottom_outlet_temp"
    HEAT_TRANSFER_RATE = "heat_transfer_rate"


@dataclass(frozen=True)
class Given:
    """The extra constraint needed to fully define the heat exchanger.

    ``value`` is a temperature in kelvin for the outlet temperature kinds and
    a :class:`HeatTransferRate` for :attr:`GivenKind.HEAT_TRANSFER_RATE`.
    """

    kind: GivenKind
    value: Union[float, HeatTransferRate]

    @classmethod
    def top_outlet_temp(cls, temperature: float) -> Given:
        """Specify the top stream outlet temperature."""
        return cls(GivenKind.TOP_OUTLET_TEMP, temperature)

    @classmethod
    def bottom_outlet_temp(cls, temperature: float) -> Given:
        """Specify the bottom stream outlet temperature."""
        return cls(GivenKind.BOTTOM_OUTLET_TEMP, temperature)

    @classmethod
    def heat_transfer_rate(cls, q_dot: HeatTransferRate) -> Given:
        """Specify the heat transfer rate and its direction."""
        return cls(GivenKind.HEAT_TRANSFER_RATE, q_dot)


@dataclass
class Inlets(Generic[TopState, BottomState]):
    """Inlet thermodynamic states of the top and bottom streams."""

    top: TopState
    bottom: BottomState


@dataclass(frozen=True)
class MassFlows:
    """Mass flow rates in kg/s; each is strictly positive."""

    top: float
    bottom: float

    def __post_init__(self) -> None:
        StrictlyPositive.check(self.top)
        StrictlyPositive.check(self.bottom)

    @classmethod
    def from_constrained(cls, top: Constrained, bottom: Constrained) -> MassFlows:
        """Build from pre-validated flow rates."""
        return cls.unchecked(top.into_inner(), bottom.into_inner())

    @classmethod
    def unchecked(cls, top: float, bottom: float) -> MassFlows:
        """Build without validation; the caller guarantees both are positive."""
        flows = object.__new__(cls)
        object.__setattr__(flows, "top", top)
        object.__setattr__(flows, "bottom", bottom)
        return flows


@dataclass(frozen=True)
class PressureDrops:
    """Pressure drops ``p_inlet - p_outlet`` in pascals; each is non-negative."""

    top: float = 0.0
    bottom: float = 0.0

    def __post_init__(self) -> None:
        NonNegative.check(self.top)
        NonNegative.check(self.bottom)

    @classmethod
    def from_constrained(cls, top: Constrained, bottom: Constrained) -> PressureDrops:
        """Build from pre-validated pressure drops."""
        return cls.unchecked(top.into_inner(), bottom.into_inner())

    @classmethod
    def unchecked(cls, top: float, bottom: float) -> PressureDrops:
        """Build without validation; the caller guarantees both are non-negative."""
        drops = object.__new__(cls)
        object.__setattr__(drops, "top", top)
        object.__setattr__(drops, "bottom", bottom)
        return drops

    @classmethod
    def zero(cls) -> PressureDrops:
        """No pressure drop on either stream."""
        return cls(0.0, 0.0)


@dataclass
class Known(Generic[TopState, BottomState]):
    """Inlet states, mass flows and pressure drops of the two streams."""

    inlets: Inlets[TopState, BottomState]
    m_dot: MassFlows
    dp: PressureDrops