"""Resolution of boundary conditions into heat exchanger endpoint states."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from twine_models.arrangement import ThermoModel
from twine_models.constraint import ConstraintError
from twine_models.heat_transfer_rate import HeatTransferRate
from twine_models.hx_inputs import Given, GivenKind, Known
from twine_models.solve_error import SecondLawViolation, ThermoModelFailed

S = TypeVar("S")
TopState = TypeVar("TopState")
BottomState = TypeVar("BottomState")
R = TypeVar("R")


@dataclass
class ResolvedStream(Generic[S]):
    """Endpoint states and derived values of one stream.

    ``h_in`` is in J/kg, pressures in pascals and ``m_dot`` in kg/s.
    """

    inlet: S
    outlet: S
    h_in: float
    p_in: float
    p_out: float
    m_dot: float


@dataclass
class Resolved(Generic[TopState, BottomState]):
    """Resolved endpoints of both streams and the heat transfer rate."""

    top: ResolvedStream[TopState]
    bottom: ResolvedStream[BottomState]
    q_dot: HeatTransferRate


def _evaluate(context: str, func: Callable[..., R], *args: Any) -> R:
    """Call a thermo model method, wrapping any failure with ``context``."""
    try:
        return func(*args)
    except Exception as err:
        raise ThermoModelFailed(context, err) from err


@dataclass
class _StreamContext(Generic[S]):
    inlet: S
    fluid: Any
    h_in: float
    p_in: float
    p_out: float
    m_dot: float

    @classmethod
    def from_inlet(
        cls, side: str, inlet: S, m_dot: float, dp: float, thermo: ThermoModel
    ) -> _StreamContext[S]:
        p_in = _evaluate(f"pressure({side} inlet)", thermo.pressure, inlet)
        h_in = _evaluate(f"enthalpy({side} inlet)", thermo.enthalpy, inlet)
        return cls(
            inlet=inlet,
            fluid=inlet.fluid,  # type: ignore[attr-defined]
            h_in=h_in,
            p_in=p_in,
            p_out=p_in - dp,
            m_dot=m_dot,
        )

    def into_resolved(self, outlet: S) -> ResolvedStream[S]:
        return ResolvedStream(
            inlet=self.inlet,
            outlet=outlet,
            h_in=self.h_in,
            p_in=self.p_in,
            p_out=self.p_out,
            m_dot=self.m_dot,
        )


def _heat_transfer_rate_from_signed(
    top_inlet_temp: float,
    bottom_inlet_temp: float,
    top_outlet_temp: Optional[float],
    bottom_outlet_temp: Optional[float],
    q_signed: float,
) -> HeatTransferRate:
    """Build a heat transfer rate, reporting NaN as a second law violation."""
    try:
        return HeatTransferRate.from_signed_top_to_bottom(q_signed)
    except ConstraintError as err:
        raise SecondLawViolation(
            top_outlet_temp=top_outlet_temp,
            bottom_outlet_temp=bottom_outlet_temp,
            q_dot=q_signed,
            min_delta_t=top_inlet_temp - bottom_inlet_temp,
            violation_node=None,
        ) from err


def resolve(
    known: Known[TopState, BottomState],
    given: Given,
    thermo_top: ThermoModel,
    thermo_bottom: ThermoModel,
) -> Resolved[TopState, BottomState]:
    """Resolve outlet states and heat transfer rate from the known inputs.

    Raises :class:`ThermoModelFailed` when a property evaluation fails and
    :class:`SecondLawViolation` when the heat transfer rate is not a number.
    """
    top = _StreamContext.from_inlet(
        "top", known.inlets.top, known.m_dot.top, known.dp.top, thermo_top
    )
    bottom = _StreamContext.from_inlet(
        "bottom", known.inlets.bottom, known.m_dot.bottom, known.dp.bottom, thermo_bottom
    )

    if given.kind is GivenKind.TOP_OUTLET_TEMP:
        top_out = _evaluate(
            "state_from(top outlet)",
            thermo_top.state_from_temperature_pressure,
            top.fluid,
            given.value,
            top.p_out,
        )
        h_top_out = _evaluate("enthalpy(top outlet)", thermo_top.enthalpy, top_out)
        q_signed = top.m_dot * (top.h_in - h_top_out)
        q_dot = _heat_transfer_rate_from_signed(
            top.inlet.temperature,  # type: ignore[attr-defined]
            bottom.inlet.temperature,  # type: ignore[attr-defined]
            top_out.temperature,
            None,
            q_signed,
        )
        h_bottom_out = bottom.h_in + q_signed / bottom.m_dot
        bottom_out = _evaluate(
            "state_from(bottom outlet)",
            thermo_bottom.state_from_pressure_enthalpy,
            bottom.fluid,
            bottom.p_out,
            h_bottom_out,
        )
    elif given.kind is GivenKind.BOTTOM_OUTLET_TEMP:
        bottom_out = _evaluate(
            "state_from(bottom outlet)",
            thermo_bottom.state_from_temperature_pressure,
            bottom.fluid,
            given.value,
            bottom.p_out,
        )
        h_bottom_out = _evaluate(
            "enthalpy(bottom outlet)", thermo_bottom.enthalpy, bottom_out
        )
        q_signed = bottom.m_dot * (h_bottom_out - bottom.h_in)
        q_dot = _heat_transfer_rate_from_signed(
            top.inlet.temperature,  # type: ignore[attr-defined]
            bottom.inlet.temperature,  # type: ignore[attr-defined]
            None,
            bottom_out.temperature,
            q_signed,
        )
        h_top_out = top.h_in - q_signed / top.m_dot
        top_out = _evaluate(
            "state_from(top outlet)",
            thermo_top.state_from_pressure_enthalpy,
            top.fluid,
            top.p_out,
            h_top_out,
        )
    else:
        q_dot = given.value  # type: ignore[assignment]
        q_signed = q_dot.signed_top_to_bottom()
        h_top_out = top.h_in - q_signed / top.m_dot
        h_bottom_out = bottom.h_in + q_signed / bottom.m_dot
        top_out = _evaluate(
            "state_from(top outlet)",
            thermo_top.state_from_pressure_enthalpy,
            top.fluid,
            top.p_out,
            h_top_out,
        )
        bottom_out = _evaluate(
            "state_from(bottom outlet)",
            thermo_bottom.state_from_pressure_enthalpy,
            bottom.fluid,
            bottom.p_out,
            h_bottom_out,
        )

    return Resolved(
        top=top.into_resolved(top_out),
        bottom=bottom.into_resolved(bottom_out),
        q_dot=q_dot,
    )