import math
from dataclasses import dataclass

import pytest

from twine_models.arrangement import ThermoModel
from twine_models.heat_transfer_rate import HeatFlowDirection, HeatTransferRate
from twine_models.hx_inputs import Given, Inlets, Known, MassFlows, PressureDrops
from twine_models.resolved import resolve
from twine_models.solve_error import SecondLawViolation, ThermoModelFailed

TEST_FLUID = "test-fluid"


@dataclass(frozen=True)
class _State:
    temperature: float
    density: float
    fluid: str


class _TestThermoModel(ThermoModel):
    cp = 1000.0
    p = 101_325.0
    density = 1.0

    def pressure(self, state):
        return self.p

    def enthalpy(self, state):
        return self.cp * (state.temperature - 0.0)

    def state_from_temperature_pressure(self, fluid, temperature, pressure):
        return _State(temperature, self.density, fluid)

    def state_from_pressure_enthalpy(self, fluid, pressure, enthalpy):
        return _State(0.0 + enthalpy / self.cp, self.density, fluid)


class _FailingPressureModel(_TestThermoModel):
    def pressure(self, state):
        raise RuntimeError("no pressure")


def _state(temp_kelvin):
    return _State(temp_kelvin, 1.0, TEST_FLUID)


def _known(top, bottom, m_top=1.0, m_bottom=1.0, dp=None):
    return Known(
        inlets=Inlets(top=_state(top), bottom=_state(bottom)),
        m_dot=MassFlows.unchecked(m_top, m_bottom),
        dp=dp if dp is not None else PressureDrops(),
    )


def test_resolve_top_outlet_closes_energy_balance():
    model = _TestThermoModel()
    resolved = resolve(_known(350.0, 300.0), Given.top_outlet_temp(330.0), model, model)
    assert resolved.q_dot.signed_top_to_bottom() / 1000.0 == pytest.approx(20.0)
    assert resolved.bottom.outlet.temperature == pytest.approx(320.0)


def test_resolve_bottom_outlet_closes_energy_balance():
    model = _TestThermoModel()
    resolved = resolve(
        _known(350.0, 300.0), Given.bottom_outlet_temp(320.0), model, model
    )
    assert resolved.q_dot.direction is HeatFlowDirection.TOP_TO_BOTTOM
    assert resolved.q_dot.magnitude() == pytest.approx(20_000.0)
    assert resolved.top.outlet.temperature == pytest.approx(330.0)


def test_resolve_heat_transfer_rate():
    model = _TestThermoModel()
    q_dot = HeatTransferRate.top_to_bottom(60_000.0)
    resolved = resolve(
        _known(400.0, 300.0, m_top=2.0, m_bottom=3.0),
        Given.heat_transfer_rate(q_dot),
        model,
        model,
    )
    assert resolved.q_dot == q_dot
    assert resolved.top.outlet.temperature == pytest.approx(370.0)
    assert resolved.bottom.outlet.temperature == pytest.approx(320.0)
    assert resolved.top.m_dot == 2.0
    assert resolved.bottom.m_dot == 3.0


def test_no_heat_transfer_keeps_inlet_temperatures():
    model = _TestThermoModel()
    resolved = resolve(
        _known(400.0, 300.0),
        Given.heat_transfer_rate(HeatTransferRate.none()),
        model,
        model,
    )
    assert resolved.q_dot.direction is HeatFlowDirection.NONE
    assert resolved.top.outlet.temperature == pytest.approx(400.0)
    assert resolved.bottom.outlet.temperature == pytest.approx(300.0)


def test_pressure_drops_set_outlet_pressures():
    model = _TestThermoModel()
    resolved = resolve(
        _known(350.0, 300.0, dp=PressureDrops(1_000.0, 325.0)),
        Given.top_outlet_temp(330.0),
        model,
        model,
    )
    assert resolved.top.p_in == 101_325.0
    assert resolved.top.p_out == pytest.approx(100_325.0)
    assert resolved.bottom.p_out == pytest.approx(101_000.0)


def test_inlet_enthalpies_come_from_model():
    model = _TestThermoModel()
    resolved = resolve(_known(350.0, 300.0), Given.top_outlet_temp(330.0), model, model)
    assert resolved.top.h_in == pytest.approx(350_000.0)
    assert resolved.bottom.h_in == pytest.approx(300_000.0)
    assert resolved.top.inlet == _state(350.0)


def test_nan_heat_transfer_is_second_law_violation():
    model = _TestThermoModel()
    with pytest.raises(SecondLawViolation) as info:
        resolve(_known(400.0, 300.0), Given.top_outlet_temp(math.nan), model, model)
    err = info.value
    assert err.violation_node is None
    assert err.min_delta_t == pytest.approx(100.0)
    assert math.isnan(err.q_dot)
    assert err.bottom_outlet_temp is None


def test_thermo_failure_is_wrapped_with_context():
    failing = _FailingPressureModel()
    model = _TestThermoModel()
    with pytest.raises(ThermoModelFailed) as info:
        resolve(_known(400.0, 300.0), Given.top_outlet_temp(360.0), failing, model)
    assert info.value.context == "pressure(top inlet)"
    assert isinstance(info.value.source, RuntimeError)


def test_bottom_thermo_failure_names_bottom_side():
    failing = _FailingPressureModel()
    model = _TestThermoModel()
    with pytest.raises(ThermoModelFailed) as info:
        resolve(_known(400.0, 300.0), Given.top_outlet_temp(360.0), model, failing)
    assert info.value.context == "pressure(bottom inlet)"