# twine-models

Building blocks for engineering models. The package has two parts: numeric
constraints, and the pieces of a discretized counterflow or parallel-flow
heat exchanger.

All physical quantities are plain floats in SI units: kelvin, pascal,
watt, kg/s and J/kg.

## Installation

```
pip install twine-models
```

To run the test suite, install the test extra and run pytest:

```
pip install "twine-models[test]"
pytest
```

## Numeric constraints

`twine_models.constraint` wraps values that must satisfy a numeric
invariant. When a value breaks the invariant, construction raises
`ConstraintError`, which is a `ValueError`. The error's `kind` is a
`ConstraintKind` that gives the reason: `NEGATIVE`, `POSITIVE`, `ZERO`,
`NOT_A_NUMBER`, `BELOW_MINIMUM` or `ABOVE_MAXIMUM`.

```python
from twine_models.constraint import (
    Constrained, ConstraintError, NonNegative, StrictlyPositive,
)

flow = StrictlyPositive.new(2.5)
flow.into_inner()            # 2.5

same = Constrained(2.5, StrictlyPositive)   # the generic constructor

total = NonNegative.new(1) + NonNegative.new(2) + NonNegative.zero()
total.into_inner()           # 3
sum([NonNegative.new(1), NonNegative.new(4)]).into_inner()   # 5

try:
    StrictlyPositive.new(0.0)
except ConstraintError as err:
    print(err.kind)          # ConstraintKind.ZERO
```

The constraints are `NonNegative`, `NonPositive`, `NonZero`,
`StrictlyNegative` and `StrictlyPositive`. Each has a `check` class method
and a `new` constructor. `NonNegative` and `NonPositive` also have `zero()`.
NaN always fails with `NOT_A_NUMBER`. You can add two values under the same
constraint, and use `sum()` on them, for every constraint except `NonZero`.
`Constrained` values also support `is_zero()`, equality and ordering.

You can write your own constraint by subclassing `Constraint` and
implementing `check`. Set `additive = True` if addition preserves it.

`twine_models.unit_interval` provides the unit-interval constraints:

- `UnitInterval`: 0 ≤ x ≤ 1, with `zero()` and `one()`
- `UnitIntervalOpen`: 0 < x < 1
- `UnitIntervalLowerOpen`: 0 < x ≤ 1, with `one()`
- `UnitIntervalUpperOpen`: 0 ≤ x < 1, with `zero()`

A value below the interval fails with `BELOW_MINIMUM`, a value above it
with `ABOVE_MAXIMUM`, and NaN with `NOT_A_NUMBER`.

```python
from twine_models.unit_interval import UnitInterval, UnitIntervalOpen

UnitInterval.new(0.25).into_inner()   # 0.25
UnitInterval.one().into_inner()       # 1.0
UnitIntervalOpen.new(1.0)             # raises ConstraintError (ABOVE_MAXIMUM)
```

## Heat exchanger pieces

"Top" and "bottom" name the physical streams. They are not necessarily the
hot and cold sides. The top stream always flows from node 0 to node N-1.
The bottom stream flows the same way in parallel flow and the opposite way
in counterflow.

- `twine_models.heat_transfer_rate.HeatTransferRate` records a heat flow
  with an explicit `HeatFlowDirection`: `TOP_TO_BOTTOM`, `BOTTOM_TO_TOP` or
  `NONE`. The constructors are `top_to_bottom`, `bottom_to_top`, `none` and
  `from_signed_top_to_bottom`. `signed_top_to_bottom()` and `magnitude()`
  give the power back.
- `twine_models.hx_inputs` describes the problem. `Inlets`, `MassFlows`
  (strictly positive) and `PressureDrops` (non-negative) make up the
  `Known` inputs. `Given` is the one extra condition. It is built with
  `Given.top_outlet_temp`, `Given.bottom_outlet_temp` or
  `Given.heat_transfer_rate`.
- `twine_models.arrangement` defines `DiscretizedArrangement`
  (`COUNTER_FLOW`, `PARALLEL_FLOW`) and the abstract `ThermoModel`. A model
  implements `pressure`, `enthalpy`, `state_from_temperature_pressure` and
  `state_from_pressure_enthalpy`. The state objects it returns need
  `temperature` and `fluid` attributes.
- `twine_models.resolved.resolve` closes the energy balance and returns a
  `Resolved` record that holds both outlet states.
- `twine_models.nodes.discretize` splits the exchanger into `n` nodes
  (at least 2). It interpolates pressure and enthalpy linearly.
  `linear_array` is the helper it uses for that.
- `twine_models.metrics.compute_min_delta_t` finds the smallest
  hot-to-cold temperature difference and the node where it occurs.
- `twine_models.solve_error` defines `SolveError` and its subclasses
  `SecondLawViolation` and `ThermoModelFailed`. It also has
  `check_second_law`, which raises when heat would flow from cold to hot or
  when the temperatures cross.
- `twine_models.results` holds the `Results` and `MinDeltaT` records.

### Example

```python
from dataclasses import dataclass

from twine_models.arrangement import DiscretizedArrangement, ThermoModel
from twine_models.heat_transfer_rate import HeatTransferRate
from twine_models.hx_inputs import Given, Inlets, Known, MassFlows, PressureDrops
from twine_models.metrics import compute_min_delta_t
from twine_models.nodes import discretize
from twine_models.resolved import resolve
from twine_models.solve_error import check_second_law


@dataclass(frozen=True)
class State:
    temperature: float
    fluid: str = "water"


class ConstantCp(ThermoModel):
    cp = 1000.0

    def pressure(self, state):
        return 101_325.0

    def enthalpy(self, state):
        return self.cp * state.temperature

    def state_from_temperature_pressure(self, fluid, temperature, pressure):
        return State(temperature, fluid)

    def state_from_pressure_enthalpy(self, fluid, pressure, enthalpy):
        return State(enthalpy / self.cp, fluid)


model = ConstantCp()
known = Known(
    inlets=Inlets(top=State(400.0), bottom=State(300.0)),
    m_dot=MassFlows(1.0, 1.0),
    dp=PressureDrops.zero(),
)
given = Given.heat_transfer_rate(HeatTransferRate.top_to_bottom(30_000.0))

resolved = resolve(known, given, model, model)
resolved.top.outlet.temperature        # 370.0
resolved.bottom.outlet.temperature     # 330.0

nodes = discretize(resolved, DiscretizedArrangement.COUNTER_FLOW, 3, model, model)
[s.temperature for s in nodes.top]     # [400.0, 385.0, 370.0]
[s.temperature for s in nodes.bottom]  # [330.0, 315.0, 300.0]

min_dt = compute_min_delta_t(nodes, DiscretizedArrangement.COUNTER_FLOW)
min_dt.value, min_dt.node              # (70.0, 0)
check_second_law(resolved, min_dt)     # passes; raises SecondLawViolation otherwise
```

## What the package does not do

- It does not compute the exchanger's conductance (UA).
- It has no single solve call that produces a `Results` record. You chain
  `resolve`, `discretize`, `compute_min_delta_t` and `check_second_law`
  yourself, as in the example.
- It cannot iterate to match a target UA.
- It has no effectiveness-NTU relations and no cross-flow or shell-and-tube
  arrangements.
- It has no fluid property library. You supply the `ThermoModel`.
- It has no command-line interface.