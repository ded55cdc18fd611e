"""Results of solving a discretized heat exchanger."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Tuple, TypeVar

from twine_models.heat_transfer_rate import HeatTransferRate

TopState = TypeVar("TopState")
BottomState = TypeVar("BottomState")


@dataclass(frozen=True)
class MinDeltaT:
    """Minimum hot-to-cold temperature difference and the node where it occurs.

    ``value`` is in kelvin. When no heat is transferred it is the minimum
    absolute temperature difference between the streams.
    """

    value: float
    node: int


@dataclass
class Results(Generic[TopState, BottomState]):
    """Node states and performance metrics.

    Node sequences run left (0) to right (N-1). The top stream always flows
    from node 0 to node N-1; the bottom stream does so in parallel flow and
    flows from N-1 to 0 in counterflow. ``ua`` is in W/K.
    """

    top: Tuple[TopState, ...]
    bottom: Tuple[BottomState, ...]
    q_dot: HeatTransferRate
    ua: float
    min_delta_t: MinDeltaT