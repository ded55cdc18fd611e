"""Performance metrics for discretized heat exchangers."""

from __future__ import annotations

import math
from typing import Any

from twine_models.arrangement import DiscretizedArrangement
from twine_models.nodes import Nodes
from twine_models.results import MinDeltaT


def compute_min_delta_t(
    nodes: Nodes[Any, Any], arrangement: DiscretizedArrangement
) -> MinDeltaT:
    """Minimum hot-to-cold temperature difference (K) and the node where it occurs.

    The hot stream is the one whose inlet is at least as warm as the other's.
    """
    n = len(nodes.top)
    if n == 0:
        return MinDeltaT(value=0.0, node=0)

    top_inlet_temp = nodes.top[0].temperature
    bottom_inlet_temp = nodes.bottom[arrangement.bottom_select(0, n - 1)].temperature
    top_is_hot = top_inlet_temp >= bottom_inlet_temp

    min_delta_t = math.inf
    min_node = 0
    for i, (top, bottom) in enumerate(zip(nodes.top, nodes.bottom)):
        if top_is_hot:
            delta_t = top.temperature - bottom.temperature
        else:
            delta_t = bottom.temperature - top.temperature
        if delta_t < min_delta_t:
            min_delta_t = delta_t
            min_node = i

    return MinDeltaT(value=min_delta_t, node=min_node)