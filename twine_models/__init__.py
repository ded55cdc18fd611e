"""Numeric constraints and the pieces of a discretized heat exchanger: inputs, resolution, nodes and metrics."""

__version__ = "0.1.0"