"""Invocation metrics for model adapters."""

from .counters import InvocationCounters, InvocationCountersSnapshot, LatencyStatsSnapshot

__all__ = ["InvocationCounters", "InvocationCountersSnapshot", "LatencyStatsSnapshot"]
