"""Thread-safe in-memory counters for model invocations.

One instance per adapter tracks how many invocations started, succeeded and
failed (by error code) and aggregates latency. Masked failures still count as
failures here even though the caller receives a normal-looking result.
"""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from threading import RLock
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LatencyStatsSnapshot:
    """Latency aggregates in milliseconds."""

    count: int
    total_ms: int
    min_ms: Optional[int]
    max_ms: Optional[int]
    avg_ms: Optional[float]


@dataclass(frozen=True)
class InvocationCountersSnapshot:
    """Immutable point-in-time view of :class:`InvocationCounters`."""

    provider: str
    total: int
    success: int
    failure: int
    in_flight: int
    failure_by_code: Dict[str, int]
    latency: LatencyStatsSnapshot
    generated_at_ms: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class InvocationCounters:
    """Lifecycle counters for one provider's invocations."""

    __slots__ = (
        "_provider",
        "_lock",
        "_total",
        "_success",
        "_failure",
        "_in_flight",
        "_failure_by_code",
        "_latency_count",
        "_latency_total",
        "_latency_min",
        "_latency_max",
    )

    def __init__(self, provider: str):
        self._provider = provider
        self._lock = RLock()
        self._reset()
        self._in_flight = 0

    def _reset(self) -> None:
        self._total = 0
        self._success = 0
        self._failure = 0
        self._failure_by_code: Dict[str, int] = {}
        self._latency_count = 0
        self._latency_total = 0
        self._latency_min: Optional[int] = None
        self._latency_max: Optional[int] = None

    @staticmethod
    def monotonic_ms() -> int:
        return int(time.monotonic() * 1000)

    def record_start(self) -> None:
        with self._lock:
            self._total += 1
            self._in_flight += 1

    def record_success(self, latency_ms: int) -> None:
        with self._lock:
            self._success += 1
            self._in_flight = max(0, self._in_flight - 1)
            self._update_latency(latency_ms)

    def record_failure(self, error_code: str, latency_ms: Optional[int] = None) -> None:
        with self._lock:
            self._failure += 1
            self._failure_by_code[error_code] = self._failure_by_code.get(error_code, 0) + 1
            self._in_flight = max(0, self._in_flight - 1)
            if latency_ms is not None:
                self._update_latency(latency_ms)

    def _update_latency(self, latency_ms: int) -> None:
        if latency_ms < 0:
            return
        if self._latency_min is None or latency_ms < self._latency_min:
            self._latency_min = latency_ms
        if self._latency_max is None or latency_ms > self._latency_max:
            self._latency_max = latency_ms
        self._latency_count += 1
        self._latency_total += latency_ms

    def snapshot(self, reset: bool = False) -> InvocationCountersSnapshot:
        """Return current counters; ``reset`` zeroes everything except in-flight."""
        with self._lock:
            avg_ms = self._latency_total / self._latency_count if self._latency_count else None
            snap = InvocationCountersSnapshot(
                provider=self._provider,
                total=self._total,
                success=self._success,
                failure=self._failure,
                in_flight=self._in_flight,
                failure_by_code=dict(self._failure_by_code),
                latency=LatencyStatsSnapshot(
                    count=self._latency_count,
                    total_ms=self._latency_total,
                    min_ms=self._latency_min,
                    max_ms=self._latency_max,
                    avg_ms=avg_ms,
                ),
                generated_at_ms=self.monotonic_ms(),
            )
            if reset:
                self._reset()
            return snap


__all__ = ["InvocationCounters", "InvocationCountersSnapshot", "LatencyStatsSnapshot"]
