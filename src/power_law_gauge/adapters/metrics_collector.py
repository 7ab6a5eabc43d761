"""
In-Memory Metrics Collector.

Stores fetch/evaluation metrics in memory. The pipeline may fetch the
primary and reference quotes on two threads, so recording is locked.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class MetricEntry:
    kind: str
    value: float
    tags: Dict[str, str] = field(default_factory=dict)
    recorded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class InMemoryMetricsCollector:
    """Simple in-memory metrics collector."""

    def __init__(self) -> None:
        self._metrics: Dict[str, List[MetricEntry]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a timing metric."""
        self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a count metric."""
        self._record(name, "count", value, tags)

    def record_gauge(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a gauge metric."""
        self._record(name, "gauge", value, tags)

    def entries(self, name: str) -> List[MetricEntry]:
        """Raw entries recorded under a name."""
        with self._lock:
            return list(self._metrics.get(name, []))

    def get_metrics(self) -> Dict[str, Any]:
        """Summary per metric name: count, total, last."""
        with self._lock:
            summary = {}
            for name, entries in self._metrics.items():
                values = [e.value for e in entries]
                summary[name] = {
                    "count": len(values),
                    "total": sum(values),
                    "last": values[-1],
                }
            return summary

    def clear(self) -> None:
        """Clear all metrics."""
        with self._lock:
            self._metrics.clear()

    def _record(
        self,
        name: str,
        kind: str,
        value: float,
        tags: Optional[Dict[str, str]],
    ) -> None:
        with self._lock:
            self._metrics.setdefault(name, []).append(
                MetricEntry(kind=kind, value=value, tags=dict(tags or {}))
            )
