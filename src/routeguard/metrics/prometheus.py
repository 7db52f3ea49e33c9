from __future__ import annotations

from typing import Any, Dict, Optional

from routeguard.core.ports import MetricsSink

try:
    from prometheus_client import Counter, Histogram  # type: ignore
except Exception:  # pragma: no cover
    Counter = Histogram = None  # type: ignore

DECISIONS_TOTAL = "routeguard_decisions_total"
DECISION_SECONDS = "routeguard_decision_seconds"


class PrometheusMetrics(MetricsSink):
    """Prometheus-based MetricsSink.

    Exposes:
      - routeguard_decisions_total{decision="allow|deny"}
      - routeguard_decision_seconds (Histogram)
    """

    _counter: Optional[Any]
    _hist: Optional[Any]

    def __init__(self, registry: Any = None) -> None:
        self._counter = None
        self._hist = None

        if Counter is None or Histogram is None:  # pragma: no cover
            return

        kwargs: Dict[str, Any] = {}
        if registry is not None:
            kwargs["registry"] = registry
        self._counter = Counter(
            DECISIONS_TOTAL,
            "Total route guard decisions by outcome.",
            labelnames=("decision",),
            **kwargs,
        )
        self._hist = Histogram(
            DECISION_SECONDS,
            "Route guard chain evaluation duration in seconds.",
            **kwargs,
        )

    def inc(self, name: str, labels: Dict[str, str] | None = None) -> None:
        """Count one route decision under its allow/deny label; *name* is always the decisions counter."""
        if self._counter is None:  # pragma: no cover
            return
        decision = (labels or {}).get("decision", "unknown")
        try:
            self._counter.labels(decision=decision).inc()
        except Exception:  # pragma: no cover
            # never raise from metrics path
            pass

    def observe(self, name: str, value: float, labels: Dict[str, str] | None = None) -> None:
        if self._hist is None:  # pragma: no cover
            return
        try:
            self._hist.observe(float(value))
        except Exception:  # pragma: no cover
            pass
