from __future__ import annotations

from typing import Any, Dict, Optional

from routeguard.core.ports import MetricsSink

try:
    from opentelemetry.metrics import get_meter  # type: ignore
except Exception:  # pragma: no cover
    get_meter = None  # type: ignore


class OpenTelemetryMetrics(MetricsSink):
    """OpenTelemetry-based MetricsSink.

    Creates:
      - Counter: routeguard_decisions_total (attributes: decision)
      - Histogram: routeguard_decision_seconds (unit: s)
    """

    _counter: Optional[Any]
    _hist: Optional[Any]

    def __init__(self, meter: Any = None) -> None:
        self._counter = None
        self._hist = None

        if meter is None:
            if get_meter is None:  # pragma: no cover
                return
            meter = get_meter("routeguard.metrics")

        try:
            self._counter = meter.create_counter(
                name="routeguard_decisions_total",
                description="Total route guard decisions by outcome.",
            )
        except Exception:  # pragma: no cover
            self._counter = None

        try:
            create_hist = getattr(meter, "create_histogram", None)
            if create_hist is not None:
                self._hist = create_hist(
                    name="routeguard_decision_seconds",
                    description="Route guard chain evaluation duration in seconds.",
                    unit="s",
                )
        except Exception:  # pragma: no cover
            self._hist = None

    def inc(self, name: str, labels: Dict[str, str] | None = None) -> None:
        """Add one route decision to routeguard_decisions_total, keyed by its allow/deny outcome."""
        if self._counter is None:
            return
        decision = (labels or {}).get("decision", "unknown")
        try:
            self._counter.add(1, {"decision": decision})
        except Exception:  # pragma: no cover
            pass

    def observe(self, name: str, value: float, labels: Dict[str, str] | None = None) -> None:
        if self._hist is None:
            return
        try:
            self._hist.record(float(value), dict(labels or {}))
        except Exception:  # pragma: no cover
            pass
