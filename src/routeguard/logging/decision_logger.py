from __future__ import annotations

import json
import logging
import random
from typing import Any, Dict, Mapping, Optional

from .context import get_current_trace_id

_DEFAULT_CATEGORY_RATES: Dict[str, float] = {"deny": 1.0}


class DecisionLogger:
    """Audit sink for route decisions, writing to the ``routeguard.audit`` logger.

    Sampling:
      - Legacy mode (``smart_sampling=False``): every payload is kept with
        probability ``sample_rate``.
      - Smart mode: the payload is categorised as ``"allow"`` or ``"deny"`` and
        ``category_sampling_rates`` decides; categories without an entry fall
        back to ``sample_rate``. By default all denials are kept.

    ``max_reason_len`` truncates long reasons before emitting.
    """

    def __init__(
        self,
        *,
        sample_rate: float = 1.0,
        level: int = logging.INFO,
        as_json: bool = False,
        logger_name: str = "routeguard.audit",
        smart_sampling: bool = False,
        category_sampling_rates: Optional[Mapping[str, float]] = None,
        max_reason_len: Optional[int] = None,
        include_trace_id: bool = True,
    ) -> None:
        self.sample_rate = max(0.0, min(1.0, float(sample_rate)))
        self.level = level
        self.as_json = as_json
        self.logger = logging.getLogger(logger_name)
        self.smart_sampling = smart_sampling
        self.category_sampling_rates: Dict[str, float] = dict(
            _DEFAULT_CATEGORY_RATES if category_sampling_rates is None else category_sampling_rates
        )
        self.max_reason_len = max_reason_len
        self.include_trace_id = include_trace_id

    # -- sampling --------------------------------------------------------------

    @staticmethod
    def _category(payload: Mapping[str, Any]) -> str:
        return "allow" if payload.get("allowed") else "deny"

    def _effective_rate(self, payload: Mapping[str, Any]) -> float:
        if not self.smart_sampling:
            return self.sample_rate
        rate = self.category_sampling_rates.get(self._category(payload))
        return self.sample_rate if rate is None else max(0.0, min(1.0, float(rate)))

    def _sampled(self, payload: Mapping[str, Any]) -> bool:
        rate = self._effective_rate(payload)
        if rate <= 0.0:
            return False
        if rate >= 1.0:
            return True
        return random.random() < rate

    # -- DecisionLogSink -------------------------------------------------------

    def log(self, payload: Dict[str, Any]) -> None:
        if not self._sampled(payload):
            return

        out = dict(payload)
        reason = out.get("reason")
        if self.max_reason_len is not None and isinstance(reason, str):
            if len(reason) > self.max_reason_len:
                out["reason"] = reason[: self.max_reason_len] + "..."
        if self.include_trace_id and "trace_id" not in out:
            trace_id = get_current_trace_id()
            if trace_id is not None:
                out["trace_id"] = trace_id

        if self.as_json:
            try:
                msg = json.dumps(out, ensure_ascii=False)
            except (TypeError, ValueError):
                dbg = getattr(self.logger, "debug", None)
                if callable(dbg):
                    dbg("DecisionLogger: payload is not JSON-serializable", exc_info=True)
                msg = f"decision {out}"
        else:
            msg = f"decision {out}"
        self.logger.log(self.level, msg)


__all__ = ["DecisionLogger"]
