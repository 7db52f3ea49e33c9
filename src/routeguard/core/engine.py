from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Iterable, Optional

from .combinator import combine_guards, evaluate, evaluate_sync, guard_name
from .context import validate_context
from .guards import REASON_AUTH_REQUIRED
from .model import GuardContext, GuardResult, allow, deny
from .paths import DEFAULT_PATHS
from .ports import DecisionLogSink, MetricsSink

logger = logging.getLogger("routeguard.engine")


class RouteGuardEngine:
    """Evaluates a route's guard chain and reports each decision.

    The engine owns no navigation state. Denials are ordinary results; any
    exception raised while evaluating (a provider that failed to load, a guard
    that returned garbage) is logged and re-raised so the routing layer can
    treat the decision as indeterminate.
    """

    def __init__(
        self,
        guards: Iterable[Callable[..., Any]] = (),
        *,
        metrics: Optional[MetricsSink] = None,
        logger_sink: Optional[DecisionLogSink] = None,
        fallback_path: Optional[str] = None,
    ) -> None:
        self.guards = tuple(guards)
        self.metrics = metrics
        self.logger_sink = logger_sink
        self.fallback_path = fallback_path or DEFAULT_PATHS.sign_in
        self._chain = combine_guards(*self.guards) if self.guards else None

    @property
    def name(self) -> str:
        return guard_name(self._chain) if self._chain is not None else "default_auth"

    def _default(self, context: GuardContext) -> GuardResult:
        # No guards configured: the route is simply protected.
        if context.is_authenticated:
            return allow()
        return deny(self.fallback_path, REASON_AUTH_REQUIRED)

    async def evaluate_async(self, context: GuardContext) -> GuardResult:
        validate_context(context)
        start = time.perf_counter()
        try:
            if self._chain is None:
                result = self._default(context)
            else:
                result = await evaluate(self._chain, context)
        except Exception:
            logger.exception(
                "routeguard: guard evaluation failed for %s (%s)", context.current_path, self.name
            )
            raise
        self._report(context, result, time.perf_counter() - start)
        return result

    def evaluate_sync(self, context: GuardContext) -> GuardResult:
        return evaluate_sync(self.evaluate_async, context)

    async def __call__(self, context: GuardContext) -> GuardResult:
        return await self.evaluate_async(context)

    # -- reporting -------------------------------------------------------------

    def _report(self, context: GuardContext, result: GuardResult, elapsed: float) -> None:
        labels = {"decision": "allow" if result.allowed else "deny"}
        if self.metrics is not None:
            try:
                self.metrics.inc("routeguard_decisions_total", labels)
            except Exception:
                logger.debug("routeguard: metrics.inc failed", exc_info=True)
            observe = getattr(self.metrics, "observe", None)
            if callable(observe):
                try:
                    observe("routeguard_decision_seconds", elapsed, labels)
                except Exception:
                    logger.debug("routeguard: metrics.observe failed", exc_info=True)

        if self.logger_sink is not None:
            payload: Dict[str, Any] = {"context": context.to_dict(), "guard": self.name}
            payload.update(result.to_dict())
            payload.setdefault("redirect_to", None)
            payload.setdefault("reason", None)
            try:
                self.logger_sink.log(payload)
            except Exception:
                logger.debug("routeguard: decision log sink failed", exc_info=True)


__all__ = ["RouteGuardEngine"]
