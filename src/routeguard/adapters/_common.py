from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Union

from ..core.combinator import evaluate
from ..core.model import GuardContext, GuardResult, deny

logger = logging.getLogger("routeguard.adapters")

ContextBuilder = Callable[[Any], Union[GuardContext, Awaitable[GuardContext]]]

SAFE_DEFAULT_REASON = "Guard evaluation failed"


async def decide(
    guard: Callable[..., Any], build_context: ContextBuilder, request: Any, fallback_path: str
) -> tuple[GuardContext | None, GuardResult]:
    """Build the context for *request* and evaluate *guard* against it.

    Any failure (context provider or guard) yields the most restrictive
    outcome: a denial redirecting to *fallback_path*.
    """
    context: GuardContext | None = None
    try:
        built = build_context(request)
        if inspect.isawaitable(built):
            built = await built
        context = built
        result = await evaluate(guard, context)
    except Exception:
        logger.exception("routeguard: decision indeterminate, applying safe default")
        return context, deny(fallback_path, SAFE_DEFAULT_REASON)
    return context, result


def deny_headers(result: GuardResult, add_headers: bool) -> dict[str, str]:
    if not add_headers or result.reason is None:
        return {}
    return {"X-RouteGuard-Reason": str(result.reason)}
