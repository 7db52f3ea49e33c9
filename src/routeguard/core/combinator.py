from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Callable

from .errors import GuardConfigurationError
from .model import GuardContext, GuardResult, allow
from .ports import RouteGuard

logger = logging.getLogger("routeguard.core")


def guard_name(guard: Any) -> str:
    return getattr(guard, "__name__", None) or guard.__class__.__name__


async def evaluate(guard: Callable[..., Any], context: GuardContext) -> GuardResult:
    """Run one guard, awaiting its result if it suspends."""
    result = guard(context)
    if inspect.isawaitable(result):
        result = await result
    if not isinstance(result, GuardResult):
        raise GuardConfigurationError(
            f"guard {guard_name(guard)!r} returned {type(result).__name__}, expected GuardResult"
        )
    return result


def evaluate_sync(guard: Callable[..., Any], context: GuardContext) -> GuardResult:
    """Run a guard (or composite) to completion from synchronous code.

    Must not be called while an event loop is running in this thread.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(evaluate(guard, context))
    raise RuntimeError("evaluate_sync() cannot be used inside a running event loop; await evaluate()")


def combine_guards(*guards: RouteGuard) -> RouteGuard:
    """Chain guards into one async guard.

    Guards run strictly in the given order, each awaited before the next.
    The first denial is returned as-is and the remaining guards are never
    invoked. Exceptions raised by a guard propagate unchanged.
    """
    for g in guards:
        if not callable(g):
            raise TypeError(f"combine_guards() expects callables, got {type(g).__name__}")
    chain = tuple(guards)

    async def combined(context: GuardContext) -> GuardResult:
        for index, guard in enumerate(chain):
            result = await evaluate(guard, context)
            if not result.allowed:
                logger.debug(
                    "guard %s denied at step %d: %s", guard_name(guard), index, result.reason
                )
                return result
        return allow()

    names = ",".join(guard_name(g) for g in chain)
    combined.__name__ = f"combined[{names}]"
    combined.__qualname__ = combined.__name__
    combined.guards = chain  # type: ignore[attr-defined]
    return combined


__all__ = ["combine_guards", "evaluate", "evaluate_sync", "guard_name"]
