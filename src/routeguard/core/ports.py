from __future__ import annotations

from typing import Any, Awaitable, Dict, Protocol, Union, runtime_checkable

from .model import GuardContext, GuardResult

GuardOutcome = Union[GuardResult, Awaitable[GuardResult]]


@runtime_checkable
class RouteGuard(Protocol):
    """One authorization policy: a context goes in, a decision comes out.

    Sync and async callables both conform; composites returned by
    ``combine_guards`` are async.
    """

    def __call__(self, context: GuardContext) -> GuardOutcome: ...


class AuthStateProvider(Protocol):
    """Supplies authentication facts. Attributes may be plain values or awaitables."""

    is_authenticated: Any
    is_new_user: Any


class OnboardingStatusProvider(Protocol):
    onboarding_complete: Any


class DecisionLogSink(Protocol):
    def log(self, payload: Dict[str, Any]) -> None: ...


class MetricsSink(Protocol):
    def inc(self, name: str, labels: Dict[str, str] | None = None) -> None: ...


__all__ = [
    "GuardOutcome",
    "RouteGuard",
    "AuthStateProvider",
    "OnboardingStatusProvider",
    "DecisionLogSink",
    "MetricsSink",
]
