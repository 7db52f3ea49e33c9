from __future__ import annotations


class RouteGuardError(Exception):
    """Base class for all routeguard errors."""


class GuardConfigurationError(RouteGuardError):
    """Raised when a context, guard or path setting is malformed."""


class InvalidDecisionError(RouteGuardError, ValueError):
    """Raised when a GuardResult would violate its allow/deny invariants."""


class ContextUnavailableError(RouteGuardError):
    """Raised when an upstream provider fails while a context is being built.

    The original provider exception is chained as ``__cause__``.
    """

    def __init__(self, provider: str, message: str | None = None) -> None:
        self.provider = provider
        super().__init__(message or f"{provider} failed to supply guard context")


__all__ = [
    "RouteGuardError",
    "GuardConfigurationError",
    "InvalidDecisionError",
    "ContextUnavailableError",
]
