from __future__ import annotations

import inspect
import logging
from typing import Any, Optional

from .errors import ContextUnavailableError, GuardConfigurationError
from .model import GuardContext
from .ports import AuthStateProvider, OnboardingStatusProvider

logger = logging.getLogger("routeguard.context")

_BOOL_FIELDS = ("is_authenticated", "is_new_user", "onboarding_complete")


def validate_context(context: Any) -> GuardContext:
    """Fail fast on a context with missing or non-boolean fields instead of guessing."""
    if not isinstance(context, GuardContext):
        raise GuardConfigurationError(f"expected GuardContext, got {type(context).__name__}")
    for name in _BOOL_FIELDS:
        if not isinstance(getattr(context, name), bool):
            raise GuardConfigurationError(f"GuardContext.{name} must be a bool")
    if not isinstance(context.current_path, str):
        raise GuardConfigurationError("GuardContext.current_path must be a str")
    return context


async def _read(provider: Any, provider_name: str, attr: str) -> bool:
    if provider is None:
        raise GuardConfigurationError(f"{provider_name} is required to build a guard context")
    try:
        value = getattr(provider, attr)
    except AttributeError as e:
        raise GuardConfigurationError(f"{provider_name} does not supply {attr!r}") from e
    except Exception as e:
        logger.warning("routeguard: %s failed while reading %s", provider_name, attr, exc_info=True)
        raise ContextUnavailableError(provider_name) from e
    try:
        if callable(value):
            value = value()
        if inspect.isawaitable(value):
            value = await value
    except Exception as e:
        logger.warning("routeguard: %s failed while reading %s", provider_name, attr, exc_info=True)
        raise ContextUnavailableError(provider_name) from e
    if value is None:
        raise GuardConfigurationError(f"{provider_name} supplied no value for {attr!r}")
    if not isinstance(value, bool):
        raise GuardConfigurationError(
            f"{provider_name}.{attr} must be a bool, got {type(value).__name__}"
        )
    return value


async def build_context(
    auth: Optional[AuthStateProvider],
    onboarding: Optional[OnboardingStatusProvider],
    current_path: Optional[str],
) -> GuardContext:
    """Assemble a fresh context from the upstream providers.

    Provider attributes may be plain values, zero-arg callables or awaitables.
    A provider that raises while being read surfaces as ContextUnavailableError.
    """
    if not isinstance(current_path, str):
        raise GuardConfigurationError("current_path must be a str")
    is_authenticated = await _read(auth, "auth provider", "is_authenticated")
    is_new_user = await _read(auth, "auth provider", "is_new_user")
    onboarding_complete = await _read(onboarding, "onboarding provider", "onboarding_complete")
    return GuardContext(
        is_authenticated=is_authenticated,
        is_new_user=is_new_user,
        onboarding_complete=onboarding_complete,
        current_path=current_path,
    )


__all__ = ["build_context", "validate_context"]
