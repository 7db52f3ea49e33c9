from .combinator import combine_guards, evaluate, evaluate_sync
from .context import build_context, validate_context
from .engine import RouteGuardEngine
from .errors import (
    ContextUnavailableError,
    GuardConfigurationError,
    InvalidDecisionError,
    RouteGuardError,
)
from .guards import (
    make_public_only,
    make_require_auth,
    make_require_onboarding,
    public_only,
    require_auth,
    require_onboarding,
)
from .model import GuardContext, GuardResult, allow, deny
from .paths import DEFAULT_PATHS, RoutePaths
from .ports import RouteGuard
from .redirect import get_return_url, pop_return_url, remember_return_url, resolve_redirect

__all__ = [
    "ContextUnavailableError",
    "DEFAULT_PATHS",
    "GuardConfigurationError",
    "GuardContext",
    "GuardResult",
    "InvalidDecisionError",
    "RouteGuard",
    "RouteGuardEngine",
    "RouteGuardError",
    "RoutePaths",
    "allow",
    "build_context",
    "combine_guards",
    "deny",
    "evaluate",
    "evaluate_sync",
    "get_return_url",
    "make_public_only",
    "make_require_auth",
    "make_require_onboarding",
    "pop_return_url",
    "public_only",
    "remember_return_url",
    "require_auth",
    "require_onboarding",
    "resolve_redirect",
    "validate_context",
]
