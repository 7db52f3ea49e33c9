from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from . import adapters, core
from .core.combinator import combine_guards, evaluate, evaluate_sync
from .core.context import build_context
from .core.engine import RouteGuardEngine
from .core.errors import (
    ContextUnavailableError,
    GuardConfigurationError,
    InvalidDecisionError,
    RouteGuardError,
)
from .core.guards import public_only, require_auth, require_onboarding
from .core.model import GuardContext, GuardResult, allow, deny
from .core.paths import RoutePaths
from .core.redirect import resolve_redirect
from .logging.decision_logger import DecisionLogger


def _detect_version() -> str:
    if version is None:
        return "0.1.0"
    try:
        return version("routeguard")
    except PackageNotFoundError:
        return "0.1.0"


__version__ = _detect_version()

__all__ = [
    "ContextUnavailableError",
    "DecisionLogger",
    "GuardConfigurationError",
    "GuardContext",
    "GuardResult",
    "InvalidDecisionError",
    "RouteGuardEngine",
    "RouteGuardError",
    "RoutePaths",
    "adapters",
    "allow",
    "build_context",
    "combine_guards",
    "core",
    "deny",
    "evaluate",
    "evaluate_sync",
    "public_only",
    "require_auth",
    "require_onboarding",
    "resolve_redirect",
    "__version__",
]
