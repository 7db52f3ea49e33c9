from __future__ import annotations

from typing import Callable

from .model import GuardContext, GuardResult, allow, deny
from .paths import DEFAULT_PATHS, RoutePaths

REASON_AUTH_REQUIRED = "Authentication required"
REASON_ONBOARDING_REQUIRED = "Please complete onboarding"
REASON_ALREADY_AUTHENTICATED = "Already authenticated"

SyncGuard = Callable[[GuardContext], GuardResult]


def make_require_auth(paths: RoutePaths = DEFAULT_PATHS) -> SyncGuard:
    def require_auth(context: GuardContext) -> GuardResult:
        if not context.is_authenticated:
            return deny(paths.sign_in, REASON_AUTH_REQUIRED)
        return allow()

    return require_auth


def make_require_onboarding(paths: RoutePaths = DEFAULT_PATHS) -> SyncGuard:
    def require_onboarding(context: GuardContext) -> GuardResult:
        # New users already inside the onboarding flow must not be bounced back into it.
        if context.is_new_user and context.current_path.startswith(paths.onboarding_prefix):
            return allow()
        if not context.onboarding_complete:
            return deny(paths.onboarding_start, REASON_ONBOARDING_REQUIRED)
        return allow()

    return require_onboarding


def make_public_only(paths: RoutePaths = DEFAULT_PATHS) -> SyncGuard:
    def public_only(context: GuardContext) -> GuardResult:
        if context.is_authenticated:
            target = paths.landing if context.onboarding_complete else paths.onboarding_start
            return deny(target, REASON_ALREADY_AUTHENTICATED)
        return allow()

    return public_only


require_auth = make_require_auth()
require_onboarding = make_require_onboarding()
public_only = make_public_only()

__all__ = [
    "REASON_AUTH_REQUIRED",
    "REASON_ONBOARDING_REQUIRED",
    "REASON_ALREADY_AUTHENTICATED",
    "make_require_auth",
    "make_require_onboarding",
    "make_public_only",
    "require_auth",
    "require_onboarding",
    "public_only",
]
