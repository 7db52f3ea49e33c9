from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import GuardConfigurationError, InvalidDecisionError


@dataclass(frozen=True)
class GuardContext:
    """Snapshot of the facts a guard evaluates for one navigation attempt.

    Built fresh by the caller for every navigation; never cached or shared.
    """

    is_authenticated: bool = False
    is_new_user: bool = False
    onboarding_complete: bool = False
    current_path: str = "/"

    def __post_init__(self) -> None:
        for name in ("is_authenticated", "is_new_user", "onboarding_complete"):
            if not isinstance(getattr(self, name), bool):
                raise GuardConfigurationError(f"GuardContext.{name} must be a bool")
        if not isinstance(self.current_path, str):
            raise GuardConfigurationError("GuardContext.current_path must be a str")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_authenticated": self.is_authenticated,
            "is_new_user": self.is_new_user,
            "onboarding_complete": self.onboarding_complete,
            "current_path": self.current_path,
        }


@dataclass(frozen=True)
class GuardResult:
    """Decision returned by a guard.

    Invariants:
      - allowed results carry neither ``redirect_to`` nor ``reason``;
      - denied results always carry a non-empty ``redirect_to``.
    """

    allowed: bool
    redirect_to: Optional[str] = None
    reason: Optional[str] = None

    def __post_init__(self) -> None:
        if self.allowed:
            if self.redirect_to is not None or self.reason is not None:
                raise InvalidDecisionError("allowed result must not carry redirect_to or reason")
        elif not self.redirect_to:
            raise InvalidDecisionError("denied result requires a non-empty redirect_to")

    def to_dict(self) -> Dict[str, Any]:
        if self.allowed:
            return {"allowed": True}
        return {"allowed": False, "redirect_to": self.redirect_to, "reason": self.reason}


_ALLOW = GuardResult(allowed=True)


def allow() -> GuardResult:
    return _ALLOW


def deny(redirect_to: str, reason: Optional[str] = None) -> GuardResult:
    return GuardResult(allowed=False, redirect_to=redirect_to, reason=reason)


__all__ = ["GuardContext", "GuardResult", "allow", "deny"]
