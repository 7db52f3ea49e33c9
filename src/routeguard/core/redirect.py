from __future__ import annotations

from typing import Any, MutableMapping, Optional

from .model import GuardResult
from .paths import is_under

RETURN_URL_KEY = "routeguard_return_url"


def resolve_redirect(
    result: GuardResult,
    *,
    fallback_path: str,
    override: Optional[str] = None,
) -> Optional[str]:
    """Return where the caller must navigate, or None when navigation is allowed.

    Precedence: caller override, then the guard's redirect_to, then fallback_path.
    """
    if result.allowed:
        return None
    return override or result.redirect_to or fallback_path


def remember_return_url(
    store: MutableMapping[str, Any], current_path: str, sign_in_path: str
) -> bool:
    """Store the intended destination before redirecting to sign-in.

    Returns True when a value was stored.
    """
    if is_under(current_path, sign_in_path):
        return False
    store[RETURN_URL_KEY] = current_path
    return True


def get_return_url(store: MutableMapping[str, Any]) -> Optional[str]:
    value = store.get(RETURN_URL_KEY)
    return value if isinstance(value, str) else None


def pop_return_url(store: MutableMapping[str, Any]) -> Optional[str]:
    value = store.pop(RETURN_URL_KEY, None)
    return value if isinstance(value, str) else None


__all__ = [
    "RETURN_URL_KEY",
    "resolve_redirect",
    "remember_return_url",
    "get_return_url",
    "pop_return_url",
]
