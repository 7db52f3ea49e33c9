from routeguard.core.model import allow, deny
from routeguard.core.redirect import (
    RETURN_URL_KEY,
    get_return_url,
    pop_return_url,
    remember_return_url,
    resolve_redirect,
)


def test_allowed_has_no_redirect():
    assert resolve_redirect(allow(), fallback_path="/login", override="/elsewhere") is None


def test_guard_redirect_used_when_no_override():
    assert resolve_redirect(deny("/onboarding/1", "x"), fallback_path="/login") == "/onboarding/1"


def test_caller_override_wins():
    assert resolve_redirect(deny("/dashboard", "x"), fallback_path="/login", override="/welcome") == "/welcome"


def test_return_url_roundtrip_and_sign_in_skipped():
    session = {}
    assert remember_return_url(session, "/login", "/login") is False
    assert session == {}

    assert remember_return_url(session, "/webhooks/42", "/login") is True
    assert session[RETURN_URL_KEY] == "/webhooks/42"
    assert get_return_url(session) == "/webhooks/42"
    assert pop_return_url(session) == "/webhooks/42"
    assert get_return_url(session) is None
    assert pop_return_url(session) is None
