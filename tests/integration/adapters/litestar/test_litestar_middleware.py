import pytest

pytest.importorskip("litestar", reason="Optional dep: Litestar not installed")
pytest.importorskip("starlette", reason="Redirect responses come from Starlette")

from litestar import Litestar, get
from litestar.testing import TestClient

from routeguard.adapters.litestar import RouteGuardMiddleware
from routeguard.core.combinator import combine_guards
from routeguard.core.guards import require_auth, require_onboarding
from routeguard.core.model import GuardContext


def build_context(scope) -> GuardContext:
    headers = {k.decode().lower(): v.decode() for k, v in scope.get("headers", [])}
    return GuardContext(
        is_authenticated=headers.get("x-auth") == "1",
        is_new_user=headers.get("x-new") == "1",
        onboarding_complete=headers.get("x-onboarded") == "1",
        current_path=scope["path"],
    )


@get("/dashboard")
async def dashboard() -> dict:
    return {"ok": True}


@get("/health")
async def health() -> dict:
    return {"status": "up"}


def make_app(guard, builder=build_context, **kwargs) -> Litestar:
    mw = RouteGuardMiddleware(guard=guard, build_context=builder, exclude_path_pattern="^/health", **kwargs)
    return Litestar(route_handlers=[dashboard, health], middleware=[mw])


def test_middleware_allows_and_redirects():
    app = make_app(combine_guards(require_auth, require_onboarding), add_headers=True)
    with TestClient(app) as client:
        ok = client.get("/dashboard", headers={"x-auth": "1", "x-onboarded": "1"})
        assert ok.status_code == 200 and ok.json() == {"ok": True}

        r = client.get("/dashboard", follow_redirects=False)
        assert r.status_code == 307
        assert r.headers["location"] == "/login"
        assert r.headers["x-routeguard-reason"] == "Authentication required"

        onboarding = client.get("/dashboard", headers={"x-auth": "1"}, follow_redirects=False)
        assert onboarding.headers["location"] == "/onboarding/1"


def test_excluded_paths_pass_through():
    with TestClient(make_app(require_auth)) as client:
        assert client.get("/health").json() == {"status": "up"}


def test_guard_failure_redirects_to_fallback():
    async def unavailable(context):
        raise ConnectionError("onboarding status unavailable")

    with TestClient(make_app(unavailable, fallback_path="/sign-in")) as client:
        r = client.get("/dashboard", headers={"x-auth": "1"}, follow_redirects=False)
        assert r.status_code == 307
        assert r.headers["location"] == "/sign-in"
