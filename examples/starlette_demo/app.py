import logging

from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.sessions import SessionMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route

from routeguard import DecisionLogger, GuardContext, RouteGuardEngine, RoutePaths
from routeguard.adapters.starlette import require_route
from routeguard.core.guards import make_public_only, make_require_auth, make_require_onboarding
from routeguard.metrics.prometheus import PrometheusMetrics

logging.basicConfig(level=logging.INFO)

paths = RoutePaths.from_env()
metrics = PrometheusMetrics()
audit = DecisionLogger(as_json=True, smart_sampling=True, sample_rate=0.1)

protected = RouteGuardEngine(
    [make_require_auth(paths), make_require_onboarding(paths)],
    metrics=metrics,
    logger_sink=audit,
    fallback_path=paths.sign_in,
)
visitors_only = RouteGuardEngine([make_public_only(paths)], metrics=metrics, logger_sink=audit)


def build_context(request: Request) -> GuardContext:
    # Demo only: identity comes from headers instead of a real session.
    h = request.headers
    return GuardContext(
        is_authenticated=h.get("x-user") is not None,
        is_new_user=h.get("x-new-user") == "1",
        onboarding_complete=h.get("x-onboarded") == "1",
        current_path=request.url.path,
    )


@require_route(protected, build_context, return_url=True, paths=paths, add_headers=True)
async def dashboard(request):
    return JSONResponse({"ok": True})


@require_route(visitors_only, build_context, paths=paths)
async def login(request):
    return PlainTextResponse("sign in")


def metrics_endpoint(request):
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


app = Starlette(
    routes=[
        Route(paths.landing, dashboard),
        Route(paths.sign_in, login),
        Route("/metrics", metrics_endpoint),
    ],
    middleware=[Middleware(SessionMiddleware, secret_key="change-me")],
)
