from __future__ import annotations

import logging
import logging.config

from litestar import Litestar, get

from routeguard import GuardContext, RouteGuardEngine, combine_guards, require_auth, require_onboarding
from routeguard.adapters.litestar import RouteGuardMiddleware
from routeguard.logging.decision_logger import DecisionLogger

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {"default": {"format": "%(asctime)s %(levelname)s %(name)s [%(trace_id)s]: %(message)s"}},
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "default", "filters": ["trace"]}
    },
    "filters": {"trace": {"()": "routeguard.logging.context.TraceIdFilter"}},
    "root": {"level": "INFO", "handlers": ["console"]},
}
logging.config.dictConfig(LOGGING)

engine = RouteGuardEngine(
    [combine_guards(require_auth, require_onboarding)],
    logger_sink=DecisionLogger(as_json=True),
)


def build_context(scope) -> GuardContext:
    headers = {k.decode().lower(): v.decode() for k, v in scope.get("headers", [])}
    return GuardContext(
        is_authenticated="x-user" in headers,
        is_new_user=headers.get("x-new-user") == "1",
        onboarding_complete=headers.get("x-onboarded") == "1",
        current_path=scope["path"],
    )


@get("/dashboard")
async def dashboard() -> dict:
    return {"ok": True}


@get("/health")
async def health() -> dict:
    return {"ok": True}


app = Litestar(
    route_handlers=[dashboard, health],
    middleware=[RouteGuardMiddleware(guard=engine, build_context=build_context, exclude_path_pattern="^/health")],
)

# Run: uvicorn examples.litestar_demo.app:app --reload
