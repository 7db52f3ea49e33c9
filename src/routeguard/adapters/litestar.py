import logging
from typing import Any, Callable, Optional

from litestar.enums import ScopeType
from litestar.middleware import ASGIMiddleware
from litestar.types import ASGIApp, Receive, Scope, Send
from starlette.responses import RedirectResponse

from ..core.paths import DEFAULT_PATHS, RoutePaths
from ..core.redirect import resolve_redirect
from ._common import ContextBuilder, decide, deny_headers

logger = logging.getLogger(__name__)


class RouteGuardMiddleware(ASGIMiddleware):
    """Litestar middleware that enforces a route guard on HTTP requests.

    ``build_context`` receives the ASGI scope. Denials become redirects; if the
    context or the guard fails, the request is redirected to ``fallback_path``.
    """

    scopes = (ScopeType.HTTP,)

    def __init__(
        self,
        *,
        guard: Callable[..., Any],
        build_context: ContextBuilder,
        fallback_path: Optional[str] = None,
        add_headers: bool = False,
        exclude_path_pattern: str | tuple[str, ...] | None = None,
        paths: RoutePaths = DEFAULT_PATHS,
        status_code: int = 307,
    ) -> None:
        self.guard = guard
        self.build_context = build_context
        self.fallback_path = fallback_path or paths.sign_in
        self.add_headers = add_headers
        self.exclude_path_pattern = exclude_path_pattern
        self.status_code = status_code

    async def handle(self, scope: Scope, receive: Receive, send: Send, next_app: ASGIApp) -> None:
        _, result = await decide(self.guard, self.build_context, scope, self.fallback_path)
        target = resolve_redirect(result, fallback_path=self.fallback_path)
        if target is None:
            await next_app(scope, receive, send)
            return

        logger.debug("routeguard: redirecting %s -> %s", scope.get("path"), target)
        res = RedirectResponse(
            target, status_code=self.status_code, headers=deny_headers(result, self.add_headers)
        )
        await res(scope, receive, send)  # type: ignore[arg-type]


__all__ = ["RouteGuardMiddleware"]
