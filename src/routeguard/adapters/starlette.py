from __future__ import annotations

import inspect
from typing import Any, Callable, Optional

from starlette.concurrency import run_in_threadpool
from starlette.responses import RedirectResponse

from ..core.paths import DEFAULT_PATHS, RoutePaths
from ..core.redirect import remember_return_url, resolve_redirect
from ._common import ContextBuilder, decide, deny_headers


def require_route(
    guard: Callable[..., Any],
    build_context: ContextBuilder,
    *,
    fallback_path: Optional[str] = None,
    redirect_override: Optional[str] = None,
    add_headers: bool = False,
    return_url: bool = False,
    paths: RoutePaths = DEFAULT_PATHS,
    status_code: int = 307,
) -> Callable[..., Any]:
    """
    Starlette adapter that works both:
      - as a decorator on an endpoint (returns an async endpoint)
      - as a dependency-like callable: `dep = require_route(...); await dep(request)`
        which resolves to None when allowed or a RedirectResponse when denied.

    With ``return_url=True`` the requested path is stored in ``request.session``
    (requires SessionMiddleware) before redirecting to the sign-in page.
    """
    fallback = fallback_path or paths.sign_in

    async def _dependency(request: Any) -> Optional[RedirectResponse]:
        context, result = await decide(guard, build_context, request, fallback)
        target = resolve_redirect(result, fallback_path=fallback, override=redirect_override)
        if target is None:
            return None
        if return_url and target == paths.sign_in and context is not None:
            if "session" in getattr(request, "scope", {}):
                remember_return_url(request.session, context.current_path, paths.sign_in)
        return RedirectResponse(
            target, status_code=status_code, headers=deny_headers(result, add_headers)
        )

    def _decorator_or_dependency(arg: Any):
        # If arg looks like a Starlette handler (callable), act as decorator.
        if callable(arg):
            handler = arg

            if inspect.iscoroutinefunction(handler):
                async def _endpoint_async(request: Any):
                    redirect = await _dependency(request)
                    if redirect is not None:
                        return redirect
                    return await handler(request)

                return _endpoint_async

            async def _endpoint_sync(request: Any):
                redirect = await _dependency(request)
                if redirect is not None:
                    return redirect
                return await run_in_threadpool(handler, request)

            return _endpoint_sync

        # Otherwise, act as dependency: expect `request`.
        return _dependency(arg)

    return _decorator_or_dependency


__all__ = ["require_route"]
