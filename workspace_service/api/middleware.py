"""
HTTP middleware: session resolution with route guarding, request logging.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

from workspace_service.api.utils.cookies import apply_cookies, mirror_request_cookies
from workspace_service.app.services.route_guard import guard_redirect, is_guarded_path

logger = logging.getLogger(__name__)


class SessionGuardMiddleware(BaseHTTPMiddleware):
    """
    Resolve the caller's session on every request.

    - Rotated or cleared cookies are mirrored onto the request (for the
      handlers) and onto the response (for the browser), redirects included
    - The resolved user is stored on request.state.auth_user
    - Page paths are redirected per the route guard; API calls never are
    """

    def __init__(self, app, api_prefix: str = "/api"):
        super().__init__(app)
        self.api_prefix = api_prefix

    async def dispatch(self, request: Request, call_next) -> Response:
        async with request.app.state.auth_provider_scope() as provider:
            lookup = await provider.get_user(dict(request.cookies))

        if lookup.cookies_to_set:
            mirror_request_cookies(request, lookup.cookies_to_set)
        request.state.auth_user = lookup.user

        path = request.url.path
        target = None
        if is_guarded_path(path, self.api_prefix):
            target = guard_redirect(path, authenticated=lookup.user is not None)

        if target is not None:
            logger.debug("Redirecting %s to %s", path, target)
            response = RedirectResponse(target, status_code=307)
        else:
            response = await call_next(request)

        apply_cookies(response, lookup.cookies_to_set)
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of each request"""

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
