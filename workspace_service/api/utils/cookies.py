from typing import Iterable, List, Tuple

from starlette.requests import Request
from starlette.responses import Response

from workspace_service.app.services.auth_provider import CookieToSet


def apply_cookies(response: Response, cookies: Iterable[CookieToSet]):
    """Write provider cookie mutations onto an outgoing response"""
    for cookie in cookies:
        if cookie.max_age == 0:
            response.delete_cookie(
                cookie.name,
                path=cookie.path,
                secure=cookie.secure,
                httponly=cookie.httponly,
                samesite=cookie.samesite,
            )
            continue
        response.set_cookie(
            key=cookie.name,
            value=cookie.value,
            max_age=cookie.max_age,
            path=cookie.path,
            secure=cookie.secure,
            httponly=cookie.httponly,
            samesite=cookie.samesite,
        )


def mirror_request_cookies(request: Request, cookies: Iterable[CookieToSet]):
    """
    Rewrite the incoming Cookie header with provider mutations applied.

    Handlers further down the stack then see the rotated tokens, not the
    ones the browser sent.
    """
    jar = dict(request.cookies)
    for cookie in cookies:
        if cookie.max_age == 0:
            jar.pop(cookie.name, None)
        else:
            jar[cookie.name] = cookie.value

    headers: List[Tuple[bytes, bytes]] = [
        (name, value) for name, value in request.scope["headers"] if name != b"cookie"
    ]
    if jar:
        header = "; ".join(f"{name}={value}" for name, value in jar.items())
        headers.append((b"cookie", header.encode("latin-1")))
    request.scope["headers"] = headers
