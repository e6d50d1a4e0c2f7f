from starlette.requests import Request
from starlette.responses import Response

from workspace_service.api.utils.cookies import apply_cookies, mirror_request_cookies
from workspace_service.app.services.auth_provider import CookieToSet


def _request(cookie_header):
    headers = [(b"host", b"test")]
    if cookie_header:
        headers.append((b"cookie", cookie_header.encode()))
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


def test_mirror_replaces_and_drops_cookies():
    request = _request("ws-access-token=old; ws-refresh-token=r1; theme=dark")

    mirror_request_cookies(
        request,
        [
            CookieToSet(name="ws-access-token", value="", max_age=0),
            CookieToSet(name="ws-refresh-token", value="r2", max_age=60),
        ],
    )

    downstream = Request(request.scope)
    assert downstream.cookies == {"ws-refresh-token": "r2", "theme": "dark"}
    assert (b"host", b"test") in request.scope["headers"]


def test_mirror_drops_header_when_jar_empty():
    request = _request("ws-access-token=old")

    mirror_request_cookies(
        request, [CookieToSet(name="ws-access-token", value="", max_age=0)]
    )

    assert all(name != b"cookie" for name, _ in request.scope["headers"])


def test_apply_cookies_sets_and_deletes():
    response = Response()

    apply_cookies(
        response,
        [
            CookieToSet(name="ws-access-token", value="jwt", max_age=900),
            CookieToSet(name="ws-refresh-token", value="", max_age=0),
        ],
    )

    set_cookies = response.headers.getlist("set-cookie")
    assert any(h.startswith("ws-access-token=jwt") and "HttpOnly" in h for h in set_cookies)
    assert any(h.startswith("ws-refresh-token=") and "Max-Age=0" in h for h in set_cookies)
