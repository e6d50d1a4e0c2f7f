"""
Route Guard

Classifies request paths and decides, from the caller's authentication
state alone, whether the request passes or is redirected.
"""

import re
from enum import Enum
from typing import Optional
from urllib.parse import urlencode

# Routes that require authentication ("/" is matched exactly)
PROTECTED_ROUTES = (
    "/",
    "/board",
    "/settings",
    "/projects",
    "/analytics",
    "/sprints",
    "/agents",
    "/chat",
)

# Routes only for unauthenticated users
AUTH_ROUTES = ("/login", "/signup")

# Routes for onboarding flow
ONBOARDING_ROUTES = ("/onboarding",)

LOGIN_PATH = "/login"
BOARD_PATH = "/board"

_STATIC_ASSET = re.compile(r".*\.(?:svg|png|jpg|jpeg|gif|webp|ico)$")


class RouteKind(str, Enum):
    protected = "protected"
    auth = "auth"
    onboarding = "onboarding"
    public = "public"


def classify_path(path: str) -> RouteKind:
    if path == "/" or any(
        path.startswith(route) for route in PROTECTED_ROUTES if route != "/"
    ):
        return RouteKind.protected
    if any(path.startswith(route) for route in AUTH_ROUTES):
        return RouteKind.auth
    if any(path.startswith(route) for route in ONBOARDING_ROUTES):
        return RouteKind.onboarding
    return RouteKind.public


def is_guarded_path(path: str, api_prefix: str = "/api") -> bool:
    """JSON API calls and static assets skip the redirect rules"""
    if api_prefix and (path == api_prefix or path.startswith(api_prefix + "/")):
        return False
    return not _STATIC_ASSET.match(path)


def login_redirect(return_to: Optional[str] = None) -> str:
    if not return_to:
        return LOGIN_PATH
    return f"{LOGIN_PATH}?{urlencode({'redirectTo': return_to}, safe='/')}"


def guard_redirect(path: str, authenticated: bool) -> Optional[str]:
    """
    Decide where a request should be redirected, if anywhere.

    Args:
        path: Request path
        authenticated: Whether the caller has an active session

    Returns:
        Redirect target, or None when the request passes through unchanged
    """
    kind = classify_path(path)

    # Unauthenticated users leave protected routes, keeping a return target
    if kind == RouteKind.protected and not authenticated:
        return login_redirect(path)

    # Authenticated users have no business on login/signup
    if kind == RouteKind.auth and authenticated:
        return BOARD_PATH

    if kind == RouteKind.onboarding and not authenticated:
        return login_redirect()

    return None
