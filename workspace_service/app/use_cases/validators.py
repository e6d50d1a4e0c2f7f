"""
Input Validators

Each validator returns Result: the normalized value, or a VALIDATION_ERROR /
INVALID_ROLE error whose message is shown to the user verbatim.
"""

import re
from typing import Optional, Sequence

from email_validator import EmailNotValidError, validate_email as check_email
from pydantic import HttpUrl, TypeAdapter, ValidationError

from workspace_service.domain.entities import WorkspaceRole
from workspace_service.domain.roles import ASSIGNABLE_ROLES
from workspace_service.libs.result import Error, Result, Return

SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")
_WHITESPACE = re.compile(r"\s+")
_HTTP_URL = TypeAdapter(HttpUrl)


def _invalid(message: str) -> Result:
    return Return.err(Error("VALIDATION_ERROR", message))


def validate_email(email: Optional[str]) -> Result[str]:
    if not email:
        return _invalid("Please enter a valid email address")
    try:
        info = check_email(email, check_deliverability=False)
    except EmailNotValidError:
        return _invalid("Please enter a valid email address")
    return Return.ok(info.normalized)


def validate_password(password: Optional[str]) -> Result[str]:
    if not password or len(password) < 6:
        return _invalid("Password must be at least 6 characters")
    return Return.ok(password)


def validate_full_name(full_name: Optional[str]) -> Result[str]:
    full_name = (full_name or "").strip()
    if len(full_name) < 2:
        return _invalid("Name must be at least 2 characters")
    return Return.ok(full_name)


def validate_workspace_name(name: Optional[str]) -> Result[str]:
    name = (name or "").strip()
    if len(name) < 2:
        return _invalid("Workspace name must be at least 2 characters")
    return Return.ok(name)


def normalize_slug(slug: Optional[str]) -> str:
    """Lower-case the slug and turn runs of whitespace into hyphens"""
    return _WHITESPACE.sub("-", (slug or "").strip().lower())


def validate_slug(slug: Optional[str]) -> Result[str]:
    slug = normalize_slug(slug)
    if len(slug) < 2:
        return _invalid("Slug must be at least 2 characters")
    if not SLUG_PATTERN.match(slug):
        return _invalid("Slug must be lowercase letters, numbers, and hyphens only")
    return Return.ok(slug)


def validate_avatar_url(avatar_url: Optional[str]) -> Result[Optional[str]]:
    if avatar_url is None:
        return Return.ok(None)
    try:
        _HTTP_URL.validate_python(avatar_url)
    except ValidationError:
        return _invalid("Avatar must be a valid URL")
    return Return.ok(avatar_url)


def validate_role(
    role: Optional[str], allowed: Sequence[WorkspaceRole] = ASSIGNABLE_ROLES
) -> Result[WorkspaceRole]:
    names = ", ".join(r.value for r in allowed)
    try:
        parsed = WorkspaceRole(role)
    except ValueError:
        return Return.err(
            Error("INVALID_ROLE", f"Invalid role: {role}. Must be one of: {names}")
        )
    if parsed not in allowed:
        return Return.err(
            Error("INVALID_ROLE", f"Invalid role: {role}. Must be one of: {names}")
        )
    return Return.ok(parsed)
