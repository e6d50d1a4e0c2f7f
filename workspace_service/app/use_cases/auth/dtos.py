"""
Authentication Use Case DTOs (Data Transfer Objects)

Cookies issued by the auth provider travel with each response but are
excluded from its JSON body; the API layer writes them onto the response.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from workspace_service.app.services.auth_provider import CookieToSet


class AuthUserInfo(BaseModel):
    id: str
    email: str


class SignUpResponse(BaseModel):
    """Response for sign up use case"""

    success: bool
    email_confirmation: bool
    user: AuthUserInfo
    redirect_to: Optional[str] = None
    cookies_to_set: List[CookieToSet] = Field(default_factory=list, exclude=True)


class LoginResponse(BaseModel):
    """Response for login use case"""

    success: bool
    user: AuthUserInfo
    redirect_to: str
    cookies_to_set: List[CookieToSet] = Field(default_factory=list, exclude=True)


class SignOutResponse(BaseModel):
    """Response for sign out use case"""

    success: bool
    redirect_to: str
    cookies_to_set: List[CookieToSet] = Field(default_factory=list, exclude=True)


class AuthCallbackResponse(BaseModel):
    """Where to send the browser after a code exchange"""

    redirect_to: str
    cookies_to_set: List[CookieToSet] = Field(default_factory=list, exclude=True)
