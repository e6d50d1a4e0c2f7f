"""
Auth Provider Interface

Contract consumed from the identity provider: session lookup from cookies,
password sign-up/sign-in, one-time code exchange and sign-out. Every call
that can rotate the session reports the cookies the caller must write back.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from workspace_service.libs.result import Result


class AuthUser(BaseModel):
    """Authenticated identity"""

    id: UUID
    email: str


class CookieToSet(BaseModel):
    """A cookie mutation emitted by the provider"""

    name: str
    value: str
    max_age: Optional[int] = None
    path: str = "/"
    httponly: bool = True
    secure: bool = False
    samesite: str = "lax"


class SessionLookup(BaseModel):
    """Outcome of resolving the caller's session"""

    user: Optional[AuthUser] = None
    cookies_to_set: List[CookieToSet] = Field(default_factory=list)


class AuthSessionIssued(BaseModel):
    """A freshly issued session"""

    user: AuthUser
    cookies_to_set: List[CookieToSet] = Field(default_factory=list)


class SignUpOutcome(BaseModel):
    """Result of a sign-up: either a session, or a pending confirmation"""

    user: AuthUser
    session: Optional[AuthSessionIssued] = None
    confirmation_required: bool = False


class IAuthProvider(ABC):
    """Auth provider interface - application layer"""

    @abstractmethod
    async def get_user(self, cookies: Dict[str, str]) -> SessionLookup:
        """Resolve the session carried by the request cookies"""
        pass

    @abstractmethod
    async def sign_up(
        self, email: str, password: str, full_name: str
    ) -> Result[SignUpOutcome]:
        """Register a new account"""
        pass

    @abstractmethod
    async def sign_in_with_password(
        self, email: str, password: str
    ) -> Result[AuthSessionIssued]:
        """Exchange credentials for a session"""
        pass

    @abstractmethod
    async def exchange_code_for_session(self, code: str) -> Result[AuthSessionIssued]:
        """Exchange a one-time confirmation code for a session"""
        pass

    @abstractmethod
    async def sign_out(self, cookies: Dict[str, str]) -> List[CookieToSet]:
        """Revoke the current session, returns cookie deletions"""
        pass
