"""
Login Use Case

Exchanges email and password for a session.
"""

from typing import Optional

from workspace_service.app.services.auth_provider import IAuthProvider
from workspace_service.app.use_cases.validators import validate_email, validate_password
from workspace_service.libs.result import Error, Result, Return

from .dtos import AuthUserInfo, LoginResponse


def safe_redirect_target(target: Optional[str], default: str = "/") -> str:
    """Only same-site absolute paths are honored as post-login targets"""
    if not target or not target.startswith("/") or target.startswith("//"):
        return default
    return target


class LoginUseCase:
    """
    Use case for password login.

    Business Rules:
    - Email must be valid, password at least 6 characters
    - An unconfirmed email gets a message asking the user to confirm first
    - On success the user goes to redirect_to, or "/" when absent
    """

    def __init__(self, auth_provider: IAuthProvider):
        self.auth_provider = auth_provider

    async def execute(
        self, email: str, password: str, redirect_to: Optional[str] = None
    ) -> Result[LoginResponse]:
        checked_email = validate_email(email)
        if checked_email.is_err():
            return checked_email
        checked_password = validate_password(password)
        if checked_password.is_err():
            return checked_password

        session = await self.auth_provider.sign_in_with_password(
            checked_email.value, checked_password.value
        )
        if session.is_err():
            if session.error.code == "EMAIL_NOT_CONFIRMED":
                return Return.err(
                    Error(
                        "EMAIL_NOT_CONFIRMED",
                        "Please check your email and confirm your account before logging in.",
                    )
                )
            return session

        issued = session.value
        return Return.ok(
            LoginResponse(
                success=True,
                user=AuthUserInfo(id=str(issued.user.id), email=issued.user.email),
                redirect_to=safe_redirect_target(redirect_to),
                cookies_to_set=issued.cookies_to_set,
            )
        )
