"""
Sign Up Use Case

Registers an account through the auth provider.
"""

from workspace_service.app.services.auth_provider import IAuthProvider
from workspace_service.app.use_cases.validators import (
    validate_email,
    validate_full_name,
    validate_password,
)
from workspace_service.libs.result import Result, Return

from .dtos import AuthUserInfo, SignUpResponse

ONBOARDING_WORKSPACE_PATH = "/onboarding/workspace"


class SignUpUseCase:
    """
    Use case for creating an account.

    Business Rules:
    - Email must be valid, password at least 6 characters, name at least 2
    - When the provider requires email confirmation no session is issued and
      the response asks the user to check their email
    - Otherwise the new session's cookies are returned and the user is sent
      to workspace onboarding
    """

    def __init__(self, auth_provider: IAuthProvider):
        self.auth_provider = auth_provider

    async def execute(
        self, email: str, password: str, full_name: str
    ) -> Result[SignUpResponse]:
        checked_email = validate_email(email)
        if checked_email.is_err():
            return checked_email
        checked_password = validate_password(password)
        if checked_password.is_err():
            return checked_password
        checked_name = validate_full_name(full_name)
        if checked_name.is_err():
            return checked_name

        outcome = await self.auth_provider.sign_up(
            checked_email.value, checked_password.value, checked_name.value
        )
        if outcome.is_err():
            return outcome

        signed_up = outcome.value
        user = AuthUserInfo(id=str(signed_up.user.id), email=signed_up.user.email)

        if signed_up.confirmation_required or signed_up.session is None:
            return Return.ok(
                SignUpResponse(success=True, email_confirmation=True, user=user)
            )

        return Return.ok(
            SignUpResponse(
                success=True,
                email_confirmation=False,
                user=user,
                redirect_to=ONBOARDING_WORKSPACE_PATH,
                cookies_to_set=signed_up.session.cookies_to_set,
            )
        )
