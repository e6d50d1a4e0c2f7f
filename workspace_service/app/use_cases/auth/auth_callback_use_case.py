"""
Auth Callback Use Case

Handles the redirect back from an email confirmation link.
"""

import logging
from typing import Optional

from workspace_service.app.services.auth_provider import IAuthProvider
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.libs.result import Result, Return

from .dtos import AuthCallbackResponse
from .login_use_case import safe_redirect_target

logger = logging.getLogger(__name__)

CALLBACK_ERROR_PATH = "/login?error=auth_callback_error"


class AuthCallbackUseCase:
    """
    Use case for exchanging a one-time code for a session.

    Business Rules:
    - A missing or rejected code sends the user back to login with an error
    - No profile yet: continue with profile onboarding
    - Onboarding incomplete: continue with workspace onboarding
    - Otherwise go to `next` (default "/")
    """

    def __init__(self, auth_provider: IAuthProvider, uow: UnitOfWork):
        self.auth_provider = auth_provider
        self.uow = uow

    async def execute(
        self, code: Optional[str], next_path: Optional[str] = None
    ) -> Result[AuthCallbackResponse]:
        if not code:
            return Return.ok(AuthCallbackResponse(redirect_to=CALLBACK_ERROR_PATH))

        session = await self.auth_provider.exchange_code_for_session(code)
        if session.is_err():
            logger.warning("Auth callback code rejected: %s", session.error.code)
            return Return.ok(AuthCallbackResponse(redirect_to=CALLBACK_ERROR_PATH))

        issued = session.value
        # Loaded rows expire when the unit of work rolls back on exit
        async with self.uow:
            profile = await self.uow.profiles.get_by_id(issued.user.id)
            if profile is None:
                redirect_to = "/onboarding/profile"
            elif not profile.onboarding_complete:
                redirect_to = "/onboarding/workspace"
            else:
                redirect_to = safe_redirect_target(next_path)

        return Return.ok(
            AuthCallbackResponse(
                redirect_to=redirect_to, cookies_to_set=issued.cookies_to_set
            )
        )
