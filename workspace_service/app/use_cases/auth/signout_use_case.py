from typing import Dict

from workspace_service.app.services.auth_provider import IAuthProvider
from workspace_service.libs.result import Result, Return

from .dtos import SignOutResponse


class SignOutUseCase:
    """Revokes the current session and clears its cookies"""

    def __init__(self, auth_provider: IAuthProvider):
        self.auth_provider = auth_provider

    async def execute(self, cookies: Dict[str, str]) -> Result[SignOutResponse]:
        cleared = await self.auth_provider.sign_out(cookies)
        return Return.ok(
            SignOutResponse(success=True, redirect_to="/login", cookies_to_set=cleared)
        )
