"""
Profile Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional

from pydantic import BaseModel

from workspace_service.app.use_cases.workspaces.dtos import MemberInfo
from workspace_service.domain.entities import Profile


class ProfileInfo(BaseModel):
    """Profile as returned to callers"""

    id: str
    email: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    onboarding_complete: bool
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileInfo":
        return cls(
            id=str(profile.id),
            email=profile.email,
            full_name=profile.full_name,
            avatar_url=profile.avatar_url,
            onboarding_complete=profile.onboarding_complete,
            created_at=profile.created_at.isoformat(),
            updated_at=profile.updated_at.isoformat(),
        )


class ProfileActionResponse(BaseModel):
    """Response for profile writes"""

    success: bool


class ProfileResponse(BaseModel):
    """Response for get profile use case"""

    profile: Optional[ProfileInfo] = None


class CurrentUserInfo(BaseModel):
    id: str
    email: str


class CurrentUserResponse(BaseModel):
    """Signed-in user with profile and first workspace membership"""

    user: Optional[CurrentUserInfo] = None
    profile: Optional[ProfileInfo] = None
    membership: Optional[MemberInfo] = None
