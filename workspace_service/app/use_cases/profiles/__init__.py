"""
Profile Use Cases

Profile bootstrap, edits, onboarding state and the current-user view.
"""

from .create_profile_use_case import CreateProfileManuallyUseCase
from .dtos import (
    CurrentUserInfo,
    CurrentUserResponse,
    ProfileActionResponse,
    ProfileInfo,
    ProfileResponse,
)
from .get_current_user_use_case import GetCurrentUserUseCase
from .update_profile_use_case import (
    UNSET,
    CompleteOnboardingUseCase,
    GetProfileUseCase,
    UpdateProfileUseCase,
)

__all__ = [
    "CreateProfileManuallyUseCase",
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "CompleteOnboardingUseCase",
    "GetCurrentUserUseCase",
    "UNSET",
    "CurrentUserInfo",
    "CurrentUserResponse",
    "ProfileActionResponse",
    "ProfileInfo",
    "ProfileResponse",
]
