"""
Authentication Use Cases

Sign up, login, sign out and the confirmation callback.
"""

from .auth_callback_use_case import AuthCallbackUseCase
from .dtos import (
    AuthCallbackResponse,
    AuthUserInfo,
    LoginResponse,
    SignOutResponse,
    SignUpResponse,
)
from .login_use_case import LoginUseCase, safe_redirect_target
from .signout_use_case import SignOutUseCase
from .signup_use_case import SignUpUseCase

__all__ = [
    # Use Cases
    "SignUpUseCase",
    "LoginUseCase",
    "SignOutUseCase",
    "AuthCallbackUseCase",
    "safe_redirect_target",
    # DTOs
    "AuthCallbackResponse",
    "AuthUserInfo",
    "LoginResponse",
    "SignOutResponse",
    "SignUpResponse",
]
