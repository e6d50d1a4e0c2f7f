from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from workspace_service.app.services.auth_provider import (
    AuthSessionIssued,
    AuthUser,
    CookieToSet,
    SignUpOutcome,
)
from workspace_service.app.use_cases.auth import (
    AuthCallbackUseCase,
    LoginUseCase,
    SignOutUseCase,
    SignUpUseCase,
    safe_redirect_target,
)
from workspace_service.domain.entities import Profile
from workspace_service.libs.result import Error, Return


@pytest.fixture
def auth_provider():
    provider = MagicMock()
    provider.get_user = AsyncMock()
    provider.sign_up = AsyncMock()
    provider.sign_in_with_password = AsyncMock()
    provider.exchange_code_for_session = AsyncMock()
    provider.sign_out = AsyncMock()
    return provider


@pytest.fixture
def user():
    return AuthUser(id=uuid4(), email="ada@example.com")


@pytest.fixture
def issued(user):
    return AuthSessionIssued(
        user=user,
        cookies_to_set=[CookieToSet(name="ws-access-token", value="jwt", max_age=900)],
    )


# Sign up


@pytest.mark.asyncio
async def test_signup_pending_confirmation(auth_provider, user):
    # Arrange
    auth_provider.sign_up.return_value = Return.ok(
        SignUpOutcome(user=user, confirmation_required=True)
    )

    # Act
    result = await SignUpUseCase(auth_provider).execute(
        "ada@example.com", "secret1", "Ada Lovelace"
    )

    # Assert
    assert result.is_ok()
    assert result.value.email_confirmation is True
    assert result.value.redirect_to is None
    assert result.value.cookies_to_set == []
    auth_provider.sign_up.assert_called_once_with(
        "ada@example.com", "secret1", "Ada Lovelace"
    )


@pytest.mark.asyncio
async def test_signup_with_immediate_session(auth_provider, user, issued):
    auth_provider.sign_up.return_value = Return.ok(
        SignUpOutcome(user=user, session=issued, confirmation_required=False)
    )

    result = await SignUpUseCase(auth_provider).execute(
        "ada@example.com", "secret1", "Ada Lovelace"
    )

    assert result.value.email_confirmation is False
    assert result.value.redirect_to == "/onboarding/workspace"
    assert result.value.cookies_to_set == issued.cookies_to_set
    # Cookies never leak into the JSON body
    assert "cookies_to_set" not in result.value.model_dump()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email,password,full_name",
    [
        ("not-an-email", "secret1", "Ada"),
        ("ada@example.com", "12345", "Ada"),
        ("ada@example.com", "secret1", "A"),
    ],
)
async def test_signup_validation(auth_provider, email, password, full_name):
    result = await SignUpUseCase(auth_provider).execute(email, password, full_name)

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    auth_provider.sign_up.assert_not_called()


@pytest.mark.asyncio
async def test_signup_email_taken(auth_provider):
    auth_provider.sign_up.return_value = Return.err(
        Error("EMAIL_ALREADY_EXISTS", "User already registered")
    )

    result = await SignUpUseCase(auth_provider).execute(
        "ada@example.com", "secret1", "Ada"
    )

    assert result.error.code == "EMAIL_ALREADY_EXISTS"


# Login


@pytest.mark.asyncio
async def test_login_redirects_to_target(auth_provider, issued):
    auth_provider.sign_in_with_password.return_value = Return.ok(issued)

    result = await LoginUseCase(auth_provider).execute(
        "ada@example.com", "secret1", "/projects/42"
    )

    assert result.is_ok()
    assert result.value.redirect_to == "/projects/42"
    assert result.value.cookies_to_set == issued.cookies_to_set


@pytest.mark.asyncio
async def test_login_unconfirmed_email_message(auth_provider):
    auth_provider.sign_in_with_password.return_value = Return.err(
        Error("EMAIL_NOT_CONFIRMED", "Email not confirmed")
    )

    result = await LoginUseCase(auth_provider).execute("ada@example.com", "secret1")

    assert result.error.code == "EMAIL_NOT_CONFIRMED"
    assert result.error.message == (
        "Please check your email and confirm your account before logging in."
    )


@pytest.mark.asyncio
async def test_login_bad_credentials_pass_through(auth_provider):
    auth_provider.sign_in_with_password.return_value = Return.err(
        Error("INVALID_CREDENTIALS", "Invalid login credentials")
    )

    result = await LoginUseCase(auth_provider).execute("ada@example.com", "secret1")

    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.parametrize(
    "target,expected",
    [
        (None, "/"),
        ("", "/"),
        ("/board", "/board"),
        ("//evil.example.com", "/"),
        ("https://evil.example.com", "/"),
    ],
)
def test_safe_redirect_target(target, expected):
    assert safe_redirect_target(target) == expected


# Sign out


@pytest.mark.asyncio
async def test_signout_returns_cleared_cookies(auth_provider):
    cleared = [CookieToSet(name="ws-access-token", value="", max_age=0)]
    auth_provider.sign_out.return_value = cleared

    result = await SignOutUseCase(auth_provider).execute({"ws-refresh-token": "x.y"})

    assert result.value.redirect_to == "/login"
    assert result.value.cookies_to_set == cleared


# Auth callback


@pytest.mark.asyncio
async def test_callback_without_code(auth_provider, mock_uow):
    result = await AuthCallbackUseCase(auth_provider, mock_uow).execute(None)

    assert result.value.redirect_to == "/login?error=auth_callback_error"
    auth_provider.exchange_code_for_session.assert_not_called()


@pytest.mark.asyncio
async def test_callback_rejected_code(auth_provider, mock_uow):
    auth_provider.exchange_code_for_session.return_value = Return.err(
        Error("CODE_EXPIRED", "Code has expired")
    )

    result = await AuthCallbackUseCase(auth_provider, mock_uow).execute("abc")

    assert result.value.redirect_to == "/login?error=auth_callback_error"


@pytest.mark.asyncio
async def test_callback_without_profile(auth_provider, mock_uow, issued):
    auth_provider.exchange_code_for_session.return_value = Return.ok(issued)
    mock_uow.profiles.get_by_id.return_value = None

    result = await AuthCallbackUseCase(auth_provider, mock_uow).execute("abc", "/board")

    assert result.value.redirect_to == "/onboarding/profile"
    assert result.value.cookies_to_set == issued.cookies_to_set


@pytest.mark.asyncio
async def test_callback_onboarding_incomplete(auth_provider, mock_uow, user, issued):
    auth_provider.exchange_code_for_session.return_value = Return.ok(issued)
    mock_uow.profiles.get_by_id.return_value = Profile(id=user.id, email=user.email)

    result = await AuthCallbackUseCase(auth_provider, mock_uow).execute("abc", "/board")

    assert result.value.redirect_to == "/onboarding/workspace"


@pytest.mark.asyncio
async def test_callback_onboarded_goes_next(auth_provider, mock_uow, user, issued):
    auth_provider.exchange_code_for_session.return_value = Return.ok(issued)
    mock_uow.profiles.get_by_id.return_value = Profile(
        id=user.id, email=user.email, onboarding_complete=True
    )

    with_next = await AuthCallbackUseCase(auth_provider, mock_uow).execute(
        "abc", "/settings"
    )
    without_next = await AuthCallbackUseCase(auth_provider, mock_uow).execute("abc")

    assert with_next.value.redirect_to == "/settings"
    assert without_next.value.redirect_to == "/"
