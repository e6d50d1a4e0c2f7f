from uuid import uuid4

import pytest

from workspace_service.app.repositories.errors import ConflictError
from workspace_service.app.use_cases.profiles import (
    CompleteOnboardingUseCase,
    CreateProfileManuallyUseCase,
    GetCurrentUserUseCase,
    GetProfileUseCase,
    UpdateProfileUseCase,
)
from workspace_service.domain.entities import Profile, WorkspaceMember, WorkspaceRole


@pytest.mark.asyncio
async def test_create_profile(mock_uow, actor):
    # Arrange
    mock_uow.profiles.get_by_id.return_value = None

    # Act
    result = await CreateProfileManuallyUseCase(mock_uow).execute(actor, "  Ada Lovelace ")

    # Assert
    assert result.is_ok()
    created = mock_uow.profiles.create.call_args[0][0]
    assert created.id == actor.id
    assert created.email == actor.email
    assert created.full_name == "Ada Lovelace"
    assert created.onboarding_complete is False
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_profile_when_present_is_success(mock_uow, actor):
    mock_uow.profiles.get_by_id.return_value = Profile(id=actor.id, email=actor.email)

    result = await CreateProfileManuallyUseCase(mock_uow).execute(actor, "Ada")

    assert result.is_ok()
    mock_uow.profiles.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_profile_conflict_is_success(mock_uow, actor):
    """A profile inserted concurrently by sign-up is not an error"""
    mock_uow.profiles.get_by_id.return_value = None
    mock_uow.profiles.create.side_effect = ConflictError("profile")

    result = await CreateProfileManuallyUseCase(mock_uow).execute(actor, "Ada")

    assert result.is_ok()
    assert result.value.success is True
    mock_uow.rollback.assert_called_once()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_create_profile_short_name(mock_uow, actor):
    result = await CreateProfileManuallyUseCase(mock_uow).execute(actor, "A")

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_create_profile_signed_out(mock_uow):
    result = await CreateProfileManuallyUseCase(mock_uow).execute(None, "Ada")

    assert result.error.code == "NOT_AUTHENTICATED"


@pytest.mark.asyncio
async def test_update_profile_sets_and_clears_avatar(mock_uow, actor):
    # Arrange
    profile = Profile(
        id=actor.id, email=actor.email, full_name="Ada", avatar_url="https://x.test/a.png"
    )
    before = profile.updated_at
    mock_uow.profiles.get_by_id.return_value = profile

    # Act
    result = await UpdateProfileUseCase(mock_uow).execute(
        actor, full_name="Ada King", avatar_url=None
    )

    # Assert
    assert result.is_ok()
    assert profile.full_name == "Ada King"
    assert profile.avatar_url is None
    assert profile.updated_at >= before
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_profile_omitted_avatar_untouched(mock_uow, actor):
    profile = Profile(id=actor.id, email=actor.email, avatar_url="https://x.test/a.png")
    mock_uow.profiles.get_by_id.return_value = profile

    result = await UpdateProfileUseCase(mock_uow).execute(actor, full_name="Ada")

    assert result.is_ok()
    assert profile.avatar_url == "https://x.test/a.png"


@pytest.mark.asyncio
async def test_update_profile_bad_avatar(mock_uow, actor):
    result = await UpdateProfileUseCase(mock_uow).execute(actor, avatar_url="ftp://x")

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.profiles.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_update_missing_profile(mock_uow, actor):
    mock_uow.profiles.get_by_id.return_value = None

    result = await UpdateProfileUseCase(mock_uow).execute(actor, full_name="Ada")

    assert result.is_err()
    assert result.error.code == "PROFILE_NOT_FOUND"


@pytest.mark.asyncio
async def test_complete_onboarding(mock_uow, actor):
    profile = Profile(id=actor.id, email=actor.email)
    mock_uow.profiles.get_by_id.return_value = profile

    result = await CompleteOnboardingUseCase(mock_uow).execute(actor)

    assert result.is_ok()
    assert profile.onboarding_complete is True
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_get_profile_absent(mock_uow, actor):
    mock_uow.profiles.get_by_id.return_value = None

    result = await GetProfileUseCase(mock_uow).execute(actor)

    assert result.is_ok()
    assert result.value.profile is None


@pytest.mark.asyncio
async def test_current_user_signed_out(mock_uow):
    result = await GetCurrentUserUseCase(mock_uow).execute(None)

    assert result.is_ok()
    assert result.value.user is None
    assert result.value.membership is None
    mock_uow.profiles.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_current_user_uses_first_membership(mock_uow, actor):
    # Arrange
    first = WorkspaceMember(workspace_id=uuid4(), user_id=actor.id, role=WorkspaceRole.owner)
    second = WorkspaceMember(workspace_id=uuid4(), user_id=actor.id, role=WorkspaceRole.viewer)
    mock_uow.profiles.get_by_id.return_value = Profile(
        id=actor.id, email=actor.email, full_name="Ada", onboarding_complete=True
    )
    mock_uow.members.get_by_user_id.return_value = [first, second]

    # Act
    result = await GetCurrentUserUseCase(mock_uow).execute(actor)

    # Assert
    response = result.value
    assert response.user.id == str(actor.id)
    assert response.profile.full_name == "Ada"
    assert response.membership.workspace_id == str(first.workspace_id)
    assert response.membership.role == "owner"
