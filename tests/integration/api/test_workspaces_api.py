import pytest
from httpx import AsyncClient
from sqlalchemy import func
from sqlmodel import select

from tests.utils.session import cookie_header, create_workspace, sign_up_and_confirm
from workspace_service.domain.entities import Workspace, WorkspaceMember


async def _count(db_session, model):
    result = await db_session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


@pytest.mark.asyncio
async def test_create_workspace_completes_onboarding(client: AsyncClient, db_session):
    # Arrange
    jar = await sign_up_and_confirm(client, db_session, "owner@example.com")

    # Act
    response = await client.post(
        "/api/workspaces",
        json={"name": "Acme Corp", "slug": "Acme Corp"},
        headers=cookie_header(jar),
    )

    # Assert
    assert response.status_code == 201
    body = response.json()
    assert body["redirect_to"] == "/board"
    assert body["workspace"]["slug"] == "acme-corp"

    me = (await client.get("/api/auth/user", headers=cookie_header(jar))).json()
    assert me["profile"]["onboarding_complete"] is True
    assert me["membership"]["role"] == "owner"
    assert me["membership"]["workspace_id"] == body["workspace"]["id"]

    listed = await client.get("/api/workspaces", headers=cookie_header(jar))
    assert [w["slug"] for w in listed.json()["workspaces"]] == ["acme-corp"]


@pytest.mark.asyncio
async def test_duplicate_slug_writes_nothing(client: AsyncClient, db_session):
    # Arrange
    owner = await sign_up_and_confirm(client, db_session, "first@example.com")
    other = await sign_up_and_confirm(client, db_session, "second@example.com")
    await create_workspace(client, owner, "Acme", "acme")
    workspaces_before = await _count(db_session, Workspace)
    members_before = await _count(db_session, WorkspaceMember)

    # Act
    response = await client.post(
        "/api/workspaces",
        json={"name": "Other Acme", "slug": "acme"},
        headers=cookie_header(other),
    )

    # Assert
    assert response.status_code == 409
    assert response.json()["error"] == {
        "code": "SLUG_TAKEN",
        "message": "A workspace with the slug 'acme' already exists",
        "slug": "acme",
    }
    assert await _count(db_session, Workspace) == workspaces_before
    assert await _count(db_session, WorkspaceMember) == members_before


@pytest.mark.asyncio
async def test_invalid_slug(client: AsyncClient, db_session):
    jar = await sign_up_and_confirm(client, db_session, "slug@example.com")

    response = await client.post(
        "/api/workspaces",
        json={"name": "Acme", "slug": "acme_corp"},
        headers=cookie_header(jar),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_add_member_and_change_role(client: AsyncClient, db_session):
    # Arrange
    owner = await sign_up_and_confirm(client, db_session, "boss@example.com")
    await sign_up_and_confirm(client, db_session, "teammate@example.com")
    workspace_id = await create_workspace(client, owner, "Team", "team")

    # Add by email
    response = await client.post(
        f"/api/workspaces/{workspace_id}/members",
        json={"email": "teammate@example.com", "role": "viewer"},
        headers=cookie_header(owner),
    )
    assert response.status_code == 201
    teammate_id = response.json()["membership"]["user_id"]

    # Adding again conflicts
    response = await client.post(
        f"/api/workspaces/{workspace_id}/members",
        json={"email": "teammate@example.com"},
        headers=cookie_header(owner),
    )
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ALREADY_MEMBER"

    # Promote
    response = await client.patch(
        f"/api/workspaces/{workspace_id}/members/{teammate_id}",
        json={"role": "admin"},
        headers=cookie_header(owner),
    )
    assert response.status_code == 200
    assert response.json()["membership"]["role"] == "admin"
    assert response.json()["membership"]["role_name"] == "Admin"


@pytest.mark.asyncio
async def test_owner_role_is_fixed(client: AsyncClient, db_session):
    owner = await sign_up_and_confirm(client, db_session, "fixed@example.com")
    workspace_id = await create_workspace(client, owner, "Fixed", "fixed")
    me = (await client.get("/api/auth/user", headers=cookie_header(owner))).json()

    response = await client.patch(
        f"/api/workspaces/{workspace_id}/members/{me['user']['id']}",
        json={"role": "admin"},
        headers=cookie_header(owner),
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "CANNOT_CHANGE_OWNER"


@pytest.mark.asyncio
async def test_add_unknown_user(client: AsyncClient, db_session):
    owner = await sign_up_and_confirm(client, db_session, "lonely@example.com")
    workspace_id = await create_workspace(client, owner, "Lonely", "lonely")

    response = await client.post(
        f"/api/workspaces/{workspace_id}/members",
        json={"email": "ghost@example.com"},
        headers=cookie_header(owner),
    )

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "User not found. They must sign up first."
