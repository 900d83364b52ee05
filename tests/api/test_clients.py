"""Tests for clients API endpoints."""

from __future__ import annotations

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from client_hub.models import Client, Project, Task


async def _create_client(api_client: AsyncClient, name: str, **extra: object) -> dict:
    response = await api_client.post(
        "/api/clients",
        json={"name": name, "email": f"{name.split()[0].lower()}@example.com", **extra},
    )
    assert response.status_code == 201
    return response.json()


async def _create_project(api_client: AsyncClient, client_id: str, name: str) -> dict:
    response = await api_client.post(
        "/api/projects",
        json={"name": name, "clientId": client_id, "deadline": "2026-11-01"},
    )
    assert response.status_code == 201
    return response.json()


async def _create_task(api_client: AsyncClient, project_id: str, name: str) -> dict:
    response = await api_client.post(
        "/api/tasks",
        json={"name": name, "projectId": project_id, "dueDate": "2026-10-25"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_create_and_get_client(api_client: AsyncClient) -> None:
    """Create client and fetch it by ID."""
    created = await _create_client(
        api_client,
        "Alice Walker",
        company="Walker & Co",
        phone="+1 555 0100",
        logo="data:image/png;base64,iVBORw0KGgo=",
    )
    assert created["name"] == "Alice Walker"
    assert created["email"] == "alice@example.com"
    assert created["company"] == "Walker & Co"
    assert created["phone"] == "+1 555 0100"
    assert created["logo"] == "data:image/png;base64,iVBORw0KGgo="
    assert created["id"]

    get_response = await api_client.get(f"/api/clients/{created['id']}")
    assert get_response.status_code == 200
    assert get_response.json() == created


@pytest.mark.asyncio
async def test_create_client_ignores_supplied_id(api_client: AsyncClient) -> None:
    """A client-supplied id is stripped and a server id assigned."""
    response = await api_client.post(
        "/api/clients",
        json={"id": "my-own-id", "name": "Bob Summers", "email": "bob@example.com"},
    )
    assert response.status_code == 201
    created = response.json()
    assert created["id"] != "my-own-id"

    missing = await api_client.get("/api/clients/my-own-id")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_create_client_requires_name(api_client: AsyncClient) -> None:
    """Blank names are rejected by the request model."""
    response = await api_client.post("/api/clients", json={"name": "   "})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_clients_sorted_by_name(api_client: AsyncClient) -> None:
    """Clients are listed alphabetically by name."""
    await _create_client(api_client, "Charlie Day")
    await _create_client(api_client, "Alice Walker")
    await _create_client(api_client, "Bob Summers")

    response = await api_client.get("/api/clients")
    assert response.status_code == 200
    assert [client["name"] for client in response.json()] == [
        "Alice Walker",
        "Bob Summers",
        "Charlie Day",
    ]


@pytest.mark.asyncio
async def test_update_client_partial(api_client: AsyncClient) -> None:
    """PUT merges only the supplied fields."""
    created = await _create_client(api_client, "Client Name", company="Old Co")

    response = await api_client.put(
        f"/api/clients/{created['id']}",
        json={"id": "ignored", "email": "new@example.com"},
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["id"] == created["id"]
    assert payload["email"] == "new@example.com"
    assert payload["name"] == "Client Name"
    assert payload["company"] == "Old Co"


@pytest.mark.asyncio
async def test_update_client_can_clear_optional_fields(api_client: AsyncClient) -> None:
    """Optional fields such as the logo can be removed."""
    created = await _create_client(api_client, "Logo Client", logo="data:,x")

    response = await api_client.put(
        f"/api/clients/{created['id']}", json={"logo": None}
    )
    assert response.status_code == 200
    assert response.json()["logo"] is None


@pytest.mark.asyncio
async def test_update_missing_client_returns_404_and_changes_nothing(
    api_client: AsyncClient,
) -> None:
    """Updating an unknown id is a 404 and leaves the collection as it was."""
    await _create_client(api_client, "Alice Walker")
    before = (await api_client.get("/api/clients")).json()

    response = await api_client.put("/api/clients/missing", json={"name": "Ghost"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Client with ID missing not found."

    after = (await api_client.get("/api/clients")).json()
    assert after == before


@pytest.mark.asyncio
async def test_get_client_not_found(api_client: AsyncClient) -> None:
    """Unknown client ID returns 404."""
    response = await api_client.get("/api/clients/99999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Client with ID 99999 not found."


@pytest.mark.asyncio
async def test_delete_client_cascades_to_projects_and_tasks(
    api_client: AsyncClient,
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    """Deleting a client removes its projects and their tasks, nothing else."""
    doomed = await _create_client(api_client, "Doomed Client")
    kept = await _create_client(api_client, "Kept Client")

    doomed_projects = [
        await _create_project(api_client, doomed["id"], "Website"),
        await _create_project(api_client, doomed["id"], "Branding"),
    ]
    kept_project = await _create_project(api_client, kept["id"], "Audit")
    for project in doomed_projects:
        await _create_task(api_client, project["id"], f"{project['name']} kickoff")
    kept_task = await _create_task(api_client, kept_project["id"], "Audit kickoff")

    response = await api_client.delete(f"/api/clients/{doomed['id']}")
    assert response.status_code == 204
    assert response.content == b""

    async with session_factory() as session:
        orphan_projects = await session.scalar(
            select(func.count(Project.id)).where(Project.client_id == doomed["id"])
        )
        orphan_tasks = await session.scalar(
            select(func.count(Task.id)).where(
                Task.project_id.in_([project["id"] for project in doomed_projects])
            )
        )
        remaining_clients = (await session.execute(select(Client.id))).scalars().all()
    assert orphan_projects == 0
    assert orphan_tasks == 0
    assert remaining_clients == [kept["id"]]

    projects = (await api_client.get("/api/projects")).json()
    tasks = (await api_client.get("/api/tasks")).json()
    assert [project["id"] for project in projects] == [kept_project["id"]]
    assert [task["id"] for task in tasks] == [kept_task["id"]]


@pytest.mark.asyncio
async def test_delete_missing_client_returns_404(api_client: AsyncClient) -> None:
    """Deleting an unknown client is a 404."""
    response = await api_client.delete("/api/clients/missing")
    assert response.status_code == 404
    assert response.json()["detail"] == "Client with ID missing not found."
