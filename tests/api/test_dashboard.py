"""Tests for the dashboard endpoint."""

from __future__ import annotations

import pytest
from httpx import AsyncClient


async def _post(api_client: AsyncClient, resource: str, payload: dict) -> dict:
    response = await api_client.post(f"/api/{resource}", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_dashboard_empty(api_client: AsyncClient) -> None:
    """An empty store yields zeroed counts and empty lists."""
    response = await api_client.get("/api/dashboard", params={"today": "2026-10-18"})
    assert response.status_code == 200
    data = response.json()

    assert data["totalClients"] == 0
    assert data["totalProjects"] == 0
    assert data["projectsInProgress"] == 0
    assert data["tasksToDo"] == 0
    assert data["projectStatusCounts"] == {"To Do": 0, "In Progress": 0, "Done": 0}
    assert data["projectStatusShare"] == {"To Do": 0.0, "In Progress": 0.0, "Done": 0.0}
    assert data["upcomingDeadlines"] == []
    assert data["recentlyCompleted"] == []


@pytest.mark.asyncio
async def test_dashboard_summary(api_client: AsyncClient) -> None:
    """Counts, upcoming deadlines and recent completions are derived from the store."""
    client = await _post(api_client, "clients", {"name": "Acme Ltd"})
    website = await _post(
        api_client,
        "projects",
        {
            "name": "Website",
            "clientId": client["id"],
            "deadline": "2026-10-25",
            "status": "In Progress",
        },
    )
    await _post(
        api_client,
        "projects",
        {"name": "Archive", "clientId": client["id"], "deadline": "2026-09-01", "status": "Done"},
    )
    await _post(
        api_client,
        "projects",
        {"name": "Next Year", "clientId": client["id"], "deadline": "2027-01-10"},
    )
    await _post(
        api_client,
        "tasks",
        {"name": "Launch", "projectId": website["id"], "dueDate": "2026-10-18"},
    )
    await _post(
        api_client,
        "tasks",
        {"name": "Wireframes", "projectId": website["id"], "dueDate": "2026-10-10", "status": "Done"},
    )
    await _post(
        api_client,
        "tasks",
        {"name": "Retro", "projectId": website["id"], "dueDate": "2026-11-01"},
    )

    response = await api_client.get("/api/dashboard", params={"today": "2026-10-18"})
    assert response.status_code == 200
    data = response.json()

    assert data["totalClients"] == 1
    assert data["totalProjects"] == 3
    assert data["projectsInProgress"] == 1
    assert data["tasksToDo"] == 2
    assert data["projectStatusCounts"] == {"To Do": 1, "In Progress": 1, "Done": 1}
    assert data["taskStatusCounts"] == {"To Do": 2, "In Progress": 0, "Done": 1}
    assert data["projectStatusShare"]["Done"] == pytest.approx(100 / 3)

    assert data["upcomingDeadlines"] == [
        {
            "type": "Task",
            "id": data["upcomingDeadlines"][0]["id"],
            "name": "Launch",
            "date": "2026-10-18",
            "daysLeft": "Today",
        },
        {
            "type": "Project",
            "id": website["id"],
            "name": "Website",
            "date": "2026-10-25",
            "daysLeft": "in 7 days",
        },
        {
            "type": "Task",
            "id": data["upcomingDeadlines"][2]["id"],
            "name": "Retro",
            "date": "2026-11-01",
            "daysLeft": "in 14 days",
        },
    ]
    assert [task["name"] for task in data["recentlyCompleted"]] == ["Wireframes"]
