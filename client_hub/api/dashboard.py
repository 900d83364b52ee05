"""Dashboard summary endpoint."""

from datetime import date
from typing import Literal

from fastapi import APIRouter, Depends, Query
from pydantic import Field
from sqlalchemy.ext.asyncio import AsyncSession

from client_hub.api.deps import get_db
from client_hub.api.schemas import CamelModel
from client_hub.api.tasks import TaskResponse, to_task_response
from client_hub.core.config import settings
from client_hub.dashboard import DashboardSummary, build_dashboard
from client_hub.models import WorkStatus
from client_hub.services import (
    list_clients_statement,
    list_projects_statement,
    list_tasks_statement,
)

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


class DeadlineResponse(CamelModel):
    """Upcoming project deadline or task due date."""

    kind: Literal["Project", "Task"] = Field(alias="type")
    id: str
    name: str
    due_on: date = Field(alias="date")
    days_left: str


class DashboardResponse(CamelModel):
    """Dashboard response model."""

    total_clients: int
    total_projects: int
    projects_in_progress: int
    tasks_to_do: int
    project_status_counts: dict[WorkStatus, int]
    project_status_share: dict[WorkStatus, float]
    task_status_counts: dict[WorkStatus, int]
    upcoming_deadlines: list[DeadlineResponse]
    recently_completed: list[TaskResponse]


def _to_dashboard_response(summary: DashboardSummary) -> DashboardResponse:
    return DashboardResponse(
        total_clients=summary.total_clients,
        total_projects=summary.total_projects,
        projects_in_progress=summary.projects_in_progress,
        tasks_to_do=summary.tasks_to_do,
        project_status_counts=summary.project_status_counts,
        project_status_share=summary.project_status_share,
        task_status_counts=summary.task_status_counts,
        upcoming_deadlines=[
            DeadlineResponse(
                kind=entry.kind,
                id=entry.id,
                name=entry.name,
                due_on=entry.due_on,
                days_left=entry.days_left,
            )
            for entry in summary.upcoming_deadlines
        ],
        recently_completed=[to_task_response(task) for task in summary.recently_completed],
    )


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    today: date | None = Query(
        default=None,
        description="Reference date for upcoming deadlines. Defaults to the server's date.",
    ),
    db: AsyncSession = Depends(get_db),
) -> DashboardResponse:
    """Summarize clients, projects and tasks for the dashboard page."""
    clients = (await db.execute(list_clients_statement())).scalars().all()
    projects = (await db.execute(list_projects_statement())).scalars().all()
    tasks = (await db.execute(list_tasks_statement())).scalars().all()

    summary = build_dashboard(
        clients,
        projects,
        tasks,
        today=today or date.today(),
        window_days=settings.upcoming_window_days,
        limit=settings.dashboard_list_limit,
    )
    return _to_dashboard_response(summary)
