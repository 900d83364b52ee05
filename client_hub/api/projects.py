"""Projects API endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Response, status
from pydantic import Field
from sqlalchemy.ext.asyncio import AsyncSession

from client_hub.api.deps import get_db, get_or_404
from client_hub.api.schemas import CamelModel, OptionalDate
from client_hub.core.logging import get_logger
from client_hub.dashboard import build_project_board
from client_hub.models import Client, Project, WorkStatus
from client_hub.services import (
    delete_project_cascade,
    list_clients_statement,
    list_projects_statement,
    merge_fields,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/projects", tags=["projects"])

NULLABLE_FIELDS = frozenset({"start_date", "deadline"})


class ProjectCreateRequest(CamelModel):
    """Payload for creating a project. A supplied ``id`` is ignored."""

    name: str = Field(min_length=1, max_length=255)
    client_id: str = Field(min_length=1)
    start_date: OptionalDate = None
    deadline: OptionalDate = None
    budget: float = Field(default=0, ge=0)
    description: str = ""
    status: WorkStatus = WorkStatus.TODO
    progress: int = Field(default=0, ge=0, le=100)


class ProjectUpdateRequest(CamelModel):
    """Payload for updating a project; only supplied fields change."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    client_id: str | None = Field(default=None, min_length=1)
    start_date: OptionalDate = None
    deadline: OptionalDate = None
    budget: float | None = Field(default=None, ge=0)
    description: str | None = None
    status: WorkStatus | None = None
    progress: int | None = Field(default=None, ge=0, le=100)


class ProjectResponse(CamelModel):
    """Project response model."""

    id: str
    name: str
    client_id: str
    start_date: date | None
    deadline: date | None
    budget: float
    description: str
    status: WorkStatus
    progress: int


class ProjectCardResponse(ProjectResponse):
    """Project on the status board, with its client's name."""

    client_name: str


class ProjectBoardColumnResponse(CamelModel):
    status: WorkStatus
    count: int
    items: list[ProjectCardResponse]


def to_project_response(project: Project) -> ProjectResponse:
    """Map SQLAlchemy project model to response model."""
    return ProjectResponse(
        id=project.id,
        name=project.name,
        client_id=project.client_id,
        start_date=project.start_date,
        deadline=project.deadline,
        budget=project.budget,
        description=project.description,
        status=project.status,
        progress=project.progress,
    )


async def _ensure_client_exists(db: AsyncSession, client_id: str) -> None:
    await get_or_404(db, Client, client_id, "Client")


@router.get("", response_model=list[ProjectResponse])
async def list_projects(db: AsyncSession = Depends(get_db)) -> list[ProjectResponse]:
    """List all projects ordered by deadline, undated projects last."""
    result = await db.execute(list_projects_statement())
    return [to_project_response(project) for project in result.scalars().all()]


@router.get("/board", response_model=list[ProjectBoardColumnResponse])
async def get_project_board(
    db: AsyncSession = Depends(get_db),
) -> list[ProjectBoardColumnResponse]:
    """Group projects by status for the projects board."""
    projects = (await db.execute(list_projects_statement())).scalars().all()
    clients = (await db.execute(list_clients_statement())).scalars().all()

    return [
        ProjectBoardColumnResponse(
            status=column.status,
            count=column.count,
            items=[
                ProjectCardResponse(
                    **to_project_response(card.project).model_dump(),
                    client_name=card.client_name,
                )
                for card in column.cards
            ],
        )
        for column in build_project_board(projects, clients)
    ]


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    payload: ProjectCreateRequest,
    db: AsyncSession = Depends(get_db),
) -> ProjectResponse:
    """Create a project for an existing client."""
    await _ensure_client_exists(db, payload.client_id)

    project = Project(**payload.model_dump())
    db.add(project)
    await db.commit()
    logger.info("project_created", project_id=project.id, client_id=project.client_id)
    return to_project_response(project)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    db: AsyncSession = Depends(get_db),
) -> ProjectResponse:
    """Get project by ID."""
    project = await get_or_404(db, Project, project_id, "Project")
    return to_project_response(project)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    payload: ProjectUpdateRequest,
    db: AsyncSession = Depends(get_db),
) -> ProjectResponse:
    """Merge supplied fields into an existing project."""
    project = await get_or_404(db, Project, project_id, "Project")
    updates = payload.model_dump(exclude_unset=True)
    if updates.get("client_id") and updates["client_id"] != project.client_id:
        await _ensure_client_exists(db, updates["client_id"])

    changed = merge_fields(project, updates, nullable=NULLABLE_FIELDS)
    await db.commit()
    logger.info("project_updated", project_id=project.id, fields=changed)
    return to_project_response(project)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete a project together with its tasks."""
    project = await get_or_404(db, Project, project_id, "Project")
    removed = await delete_project_cascade(db, project)
    await db.commit()
    logger.info(
        "project_deleted",
        project_id=project_id,
        tasks_removed=removed.tasks,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
