"""Task management API endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Response, status
from pydantic import Field
from sqlalchemy.ext.asyncio import AsyncSession

from client_hub.api.deps import get_db, get_or_404
from client_hub.api.schemas import CamelModel, OptionalDate
from client_hub.core.logging import get_logger
from client_hub.dashboard import build_task_board
from client_hub.models import Project, Task, WorkStatus
from client_hub.services import (
    list_clients_statement,
    list_projects_statement,
    list_tasks_statement,
    merge_fields,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])

NULLABLE_FIELDS = frozenset({"due_date"})


class TaskCreateRequest(CamelModel):
    """Payload for creating a task. A supplied ``id`` is ignored."""

    name: str = Field(min_length=1, max_length=255)
    project_id: str = Field(min_length=1)
    status: WorkStatus = WorkStatus.TODO
    due_date: OptionalDate = None
    description: str = ""


class TaskUpdateRequest(CamelModel):
    """Payload for updating a task; only supplied fields change."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    project_id: str | None = Field(default=None, min_length=1)
    status: WorkStatus | None = None
    due_date: OptionalDate = None
    description: str | None = None


class TaskResponse(CamelModel):
    """Task response model."""

    id: str
    name: str
    project_id: str
    status: WorkStatus
    due_date: date | None
    description: str


class TaskCardResponse(TaskResponse):
    """Task on the status board, with its project's and client's names."""

    project_name: str
    client_name: str


class TaskBoardColumnResponse(CamelModel):
    status: WorkStatus
    count: int
    items: list[TaskCardResponse]


def to_task_response(task: Task) -> TaskResponse:
    """Map SQLAlchemy task model to response model."""
    return TaskResponse(
        id=task.id,
        name=task.name,
        project_id=task.project_id,
        status=task.status,
        due_date=task.due_date,
        description=task.description,
    )


async def _ensure_project_exists(db: AsyncSession, project_id: str) -> None:
    await get_or_404(db, Project, project_id, "Project")


@router.get("", response_model=list[TaskResponse])
async def list_tasks(db: AsyncSession = Depends(get_db)) -> list[TaskResponse]:
    """List all tasks ordered by due date, undated tasks last."""
    result = await db.execute(list_tasks_statement())
    return [to_task_response(task) for task in result.scalars().all()]


@router.get("/board", response_model=list[TaskBoardColumnResponse])
async def get_task_board(
    db: AsyncSession = Depends(get_db),
) -> list[TaskBoardColumnResponse]:
    """Group tasks by status for the tasks board."""
    tasks = (await db.execute(list_tasks_statement())).scalars().all()
    projects = (await db.execute(list_projects_statement())).scalars().all()
    clients = (await db.execute(list_clients_statement())).scalars().all()

    return [
        TaskBoardColumnResponse(
            status=column.status,
            count=column.count,
            items=[
                TaskCardResponse(
                    **to_task_response(card.task).model_dump(),
                    project_name=card.project_name,
                    client_name=card.client_name,
                )
                for card in column.cards
            ],
        )
        for column in build_task_board(tasks, projects, clients)
    ]


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    payload: TaskCreateRequest,
    db: AsyncSession = Depends(get_db),
) -> TaskResponse:
    """Create a task in an existing project."""
    await _ensure_project_exists(db, payload.project_id)

    task = Task(**payload.model_dump())
    db.add(task)
    await db.commit()
    logger.info("task_created", task_id=task.id, project_id=task.project_id)
    return to_task_response(task)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    db: AsyncSession = Depends(get_db),
) -> TaskResponse:
    """Get task by ID."""
    task = await get_or_404(db, Task, task_id, "Task")
    return to_task_response(task)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    payload: TaskUpdateRequest,
    db: AsyncSession = Depends(get_db),
) -> TaskResponse:
    """Merge supplied fields into an existing task."""
    task = await get_or_404(db, Task, task_id, "Task")
    updates = payload.model_dump(exclude_unset=True)
    if updates.get("project_id") and updates["project_id"] != task.project_id:
        await _ensure_project_exists(db, updates["project_id"])

    changed = merge_fields(task, updates, nullable=NULLABLE_FIELDS)
    await db.commit()
    logger.info("task_updated", task_id=task.id, fields=changed)
    return to_task_response(task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: str,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete a task. Tasks own nothing, so nothing else is removed."""
    task = await get_or_404(db, Task, task_id, "Task")
    await db.delete(task)
    await db.commit()
    logger.info("task_deleted", task_id=task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
