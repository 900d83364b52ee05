"""Status boards: projects and tasks grouped into To Do / In Progress / Done."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from client_hub.models import Client, Project, Task, WorkStatus

UNKNOWN_CLIENT = "Unknown Client"
UNKNOWN_PROJECT = "Unknown Project"
UNKNOWN = "Unknown"

ItemT = TypeVar("ItemT", Project, Task)
CardT = TypeVar("CardT")


@dataclass(frozen=True)
class ProjectCard:
    project: Project
    client_name: str


@dataclass(frozen=True)
class TaskCard:
    task: Task
    project_name: str
    client_name: str


@dataclass
class BoardColumn(Generic[CardT]):
    status: WorkStatus
    cards: list[CardT] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.cards)


def group_by_status(items: Iterable[ItemT]) -> dict[WorkStatus, list[ItemT]]:
    """Bucket items by status, keeping input order inside each bucket."""
    grouped: dict[WorkStatus, list[ItemT]] = {status: [] for status in WorkStatus}
    for item in items:
        grouped[WorkStatus(item.status)].append(item)
    return grouped


def build_project_board(
    projects: Sequence[Project], clients: Sequence[Client]
) -> list[BoardColumn[ProjectCard]]:
    client_names = {client.id: client.name for client in clients}
    return [
        BoardColumn(
            status=status,
            cards=[
                ProjectCard(
                    project=project,
                    client_name=client_names.get(project.client_id, UNKNOWN_CLIENT),
                )
                for project in bucket
            ],
        )
        for status, bucket in group_by_status(projects).items()
    ]


def build_task_board(
    tasks: Sequence[Task], projects: Sequence[Project], clients: Sequence[Client]
) -> list[BoardColumn[TaskCard]]:
    """Group tasks by status, resolving their project and client names.

    A task whose project is gone shows ``Unknown Project`` and ``Unknown``;
    a task whose project exists but whose client is gone shows
    ``Unknown Client``.
    """
    projects_by_id = {project.id: project for project in projects}
    client_names = {client.id: client.name for client in clients}

    def to_card(task: Task) -> TaskCard:
        project = projects_by_id.get(task.project_id)
        if project is None:
            return TaskCard(task=task, project_name=UNKNOWN_PROJECT, client_name=UNKNOWN)
        return TaskCard(
            task=task,
            project_name=project.name,
            client_name=client_names.get(project.client_id, UNKNOWN_CLIENT),
        )

    return [
        BoardColumn(status=status, cards=[to_card(task) for task in bucket])
        for status, bucket in group_by_status(tasks).items()
    ]
