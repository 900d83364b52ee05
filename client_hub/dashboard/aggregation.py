"""Dashboard aggregation over already-fetched collections.

Everything here is a pure function of its inputs: no queries, no clock
reads (callers pass ``today``), no side effects.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Literal

from client_hub.models import Client, Project, Task, WorkStatus
from client_hub.services.ordering import date_sort_key

DEFAULT_WINDOW_DAYS = 14
DEFAULT_LIST_LIMIT = 5

DeadlineKind = Literal["Project", "Task"]


@dataclass(frozen=True)
class DeadlineEntry:
    """A project deadline or task due date falling inside the window."""

    kind: DeadlineKind
    id: str
    name: str
    due_on: date
    days_left: str


@dataclass
class DashboardSummary:
    """Everything the dashboard page renders."""

    total_clients: int
    total_projects: int
    projects_in_progress: int
    tasks_to_do: int
    project_status_counts: dict[WorkStatus, int]
    project_status_share: dict[WorkStatus, float]
    task_status_counts: dict[WorkStatus, int]
    upcoming_deadlines: list[DeadlineEntry] = field(default_factory=list)
    recently_completed: list[Task] = field(default_factory=list)


def count_by_status(items: Iterable[Project | Task]) -> dict[WorkStatus, int]:
    """Count items per status; every status is present, zero-filled."""
    counts = {status: 0 for status in WorkStatus}
    for item in items:
        counts[WorkStatus(item.status)] += 1
    return counts


def status_share(counts: dict[WorkStatus, int]) -> dict[WorkStatus, float]:
    """Percentage of the total held by each status (0 for an empty total)."""
    total = sum(counts.values())
    if total == 0:
        return {status: 0.0 for status in counts}
    return {status: count / total * 100 for status, count in counts.items()}


def is_upcoming(
    value: date | None, today: date, window_days: int = DEFAULT_WINDOW_DAYS
) -> bool:
    """Whether a date falls within [today, today + window_days]."""
    if value is None:
        return False
    return today <= value <= today + timedelta(days=window_days)


def days_left_label(value: date, today: date) -> str:
    """Describe the distance from today to a date in words."""
    diff_days = (value - today).days
    if diff_days < 0:
        return f"{abs(diff_days)} days ago"
    if diff_days == 0:
        return "Today"
    if diff_days == 1:
        return "Tomorrow"
    return f"in {diff_days} days"


def upcoming_deadlines(
    projects: Iterable[Project],
    tasks: Iterable[Task],
    today: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
    limit: int | None = DEFAULT_LIST_LIMIT,
) -> list[DeadlineEntry]:
    """Merge project deadlines and task due dates inside the window.

    Entries are sorted by date; on equal dates projects come before tasks
    and input order is otherwise kept.
    """
    entries = [
        DeadlineEntry(
            kind="Project",
            id=project.id,
            name=project.name,
            due_on=project.deadline,
            days_left=days_left_label(project.deadline, today),
        )
        for project in projects
        if is_upcoming(project.deadline, today, window_days)
    ]
    entries.extend(
        DeadlineEntry(
            kind="Task",
            id=task.id,
            name=task.name,
            due_on=task.due_date,
            days_left=days_left_label(task.due_date, today),
        )
        for task in tasks
        if is_upcoming(task.due_date, today, window_days)
    )
    entries.sort(key=lambda entry: date_sort_key(entry.due_on))
    return entries if limit is None else entries[:limit]


def recently_completed(
    tasks: Iterable[Task], limit: int = DEFAULT_LIST_LIMIT
) -> list[Task]:
    """First ``limit`` done tasks, in the order they were given."""
    done: list[Task] = []
    for task in tasks:
        if len(done) >= limit:
            break
        if task.status == WorkStatus.DONE:
            done.append(task)
    return done


def build_dashboard(
    clients: Sequence[Client],
    projects: Sequence[Project],
    tasks: Sequence[Task],
    today: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
    limit: int = DEFAULT_LIST_LIMIT,
) -> DashboardSummary:
    """Compute the full dashboard summary."""
    project_counts = count_by_status(projects)
    task_counts = count_by_status(tasks)
    return DashboardSummary(
        total_clients=len(clients),
        total_projects=len(projects),
        projects_in_progress=project_counts[WorkStatus.IN_PROGRESS],
        tasks_to_do=task_counts[WorkStatus.TODO],
        project_status_counts=project_counts,
        project_status_share=status_share(project_counts),
        task_status_counts=task_counts,
        upcoming_deadlines=upcoming_deadlines(
            projects, tasks, today, window_days=window_days, limit=limit
        ),
        recently_completed=recently_completed(tasks, limit=limit),
    )
