"""Derived read-only views: dashboard summary and status boards."""

from client_hub.dashboard.aggregation import (
    DashboardSummary,
    DeadlineEntry,
    build_dashboard,
    count_by_status,
    days_left_label,
    is_upcoming,
    recently_completed,
    status_share,
    upcoming_deadlines,
)
from client_hub.dashboard.boards import (
    BoardColumn,
    ProjectCard,
    TaskCard,
    build_project_board,
    build_task_board,
    group_by_status,
)

__all__ = [
    "BoardColumn",
    "DashboardSummary",
    "DeadlineEntry",
    "ProjectCard",
    "TaskCard",
    "build_dashboard",
    "build_project_board",
    "build_task_board",
    "count_by_status",
    "days_left_label",
    "group_by_status",
    "is_upcoming",
    "recently_completed",
    "status_share",
    "upcoming_deadlines",
]
