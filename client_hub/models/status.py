"""Workflow status shared by projects and tasks."""

import enum

from sqlalchemy import Enum


class WorkStatus(str, enum.Enum):
    """Board column a project or task sits in."""

    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"


def work_status_column_type() -> Enum:
    """Column type storing the human-readable status values."""
    return Enum(
        WorkStatus,
        name="work_status",
        values_callable=lambda members: [member.value for member in members],
        validate_strings=True,
    )
