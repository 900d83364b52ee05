"""Task SQLAlchemy model."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from client_hub.models.base import Base, IdMixin, TimestampMixin
from client_hub.models.status import WorkStatus, work_status_column_type

if TYPE_CHECKING:
    from client_hub.models.project import Project


class Task(Base, IdMixin, TimestampMixin):
    """A unit of work inside a project."""

    __tablename__ = "tasks"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    project_id: Mapped[str] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status: Mapped[WorkStatus] = mapped_column(
        work_status_column_type(), nullable=False, default=WorkStatus.TODO
    )
    due_date: Mapped[date | None] = mapped_column(Date, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Relationships
    project: Mapped["Project"] = relationship(back_populates="tasks")
