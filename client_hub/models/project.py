"""Project SQLAlchemy model."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from client_hub.models.base import Base, IdMixin, TimestampMixin
from client_hub.models.status import WorkStatus, work_status_column_type

if TYPE_CHECKING:
    from client_hub.models.client import Client
    from client_hub.models.task import Task


class Project(Base, IdMixin, TimestampMixin):
    """A piece of billable work owned by exactly one client."""

    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    client_id: Mapped[str] = mapped_column(
        ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    start_date: Mapped[date | None] = mapped_column(Date)
    deadline: Mapped[date | None] = mapped_column(Date, index=True)
    budget: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[WorkStatus] = mapped_column(
        work_status_column_type(), nullable=False, default=WorkStatus.TODO
    )
    progress: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    client: Mapped["Client"] = relationship(back_populates="projects")
    tasks: Mapped[list["Task"]] = relationship(
        back_populates="project",
        passive_deletes=True,
    )
