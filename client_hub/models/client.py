"""Client SQLAlchemy model."""

from typing import TYPE_CHECKING

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from client_hub.models.base import Base, IdMixin, TimestampMixin

if TYPE_CHECKING:
    from client_hub.models.project import Project


class Client(Base, IdMixin, TimestampMixin):
    """A customer the business runs projects for."""

    __tablename__ = "clients"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    company: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    # Usually a base64 data URL uploaded from the client form
    logo: Mapped[str | None] = mapped_column(Text)
    phone: Mapped[str | None] = mapped_column(String(50))

    # Relationships
    projects: Mapped[list["Project"]] = relationship(
        back_populates="client",
        passive_deletes=True,
    )
