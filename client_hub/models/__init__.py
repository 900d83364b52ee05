"""SQLAlchemy models for the Client Hub application."""

from client_hub.models.base import Base
from client_hub.models.client import Client
from client_hub.models.project import Project
from client_hub.models.status import WorkStatus
from client_hub.models.task import Task

__all__ = [
    "Base",
    "Client",
    "Project",
    "Task",
    "WorkStatus",
]
