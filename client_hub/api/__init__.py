"""API module exports."""

from client_hub.api.clients import router as clients_router
from client_hub.api.dashboard import router as dashboard_router
from client_hub.api.deps import get_db
from client_hub.api.health import router as health_router
from client_hub.api.projects import router as projects_router
from client_hub.api.tasks import router as tasks_router

__all__ = [
    "clients_router",
    "dashboard_router",
    "get_db",
    "health_router",
    "projects_router",
    "tasks_router",
]
