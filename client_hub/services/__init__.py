"""Domain services shared by the API routers."""

from client_hub.services.cascade import (
    CascadeResult,
    delete_client_cascade,
    delete_project_cascade,
)
from client_hub.services.merge import merge_fields
from client_hub.services.ordering import (
    date_sort_key,
    list_clients_statement,
    list_projects_statement,
    list_tasks_statement,
)

__all__ = [
    "CascadeResult",
    "date_sort_key",
    "delete_client_cascade",
    "delete_project_cascade",
    "list_clients_statement",
    "list_projects_statement",
    "list_tasks_statement",
    "merge_fields",
]
