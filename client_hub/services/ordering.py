"""Natural ordering of resource listings.

Clients are listed by name, projects by deadline and tasks by due date.
Records without a date go last; name and id break ties so repeated
listings come back in the same order.
"""

from datetime import date

from sqlalchemy import Select, select

from client_hub.models import Client, Project, Task


def list_clients_statement() -> Select[tuple[Client]]:
    return select(Client).order_by(Client.name, Client.id)


def list_projects_statement() -> Select[tuple[Project]]:
    return select(Project).order_by(
        Project.deadline.is_(None),
        Project.deadline,
        Project.name,
        Project.id,
    )


def list_tasks_statement() -> Select[tuple[Task]]:
    return select(Task).order_by(
        Task.due_date.is_(None),
        Task.due_date,
        Task.name,
        Task.id,
    )


def date_sort_key(value: date | None) -> tuple[bool, date]:
    """Sort key placing missing dates after every real date."""
    return (value is None, value or date.max)
