"""Cascading deletes across clients, projects and tasks.

The schema declares ``ON DELETE CASCADE`` foreign keys, but not every
backend enforces them, so dependents are removed explicitly here. All
statements run on the caller's session and therefore commit or roll back
together with the rest of the request.
"""

from dataclasses import dataclass

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from client_hub.models import Client, Project, Task


@dataclass(frozen=True)
class CascadeResult:
    """Number of dependent rows removed alongside the owning record."""

    projects: int = 0
    tasks: int = 0


async def delete_project_cascade(db: AsyncSession, project: Project) -> CascadeResult:
    """Delete a project and every task that belongs to it.

    Args:
        db: Session of the current request.
        project: Loaded project to delete.

    Returns:
        Counts of removed dependents.
    """
    tasks_result = await db.execute(
        delete(Task)
        .where(Task.project_id == project.id)
        .execution_options(synchronize_session=False)
    )
    await db.delete(project)
    await db.flush()
    return CascadeResult(tasks=tasks_result.rowcount or 0)


async def delete_client_cascade(db: AsyncSession, client: Client) -> CascadeResult:
    """Delete a client, its projects, and the tasks of those projects.

    Args:
        db: Session of the current request.
        client: Loaded client to delete.

    Returns:
        Counts of removed dependents.
    """
    owned_project_ids = select(Project.id).where(Project.client_id == client.id)

    tasks_result = await db.execute(
        delete(Task)
        .where(Task.project_id.in_(owned_project_ids))
        .execution_options(synchronize_session=False)
    )
    projects_result = await db.execute(
        delete(Project)
        .where(Project.client_id == client.id)
        .execution_options(synchronize_session=False)
    )
    await db.delete(client)
    await db.flush()
    return CascadeResult(
        projects=projects_result.rowcount or 0,
        tasks=tasks_result.rowcount or 0,
    )
