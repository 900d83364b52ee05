"""Alembic environment for the clients, projects and tasks schema.

The URL comes from ``DATABASE_URL`` (via settings) unless overridden with
``alembic -x database_url=... upgrade head``. SQLite targets use batch mode
because SQLite cannot alter constraints in place.
"""

import asyncio
from logging.config import fileConfig
from typing import Any

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection, make_url
from sqlalchemy.ext.asyncio import async_engine_from_config

from client_hub.core.config import settings

# Registers clients, projects and tasks on Base.metadata
from client_hub.models import Base, Client, Project, Task  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _database_url() -> str:
    return context.get_x_argument(as_dictionary=True).get(
        "database_url", settings.database_url
    )


def _configure_options(url: str) -> dict[str, Any]:
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "compare_server_default": True,
        "render_as_batch": make_url(url).get_backend_name() == "sqlite",
    }


def do_run_migrations(connection: Connection, url: str) -> None:
    context.configure(connection=connection, **_configure_options(url))

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations(url: str) -> None:
    """Apply migrations through an async engine (asyncpg or aiosqlite)."""
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = url

    connectable = async_engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations, url)

    await connectable.dispose()


def run_migrations_offline(url: str) -> None:
    """Emit the migration SQL as a script instead of running it."""
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_options(url),
    )

    with context.begin_transaction():
        context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline(_database_url())
else:
    asyncio.run(run_async_migrations(_database_url()))
