# pylint: skip-file
# ruff: noqa
"""
Alembic Environment Configuration

Runs CineFeel migrations on an async engine: PostgreSQL through asyncpg in
deployed environments, SQLite through aiosqlite for local databases.

Database URL:
=============
Taken from DATABASE_URL (application settings). A one-off target can be
given on the command line instead:

    alembic upgrade head
    alembic -x db_url=sqlite+aiosqlite:///./cinefeel.db upgrade head
    alembic upgrade head --sql > migration.sql   # offline, no connection

SQLite cannot ALTER constraints in place, so migrations against it run in
batch mode (copy-and-move tables).
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from cinefeel.config.settings import get_settings
from cinefeel.shared.models import Base, Bookmark, BookmarkTag, Like, Tag, User

# Importing the models registers their tables on Base.metadata
MODELS = (User, Bookmark, Tag, BookmarkTag, Like)

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def database_url() -> str:
    """-x db_url=... if given, otherwise DATABASE_URL from settings."""
    return context.get_x_argument(as_dictionary=True).get("db_url") or get_settings().DATABASE_URL


config.set_main_option("sqlalchemy.url", database_url())


def run_migrations_offline() -> None:
    """Emit the migration SQL without connecting to a database."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=config.get_main_option("sqlalchemy.url").startswith("sqlite"),
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=True,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Open one connection on a throwaway async engine and migrate through it."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
