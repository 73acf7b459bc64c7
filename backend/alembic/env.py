"""
HR API Backend — Alembic Environment
======================================

Migrations for the `documents` table. The connection URL always comes from
hrapi settings (DATABASE_URL), so alembic.ini never holds credentials.

    cd backend && alembic upgrade head      # apply
    cd backend && alembic upgrade head --sql  # print SQL only
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from hrapi.config import settings
from hrapi.database import Base
from hrapi.models.document import Document  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

DATABASE_URL = settings.database_url


def _configure(**options) -> None:
    context.configure(
        target_metadata=Base.metadata,
        # JSON vs JSONB and column length changes show up in --autogenerate
        compare_type=True,
        **options,
    )


def _migrate(connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    # One-shot engine: migrations never share the application's pool
    engine = create_async_engine(DATABASE_URL, poolclass=NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    _configure(url=DATABASE_URL, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()
else:
    asyncio.run(_migrate_online())
