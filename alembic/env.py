# alembic/env.py
"""
Migrations run against DATABASE_URL from the back-office settings; the
sqlalchemy.url of alembic.ini is ignored.
"""
import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

import backoffice.models  # noqa: F401  registers the tables on Base.metadata
from backoffice.core.config import get_settings
from backoffice.database import Base, async_database_url

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

DATABASE_URL = async_database_url(get_settings().DATABASE_URL)


def run_offline(url: str) -> None:
    """Emit the SQL script instead of connecting"""
    context.configure(
        url=url,
        target_metadata=Base.metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def migrate(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=Base.metadata,
        compare_type=True,
        compare_server_default=True,
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_online(url: str) -> None:
    section = {**config.get_section(config.config_ini_section, {}), "sqlalchemy.url": url}
    engine = async_engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)

    async with engine.connect() as connection:
        await connection.run_sync(migrate)

    await engine.dispose()


if context.is_offline_mode():
    run_offline(DATABASE_URL)
else:
    asyncio.run(run_online(DATABASE_URL))
