# backoffice/cli/create_tables.py
import asyncio

import click
from sqlalchemy.ext.asyncio import create_async_engine

from backoffice.database import Base, async_database_url
import backoffice.models  # noqa: F401  registers every table on Base.metadata


@click.command()
@click.option('--drop', is_flag=True, help='Drop existing tables first')
@click.option('--echo', is_flag=True, help='Echo the emitted SQL')
def create_tables(drop, echo):
    """Create all database tables directly using SQLAlchemy"""
    from backoffice.core.config import get_settings
    settings = get_settings()

    async def _create_tables():
        engine = create_async_engine(async_database_url(settings.DATABASE_URL), echo=echo)
        async with engine.begin() as conn:
            if drop:
                await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        await engine.dispose()
        click.echo("All tables created successfully!")

    asyncio.run(_create_tables())


if __name__ == "__main__":
    create_tables()
