# tests/integration/test_cli_commands.py
import asyncio

import pytest
from click.testing import CliRunner
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from backoffice.cli import seed_demo as seed_demo_module
from backoffice.cli.create_tables import create_tables
from backoffice.cli.seed_demo import seed_demo, seed_demo_data
from backoffice.core.config import clear_settings_cache
from backoffice.models import Customer, Order, OrderState, Product, ProductSupplier


@pytest.fixture
def runner():
    """Provides a CliRunner instance."""
    return CliRunner()


@pytest.fixture
def sqlite_url(tmp_path, monkeypatch):
    url = f"sqlite+aiosqlite:///{tmp_path / 'backoffice.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    clear_settings_cache()
    yield url
    monkeypatch.delenv("DATABASE_URL")
    clear_settings_cache()


def count_rows(url, model):
    async def _count():
        engine = create_async_engine(url, poolclass=NullPool)
        async with async_sessionmaker(engine, class_=AsyncSession)() as session:
            count = await session.scalar(select(func.count()).select_from(model))
        await engine.dispose()
        return count

    return asyncio.run(_count())


def test_create_tables_then_seed_demo(runner, sqlite_url, monkeypatch):
    result = runner.invoke(create_tables)
    assert result.exit_code == 0, result.output
    assert "All tables created successfully!" in result.output

    engine = create_async_engine(sqlite_url, poolclass=NullPool)
    monkeypatch.setattr(seed_demo_module, "async_session", async_sessionmaker(engine, class_=AsyncSession))

    result = runner.invoke(seed_demo)
    assert result.exit_code == 0, result.output
    assert "orders: 5" in result.output
    assert count_rows(sqlite_url, Order) == 5
    assert count_rows(sqlite_url, Product) == 3

    # A second run leaves the data alone unless forced
    result = runner.invoke(seed_demo)
    assert result.exit_code == 0, result.output
    assert "use --force" in result.output
    assert count_rows(sqlite_url, Order) == 5


@pytest.mark.asyncio
async def test_seed_demo_data(db_session, demo_orders):
    assert demo_orders == {
        "order_states": 9,
        "customers": 2,
        "orders": 5,
        "suppliers": 2,
        "products": 3,
    }

    references = (await db_session.execute(select(Order.reference).order_by(Order.id))).scalars().all()
    assert references == ["XKBKNABJK", "OHSATSERP", "UOYEVOLI", "FFATNOMMJ", "KHWLILZLL"]
    assert await db_session.scalar(select(func.count()).select_from(ProductSupplier)) == 2
    assert await db_session.scalar(select(func.count()).select_from(Customer)) == 2
    assert await db_session.scalar(select(func.count()).select_from(OrderState)) == 9
