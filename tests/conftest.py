# tests/conftest.py
import os

# Shop switches the suite relies on; credentials may come from the environment
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "test-password")
os.environ["ADVANCED_STOCK_MANAGEMENT"] = "false"
os.environ["DEFAULT_CURRENCY_ID"] = "1"
os.environ["DEFAULT_LANGUAGE_ID"] = "1"

from datetime import datetime
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from backoffice.cli.seed_demo import seed_demo_data
from backoffice.core.config import clear_settings_cache, get_settings
from backoffice.database import Base
from backoffice.dependencies import get_db
from backoffice.main import app
from backoffice.models.product import Product, ProductSupplier, Supplier

clear_settings_cache()

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Demo orders are dated relative to this instant
SEED_NOW = datetime(2026, 10, 18, 10, 30, 0)


@pytest_asyncio.fixture
async def test_engine():
    """In-memory database with every table created, one per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine):
    """Provide a database session for tests"""
    async_session_local = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with async_session_local() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db_session):
    """HTTP client talking to the app, authenticated, bound to the test session"""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    settings = get_settings()
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        auth=(settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD),
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def anonymous_client(db_session):
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def sample_product_data():
    """A fully filled product, as stored"""
    return {
        "type": "standard",
        "name": {"1": "Hummingbird printed t-shirt", "2": "T-shirt imprimé colibri"},
        "description": {"1": "<p>Soft cotton</p>"},
        "description_short": {"1": "<p>Regular fit</p>"},
        "tags": {"1": ["t-shirt", "cotton"], "2": ["tee"]},
        "price": Decimal("23.900000"),
        "ecotax": Decimal("0.500000"),
        "wholesale_price": Decimal("5.490000"),
        "unit_price": Decimal("2.390000"),
        "unity": "per item",
        "on_sale": True,
        "tax_rules_group_id": 1,
        "meta_title": {"1": "Hummingbird tee"},
        "meta_description": {"1": "A printed tee"},
        "link_rewrite": {"1": "hummingbird-printed-t-shirt"},
        "redirect_type": "301-product",
        "redirect_target_id": 7,
        "width": Decimal("10.500000"),
        "height": Decimal("2.000000"),
        "depth": Decimal("0.000000"),
        "weight": Decimal("0.300000"),
        "additional_shipping_cost": Decimal("1.250000"),
        "delivery_time_note_type": 2,
        "delivery_in_stock": {"1": "Ships in 24h"},
        "delivery_out_stock": {"1": "Ships in 2 weeks"},
        "carrier_references": [1, 3],
        "active": True,
        "visibility": "catalog",
        "available_for_order": True,
        "show_price": True,
        "online_only": False,
        "show_condition": True,
        "condition": "used",
        "reference": "demo_1",
        "mpn": "MPN-1",
        "upc": "123456789012",
        "ean13": "1234567890123",
        "isbn": "978-3-16-148410-0",
        "quantity": 12,
        "minimal_quantity": 1,
        "location": "Aisle 4",
        "low_stock_threshold": 3,
        "low_stock_alert": True,
        "pack_stock_type": 3,
        "out_of_stock_type": 2,
        "available_now": {"1": "In stock"},
        "available_later": {"1": "Back soon"},
    }


@pytest.fixture
def make_product(db_session):
    """Factory storing a product; keyword arguments override the model defaults"""
    async def _make_product(**fields) -> Product:
        fields.setdefault("name", {"1": "Test product"})
        product = Product(**fields)
        db_session.add(product)
        await db_session.commit()
        return product

    return _make_product


@pytest.fixture
def add_supplier(db_session):
    """Factory linking a supplier to a product"""
    async def _add_supplier(product: Product, name: str, default: bool = False, **fields) -> ProductSupplier:
        supplier = Supplier(name=name)
        db_session.add(supplier)
        await db_session.flush()
        product_supplier = ProductSupplier(product_id=product.id, supplier_id=supplier.id, **fields)
        db_session.add(product_supplier)
        if default:
            product.default_supplier_id = supplier.id
        await db_session.commit()
        return product_supplier

    return _add_supplier


@pytest_asyncio.fixture
async def demo_orders(db_session):
    """The demo order set, dated relative to SEED_NOW"""
    return await seed_demo_data(db_session, now=SEED_NOW)
