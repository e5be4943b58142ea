from typing import AsyncGenerator
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.commands.product_stock import UpdateProductStockCommand
from backoffice.core.bus import CommandBus
from backoffice.core.config import get_settings
from backoffice.database import async_session
from backoffice.queries.product import GetProductForEditing, GetProductSupplierOptions
from backoffice.services.product_form_data_provider import ProductFormDataProvider
from backoffice.services.product_query_service import ProductQueryService
from backoffice.services.product_stock_service import ProductStockService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting async database sessions."""
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


def build_bus(db: AsyncSession) -> CommandBus:
    """Bus with every product command and query handler bound to the session"""
    settings = get_settings()
    query_service = ProductQueryService(db)
    stock_service = ProductStockService(
        db, advanced_stock_management_enabled=settings.ADVANCED_STOCK_MANAGEMENT
    )

    bus = CommandBus()
    bus.register(GetProductForEditing, query_service.get_product_for_editing)
    bus.register(GetProductSupplierOptions, query_service.get_product_supplier_options)
    bus.register(UpdateProductStockCommand, stock_service.handle)
    return bus


async def get_bus(db: AsyncSession = Depends(get_db)) -> CommandBus:
    return build_bus(db)


async def get_product_form_data_provider(bus: CommandBus = Depends(get_bus)) -> ProductFormDataProvider:
    return ProductFormDataProvider(bus, get_settings().DEFAULT_CURRENCY_ID)
