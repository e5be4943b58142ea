# tests/unit/services/test_product_stock_service.py
from datetime import date

import pytest
from sqlalchemy import select

from backoffice.commands.product_stock import UpdateProductStockCommand
from backoffice.core.enums import OutOfStockType, PackStockType
from backoffice.core.exceptions import ProductNotFoundError, ProductStockConstraintError
from backoffice.models.product import Product, StockMovement
from backoffice.services.product_stock_service import ProductStockService


async def get_movements(db_session, product_id):
    result = await db_session.execute(
        select(StockMovement).where(StockMovement.product_id == product_id).order_by(StockMovement.id)
    )
    return result.scalars().all()


@pytest.mark.asyncio
async def test_only_fields_set_on_the_command_are_written(db_session, make_product):
    product = await make_product(quantity=5, minimal_quantity=3, location="A1", available_now={"1": "In stock"})
    service = ProductStockService(db_session)

    command = (
        UpdateProductStockCommand(product.id)
        .set_out_of_stock_type(OutOfStockType.NOT_AVAILABLE)
        .set_pack_stock_type(PackStockType.PRODUCTS_ONLY)
        .set_low_stock_threshold(2)
        .set_low_stock_alert(True)
        .set_available_date(date(2026, 11, 30))
    )
    await service.handle(command)

    stored = await db_session.get(Product, product.id)
    assert stored.out_of_stock_type == 0
    assert stored.pack_stock_type == 1
    assert stored.low_stock_threshold == 2
    assert stored.low_stock_alert is True
    assert stored.available_date == date(2026, 11, 30)
    # untouched
    assert stored.quantity == 5
    assert stored.minimal_quantity == 3
    assert stored.location == "A1"
    assert stored.available_now == {"1": "In stock"}


@pytest.mark.asyncio
async def test_localized_labels_are_merged_per_language(db_session, make_product):
    product = await make_product(available_now={"1": "In stock", "2": "En stock"}, available_later={})
    service = ProductStockService(db_session)

    await service.handle(
        UpdateProductStockCommand(product.id)
        .set_localized_available_now_labels({2: "Disponible"})
        .set_localized_available_later_labels({1: "Soon"})
    )

    stored = await db_session.get(Product, product.id)
    assert stored.available_now == {"1": "In stock", "2": "Disponible"}
    assert stored.available_later == {"1": "Soon"}


@pytest.mark.asyncio
async def test_quantity_change_records_a_stock_movement(db_session, make_product):
    product = await make_product(quantity=10)
    service = ProductStockService(db_session)

    await service.handle(UpdateProductStockCommand(product.id).set_quantity(4))

    movements = await get_movements(db_session, product.id)
    assert len(movements) == 1
    assert movements[0].delta_quantity == -6
    assert movements[0].sign == -1
    assert movements[0].physical_quantity == 6
    assert movements[0].reason == "employee_edition"
    assert (await db_session.get(Product, product.id)).quantity == 4


@pytest.mark.asyncio
async def test_no_movement_when_disabled_or_unchanged(db_session, make_product):
    product = await make_product(quantity=10)
    service = ProductStockService(db_session)

    await service.handle(UpdateProductStockCommand(product.id).set_quantity(10))
    await service.handle(UpdateProductStockCommand(product.id).set_quantity(25).set_add_movement(False))

    assert await get_movements(db_session, product.id) == []
    assert (await db_session.get(Product, product.id)).quantity == 25


@pytest.mark.asyncio
async def test_unknown_product_raises_not_found(db_session):
    service = ProductStockService(db_session)

    with pytest.raises(ProductNotFoundError) as exc_info:
        await service.handle(UpdateProductStockCommand(999).set_quantity(1))

    assert exc_info.value.product_id == 999


@pytest.mark.asyncio
async def test_advanced_stock_management_requires_the_shop_setting(db_session, make_product):
    product = await make_product()
    service = ProductStockService(db_session, advanced_stock_management_enabled=False)

    with pytest.raises(ProductStockConstraintError) as exc_info:
        await service.handle(UpdateProductStockCommand(product.id).set_use_advanced_stock_management(True))

    assert exc_info.value.code == ProductStockConstraintError.ADVANCED_STOCK_MANAGEMENT_DISABLED


@pytest.mark.asyncio
async def test_depends_on_stock_requires_advanced_stock_management(db_session, make_product):
    product = await make_product(advanced_stock_management=False)
    service = ProductStockService(db_session, advanced_stock_management_enabled=True)

    with pytest.raises(ProductStockConstraintError) as exc_info:
        await service.handle(UpdateProductStockCommand(product.id).set_depends_on_stock(True))

    assert exc_info.value.code == ProductStockConstraintError.INVALID_DEPENDS_ON_STOCK


@pytest.mark.asyncio
async def test_depends_on_stock_with_advanced_stock_management(db_session, make_product):
    product = await make_product()
    service = ProductStockService(db_session, advanced_stock_management_enabled=True)

    await service.handle(
        UpdateProductStockCommand(product.id)
        .set_use_advanced_stock_management(True)
        .set_depends_on_stock(True)
    )

    stored = await db_session.get(Product, product.id)
    assert stored.advanced_stock_management is True
    assert stored.depends_on_stock is True


@pytest.mark.asyncio
async def test_turning_advanced_stock_management_off_clears_depends_on_stock(db_session, make_product):
    product = await make_product(advanced_stock_management=True, depends_on_stock=True)
    service = ProductStockService(db_session, advanced_stock_management_enabled=True)

    await service.handle(UpdateProductStockCommand(product.id).set_use_advanced_stock_management(False))

    stored = await db_session.get(Product, product.id)
    assert stored.advanced_stock_management is False
    assert stored.depends_on_stock is False


@pytest.mark.asyncio
@pytest.mark.parametrize("command_setter, value, code", [
    ("set_minimal_quantity", -1, ProductStockConstraintError.INVALID_MINIMAL_QUANTITY),
    ("set_location", "x" * 65, ProductStockConstraintError.INVALID_LOCATION),
])
async def test_invalid_values_are_rejected_and_nothing_is_written(db_session, make_product, command_setter, value, code):
    product = await make_product(quantity=8, minimal_quantity=1)
    product_id = product.id
    service = ProductStockService(db_session)

    command = getattr(UpdateProductStockCommand(product_id).set_quantity(20), command_setter)(value)
    with pytest.raises(ProductStockConstraintError) as exc_info:
        await service.handle(command)

    assert exc_info.value.code == code
    stored = (await db_session.execute(select(Product).where(Product.id == product_id))).scalar_one()
    assert stored.quantity == 8
    assert await get_movements(db_session, product_id) == []
