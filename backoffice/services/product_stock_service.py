"""
Applies UpdateProductStockCommand to a stored product.

Only the fields set on the command are written. When the quantity changes and
the command asks for it, the change is recorded as a StockMovement so the
stock history explains every edit made from the back office.
"""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.commands.product_stock import UpdateProductStockCommand
from backoffice.core.enums import StockMovementReason
from backoffice.core.exceptions import ProductNotFoundError, ProductStockConstraintError
from backoffice.models.product import Product, StockMovement

logger = logging.getLogger(__name__)

LOCATION_MAX_LENGTH = 64


class ProductStockService:
    def __init__(self, db: AsyncSession, advanced_stock_management_enabled: bool = False):
        self.db = db
        self.advanced_stock_management_enabled = advanced_stock_management_enabled

    async def handle(self, command: UpdateProductStockCommand) -> None:
        """
        Update the product stock settings.

        Raises:
            ProductNotFoundError: If the product does not exist
            ProductStockConstraintError: If the new values are inconsistent
        """
        product_id = command.product_id.value
        product = await self.db.get(Product, product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        try:
            self._validate(product, command)
            self._apply(product, command)
            movement = self._record_movement(product, command)

            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            "Updated stock of product %s (quantity=%s, movement=%s)",
            product_id,
            product.quantity,
            movement.delta_quantity if movement else None,
        )

    def _validate(self, product: Product, command: UpdateProductStockCommand) -> None:
        if command.use_advanced_stock_management and not self.advanced_stock_management_enabled:
            raise ProductStockConstraintError(
                "Advanced stock management is disabled for the shop",
                ProductStockConstraintError.ADVANCED_STOCK_MANAGEMENT_DISABLED,
            )

        use_advanced_stock_management = command.use_advanced_stock_management
        if use_advanced_stock_management is None:
            use_advanced_stock_management = product.advanced_stock_management

        if command.depends_on_stock and not use_advanced_stock_management:
            raise ProductStockConstraintError(
                "Product cannot depend on stock without advanced stock management",
                ProductStockConstraintError.INVALID_DEPENDS_ON_STOCK,
            )

        if command.minimal_quantity is not None and command.minimal_quantity < 0:
            raise ProductStockConstraintError(
                f"Minimal quantity must not be negative, got {command.minimal_quantity}",
                ProductStockConstraintError.INVALID_MINIMAL_QUANTITY,
            )

        if command.location is not None and len(command.location) > LOCATION_MAX_LENGTH:
            raise ProductStockConstraintError(
                f"Stock location must not exceed {LOCATION_MAX_LENGTH} characters",
                ProductStockConstraintError.INVALID_LOCATION,
            )

    def _apply(self, product: Product, command: UpdateProductStockCommand) -> None:
        if command.use_advanced_stock_management is not None:
            product.advanced_stock_management = command.use_advanced_stock_management
            if not command.use_advanced_stock_management:
                product.depends_on_stock = False
        if command.depends_on_stock is not None:
            product.depends_on_stock = command.depends_on_stock
        if command.pack_stock_type is not None:
            product.pack_stock_type = int(command.pack_stock_type)
        if command.out_of_stock_type is not None:
            product.out_of_stock_type = int(command.out_of_stock_type)
        if command.minimal_quantity is not None:
            product.minimal_quantity = command.minimal_quantity
        if command.location is not None:
            product.location = command.location
        if command.low_stock_threshold is not None:
            product.low_stock_threshold = command.low_stock_threshold
        if command.low_stock_alert is not None:
            product.low_stock_alert = command.low_stock_alert
        if command.available_date is not None:
            product.available_date = command.available_date

        # JSON columns are replaced, not mutated, so the change is tracked
        if command.localized_available_now_labels is not None:
            product.available_now = {
                **(product.available_now or {}),
                **{str(k): v for k, v in command.localized_available_now_labels.items()},
            }
        if command.localized_available_later_labels is not None:
            product.available_later = {
                **(product.available_later or {}),
                **{str(k): v for k, v in command.localized_available_later_labels.items()},
            }

    def _record_movement(self, product: Product, command: UpdateProductStockCommand) -> Optional[StockMovement]:
        if command.quantity is None:
            return None

        delta = command.quantity - (product.quantity or 0)
        product.quantity = command.quantity

        if delta == 0 or not command.add_movement:
            return None

        movement = StockMovement(
            product_id=product.id,
            delta_quantity=delta,
            sign=1 if delta > 0 else -1,
            physical_quantity=abs(delta),
            reason=StockMovementReason.EMPLOYEE_EDITION.value,
        )
        self.db.add(movement)
        return movement
