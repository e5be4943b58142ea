"""
Read-side handlers for the product edit page.

Loads the product row (and its supplier links) and converts it into the query
result objects from backoffice.schemas.product_form.
"""

import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backoffice.core.enums import ProductType
from backoffice.core.exceptions import ProductNotFoundError
from backoffice.core.utils import localized
from backoffice.models.product import Product, ProductSupplier
from backoffice.queries.product import GetProductForEditing, GetProductSupplierOptions
from backoffice.schemas.product_form import (
    LocalizedTags,
    ProductBasicInformation,
    ProductDetails,
    ProductForEditing,
    ProductOptions,
    ProductPricesInformation,
    ProductSeoOptions,
    ProductShippingInformation,
    ProductStockInformation,
    ProductSupplierForEditing,
    ProductSupplierInfo,
    ProductSupplierOptions,
)

logger = logging.getLogger(__name__)


class ProductQueryService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_product(self, product_id: int) -> Product:
        product = await self.db.get(Product, product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def get_product_for_editing(self, query: GetProductForEditing) -> ProductForEditing:
        product = await self._get_product(query.product_id)

        return ProductForEditing(
            product_id=product.id,
            basic_information=ProductBasicInformation(
                type=ProductType(product.type),
                localized_names=localized(product.name),
                localized_descriptions=localized(product.description),
                localized_short_descriptions=localized(product.description_short),
                localized_tags=[
                    LocalizedTags(language_id=language_id, tags=list(tags))
                    for language_id, tags in sorted(localized(product.tags).items())
                ],
            ),
            stock_information=ProductStockInformation(
                use_advanced_stock_management=product.advanced_stock_management,
                depends_on_stock=product.depends_on_stock,
                pack_stock_type=product.pack_stock_type,
                out_of_stock_type=product.out_of_stock_type,
                quantity=product.quantity,
                minimal_quantity=product.minimal_quantity,
                location=product.location or "",
                low_stock_threshold=product.low_stock_threshold,
                low_stock_alert=product.low_stock_alert,
                localized_available_now_labels=localized(product.available_now),
                localized_available_later_labels=localized(product.available_later),
                available_date=product.available_date,
            ),
            prices_information=ProductPricesInformation(
                price=Decimal(product.price),
                ecotax=Decimal(product.ecotax),
                tax_rules_group_id=product.tax_rules_group_id,
                on_sale=product.on_sale,
                wholesale_price=Decimal(product.wholesale_price),
                unit_price=Decimal(product.unit_price),
                unity=product.unity or "",
            ),
            seo_options=ProductSeoOptions(
                localized_meta_titles=localized(product.meta_title),
                localized_meta_descriptions=localized(product.meta_description),
                localized_link_rewrites=localized(product.link_rewrite),
                redirect_type=product.redirect_type,
                redirect_target_id=product.redirect_target_id,
            ),
            shipping_information=ProductShippingInformation(
                width=Decimal(product.width),
                height=Decimal(product.height),
                depth=Decimal(product.depth),
                weight=Decimal(product.weight),
                additional_shipping_cost=Decimal(product.additional_shipping_cost),
                carrier_references=[int(reference) for reference in product.carrier_references or []],
                delivery_time_note_type=product.delivery_time_note_type,
                localized_delivery_time_in_stock_notes=localized(product.delivery_in_stock),
                localized_delivery_time_out_of_stock_notes=localized(product.delivery_out_stock),
            ),
            options=ProductOptions(
                active=product.active,
                visibility=product.visibility,
                available_for_order=product.available_for_order,
                online_only=product.online_only,
                show_price=product.show_price,
                condition=product.condition,
                show_condition=product.show_condition,
            ),
            details=ProductDetails(
                isbn=product.isbn or "",
                upc=product.upc or "",
                ean13=product.ean13 or "",
                mpn=product.mpn or "",
                reference=product.reference or "",
            ),
        )

    async def get_product_supplier_options(self, query: GetProductSupplierOptions) -> ProductSupplierOptions:
        product = await self._get_product(query.product_id)

        result = await self.db.execute(
            select(ProductSupplier)
            .options(selectinload(ProductSupplier.supplier))
            .where(ProductSupplier.product_id == product.id)
            .order_by(ProductSupplier.supplier_id, ProductSupplier.combination_id)
        )
        product_suppliers = result.scalars().all()

        return ProductSupplierOptions(
            default_supplier_id=product.default_supplier_id or 0,
            suppliers_info=[
                ProductSupplierInfo(
                    supplier_id=product_supplier.supplier_id,
                    supplier_name=product_supplier.supplier.name,
                    product_supplier_for_editing=ProductSupplierForEditing(
                        product_supplier_id=product_supplier.id,
                        product_id=product_supplier.product_id,
                        supplier_id=product_supplier.supplier_id,
                        reference=product_supplier.reference or "",
                        price_tax_excluded=Decimal(product_supplier.price_tax_excluded),
                        currency_id=product_supplier.currency_id,
                        combination_id=product_supplier.combination_id,
                    ),
                )
                for product_supplier in product_suppliers
            ],
        )
