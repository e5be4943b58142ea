"""
Provides the data used to prefill the product form.

The provider only reshapes query results: it asks the query bus for the
product (and its supplier options) and copies each value to the key the form
template expects. Nothing is validated here; query errors propagate.
"""

from typing import Any, Dict, List

from backoffice.core.bus import CommandBus
from backoffice.core.enums import ProductType
from backoffice.core.utils import decimal_to_str, format_date
from backoffice.queries.product import GetProductForEditing, GetProductSupplierOptions
from backoffice.schemas.product_form import LocalizedTags, ProductForEditing, ProductSupplierOptions


class ProductFormDataProvider:
    def __init__(self, query_bus: CommandBus, default_currency_id: int):
        self.query_bus = query_bus
        self.default_currency_id = default_currency_id

    async def get_data(self, id) -> Dict[str, Any]:
        product_for_editing: ProductForEditing = await self.query_bus.handle(
            GetProductForEditing(product_id=int(id))
        )

        return {
            'id': id,
            'basic': self._extract_basic_data(product_for_editing),
            'stock': self._extract_stock_data(product_for_editing),
            'price': self._extract_price_data(product_for_editing),
            'seo': self._extract_seo_data(product_for_editing),
            'redirect_option': self._extract_redirect_option_data(product_for_editing),
            'shipping': self._extract_shipping_data(product_for_editing),
            'options': self._extract_options_data(product_for_editing),
            'suppliers': await self._extract_suppliers_data(product_for_editing),
        }

    def get_default_data(self) -> Dict[str, Any]:
        return {
            'basic': {
                'type': ProductType.STANDARD.value,
            },
            'price': {
                'price_tax_excluded': 0,
                'price_tax_included': 0,
                'wholesale_price': 0,
                'unit_price': 0,
            },
            'shipping': {
                'width': 0,
                'height': 0,
                'depth': 0,
                'weight': 0,
            },
        }

    def _extract_basic_data(self, product_for_editing: ProductForEditing) -> Dict[str, Any]:
        basic_information = product_for_editing.basic_information

        return {
            'name': basic_information.localized_names,
            'type': basic_information.type.value,
            'description': basic_information.localized_descriptions,
            'description_short': basic_information.localized_short_descriptions,
        }

    def _extract_stock_data(self, product_for_editing: ProductForEditing) -> Dict[str, Any]:
        stock_information = product_for_editing.stock_information

        return {
            'quantity': stock_information.quantity,
            'minimal_quantity': stock_information.minimal_quantity,
            'stock_location': stock_information.location,
            'low_stock_threshold': stock_information.low_stock_threshold,
            'low_stock_alert': stock_information.low_stock_alert,
            'pack_stock_type': stock_information.pack_stock_type,
            'out_of_stock_type': stock_information.out_of_stock_type,
            'available_now_label': stock_information.localized_available_now_labels,
            'available_later_label': stock_information.localized_available_later_labels,
            'available_date': format_date(stock_information.available_date),
        }

    def _extract_price_data(self, product_for_editing: ProductForEditing) -> Dict[str, Any]:
        prices_information = product_for_editing.prices_information

        return {
            'price_tax_excluded': float(prices_information.price),
            # Taxes are not computed by GetProductForEditing, the form shows the excluded price
            'price_tax_included': float(prices_information.price),
            'ecotax': float(prices_information.ecotax),
            'tax_rules_group_id': prices_information.tax_rules_group_id,
            'on_sale': prices_information.on_sale,
            'wholesale_price': float(prices_information.wholesale_price),
            'unit_price': float(prices_information.unit_price),
            'unity': prices_information.unity,
        }

    def _extract_seo_data(self, product_for_editing: ProductForEditing) -> Dict[str, Any]:
        seo_options = product_for_editing.seo_options

        return {
            'meta_title': seo_options.localized_meta_titles,
            'meta_description': seo_options.localized_meta_descriptions,
            'link_rewrite': seo_options.localized_link_rewrites,
        }

    def _extract_redirect_option_data(self, product_for_editing: ProductForEditing) -> Dict[str, Any]:
        seo_options = product_for_editing.seo_options

        return {
            'type': seo_options.redirect_type,
            'target': seo_options.redirect_target_id,
        }

    def _extract_shipping_data(self, product_for_editing: ProductForEditing) -> Dict[str, Any]:
        shipping = product_for_editing.shipping_information

        return {
            'width': decimal_to_str(shipping.width),
            'height': decimal_to_str(shipping.height),
            'depth': decimal_to_str(shipping.depth),
            'weight': decimal_to_str(shipping.weight),
            'additional_shipping_cost': decimal_to_str(shipping.additional_shipping_cost),
            'delivery_time_note_type': shipping.delivery_time_note_type,
            'delivery_time_in_stock_note': shipping.localized_delivery_time_in_stock_notes,
            'delivery_time_out_stock_note': shipping.localized_delivery_time_out_of_stock_notes,
            'carriers': shipping.carrier_references,
        }

    def _extract_options_data(self, product_for_editing: ProductForEditing) -> Dict[str, Any]:
        options = product_for_editing.options
        details = product_for_editing.details

        return {
            'active': options.active,
            'visibility': options.visibility,
            'available_for_order': options.available_for_order,
            'show_price': options.show_price,
            'online_only': options.online_only,
            'show_condition': options.show_condition,
            'condition': options.condition,
            'tags': self._present_tags(product_for_editing.basic_information.localized_tags),
            'mpn': details.mpn,
            'upc': details.upc,
            'ean_13': details.ean13,
            'isbn': details.isbn,
            'reference': details.reference,
        }

    def _present_tags(self, localized_tags_list: List[LocalizedTags]) -> Dict[int, str]:
        tags = {}
        for localized_tags in localized_tags_list:
            tags[localized_tags.language_id] = ','.join(localized_tags.tags)

        return tags

    async def _extract_suppliers_data(self, product_for_editing: ProductForEditing) -> Dict[str, Any]:
        product_supplier_options: ProductSupplierOptions = await self.query_bus.handle(
            GetProductSupplierOptions(product_id=product_for_editing.product_id)
        )

        suppliers_data: Dict[str, Any] = {
            'default_supplier_id': product_supplier_options.default_supplier_id,
        }

        for supplier_option in product_supplier_options.suppliers_info:
            supplier_for_editing = supplier_option.product_supplier_for_editing
            supplier_id = supplier_option.supplier_id

            suppliers_data.setdefault('supplier_ids', {})[supplier_id] = supplier_id
            suppliers_data.setdefault('supplier_references', {})[supplier_id] = {
                'supplier_id': supplier_id,
                'supplier_name': supplier_option.supplier_name,
                'product_supplier': {
                    'product_supplier_id': supplier_for_editing.product_supplier_id,
                    'supplier_price_tax_excluded': decimal_to_str(supplier_for_editing.price_tax_excluded),
                    'supplier_reference': supplier_for_editing.reference,
                    'currency_id': supplier_for_editing.currency_id or self.default_currency_id,
                    'combination_id': supplier_for_editing.combination_id,
                },
            }

        return suppliers_data
