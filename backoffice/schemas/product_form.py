"""
Query results describing a product the way the edit form needs to see it.

Localized values are dictionaries keyed by language id.
"""

from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from backoffice.core.enums import ProductType
from backoffice.schemas.base import QueryResult


class LocalizedTags(QueryResult):
    language_id: int
    tags: List[str] = []


class ProductBasicInformation(QueryResult):
    type: ProductType
    localized_names: Dict[int, str] = {}
    localized_descriptions: Dict[int, str] = {}
    localized_short_descriptions: Dict[int, str] = {}
    localized_tags: List[LocalizedTags] = []


class ProductStockInformation(QueryResult):
    use_advanced_stock_management: bool = False
    depends_on_stock: bool = False
    pack_stock_type: int
    out_of_stock_type: int
    quantity: int
    minimal_quantity: int
    location: str = ""
    low_stock_threshold: Optional[int] = None
    low_stock_alert: bool = False
    localized_available_now_labels: Dict[int, str] = {}
    localized_available_later_labels: Dict[int, str] = {}
    available_date: Optional[date] = None


class ProductPricesInformation(QueryResult):
    price: Decimal
    ecotax: Decimal
    tax_rules_group_id: int
    on_sale: bool
    wholesale_price: Decimal
    unit_price: Decimal
    unity: str = ""


class ProductSeoOptions(QueryResult):
    localized_meta_titles: Dict[int, str] = {}
    localized_meta_descriptions: Dict[int, str] = {}
    localized_link_rewrites: Dict[int, str] = {}
    redirect_type: str
    redirect_target_id: int = 0


class ProductShippingInformation(QueryResult):
    width: Decimal
    height: Decimal
    depth: Decimal
    weight: Decimal
    additional_shipping_cost: Decimal
    carrier_references: List[int] = []
    delivery_time_note_type: int
    localized_delivery_time_in_stock_notes: Dict[int, str] = {}
    localized_delivery_time_out_of_stock_notes: Dict[int, str] = {}


class ProductOptions(QueryResult):
    active: bool
    visibility: str
    available_for_order: bool
    online_only: bool
    show_price: bool
    condition: str
    show_condition: bool


class ProductDetails(QueryResult):
    isbn: str = ""
    upc: str = ""
    ean13: str = ""
    mpn: str = ""
    reference: str = ""


class ProductForEditing(QueryResult):
    product_id: int
    basic_information: ProductBasicInformation
    stock_information: ProductStockInformation
    prices_information: ProductPricesInformation
    seo_options: ProductSeoOptions
    shipping_information: ProductShippingInformation
    options: ProductOptions
    details: ProductDetails


class ProductSupplierForEditing(QueryResult):
    product_supplier_id: int
    product_id: int
    supplier_id: int
    reference: str = ""
    price_tax_excluded: Decimal
    currency_id: Optional[int] = None
    combination_id: int = 0


class ProductSupplierInfo(QueryResult):
    supplier_id: int
    supplier_name: str
    product_supplier_for_editing: ProductSupplierForEditing


class ProductSupplierOptions(QueryResult):
    default_supplier_id: int = 0
    suppliers_info: List[ProductSupplierInfo] = []
