"""
Shared enums and constants used across the back office.
"""

from enum import Enum, IntEnum

from backoffice.core.exceptions import ProductPackConstraintError, ProductStockConstraintError


class ProductType(str, Enum):
    STANDARD = "standard"
    PACK = "pack"
    VIRTUAL = "virtual"
    COMBINATIONS = "combinations"


class PackStockType(IntEnum):
    """How the stock of a pack is decremented when it is ordered"""
    PACK_ONLY = 0
    PRODUCTS_ONLY = 1
    BOTH = 2
    DEFAULT = 3

    @classmethod
    def from_int(cls, value: int) -> "PackStockType":
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(str(member.value) for member in cls)
            raise ProductPackConstraintError(
                f"Pack stock type value {value!r} is not valid, expected one of: {allowed}",
                ProductPackConstraintError.INVALID_STOCK_TYPE,
            )


class OutOfStockType(IntEnum):
    """Behaviour of the product when it runs out of stock"""
    NOT_AVAILABLE = 0
    AVAILABLE = 1
    DEFAULT = 2

    @classmethod
    def from_int(cls, value: int) -> "OutOfStockType":
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(str(member.value) for member in cls)
            raise ProductStockConstraintError(
                f"Out of stock type value {value!r} is not valid, expected one of: {allowed}",
                ProductStockConstraintError.INVALID_OUT_OF_STOCK_TYPE,
            )


class RedirectType(str, Enum):
    NOT_FOUND = "404"
    PERMANENT_PRODUCT = "301-product"
    TEMPORARY_PRODUCT = "302-product"
    PERMANENT_CATEGORY = "301-category"
    TEMPORARY_CATEGORY = "302-category"


class DeliveryTimeNoteType(IntEnum):
    NONE = 0
    DEFAULT = 1
    SPECIFIC = 2


class ProductVisibility(str, Enum):
    BOTH = "both"
    CATALOG = "catalog"
    SEARCH = "search"
    NONE = "none"


class ProductCondition(str, Enum):
    NEW = "new"
    USED = "used"
    REFURBISHED = "refurbished"


class StockMovementReason(str, Enum):
    EMPLOYEE_EDITION = "employee_edition"
