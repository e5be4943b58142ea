"""
Read-side messages for the product pages.
"""

from pydantic import BaseModel, ConfigDict, field_validator

from backoffice.core.value_objects import ProductId


class ProductQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: int

    @field_validator('product_id')
    @classmethod
    def validate_product_id(cls, v):
        return ProductId(v).value


class GetProductForEditing(ProductQuery):
    """Returns a ProductForEditing"""


class GetProductSupplierOptions(ProductQuery):
    """Returns the ProductSupplierOptions of a product"""
