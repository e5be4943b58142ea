"""
Catalog models.

A product row carries every field the product edit form works with: localized
texts are JSON maps keyed by language id, stock settings live on the product
itself and each stock edit can leave a StockMovement behind.
"""

from sqlalchemy import (
    Boolean, Column, Date, ForeignKey, Integer, JSON, Numeric, String, TIMESTAMP, func,
)
from sqlalchemy.orm import relationship

from backoffice.core.enums import (
    DeliveryTimeNoteType, OutOfStockType, PackStockType, ProductCondition,
    ProductType, ProductVisibility, RedirectType,
)
from backoffice.database import Base

MONEY = Numeric(20, 6)


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    created_at = Column(TIMESTAMP(timezone=False), server_default=func.now(), nullable=False)
    updated_at = Column(TIMESTAMP(timezone=False), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Basic information
    type = Column(String(32), nullable=False, default=ProductType.STANDARD.value)
    name = Column(JSON, nullable=False, default=dict)
    description = Column(JSON, nullable=False, default=dict)
    description_short = Column(JSON, nullable=False, default=dict)
    tags = Column(JSON, nullable=False, default=dict)  # {language_id: [tag, ...]}

    # Prices
    price = Column(MONEY, nullable=False, default=0)
    ecotax = Column(MONEY, nullable=False, default=0)
    wholesale_price = Column(MONEY, nullable=False, default=0)
    unit_price = Column(MONEY, nullable=False, default=0)
    unity = Column(String(255), nullable=False, default="")
    on_sale = Column(Boolean, nullable=False, default=False)
    tax_rules_group_id = Column(Integer, nullable=False, default=0)

    # SEO
    meta_title = Column(JSON, nullable=False, default=dict)
    meta_description = Column(JSON, nullable=False, default=dict)
    link_rewrite = Column(JSON, nullable=False, default=dict)
    redirect_type = Column(String(16), nullable=False, default=RedirectType.NOT_FOUND.value)
    redirect_target_id = Column(Integer, nullable=False, default=0)

    # Shipping
    width = Column(MONEY, nullable=False, default=0)
    height = Column(MONEY, nullable=False, default=0)
    depth = Column(MONEY, nullable=False, default=0)
    weight = Column(MONEY, nullable=False, default=0)
    additional_shipping_cost = Column(MONEY, nullable=False, default=0)
    delivery_time_note_type = Column(Integer, nullable=False, default=DeliveryTimeNoteType.DEFAULT.value)
    delivery_in_stock = Column(JSON, nullable=False, default=dict)
    delivery_out_stock = Column(JSON, nullable=False, default=dict)
    carrier_references = Column(JSON, nullable=False, default=list)

    # Options
    active = Column(Boolean, nullable=False, default=False)
    visibility = Column(String(16), nullable=False, default=ProductVisibility.BOTH.value)
    available_for_order = Column(Boolean, nullable=False, default=True)
    show_price = Column(Boolean, nullable=False, default=True)
    online_only = Column(Boolean, nullable=False, default=False)
    show_condition = Column(Boolean, nullable=False, default=False)
    condition = Column(String(16), nullable=False, default=ProductCondition.NEW.value)

    # Details
    reference = Column(String(64), nullable=False, default="")
    mpn = Column(String(40), nullable=False, default="")
    upc = Column(String(12), nullable=False, default="")
    ean13 = Column(String(13), nullable=False, default="")
    isbn = Column(String(32), nullable=False, default="")

    # Stock
    quantity = Column(Integer, nullable=False, default=0)
    minimal_quantity = Column(Integer, nullable=False, default=1)
    location = Column(String(64), nullable=False, default="")
    low_stock_threshold = Column(Integer, nullable=True)
    low_stock_alert = Column(Boolean, nullable=False, default=False)
    pack_stock_type = Column(Integer, nullable=False, default=PackStockType.DEFAULT.value)
    out_of_stock_type = Column(Integer, nullable=False, default=OutOfStockType.DEFAULT.value)
    available_now = Column(JSON, nullable=False, default=dict)
    available_later = Column(JSON, nullable=False, default=dict)
    available_date = Column(Date, nullable=True)
    advanced_stock_management = Column(Boolean, nullable=False, default=False)
    depends_on_stock = Column(Boolean, nullable=False, default=False)

    # Suppliers
    default_supplier_id = Column(Integer, ForeignKey("suppliers.id"), nullable=True)

    #####################################################
    ################## Relationships ####################
    #####################################################

    default_supplier = relationship("Supplier", foreign_keys=[default_supplier_id])
    product_suppliers = relationship("ProductSupplier", back_populates="product", cascade="all, delete-orphan")
    stock_movements = relationship("StockMovement", back_populates="product", cascade="all, delete-orphan")

    def display_name(self, language_id: int) -> str:
        names = self.name or {}
        return names.get(str(language_id)) or names.get(language_id) or next(iter(names.values()), "")


class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True)
    name = Column(String(64), nullable=False)
    active = Column(Boolean, nullable=False, default=True)

    product_suppliers = relationship("ProductSupplier", back_populates="supplier")


class ProductSupplier(Base):
    __tablename__ = "product_suppliers"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), nullable=False, index=True)
    combination_id = Column(Integer, nullable=False, default=0)
    reference = Column(String(64), nullable=False, default="")
    price_tax_excluded = Column(MONEY, nullable=False, default=0)
    currency_id = Column(Integer, nullable=True)

    product = relationship("Product", back_populates="product_suppliers")
    supplier = relationship("Supplier", back_populates="product_suppliers")


class StockMovement(Base):
    __tablename__ = "stock_movements"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    delta_quantity = Column(Integer, nullable=False)
    sign = Column(Integer, nullable=False)  # 1 for an increase, -1 for a decrease
    physical_quantity = Column(Integer, nullable=False)
    reason = Column(String(32), nullable=False)
    created_at = Column(TIMESTAMP(timezone=False), server_default=func.now(), nullable=False)

    product = relationship("Product", back_populates="stock_movements")
