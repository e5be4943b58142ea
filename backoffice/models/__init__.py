from .product import Product, ProductSupplier, StockMovement, Supplier
from .order import Customer, Order, OrderState

# This ensures all models are registered with SQLAlchemy
__all__ = [
    'Product',
    'ProductSupplier',
    'StockMovement',
    'Supplier',
    'Customer',
    'Order',
    'OrderState',
]
