from .product_stock import UpdateProductStockCommand

__all__ = ['UpdateProductStockCommand']
