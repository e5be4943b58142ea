from .product import GetProductForEditing, GetProductSupplierOptions

__all__ = ['GetProductForEditing', 'GetProductSupplierOptions']
