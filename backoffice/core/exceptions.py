class BaseServiceError(Exception):
    """Base exception for all service-related errors."""
    pass

class ProductServiceError(BaseServiceError):
    """Base exception for product service errors."""
    pass

class ProductNotFoundError(ProductServiceError):
    """Raised when product is not found."""

    def __init__(self, product_id: int):
        super().__init__(f"Product with id {product_id} was not found")
        self.product_id = product_id

class ProductConstraintError(ProductServiceError):
    """Raised when a product value breaks a domain constraint."""

    INVALID_ID = 1

    def __init__(self, message: str, code: int = 0):
        super().__init__(message)
        self.code = code

class ProductStockConstraintError(ProductConstraintError):
    """Raised when stock values are invalid."""

    INVALID_OUT_OF_STOCK_TYPE = 10
    INVALID_DEPENDS_ON_STOCK = 11
    ADVANCED_STOCK_MANAGEMENT_DISABLED = 12
    INVALID_MINIMAL_QUANTITY = 13
    INVALID_LOCATION = 14

class ProductPackConstraintError(ProductConstraintError):
    """Raised when pack values are invalid."""

    INVALID_STOCK_TYPE = 20

class MessageBusError(BaseServiceError):
    """Base exception for command/query dispatching errors."""
    pass

class HandlerNotFoundError(MessageBusError):
    """Raised when no handler is registered for a message."""

    def __init__(self, message_type: type):
        super().__init__(f"No handler registered for {message_type.__name__}")
        self.message_type = message_type

class OrderGridError(BaseServiceError):
    """Raised when the orders grid cannot be built from the given filters."""
    pass
