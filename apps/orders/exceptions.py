"""
Domain exceptions for orders app.

These are raised by the orders service layer and translated to HTTP
responses in the views.

Exception Hierarchy:
    OrderServiceError (base)
    ├── OrderNotFoundError
    ├── ProductNotFoundError
    ├── ClientNotFoundError
    └── InvalidOrderError
"""


class OrderServiceError(Exception):
    """Base exception for order service errors."""
    pass


class OrderNotFoundError(OrderServiceError):
    """Raised when the order does not exist."""
    pass


class ProductNotFoundError(OrderServiceError):
    """
    Raised when one or more ordered products do not exist.

    Attributes:
        missing_ids: Sorted list of product ids that were not found.
    """

    def __init__(self, missing_ids):
        self.missing_ids = list(missing_ids)
        ids = ', '.join(str(pk) for pk in self.missing_ids)
        super().__init__(f"Products not found: {ids}")


class ClientNotFoundError(OrderServiceError):
    """Raised when the referenced client does not exist."""
    pass


class InvalidOrderError(OrderServiceError):
    """Raised when order input breaks a business rule (no items, bad quantity, bad status)."""
    pass
