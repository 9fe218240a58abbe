"""
Domain-specific exceptions for items app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class ItemsServiceError(Exception):
    """Base exception for all items service errors."""
    pass


class ItemNotFoundError(ItemsServiceError):
    """Raised when an item does not exist or belongs to another user."""
    pass
