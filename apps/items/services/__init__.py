"""
Items app services layer.

Logging, listing and summarizing the things a user held back from buying.
"""

from .exceptions import (
    ItemsServiceError,
    ItemNotFoundError,
)
from .item_management import (
    add_item,
    delete_item,
    get_user_items,
    summarize_items,
)

__all__ = [
    # Exceptions
    'ItemsServiceError',
    'ItemNotFoundError',

    # Item Management
    'add_item',
    'delete_item',
    'get_user_items',
    'summarize_items',
]
