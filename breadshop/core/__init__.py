"""Core domain logic for the Bread Shop.

This package contains zero external dependencies and represents
the pure business logic of the application. Event sinks and the
CLI are handled by the adapters package.
"""

from .errors import (
    DuplicateAccountError,
    DuplicateKeyError,
    DuplicateOrderError,
    UnsupportedOperationError,
)
from .models import Account
from .repository import AccountRepository
from .shop import PRICE_OF_BREAD, Shop

__all__ = [
    "Account",
    "AccountRepository",
    "DuplicateAccountError",
    "DuplicateKeyError",
    "DuplicateOrderError",
    "PRICE_OF_BREAD",
    "Shop",
    "UnsupportedOperationError",
]
