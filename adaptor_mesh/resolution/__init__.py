"""Address resolution."""

from .address_book import AddressBook
from .resolver import (
    ZERO_ADDRESS,
    AddressResolver,
    is_same_address,
    is_zero_address,
    normalize_address,
)

__all__ = [
    "AddressBook",
    "AddressResolver",
    "ZERO_ADDRESS",
    "is_same_address",
    "is_zero_address",
    "normalize_address",
]
