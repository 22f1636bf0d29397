"""Resolution of configuration address references to concrete addresses."""

from typing import Optional

from eth_utils import is_address, to_checksum_address

from ..errors import ConfigurationError
from ..models.adaptor import AddressRef
from .address_book import AddressBook


ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def normalize_address(address: str) -> str:
    """
    Checksum an address.

    Raises:
        ConfigurationError: if the value is not an address
    """
    if not isinstance(address, str) or not is_address(address):
        raise ConfigurationError(f"Invalid address: {address!r}")
    return to_checksum_address(address)


def is_same_address(left: str, right: str) -> bool:
    """Compare two addresses ignoring checksum casing."""
    return normalize_address(left) == normalize_address(right)


def is_zero_address(address: Optional[str]) -> bool:
    return address is None or normalize_address(address) == ZERO_ADDRESS


class AddressResolver:
    """Resolves literal addresses and deployment references at call time."""

    def __init__(self, address_book: Optional[AddressBook] = None):
        self.address_book = address_book or AddressBook()

    def resolve(self, ref: AddressRef, network: str) -> str:
        """
        Resolve a reference to a checksum address.

        Args:
            ref: Literal address or deployment reference
            network: Network the reference is used on

        Returns:
            Checksum address

        Raises:
            ConfigNotFound: if the deployment is unknown
            ConfigurationError: if the resolved value is not an address
        """
        if ref.address is not None:
            return normalize_address(ref.address)
        return normalize_address(self.address_book.lookup(ref.network or network, ref.deployment))
