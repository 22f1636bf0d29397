"""Token address registry."""

from types import MappingProxyType
from typing import Dict, List, Mapping

from ..errors import ConfigNotFound
from ..models.adaptor import AddressRef


class TokenRegistry:
    """Maps (token, network) to the token's address reference on that network."""

    def __init__(self, tokens: Mapping[str, Mapping[str, AddressRef]]):
        frozen: Dict[str, Mapping[str, AddressRef]] = {}
        for token, per_network in tokens.items():
            frozen[token] = MappingProxyType({
                network: ref if isinstance(ref, AddressRef) else AddressRef(**ref)
                for network, ref in per_network.items()
            })
        self._tokens: Mapping[str, Mapping[str, AddressRef]] = MappingProxyType(frozen)

    def reference(self, token: str, network: str) -> AddressRef:
        """
        Get the address reference of a token on a network.

        Raises:
            ConfigNotFound: if the token is not registered on the network
        """
        ref = self._tokens.get(token, {}).get(network)
        if ref is None:
            raise ConfigNotFound(f"No config found for token {token} in network {network}")
        return ref

    def tokens(self) -> List[str]:
        return list(self._tokens.keys())

    def networks_of(self, token: str) -> List[str]:
        return list(self._tokens.get(token, {}).keys())
