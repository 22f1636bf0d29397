"""Adaptor registry keyed by (pool type, network)."""

from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from ..errors import ConfigNotFound
from ..models.adaptor import AdaptorConfig


class AdaptorCatalog:
    """
    Static partial map of (pool type, network) -> AdaptorConfig.

    Read-only once constructed.
    """

    def __init__(self, entries: Mapping[str, Mapping[str, AdaptorConfig]]):
        """
        Initialize adaptor catalog.

        Args:
            entries: network -> pool type -> adaptor config
        """
        frozen: Dict[str, Mapping[str, AdaptorConfig]] = {}
        for network, pools in entries.items():
            frozen[network] = MappingProxyType({
                pool_type: config if isinstance(config, AdaptorConfig) else AdaptorConfig(**config)
                for pool_type, config in pools.items()
            })
        self._entries: Mapping[str, Mapping[str, AdaptorConfig]] = MappingProxyType(frozen)

    def entries_for(self, network: str) -> Mapping[str, AdaptorConfig]:
        """Get pool type -> adaptor config for a network (empty if none)."""
        return self._entries.get(network, MappingProxyType({}))

    def all_entries(self) -> Iterator[Tuple[str, str, AdaptorConfig]]:
        """Iterate (pool type, network, adaptor config) over the whole catalog."""
        for network, pools in self._entries.items():
            for pool_type, config in pools.items():
                yield pool_type, network, config

    def get(self, pool_type: str, network: str) -> Optional[AdaptorConfig]:
        """Look up an adaptor, None when not configured."""
        return self._entries.get(network, {}).get(pool_type)

    def require(self, pool_type: str, network: str) -> AdaptorConfig:
        """
        Look up an adaptor that must exist.

        Raises:
            ConfigNotFound: if no adaptor is configured for the pair
        """
        config = self.get(pool_type, network)
        if config is None:
            raise ConfigNotFound(f"No adaptor config for {pool_type} on {network}")
        return config

    def networks(self) -> List[str]:
        """Networks with at least one adaptor."""
        return [network for network, pools in self._entries.items() if pools]

    def pool_types(self, network: str) -> List[str]:
        """Pool types configured on a network."""
        return list(self.entries_for(network).keys())
