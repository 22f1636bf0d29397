"""Network registry: trust-domain groups and transport chain ids."""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from ..errors import ConfigNotFound
from ..models.network import MessengerType, NetworkGroup


class NetworkCatalog:
    """
    Static registry of networks.

    Maps every network to exactly one NetworkGroup and, per messenger
    backend, to that backend's chain id. Chain id tables are partial: a
    network without an id for a backend cannot be wired through it yet.
    """

    def __init__(
        self,
        groups: Mapping[str, NetworkGroup],
        chain_ids: Optional[Mapping[MessengerType, Mapping[str, int]]] = None
    ):
        """
        Initialize network catalog.

        Args:
            groups: Network -> NetworkGroup
            chain_ids: Messenger type -> (network -> transport chain id)
        """
        self._groups: Mapping[str, NetworkGroup] = MappingProxyType(
            {network: NetworkGroup(group) for network, group in groups.items()}
        )
        tables: Dict[MessengerType, Mapping[str, int]] = {}
        for messenger_type, table in (chain_ids or {}).items():
            tables[MessengerType(messenger_type)] = MappingProxyType(
                {network: int(chain_id) for network, chain_id in table.items()}
            )
        self._chain_ids: Mapping[MessengerType, Mapping[str, int]] = MappingProxyType(tables)

    def group_of(self, network: str) -> NetworkGroup:
        """
        Get the trust domain of a network.

        Raises:
            ConfigNotFound: if the network has no group mapping
        """
        try:
            return self._groups[network]
        except KeyError:
            raise ConfigNotFound(f"No network group configured for network {network}") from None

    def chain_id(self, messenger_type: MessengerType, network: str) -> Optional[int]:
        """
        Get the transport chain id of a network for a messenger backend.

        Returns:
            Chain id, or None when the network is not provisioned for the backend
        """
        table = self._chain_ids.get(MessengerType(messenger_type), {})
        return table.get(network)

    def networks(self) -> List[str]:
        """Get all mapped networks."""
        return list(self._groups.keys())

    def members_of(self, group: NetworkGroup) -> List[str]:
        """Get networks belonging to a group."""
        return [network for network, g in self._groups.items() if g == group]

    def chain_ids_of(self, network: str) -> Dict[MessengerType, int]:
        """Get every registered chain id of a network."""
        return {
            messenger_type: table[network]
            for messenger_type, table in self._chain_ids.items()
            if network in table
        }

    def __contains__(self, network: str) -> bool:
        return network in self._groups
