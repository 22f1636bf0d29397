"""Peer resolution within a trust domain."""

from typing import Iterable, List, Optional

from ..catalog import MeshCatalog
from ..models.adaptor import PeerTuple


class PeerResolver:
    """
    Answers which adaptors a deployment must trust.

    Two deployments are peers when they share a pool type and their networks
    belong to the same network group. A network is never its own peer, so
    the intended topology of each (pool type, group) is a complete mesh.
    """

    def __init__(self, catalog: MeshCatalog):
        self.catalog = catalog

    def resolve_peers(
        self,
        pool_type: str,
        network: str,
        only_networks: Optional[Iterable[str]] = None
    ) -> List[PeerTuple]:
        """
        Resolve every peer of a deployment.

        Args:
            pool_type: Pool type of the local deployment
            network: Network of the local deployment
            only_networks: Restrict peers to these networks (no restriction if None)

        Returns:
            Peers in catalog order

        Raises:
            ConfigNotFound: if a network involved has no network group
        """
        allowed = set(only_networks) if only_networks is not None else None
        group = self.catalog.networks.group_of(network)

        peers = []
        for other_pool_type, other_network, _ in self.catalog.adaptors.all_entries():
            if other_network == network:
                continue
            if allowed is not None and other_network not in allowed:
                continue
            if other_pool_type != pool_type:
                continue
            if self.catalog.networks.group_of(other_network) != group:
                continue
            peers.append(PeerTuple(pool_type=other_pool_type, network=other_network))
        return peers
