"""Catalog loading and fork-network aliasing."""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models.adaptor import AdaptorConfig, AddressRef
from ..models.catalog import CatalogDocument
from .adaptors import AdaptorCatalog
from .defaults import DEV_NETWORKS, default_document
from .networks import NetworkCatalog
from .tokens import TokenRegistry


logger = logging.getLogger(__name__)


class MeshCatalog:
    """
    Immutable bundle of every static table the mesh needs.

    Passed explicitly to the peer resolver and the synchronizer; nothing in
    the core reads configuration from module state.
    """

    def __init__(
        self,
        networks: NetworkCatalog,
        adaptors: AdaptorCatalog,
        tokens: Optional[TokenRegistry] = None
    ):
        """
        Initialize mesh catalog.

        Args:
            networks: Network groups and chain ids
            adaptors: Adaptor deployments
            tokens: Token address references

        Raises:
            ConfigurationError: if an adaptor lives on a network without a group
        """
        self.networks = networks
        self.adaptors = adaptors
        self.tokens = tokens or TokenRegistry({})

        unmapped = [n for n in adaptors.networks() if n not in networks]
        if unmapped:
            raise ConfigurationError(
                f"Adaptors configured on networks without a network group: {', '.join(sorted(unmapped))}"
            )

    @classmethod
    def from_document(cls, document: CatalogDocument) -> "MeshCatalog":
        """Build a catalog from its serialized form, applying fork aliasing."""
        if document.fork_network:
            document = inject_fork_network(document, document.fork_network)

        groups = {name: entry.group for name, entry in document.networks.items()}
        chain_ids: Dict = {}
        for name, entry in document.networks.items():
            for messenger_type, chain_id in entry.chain_ids.items():
                chain_ids.setdefault(messenger_type, {})[name] = chain_id

        return cls(
            networks=NetworkCatalog(groups, chain_ids),
            adaptors=AdaptorCatalog(document.adaptors),
            tokens=TokenRegistry(document.tokens),
        )

    def to_document(self) -> CatalogDocument:
        """Serialize the catalog."""
        networks = {}
        for name in self.networks.networks():
            networks[name] = {
                "group": self.networks.group_of(name),
                "chain_ids": self.networks.chain_ids_of(name),
            }
        adaptors: Dict[str, Dict[str, AdaptorConfig]] = {}
        for pool_type, network, config in self.adaptors.all_entries():
            adaptors.setdefault(network, {})[pool_type] = config
        tokens = {
            token: {network: self.tokens.reference(token, network) for network in self.tokens.networks_of(token)}
            for token in self.tokens.tokens()
        }
        return CatalogDocument(networks=networks, adaptors=adaptors, tokens=tokens)


def _pin_network(ref: AddressRef, network: str) -> AddressRef:
    if ref.is_deployment and ref.network is None:
        return AddressRef.of_deployment(ref.deployment, network)
    return ref


def inject_fork_network(
    document: CatalogDocument,
    fork_network: str,
    dev_networks: Iterable[str] = DEV_NETWORKS
) -> CatalogDocument:
    """
    Make the dev networks mirror a forked network's configuration.

    When a local node forks a live network, the dev networks take on the
    forked network's adaptors, chain ids and token addresses. Deployment
    references keep pointing at the forked network's address book. Network
    groups are not changed.

    Args:
        document: Catalog document to alias
        fork_network: Network being forked
        dev_networks: Networks that take on the fork's configuration

    Returns:
        New catalog document

    Raises:
        ConfigurationError: if the forked network is not in the document
    """
    if fork_network not in document.networks:
        raise ConfigurationError(f"Fork network {fork_network} is not configured")

    data = document.model_copy(deep=True)
    source_entry = document.networks[fork_network]
    source_adaptors = document.adaptors.get(fork_network, {})

    for dev in dev_networks:
        if dev == fork_network or dev not in data.networks:
            continue
        data.networks[dev] = data.networks[dev].model_copy(
            update={"chain_ids": dict(source_entry.chain_ids)}
        )
        data.adaptors[dev] = {
            pool_type: config.model_copy(update={"address": _pin_network(config.address, fork_network)})
            for pool_type, config in source_adaptors.items()
        }
        for per_network in data.tokens.values():
            per_network.pop(dev, None)
            if fork_network in per_network:
                per_network[dev] = _pin_network(per_network[fork_network], fork_network)

    logger.info(f"Dev networks now mirror fork network {fork_network}")
    data.fork_network = None
    return data


def load_catalog_document(path: Union[str, Path]) -> CatalogDocument:
    """
    Load a catalog document from a JSON file.

    Raises:
        ConfigurationError: if the file is missing or malformed
    """
    path = Path(path)
    try:
        with open(path, 'r') as f:
            payload = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Catalog file not found: {path}") from None
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Catalog file {path} is not valid JSON: {e}") from e

    try:
        return CatalogDocument.model_validate(payload)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid catalog file {path}: {e}") from e


def load_catalog(
    path: Optional[Union[str, Path]] = None,
    fork_network: Optional[str] = None
) -> MeshCatalog:
    """
    Load the mesh catalog.

    Args:
        path: JSON catalog file; the built-in tables are used when omitted
        fork_network: Overrides the document's fork network

    Returns:
        MeshCatalog
    """
    if path is None:
        document = default_document()
        logger.debug("Using built-in catalog tables")
    else:
        document = load_catalog_document(path)
        logger.debug(f"Loaded catalog from {path}")

    if fork_network:
        document = document.model_copy(update={"fork_network": fork_network})

    return MeshCatalog.from_document(document)
