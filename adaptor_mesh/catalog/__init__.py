"""Static configuration catalogs."""

from .networks import NetworkCatalog
from .adaptors import AdaptorCatalog
from .tokens import TokenRegistry
from .loader import MeshCatalog, inject_fork_network, load_catalog, load_catalog_document
from .defaults import default_document

__all__ = [
    "NetworkCatalog",
    "AdaptorCatalog",
    "TokenRegistry",
    "MeshCatalog",
    "inject_fork_network",
    "load_catalog",
    "load_catalog_document",
    "default_document",
]
