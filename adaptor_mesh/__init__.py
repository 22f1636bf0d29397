"""Adaptor Mesh - keep cross-chain adaptor deployments trusting each other."""

from .errors import AdaptorMeshError, AdaptorMismatch, ConfigNotFound, ConfigurationError, ContractCallReverted
from .catalog import MeshCatalog, load_catalog
from .mesh import MeshSynchronizer, PeerResolver
from .models import MessengerType, NetworkGroup, PeerTuple, PoolType

__version__ = "0.1.0"

__all__ = [
    "AdaptorMeshError",
    "AdaptorMismatch",
    "ConfigNotFound",
    "ConfigurationError",
    "ContractCallReverted",
    "MeshCatalog",
    "load_catalog",
    "MeshSynchronizer",
    "PeerResolver",
    "MessengerType",
    "NetworkGroup",
    "PeerTuple",
    "PoolType",
]
