"""Data models for adaptor mesh configuration and synchronization."""

from .network import NetworkGroup, MessengerType, PoolType
from .adaptor import AddressRef, AdaptorConfig, PeerTuple
from .actions import (
    ApproveToken,
    ContractCall,
    ContractInput,
    PeerPlan,
    PeerStatus,
    SetTrustedPeer,
    SkipReason,
    SyncAction,
    SyncReport,
)
from .catalog import CatalogDocument, NetworkEntry

__all__ = [
    "NetworkGroup",
    "MessengerType",
    "PoolType",
    "AddressRef",
    "AdaptorConfig",
    "PeerTuple",
    "ApproveToken",
    "ContractCall",
    "ContractInput",
    "PeerPlan",
    "PeerStatus",
    "SetTrustedPeer",
    "SkipReason",
    "SyncAction",
    "SyncReport",
    "CatalogDocument",
    "NetworkEntry",
]
