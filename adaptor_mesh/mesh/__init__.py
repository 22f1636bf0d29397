"""Peer resolution and mesh synchronization."""

from .resolver import PeerResolver
from .executor import ActionExecutor, TransactionExecutor, RecordingExecutor, encode_action
from .synchronizer import MeshSynchronizer

__all__ = [
    "PeerResolver",
    "ActionExecutor",
    "TransactionExecutor",
    "RecordingExecutor",
    "encode_action",
    "MeshSynchronizer",
]
