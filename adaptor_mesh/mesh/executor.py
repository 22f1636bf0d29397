"""Executors applying reconciliation actions."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..messenger.base import MessengerAdapter
from ..models.actions import ApproveToken, ContractCall, SetTrustedPeer, SyncAction


logger = logging.getLogger(__name__)


def encode_action(action: SyncAction, adapter: MessengerAdapter) -> ContractCall:
    """Encode an action as the contract call that performs it."""
    if isinstance(action, SetTrustedPeer):
        return adapter.encode_set_trusted_peer(action.local_adaptor, action.chain_id, action.peer_adaptor)
    if isinstance(action, ApproveToken):
        return adapter.encode_approve_token(action.local_adaptor, action.chain_id, action.token_address)
    raise TypeError(f"Unknown sync action: {action!r}")


class ActionExecutor(ABC):
    """Applies actions one at a time, in order."""

    #: Whether executed actions change on-chain state during the run.
    sends_transactions: bool = True

    @abstractmethod
    def execute(self, action: SyncAction, adapter: MessengerAdapter) -> Optional[Dict[str, Any]]:
        """
        Apply one action.

        Returns only after the action's effect is final; any exception
        halts the run.
        """


class TransactionExecutor(ActionExecutor):
    """Sends each action on-chain and waits for its receipt."""

    def __init__(self):
        self.receipts: List[Dict[str, Any]] = []

    def execute(self, action, adapter):
        logger.info(action.describe())
        if isinstance(action, SetTrustedPeer):
            receipt = adapter.set_trusted_peer_address(action.local_adaptor, action.chain_id, action.peer_adaptor)
        elif isinstance(action, ApproveToken):
            receipt = adapter.approve_token(action.local_adaptor, action.chain_id, action.token_address)
        else:
            raise TypeError(f"Unknown sync action: {action!r}")
        self.receipts.append(receipt)
        return receipt


class RecordingExecutor(ActionExecutor):
    """Collects actions without sending anything."""

    sends_transactions = False

    def __init__(self):
        self.actions: List[SyncAction] = []

    def execute(self, action, adapter):
        logger.info(f"[dry-run] {action.describe()}")
        self.actions.append(action)
        return None
