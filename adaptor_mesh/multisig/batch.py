"""Export reconciliation actions as a Safe batch instead of sending them."""

import json
import logging
import time
from pathlib import Path
from typing import List, Optional, Union

from ..mesh.executor import ActionExecutor, encode_action
from ..resolution import normalize_address
from .tx_builder import BatchFile, BatchFileMeta, BatchTransaction, create_transaction


logger = logging.getLogger(__name__)

TX_BUILDER_VERSION = "1.16.3"


class SafeBatchExecutor(ActionExecutor):
    """
    Collects every action as a Safe Transaction Builder transaction.

    Nothing is sent, so on-chain state does not change during the run: a
    batch holds the actions of a single run and is meant to be executed by
    the Safe owning the adaptors.
    """

    sends_transactions = False

    def __init__(self, chain_id: int, safe_address: Optional[str] = None):
        """
        Initialize batch executor.

        Args:
            chain_id: EVM chain id of the network the Safe lives on
            safe_address: Safe proposing the batch (optional)
        """
        self.chain_id = chain_id
        self.safe_address = normalize_address(safe_address) if safe_address else None
        self.transactions: List[BatchTransaction] = []

    def execute(self, action, adapter):
        transaction = create_transaction(encode_action(action, adapter))
        self.transactions.append(transaction)
        logger.info(f"[batch] {action.describe()}")
        return None

    def build_batch(self, name: str, description: Optional[str] = None) -> BatchFile:
        """Assemble the collected transactions into a batch file."""
        return BatchFile(
            chain_id=str(self.chain_id),
            created_at=int(time.time() * 1000),
            meta=BatchFileMeta(
                name=name,
                description=description,
                tx_builder_version=TX_BUILDER_VERSION,
                created_from_safe_address=self.safe_address,
            ),
            transactions=list(self.transactions),
        )


def write_batch_file(batch: BatchFile, path: Union[str, Path]) -> Path:
    """
    Write a batch file as indented JSON, creating parent directories.

    An existing file is overwritten with a warning.
    """
    path = Path(path)
    if path.exists():
        logger.warning(f"Overwriting existing file {path}")
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(batch.to_json_dict(), f, indent=2)
        f.write('\n')
    logger.info(f"Saved {len(batch.transactions)} transactions to {path}")
    return path


def load_batch_file(path: Union[str, Path]) -> BatchFile:
    """Read a batch file written by `write_batch_file`."""
    with open(path, 'r') as f:
        return BatchFile.model_validate(json.load(f))
