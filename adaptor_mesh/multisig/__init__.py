"""Safe multisig batch export."""

from .tx_builder import (
    BatchFile,
    BatchFileMeta,
    BatchTransaction,
    BatchValidationError,
    ContractMethod,
    create_transaction,
    encode_param,
    validate_transactions_in_batch,
)
from .batch import SafeBatchExecutor, load_batch_file, write_batch_file

__all__ = [
    "BatchFile",
    "BatchFileMeta",
    "BatchTransaction",
    "BatchValidationError",
    "ContractMethod",
    "create_transaction",
    "encode_param",
    "validate_transactions_in_batch",
    "SafeBatchExecutor",
    "load_batch_file",
    "write_batch_file",
]
