"""
Safe Transaction Builder batch file models.

The layout follows the batch JSON the Safe Transaction Builder app imports:

    {
      "version": "1.0",
      "chainId": "56",
      "createdAt": 1690000000000,
      "meta": {"name": "...", "createdFromSafeAddress": "0x..."},
      "transactions": [
        {
          "to": "0x...",
          "value": "0",
          "contractMethod": {"inputs": [...], "name": "approveToken", "payable": false},
          "contractInputsValues": {"tokenChainId": "4", "tokenAddr": "0x..."}
        }
      ]
    }

Every transaction value and contract input value is a string, as typed in
the app's UI.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..errors import AdaptorMeshError
from ..models.actions import ContractCall


class BatchValidationError(AdaptorMeshError):
    """A batch transaction is not encoded the way the Transaction Builder expects."""


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class BatchContractInput(_CamelModel):
    """ABI input shown by the Transaction Builder."""
    internal_type: str = Field(..., alias="internalType", description="Solidity internal type")
    name: str = Field(..., description="Parameter name")
    type: str = Field(..., description="Solidity type")


class ContractMethod(_CamelModel):
    """Method called by a batch transaction."""
    inputs: List[BatchContractInput] = Field(default_factory=list)
    name: str = Field(..., description="Method name")
    payable: bool = Field(default=False)


class BatchTransaction(_CamelModel):
    """One call proposed to the Safe."""
    to: str = Field(..., description="Target contract address")
    value: Any = Field(default="0", description="Native value, encoded as a string")
    data: Optional[str] = Field(default=None, description="Raw calldata, unused when contractMethod is set")
    contract_method: Optional[ContractMethod] = Field(default=None, alias="contractMethod")
    contract_inputs_values: Optional[Dict[str, Any]] = Field(default=None, alias="contractInputsValues")


class BatchFileMeta(_CamelModel):
    """Batch metadata."""
    name: str = Field(..., description="Batch name shown in the app")
    description: Optional[str] = None
    tx_builder_version: Optional[str] = Field(default=None, alias="txBuilderVersion")
    checksum: Optional[str] = None
    created_from_safe_address: Optional[str] = Field(default=None, alias="createdFromSafeAddress")
    created_from_owner_address: Optional[str] = Field(default=None, alias="createdFromOwnerAddress")


class BatchFile(_CamelModel):
    """A complete batch, importable into the Transaction Builder."""
    version: str = Field(default="1.0")
    chain_id: str = Field(..., alias="chainId", description="EVM chain id, as a string")
    created_at: int = Field(..., alias="createdAt", description="Creation time in milliseconds")
    meta: BatchFileMeta
    transactions: List[BatchTransaction] = Field(default_factory=list)

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)


def encode_param(value: Any) -> str:
    """
    Encode an argument the way the Transaction Builder UI reads it.

    Arrays become ``[a,b]`` with unquoted elements; nested arrays are not
    supported.
    """
    if isinstance(value, (list, tuple)):
        if any(isinstance(v, (list, tuple)) for v in value):
            raise NotImplementedError("Nested arrays are not supported")
        return "[" + ",".join(str(v) for v in value) + "]"
    if isinstance(value, bytes):
        return "0x" + value.hex()
    return str(value)


def validate_transactions_in_batch(transactions: List[BatchTransaction]) -> bool:
    """
    Check every transaction is string encoded.

    Raises:
        BatchValidationError: on a non-string value or a numeric input value
    """
    for tx in transactions:
        if not isinstance(tx.value, str):
            raise BatchValidationError(f"Invalid transaction value: {tx.value!r} in transaction to {tx.to}")
        inputs = tx.contract_inputs_values or {}
        if any(isinstance(v, (int, float)) for v in inputs.values()):
            raise BatchValidationError(f"Numeric contract input in transaction to {tx.to}: {inputs}")
    return True


def create_transaction(call: ContractCall) -> BatchTransaction:
    """
    Build a batch transaction from an encoded contract call.

    Raises:
        BatchValidationError: if the call's arguments do not match its inputs
    """
    if len(call.inputs) != len(call.args):
        raise BatchValidationError(
            f"{call.method} takes {len(call.inputs)} arguments, got {len(call.args)}"
        )

    transaction = BatchTransaction(
        to=call.to,
        value="0",
        contract_method=ContractMethod(
            name=call.method,
            inputs=[
                BatchContractInput(internal_type=i.type, name=i.name, type=i.type)
                for i in call.inputs
            ],
        ),
        contract_inputs_values={
            i.name: encode_param(arg) for i, arg in zip(call.inputs, call.args)
        },
    )
    validate_transactions_in_batch([transaction])
    return transaction
