"""Contract call seam between messenger adapters and a chain."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.exceptions import ContractLogicError

from ..errors import ContractCallReverted


logger = logging.getLogger(__name__)


def _revert_reason(error: ContractLogicError) -> str:
    return getattr(error, 'message', None) or str(error)


class ContractClient(ABC):
    """Reads and writes contract state on one network."""

    @abstractmethod
    def call(self, address: str, abi: List[Dict[str, Any]], method: str, args: Sequence[Any]) -> Any:
        """
        Execute a view call.

        Raises:
            ContractCallReverted: if the call reverts
        """

    @abstractmethod
    def transact(self, address: str, abi: List[Dict[str, Any]], method: str, args: Sequence[Any]) -> Dict[str, Any]:
        """
        Send a transaction and wait until it is confirmed.

        Returns:
            Transaction receipt

        Raises:
            ContractCallReverted: if the transaction reverts
        """


class Web3ContractClient(ContractClient):
    """
    ContractClient backed by web3.py.

    Transactions are signed by a local operator account when one is given,
    otherwise sent from the node's default account. Every transaction is
    awaited to its receipt before returning.
    """

    def __init__(
        self,
        web3: Web3,
        account: Optional[LocalAccount] = None,
        receipt_timeout: float = 180.0
    ):
        """
        Initialize web3 client.

        Args:
            web3: Connected Web3 instance
            account: Operator account signing transactions
            receipt_timeout: Seconds to wait for each receipt
        """
        self.web3 = web3
        self.account = account
        self.receipt_timeout = receipt_timeout

    @classmethod
    def from_rpc_url(cls, rpc_url: str, private_key: Optional[str] = None, **kwargs) -> "Web3ContractClient":
        """Connect to an HTTP JSON-RPC endpoint."""
        web3 = Web3(Web3.HTTPProvider(rpc_url))
        account = web3.eth.account.from_key(private_key) if private_key else None
        return cls(web3, account, **kwargs)

    def _function(self, address: str, abi: List[Dict[str, Any]], method: str, args: Sequence[Any]):
        contract = self.web3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)
        return contract.get_function_by_name(method)(*args)

    def call(self, address, abi, method, args):
        try:
            return self._function(address, abi, method, args).call()
        except ContractLogicError as e:
            raise ContractCallReverted(method, _revert_reason(e)) from e

    def transact(self, address, abi, method, args):
        function = self._function(address, abi, method, args)
        try:
            if self.account is not None:
                tx = function.build_transaction({
                    'from': self.account.address,
                    'nonce': self.web3.eth.get_transaction_count(self.account.address, 'pending'),
                })
                signed = self.account.sign_transaction(tx)
                tx_hash = self.web3.eth.send_raw_transaction(signed.raw_transaction)
            else:
                tx_hash = function.transact({'from': self.web3.eth.default_account})
        except ContractLogicError as e:
            raise ContractCallReverted(method, _revert_reason(e)) from e

        logger.debug(f"Sent {method} to {address}: {tx_hash.hex()}")
        receipt = self.web3.eth.wait_for_transaction_receipt(tx_hash, timeout=self.receipt_timeout)
        if receipt['status'] != 1:
            raise ContractCallReverted(method, f"transaction {tx_hash.hex()} failed")
        return dict(receipt)
