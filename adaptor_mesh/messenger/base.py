"""Messenger adapter capability interface."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models.actions import ContractCall, ContractInput
from ..models.network import MessengerType
from ..resolution import normalize_address
from .client import ContractClient


logger = logging.getLogger(__name__)


def _view(name: str, inputs: List[Dict[str, str]], output: str) -> Dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "stateMutability": "view",
        "inputs": [{"internalType": i["type"], **i} for i in inputs],
        "outputs": [{"internalType": output, "name": "", "type": output}],
    }


def _write(name: str, inputs: List[Dict[str, str]]) -> Dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "stateMutability": "nonpayable",
        "inputs": [{"internalType": i["type"], **i} for i in inputs],
        "outputs": [],
    }


# Shared by both adaptor variants.
TOKEN_ABI = [
    _view("validToken", [{"name": "", "type": "uint256"}, {"name": "", "type": "address"}], "bool"),
    _write("approveToken", [{"name": "tokenChainId", "type": "uint256"}, {"name": "tokenAddr", "type": "address"}]),
]


class MessengerAdapter(ABC):
    """
    Uniform view of an adaptor contract over one messaging backend.

    The trusted peer slot of an adaptor is keyed by the peer network's
    transport chain id. Every variant reports an unset slot as None,
    whatever the backend does on-chain.
    """

    messenger_type: MessengerType
    abi: List[Dict[str, Any]]

    def __init__(self, client: ContractClient):
        self.client = client

    @abstractmethod
    def get_trusted_peer_address(self, local_adaptor: str, peer_chain_id: int) -> Optional[str]:
        """
        Read the trusted peer adaptor for a chain.

        Returns:
            Checksum address, or None when the slot is unset
        """

    @abstractmethod
    def encode_set_trusted_peer(self, local_adaptor: str, peer_chain_id: int, address: str) -> ContractCall:
        """Describe the call that trusts `address` for `peer_chain_id`."""

    def set_trusted_peer_address(self, local_adaptor: str, peer_chain_id: int, address: str) -> Dict[str, Any]:
        """
        Trust `address` as the peer adaptor for `peer_chain_id`.

        Only valid on an unset slot; callers check first.
        """
        return self.send(self.encode_set_trusted_peer(local_adaptor, peer_chain_id, address))

    def is_token_approved(self, local_adaptor: str, peer_chain_id: int, token: str) -> bool:
        """Check whether `token` from `peer_chain_id` may be bridged in."""
        return bool(self.client.call(
            local_adaptor, self.abi, "validToken", [peer_chain_id, normalize_address(token)]
        ))

    def encode_approve_token(self, local_adaptor: str, peer_chain_id: int, token: str) -> ContractCall:
        return ContractCall(
            to=normalize_address(local_adaptor),
            method="approveToken",
            inputs=[
                ContractInput(name="tokenChainId", type="uint256"),
                ContractInput(name="tokenAddr", type="address"),
            ],
            args=[peer_chain_id, normalize_address(token)],
        )

    def approve_token(self, local_adaptor: str, peer_chain_id: int, token: str) -> Dict[str, Any]:
        """Approve `token` from `peer_chain_id`."""
        return self.send(self.encode_approve_token(local_adaptor, peer_chain_id, token))

    def send(self, call: ContractCall) -> Dict[str, Any]:
        """Send an encoded call and wait for its receipt."""
        logger.debug(f"{self.messenger_type.value}: {call.method}{tuple(call.args)} on {call.to}")
        return self.client.transact(call.to, self.abi, call.method, call.args)
