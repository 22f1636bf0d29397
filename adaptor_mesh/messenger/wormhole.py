"""Wormhole adaptor variant."""

from typing import Optional

from ..models.actions import ContractCall, ContractInput
from ..models.network import MessengerType
from ..resolution import is_zero_address, normalize_address
from .base import TOKEN_ABI, MessengerAdapter, _view, _write


class WormholeMessenger(MessengerAdapter):
    """
    Adaptor reached through Wormhole.

    ``adaptorAddress(chainId)`` returns the zero address for an unset slot.
    """

    messenger_type = MessengerType.WORMHOLE
    abi = [
        _view("adaptorAddress", [{"name": "", "type": "uint256"}], "address"),
        _write("setAdaptorAddress", [
            {"name": "wormholeChainId", "type": "uint16"},
            {"name": "addr", "type": "address"},
        ]),
    ] + TOKEN_ABI

    def get_trusted_peer_address(self, local_adaptor: str, peer_chain_id: int) -> Optional[str]:
        current = self.client.call(local_adaptor, self.abi, "adaptorAddress", [peer_chain_id])
        if is_zero_address(current):
            return None
        return normalize_address(current)

    def encode_set_trusted_peer(self, local_adaptor: str, peer_chain_id: int, address: str) -> ContractCall:
        return ContractCall(
            to=normalize_address(local_adaptor),
            method="setAdaptorAddress",
            inputs=[
                ContractInput(name="wormholeChainId", type="uint16"),
                ContractInput(name="addr", type="address"),
            ],
            args=[peer_chain_id, normalize_address(address)],
        )
