"""LayerZero adaptor variant."""

import logging
from typing import Optional, Union

from ..errors import ContractCallReverted
from ..models.actions import ContractCall, ContractInput
from ..models.network import MessengerType
from ..resolution import normalize_address
from .base import TOKEN_ABI, MessengerAdapter, _view, _write


logger = logging.getLogger(__name__)

NO_TRUSTED_PATH = "LzApp: no trusted path record"


def _address_from_bytes(value: Union[bytes, str]) -> str:
    """Decode the 20-byte remote address LzApp returns."""
    if isinstance(value, str):
        value = bytes.fromhex(value[2:] if value.startswith('0x') else value)
    if len(value) < 20:
        raise ValueError(f"Trusted remote is {len(value)} bytes, expected 20")
    return normalize_address('0x' + value[:20].hex())


class LayerZeroMessenger(MessengerAdapter):
    """
    Adaptor reached through LayerZero.

    ``getTrustedRemoteAddress(chainId)`` reverts with
    ``"LzApp: no trusted path record"`` for an unset slot; that revert is
    reported as None. Any other revert propagates.
    """

    messenger_type = MessengerType.LAYERZERO
    abi = [
        _view("getTrustedRemoteAddress", [{"name": "_remoteChainId", "type": "uint16"}], "bytes"),
        _write("setTrustedRemoteAddress", [
            {"name": "_remoteChainId", "type": "uint16"},
            {"name": "_remoteAddress", "type": "bytes"},
        ]),
    ] + TOKEN_ABI

    def get_trusted_peer_address(self, local_adaptor: str, peer_chain_id: int) -> Optional[str]:
        try:
            remote = self.client.call(local_adaptor, self.abi, "getTrustedRemoteAddress", [peer_chain_id])
        except ContractCallReverted as e:
            if NO_TRUSTED_PATH in e.reason:
                logger.debug(f"No trusted path on {local_adaptor} for chain {peer_chain_id}")
                return None
            raise
        return _address_from_bytes(remote)

    def encode_set_trusted_peer(self, local_adaptor: str, peer_chain_id: int, address: str) -> ContractCall:
        return ContractCall(
            to=normalize_address(local_adaptor),
            method="setTrustedRemoteAddress",
            inputs=[
                ContractInput(name="_remoteChainId", type="uint16"),
                ContractInput(name="_remoteAddress", type="bytes"),
            ],
            args=[peer_chain_id, normalize_address(address)],
        )
