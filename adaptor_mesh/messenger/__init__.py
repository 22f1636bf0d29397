"""Messenger adapters over the two cross-chain messaging backends."""

from .client import ContractClient, Web3ContractClient
from .base import MessengerAdapter
from .wormhole import WormholeMessenger
from .layerzero import LayerZeroMessenger, NO_TRUSTED_PATH
from .factory import MESSENGERS, messenger_for

__all__ = [
    "ContractClient",
    "Web3ContractClient",
    "MessengerAdapter",
    "WormholeMessenger",
    "LayerZeroMessenger",
    "NO_TRUSTED_PATH",
    "MESSENGERS",
    "messenger_for",
]
