"""Messenger adapter selection."""

from typing import Dict, Type

from ..errors import ConfigurationError
from ..models.network import MessengerType
from .base import MessengerAdapter
from .client import ContractClient
from .layerzero import LayerZeroMessenger
from .wormhole import WormholeMessenger


MESSENGERS: Dict[MessengerType, Type[MessengerAdapter]] = {
    MessengerType.WORMHOLE: WormholeMessenger,
    MessengerType.LAYERZERO: LayerZeroMessenger,
}


def messenger_for(messenger_type: MessengerType, client: ContractClient) -> MessengerAdapter:
    """
    Create the adapter variant for a messenger backend.

    Raises:
        ConfigurationError: if the backend has no adapter
    """
    try:
        adapter_cls = MESSENGERS[MessengerType(messenger_type)]
    except (KeyError, ValueError):
        raise ConfigurationError(f"No messenger adapter for {messenger_type}") from None
    return adapter_cls(client)
