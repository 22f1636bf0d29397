"""Catalog document schema.

A catalog document is the JSON form of the static configuration tables:

    {
      "networks": {
        "bsc_mainnet": {"group": "mainnet", "chain_ids": {"wormhole": 4}}
      },
      "adaptors": {
        "bsc_mainnet": {
          "Stablecoin_Pool": {
            "address": {"deployment": "WormholeAdaptor_Stablecoin_Pool_Proxy"},
            "tokens": ["USDC", "USDT"],
            "messenger_type": "wormhole"
          }
        }
      },
      "tokens": {
        "USDC": {"bsc_mainnet": {"address": "0x8AC7..."}}
      }
    }
"""

from typing import Dict, Optional
from pydantic import BaseModel, Field

from .adaptor import AdaptorConfig, AddressRef
from .network import MessengerType, NetworkGroup


class NetworkEntry(BaseModel):
    """One network's group and per-backend chain ids."""
    group: NetworkGroup = Field(..., description="Trust domain of the network")
    chain_ids: Dict[MessengerType, int] = Field(
        default_factory=dict,
        description="Transport chain id per messenger backend"
    )


class CatalogDocument(BaseModel):
    """Serialized form of a MeshCatalog."""
    version: int = Field(default=1, description="Document format version")
    fork_network: Optional[str] = Field(
        None,
        description="Network whose configuration the dev networks take on"
    )
    networks: Dict[str, NetworkEntry] = Field(default_factory=dict)
    adaptors: Dict[str, Dict[str, AdaptorConfig]] = Field(
        default_factory=dict,
        description="network -> pool type -> adaptor config"
    )
    tokens: Dict[str, Dict[str, AddressRef]] = Field(
        default_factory=dict,
        description="token -> network -> address reference"
    )
