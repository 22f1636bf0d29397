"""Network and messenger identifiers."""

from enum import Enum


class NetworkGroup(str, Enum):
    """Trust domain a network belongs to. Adaptors never peer across groups."""
    DEV = "dev"
    TESTNET = "testnet"
    MAINNET = "mainnet"


class MessengerType(str, Enum):
    """Cross-chain messaging backend an adaptor receives messages through."""
    WORMHOLE = "wormhole"
    LAYERZERO = "layerzero"


class PoolType:
    """Built-in pool types. Any string names a pool type; these are the configured ones."""
    STABLECOIN = "Stablecoin_Pool"
    LAYERZERO_STABLECOIN = "LayerZero_Stablecoin_Pool"
