"""Built-in network, chain id, adaptor and token tables."""

from typing import Dict, Optional

from ..models.adaptor import AdaptorConfig, AddressRef
from ..models.catalog import CatalogDocument, NetworkEntry
from ..models.network import MessengerType, NetworkGroup, PoolType


HARDHAT = "hardhat"
LOCALHOST = "localhost"

BSC_TESTNET = "bsc_testnet"
AVALANCHE_TESTNET = "avax_testnet"
POLYGON_TESTNET = "polygon_testnet"
ARBITRUM_TESTNET = "arb_testnet"
OPTIMISM_TESTNET = "optimism_testnet"

BSC_MAINNET = "bsc_mainnet"
ETHEREUM_MAINNET = "eth_mainnet"
ARBITRUM_MAINNET = "arb_mainnet"
OPTIMISM_MAINNET = "optimism_mainnet"
BASE_MAINNET = "base_mainnet"
POLYGON_MAINNET = "polygon_mainnet"
AVALANCHE_MAINNET = "avax_mainnet"

DEV_NETWORKS = (HARDHAT, LOCALHOST)

NETWORK_GROUPS: Dict[str, NetworkGroup] = {
    HARDHAT: NetworkGroup.DEV,
    LOCALHOST: NetworkGroup.DEV,
    BSC_TESTNET: NetworkGroup.TESTNET,
    AVALANCHE_TESTNET: NetworkGroup.TESTNET,
    POLYGON_TESTNET: NetworkGroup.TESTNET,
    ARBITRUM_TESTNET: NetworkGroup.TESTNET,
    OPTIMISM_TESTNET: NetworkGroup.TESTNET,
    BSC_MAINNET: NetworkGroup.MAINNET,
    ETHEREUM_MAINNET: NetworkGroup.MAINNET,
    ARBITRUM_MAINNET: NetworkGroup.MAINNET,
    OPTIMISM_MAINNET: NetworkGroup.MAINNET,
    BASE_MAINNET: NetworkGroup.MAINNET,
    POLYGON_MAINNET: NetworkGroup.MAINNET,
    AVALANCHE_MAINNET: NetworkGroup.MAINNET,
}

# https://docs.wormhole.com/wormhole/reference/constants
WORMHOLE_CHAIN_IDS: Dict[str, int] = {
    HARDHAT: 0,
    LOCALHOST: 0,
    BSC_TESTNET: 4,
    POLYGON_TESTNET: 5,
    AVALANCHE_TESTNET: 6,
    ARBITRUM_TESTNET: 23,
    ETHEREUM_MAINNET: 2,
    BSC_MAINNET: 4,
    POLYGON_MAINNET: 5,
    AVALANCHE_MAINNET: 6,
    ARBITRUM_MAINNET: 23,
    OPTIMISM_MAINNET: 24,
    BASE_MAINNET: 30,
}

# LayerZero v1 endpoint ids. Mainnet corridors are not provisioned yet.
LAYERZERO_CHAIN_IDS: Dict[str, int] = {
    HARDHAT: 65535,
    LOCALHOST: 65535,
    BSC_TESTNET: 10102,
    AVALANCHE_TESTNET: 10106,
}

WORMHOLE_ADAPTOR_PROXY = "WormholeAdaptor_Stablecoin_Pool_Proxy"


def _wormhole_stablecoin(network: str, *tokens: str) -> AdaptorConfig:
    return AdaptorConfig(
        address=AddressRef.of_deployment(WORMHOLE_ADAPTOR_PROXY, network),
        tokens=list(tokens),
        messenger_type=MessengerType.WORMHOLE,
    )


def _dev_adaptors() -> Dict[str, AdaptorConfig]:
    # Fixed placeholder addresses, only meaningful on a local node.
    return {
        PoolType.STABLECOIN: AdaptorConfig(
            address=AddressRef.literal("0x0000000000000000000000000000000000000001"),
            tokens=["BUSD", "vUSDC"],
            messenger_type=MessengerType.WORMHOLE,
        ),
        PoolType.LAYERZERO_STABLECOIN: AdaptorConfig(
            address=AddressRef.literal("0x0000000000000000000000000000000000000002"),
            tokens=["BUSD", "vUSDC"],
            messenger_type=MessengerType.LAYERZERO,
        ),
    }


ADAPTORS: Dict[str, Dict[str, AdaptorConfig]] = {
    HARDHAT: _dev_adaptors(),
    LOCALHOST: _dev_adaptors(),
    # Testnet
    BSC_TESTNET: {PoolType.STABLECOIN: _wormhole_stablecoin(BSC_TESTNET, "BUSD", "vUSDC")},
    AVALANCHE_TESTNET: {PoolType.STABLECOIN: _wormhole_stablecoin(AVALANCHE_TESTNET, "BUSD", "vUSDC")},
    POLYGON_TESTNET: {PoolType.STABLECOIN: _wormhole_stablecoin(POLYGON_TESTNET, "USDC", "USDT", "axlUSDC")},
    # Mainnet
    BSC_MAINNET: {PoolType.STABLECOIN: _wormhole_stablecoin(BSC_MAINNET, "USDC", "USDT")},
    ARBITRUM_MAINNET: {PoolType.STABLECOIN: _wormhole_stablecoin(ARBITRUM_MAINNET, "USDC", "USDT")},
    ETHEREUM_MAINNET: {PoolType.STABLECOIN: _wormhole_stablecoin(ETHEREUM_MAINNET, "USDC", "USDT")},
    OPTIMISM_MAINNET: {PoolType.STABLECOIN: _wormhole_stablecoin(OPTIMISM_MAINNET, "USDC", "USDT")},
    BASE_MAINNET: {PoolType.STABLECOIN: _wormhole_stablecoin(BASE_MAINNET, "USDC", "USDbC")},
    POLYGON_MAINNET: {PoolType.STABLECOIN: _wormhole_stablecoin(POLYGON_MAINNET, "USDC", "USDT")},
    AVALANCHE_MAINNET: {PoolType.STABLECOIN: _wormhole_stablecoin(AVALANCHE_MAINNET, "USDC", "USDT")},
}


# Mock tokens are deployed on dev networks and testnets; mainnet tokens are
# fixed contracts.
TOKENS: Dict[str, Dict[str, AddressRef]] = {
    "BUSD": {
        HARDHAT: AddressRef.of_deployment("BUSD"),
        LOCALHOST: AddressRef.of_deployment("BUSD"),
        BSC_TESTNET: AddressRef.of_deployment("BUSD"),
        AVALANCHE_TESTNET: AddressRef.of_deployment("BUSD"),
        BSC_MAINNET: AddressRef.literal("0xe9e7CEA3DedcA5984780Bafc599bD69ADd087D56"),
    },
    "USDC": {
        HARDHAT: AddressRef.of_deployment("USDC"),
        LOCALHOST: AddressRef.of_deployment("USDC"),
        BSC_TESTNET: AddressRef.of_deployment("USDC"),
        POLYGON_TESTNET: AddressRef.of_deployment("USDC"),
        BSC_MAINNET: AddressRef.literal("0x8AC76a51cc950d9822D68b83fE1Ad97B32Cd580d"),
        ARBITRUM_MAINNET: AddressRef.literal("0xaf88d065e77c8cC2239327C5EDb3A432268e5831"),
        OPTIMISM_MAINNET: AddressRef.literal("0x7F5c764cBc14f9669B88837ca1490cCa17c31607"),
        ETHEREUM_MAINNET: AddressRef.literal("0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"),
        BASE_MAINNET: AddressRef.literal("0x833589fcd6edb6e08f4c7c32d4f71b54bda02913"),
        POLYGON_MAINNET: AddressRef.literal("0x3c499c542cef5e3811e1192ce70d8cc03d5c3359"),
        AVALANCHE_MAINNET: AddressRef.literal("0xb97ef9ef8734c71904d8002f8b6bc66dd9c48a6e"),
    },
    "USDT": {
        HARDHAT: AddressRef.of_deployment("USDT"),
        LOCALHOST: AddressRef.of_deployment("USDT"),
        BSC_TESTNET: AddressRef.of_deployment("USDT"),
        POLYGON_TESTNET: AddressRef.of_deployment("USDT"),
        BSC_MAINNET: AddressRef.literal("0x55d398326f99059fF775485246999027B3197955"),
        ARBITRUM_MAINNET: AddressRef.literal("0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb9"),
        OPTIMISM_MAINNET: AddressRef.literal("0x94b008aA00579c1307B0EF2c499aD98a8ce58e58"),
        ETHEREUM_MAINNET: AddressRef.literal("0xdAC17F958D2ee523a2206206994597C13D831ec7"),
        POLYGON_MAINNET: AddressRef.literal("0xc2132d05d31c914a87c6611c10748aeb04b58e8f"),
        AVALANCHE_MAINNET: AddressRef.literal("0x9702230a8ea53601f5cd2dc00fdbc13d4df4a8c7"),
    },
    # Bridged USDC on Base
    "USDbC": {
        BASE_MAINNET: AddressRef.literal("0xd9aaec86b65d86f6a7b5b1b0c42ffa531710b6ca"),
    },
    "axlUSDC": {
        HARDHAT: AddressRef.of_deployment("axlUSDC"),
        POLYGON_TESTNET: AddressRef.of_deployment("axlUSDC"),
        BSC_MAINNET: AddressRef.literal("0x4268B8F0B87b6Eae5d897996E6b845ddbD99Adf3"),
    },
    "vUSDC": {
        HARDHAT: AddressRef.of_deployment("vUSDC"),
        LOCALHOST: AddressRef.of_deployment("vUSDC"),
        BSC_TESTNET: AddressRef.of_deployment("vUSDC"),
        AVALANCHE_TESTNET: AddressRef.of_deployment("vUSDC"),
    },
}


def default_document(fork_network: Optional[str] = None) -> CatalogDocument:
    """
    Build the catalog document for the built-in tables.

    Args:
        fork_network: Network the dev networks should mirror, if running on a fork
    """
    networks = {}
    for network, group in NETWORK_GROUPS.items():
        chain_ids = {}
        if network in WORMHOLE_CHAIN_IDS:
            chain_ids[MessengerType.WORMHOLE] = WORMHOLE_CHAIN_IDS[network]
        if network in LAYERZERO_CHAIN_IDS:
            chain_ids[MessengerType.LAYERZERO] = LAYERZERO_CHAIN_IDS[network]
        networks[network] = NetworkEntry(group=group, chain_ids=chain_ids)

    return CatalogDocument(
        fork_network=fork_network,
        networks=networks,
        adaptors={network: dict(pools) for network, pools in ADAPTORS.items()},
        tokens={token: dict(refs) for token, refs in TOKENS.items()},
    )
