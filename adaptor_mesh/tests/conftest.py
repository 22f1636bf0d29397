"""Shared fixtures: a small mesh catalog and an in-memory chain."""

from typing import Any, Dict, List, Optional, Tuple

import pytest

from adaptor_mesh.catalog import MeshCatalog
from adaptor_mesh.errors import ContractCallReverted
from adaptor_mesh.messenger import ContractClient, NO_TRUSTED_PATH
from adaptor_mesh.models import CatalogDocument
from adaptor_mesh.resolution import ZERO_ADDRESS, normalize_address


STABLECOIN = "Stablecoin_Pool"
LZ_STABLECOIN = "LayerZero_Stablecoin_Pool"

ADDRESSES = {
    ("alpha", STABLECOIN): "0x" + "a1" * 20,
    ("beta", STABLECOIN): "0x" + "b1" * 20,
    ("gamma", STABLECOIN): "0x" + "c1" * 20,
    ("delta", STABLECOIN): "0x" + "d1" * 20,
    ("alpha", LZ_STABLECOIN): "0x" + "a2" * 20,
    ("beta", LZ_STABLECOIN): "0x" + "b2" * 20,
    ("gamma", LZ_STABLECOIN): "0x" + "c2" * 20,
}

TOKENS = {
    ("USDC", "alpha"): "0x" + "1a" * 20,
    ("USDC", "beta"): "0x" + "1b" * 20,
    ("USDC", "gamma"): "0x" + "1c" * 20,
    ("USDC", "delta"): "0x" + "1d" * 20,
    ("USDT", "alpha"): "0x" + "2a" * 20,
    ("USDT", "beta"): "0x" + "2b" * 20,
}


def adaptor_address(network: str, pool_type: str = STABLECOIN) -> str:
    """Checksum address of a test adaptor."""
    return normalize_address(ADDRESSES[(network, pool_type)])


def token_address(token: str, network: str) -> str:
    """Checksum address of a test token."""
    return normalize_address(TOKENS[(token, network)])


def mesh_document() -> Dict[str, Any]:
    """
    Catalog of four networks.

    alpha, beta and gamma are testnets; delta is a mainnet. gamma has no
    LayerZero chain id, so its LayerZero adaptor is never reachable.
    """
    def adaptor(network, pool_type, messenger_type, tokens):
        return {
            "address": {"address": ADDRESSES[(network, pool_type)]},
            "tokens": tokens,
            "messenger_type": messenger_type,
        }

    return {
        "networks": {
            "alpha": {"group": "testnet", "chain_ids": {"wormhole": 1, "layerzero": 101}},
            "beta": {"group": "testnet", "chain_ids": {"wormhole": 2, "layerzero": 102}},
            "gamma": {"group": "testnet", "chain_ids": {"wormhole": 3}},
            "delta": {"group": "mainnet", "chain_ids": {"wormhole": 4}},
        },
        "adaptors": {
            "alpha": {
                STABLECOIN: adaptor("alpha", STABLECOIN, "wormhole", ["USDC", "USDT"]),
                LZ_STABLECOIN: adaptor("alpha", LZ_STABLECOIN, "layerzero", ["USDC"]),
            },
            "beta": {
                STABLECOIN: adaptor("beta", STABLECOIN, "wormhole", ["USDC", "USDT"]),
                LZ_STABLECOIN: adaptor("beta", LZ_STABLECOIN, "layerzero", ["USDC"]),
            },
            "gamma": {
                STABLECOIN: adaptor("gamma", STABLECOIN, "wormhole", ["USDC"]),
                LZ_STABLECOIN: adaptor("gamma", LZ_STABLECOIN, "layerzero", ["USDC"]),
            },
            "delta": {
                STABLECOIN: adaptor("delta", STABLECOIN, "wormhole", ["USDC"]),
            },
        },
        "tokens": {
            token: {
                network: {"address": address}
                for (name, network), address in TOKENS.items() if name == token
            }
            for token in ("USDC", "USDT")
        },
    }


class InMemoryContractClient(ContractClient):
    """
    Simulates Wormhole and LayerZero adaptor contracts.

    State is kept per adaptor address. `getTrustedRemoteAddress` reverts
    with the LzApp message for an unset slot, as the real contract does.
    Every call and transaction is recorded in order; `log` interleaves both.
    """

    def __init__(self):
        self.trusted: Dict[str, Dict[int, str]] = {}
        self.approved: Dict[str, set] = {}
        self.calls: List[Tuple[str, str, Tuple]] = []
        self.transactions: List[Tuple[str, str, Tuple]] = []
        self.log: List[Tuple[str, str]] = []
        self.fail_on: Optional[str] = None
        self.revert_reason: Dict[str, str] = {}

    def set_trusted(self, adaptor: str, chain_id: int, address: str):
        self.trusted.setdefault(normalize_address(adaptor), {})[chain_id] = normalize_address(address)

    def approve(self, adaptor: str, chain_id: int, token: str):
        self.approved.setdefault(normalize_address(adaptor), set()).add((chain_id, normalize_address(token)))

    def trusted_of(self, adaptor: str) -> Dict[int, str]:
        return dict(self.trusted.get(normalize_address(adaptor), {}))

    def approved_of(self, adaptor: str) -> set:
        return set(self.approved.get(normalize_address(adaptor), set()))

    def call(self, address, abi, method, args):
        address = normalize_address(address)
        self.calls.append((address, method, tuple(args)))
        self.log.append(("call", method))
        if method in self.revert_reason:
            raise ContractCallReverted(method, self.revert_reason[method])

        if method == "adaptorAddress":
            return self.trusted.get(address, {}).get(args[0], ZERO_ADDRESS)
        if method == "getTrustedRemoteAddress":
            remote = self.trusted.get(address, {}).get(args[0])
            if remote is None:
                raise ContractCallReverted(method, f"execution reverted: {NO_TRUSTED_PATH}")
            return bytes.fromhex(remote[2:])
        if method == "validToken":
            return (args[0], normalize_address(args[1])) in self.approved.get(address, set())
        raise AssertionError(f"Unexpected view call {method}")

    def transact(self, address, abi, method, args):
        address = normalize_address(address)
        if self.fail_on == method:
            raise ContractCallReverted(method, "execution reverted: Ownable: caller is not the owner")
        self.transactions.append((address, method, tuple(args)))
        self.log.append(("transact", method))

        if method in ("setAdaptorAddress", "setTrustedRemoteAddress"):
            self.set_trusted(address, args[0], args[1])
        elif method == "approveToken":
            self.approve(address, args[0], args[1])
        else:
            raise AssertionError(f"Unexpected transaction {method}")
        return {"status": 1, "transactionHash": f"0x{len(self.transactions):064x}"}


@pytest.fixture
def catalog():
    """Four-network mesh catalog."""
    return MeshCatalog.from_document(CatalogDocument.model_validate(mesh_document()))


@pytest.fixture
def chain():
    """Empty in-memory chain."""
    return InMemoryContractClient()


@pytest.fixture
def adaptor_of():
    """Lookup of test adaptor addresses by (network, pool type)."""
    return adaptor_address


@pytest.fixture
def token_of():
    """Lookup of test token addresses by (token, network)."""
    return token_address


@pytest.fixture
def mixed_catalog():
    """Mesh catalog whose beta Stablecoin_Pool adaptor receives through LayerZero."""
    document = mesh_document()
    document["adaptors"]["beta"][STABLECOIN]["messenger_type"] = "layerzero"
    return MeshCatalog.from_document(CatalogDocument.model_validate(document))
