"""Tests for peer resolution."""

import pytest

from adaptor_mesh.catalog import load_catalog
from adaptor_mesh.catalog.defaults import (
    AVALANCHE_MAINNET,
    AVALANCHE_TESTNET,
    ARBITRUM_MAINNET,
    BASE_MAINNET,
    BSC_MAINNET,
    BSC_TESTNET,
    ETHEREUM_MAINNET,
    HARDHAT,
    LOCALHOST,
    OPTIMISM_MAINNET,
    POLYGON_MAINNET,
    POLYGON_TESTNET,
)
from adaptor_mesh.errors import ConfigNotFound
from adaptor_mesh.mesh import PeerResolver
from adaptor_mesh.models import PeerTuple, PoolType


@pytest.fixture
def default_resolver():
    return PeerResolver(load_catalog())


def test_hardhat_peers_only_with_localhost(default_resolver):
    """Test the dev group is a two-node mesh."""
    peers = default_resolver.resolve_peers(PoolType.STABLECOIN, HARDHAT)

    assert peers == [PeerTuple(pool_type=PoolType.STABLECOIN, network=LOCALHOST)]


def test_hardhat_never_peers_with_itself(default_resolver):
    """Test no self-peering on a dev network."""
    peers = default_resolver.resolve_peers(PoolType.STABLECOIN, HARDHAT)

    assert all(peer.network != HARDHAT for peer in peers)


def test_hardhat_never_peers_with_testnets(default_resolver):
    """Test dev and testnet groups are isolated."""
    peers = default_resolver.resolve_peers(PoolType.STABLECOIN, HARDHAT)

    assert not {peer.network for peer in peers} & {BSC_TESTNET, POLYGON_TESTNET, AVALANCHE_TESTNET}


def test_bsc_testnet_peers(default_resolver):
    """Test testnet peers share the pool type and the group."""
    peers = default_resolver.resolve_peers(PoolType.STABLECOIN, BSC_TESTNET)

    assert peers
    assert all(peer.network in {POLYGON_TESTNET, AVALANCHE_TESTNET} for peer in peers)
    assert all(peer.pool_type == PoolType.STABLECOIN for peer in peers)


def test_bsc_mainnet_peers(default_resolver):
    """Test mainnet peers cover the other mainnets."""
    peers = default_resolver.resolve_peers(PoolType.STABLECOIN, BSC_MAINNET)

    expected = {
        ETHEREUM_MAINNET,
        ARBITRUM_MAINNET,
        POLYGON_MAINNET,
        BASE_MAINNET,
        AVALANCHE_MAINNET,
        OPTIMISM_MAINNET,
    }
    assert {peer.network for peer in peers} == expected


def test_grouping_is_symmetric(catalog):
    """Test every peer relation holds in both directions."""
    resolver = PeerResolver(catalog)

    for pool_type, network, _ in catalog.adaptors.all_entries():
        for peer in resolver.resolve_peers(pool_type, network):
            back = resolver.resolve_peers(peer.pool_type, peer.network)
            assert PeerTuple(pool_type=pool_type, network=network) in back


def test_no_self_peering_or_cross_group(catalog):
    """Test peers never include the local network or another group."""
    resolver = PeerResolver(catalog)

    for pool_type, network, _ in catalog.adaptors.all_entries():
        group = catalog.networks.group_of(network)
        for peer in resolver.resolve_peers(pool_type, network):
            assert peer != PeerTuple(pool_type=pool_type, network=network)
            assert catalog.networks.group_of(peer.network) == group
            assert peer.pool_type == pool_type


def test_single_network_group_has_no_peers(catalog):
    """Test a network alone in its group has no peers."""
    resolver = PeerResolver(catalog)

    assert resolver.resolve_peers("Stablecoin_Pool", "delta") == []


def test_peers_in_catalog_order(catalog):
    """Test peers keep the order of the catalog."""
    resolver = PeerResolver(catalog)

    peers = resolver.resolve_peers("Stablecoin_Pool", "alpha")

    assert [peer.network for peer in peers] == ["beta", "gamma"]


def test_only_networks_restricts_peers(catalog):
    """Test the network whitelist."""
    resolver = PeerResolver(catalog)

    peers = resolver.resolve_peers("Stablecoin_Pool", "alpha", only_networks=["gamma", "delta"])

    assert peers == [PeerTuple(pool_type="Stablecoin_Pool", network="gamma")]


def test_unknown_network_raises(catalog):
    """Test a network without a group is a configuration error."""
    resolver = PeerResolver(catalog)

    with pytest.raises(ConfigNotFound):
        resolver.resolve_peers("Stablecoin_Pool", "unknown_net")


def test_unknown_pool_type_has_no_peers(catalog):
    """Test a pool type configured nowhere resolves to nothing."""
    resolver = PeerResolver(catalog)

    assert resolver.resolve_peers("Unknown_Pool", "alpha") == []
