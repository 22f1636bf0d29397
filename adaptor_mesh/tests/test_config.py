"""Tests for runtime settings."""

import json

import pytest

from adaptor_mesh.catalog.defaults import BSC_MAINNET, HARDHAT
from adaptor_mesh.config import Settings
from adaptor_mesh.errors import ConfigurationError
from adaptor_mesh.models import MessengerType


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "ADAPTOR_MESH_CATALOG",
        "ADAPTOR_MESH_ADDRESS_BOOK",
        "ADAPTOR_MESH_DEPLOYMENTS_DIR",
        "ADAPTOR_MESH_AUDIT_LOG",
        "ADAPTOR_MESH_PRIVATE_KEY",
        "ADAPTOR_MESH_FORK_NETWORK",
        "FORK_NETWORK",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    """Test settings without environment."""
    settings = Settings()

    assert settings.catalog is None
    assert settings.fork_network is None
    assert settings.private_key is None


def test_environment(monkeypatch, tmp_path):
    """Test settings are read from the environment."""
    monkeypatch.setenv("ADAPTOR_MESH_AUDIT_LOG", str(tmp_path / "audit.jsonl"))
    monkeypatch.setenv("ADAPTOR_MESH_PRIVATE_KEY", "0x" + "11" * 32)
    monkeypatch.setenv("FORK_NETWORK", BSC_MAINNET)

    settings = Settings()

    assert settings.audit_log == tmp_path / "audit.jsonl"
    assert settings.private_key.get_secret_value() == "0x" + "11" * 32
    assert "11" * 32 not in repr(settings)
    assert settings.fork_network == BSC_MAINNET
    assert settings.load_catalog().networks.chain_id(MessengerType.WORMHOLE, HARDHAT) == 4


def test_rpc_url_for():
    """Test RPC endpoints are looked up per network."""
    settings = Settings(rpc_url={BSC_MAINNET: "https://bsc.example"})

    assert settings.rpc_url_for(BSC_MAINNET) == "https://bsc.example"
    with pytest.raises(ConfigurationError, match="ADAPTOR_MESH_RPC_URL__HARDHAT"):
        settings.rpc_url_for(HARDHAT)


def test_rpc_urls_from_environment(monkeypatch):
    """Test per-network endpoints are read from nested environment variables."""
    monkeypatch.setenv("ADAPTOR_MESH_RPC_URL__BSC_MAINNET", "https://bsc.example")
    monkeypatch.setenv("ADAPTOR_MESH_RPC_URL__ETH_MAINNET", "https://eth.example")

    settings = Settings()

    assert settings.rpc_url_for(BSC_MAINNET) == "https://bsc.example"
    assert settings.rpc_url_for("eth_mainnet") == "https://eth.example"
    assert settings.rpc_url_for("ETH_MAINNET") == "https://eth.example"


def test_address_book_overrides_deployments(monkeypatch, tmp_path):
    """Test the JSON address book wins over deployment artifacts."""
    deployments = tmp_path / "deployments" / "alpha"
    deployments.mkdir(parents=True)
    (deployments / "Pool.json").write_text(json.dumps({"address": "0x" + "aa" * 20}))
    (deployments / "Token.json").write_text(json.dumps({"address": "0x" + "cc" * 20}))
    book_file = tmp_path / "addresses.json"
    book_file.write_text(json.dumps({"alpha": {"Pool": "0x" + "bb" * 20}}))

    monkeypatch.setenv("ADAPTOR_MESH_DEPLOYMENTS_DIR", str(tmp_path / "deployments"))
    monkeypatch.setenv("ADAPTOR_MESH_ADDRESS_BOOK", str(book_file))

    book = Settings().load_address_book()

    assert book.lookup("alpha", "Pool") == "0x" + "bb" * 20
    assert book.lookup("alpha", "Token") == "0x" + "cc" * 20
