"""Tests for Safe batch export."""

import json

import pytest

from adaptor_mesh.mesh import MeshSynchronizer
from adaptor_mesh.models import ContractCall, ContractInput
from adaptor_mesh.multisig import (
    BatchTransaction,
    BatchValidationError,
    SafeBatchExecutor,
    create_transaction,
    encode_param,
    load_batch_file,
    validate_transactions_in_batch,
    write_batch_file,
)


SAFE = "0x" + "5a" * 20


def test_encode_param():
    """Test values are encoded as the Transaction Builder UI reads them."""
    assert encode_param(4) == "4"
    assert encode_param(["0xa", "0xb"]) == "[0xa,0xb]"
    assert encode_param(b"\x01\x02") == "0x0102"
    with pytest.raises(NotImplementedError):
        encode_param([[1], [2]])


def test_create_transaction():
    """Test contract calls become string-encoded batch transactions."""
    call = ContractCall(
        to="0x" + "a1" * 20,
        method="approveToken",
        inputs=[ContractInput(name="tokenChainId", type="uint256"), ContractInput(name="tokenAddr", type="address")],
        args=[2, "0x" + "1b" * 20],
    )

    tx = create_transaction(call)

    assert tx.value == "0"
    assert tx.contract_method.name == "approveToken"
    assert tx.contract_inputs_values == {"tokenChainId": "2", "tokenAddr": "0x" + "1b" * 20}


def test_create_transaction_argument_count():
    """Test arguments must match the inputs."""
    call = ContractCall(to="0x" + "a1" * 20, method="approveToken", inputs=[], args=[2])

    with pytest.raises(BatchValidationError):
        create_transaction(call)


def test_validation_rejects_numbers():
    """Test numeric values are refused."""
    with pytest.raises(BatchValidationError):
        validate_transactions_in_batch([BatchTransaction(to="0x1", value=0)])
    with pytest.raises(BatchValidationError):
        validate_transactions_in_batch([
            BatchTransaction(to="0x1", value="0", contract_inputs_values={"chainId": 2})
        ])
    assert validate_transactions_in_batch([BatchTransaction(to="0x1", value="0")])


def test_export_sends_nothing(catalog, chain):
    """Test batch export collects actions without touching the chain."""
    executor = SafeBatchExecutor(chain_id=97, safe_address=SAFE)

    report = MeshSynchronizer(catalog, chain, executor=executor).synchronize("Stablecoin_Pool", "alpha")

    assert report.dry_run
    assert chain.transactions == []
    assert [tx.contract_method.name for tx in executor.transactions] == [
        "setAdaptorAddress", "approveToken", "approveToken", "setAdaptorAddress", "approveToken",
    ]


def test_layerzero_export_encodes_remote_address(catalog, chain, adaptor_of):
    """Test LayerZero trust calls carry the remote address."""
    executor = SafeBatchExecutor(chain_id=97)

    MeshSynchronizer(catalog, chain, executor=executor).synchronize(
        "LayerZero_Stablecoin_Pool", "alpha", only_networks=["beta"]
    )

    trust = executor.transactions[0]
    assert trust.contract_method.name == "setTrustedRemoteAddress"
    assert trust.contract_inputs_values == {
        "_remoteChainId": "102",
        "_remoteAddress": adaptor_of("beta", "LayerZero_Stablecoin_Pool"),
    }


def test_write_batch_file(catalog, chain, tmp_path):
    """Test the written file uses the Transaction Builder layout."""
    executor = SafeBatchExecutor(chain_id=97, safe_address=SAFE)
    MeshSynchronizer(catalog, chain, executor=executor).synchronize("Stablecoin_Pool", "alpha")
    batch = executor.build_batch("Sync_Stablecoin_Pool_alpha")

    path = write_batch_file(batch, tmp_path / "proposals" / "alpha" / "sync.json")

    data = json.loads(path.read_text())
    assert data["version"] == "1.0"
    assert data["chainId"] == "97"
    assert data["meta"]["name"] == "Sync_Stablecoin_Pool_alpha"
    assert data["meta"]["createdFromSafeAddress"].lower() == SAFE
    assert "description" not in data["meta"]
    assert len(data["transactions"]) == 5
    first = data["transactions"][0]
    assert first["contractMethod"]["inputs"][0] == {"internalType": "uint16", "name": "wormholeChainId", "type": "uint16"}
    assert first["contractMethod"]["payable"] is False
    assert "data" not in first

    loaded = load_batch_file(path)
    assert loaded.transactions == batch.transactions
