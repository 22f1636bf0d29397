"""Tests for the audit log."""

import json

from adaptor_mesh.audit import AuditLogger, EventType, verify_audit_file


def _log_two(audit_logger):
    audit_logger.log_event(EventType.SYNC_STARTED, "alpha", "Stablecoin_Pool", "Synchronization started", "success")
    audit_logger.log_event(
        EventType.TRUST_SET, "alpha", "Stablecoin_Pool", "Add adaptor", "success",
        target="Stablecoin_Pool@beta", details={"chain_id": 2},
    )


def test_events_are_chained(tmp_path):
    """Test each event links to the previous one."""
    audit_logger = AuditLogger(tmp_path / "audit.jsonl")
    _log_two(audit_logger)

    records = [json.loads(line) for line in (tmp_path / "audit.jsonl").read_text().splitlines()]
    assert records[0]["previous_hash"] is None
    assert records[1]["previous_hash"] == records[0]["event_hash"]
    assert audit_logger.get_event_count() == 2
    assert audit_logger.get_last_hash() == records[1]["event_hash"]
    assert audit_logger.verify_chain()


def test_tampering_is_detected(tmp_path):
    """Test editing a recorded event breaks verification."""
    path = tmp_path / "audit.jsonl"
    _log_two(AuditLogger(path))

    lines = path.read_text().splitlines()
    record = json.loads(lines[1])
    record["details"]["chain_id"] = 3
    lines[1] = json.dumps(record)
    path.write_text("\n".join(lines) + "\n")

    assert not verify_audit_file(path)


def test_removed_event_is_detected(tmp_path):
    """Test dropping an event breaks the chain."""
    path = tmp_path / "audit.jsonl"
    audit_logger = AuditLogger(path)
    _log_two(audit_logger)
    _log_two(audit_logger)

    lines = path.read_text().splitlines()
    del lines[1]
    path.write_text("\n".join(lines) + "\n")

    assert not verify_audit_file(path)


def test_chain_continues_across_loggers(tmp_path):
    """Test a new logger on an existing file extends its chain."""
    path = tmp_path / "audit.jsonl"
    _log_two(AuditLogger(path))
    _log_two(AuditLogger(path))

    assert len(path.read_text().splitlines()) == 4
    assert verify_audit_file(path)


def test_logger_without_file(tmp_path):
    """Test in-memory audit logging still hashes events."""
    audit_logger = AuditLogger()
    event = audit_logger.log_event(EventType.PEER_SKIPPED, "alpha", "Stablecoin_Pool", "Peer skipped", "skipped")

    assert event.event_hash == event.compute_hash()
    assert audit_logger.verify_chain()


def test_unreadable_file_fails_verification(tmp_path):
    """Test verification of garbage."""
    path = tmp_path / "audit.jsonl"
    path.write_text("not json\n")

    assert not verify_audit_file(path)
