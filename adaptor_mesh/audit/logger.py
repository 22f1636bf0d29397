"""Sync audit logging with tamper-evident chaining."""

import hashlib
import json
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)


class EventType(str, Enum):
    """Audit event types."""
    SYNC_STARTED = "sync_started"
    SYNC_COMPLETED = "sync_completed"
    SYNC_FAILED = "sync_failed"

    # Peer corridor events
    PEER_SKIPPED = "peer_skipped"
    TRUST_SET = "trust_set"
    TRUST_CONFIRMED = "trust_confirmed"
    ADAPTOR_MISMATCH = "adaptor_mismatch"

    # Token events
    TOKEN_APPROVED = "token_approved"
    TOKEN_CONFIRMED = "token_confirmed"

    # Multisig export
    BATCH_EXPORTED = "batch_exported"


@dataclass
class AuditEvent:
    """
    Tamper-evident audit event.

    Includes chain hash to detect tampering.
    """
    event_id: str
    event_type: EventType
    timestamp: datetime
    network: str
    pool_type: str
    target: Optional[str]  # Peer or contract affected
    action: str
    result: str  # success, planned, skipped, failure
    details: Dict[str, Any] = field(default_factory=dict)
    previous_hash: Optional[str] = None
    event_hash: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary, without the event's own hash."""
        return {
            "event_id": self.event_id,
            "event_type": self.event_type.value,
            "timestamp": self.timestamp.isoformat(),
            "network": self.network,
            "pool_type": self.pool_type,
            "target": self.target,
            "action": self.action,
            "result": self.result,
            "details": self.details,
            "previous_hash": self.previous_hash,
        }

    def compute_hash(self) -> str:
        """Compute event hash for chaining."""
        return _hash_record(self.to_dict())


def _hash_record(data: Dict[str, Any]) -> str:
    canonical = json.dumps(data, sort_keys=True)
    return hashlib.sha256(canonical.encode()).hexdigest()


class AuditLogger:
    """
    Audit trail of every synchronization decision.

    Each event carries the hash of the previous one, so edits to the log
    file break the chain.
    """

    def __init__(
        self,
        log_file: Optional[Path] = None,
        enable_chaining: bool = True
    ):
        """
        Initialize audit logger.

        Args:
            log_file: Path to JSON-lines audit file (optional)
            enable_chaining: Enable hash chaining for tamper detection
        """
        self.log_file = Path(log_file) if log_file else None
        self.enable_chaining = enable_chaining

        self._last_hash: Optional[str] = None
        self._event_count = 0

        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            self._last_hash = self._read_last_hash()

    def _read_last_hash(self) -> Optional[str]:
        """Continue the chain of an existing log file."""
        if not self.log_file.exists():
            return None
        last_line = None
        with open(self.log_file, 'r') as f:
            for line in f:
                if line.strip():
                    last_line = line
        if last_line is None:
            return None
        return json.loads(last_line).get("event_hash")

    def log_event(
        self,
        event_type: EventType,
        network: str,
        pool_type: str,
        action: str,
        result: str,
        target: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> AuditEvent:
        """
        Log an audit event.

        Args:
            event_type: Type of event
            network: Network being synchronized
            pool_type: Pool type being synchronized
            action: Action description
            result: Result (success, skipped, failure)
            target: What was affected
            details: Additional details

        Returns:
            Created audit event
        """
        event = AuditEvent(
            event_id=str(uuid.uuid4()),
            event_type=event_type,
            timestamp=datetime.now(timezone.utc),
            network=network,
            pool_type=pool_type,
            target=target,
            action=action,
            result=result,
            details=details or {},
            previous_hash=self._last_hash if self.enable_chaining else None
        )

        if self.enable_chaining:
            event.event_hash = event.compute_hash()
            self._last_hash = event.event_hash

        self._event_count += 1
        self._write_event(event)

        logger.info(
            f"AUDIT: {event.event_type.value} | {event.action} | {event.result} | "
            f"network={event.network} target={event.target}"
        )

        return event

    def _write_event(self, event: AuditEvent):
        """Append event to the audit file."""
        if not self.log_file:
            return

        record = event.to_dict()
        record["event_hash"] = event.event_hash
        with open(self.log_file, 'a') as f:
            json.dump(record, f)
            f.write('\n')

    def verify_chain(self) -> bool:
        """
        Verify audit file chain integrity.

        Returns:
            True if chain is intact, False if tampered
        """
        if not self.log_file or not self.enable_chaining:
            return True
        return verify_audit_file(self.log_file)

    def get_event_count(self) -> int:
        """Get number of events logged by this instance."""
        return self._event_count

    def get_last_hash(self) -> Optional[str]:
        """Get hash of last event."""
        return self._last_hash


def verify_audit_file(path: Path) -> bool:
    """
    Recompute every hash of an audit file and check the links.

    Returns:
        True if chain is intact, False if tampered or unreadable
    """
    try:
        with open(path, 'r') as f:
            events = [json.loads(line) for line in f if line.strip()]
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error reading audit log {path}: {e}")
        return False

    previous_hash = None
    for i, event_data in enumerate(events):
        if event_data.get("previous_hash") != previous_hash:
            logger.error(f"Chain break at event {i}")
            return False

        record = dict(event_data)
        event_hash = record.pop("event_hash", None)
        if _hash_record(record) != event_hash:
            logger.error(f"Hash mismatch at event {i}")
            return False

        previous_hash = event_hash

    return True
