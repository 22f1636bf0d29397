"""Audit logging for synchronization runs."""

from .logger import AuditLogger, AuditEvent, EventType, verify_audit_file

__all__ = ["AuditLogger", "AuditEvent", "EventType", "verify_audit_file"]
