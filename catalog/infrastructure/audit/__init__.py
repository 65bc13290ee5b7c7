"""Audit sink implementations."""

from catalog.infrastructure.audit.sinks import FileAuditSink, InMemoryAuditSink, LoggingAuditSink

__all__ = [
    "FileAuditSink",
    "InMemoryAuditSink",
    "LoggingAuditSink",
]
