"""Execution audit log: JSON-lines sink with secret redaction."""

from .audit_logger import AuditLogger
from .redaction import RedactionEngine, RedactionRule, default_rules

__all__ = [
    "AuditLogger",
    "RedactionEngine",
    "RedactionRule",
    "default_rules",
]
