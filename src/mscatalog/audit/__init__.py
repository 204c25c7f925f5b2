"""Audit event logging for mscatalog.

Main Components
---------------
- AuditLogger: JSONL event logger for table and shard loads
- LogEvent: Event envelope
"""

from mscatalog.audit.helpers import generate_run_id
from mscatalog.audit.logger import AuditLogger
from mscatalog.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
]
