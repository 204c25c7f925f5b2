"""Common utility functions for mscatalog.

Shared helpers for hashing and timestamps used by the loaders and the
audit event log.
"""

from mscatalog.utils.hashing import calculate_string_sha256, format_sha256
from mscatalog.utils.timestamps import get_iso_timestamp

__all__ = [
    "get_iso_timestamp",
    "calculate_string_sha256",
    "format_sha256",
]
