"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle. The catalog reports table loads, shard loads,
missing shards and load failures through it.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from mscatalog.audit.helpers import generate_run_id
from mscatalog.audit.models import LogEvent
from mscatalog.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes structured log events to a JSONL file (one JSON object per line).
    Events are append-only and flushed after each write.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
    """

    def __init__(self, log_path: Path, run_id: str | None = None) -> None:
        """Initialize audit logger and open file handle.

        Parameters
        ----------
        log_path : Path
            Path to JSONL log file. Parent directories are created.
        run_id : str | None, optional
            Unique run identifier; generated when omitted.
        """
        self.run_id = run_id or generate_run_id()
        self.log_path = Path(log_path)

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close file."""
        self.close()

    def close(self) -> None:
        """Flush and close the log file handle."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        stage: str | None = None,
        rid: str | None = None,
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "shard_loaded").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        stage : str | None, optional
            Stage identifier, e.g. "load_table" or "load_shard".
        rid : str | None, optional
            Manuscript id if event is id-specific.
        """
        if data is None:
            data = {}

        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data,
            stage=stage,
            rid=rid,
        )

        self._write_event(log_event)

    def _write_event(self, event: LogEvent) -> None:
        event_dict = asdict(event)
        json.dump(event_dict, self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    def table_loaded(
        self,
        source: str,
        sha256: str,
        record_count: int,
        duration_seconds: float,
        warnings: list[str] | None = None,
    ) -> None:
        """Log table_loaded event.

        Parameters
        ----------
        source : str
            Resource key of the metadata table.
        sha256 : str
            SHA256 of the decoded table text.
        record_count : int
            Number of manuscripts loaded.
        duration_seconds : float
            Fetch and parse time in seconds.
        warnings : list[str] | None, optional
            Non-fatal parser warnings.
        """
        data: dict[str, Any] = {
            "source": source,
            "sha256": sha256,
            "record_count": record_count,
            "duration_seconds": duration_seconds,
        }
        if warnings:
            data["warnings"] = warnings

        self.event("table_loaded", data=data, stage="load_table")

    def shard_loaded(
        self,
        shard: int,
        source: str,
        record_count: int,
        rid: str | None = None,
    ) -> None:
        """Log shard_loaded event.

        Parameters
        ----------
        shard : int
            1-based shard index.
        source : str
            Resource key of the shard.
        record_count : int
            Number of location records in the shard.
        rid : str | None, optional
            Manuscript id whose lookup triggered the load.
        """
        self.event(
            "shard_loaded",
            data={"shard": shard, "source": source, "record_count": record_count},
            stage="load_shard",
            rid=rid,
        )

    def shard_missing(
        self,
        shard: int,
        source: str,
        reason: str,
        rid: str | None = None,
    ) -> None:
        """Log shard_missing event.

        Parameters
        ----------
        shard : int
            1-based shard index.
        source : str
            Resource key of the shard.
        reason : str
            Why the shard could not be fetched.
        rid : str | None, optional
            Manuscript id whose lookup triggered the load.
        """
        self.event(
            "shard_missing",
            data={"shard": shard, "source": source, "reason": reason},
            level="WARN",
            stage="load_shard",
            rid=rid,
        )

    def error(
        self,
        exception_class: str,
        message: str,
        stage: str | None = None,
        rid: str | None = None,
    ) -> None:
        """Log error event.

        Parameters
        ----------
        exception_class : str
            Exception class name.
        message : str
            Error message.
        stage : str | None, optional
            Stage where error occurred.
        rid : str | None, optional
            Manuscript id if error is id-specific.
        """
        data: dict[str, Any] = {
            "exception_class": exception_class,
            "message": message,
        }
        if rid is not None:
            data["rid"] = rid

        self.event("error", data=data, stage=stage, level="ERROR", rid=rid)
