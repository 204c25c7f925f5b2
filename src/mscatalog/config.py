"""Catalog configuration dataclass."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any


@dataclass
class CatalogConfig:
    """Configuration for a catalog instance.

    Attributes
    ----------
    data_dir : Path
        Directory holding the tables when read from disk.
    metadata_key : str
        Resource key of the main metadata table.
    shard_key_template : str
        Resource key of a location shard, with an ``{index}`` placeholder
        for the 1-based shard index.
    default_page_size : int
        Page size of the listing view.
    event_log_path : Path | None
        JSONL audit log path. If None, no events are written.
    """

    data_dir: Path = Path("data")
    metadata_key: str = "manuscript_metadata.csv"
    shard_key_template: str = "chunks/locations_{index}.csv"
    default_page_size: int = 25
    event_log_path: Path | None = None

    def __post_init__(self) -> None:
        """Normalize paths and validate."""
        self.data_dir = Path(self.data_dir)

        if not self.metadata_key:
            raise ValueError("metadata_key must not be empty")

        if "{index}" not in self.shard_key_template:
            raise ValueError(
                f"shard_key_template must contain '{{index}}', got {self.shard_key_template!r}"
            )

        if self.default_page_size <= 0:
            raise ValueError(f"default_page_size must be > 0, got {self.default_page_size}")

        if self.event_log_path is not None:
            self.event_log_path = Path(self.event_log_path)

    def shard_key(self, index: int) -> str:
        """Resource key of shard ``index``."""
        return self.shard_key_template.format(index=index)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["data_dir"] = str(self.data_dir)
        data["event_log_path"] = (
            str(self.event_log_path) if self.event_log_path is not None else None
        )
        return data
