"""Command-line interface for mscatalog."""

from mscatalog.cli.main import cli

__all__ = ["cli"]
