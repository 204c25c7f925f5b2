"""Filesystem-backed fetcher."""

import asyncio
from pathlib import Path

from mscatalog.errors import FetchError, ResourceNotFound
from mscatalog.fetch.base import decode_bytes

__all__ = ["DirectoryFetcher"]


class DirectoryFetcher:
    """Fetch resources as files under a root directory.

    Resource keys are relative POSIX paths, e.g.
    ``chunks/locations_3.csv``. Reads run in a worker thread so the event
    loop is never blocked.

    Attributes
    ----------
    root : Path
        Directory that resource keys are resolved against.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"DirectoryFetcher({str(self.root)!r})"

    def resolve(self, key: str) -> Path:
        """Map a resource key to a path under the root.

        Raises
        ------
        ResourceNotFound
            If the key escapes the root directory.
        """
        path = (self.root / key).resolve()
        if not path.is_relative_to(self.root.resolve()):
            raise ResourceNotFound(key)
        return path

    async def fetch_text(self, key: str) -> str:
        """Read and decode the file stored under ``key``.

        Path resolution, the existence check and the read all run in a
        worker thread.

        Raises
        ------
        ResourceNotFound
            If no regular file exists for the key.
        FetchError
            If the file cannot be read or is not valid UTF-8.
        """
        return await asyncio.to_thread(self._read_text, key)

    def _read_text(self, key: str) -> str:
        path = self.resolve(key)
        if not path.is_file():
            raise ResourceNotFound(key)

        try:
            file_bytes = path.read_bytes()
        except OSError as e:
            raise FetchError(f"Failed to read {key}: {e}", key=key) from e

        return decode_bytes(file_bytes, key=key)
