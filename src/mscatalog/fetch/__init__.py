"""Resource fetchers.

The core reads its tables through a ``TextFetcher``: any object with an
async ``fetch_text(key) -> str`` that raises ``ResourceNotFound`` for keys
without backing content.

Implementations:
- DirectoryFetcher: files under a root directory
- MappingFetcher: an in-memory mapping of key to text
"""

from mscatalog.fetch.base import TextFetcher, decode_bytes
from mscatalog.fetch.directory import DirectoryFetcher
from mscatalog.fetch.mapping import MappingFetcher

__all__ = [
    "TextFetcher",
    "decode_bytes",
    "DirectoryFetcher",
    "MappingFetcher",
]
