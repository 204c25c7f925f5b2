"""Fetcher protocol and byte decoding."""

from typing import Protocol, runtime_checkable

from mscatalog.errors import FetchError

__all__ = ["TextFetcher", "detect_encoding", "normalize_line_endings", "decode_bytes"]


@runtime_checkable
class TextFetcher(Protocol):
    """Source of raw table text, addressed by resource key."""

    async def fetch_text(self, key: str) -> str:
        """Return the text stored under ``key``.

        Raises
        ------
        ResourceNotFound
            If the key has no backing content.
        FetchError
            If the content exists but cannot be read.
        """
        ...


def detect_encoding(file_bytes: bytes) -> str:
    """Detect encoding of table bytes.

    Tables are UTF-8; a leading byte order mark selects ``utf-8-sig`` so
    the mark does not leak into the first header name.

    Parameters
    ----------
    file_bytes : bytes
        Complete file content as bytes.

    Returns
    -------
    str
        Detected encoding (utf-8-sig or utf-8).
    """
    if file_bytes.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"
    return "utf-8"


def normalize_line_endings(content: str) -> str:
    """Normalize line endings to LF.

    Parameters
    ----------
    content : str
        Text content with potentially mixed line endings.

    Returns
    -------
    str
        Text with normalized line endings (\\n only).
    """
    content = content.replace("\r\n", "\n")
    return content.replace("\r", "\n")


def decode_bytes(file_bytes: bytes, key: str | None = None) -> str:
    """Decode raw table bytes to text with LF line endings.

    Raises
    ------
    FetchError
        If the bytes are not valid UTF-8, e.g. a table saved as cp1256.
    """
    encoding = detect_encoding(file_bytes)
    try:
        text = file_bytes.decode(encoding)
    except UnicodeDecodeError as e:
        raise FetchError(
            f"{key or 'resource'} is not valid UTF-8 (byte {e.start}): {e.reason}", key=key
        ) from e
    return normalize_line_endings(text)
