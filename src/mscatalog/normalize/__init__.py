"""Text normalization for catalog values.

Digit-script normalization shared by shard routing, id matching and
date range comparison.
"""

from mscatalog.normalize.digits import extract_integer, normalize_digits

__all__ = [
    "normalize_digits",
    "extract_integer",
]
