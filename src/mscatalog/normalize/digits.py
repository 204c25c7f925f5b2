"""Digit-script normalization.

Ids and dates in the catalog mix Arabic-indic digits (U+0660..U+0669) with
Western digits. Only the Arabic-indic block is mapped; other digit scripts
pass through unchanged and are not treated as digits by ``extract_integer``.
"""

import re

__all__ = ["ARABIC_INDIC_DIGITS", "normalize_digits", "extract_integer"]

ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

_DIGIT_TABLE = str.maketrans(ARABIC_INDIC_DIGITS, "0123456789")

# Explicit class: \d would also match other Unicode digit scripts
DIGIT_RUN_RE = re.compile(r"[0-9]+")


def normalize_digits(text: str) -> str:
    """Replace Arabic-indic digits with their Western equivalents.

    Parameters
    ----------
    text : str
        Input text.

    Returns
    -------
    str
        Text with every Arabic-indic digit replaced; all other characters
        are unchanged.

    Examples
    --------
        >>> normalize_digits("٢٠٢٣")
        '2023'
        >>> normalize_digits("MS-١٠٥")
        'MS-105'
    """
    return text.translate(_DIGIT_TABLE)


def extract_integer(text: str | None) -> int | None:
    """Extract the first run of digits as an integer.

    Parameters
    ----------
    text : str | None
        Input text, e.g. an id ("MS-1054") or a date ("١٠٥٤هـ").

    Returns
    -------
    int | None
        Value of the first maximal digit run after normalization, or None
        when the text holds no digits. Zero is a valid result and is
        distinct from None.

    Examples
    --------
        >>> extract_integer("١٠٥٤هـ")
        1054
        >>> extract_integer("1054/1644")
        1054
        >>> extract_integer("") is None
        True
    """
    if not text:
        return None

    match = DIGIT_RUN_RE.search(normalize_digits(text))
    if match is None:
        return None
    return int(match.group(0))
