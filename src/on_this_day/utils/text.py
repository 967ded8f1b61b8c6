# ABOUTME: Year parsing and text normalization for event matching.
# ABOUTME: Turns free-form year strings into signed integers and strips punctuation for search.

import re

_YEAR_TOKEN = re.compile(r"-?\d+")
_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def parse_year(text: str) -> int:
    """Parse a free-form year such as '1969' or '42 BC' into a signed integer.

    The first integer token is used. Any mention of 'bc' (case-insensitive)
    forces the year negative.

    Returns:
        Signed year, or 0 when the text holds no digits.
    """
    match = _YEAR_TOKEN.search(text)
    if not match:
        return 0

    year = int(match.group())
    if "bc" in text.lower():
        return -abs(year)
    return year


def normalize_text(text: str) -> str:
    """Normalize text for matching by lowercasing and replacing punctuation with spaces."""
    text = _NON_WORD.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", text).strip()
