# ABOUTME: Headline extraction from free-text event descriptions.
# ABOUTME: Finds the first real sentence boundary while skipping common abbreviations.

import re

# Abbreviations whose trailing period does not end a sentence
ABBREVIATIONS: tuple[str, ...] = (
    "U.S.",
    "U.K.",
    "Dr.",
    "Mr.",
    "Mrs.",
    "Ms.",
    "Prof.",
    "Sr.",
    "Jr.",
    "St.",
    "Gen.",
    "Inc.",
    "Ltd.",
    "Corp.",
    "vs.",
    "etc.",
    "e.g.",
    "i.e.",
    "a.m.",
    "p.m.",
    "A.D.",
    "B.C.",
)

_SENTENCE_END = re.compile(r"\.\s+[A-Z]")
MIN_TITLE_LENGTH = 10


def _ends_with_abbreviation(candidate: str) -> bool:
    """Check whether a candidate title stops on an abbreviation rather than a sentence end."""
    before_period = candidate[:-1].strip()
    for abbr in ABBREVIATIONS:
        bare = abbr[:-1]
        if (
            candidate == abbr
            or before_period == bare
            or before_period.endswith(" " + bare)
            or candidate.endswith(" " + abbr)
        ):
            return True
    return False


def _acceptable(candidate: str, max_length: int) -> bool:
    return (
        MIN_TITLE_LENGTH < len(candidate) <= max_length
        and not _ends_with_abbreviation(candidate)
    )


def extract_title(text: str, max_length: int = 200, fallback_length: int = 150) -> str:
    """Derive a headline from an event description.

    Args:
        text: Full event text.
        max_length: Longest sentence accepted as a title.
        fallback_length: Truncation length when no sentence boundary is usable.

    Returns:
        The first real sentence (period included), or the text truncated
        with an ellipsis when no acceptable boundary exists.
    """
    match = _SENTENCE_END.search(text)
    if match:
        end = match.start() + 1
        candidate = text[:end].strip()
        if _acceptable(candidate, max_length):
            return candidate

        # One more attempt past the rejected boundary
        next_match = _SENTENCE_END.search(text, end + 1)
        if next_match:
            candidate = text[: next_match.start() + 1].strip()
            if _acceptable(candidate, max_length):
                return candidate

    period = text.find(". ")
    if 0 < period <= max_length:
        candidate = text[: period + 1].strip()
        if len(candidate) > MIN_TITLE_LENGTH and not _ends_with_abbreviation(candidate):
            return candidate

    if len(text) > fallback_length:
        return text[:fallback_length].strip() + "..."
    return text.strip()
