# ABOUTME: Shared text utilities for event processing.
# ABOUTME: Exports year parsing and search normalization helpers.

from on_this_day.utils.text import normalize_text, parse_year

__all__ = ["normalize_text", "parse_year"]
