# ABOUTME: Event processing pipeline: titles, categories, normalization, search and bounds.
# ABOUTME: Exports the pure building blocks used by the timeline service.

from on_this_day.events.bounds import calculate_bounds
from on_this_day.events.categories import CATEGORY_KEYWORDS, DEFAULT_CATEGORY, categorize
from on_this_day.events.normalizer import EventNormalizer, NormalizationError, make_api_event_id
from on_this_day.events.search import SearchEngine, apply_filters
from on_this_day.events.titles import extract_title

__all__ = [
    "CATEGORY_KEYWORDS",
    "DEFAULT_CATEGORY",
    "EventNormalizer",
    "NormalizationError",
    "SearchEngine",
    "apply_filters",
    "calculate_bounds",
    "categorize",
    "extract_title",
    "make_api_event_id",
]
