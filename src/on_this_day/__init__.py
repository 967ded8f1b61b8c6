# ABOUTME: Main package for the "on this day" historical timeline.
# ABOUTME: Exports configuration and the canonical event models.

from on_this_day.config import get_settings
from on_this_day.models import CombinedEvent, RawApiEvent, RawLocalEvent, SearchSpec

__all__ = [
    "get_settings",
    "CombinedEvent",
    "RawApiEvent",
    "RawLocalEvent",
    "SearchSpec",
]
