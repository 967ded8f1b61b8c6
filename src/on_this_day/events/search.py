# ABOUTME: Filtering and ordering of canonical events for a timeline query.
# ABOUTME: Applies year, category, keyword and zoom filters per source, then sorts newest first.

from collections.abc import Iterable, Sequence

import structlog

from on_this_day.events.normalizer import EventNormalizer
from on_this_day.models import CombinedEvent, RawApiEvent, RawLocalEvent, SearchSpec, YearBounds
from on_this_day.utils.text import normalize_text

log = structlog.get_logger()

ALL_CATEGORIES_FILTER = "all"


def matches_date(event: RawLocalEvent, month: int, day: int) -> bool:
    """Check a local record against a month/day where 0 matches anything."""
    return (month == 0 or event.month == month) and (day == 0 or event.day == day)


def filter_by_year(events: Sequence[CombinedEvent], year: int | None) -> list[CombinedEvent]:
    if year is None:
        return list(events)
    return [e for e in events if e.year == year]


def filter_by_category(events: Sequence[CombinedEvent], category: str) -> list[CombinedEvent]:
    if category == ALL_CATEGORIES_FILTER:
        return list(events)
    return [e for e in events if category in e.category]


def filter_by_keywords(events: Sequence[CombinedEvent], spec: SearchSpec) -> list[CombinedEvent]:
    """Keep events whose normalized title or description contains the keywords.

    Keyword search needs a concrete month and day. Without them, or when the
    keywords normalize to nothing, no events are returned.
    """
    if not spec.keywords.strip():
        return list(events)

    if not spec.date_is_specific:
        log.debug("keyword_search_rejected", reason="wildcard_date", month=spec.month, day=spec.day)
        return []

    needle = normalize_text(spec.keywords)
    if not needle:
        log.debug("keyword_search_rejected", reason="empty_keywords")
        return []

    return [
        e
        for e in events
        if needle in normalize_text(e.title) or needle in normalize_text(e.description)
    ]


def filter_by_bounds(
    events: Sequence[CombinedEvent], bounds: YearBounds | None
) -> list[CombinedEvent]:
    if bounds is None:
        return list(events)
    return [e for e in events if bounds.contains(e.year)]


def apply_filters(events: Sequence[CombinedEvent], spec: SearchSpec) -> list[CombinedEvent]:
    """Run the filter chain in fixed order: year, category, keywords, zoom bounds."""
    filtered = filter_by_year(events, spec.year)
    filtered = filter_by_category(filtered, spec.category)
    filtered = filter_by_keywords(filtered, spec)
    return filter_by_bounds(filtered, spec.zoom_bounds)


def sort_newest_first(events: Iterable[CombinedEvent]) -> list[CombinedEvent]:
    """Sort by year descending. Equal years keep their incoming order."""
    return sorted(events, key=lambda e: e.year, reverse=True)


class SearchEngine:
    """Turns raw records from both sources into the ordered result list for a query."""

    def __init__(self, normalizer: EventNormalizer | None = None) -> None:
        self.normalizer = normalizer or EventNormalizer()

    def events_for_date(
        self,
        api_events: Iterable[RawApiEvent],
        local_events: Iterable[RawLocalEvent],
        spec: SearchSpec,
    ) -> tuple[list[CombinedEvent], list[CombinedEvent]]:
        """Normalize the unfiltered API and local subsets for the spec's date.

        API records belong to a concrete date, so the API subset is empty when
        the month or day is a wildcard.

        Returns:
            Tuple of (api_events, local_events).
        """
        api_subset: list[CombinedEvent] = []
        if spec.include_api and spec.date_is_specific:
            api_subset = self.normalizer.normalize_events(api_events, spec.month, spec.day)

        local_subset: list[CombinedEvent] = []
        if spec.include_local:
            eligible = [
                e for e in local_events if e.approved and matches_date(e, spec.month, spec.day)
            ]
            local_subset = self.normalizer.normalize_events(eligible)

        return api_subset, local_subset

    def filter_and_sort(
        self,
        api_subset: Sequence[CombinedEvent],
        local_subset: Sequence[CombinedEvent],
        spec: SearchSpec,
    ) -> list[CombinedEvent]:
        """Filter each subset independently, concatenate API before local, and sort."""
        combined = apply_filters(api_subset, spec) + apply_filters(local_subset, spec)
        return sort_newest_first(combined)

    def search(
        self,
        api_events: Iterable[RawApiEvent],
        local_events: Iterable[RawLocalEvent],
        spec: SearchSpec,
    ) -> list[CombinedEvent]:
        """Produce the filtered, newest-first event list for a query.

        Args:
            api_events: Raw API records fetched for the spec's month/day.
            local_events: Local records; unapproved ones and other dates are ignored.
            spec: Search filters.

        Returns:
            Ordered events. An empty list is a valid outcome.
        """
        api_subset, local_subset = self.events_for_date(api_events, local_events, spec)
        results = self.filter_and_sort(api_subset, local_subset, spec)
        log.debug(
            "search_complete",
            month=spec.month,
            day=spec.day,
            api_candidates=len(api_subset),
            local_candidates=len(local_subset),
            results=len(results),
        )
        return results
