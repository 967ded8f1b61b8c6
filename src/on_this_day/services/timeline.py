# ABOUTME: Timeline service that merges API and local events for a search request.
# ABOUTME: Computes results, year bounds and API status; discards stale concurrent searches.

import asyncio

import structlog

from on_this_day.config import Settings, get_settings
from on_this_day.events.bounds import calculate_bounds
from on_this_day.events.normalizer import EventNormalizer
from on_this_day.events.search import SearchEngine
from on_this_day.feeds.history_api import HistoryApiClient
from on_this_day.models import (
    ApiFetchResult,
    CombinedEvent,
    RawApiEvent,
    RawLocalEvent,
    SearchResult,
    SearchSpec,
    YearBounds,
)
from on_this_day.storage.local_events import LocalEventStore

log = structlog.get_logger()


class TimelineService:
    """Answers timeline queries from the history API and the local event store."""

    def __init__(
        self,
        settings: Settings | None = None,
        api_client: HistoryApiClient | None = None,
        store: LocalEventStore | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.api_client = api_client or HistoryApiClient(self.settings)
        self.store = store or LocalEventStore(self.settings)
        self.engine = SearchEngine(EventNormalizer(self.settings))

    def close(self) -> None:
        self.api_client.close()

    def __enter__(self) -> "TimelineService":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _load_sources(
        self, spec: SearchSpec
    ) -> tuple[ApiFetchResult | None, list[RawApiEvent], list[RawLocalEvent]]:
        api_result = None
        api_events: list[RawApiEvent] = []
        if spec.include_api:
            api_result = self.api_client.fetch(spec.month, spec.day)
            api_events = api_result.events

        local_events = self.store.list_approved() if spec.include_local else []
        return api_result, api_events, local_events

    def _bounds(self, events: list[CombinedEvent]) -> YearBounds:
        return calculate_bounds(events, span_years=self.settings.bounds_span_years)

    def search(self, spec: SearchSpec) -> SearchResult:
        """Run a timeline query.

        Args:
            spec: Search filters from the UI.

        Returns:
            SearchResult with ordered events, the year bounds of every event for
            the date (before filtering) and the API fetch status.
        """
        log.info(
            "timeline_search",
            month=spec.month,
            day=spec.day,
            year=spec.year,
            category=spec.category,
            keywords=spec.keywords or None,
        )
        api_result, api_raw, local_raw = self._load_sources(spec)
        api_subset, local_subset = self.engine.events_for_date(api_raw, local_raw, spec)
        events = self.engine.filter_and_sort(api_subset, local_subset, spec)

        return SearchResult(
            events=events,
            bounds=self._bounds(api_subset + local_subset),
            api_status=api_result.status if api_result else None,
        )

    def bounds(self, spec: SearchSpec) -> YearBounds:
        """Year bounds for every event of the spec's date, ignoring the other filters."""
        _, api_raw, local_raw = self._load_sources(spec)
        api_subset, local_subset = self.engine.events_for_date(api_raw, local_raw, spec)
        return self._bounds(api_subset + local_subset)


class LatestSearchRunner:
    """Runs searches off the event loop and drops results of superseded requests.

    Only the most recently started search may deliver a result; earlier ones
    that finish later resolve to None. Meant for callers that embed the service
    in an interactive front end and fire a search on every filter change; the
    HTTP API and the CLI answer each request independently and do not use it.
    """

    def __init__(self, service: TimelineService) -> None:
        self.service = service
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    async def run(self, spec: SearchSpec) -> SearchResult | None:
        self._generation += 1
        generation = self._generation

        result = await asyncio.get_running_loop().run_in_executor(None, self.service.search, spec)

        if generation != self._generation:
            log.debug("stale_search_discarded", generation=generation, latest=self._generation)
            return None
        return result
