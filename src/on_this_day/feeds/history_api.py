# ABOUTME: HTTP client for the public "on this day" history API.
# ABOUTME: Returns raw events with an explicit ok/blocked/error status instead of raising.

from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from on_this_day.config import Settings, get_settings
from on_this_day.models import ApiFetchResult, FetchStatus, RawApiEvent

log = structlog.get_logger()

# Served only when history_api_sample_fallback is enabled and the live API fails
SAMPLE_EVENTS: tuple[dict[str, Any], ...] = (
    {
        "year": "1969",
        "text": (
            "Apollo 11 astronauts Neil Armstrong and Buzz Aldrin became "
            "the first humans to land on the Moon."
        ),
    },
    {
        "year": "1776",
        "text": (
            "The United States Declaration of Independence was adopted "
            "by the Continental Congress."
        ),
    },
    {
        "year": "2001",
        "text": "The September 11 attacks occurred in the United States.",
    },
    {
        "year": "1989",
        "text": (
            "The Berlin Wall fell during the Peaceful Revolution opening the border "
            "between East and West Germany."
        ),
    },
)


class HistoryApiClient:
    """Fetches events for a calendar date from the history API."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialized HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.settings.history_api_timeout,
                headers={"User-Agent": self.settings.history_api_user_agent},
                follow_redirects=True,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HistoryApiClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def date_url(self, month: int, day: int) -> str:
        return f"{self.settings.history_api_url.rstrip('/')}/{month}/{day}"

    def fetch(self, month: int, day: int) -> ApiFetchResult:
        """Fetch raw events for a month/day.

        Wildcard dates (month or day 0) are never sent upstream and yield an
        empty successful result.

        Returns:
            ApiFetchResult with events and the fetch status. Failures are
            reported through the status, never raised.
        """
        if month == 0 or day == 0:
            return ApiFetchResult()

        url = self.date_url(month, day)
        log.debug("fetching_history_events", url=url)

        try:
            response = self.client.get(url)
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as e:
            return self._failed(FetchStatus.ERROR, month, day, f"timeout: {e}")
        except httpx.TransportError as e:
            return self._failed(FetchStatus.BLOCKED, month, day, str(e))
        except (httpx.HTTPError, ValueError) as e:
            return self._failed(FetchStatus.ERROR, month, day, str(e))

        records = self._extract_records(payload)
        if records is None:
            return self._failed(FetchStatus.ERROR, month, day, "unexpected payload shape")

        events = self._parse_records(records)
        log.info("history_events_fetched", month=month, day=day, count=len(events))
        return ApiFetchResult(events=events)

    def _extract_records(self, payload: Any) -> list[Any] | None:
        """Pull the Events list out of the API payload."""
        if not isinstance(payload, dict):
            return None
        data = payload.get("data")
        if not isinstance(data, dict):
            return None
        records = data.get("Events") or []
        return records if isinstance(records, list) else None

    def _parse_records(self, records: list[Any]) -> list[RawApiEvent]:
        events = []
        for index, record in enumerate(records):
            try:
                events.append(RawApiEvent.model_validate(record))
            except ValidationError as e:
                log.warning("history_record_invalid", index=index, errors=e.error_count())
        return events

    def _failed(self, status: FetchStatus, month: int, day: int, detail: str) -> ApiFetchResult:
        log.error(
            "history_api_fetch_failed", month=month, day=day, status=status.value, error=detail
        )
        if self.settings.history_api_sample_fallback:
            log.warning("history_api_using_sample_events", month=month, day=day)
            return ApiFetchResult(
                events=[RawApiEvent.model_validate(e) for e in SAMPLE_EVENTS],
                status=FetchStatus.SAMPLE,
                detail=detail,
            )
        return ApiFetchResult(status=status, detail=detail)
