# ABOUTME: Converts raw API and local event records into canonical CombinedEvents.
# ABOUTME: Derives titles, years and categories; skips malformed records without aborting a batch.

import re
from collections.abc import Iterable, Mapping
from typing import Any

import structlog
from bs4 import BeautifulSoup
from pydantic import TypeAdapter, ValidationError

from on_this_day.config import Settings, get_settings
from on_this_day.events.categories import DEFAULT_CATEGORY, categorize
from on_this_day.events.titles import extract_title
from on_this_day.models import (
    CombinedEvent,
    EventSource,
    RawApiEvent,
    RawEvent,
    RawLocalEvent,
)
from on_this_day.utils.text import parse_year

log = structlog.get_logger()

_RAW_EVENT: TypeAdapter[RawEvent] = TypeAdapter(RawEvent)
_ID_PREFIX_LENGTH = 20
_WHITESPACE_CHAR = re.compile(r"\s")


class NormalizationError(ValueError):
    """Raised when a raw record cannot be turned into a CombinedEvent."""


def _kind_of(raw: object) -> object:
    if isinstance(raw, Mapping):
        return raw.get("kind")
    return getattr(raw, "kind", None)


def make_api_event_id(year_text: str, text: str) -> str:
    """Build the stable id of an API event from its year and the start of its text.

    Two events in the same year whose texts share the first 20 characters
    get the same id.
    """
    prefix = _WHITESPACE_CHAR.sub("-", text[:_ID_PREFIX_LENGTH])
    return f"api-{year_text}-{prefix}"


def html_to_text(html: str) -> str:
    """Reduce an HTML fragment to its visible text."""
    soup = BeautifulSoup(html, "html.parser")
    return soup.get_text(separator=" ", strip=True)


def merge_categories(assigned: str | None, inferred: list[str]) -> list[str]:
    """Union a record's own category with inferred ones, keeping first-seen order."""
    own = [assigned] if assigned and assigned != DEFAULT_CATEGORY else []
    return list(dict.fromkeys(own + inferred)) or [DEFAULT_CATEGORY]


class EventNormalizer:
    """Builds canonical events from heterogeneous raw records."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def _title(self, text: str) -> str:
        return extract_title(
            text,
            max_length=self.settings.title_max_length,
            fallback_length=self.settings.title_fallback_length,
        )

    def normalize_api_event(
        self, raw: RawApiEvent | Mapping[str, Any], month: int, day: int
    ) -> CombinedEvent:
        """Normalize one API record for the queried date.

        Raises:
            NormalizationError: If the record is invalid or has no text.
        """
        try:
            event = raw if isinstance(raw, RawApiEvent) else RawApiEvent.model_validate(raw)
        except ValidationError as e:
            raise NormalizationError(f"invalid API record: {e.error_count()} errors") from e

        text = event.text
        if not text.strip():
            text = html_to_text(event.html) if event.html else ""
        if not text:
            raise NormalizationError("API record has no text")

        title = self._title(text).strip()
        try:
            return CombinedEvent(
                id=make_api_event_id(event.year_text, text),
                title=title,
                description=text,
                month=month,
                day=day,
                year=parse_year(event.year_text),
                year_display=event.year_text,
                category=categorize(title, text),
                source=EventSource.API,
                html=event.html or None,
                links=event.links,
            )
        except ValidationError as e:
            raise NormalizationError(f"invalid API event for {month}/{day}") from e

    def normalize_local_event(self, raw: RawLocalEvent | Mapping[str, Any]) -> CombinedEvent:
        """Normalize one approved user-submitted record.

        Raises:
            NormalizationError: If the record is invalid or missing title/description.
        """
        try:
            event = raw if isinstance(raw, RawLocalEvent) else RawLocalEvent.model_validate(raw)
        except ValidationError as e:
            raise NormalizationError(f"invalid local record: {e.error_count()} errors") from e

        if not event.title.strip() or not event.description.strip():
            raise NormalizationError(f"local record {event.id} is missing title or description")

        return CombinedEvent(
            id=event.id,
            title=event.title,
            description=event.description,
            month=event.month,
            day=event.day,
            year=event.year,
            year_display=str(event.year),
            category=merge_categories(
                event.category, categorize(event.title, event.description)
            ),
            source=EventSource.LOCAL,
        )

    def normalize(
        self, raw: RawEvent | Mapping[str, Any], month: int = 0, day: int = 0
    ) -> CombinedEvent:
        """Dispatch on the record variant. API records need the queried month and day.

        Mappings are validated against the tagged union by their ``kind`` field.
        """
        if isinstance(raw, Mapping):
            try:
                raw = _RAW_EVENT.validate_python(raw)
            except ValidationError as e:
                raise NormalizationError(f"invalid record: {e.error_count()} errors") from e

        if isinstance(raw, RawApiEvent):
            return self.normalize_api_event(raw, month, day)
        if isinstance(raw, RawLocalEvent):
            return self.normalize_local_event(raw)
        raise NormalizationError(f"unsupported record type: {type(raw).__name__}")

    def normalize_events(
        self, raws: Iterable[RawEvent | Mapping[str, Any]], month: int = 0, day: int = 0
    ) -> list[CombinedEvent]:
        """Normalize a batch of records of either variant, skipping the malformed ones."""
        events = []
        for index, raw in enumerate(raws):
            try:
                events.append(self.normalize(raw, month, day))
            except NormalizationError as e:
                log.warning(
                    "raw_event_skipped",
                    kind=_kind_of(raw),
                    index=index,
                    error=str(e),
                )
        return events
