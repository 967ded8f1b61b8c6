# ABOUTME: Pydantic models for raw and canonical historical event records.
# ABOUTME: Defines RawApiEvent, RawLocalEvent, CombinedEvent, and search request/response shapes.

import re
from datetime import UTC, datetime
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class EventSource(str, Enum):
    """Where a canonical event came from."""

    API = "api"
    LOCAL = "local"


class FetchStatus(str, Enum):
    """Outcome reported by the history API client."""

    OK = "ok"
    BLOCKED = "blocked"
    ERROR = "error"
    SAMPLE = "sample"


class EventLink(BaseModel):
    """Reference link attached to an API event."""

    title: str
    link: str


class RawApiEvent(BaseModel):
    """Event record as returned by the "on this day" API."""

    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["api"] = "api"
    year_text: str = Field(alias="year", description="Free-form year, e.g. '1969' or '42 BC'")
    text: str = ""
    html: str = ""
    no_year_html: str = ""
    links: list[EventLink] = Field(default_factory=list)


class RawLocalEvent(BaseModel):
    """User-submitted event as held by the moderation store."""

    kind: Literal["local"] = "local"
    id: str
    title: str
    description: str
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    year: int
    category: str = "General"
    approved: bool = False
    created_by: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


RawEvent = Annotated[RawApiEvent | RawLocalEvent, Field(discriminator="kind")]


class EventSubmission(BaseModel):
    """New event proposed by a user, pending moderation."""

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    year: int
    category: str = "General"
    created_by: str = ""

    @field_validator("title", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class CombinedEvent(BaseModel):
    """Canonical, source-agnostic event consumed by the timeline."""

    id: str
    title: str
    description: str
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    year: int = Field(description="Signed year, negative for BC")
    year_display: str
    category: list[str] = Field(min_length=1)
    source: EventSource
    html: str | None = None
    links: list[EventLink] = Field(default_factory=list)


class YearBounds(BaseModel):
    """Inclusive year range."""

    min_year: int
    max_year: int

    def contains(self, year: int) -> bool:
        return self.min_year <= year <= self.max_year


class SearchSpec(BaseModel):
    """Search filters supplied on every timeline interaction.

    Month and day use 0 as a wildcard. A year that cannot be read as an
    integer means no year filter.
    """

    month: int = Field(default=0, ge=0, le=12)
    day: int = Field(default=0, ge=0, le=31)
    year: int | None = None
    category: str = "all"
    keywords: str = ""
    zoom_bounds: YearBounds | None = None
    include_api: bool = True
    include_local: bool = True

    @field_validator("year", mode="before")
    @classmethod
    def _coerce_year(cls, value: object) -> int | None:
        if value is None or isinstance(value, int):
            return value
        match = _LEADING_INT.match(str(value))
        return int(match.group(1)) if match else None

    @field_validator("category", mode="before")
    @classmethod
    def _default_category(cls, value: object) -> object:
        return value or "all"

    @property
    def date_is_specific(self) -> bool:
        """True when both month and day are concrete values."""
        return self.month != 0 and self.day != 0


class ApiFetchResult(BaseModel):
    """Events returned by the API client together with the fetch outcome."""

    events: list[RawApiEvent] = Field(default_factory=list)
    status: FetchStatus = FetchStatus.OK
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == FetchStatus.OK


class SearchResult(BaseModel):
    """Ordered events plus the data the timeline needs to render its range control."""

    events: list[CombinedEvent]
    bounds: YearBounds
    api_status: FetchStatus | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def api_blocked(self) -> bool:
        """True when API events were requested but could not be fetched live."""
        return self.api_status is not None and self.api_status != FetchStatus.OK
