# ABOUTME: Pytest fixtures and configuration for timeline tests.
# ABOUTME: Provides mock settings, sample raw events, and test utilities.

import sys
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest
import structlog

from on_this_day.config import Settings
from on_this_day.models import RawApiEvent, RawLocalEvent


@pytest.fixture(autouse=True)
def structlog_to_stderr() -> None:
    """Keep log output off stdout so JSON printed by commands stays parseable."""
    structlog.configure(logger_factory=structlog.PrintLoggerFactory(file=sys.stderr))


@pytest.fixture
def mock_settings(tmp_path: Path) -> Settings:
    """Create mock settings for testing."""
    return Settings(
        history_api_url="https://history.example.com/date",
        history_api_timeout=5,
        history_api_sample_fallback=False,
        data_dir=tmp_path / "data",
        local_events_file="events.json",
        bounds_span_years=100,
        log_level="DEBUG",
    )


@pytest.fixture
def apollo_event() -> RawApiEvent:
    """API record for the Moon landing."""
    return RawApiEvent(
        year="1969",
        text="Apollo 11 astronauts landed on the Moon. It was historic.",
        html="<a href='https://en.wikipedia.org/wiki/Apollo_11'>Apollo 11</a> astronauts landed.",
        links=[{"title": "Apollo 11", "link": "https://en.wikipedia.org/wiki/Apollo_11"}],
    )


@pytest.fixture
def caesar_event() -> RawApiEvent:
    """API record with a BC year."""
    return RawApiEvent(
        year="44 BC",
        text="Julius Caesar is assassinated by a group of senators. The republic falls.",
    )


@pytest.fixture
def api_events(apollo_event: RawApiEvent, caesar_event: RawApiEvent) -> list[RawApiEvent]:
    """A day's worth of API records."""
    return [
        caesar_event,
        apollo_event,
        RawApiEvent(
            year="1871",
            text="The Reichstag approves a new constitution for the German empire.",
        ),
    ]


def _build_local_event(**overrides: object) -> RawLocalEvent:
    data: dict[str, object] = {
        "id": "local-1",
        "title": "Town library opens",
        "description": "The town library opened its doors to readers.",
        "month": 7,
        "day": 20,
        "year": 1950,
        "category": "General",
        "approved": True,
        "created_by": "user-1",
        "created_at": datetime(2025, 1, 1, tzinfo=UTC),
    }
    data.update(overrides)
    return RawLocalEvent.model_validate(data)


@pytest.fixture
def make_local_event() -> Callable[..., RawLocalEvent]:
    """Factory for approved July 20 local events with optional overrides."""
    return _build_local_event


@pytest.fixture
def local_event() -> RawLocalEvent:
    """An approved local event on July 20."""
    return _build_local_event()
