# ABOUTME: Timeline API routes for searching events and submitting new ones.
# ABOUTME: Endpoints for event search, year bounds, submissions, and health check.

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from on_this_day.models import EventSubmission, RawLocalEvent, SearchResult, SearchSpec, YearBounds
from on_this_day.storage.local_events import LocalStoreError
from on_this_day.web.dependencies import EventStore, TimelineSvc

router = APIRouter(prefix="/api", tags=["api"])
log = structlog.get_logger()


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    version: str = "0.1.0"


def build_spec(
    month: int = Query(0, ge=0, le=12),
    day: int = Query(0, ge=0, le=31),
    year: str | None = Query(None),
    category: str = Query("all"),
    keywords: str = Query(""),
    min_year: int | None = Query(None),
    max_year: int | None = Query(None),
    include_api: bool = Query(True),
    include_local: bool = Query(True),
) -> SearchSpec:
    """Build a SearchSpec from query parameters. Zoom applies only when both ends are given."""
    zoom = None
    if min_year is not None and max_year is not None:
        zoom = YearBounds(min_year=min_year, max_year=max_year)

    return SearchSpec(
        month=month,
        day=day,
        year=year,
        category=category,
        keywords=keywords,
        zoom_bounds=zoom,
        include_api=include_api,
        include_local=include_local,
    )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint for load balancer."""
    return HealthResponse(status="healthy")


@router.get("/events", response_model=SearchResult)
def search_events(timeline: TimelineSvc, spec: Annotated[SearchSpec, Depends(build_spec)]):
    """Search events for a date with optional year, category, keyword and zoom filters."""
    return timeline.search(spec)


@router.get("/bounds", response_model=YearBounds)
def year_bounds(
    timeline: TimelineSvc,
    month: int = Query(0, ge=0, le=12),
    day: int = Query(0, ge=0, le=31),
    include_api: bool = Query(True),
    include_local: bool = Query(True),
):
    """Year range spanned by every event of a date."""
    spec = SearchSpec(month=month, day=day, include_api=include_api, include_local=include_local)
    return timeline.bounds(spec)


@router.post("/events", response_model=RawLocalEvent, status_code=status.HTTP_201_CREATED)
def submit_event(submission: EventSubmission, store: EventStore):
    """Submit a new event for moderation."""
    try:
        event = store.add(submission)
    except LocalStoreError as e:
        log.error("api_event_store_unavailable", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Event store unavailable"
        ) from e
    log.info("api_event_submitted", event_id=event.id)
    return event
