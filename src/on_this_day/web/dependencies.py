# ABOUTME: FastAPI dependency injection for timeline services.
# ABOUTME: Provides reusable dependencies for route handlers.

from typing import Annotated

from fastapi import Depends, Request

from on_this_day.services.timeline import TimelineService
from on_this_day.storage.local_events import LocalEventStore


def get_timeline_service(request: Request) -> TimelineService:
    """Get the timeline service created at startup."""
    return request.app.state.timeline


TimelineSvc = Annotated[TimelineService, Depends(get_timeline_service)]


def get_event_store(service: TimelineSvc) -> LocalEventStore:
    """Get the local event store backing the timeline service."""
    return service.store


EventStore = Annotated[LocalEventStore, Depends(get_event_store)]
