# ABOUTME: Moderation routes for reviewing user-submitted events.
# ABOUTME: List pending submissions, approve or deny them.

from collections.abc import Callable

import structlog
from fastapi import APIRouter, HTTPException, status

from on_this_day.models import RawLocalEvent
from on_this_day.storage.local_events import EventNotFoundError, LocalStoreError
from on_this_day.web.dependencies import EventStore

router = APIRouter(prefix="/api/moderation", tags=["moderation"])
log = structlog.get_logger()


def _moderate(action: str, event_id: str, apply: Callable[[str], RawLocalEvent]) -> RawLocalEvent:
    try:
        return apply(event_id)
    except EventNotFoundError as e:
        log.warning("moderation_event_not_found", event_id=event_id, action=action)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found") from e
    except LocalStoreError as e:
        log.error("moderation_store_unavailable", event_id=event_id, action=action, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Event store unavailable"
        ) from e


@router.get("/pending", response_model=list[RawLocalEvent])
def list_pending(store: EventStore):
    """Submissions awaiting review."""
    return store.list_pending()


@router.post("/{event_id}/approve", response_model=RawLocalEvent)
def approve_event(event_id: str, store: EventStore):
    """Approve a submission so it appears in search."""
    return _moderate("approve", event_id, store.approve)


@router.post("/{event_id}/deny", response_model=RawLocalEvent)
def deny_event(event_id: str, store: EventStore):
    """Deny a submission and remove it."""
    return _moderate("deny", event_id, store.deny)
