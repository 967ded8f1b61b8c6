# ABOUTME: JSON-based persistence for user-submitted events.
# ABOUTME: Handles submission, listing and approve/deny moderation of local events.

import json
import os
import tempfile
import threading
import uuid
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from on_this_day.config import Settings, get_settings
from on_this_day.models import EventSubmission, RawLocalEvent

log = structlog.get_logger()


class EventNotFoundError(KeyError):
    """Raised when a moderation action targets an unknown event id."""


class LocalStoreError(RuntimeError):
    """Raised when the events file cannot be read and must not be overwritten."""


class LocalEventStore:
    """Stores submitted events in a single JSON file under the data directory.

    Records are validated one at a time: a malformed record is skipped when
    reading and written back untouched by mutations. Writes replace the file
    atomically and mutations are serialized by a per-store lock.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.settings.data_dir.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        """Path to the local events file."""
        return self.settings.local_events_path

    def _read_records(self) -> list[Any]:
        """Read the raw JSON records.

        Raises:
            LocalStoreError: If the file exists but is not a readable JSON list.
        """
        if not self.path.exists():
            log.debug("local_events_not_found", path=str(self.path))
            return []

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise LocalStoreError(f"cannot read {self.path}: {e}") from e

        if not isinstance(data, list):
            raise LocalStoreError(f"{self.path} does not hold a list of events")
        return data

    def _write_records(self, records: list[Any]) -> None:
        """Atomically replace the events file."""
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(json.dumps(records, indent=2, ensure_ascii=False))
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        log.debug("local_events_saved", path=str(self.path), count=len(records))

    @staticmethod
    def _parse(record: Any, index: int) -> RawLocalEvent | None:
        try:
            return RawLocalEvent.model_validate(record)
        except ValidationError as e:
            log.warning("local_event_skipped", index=index, errors=e.error_count())
            return None

    def load_all(self) -> list[RawLocalEvent]:
        """Load every valid stored event.

        Returns:
            All valid events; malformed records are skipped. An unreadable file
            reads as an empty store.
        """
        try:
            records = self._read_records()
        except LocalStoreError as e:
            log.error("local_events_corrupt", path=str(self.path), error=str(e))
            return []

        events = []
        for index, record in enumerate(records):
            event = self._parse(record, index)
            if event is not None:
                events.append(event)
        return events

    def get(self, event_id: str) -> RawLocalEvent:
        for event in self.load_all():
            if event.id == event_id:
                return event
        raise EventNotFoundError(event_id)

    def list_approved(self) -> list[RawLocalEvent]:
        """Return events visible to search."""
        return [e for e in self.load_all() if e.approved]

    def list_pending(self) -> list[RawLocalEvent]:
        """Return events awaiting moderation."""
        return [e for e in self.load_all() if not e.approved]

    def add(self, submission: EventSubmission) -> RawLocalEvent:
        """Store a new submission as a pending event.

        Args:
            submission: Validated user submission.

        Returns:
            The stored event with its generated id.

        Raises:
            LocalStoreError: If the existing file cannot be read.
        """
        event = RawLocalEvent(
            id=str(uuid.uuid4()),
            created_at=datetime.now(UTC),
            approved=False,
            **submission.model_dump(),
        )
        with self._lock:
            records = self._read_records()
            records.append(event.model_dump(mode="json"))
            self._write_records(records)
        log.info("local_event_submitted", event_id=event.id, created_by=event.created_by)
        return event

    def _update(
        self, event_id: str, change: Callable[[RawLocalEvent], RawLocalEvent | None]
    ) -> RawLocalEvent:
        """Apply ``change`` to the matching record; a None result removes it.

        Other records, including malformed ones, are written back as read.
        """
        with self._lock:
            records = self._read_records()
            for index, record in enumerate(records):
                event = self._parse(record, index)
                if event is None or event.id != event_id:
                    continue
                updated = change(event)
                if updated is None:
                    del records[index]
                else:
                    records[index] = updated.model_dump(mode="json")
                self._write_records(records)
                return updated or event
        raise EventNotFoundError(event_id)

    def approve(self, event_id: str) -> RawLocalEvent:
        """Mark an event as approved so search can see it.

        Raises:
            EventNotFoundError: If no event has this id.
            LocalStoreError: If the file cannot be read.
        """
        approved = self._update(event_id, lambda e: e.model_copy(update={"approved": True}))
        log.info("local_event_approved", event_id=event_id)
        return approved

    def deny(self, event_id: str) -> RawLocalEvent:
        """Remove an event from the store.

        Raises:
            EventNotFoundError: If no event has this id.
            LocalStoreError: If the file cannot be read.
        """
        denied = self._update(event_id, lambda e: None)
        log.info("local_event_denied", event_id=event_id)
        return denied
