# ABOUTME: Persistence for user-submitted events and their moderation state.
# ABOUTME: Exports the JSON-backed local event store.

from on_this_day.storage.local_events import EventNotFoundError, LocalEventStore, LocalStoreError

__all__ = ["EventNotFoundError", "LocalEventStore", "LocalStoreError"]
