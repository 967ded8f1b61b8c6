# ABOUTME: Clients for external historical event sources.
# ABOUTME: Wraps the "on this day" HTTP API behind an explicit fetch status.

from on_this_day.feeds.history_api import HistoryApiClient

__all__ = ["HistoryApiClient"]
