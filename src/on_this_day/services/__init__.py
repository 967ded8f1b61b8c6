# ABOUTME: Service layer composing the event pipeline with its collaborators.
# ABOUTME: Exports the timeline service and the latest-request search runner.

from on_this_day.services.timeline import LatestSearchRunner, TimelineService

__all__ = ["LatestSearchRunner", "TimelineService"]
