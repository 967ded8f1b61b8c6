# ABOUTME: Year range computation for the timeline range control.
# ABOUTME: Spans from the oldest known event for a date up to the current year.

from collections.abc import Sequence
from datetime import date

from on_this_day.models import CombinedEvent, YearBounds


def calculate_bounds(
    events: Sequence[CombinedEvent],
    current_year: int | None = None,
    span_years: int = 100,
) -> YearBounds:
    """Compute the selectable year range for all events of a date.

    The upper bound is always the current year, not the newest event, so the
    range reaches the present.

    Args:
        events: Unfiltered canonical events for the selected month/day.
        current_year: Override for the present year. Defaults to today.
        span_years: Range length used when there are no events.

    Returns:
        Inclusive year bounds.
    """
    current_year = current_year if current_year is not None else date.today().year

    if not events:
        return YearBounds(min_year=current_year - span_years, max_year=current_year)

    return YearBounds(min_year=min(e.year for e in events), max_year=current_year)
