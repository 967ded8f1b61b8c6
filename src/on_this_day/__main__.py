# ABOUTME: CLI entry point for the "on this day" timeline.
# ABOUTME: Provides subcommands: search, bounds, submit, pending, approve, deny, serve.

import argparse
import json
import logging
import sys
from datetime import date

import structlog
from pydantic import ValidationError

from on_this_day.config import get_settings
from on_this_day.models import EventSubmission, SearchSpec, YearBounds


def configure_logging() -> None:
    """Configure structlog for console or JSON output."""
    settings = get_settings()

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.log_format == "json":
        processors = [
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    # Logs go to stderr so stdout stays machine-readable
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _spec_from_args(args: argparse.Namespace) -> SearchSpec:
    today = date.today()
    zoom = None
    if args.min_year is not None and args.max_year is not None:
        zoom = YearBounds(min_year=args.min_year, max_year=args.max_year)

    return SearchSpec(
        month=args.month if args.month is not None else today.month,
        day=args.day if args.day is not None else today.day,
        year=getattr(args, "year", None),
        category=getattr(args, "category", "all"),
        keywords=getattr(args, "keywords", ""),
        zoom_bounds=zoom,
        include_api=not args.no_api,
        include_local=not args.no_local,
    )


def cmd_search(args: argparse.Namespace) -> int:
    """Search events for a date and print them as JSON."""
    from on_this_day.services.timeline import TimelineService

    log = structlog.get_logger()

    try:
        spec = _spec_from_args(args)
    except ValidationError as e:
        log.error("invalid_search_arguments", errors=e.error_count())
        return 2

    with TimelineService() as service:
        result = service.search(spec)

    _print_json(result.model_dump(mode="json"))
    log.info("cmd_search_complete", results=len(result.events), api_status=result.api_status)
    return 0


def cmd_bounds(args: argparse.Namespace) -> int:
    """Print the year bounds of every event for a date."""
    from on_this_day.services.timeline import TimelineService

    args.min_year = args.max_year = None
    spec = _spec_from_args(args)

    with TimelineService() as service:
        bounds = service.bounds(spec)

    _print_json(bounds.model_dump(mode="json"))
    return 0


def cmd_submit(args: argparse.Namespace) -> int:
    """Submit a new event for moderation."""
    from on_this_day.storage.local_events import LocalEventStore, LocalStoreError

    log = structlog.get_logger()

    try:
        submission = EventSubmission(
            title=args.title,
            description=args.description,
            month=args.month,
            day=args.day,
            year=args.year,
            category=args.category,
            created_by=args.created_by,
        )
    except ValidationError as e:
        log.error("invalid_submission", errors=e.error_count())
        return 2

    try:
        event = LocalEventStore().add(submission)
    except LocalStoreError as e:
        log.error("event_store_unavailable", error=str(e))
        return 1

    _print_json(event.model_dump(mode="json"))
    return 0


def cmd_pending(_args: argparse.Namespace) -> int:
    """List submissions awaiting moderation."""
    from on_this_day.storage.local_events import LocalEventStore

    pending = LocalEventStore().list_pending()
    _print_json([e.model_dump(mode="json") for e in pending])
    return 0


def cmd_approve(args: argparse.Namespace) -> int:
    """Approve a pending submission."""
    from on_this_day.storage.local_events import (
        EventNotFoundError,
        LocalEventStore,
        LocalStoreError,
    )

    log = structlog.get_logger()

    try:
        event = LocalEventStore().approve(args.event_id)
    except EventNotFoundError:
        log.error("event_not_found", event_id=args.event_id)
        return 1
    except LocalStoreError as e:
        log.error("event_store_unavailable", error=str(e))
        return 1

    _print_json(event.model_dump(mode="json"))
    return 0


def cmd_deny(args: argparse.Namespace) -> int:
    """Deny and remove a submission."""
    from on_this_day.storage.local_events import (
        EventNotFoundError,
        LocalEventStore,
        LocalStoreError,
    )

    log = structlog.get_logger()

    try:
        event = LocalEventStore().deny(args.event_id)
    except EventNotFoundError:
        log.error("event_not_found", event_id=args.event_id)
        return 1
    except LocalStoreError as e:
        log.error("event_store_unavailable", error=str(e))
        return 1

    _print_json(event.model_dump(mode="json"))
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the JSON API with uvicorn."""
    import uvicorn

    uvicorn.run("on_this_day.web.app:app", host=args.host, port=args.port)
    return 0


def _add_date_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--month",
        type=int,
        help="Month 1-12, 0 for any month. Defaults to the current month.",
    )
    parser.add_argument(
        "--day",
        type=int,
        help="Day 1-31, 0 for any day. Defaults to today.",
    )
    parser.add_argument(
        "--no-api",
        action="store_true",
        help="Exclude events from the history API",
    )
    parser.add_argument(
        "--no-local",
        action="store_true",
        help="Exclude user-submitted events",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="on-this-day",
        description="On This Day - historical events for a calendar date",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # search command
    search_parser = subparsers.add_parser(
        "search",
        help="Search events for a date",
    )
    _add_date_arguments(search_parser)
    search_parser.add_argument("--year", type=str, help="Only events from this year")
    search_parser.add_argument(
        "--category",
        type=str,
        default="all",
        help="Only events tagged with this category (default: all)",
    )
    search_parser.add_argument(
        "--keywords",
        type=str,
        default="",
        help="Text that must appear in the title or description",
    )
    search_parser.add_argument("--min-year", type=int, help="Zoom window start (inclusive)")
    search_parser.add_argument("--max-year", type=int, help="Zoom window end (inclusive)")

    # bounds command
    bounds_parser = subparsers.add_parser(
        "bounds",
        help="Show the year range of events for a date",
    )
    _add_date_arguments(bounds_parser)

    # submit command
    submit_parser = subparsers.add_parser(
        "submit",
        help="Submit an event for moderation",
    )
    submit_parser.add_argument("--title", required=True)
    submit_parser.add_argument("--description", required=True)
    submit_parser.add_argument("--month", type=int, required=True)
    submit_parser.add_argument("--day", type=int, required=True)
    submit_parser.add_argument("--year", type=int, required=True)
    submit_parser.add_argument("--category", default="General")
    submit_parser.add_argument("--created-by", default="")

    # moderation commands
    subparsers.add_parser(
        "pending",
        help="List submissions awaiting moderation",
    )
    approve_parser = subparsers.add_parser("approve", help="Approve a submission")
    approve_parser.add_argument("event_id")
    deny_parser = subparsers.add_parser("deny", help="Deny and remove a submission")
    deny_parser.add_argument("event_id")

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the JSON API server",
    )
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    configure_logging()

    parser = create_parser()
    args = parser.parse_args(argv)

    commands = {
        "search": cmd_search,
        "bounds": cmd_bounds,
        "submit": cmd_submit,
        "pending": cmd_pending,
        "approve": cmd_approve,
        "deny": cmd_deny,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
