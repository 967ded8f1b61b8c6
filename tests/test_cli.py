# ABOUTME: Tests for CLI argument parsing and command dispatch.
# ABOUTME: Validates argparse configuration, subcommand routing, and JSON output.

import argparse
import json
from datetime import date
from unittest.mock import MagicMock, patch

import pytest

from on_this_day.__main__ import cmd_approve, cmd_search, cmd_submit, create_parser, main
from on_this_day.config import Settings
from on_this_day.models import SearchResult, YearBounds
from on_this_day.storage.local_events import LocalEventStore


class TestCreateParser:
    """Tests for argument parser creation."""

    def test_parser_creation(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)

    def test_search_command(self) -> None:
        """Search command parses filters."""
        parser = create_parser()
        args = parser.parse_args(
            ["search", "--month", "7", "--day", "20", "--keywords", "moon", "--no-local"]
        )

        assert args.command == "search"
        assert args.month == 7
        assert args.day == 20
        assert args.keywords == "moon"
        assert args.category == "all"
        assert args.no_local is True
        assert args.no_api is False

    def test_search_defaults(self) -> None:
        """Search without date options leaves month and day unset."""
        args = create_parser().parse_args(["search"])
        assert args.month is None
        assert args.day is None
        assert args.year is None

    def test_submit_requires_fields(self) -> None:
        """Submit requires title, description and date."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["submit", "--title", "Only a title"])

    def test_approve_takes_id(self) -> None:
        """Approve takes the event id positionally."""
        args = create_parser().parse_args(["approve", "abc"])
        assert args.event_id == "abc"


class TestCmdSearch:
    """Tests for the search command."""

    @patch("on_this_day.services.timeline.TimelineService")
    def test_defaults_to_today(
        self, mock_service_cls: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Search defaults to today's month and day and prints JSON."""
        service = mock_service_cls.return_value.__enter__.return_value
        service.search.return_value = SearchResult(
            events=[], bounds=YearBounds(min_year=1926, max_year=2026)
        )
        args = create_parser().parse_args(["search"])

        assert cmd_search(args) == 0

        spec = service.search.call_args.args[0]
        today = date.today()
        assert (spec.month, spec.day) == (today.month, today.day)
        output = json.loads(capsys.readouterr().out)
        assert output["events"] == []
        assert output["bounds"] == {"min_year": 1926, "max_year": 2026}

    def test_invalid_month(self) -> None:
        """Out-of-range months exit with a usage error code."""
        args = create_parser().parse_args(["search", "--month", "13", "--day", "1"])
        assert cmd_search(args) == 2


class TestModerationCommands:
    """Tests for submit and approve commands."""

    def test_submit_and_approve(
        self, mock_settings: Settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A submitted event can be approved by id."""
        with patch(
            "on_this_day.storage.local_events.get_settings", return_value=mock_settings
        ):
            submit_args = create_parser().parse_args(
                [
                    "submit",
                    "--title",
                    "Bridge completed",
                    "--description",
                    "The river bridge opened.",
                    "--month",
                    "7",
                    "--day",
                    "20",
                    "--year",
                    "1932",
                ]
            )
            assert cmd_submit(submit_args) == 0
            event_id = json.loads(capsys.readouterr().out)["id"]

            approve_args = create_parser().parse_args(["approve", event_id])
            assert cmd_approve(approve_args) == 0

            assert [e.id for e in LocalEventStore(mock_settings).list_approved()] == [event_id]

    def test_approve_unknown(self, mock_settings: Settings) -> None:
        """Approving an unknown id exits with 1."""
        with patch(
            "on_this_day.storage.local_events.get_settings", return_value=mock_settings
        ):
            args = create_parser().parse_args(["approve", "missing"])
            assert cmd_approve(args) == 1

    def test_unreadable_store_is_left_alone(self, mock_settings: Settings) -> None:
        """Moderation on an unreadable store exits with 1 and keeps the file."""
        store = LocalEventStore(mock_settings)
        store.path.write_bytes(b"\xff\xfe[garbage")

        with patch(
            "on_this_day.storage.local_events.get_settings", return_value=mock_settings
        ):
            args = create_parser().parse_args(["approve", "local-1"])
            assert cmd_approve(args) == 1

        assert store.path.read_bytes() == b"\xff\xfe[garbage"

    def test_submit_invalid(self, mock_settings: Settings) -> None:
        """Invalid submissions exit with 2."""
        args = create_parser().parse_args(
            [
                "submit",
                "--title",
                " ",
                "--description",
                "x",
                "--month",
                "7",
                "--day",
                "20",
                "--year",
                "1932",
            ]
        )
        assert cmd_submit(args) == 2


class TestMain:
    """Tests for main dispatch."""

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without a subcommand, help is printed and 1 returned."""
        assert main([]) == 1
        assert "on-this-day" in capsys.readouterr().out

    @patch("on_this_day.__main__.cmd_pending", return_value=0)
    def test_dispatch(self, mock_pending: MagicMock) -> None:
        """Subcommands dispatch to their handlers."""
        assert main(["pending"]) == 0
        mock_pending.assert_called_once()
