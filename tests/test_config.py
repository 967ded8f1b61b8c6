# ABOUTME: Tests for configuration loading and validation.
# ABOUTME: Verifies Pydantic Settings behavior and defaults.

from pathlib import Path

import pytest

from on_this_day.config import Settings


class TestSettings:
    """Tests for Settings configuration class."""

    def test_settings_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings should have correct default values."""
        monkeypatch.delenv("HISTORY_API_URL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.history_api_url == "https://history.muffinlabs.com/date"
        assert settings.history_api_sample_fallback is False
        assert settings.bounds_span_years == 100
        assert settings.title_max_length == 200
        assert settings.title_fallback_length == 150

    def test_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables override defaults."""
        monkeypatch.setenv("HISTORY_API_TIMEOUT", "3")
        monkeypatch.setenv("HISTORY_API_SAMPLE_FALLBACK", "true")

        settings = Settings(_env_file=None)

        assert settings.history_api_timeout == 3
        assert settings.history_api_sample_fallback is True

    def test_local_events_path(self, mock_settings: Settings) -> None:
        """Local events path combines data dir and file name."""
        assert mock_settings.local_events_path == mock_settings.data_dir / "events.json"
        assert isinstance(mock_settings.local_events_path, Path)

    def test_every_field_is_known(self) -> None:
        """Only settings the application reads are declared."""
        assert set(Settings.model_fields) == {
            "history_api_url",
            "history_api_timeout",
            "history_api_user_agent",
            "history_api_sample_fallback",
            "data_dir",
            "local_events_file",
            "bounds_span_years",
            "title_max_length",
            "title_fallback_length",
            "log_level",
            "log_format",
        }
