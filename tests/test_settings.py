"""
Tests for environment-based settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from hotel_client.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # Keep a developer's .env out of the defaults
    monkeypatch.chdir(tmp_path)


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.api_url == "http://localhost:5002"
        assert settings.request_timeout == 30.0
        assert settings.get_retry_config() == {
            "max_retries": 3,
            "base_delay": 1.0,
            "multiplier": 2.0,
        }
        assert settings.auth_redirect_path == "/auth"
        assert settings.auth_paths == ["/auth", "/login"]
        assert settings.validate_required_settings() == []

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("HOTEL_API_URL", "https://api.hotelmania.example")
        monkeypatch.setenv("HOTEL_MAX_RETRIES", "5")
        monkeypatch.setenv("HOTEL_PERSIST_SESSION", "false")

        settings = Settings()

        assert settings.api_url == "https://api.hotelmania.example"
        assert settings.max_retries == 5
        assert settings.persist_session is False

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("HOTEL_REQUEST_TIMEOUT=12\n", encoding="utf-8")

        assert Settings().request_timeout == 12.0

    def test_bounds(self):
        with pytest.raises(ValidationError):
            Settings(max_retries=-1)

    def test_missing_required(self):
        assert Settings(api_url="").validate_required_settings() == ["HOTEL_API_URL"]

    def test_session_file(self, tmp_path):
        assert Settings().get_session_file() == (
            Path.home() / ".hotel_client" / "session.json"
        )
        custom = tmp_path / "s.json"
        assert Settings(session_file=str(custom)).get_session_file() == custom

    def test_debug_forces_debug_level(self):
        assert Settings(enable_debug=True, log_level="warning").get_effective_log_level() == "DEBUG"
        assert Settings(log_level="warning").get_effective_log_level() == "WARNING"

    def test_client_config(self):
        assert Settings(api_url="http://h").get_client_config() == {
            "base_url": "http://h",
            "timeout": 30.0,
        }
