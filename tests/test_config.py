"""Tests for OURA_* settings loading."""

import pytest
from pydantic import ValidationError

from ouraring.core.config import DEFAULT_BASE_URL, Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:

    def test_loads_from_environment(self, monkeypatch):
        monkeypatch.setenv("OURA_ACCESS_TOKEN", "env-token")
        monkeypatch.setenv("OURA_REQUEST_TIMEOUT", "12.5")
        monkeypatch.setenv("OURA_DEFAULT_WINDOW_DAYS", "3")

        settings = Settings(_env_file=None)

        assert settings.access_token == "env-token"
        assert settings.request_timeout == 12.5
        assert settings.default_window_days == 3

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("OURA_ACCESS_TOKEN", "env-token")

        settings = Settings(_env_file=None)

        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.request_timeout == 30.0
        assert settings.default_window_days == 7
        assert settings.debug is False

    def test_access_token_is_required(self, monkeypatch):
        monkeypatch.delenv("OURA_ACCESS_TOKEN", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_reads_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("OURA_ACCESS_TOKEN", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("OURA_ACCESS_TOKEN=file-token\nOURA_BASE_URL=https://oura.test/v1\n")

        settings = Settings(_env_file=env_file)

        assert settings.access_token == "file-token"
        assert settings.base_url == "https://oura.test/v1"

    def test_get_settings_is_cached(self, tmp_path, monkeypatch):
        monkeypatch.setenv("OURA_ACCESS_TOKEN", "cached-token")
        monkeypatch.chdir(tmp_path)

        assert get_settings() is get_settings()
        assert get_settings().access_token == "cached-token"
