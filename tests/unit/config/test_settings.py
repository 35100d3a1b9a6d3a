"""Tests for environment-based settings."""

import pytest
from pydantic import ValidationError

from spayd_config import Settings, clear_settings_cache, get_settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.qr_size == 300
        assert settings.include_checksum is False
        assert settings.normalize_strings is True
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SPAYD_QR_SIZE", "512")
        monkeypatch.setenv("SPAYD_INCLUDE_CHECKSUM", "true")
        monkeypatch.setenv("SPAYD_NORMALIZE_STRINGS", "false")

        settings = Settings()

        assert settings.qr_size == 512
        assert settings.include_checksum is True
        assert settings.normalize_strings is False

    def test_invalid_qr_size(self):
        with pytest.raises(ValidationError, match="positive"):
            Settings(qr_size=0)

    def test_get_settings_is_cached(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("SPAYD_QR_SIZE", "512")

        assert get_settings() is first

        clear_settings_cache()
        assert get_settings().qr_size == 512
