"""Tests for configuration module."""

import os
from unittest.mock import patch

import pytest

from game_shelf.config import (
    BGGConfig,
    EnrichmentConfig,
    LoggingConfig,
    Settings,
    SteamAPIConfig,
)


class TestBGGConfig:
    """Tests for BGG configuration."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            config = BGGConfig()

        assert config.base_url == "https://boardgamegeek.com/xmlapi2"
        assert config.bearer_token is None
        assert config.max_retries == 6
        assert config.retry_delay_seconds == 3.0
        assert config.timeout_seconds == 30

    def test_bearer_token_secret(self) -> None:
        """Test that the bearer token is stored as secret."""
        with patch.dict(os.environ, {"BGG_BEARER_TOKEN": "token_abc"}):
            config = BGGConfig()

        assert config.bearer_token is not None
        assert "token_abc" not in repr(config.bearer_token)
        assert config.bearer_token.get_secret_value() == "token_abc"

    def test_retry_bounds(self) -> None:
        """Test max_retries validation bounds."""
        with patch.dict(os.environ, {"BGG_MAX_RETRIES": "-1"}), pytest.raises(ValueError):
            BGGConfig()

        with patch.dict(os.environ, {"BGG_MAX_RETRIES": "21"}), pytest.raises(ValueError):
            BGGConfig()


class TestSteamAPIConfig:
    """Tests for Steam API configuration."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            config = SteamAPIConfig()

        assert config.api_key is None
        assert config.base_url == "https://api.steampowered.com"
        assert config.store_url == "https://store.steampowered.com/api"

    def test_api_key_secret(self) -> None:
        """Test that API key is stored as secret."""
        with patch.dict(os.environ, {"STEAM_API_KEY": "secret_key_123"}):
            config = SteamAPIConfig()

        assert config.api_key is not None
        assert "secret_key_123" not in repr(config.api_key)
        assert config.api_key.get_secret_value() == "secret_key_123"


class TestEnrichmentConfig:
    """Tests for enrichment configuration."""

    def test_default_top_n(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert EnrichmentConfig().top_n == 20

    def test_top_n_bounds(self) -> None:
        with patch.dict(os.environ, {"ENRICH_TOP_N": "0"}), pytest.raises(ValueError):
            EnrichmentConfig()

    def test_top_n_capped_at_bgg_batch_size(self) -> None:
        with patch.dict(os.environ, {"ENRICH_TOP_N": "20"}):
            assert EnrichmentConfig().top_n == 20
        with patch.dict(os.environ, {"ENRICH_TOP_N": "21"}), pytest.raises(ValueError):
            EnrichmentConfig()


class TestLoggingConfig:
    """Tests for logging configuration."""

    def test_valid_levels(self) -> None:
        """Test valid log levels."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            with patch.dict(os.environ, {"LOG_LEVEL": level}):
                config = LoggingConfig()
                assert config.level == level

    def test_invalid_format(self) -> None:
        with patch.dict(os.environ, {"LOG_FORMAT": "xml"}), pytest.raises(ValueError):
            LoggingConfig()


class TestSettings:
    """Tests for the aggregated settings."""

    def test_sections_and_defaults(self) -> None:
        with patch.dict(os.environ, {"BGG_MAX_RETRIES": "2"}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.demo_fixtures is True
        assert settings.bgg.max_retries == 2
        assert settings.enrichment.top_n == 20
        assert settings.is_production is False

    def test_demo_fixtures_toggle(self) -> None:
        with patch.dict(os.environ, {"DEMO_FIXTURES": "false"}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.demo_fixtures is False
