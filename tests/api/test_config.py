"""Tests for configuration classes."""

import os
import pytest
from unittest.mock import patch


class TestCORSConfig:
    """Tests for CORSConfig class."""

    def test_cors_default_origins(self):
        """Test that default CORS origins are set correctly."""
        with patch.dict(os.environ, {}, clear=True):
            from config import CORSConfig

            config = CORSConfig()

            assert config.allowed_origins == ["http://localhost:8000"]

    def test_cors_parses_origins_with_whitespace(self):
        """Test that CORS origins are split and stripped."""
        env_origins = "  http://example.com  ,  http://localhost:3000  ,"
        with patch.dict(os.environ, {"CORS_ORIGINS": env_origins}):
            from config import _parse_cors_origins

            origins = _parse_cors_origins()

            assert origins == ["http://example.com", "http://localhost:3000"]


class TestRateLimitConfig:
    """Tests for RateLimitConfig class."""

    def test_rate_limit_defaults(self):
        """Test default rate limit values."""
        with patch.dict(os.environ, {}, clear=True):
            from config import RateLimitConfig

            config = RateLimitConfig()

            assert config.enabled is True
            assert config.requests_per_minute == 60

    def test_rate_limit_from_env(self):
        """Test rate limit configuration from environment."""
        with patch.dict(
            os.environ,
            {"RATE_LIMIT_ENABLED": "FALSE", "RATE_LIMIT_RPM": "120"},
        ):
            from config import RateLimitConfig

            config = RateLimitConfig()

            assert config.enabled is False
            assert config.requests_per_minute == 120


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_log_level_default(self):
        """Test the default log level."""
        with patch.dict(os.environ, {}, clear=True):
            from config import LoggingConfig

            assert LoggingConfig().level == "INFO"

    def test_log_level_from_env_is_uppercased(self):
        """Test the log level is read from the environment."""
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            from config import LoggingConfig

            assert LoggingConfig().level == "DEBUG"


class TestDeckConfig:
    """Tests for DeckConfig class."""

    def test_seed_unset(self):
        """Test that no seed is configured by default."""
        with patch.dict(os.environ, {}, clear=True):
            from config import DeckConfig

            assert DeckConfig().seed is None

    def test_seed_from_env(self):
        """Test that DECK_SEED seeds the deck."""
        with patch.dict(os.environ, {"DECK_SEED": "1234"}):
            from config import DeckConfig

            assert DeckConfig().seed == 1234

    def test_seed_invalid(self):
        """Test that a non-numeric seed is rejected."""
        with patch.dict(os.environ, {"DECK_SEED": "abc"}):
            from config import DeckConfig

            with pytest.raises(ValueError):
                DeckConfig()


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_app_config_defaults(self):
        """Test default AppConfig values."""
        with patch.dict(os.environ, {}, clear=True):
            from config import AppConfig

            config = AppConfig()

            assert config.debug is False
            assert config.host == "0.0.0.0"
            assert config.port == 8000

    def test_app_config_from_env(self):
        """Test server settings from environment."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000"}):
            from config import AppConfig

            config = AppConfig()

            assert config.debug is True
            assert config.port == 9000

    def test_app_config_has_nested_configs(self):
        """Test that AppConfig has nested configuration objects."""
        from config import (
            AppConfig,
            CORSConfig,
            DeckConfig,
            LoggingConfig,
            RateLimitConfig,
        )

        config = AppConfig()

        assert isinstance(config.deck, DeckConfig)
        assert isinstance(config.cors, CORSConfig)
        assert isinstance(config.rate_limit, RateLimitConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_app_config_frozen(self):
        """Test that AppConfig is frozen (immutable)."""
        from config import AppConfig

        config = AppConfig()

        with pytest.raises(Exception):  # dataclasses.FrozenInstanceError
            config.port = 9001
