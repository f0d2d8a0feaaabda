"""Unit tests for structlog configuration used by the signature service."""

import logging
import os
from unittest.mock import patch

import pytest
import structlog

from src.infrastructure.observability.correlation import correlation_id_processor
from src.infrastructure.observability.logging import (
    LOG_LEVEL_ENV,
    _get_log_level,
    configure_structlog,
    get_logger_for_service,
)


def _renderers(processors: list[object], name: str) -> list[object]:
    return [p for p in processors if name in type(p).__name__]


class TestConfigureStructlog:
    """Tests for configure_structlog renderer selection."""

    def test_production_renders_json(self) -> None:
        """Production output ends in a JSON renderer."""
        configure_structlog(environment="production")

        processors = structlog.get_config()["processors"]

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self) -> None:
        """Any other environment gets the console renderer."""
        configure_structlog(environment="development")

        processors = structlog.get_config()["processors"]

        assert _renderers(processors, "ConsoleRenderer")
        assert not _renderers(processors, "JSONRenderer")

    def test_default_environment_is_production(self) -> None:
        """Calling without arguments configures JSON output."""
        configure_structlog()

        processors = structlog.get_config()["processors"]

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_correlation_processor_is_installed(self) -> None:
        """Every entry passes through the correlation id processor."""
        configure_structlog(environment="production")

        assert correlation_id_processor in structlog.get_config()["processors"]


class TestLogLevel:
    """Tests for LOG_LEVEL handling."""

    def test_default_level_is_info(self) -> None:
        """Without LOG_LEVEL the level is INFO."""
        with patch.dict(os.environ, {}, clear=True):
            assert _get_log_level() == logging.INFO

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("ERROR", logging.ERROR)],
    )
    def test_level_read_from_environment(self, value: str, expected: int) -> None:
        """LOG_LEVEL is case-insensitive."""
        with patch.dict(os.environ, {LOG_LEVEL_ENV: value}):
            assert _get_log_level() == expected

    def test_unknown_level_falls_back_to_info(self) -> None:
        """Unrecognized names do not break startup."""
        with patch.dict(os.environ, {LOG_LEVEL_ENV: "chatty"}):
            assert _get_log_level() == logging.INFO


class TestGetLoggerForService:
    """Tests for get_logger_for_service helper."""

    def test_logger_bound_with_service_and_default_component(self) -> None:
        """Service name and the signature component are bound."""
        configure_structlog(environment="production")

        with structlog.testing.capture_logs() as captured:
            get_logger_for_service("SignatureStateService").info("service_test")

        assert captured[0]["service"] == "SignatureStateService"
        assert captured[0]["component"] == "signature"

    def test_logger_bound_with_custom_component(self) -> None:
        """A custom component overrides the default."""
        configure_structlog(environment="production")

        with structlog.testing.capture_logs() as captured:
            get_logger_for_service("HttpSignatureStore", component="adapter").info(
                "component_test"
            )

        assert captured[0]["service"] == "HttpSignatureStore"
        assert captured[0]["component"] == "adapter"
