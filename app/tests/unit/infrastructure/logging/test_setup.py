"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function in and out of the test environment
- get_module_logger context binding
- Console mirror logger staying enabled above LOG_LEVEL
"""

import logging
import sys

import pytest
import structlog

from infrastructure.logging import setup
from infrastructure.logging.setup import (
    CONSOLE_MIRROR_LOGGER,
    configure_logging,
    get_module_logger,
    _is_test_environment,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    def test_detects_pytest_in_sys_modules(self):
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    def test_configure_logging_returns_bound_logger(self, mock_settings):
        result = configure_logging(settings=mock_settings)

        assert hasattr(result, "info")
        assert hasattr(result, "warning")
        assert hasattr(result, "exception")

    def test_configure_logging_suppresses_in_test_env(self, mock_settings):
        configure_logging(settings=mock_settings)

        assert logging.getLogger().level > logging.CRITICAL

    def test_console_renderer_outside_production(self, mock_settings, monkeypatch):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)

        configure_logging(settings=mock_settings)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_renderer_in_production(self, mock_settings, monkeypatch):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)
        mock_settings.is_production = True

        configure_logging(settings=mock_settings)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_is_production_override(self, mock_settings, monkeypatch):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)

        configure_logging(settings=mock_settings, is_production=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_logs_go_to_stdout(self, mock_settings, monkeypatch):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)
        basic_config = []
        monkeypatch.setattr(
            setup.logging, "basicConfig", lambda **kwargs: basic_config.append(kwargs)
        )

        configure_logging(settings=mock_settings, log_level="debug")

        assert basic_config[-1]["stream"] is sys.stdout
        assert basic_config[-1]["level"] == logging.DEBUG


@pytest.mark.unit
class TestLoggerHelpers:
    def test_get_module_logger_binds_component(self):
        logger = get_module_logger()

        assert logger._context["module_path"] == __name__
        assert logger._context["component"] == __name__.split(".")[-1]


@pytest.mark.unit
class TestConsoleMirrorLogger:
    def test_mirror_enabled_when_log_level_is_raised(self, mock_settings, monkeypatch):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)
        monkeypatch.setattr(setup.logging, "basicConfig", lambda **kwargs: None)
        mock_settings.LOG_LEVEL = "WARNING"
        logging.root.setLevel(logging.WARNING)

        configure_logging(settings=mock_settings)

        mirror = logging.getLogger(CONSOLE_MIRROR_LOGGER)
        assert mirror.isEnabledFor(logging.INFO)
        assert not logging.getLogger("packages.visitors.service").isEnabledFor(
            logging.INFO
        )

    def test_mirror_record_reaches_handlers_above_log_level(
        self, mock_settings, monkeypatch
    ):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)
        monkeypatch.setattr(setup.logging, "basicConfig", lambda **kwargs: None)
        mock_settings.LOG_LEVEL = "ERROR"
        logging.root.setLevel(logging.ERROR)
        records = []
        handler = logging.Handler()
        handler.emit = records.append
        logging.root.addHandler(handler)

        try:
            configure_logging(settings=mock_settings)
            structlog.get_logger(CONSOLE_MIRROR_LOGGER).info(
                "visit_recorded", line="[2024-03-05 20:30:45] IP: 10.0.0.1"
            )
        finally:
            logging.root.removeHandler(handler)

        assert len(records) == 1
        assert "IP: 10.0.0.1" in records[0].getMessage()

    def test_mirror_silenced_under_tests(self, mock_settings):
        configure_logging(settings=mock_settings)

        mirror = logging.getLogger(CONSOLE_MIRROR_LOGGER)
        assert not mirror.isEnabledFor(logging.INFO)
