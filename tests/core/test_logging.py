"""Tests for structured logging."""

import json
import logging
from pathlib import Path

import pytest
import structlog

from beanprobe.config.models import LoggingConfig, LogOutputConfig
from beanprobe.core.logging import configure_logging, get_logger


class TestLoggingConfiguration:
    """Logging configuration tests."""

    def setup_method(self) -> None:
        """Reset structlog and stdlib logging before each test."""
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    def test_given_json_format_when_log_then_valid_json_output(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """JSON format produces valid JSON with required fields."""
        # Given
        configure_logging(json_format=True, level="INFO")
        logger = get_logger("test")

        # When
        logger.info("test message", key="value")

        # Then
        captured = capsys.readouterr()
        lines = [line for line in captured.err.strip().split("\n") if line]
        if lines:
            data = json.loads(lines[-1])
            assert data["event"] == "test message"
            assert data["key"] == "value"
            assert "timestamp" in data
            assert data["level"] == "info"

    def test_given_module_name_when_get_logger_then_binds_name(self) -> None:
        """Logger is bound to provided module name."""
        configure_logging(json_format=False, level="INFO")

        logger = get_logger("mymodule")

        assert logger is not None

    def test_given_config_object_when_configure_then_takes_precedence(self, tmp_path: Path) -> None:
        """LoggingConfig object takes precedence over simple params."""
        # Given
        log_file = tmp_path / "test.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[LogOutputConfig(format="json", destination=str(log_file))],
        )

        # When - config's DEBUG should override the level="ERROR" param
        configure_logging(config=config, json_format=False, level="ERROR")
        get_logger().debug("debug msg")

        # Then
        assert "debug msg" in log_file.read_text()

    def test_given_multi_output_config_when_configure_then_logs_to_all(
        self, tmp_path: Path
    ) -> None:
        """Multiple outputs receive logs according to their levels."""
        # Given
        debug_file = tmp_path / "debug.log"
        info_file = tmp_path / "info.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[
                LogOutputConfig(format="json", destination=str(info_file), level="INFO"),
                LogOutputConfig(format="json", destination=str(debug_file)),
            ],
        )

        # When
        configure_logging(config=config)
        logger = get_logger()
        logger.debug("debug only")
        logger.info("info msg")

        # Then - info_file should have INFO only (not DEBUG)
        info_content = info_file.read_text()
        assert "info msg" in info_content
        assert "debug only" not in info_content

        # Then - debug_file should have both (inherits DEBUG from config level)
        debug_content = debug_file.read_text()
        assert "debug only" in debug_content
        assert "info msg" in debug_content

    def test_given_resolver_debug_events_when_configured_then_written(
        self, tmp_path: Path
    ) -> None:
        """Accessor resolution emits debug events through the configured outputs."""
        # Given
        from beanprobe.accessors.ops import find_getter

        class Thing:
            def getColor(self) -> str:
                return "red"

        log_file = tmp_path / "resolver.log"
        configure_logging(
            config=LoggingConfig(
                level="DEBUG",
                outputs=[LogOutputConfig(format="json", destination=str(log_file))],
            )
        )

        # When
        find_getter(Thing, "color")

        # Then
        events = [json.loads(line) for line in log_file.read_text().splitlines() if line]
        resolved = [e for e in events if e["event"] == "accessors.getter_resolved"]
        assert resolved
        assert resolved[0]["property"] == "color"

    def test_given_verbose_when_configure_then_every_output_lowered_to_debug(
        self, tmp_path: Path
    ) -> None:
        """verbose overrides both the root level and explicit per-output levels."""
        # Given
        log_file = tmp_path / "verbose.log"
        config = LoggingConfig(
            level="WARNING",
            outputs=[LogOutputConfig(format="json", destination=str(log_file), level="ERROR")],
        )

        # When
        configure_logging(config=config, verbose=True)
        get_logger("beanprobe.test").debug("traced")

        # Then
        events = [json.loads(line) for line in log_file.read_text().splitlines() if line]
        assert [e["event"] for e in events] == ["traced"]
        assert events[0]["logger"] == "beanprobe.test"

    def test_given_module_logger_created_early_when_reconfigured_then_follows_new_level(
        self, tmp_path: Path
    ) -> None:
        """Loggers obtained before configure_logging pick up the later configuration."""
        # Given
        logger = get_logger("beanprobe.early")
        log_file = tmp_path / "early.log"

        # When
        configure_logging(
            config=LoggingConfig(
                level="DEBUG",
                outputs=[LogOutputConfig(format="json", destination=str(log_file))],
            )
        )
        logger.debug("after configure")

        # Then
        assert "after configure" in log_file.read_text()
