"""Tests for environment configuration."""

import logging
from decimal import Decimal

import pytest

from checkout.config import Settings, configure_logging, load_settings, parse_log_level
from checkout.errors import ConfigError


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self):
        """An empty environment gives the defaults."""
        assert load_settings({}) == Settings()
        assert Settings().tax_rate == Decimal("0.10")
        assert Settings().reset_rules_on_total is False

    def test_tax_rate(self):
        """CHECKOUT_TAX_RATE is read as a decimal."""
        settings = load_settings({"CHECKOUT_TAX_RATE": "0.0725"})
        assert settings.tax_rate == Decimal("0.0725")

    def test_bad_tax_rate(self):
        """A non-numeric rate is rejected."""
        with pytest.raises(ConfigError, match="CHECKOUT_TAX_RATE"):
            load_settings({"CHECKOUT_TAX_RATE": "ten percent"})

    def test_infinite_tax_rate(self):
        """Infinity is not a rate."""
        with pytest.raises(ConfigError):
            load_settings({"CHECKOUT_TAX_RATE": "Infinity"})

    def test_log_level_uppercased(self):
        """Level names are case-insensitive."""
        assert load_settings({"CHECKOUT_LOG_LEVEL": "debug"}).log_level == "DEBUG"

    def test_bad_log_level(self):
        """Unknown levels are rejected."""
        with pytest.raises(ConfigError, match="unknown log level"):
            load_settings({"CHECKOUT_LOG_LEVEL": "chatty"})

    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_reset_rules_true(self, value):
        """Truthy spellings enable rule reset."""
        assert load_settings({"CHECKOUT_RESET_RULES_ON_TOTAL": value}).reset_rules_on_total

    @pytest.mark.parametrize("value", ["0", "false", "No", ""])
    def test_reset_rules_false(self, value):
        """Falsy spellings disable rule reset."""
        assert not load_settings({"CHECKOUT_RESET_RULES_ON_TOTAL": value}).reset_rules_on_total

    def test_reset_rules_bad_value(self):
        """Anything else is an error."""
        with pytest.raises(ConfigError, match="expected a boolean"):
            load_settings({"CHECKOUT_RESET_RULES_ON_TOTAL": "sometimes"})

    def test_reads_os_environ(self, monkeypatch):
        """The process environment is used by default."""
        monkeypatch.setenv("CHECKOUT_TAX_RATE", "0.05")
        assert load_settings().tax_rate == Decimal("0.05")


class TestLogging:
    """Tests for logging setup."""

    def test_parse_log_level(self):
        """Standard level names map to numbers."""
        assert parse_log_level("INFO") == logging.INFO
        assert parse_log_level("warning") == logging.WARNING

    def test_configure_logging_rejects_bad_level(self):
        """Bad levels fail before configuring."""
        with pytest.raises(ConfigError):
            configure_logging("chatty")

    def test_configure_logging_writes_json_to_stderr(self, capsys):
        """Events are JSON lines on stderr."""
        import structlog

        configure_logging("INFO")
        structlog.get_logger().info("hello", answer=42)
        structlog.get_logger().debug("hidden")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert '"event": "hello"' in captured.err
        assert '"answer": 42' in captured.err
        assert "hidden" not in captured.err
