"""Tests for config and logging."""

import json
import logging
import sys
from decimal import Decimal

import pytest

from bank_demo.config import BankConfig
from bank_demo.exceptions import ConfigurationError
from bank_demo.logging import JsonFormatter, setup_logging

ENV_VARS = [
    "BANK_CURRENCY_SYMBOL",
    "BANK_INTEREST_RATE",
    "BANK_OVERDRAFT_LIMIT",
    "BANK_LOCALE",
    "SEED",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Environment without any bank-demo variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestBankConfig:
    """Tests for BankConfig."""

    def test_default_values(self) -> None:
        """Test default values."""
        config = BankConfig()

        assert config.currency_symbol == "₹"
        assert config.savings_interest_rate == Decimal("3.5")
        assert config.default_overdraft_limit == Decimal("25000")
        assert config.locale == "en_IN"
        assert config.seed is None
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_from_env_default(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test from env default."""
        assert BankConfig.from_env() == BankConfig()

    def test_from_env_custom(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test from env custom."""
        clean_env.setenv("BANK_CURRENCY_SYMBOL", "$")
        clean_env.setenv("BANK_INTEREST_RATE", "4.25")
        clean_env.setenv("BANK_OVERDRAFT_LIMIT", "1000")
        clean_env.setenv("BANK_LOCALE", "en_US")
        clean_env.setenv("SEED", "12345")
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("LOG_FORMAT", "json")

        config = BankConfig.from_env()

        assert config.currency_symbol == "$"
        assert config.savings_interest_rate == Decimal("4.25")
        assert config.default_overdraft_limit == Decimal("1000")
        assert config.locale == "en_US"
        assert config.seed == 12345
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    @pytest.mark.parametrize(
        "name,value",
        [
            ("BANK_INTEREST_RATE", "lots"),
            ("BANK_OVERDRAFT_LIMIT", "-5"),
            ("BANK_OVERDRAFT_LIMIT", "NaN"),
            ("SEED", "abc"),
        ],
    )
    def test_from_env_invalid(self, clean_env: pytest.MonkeyPatch, name: str, value: str) -> None:
        """Test from env invalid."""
        clean_env.setenv(name, value)

        with pytest.raises(ConfigurationError, match=name):
            BankConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        """Test setup logging default."""
        setup_logging()

        assert logging.getLogger("bank_demo").level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        """Test setup logging debug."""
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test setup logging invalid level."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        """Test setup logging json format."""
        setup_logging(format_type="json")

        assert any(isinstance(h.formatter, JsonFormatter) for h in logging.getLogger().handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        """Test setup logging replaces handlers."""
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_faker_logger_quieted(self) -> None:
        """Test faker logger quieted."""
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        defaults = dict(
            name="bank_demo.models.account",
            level=logging.INFO,
            pathname="/path/to/file.py",
            lineno=42,
            msg="Interest added: %s",
            args=("1400.00",),
            exc_info=None,
        )
        defaults.update(kwargs)
        return logging.LogRecord(**defaults)

    def test_format_basic(self) -> None:
        """Test format basic."""
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "bank_demo.models.account"
        assert data["message"] == "Interest added: 1400.00"
        assert "timestamp" in data

    def test_format_with_account_number(self) -> None:
        """Test format with account number."""
        record = self._record()
        record.account_number = "SA001"

        data = json.loads(JsonFormatter().format(record))

        assert data["account_number"] == "SA001"

    def test_format_only_known_fields(self) -> None:
        """Test arbitrary record attributes are not copied into the JSON line."""
        record = self._record()
        record.extra = {"custom_field": "custom_value"}

        data = json.loads(JsonFormatter().format(record))

        assert set(data) == {"timestamp", "level", "logger", "message"}

    def test_format_with_exception(self) -> None:
        """Test format with exception."""
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info)))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]


class TestBankDemoInit:
    """Tests for bank_demo __init__.py."""

    def test_version_exported(self) -> None:
        """Test version exported."""
        from bank_demo import __version__

        assert isinstance(__version__, str)
