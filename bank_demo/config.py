"""Configuration management for bank-demo."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from bank_demo.exceptions import ConfigurationError


@dataclass
class BankConfig:
    """Main configuration for bank-demo."""

    currency_symbol: str = "₹"
    savings_interest_rate: Decimal = Decimal("3.5")
    default_overdraft_limit: Decimal = Decimal("25000")
    locale: str = "en_IN"
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        import os

        seed = os.getenv("SEED")
        try:
            parsed_seed = int(seed) if seed else None
        except ValueError as exc:
            raise ConfigurationError(f"SEED must be an integer, got {seed!r}") from exc

        return cls(
            currency_symbol=os.getenv("BANK_CURRENCY_SYMBOL", "₹"),
            savings_interest_rate=_env_decimal("BANK_INTEREST_RATE", "3.5"),
            default_overdraft_limit=_env_decimal("BANK_OVERDRAFT_LIMIT", "25000"),
            locale=os.getenv("BANK_LOCALE", "en_IN"),
            seed=parsed_seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _env_decimal(name: str, default: str) -> Decimal:
    """Read a non-negative decimal from the environment."""
    import os

    raw = os.getenv(name, default)
    try:
        value = Decimal(raw)
    except InvalidOperation as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
    if not value.is_finite() or value < 0:
        raise ConfigurationError(f"{name} must be a non-negative number, got {raw!r}")
    return value
