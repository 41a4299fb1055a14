"""Configuration management for bank-sim."""

from dataclasses import dataclass
from decimal import Decimal

from bank_sim.exceptions import ConfigurationError


@dataclass
class BankSimConfig:
    """Main configuration for bank-sim."""

    branch_code: str = "0001"
    account_number_width: int = 4
    first_account_number: int = 1
    yield_min: Decimal = Decimal("1.00")
    yield_max: Decimal = Decimal("1.05")
    currency_symbol: str = "R$"
    seed: int | None = None
    locale: str = "pt_BR"
    log_level: str = "INFO"
    log_format: str = "standard"

    def validate(self) -> "BankSimConfig":
        """Check value ranges, returning self so calls can be chained.

        Raises
        ------
        ConfigurationError
            If any setting is out of range.
        """
        if self.account_number_width < 1:
            raise ConfigurationError(
                f"account_number_width must be >= 1, got {self.account_number_width}"
            )
        if self.first_account_number < 0:
            raise ConfigurationError(
                f"first_account_number must be >= 0, got {self.first_account_number}"
            )
        if self.yield_min < 1:
            raise ConfigurationError(f"yield_min must be >= 1, got {self.yield_min}")
        if self.yield_max <= self.yield_min:
            raise ConfigurationError(
                f"yield_max ({self.yield_max}) must be greater than yield_min ({self.yield_min})"
            )
        if self.log_format not in ("standard", "json"):
            raise ConfigurationError(f"Unknown log format: {self.log_format}")
        return self

    @classmethod
    def from_env(cls) -> "BankSimConfig":
        """Create config from environment variables."""
        import os

        seed = os.getenv("BANK_SIM_SEED")
        try:
            return cls(
                branch_code=os.getenv("BANK_SIM_BRANCH", "0001"),
                account_number_width=int(os.getenv("BANK_SIM_ACCOUNT_WIDTH", "4")),
                first_account_number=int(os.getenv("BANK_SIM_FIRST_ACCOUNT", "1")),
                yield_min=Decimal(os.getenv("BANK_SIM_YIELD_MIN", "1.00")),
                yield_max=Decimal(os.getenv("BANK_SIM_YIELD_MAX", "1.05")),
                currency_symbol=os.getenv("BANK_SIM_CURRENCY_SYMBOL", "R$"),
                seed=int(seed) if seed else None,
                locale=os.getenv("BANK_SIM_LOCALE", "pt_BR"),
                log_level=os.getenv("LOG_LEVEL", "INFO"),
                log_format=os.getenv("LOG_FORMAT", "standard"),
            ).validate()
        except (ValueError, ArithmeticError) as exc:
            raise ConfigurationError(f"Invalid environment configuration: {exc}") from exc
