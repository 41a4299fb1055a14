"""Investment and portfolio models."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterator

from bank_sim.exceptions import AlreadyRedeemedError, InvalidInvestmentIndexError
from bank_sim.models.enums import InvestmentStatus
from bank_sim.models.money import ZERO, format_money, to_money


@dataclass(eq=False)
class Investment:
    """A single application of funds.

    ``applied_amount`` and ``applied_on`` are fixed at creation. Status
    moves ACTIVE -> REDEEMED once and never back.
    """

    name: str
    applied_amount: Decimal
    applied_on: date = field(default_factory=date.today)
    current_value: Decimal | None = None
    status: InvestmentStatus = InvestmentStatus.ACTIVE

    def __post_init__(self) -> None:
        self.applied_amount = to_money(self.applied_amount)
        if self.current_value is None:
            self.current_value = self.applied_amount
        else:
            self.current_value = to_money(self.current_value)

    @property
    def is_active(self) -> bool:
        return self.status == InvestmentStatus.ACTIVE

    def apply_yield(self, factor: Decimal) -> Decimal:
        """Multiply the current value by ``factor`` and return the new value."""
        if not self.is_active:
            raise AlreadyRedeemedError(f"Investment '{self.name}' is already redeemed")
        self.current_value = to_money(self.current_value * factor)
        return self.current_value

    def redeem(self) -> Decimal:
        """Close the investment and return the value to credit."""
        if not self.is_active:
            raise AlreadyRedeemedError(f"Investment '{self.name}' is already redeemed")
        self.status = InvestmentStatus.REDEEMED
        return self.current_value

    def __str__(self) -> str:
        return (
            f"Investment: {self.name} | Applied: {format_money(self.applied_amount)} "
            f"| Current value: {format_money(self.current_value)} "
            f"| Status: {self.status.value} | Date: {self.applied_on.isoformat()}"
        )


@dataclass
class InvestmentPortfolio:
    """Ordered collection of a client's investments.

    Insertion order is the index clients use to pick an investment.
    """

    investments: list[Investment] = field(default_factory=list)

    def add(self, investment: Investment) -> int:
        """Append an investment and return its index."""
        self.investments.append(investment)
        return len(self.investments) - 1

    def get(self, index: int) -> Investment:
        """Return the investment at ``index``."""
        if not 0 <= index < len(self.investments):
            raise InvalidInvestmentIndexError(
                f"Investment index {index} out of range (portfolio has {len(self.investments)})"
            )
        return self.investments[index]

    def active(self) -> list[Investment]:
        return [inv for inv in self.investments if inv.is_active]

    @property
    def total_value(self) -> Decimal:
        """Sum of current value over ACTIVE investments only."""
        return sum((inv.current_value for inv in self.active()), ZERO)

    def __len__(self) -> int:
        return len(self.investments)

    def __iter__(self) -> Iterator[Investment]:
        return iter(self.investments)
