"""Transaction record for account ledgers."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bank_sim.models.enums import TransactionKind
from bank_sim.models.money import format_money

TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"


@dataclass(frozen=True)
class Transaction:
    """Immutable ledger entry.

    ``amount`` is always positive; ``kind`` tells whether money came in
    or went out.
    """

    kind: TransactionKind
    amount: Decimal
    timestamp: datetime
    description: str

    def __str__(self) -> str:
        return (
            f"[{self.timestamp.strftime(TIMESTAMP_FORMAT)}] {self.kind.value:<28} "
            f"| Amount: {format_money(self.amount)} | {self.description}"
        )
