"""Account entity and its ledger operations."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from bank_sim.exceptions import ErrorKind, InvalidAmountError
from bank_sim.logging import get_logger
from bank_sim.models.enums import AccountVariant, TransactionKind
from bank_sim.models.money import ZERO, format_money, to_money
from bank_sim.models.transaction import Transaction

logger = get_logger(__name__)

DEFAULT_BRANCH = "0001"


@dataclass(eq=False)
class Account:
    """Checking or savings account.

    The owner is referenced by tax id and display name only; the
    :class:`~bank_sim.models.client.Client` owns its accounts, never the
    other way round.

    Invariants:
    - ``balance`` never drops below zero
    - ``transactions`` is append-only; every balance change adds exactly
      one entry per account touched
    """

    number: str
    variant: AccountVariant
    owner_tax_id: str
    owner_name: str
    branch: str = DEFAULT_BRANCH
    balance: Decimal = ZERO
    transactions: list[Transaction] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.balance = to_money(self.balance)
        if self.balance < 0:
            raise InvalidAmountError(f"Opening balance cannot be negative: {self.balance}")

    @property
    def history(self) -> tuple[Transaction, ...]:
        """Read-only view of the transaction history."""
        return tuple(self.transactions)

    def deposit(self, amount: Decimal | int | float | str, description: str = "Deposit received") -> None:
        """Credit the account. Non-positive amounts are ignored."""
        value = to_money(amount)
        if value <= 0:
            logger.debug("Ignoring non-positive deposit of %s into %s", value, self.number)
            return
        self.balance += value
        self.record_transaction(TransactionKind.DEPOSIT, value, description)

    def withdrawal_error(self, amount: Decimal | int | float | str) -> ErrorKind | None:
        """Return why a withdrawal of ``amount`` would fail, or None if it would succeed."""
        value = to_money(amount)
        if value <= 0:
            return ErrorKind.INVALID_AMOUNT
        if value > self.balance:
            return ErrorKind.INSUFFICIENT_FUNDS
        return None

    def withdraw(
        self,
        amount: Decimal | int | float | str,
        kind: TransactionKind = TransactionKind.WITHDRAWAL,
        description: str = "Withdrawal",
    ) -> bool:
        """Debit the account.

        Parameters
        ----------
        amount : Decimal | int | float | str
            Amount to debit. Must be positive and no larger than the balance.
        kind : TransactionKind
            Kind recorded for the debit (investments record
            ``INVESTMENT_CREATION`` instead of ``WITHDRAWAL``).
        description : str
            Free-text description stored on the transaction.

        Returns
        -------
        bool
            True on success. On failure the balance and history are untouched.
        """
        value = to_money(amount)
        error = self.withdrawal_error(value)
        if error is not None:
            logger.warning(
                "Withdrawal of %s from account %s rejected: %s (balance %s)",
                value, self.number, error.value, self.balance,
                extra={"extra": {"account": self.number, "amount": value, "error_kind": error.value}},
            )
            return False
        self.balance -= value
        self.record_transaction(kind, value, description)
        return True

    def transfer(self, amount: Decimal | int | float | str, destination: "Account") -> bool:
        """Send a PIX transfer to another account.

        Either both sides change or neither does. Each side gains exactly one
        transaction naming the counterparty.
        """
        value = to_money(amount)
        if destination is self:
            logger.warning("Transfer from account %s to itself rejected", self.number)
            return False
        error = self.withdrawal_error(value)
        if error is not None:
            logger.warning(
                "Transfer of %s from %s to %s aborted: %s",
                value, self.number, destination.number, error.value,
            )
            return False

        self.balance -= value
        destination.balance += value
        self.record_transaction(
            TransactionKind.PIX_TRANSFER_SENT, value, f"PIX to {destination.owner_name}"
        )
        destination.record_transaction(
            TransactionKind.PIX_TRANSFER_RECEIVED, value, f"PIX from {self.owner_name}"
        )
        return True

    def record_transaction(self, kind: TransactionKind, amount: Decimal, description: str) -> Transaction:
        """Append a transaction stamped with the current time."""
        transaction = Transaction(
            kind=kind,
            amount=to_money(amount),
            timestamp=datetime.now(),
            description=description,
        )
        self.transactions.append(transaction)
        return transaction

    def render_statement(self, currency_symbol: str = "R$") -> str:
        """Format identity, balance and full history as text."""
        lines = [
            f"### {self.variant.label} Account Statement ###",
            f"Holder: {self.owner_name}",
            f"Branch: {self.branch}",
            f"Number: {self.number}",
            f"Balance: {format_money(self.balance, currency_symbol)}",
            "-" * 25,
            "Transaction history:",
        ]
        if self.transactions:
            lines.extend(str(t) for t in self.transactions)
        else:
            lines.append("No transactions recorded.")
        lines.append("=" * 25)
        return "\n".join(lines)
