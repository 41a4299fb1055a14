"""Banking service: orchestrates clients, accounts and investments.

Every public method returns an :class:`OperationResult`. Domain
exceptions raised by the helpers below are caught at the method boundary
and turned into failed results, so callers never see them.
"""

from __future__ import annotations

import random
from decimal import Decimal

from bank_sim.config import BankSimConfig
from bank_sim.exceptions import (
    LEDGER_ERRORS,
    AccountNotFoundError,
    BankSimError,
    ClientNotFoundError,
    DuplicateAccountVariantError,
    DuplicateClientError,
    ErrorKind,
    InvalidAccountError,
    InvalidAccountVariantError,
    InvalidAmountError,
    InvalidInvestmentNameError,
    ValidationError,
)
from bank_sim.generators.sequence import AccountNumberSequence
from bank_sim.logging import get_logger
from bank_sim.models import (
    Account,
    AccountVariant,
    Client,
    Investment,
    TransactionKind,
)
from bank_sim.models.money import format_money, to_money
from bank_sim.services.results import OperationResult
from bank_sim.sinks.serialization import to_dict
from bank_sim.store import InMemoryClientStore

logger = get_logger(__name__)

VARIANT_ALIASES: dict[str, AccountVariant] = {
    "checking": AccountVariant.CHECKING,
    "corrente": AccountVariant.CHECKING,
    "savings": AccountVariant.SAVINGS,
    "poupanca": AccountVariant.SAVINGS,
    "poupança": AccountVariant.SAVINGS,
}


class BankingService:
    """Business rules for the in-memory bank.

    Parameters
    ----------
    store : InMemoryClientStore
        Client registry.
    sequence : AccountNumberSequence | None
        Source of account numbers. Built from ``config`` when omitted.
    config : BankSimConfig | None
        Branch code, numbering and yield settings.
    rng : random.Random | None
        Randomness for :meth:`simulate_yield`. Seeded from ``config.seed``
        when omitted.
    """

    def __init__(
        self,
        store: InMemoryClientStore,
        sequence: AccountNumberSequence | None = None,
        config: BankSimConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or BankSimConfig()
        self.store = store
        self.sequence = sequence or AccountNumberSequence(
            start=self.config.first_account_number,
            width=self.config.account_number_width,
        )
        self.rng = rng or random.Random(self.config.seed)

    # --- Clients and accounts ---

    def create_client(self, name: str, tax_id: str) -> OperationResult:
        """Register a new client. Fails if the tax id is taken."""
        try:
            name, tax_id = (name or "").strip(), (tax_id or "").strip()
            if not name or not tax_id:
                raise ValidationError("Client name and tax id are required.")
            if self.store.find_by_tax_id(tax_id) is not None:
                raise DuplicateClientError(f"Tax id {tax_id} is already registered.")

            client = Client(tax_id=tax_id, name=name)
            self.store.save(client)
        except BankSimError as exc:
            return self._failed("create_client", exc)

        logger.info("Client registered: %s", tax_id)
        return OperationResult.ok(f"Client {name} created.", client)

    def add_account_for_client(self, tax_id: str, variant: AccountVariant | str) -> OperationResult:
        """Open an account of ``variant`` for an existing client.

        A client may hold at most one account of each variant.
        """
        try:
            client = self._require_client(tax_id)
            account_variant = self._parse_variant(variant)
            if client.account_of(account_variant) is not None:
                raise DuplicateAccountVariantError(
                    f"Client already holds a {account_variant.label.lower()} account."
                )

            account = Account(
                number=self.sequence.next(),
                variant=account_variant,
                owner_tax_id=client.tax_id,
                owner_name=client.name,
                branch=self.config.branch_code,
            )
            client.add_account(account)
        except BankSimError as exc:
            return self._failed("add_account_for_client", exc)

        logger.info("Opened %s account %s for %s", account_variant.value, account.number, client.tax_id)
        return OperationResult.ok(
            f"Account created. Branch: {account.branch}, Account: {account.number}", account
        )

    def find_client(self, tax_id: str) -> OperationResult:
        """Look up a client by tax id."""
        try:
            client = self._require_client(tax_id)
        except BankSimError as exc:
            return self._failed("find_client", exc)
        return OperationResult.ok(f"Client {client.name} found.", client)

    def find_account_by_number(self, number: str) -> Account | None:
        """Scan every client's accounts for ``number``."""
        for client in self.store.all_clients():
            for account in client.accounts:
                if account.number == number:
                    return account
        return None

    # --- Ledger operations ---

    def deposit(self, account: Account | None, amount: Decimal | int | float | str) -> OperationResult:
        """Credit ``amount`` into ``account``."""
        try:
            self._require_account_ref(account)
            value = self._positive_amount(amount)
            account.deposit(value)
        except BankSimError as exc:
            return self._failed("deposit", exc)

        return OperationResult.ok(
            f"Deposit of {self._fmt(value)} completed. New balance: {self._fmt(account.balance)}",
            account.balance,
        )

    def withdraw(self, account: Account | None, amount: Decimal | int | float | str) -> OperationResult:
        """Debit ``amount`` from ``account`` if funds allow."""
        try:
            self._require_account_ref(account)
            value = to_money(amount)
            self._debit(account, value, TransactionKind.WITHDRAWAL, "Withdrawal")
        except BankSimError as exc:
            return self._failed("withdraw", exc)

        return OperationResult.ok(
            f"Withdrawal of {self._fmt(value)} completed. New balance: {self._fmt(account.balance)}",
            account.balance,
        )

    def transfer(
        self,
        source_number: str,
        destination_number: str,
        amount: Decimal | int | float | str,
    ) -> OperationResult:
        """PIX transfer between two accounts identified by number."""
        try:
            source = self._require_account(source_number)
            destination = self._require_account(destination_number)
            if source is destination:
                raise InvalidAccountError("Source and destination accounts must differ.")
            value = to_money(amount)
            error = source.withdrawal_error(value)
            if not source.transfer(value, destination):
                raise self._ledger_error(error, source, value)
        except BankSimError as exc:
            return self._failed("transfer", exc)

        logger.info("Transfer %s -> %s: %s", source.number, destination.number, value)
        return OperationResult.ok(
            f"Transfer of {self._fmt(value)} from account {source.number} to account "
            f"{destination.number} completed.\n"
            f"Source account balance: {self._fmt(source.balance)}",
            source.balance,
        )

    # --- Investments ---

    def invest(
        self,
        account: Account | None,
        investment_name: str,
        amount: Decimal | int | float | str,
    ) -> OperationResult:
        """Move ``amount`` from ``account`` into a new investment."""
        try:
            self._require_account_ref(account)
            owner = self._require_client(account.owner_tax_id)
            investment_name = (investment_name or "").strip()
            if not investment_name:
                raise InvalidInvestmentNameError("Investment name is required.")
            value = to_money(amount)
            self._debit(
                account, value, TransactionKind.INVESTMENT_CREATION, f"Investment in {investment_name}"
            )
            investment = Investment(name=investment_name, applied_amount=value)
            owner.portfolio.add(investment)
        except BankSimError as exc:
            return self._failed("invest", exc)

        logger.info("Investment '%s' of %s created for %s", investment_name, value, owner.tax_id)
        return OperationResult.ok(
            f"Investment in '{investment_name}' of {self._fmt(value)} completed.\n"
            f"Account balance: {self._fmt(account.balance)}",
            investment,
        )

    def redeem_investment(
        self,
        client: Client | None,
        index: int,
        destination: Account | None,
    ) -> OperationResult:
        """Credit an investment's current value into ``destination`` and close it."""
        try:
            if client is None:
                raise ClientNotFoundError("Client not found.")
            self._require_account_ref(destination)
            investment = client.portfolio.get(index)
            amount = investment.redeem()
            destination.deposit(amount, description=f"Redemption of {investment.name}")
        except BankSimError as exc:
            return self._failed("redeem_investment", exc)

        logger.info("Investment '%s' redeemed for %s into %s", investment.name, amount, destination.number)
        return OperationResult.ok(
            f"Investment redeemed. {self._fmt(amount)} credited to account {destination.number}.\n"
            f"New account balance: {self._fmt(destination.balance)}",
            amount,
        )

    def simulate_yield(self) -> OperationResult:
        """Apply a random growth factor to every active investment."""
        low, high = self.config.yield_min, self.config.yield_max
        updated = 0
        for client in self.store.all_clients():
            for investment in client.portfolio.active():
                factor = low + (high - low) * Decimal(str(self.rng.random()))
                investment.apply_yield(factor)
                updated += 1

        logger.info("Yield simulation updated %d investments", updated)
        return OperationResult.ok(
            f"Yield simulation completed for {updated} active investment(s).", updated
        )

    # --- Reporting ---

    def list_clients(self) -> OperationResult:
        """Render every client with their accounts."""
        clients = self.store.all_clients()
        lines = ["--- CLIENTS AND ACCOUNTS ---"]
        for client in clients:
            lines.append("-" * 40)
            lines.append(f"Client: {client.name} | Tax id: {client.tax_id}")
            if not client.accounts:
                lines.append("  (no accounts)")
            for account in client.accounts:
                lines.append(
                    f"  - Type: {account.variant.label:<10} | Branch: {account.branch} "
                    f"| Account: {account.number} | Balance: {self._fmt(account.balance)}"
                )
        lines.append("-" * 40)
        return OperationResult.ok("\n".join(lines), clients)

    def list_portfolio(self, tax_id: str) -> OperationResult:
        """Render a client's investments with their indexes."""
        try:
            client = self._require_client(tax_id)
        except BankSimError as exc:
            return self._failed("list_portfolio", exc)

        portfolio = client.portfolio
        lines = [f"--- INVESTMENT PORTFOLIO OF {client.name} ---"]
        if not len(portfolio):
            lines.append("No investments in portfolio.")
        lines.extend(f"[{i}] {inv}" for i, inv in enumerate(portfolio))
        lines.append(f">> Total invested (active): {self._fmt(portfolio.total_value)}")
        return OperationResult.ok("\n".join(lines), portfolio)

    def view_history(self, account_number: str) -> OperationResult:
        """Render the statement of an account."""
        try:
            account = self._require_account(account_number)
        except BankSimError as exc:
            return self._failed("view_history", exc)
        return OperationResult.ok(account.render_statement(self.config.currency_symbol), account)

    def snapshot(self) -> OperationResult:
        """Serialize every client, account and investment to plain dicts."""
        records = [to_dict(client) for client in self.store.all_clients()]
        return OperationResult.ok(f"Snapshot of {len(records)} client(s).", records)

    # --- Helpers ---

    def _require_client(self, tax_id: str) -> Client:
        client = self.store.find_by_tax_id((tax_id or "").strip())
        if client is None:
            raise ClientNotFoundError("Client not found.")
        return client

    def _require_account(self, number: str) -> Account:
        account = self.find_account_by_number((number or "").strip())
        if account is None:
            raise AccountNotFoundError(f"Account {number} not found.")
        return account

    @staticmethod
    def _require_account_ref(account: Account | None) -> None:
        if account is None:
            raise InvalidAccountError("Invalid account.")

    @staticmethod
    def _parse_variant(variant: AccountVariant | str) -> AccountVariant:
        if isinstance(variant, AccountVariant):
            return variant
        key = str(variant).strip().lower()
        if key in VARIANT_ALIASES:
            return VARIANT_ALIASES[key]
        raise InvalidAccountVariantError(f"Unknown account type: {variant!r}")

    @staticmethod
    def _positive_amount(amount: Decimal | int | float | str) -> Decimal:
        value = to_money(amount)
        if value <= 0:
            raise InvalidAmountError("Amount must be positive.")
        return value

    def _debit(self, account: Account, value: Decimal, kind: TransactionKind, description: str) -> None:
        error = account.withdrawal_error(value)
        if not account.withdraw(value, kind=kind, description=description):
            raise self._ledger_error(error, account, value)

    def _ledger_error(self, error: ErrorKind | None, account: Account, value: Decimal) -> BankSimError:
        if error is None:
            return InvalidAccountError(f"Operation on account {account.number} was rejected.")
        if error == ErrorKind.INSUFFICIENT_FUNDS:
            message = (
                f"Insufficient funds: requested {self._fmt(value)}, "
                f"balance {self._fmt(account.balance)}."
            )
        else:
            message = "Amount must be positive."
        return LEDGER_ERRORS[error](message)

    def _fmt(self, amount: Decimal) -> str:
        return format_money(amount, self.config.currency_symbol)

    @staticmethod
    def _failed(operation: str, exc: BankSimError) -> OperationResult:
        kind = exc.kind.value if exc.kind else "error"
        logger.info(
            "%s failed (%s): %s", operation, kind, exc,
            extra={"extra": {"operation": operation, "error_kind": kind}},
        )
        return OperationResult.from_exception(exc)
