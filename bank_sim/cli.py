"""Interactive console front end."""

import argparse
import sys
from decimal import Decimal
from typing import Callable

from bank_sim.config import BankSimConfig
from bank_sim.exceptions import ConfigurationError, InvalidAmountError
from bank_sim.logging import get_logger, setup_logging
from bank_sim.models import Account
from bank_sim.models.money import to_money
from bank_sim.scenarios import DemoBankScenario
from bank_sim.services import BankingService
from bank_sim.sinks import ConsoleSink
from bank_sim.store import InMemoryClientStore

logger = get_logger(__name__)

MAIN_MENU = """
--- DIGITAL BANK - MAIN MENU ---
1. Create client
2. Add account for client (checking or savings)
3. Deposit
4. Withdraw
5. Transfer between accounts
6. Account history
7. List clients
8. Investments menu
9. Export snapshot (JSON)
0. Exit"""

INVESTMENTS_MENU = """
--- INVESTMENTS MENU ---
1. Invest
2. List a client's portfolio
3. Redeem investment
4. Simulate yield (all clients)
0. Back to main menu"""


class MenuConsole:
    """Menu loop that collects input and hands it to the banking service.

    Parameters
    ----------
    service : BankingService
        Service that performs every operation.
    sink : ConsoleSink | None
        Where feedback is displayed.
    input_fn : Callable[[str], str]
        Prompt reader, ``input`` by default.
    """

    def __init__(
        self,
        service: BankingService,
        sink: ConsoleSink | None = None,
        input_fn: Callable[[str], str] = input,
    ) -> None:
        self.service = service
        self.sink = sink or ConsoleSink()
        self._input = input_fn

    def run(self) -> None:
        """Show the main menu until the user picks 0 or input ends."""
        actions = {
            1: self.create_client,
            2: self.add_account,
            3: self.deposit,
            4: self.withdraw,
            5: self.transfer,
            6: self.view_history,
            7: lambda: self.sink.show(self.service.list_clients()),
            8: self.investments_menu,
            9: self.export_snapshot,
        }
        try:
            while True:
                self.sink.show(MAIN_MENU)
                option = self._read_int("Choose an option: ")
                if option == 0:
                    self.sink.show("\nThank you for using our services!")
                    return
                action = actions.get(option)
                if action is None:
                    self.sink.show("Invalid option.")
                else:
                    action()
        except EOFError:
            logger.debug("Input closed, leaving menu")

    def investments_menu(self) -> None:
        actions = {
            1: self.invest,
            2: self.list_portfolio,
            3: self.redeem_investment,
            4: lambda: self.sink.show(self.service.simulate_yield()),
        }
        while True:
            self.sink.show(INVESTMENTS_MENU)
            option = self._read_int("Choose an option: ")
            if option == 0:
                self.sink.show("Returning to main menu...")
                return
            action = actions.get(option)
            if action is None:
                self.sink.show("Invalid option.")
            else:
                action()

    # --- Menu actions ---

    def create_client(self) -> None:
        self.sink.show("\n>> 1. CREATE CLIENT")
        name = self._input("Client name: ")
        tax_id = self._input("Client tax id (CPF): ")
        self.sink.show(self.service.create_client(name, tax_id))

    def add_account(self) -> None:
        self.sink.show("\n>> 2. ADD ACCOUNT")
        tax_id = self._input("Client tax id (CPF): ")
        variant = self._input("Account type (checking/savings): ")
        self.sink.show(self.service.add_account_for_client(tax_id, variant))

    def deposit(self) -> None:
        self.sink.show("\n>> 3. DEPOSIT")
        account = self._select_account(self._input("Account holder tax id (CPF): "), "for the deposit")
        if account is not None:
            amount = self._read_amount("Amount to deposit: ")
            self.sink.show(self.service.deposit(account, amount))

    def withdraw(self) -> None:
        self.sink.show("\n>> 4. WITHDRAW")
        account = self._select_account(self._input("Account holder tax id (CPF): "), "for the withdrawal")
        if account is not None:
            amount = self._read_amount("Amount to withdraw: ")
            self.sink.show(self.service.withdraw(account, amount))

    def transfer(self) -> None:
        self.sink.show("\n>> 5. TRANSFER")
        source = self._account_number(self._input("Source account number: "))
        destination = self._account_number(self._input("Destination account number: "))
        amount = self._read_amount("Amount to transfer: ")
        self.sink.show(self.service.transfer(source, destination, amount))

    def view_history(self) -> None:
        self.sink.show("\n>> 6. ACCOUNT HISTORY")
        number = self._account_number(self._input("Account number: "))
        self.sink.show(self.service.view_history(number))

    def export_snapshot(self) -> None:
        result = self.service.snapshot()
        self.sink.write_batch("clients", result.value)
        self.sink.show(result)

    def invest(self) -> None:
        self.sink.show("\n>> INVESTMENTS: INVEST")
        account = self._select_account(self._input("Client tax id (CPF): "), "to debit")
        if account is not None:
            name = self._input("Investment name (e.g. CDB, Tesouro Selic): ")
            amount = self._read_amount("Amount to invest: ")
            self.sink.show(self.service.invest(account, name, amount))

    def list_portfolio(self) -> None:
        self.sink.show("\n>> INVESTMENTS: PORTFOLIO")
        self.sink.show(self.service.list_portfolio(self._input("Client tax id (CPF): ")))

    def redeem_investment(self) -> None:
        self.sink.show("\n>> INVESTMENTS: REDEEM")
        tax_id = self._input("Client tax id (CPF): ")
        found = self.service.find_client(tax_id)
        if not found:
            self.sink.show(found)
            return
        client = found.value
        self.sink.show(self.service.list_portfolio(tax_id))
        if not len(client.portfolio):
            return

        index = self._read_int("Index of the investment to redeem: ")
        destination = self._select_account(tax_id, "to credit")
        if destination is not None:
            self.sink.show(self.service.redeem_investment(client, index, destination))

    # --- Input helpers ---

    def _select_account(self, tax_id: str, purpose: str) -> Account | None:
        """Pick one of the client's accounts, asking when there is more than one."""
        found = self.service.find_client(tax_id)
        if not found:
            self.sink.show(found)
            return None

        accounts = found.value.accounts
        if not accounts:
            self.sink.show("This client has no accounts.")
            return None
        if len(accounts) == 1:
            return accounts[0]

        self.sink.show(f"This client has more than one account. Select the account {purpose}:")
        for i, account in enumerate(accounts):
            self.sink.show(f"[{i}] - {account.variant.label} (Account: {account.number})")
        index = self._read_int("Account index: ")
        if 0 <= index < len(accounts):
            return accounts[index]
        self.sink.show("Invalid index.")
        return None

    def _account_number(self, raw: str) -> str:
        raw = raw.strip()
        if raw.isdigit():
            return raw.zfill(self.service.config.account_number_width)
        return raw

    def _read_int(self, prompt: str) -> int:
        raw = self._input(prompt)
        while True:
            try:
                return int(raw.strip())
            except ValueError:
                raw = self._input("Invalid input. Please enter a whole number: ")

    def _read_amount(self, prompt: str) -> Decimal:
        raw = self._input(prompt)
        while True:
            try:
                # accept the Brazilian decimal comma
                return to_money(raw.strip().replace(",", "."))
            except InvalidAmountError:
                raw = self._input("Invalid input. Please enter a numeric amount (e.g. 100.50): ")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bank-sim",
        description="Interactive in-memory banking ledger simulator",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for yield simulation and demo data",
    )
    parser.add_argument(
        "--demo-clients",
        type=int,
        default=0,
        help="Register N synthetic clients before starting (default: 0)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (overrides LOG_LEVEL)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log format (overrides LOG_FORMAT)",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Print exported JSON records on a single line each",
    )
    parser.add_argument(
        "--max-records",
        type=int,
        default=None,
        help="Maximum records to print per exported batch (default: all)",
    )
    return parser


def main(argv: list[str] | None = None, input_fn: Callable[[str], str] = input) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = BankSimConfig.from_env()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    if args.seed is not None:
        config.seed = args.seed
    if args.log_level:
        config.log_level = args.log_level
    if args.log_format:
        config.log_format = args.log_format

    setup_logging(level=config.log_level, format_type=config.log_format)

    service = BankingService(InMemoryClientStore(), config=config)
    if args.demo_clients > 0:
        DemoBankScenario(num_clients=args.demo_clients, seed=config.seed, locale=config.locale).generate(service)

    sink = ConsoleSink(pretty=not args.compact, max_records=args.max_records)
    MenuConsole(service, sink=sink, input_fn=input_fn).run()
    sink.close()
    return 0
