"""Tests for the interactive console."""

import os
from decimal import Decimal
from typing import Callable
from unittest.mock import patch

import pytest

from bank_sim.cli import MenuConsole, build_parser, main
from bank_sim.services import BankingService
from bank_sim.sinks import ConsoleSink
from bank_sim.store import InMemoryClientStore


def scripted(*answers: str) -> Callable[[str], str]:
    """Return an input function that replays ``answers`` then raises EOFError."""
    queue = list(answers)

    def _input(prompt: str) -> str:
        if not queue:
            raise EOFError
        return queue.pop(0)

    return _input


@pytest.fixture
def lines() -> list[str]:
    return []


def run_console(service: BankingService, lines: list[str], *answers: str) -> None:
    console = MenuConsole(service, sink=ConsoleSink(output=lines.append), input_fn=scripted(*answers))
    console.run()


class TestMainMenu:
    """Tests for the main menu loop."""

    def test_exit(self, service: BankingService, lines: list[str]) -> None:
        run_console(service, lines, "0")

        assert lines[-1] == "\nThank you for using our services!"

    def test_invalid_option(self, service: BankingService, lines: list[str]) -> None:
        run_console(service, lines, "42", "0")

        assert "Invalid option." in lines

    def test_non_numeric_option_reprompts(self, service: BankingService, lines: list[str]) -> None:
        run_console(service, lines, "abc", "0")

        assert lines[-1] == "\nThank you for using our services!"

    def test_end_of_input_leaves_loop(self, service: BankingService, lines: list[str]) -> None:
        run_console(service, lines)

        assert "Thank you" not in lines[-1]

    def test_create_client_and_account(
        self, service: BankingService, store: InMemoryClientStore, lines: list[str]
    ) -> None:
        run_console(service, lines, "1", "Ana", "111", "2", "111", "poupanca", "0")

        client = store.find_by_tax_id("111")
        assert client is not None
        assert client.accounts[0].number == "0001"
        assert "Client Ana created." in lines

    def test_duplicate_client_reported(self, service: BankingService, lines: list[str], ana) -> None:
        run_console(service, lines, "1", "Other", "111", "0")

        assert "Tax id 111 is already registered." in lines

    def test_deposit_reprompts_on_bad_amount(self, service: BankingService, lines: list[str], ana_checking) -> None:
        run_console(service, lines, "3", "111", "lots", "100,50", "0")

        assert ana_checking.balance == Decimal("100.50")
        assert "Deposit of R$ 100.50 completed. New balance: R$ 100.50" in lines

    def test_deposit_unknown_client(self, service: BankingService, lines: list[str]) -> None:
        run_console(service, lines, "3", "999", "0")

        assert "Client not found." in lines

    def test_withdraw_asks_for_account_when_several(
        self, service: BankingService, lines: list[str], ana
    ) -> None:
        service.add_account_for_client("111", "savings")
        savings = ana.accounts[1]
        service.deposit(savings, 50)

        run_console(service, lines, "4", "111", "1", "20", "0")

        assert savings.balance == Decimal("30.00")
        assert "[1] - Savings (Account: 0002)" in lines

    def test_withdraw_invalid_account_index(self, service: BankingService, lines: list[str], ana) -> None:
        service.add_account_for_client("111", "savings")

        run_console(service, lines, "4", "111", "5", "0")

        assert "Invalid index." in lines

    def test_transfer_zero_fills_numbers(
        self, service: BankingService, lines: list[str], ana_checking, bo
    ) -> None:
        service.deposit(ana_checking, 100)

        run_console(service, lines, "5", "1", "2", "40", "0")

        assert ana_checking.balance == Decimal("60.00")
        assert bo.accounts[0].balance == Decimal("40.00")

    def test_view_history(self, service: BankingService, lines: list[str], ana_checking) -> None:
        service.deposit(ana_checking, 10)

        run_console(service, lines, "6", "0001", "0")

        assert any("### Checking Account Statement ###" in line for line in lines)

    def test_list_clients(self, service: BankingService, lines: list[str], ana) -> None:
        run_console(service, lines, "7", "0")

        assert any("Client: Ana | Tax id: 111" in line for line in lines)

    def test_export_snapshot(self, service: BankingService, lines: list[str], ana) -> None:
        run_console(service, lines, "9", "0")

        assert "Entity: clients (1 records)" in lines
        assert "Snapshot of 1 client(s)." in lines


class TestInvestmentsMenu:
    """Tests for the investments submenu."""

    def test_back_to_main_menu(self, service: BankingService, lines: list[str]) -> None:
        run_console(service, lines, "8", "0", "0")

        assert "Returning to main menu..." in lines
        assert lines[-1] == "\nThank you for using our services!"

    def test_invest_and_list(self, service: BankingService, lines: list[str], ana, ana_checking) -> None:
        service.deposit(ana_checking, 1000)

        run_console(service, lines, "8", "1", "111", "CDB", "300", "2", "111", "0", "0")

        assert ana_checking.balance == Decimal("700.00")
        assert len(ana.portfolio) == 1
        assert any(">> Total invested (active): R$ 300.00" in line for line in lines)

    def test_redeem(self, service: BankingService, lines: list[str], ana, ana_checking) -> None:
        service.deposit(ana_checking, 1000)
        service.invest(ana_checking, "CDB", 300)

        run_console(service, lines, "8", "3", "111", "0", "0", "0")

        assert ana_checking.balance == Decimal("1000.00")
        assert not ana.portfolio.get(0).is_active

    def test_redeem_with_empty_portfolio(self, service: BankingService, lines: list[str], ana) -> None:
        run_console(service, lines, "8", "3", "111", "0", "0")

        assert any("No investments in portfolio." in line for line in lines)

    def test_simulate_yield(self, service: BankingService, lines: list[str]) -> None:
        run_console(service, lines, "8", "4", "0", "0")

        assert "Yield simulation completed for 0 active investment(s)." in lines


class TestMain:
    """Tests for the command line entry point."""

    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args([])

        assert args.seed is None
        assert args.demo_clients == 0
        assert args.log_format is None
        assert args.compact is False
        assert args.max_records is None

    def test_main_exits_cleanly(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert main(["--seed", "7"], input_fn=scripted("0")) == 0

    def test_main_with_demo_clients(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch.dict(os.environ, {}, clear=True):
            code = main(["--seed", "7", "--demo-clients", "2"], input_fn=scripted("7", "0"))

        assert code == 0
        assert "--- CLIENTS AND ACCOUNTS ---" in capsys.readouterr().out

    def test_main_rejects_bad_config(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch.dict(os.environ, {"BANK_SIM_ACCOUNT_WIDTH": "0"}, clear=True):
            code = main([], input_fn=scripted("0"))

        assert code == 2
        assert "Configuration error" in capsys.readouterr().err

    def test_main_compact_export(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch.dict(os.environ, {}, clear=True):
            code = main(
                ["--seed", "3", "--demo-clients", "3", "--compact", "--max-records", "1"],
                input_fn=scripted("9", "0"),
            )

        out = capsys.readouterr().out.splitlines()
        assert code == 0
        assert sum(1 for line in out if line.startswith('{"tax_id": ')) == 1
        assert "... and 2 more records" in out
