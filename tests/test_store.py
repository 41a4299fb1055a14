"""Tests for InMemoryClientStore."""

from decimal import Decimal

from bank_sim.models import Account, AccountVariant, Client, Investment
from bank_sim.store import InMemoryClientStore


class TestInMemoryClientStore:
    """Tests for client store operations."""

    def test_save_and_find(self, store: InMemoryClientStore) -> None:
        """Test saving and finding a client."""
        client = Client(tax_id="123.456.789-00", name="Test Client")
        store.save(client)

        assert store.find_by_tax_id("123.456.789-00") is client

    def test_find_missing(self, store: InMemoryClientStore) -> None:
        """Test finding an unknown tax id."""
        assert store.find_by_tax_id("non-existent") is None

    def test_all_clients(self, store: InMemoryClientStore) -> None:
        """Test listing every client."""
        for i in range(3):
            store.save(Client(tax_id=f"tax-{i}", name=f"Client {i}"))

        assert {c.tax_id for c in store.all_clients()} == {"tax-0", "tax-1", "tax-2"}

    def test_all_clients_is_a_copy(self, store: InMemoryClientStore) -> None:
        """Test that mutating the returned list leaves the store intact."""
        store.save(Client(tax_id="1", name="A"))

        store.all_clients().clear()

        assert len(store.all_clients()) == 1

    def test_summary(self, store: InMemoryClientStore) -> None:
        """Test summary counts."""
        client = Client(tax_id="1", name="A")
        account = Account(number="0001", variant=AccountVariant.CHECKING, owner_tax_id="1", owner_name="A")
        account.deposit(10)
        account.withdraw(5)
        client.add_account(account)
        client.portfolio.add(Investment("CDB", Decimal("5")))
        client.portfolio.add(Investment("LCI", Decimal("5")))
        client.portfolio.get(1).redeem()
        store.save(client)

        assert store.summary() == {
            "clients": 1,
            "accounts": 1,
            "transactions": 2,
            "investments": 2,
            "active_investments": 1,
        }

    def test_summary_empty(self, store: InMemoryClientStore) -> None:
        """Test summary of an empty store."""
        assert store.summary()["clients"] == 0
