"""Tests for generators."""

from decimal import Decimal

from bank_sim.generators import AccountNumberSequence, ClientGenerator
from bank_sim.models import AccountVariant


class TestAccountNumberSequence:
    """Tests for AccountNumberSequence."""

    def test_default_numbering(self) -> None:
        seq = AccountNumberSequence()

        assert [seq.next() for _ in range(3)] == ["0001", "0002", "0003"]

    def test_custom_start_and_width(self) -> None:
        seq = AccountNumberSequence(start=98, width=3)

        assert seq.next() == "098"
        assert seq.peek() == "099"
        assert seq.next() == "099"
        assert seq.next() == "100"

    def test_overflowing_width_keeps_increasing(self) -> None:
        seq = AccountNumberSequence(start=9999)

        assert seq.next() == "9999"
        assert seq.next() == "10000"

    def test_independent_instances(self) -> None:
        a, b = AccountNumberSequence(), AccountNumberSequence()
        a.next()

        assert b.next() == "0001"


class TestClientGenerator:
    """Tests for ClientGenerator."""

    def test_generate_profile(self, seed: int) -> None:
        profile = ClientGenerator(seed=seed).generate()

        assert profile.name
        assert len(profile.tax_id) == 14  # XXX.XXX.XXX-XX
        assert profile.variant in list(AccountVariant)
        assert Decimal("0") < profile.opening_balance <= Decimal("50000")

    def test_generate_batch_unique_tax_ids(self, seed: int) -> None:
        profiles = list(ClientGenerator(seed=seed).generate_batch(20))

        assert len(profiles) == 20
        assert len({p.tax_id for p in profiles}) == 20

    def test_seed_reproducible(self, seed: int) -> None:
        first = [(p.name, p.tax_id) for p in ClientGenerator(seed=seed).generate_batch(3)]
        second = [(p.name, p.tax_id) for p in ClientGenerator(seed=seed).generate_batch(3)]

        assert first == second
