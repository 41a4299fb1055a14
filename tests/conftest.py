"""Pytest configuration and fixtures."""

import random

import pytest

from bank_sim.config import BankSimConfig
from bank_sim.generators import AccountNumberSequence
from bank_sim.models import Account, AccountVariant, Client
from bank_sim.services import BankingService
from bank_sim.store import InMemoryClientStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def store() -> InMemoryClientStore:
    """Create a fresh store for each test."""
    return InMemoryClientStore()


@pytest.fixture
def sequence() -> AccountNumberSequence:
    """Account numbers starting at 0001."""
    return AccountNumberSequence(start=1, width=4)


@pytest.fixture
def service(store: InMemoryClientStore, sequence: AccountNumberSequence, seed: int) -> BankingService:
    """Banking service with deterministic numbering and yield."""
    return BankingService(store, sequence=sequence, config=BankSimConfig(), rng=random.Random(seed))


@pytest.fixture
def ana(service: BankingService) -> Client:
    """Registered client Ana with an empty checking account."""
    client = service.create_client("Ana", "111").value
    service.add_account_for_client("111", AccountVariant.CHECKING)
    return client


@pytest.fixture
def ana_checking(ana: Client) -> Account:
    """Ana's checking account."""
    return ana.accounts[0]


@pytest.fixture
def bo(service: BankingService) -> Client:
    """Registered client Bo with an empty checking account."""
    client = service.create_client("Bo", "222").value
    service.add_account_for_client("222", AccountVariant.CHECKING)
    return client
