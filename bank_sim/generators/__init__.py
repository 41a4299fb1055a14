"""Generators for account numbers and demo data."""

from bank_sim.generators.client import ClientGenerator, ClientProfile
from bank_sim.generators.sequence import AccountNumberSequence

__all__ = ["AccountNumberSequence", "ClientGenerator", "ClientProfile"]
