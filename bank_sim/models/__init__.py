"""Banking domain models."""

from bank_sim.models.account import Account
from bank_sim.models.client import Client
from bank_sim.models.enums import AccountVariant, InvestmentStatus, TransactionKind
from bank_sim.models.investment import Investment, InvestmentPortfolio
from bank_sim.models.transaction import Transaction

__all__ = [
    "Account",
    "AccountVariant",
    "Client",
    "Investment",
    "InvestmentPortfolio",
    "InvestmentStatus",
    "Transaction",
    "TransactionKind",
]
