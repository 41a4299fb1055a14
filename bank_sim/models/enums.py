"""Enumeration types for banking entities."""

from enum import Enum


class AccountVariant(str, Enum):
    CHECKING = "CHECKING"
    SAVINGS = "SAVINGS"

    @property
    def label(self) -> str:
        """Display label used in listings and statements."""
        return "Checking" if self is AccountVariant.CHECKING else "Savings"


class TransactionKind(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    PIX_TRANSFER_SENT = "PIX_TRANSFER_SENT"
    PIX_TRANSFER_RECEIVED = "PIX_TRANSFER_RECEIVED"
    INVESTMENT_CREATION = "INVESTMENT_CREATION"


class InvestmentStatus(str, Enum):
    ACTIVE = "ACTIVE"
    REDEEMED = "REDEEMED"
