"""Service layer enforcing banking rules."""

from bank_sim.services.banking import BankingService
from bank_sim.services.results import OperationResult

__all__ = ["BankingService", "OperationResult"]
