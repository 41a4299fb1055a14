"""bank-sim: in-memory banking ledger simulator."""

__version__ = "0.1.0"

from bank_sim.config import BankSimConfig
from bank_sim.services import BankingService, OperationResult
from bank_sim.store import InMemoryClientStore

__all__ = [
    "BankSimConfig",
    "BankingService",
    "InMemoryClientStore",
    "OperationResult",
    "__version__",
]
