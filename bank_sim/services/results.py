"""Result values returned across the service boundary."""

from dataclasses import dataclass
from typing import Any

from bank_sim.exceptions import BankSimError, ErrorKind


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a service operation.

    ``message`` is always human readable and ready for display. On
    failure ``error`` names the kind of failure and ``value`` is None.
    """

    success: bool
    message: str
    error: ErrorKind | None = None
    value: Any = None

    @classmethod
    def ok(cls, message: str, value: Any = None) -> "OperationResult":
        return cls(success=True, message=message, value=value)

    @classmethod
    def fail(cls, error: ErrorKind, message: str) -> "OperationResult":
        return cls(success=False, message=message, error=error)

    @classmethod
    def from_exception(cls, exc: BankSimError) -> "OperationResult":
        """Build a failed result from a domain exception."""
        return cls.fail(exc.kind, str(exc))

    def __bool__(self) -> bool:
        return self.success

    def __str__(self) -> str:
        return self.message
