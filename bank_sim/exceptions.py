"""Custom exception hierarchy for bank-sim.

Every exception carries the :class:`ErrorKind` that the service layer
reports when it turns the exception into a failed ``OperationResult``.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure kinds reported by service operations."""

    DUPLICATE_CLIENT = "DUPLICATE_CLIENT"
    CLIENT_NOT_FOUND = "CLIENT_NOT_FOUND"
    INVALID_CLIENT_DATA = "INVALID_CLIENT_DATA"
    DUPLICATE_ACCOUNT_VARIANT = "DUPLICATE_ACCOUNT_VARIANT"
    INVALID_ACCOUNT_VARIANT = "INVALID_ACCOUNT_VARIANT"
    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_INVESTMENT_INDEX = "INVALID_INVESTMENT_INDEX"
    INVALID_INVESTMENT_NAME = "INVALID_INVESTMENT_NAME"
    ALREADY_REDEEMED = "ALREADY_REDEEMED"


class BankSimError(Exception):
    """Base exception for all bank-sim errors."""

    kind: ErrorKind | None = None


class EntityNotFoundError(BankSimError):
    """Raised when a referenced entity does not exist."""


class ClientNotFoundError(EntityNotFoundError):
    """Raised when no client is registered under a tax id."""

    kind = ErrorKind.CLIENT_NOT_FOUND


class AccountNotFoundError(EntityNotFoundError):
    """Raised when no account carries the requested number."""

    kind = ErrorKind.ACCOUNT_NOT_FOUND


class DuplicateEntityError(BankSimError):
    """Raised when an entity would violate a uniqueness rule."""


class DuplicateClientError(DuplicateEntityError):
    """Raised when a tax id is already registered."""

    kind = ErrorKind.DUPLICATE_CLIENT


class DuplicateAccountVariantError(DuplicateEntityError):
    """Raised when a client already holds an account of the variant."""

    kind = ErrorKind.DUPLICATE_ACCOUNT_VARIANT


class ValidationError(BankSimError):
    """Raised when operation input is malformed."""

    kind = ErrorKind.INVALID_CLIENT_DATA


class InvalidAccountVariantError(ValidationError):
    """Raised when an account variant name is not recognised."""

    kind = ErrorKind.INVALID_ACCOUNT_VARIANT


class InvalidAccountError(ValidationError):
    """Raised when an operation is given no usable account."""

    kind = ErrorKind.INVALID_ACCOUNT


class InvalidInvestmentNameError(ValidationError):
    """Raised when an investment is opened without a name."""

    kind = ErrorKind.INVALID_INVESTMENT_NAME


class LedgerError(BankSimError):
    """Base class for rejected balance movements."""


class InvalidAmountError(LedgerError):
    """Raised when an amount is zero or negative."""

    kind = ErrorKind.INVALID_AMOUNT


class InsufficientFundsError(LedgerError):
    """Raised when a debit exceeds the available balance."""

    kind = ErrorKind.INSUFFICIENT_FUNDS


class InvalidEntityStateError(BankSimError):
    """Raised when an entity is in an invalid state for the operation."""


class AlreadyRedeemedError(InvalidEntityStateError):
    """Raised when redeeming an investment that is already redeemed."""

    kind = ErrorKind.ALREADY_REDEEMED


class InvalidInvestmentIndexError(BankSimError):
    """Raised when a portfolio index is out of range."""

    kind = ErrorKind.INVALID_INVESTMENT_INDEX


class ConfigurationError(BankSimError):
    """Raised when configuration is invalid or missing."""


LEDGER_ERRORS: dict[ErrorKind, type[LedgerError]] = {
    ErrorKind.INVALID_AMOUNT: InvalidAmountError,
    ErrorKind.INSUFFICIENT_FUNDS: InsufficientFundsError,
}
