"""Decimal helpers for monetary amounts."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from bank_sim.exceptions import InvalidAmountError

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: Decimal | int | float | str) -> Decimal:
    """Convert a value to a Decimal rounded to cents.

    Floats go through ``str`` first so ``0.1`` stays ``0.10``.

    Raises
    ------
    InvalidAmountError
        If the value is not a finite number.
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmountError(f"Not a valid amount: {value!r}") from exc
    if not amount.is_finite():
        raise InvalidAmountError(f"Not a valid amount: {value!r}")
    try:
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise InvalidAmountError(f"Amount out of range: {value!r}") from exc


def format_money(amount: Decimal, symbol: str = "R$") -> str:
    """Render an amount with a currency symbol and two decimals."""
    return f"{symbol} {amount.quantize(CENTS, rounding=ROUND_HALF_UP):,.2f}"
