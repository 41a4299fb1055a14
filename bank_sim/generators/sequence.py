"""Sequential account number generation."""

from __future__ import annotations


class AccountNumberSequence:
    """Monotonic counter that hands out zero-padded account numbers.

    One instance is shared by everything that opens accounts in a
    process; tests create their own to start from a known value.

    Parameters
    ----------
    start : int
        First number to hand out (default 1).
    width : int
        Zero-padding width (default 4, e.g. ``"0001"``).
    """

    __slots__ = ("_next", "_width")

    def __init__(self, start: int = 1, width: int = 4) -> None:
        self._next = start
        self._width = width

    def next(self) -> str:
        """Return the next account number and advance the counter."""
        value = f"{self._next:0{self._width}d}"
        self._next += 1
        return value

    def peek(self) -> str:
        """Return the number the next call to :meth:`next` will produce."""
        return f"{self._next:0{self._width}d}"
