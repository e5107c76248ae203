"""
column.py - Bottom-filling column of tokens

This module implements the Column class, a bounded stack of tokens with a
fixed height. Row 0 is the bottom slot; tokens land on the lowest free row.
"""

from typing import Iterator, List

from connectn.debug import debug
from connectn.errors import (ColumnEmptyError, ColumnFullError,
                             IndexOutOfRangeError, InvalidDimensionsError,
                             InvalidTokenError)
from connectn.utils import Token


class Column:
    """
    A fixed-height vertical stack of tokens.

    Slots below ``count`` always hold real tokens in the order they were
    pushed; slots from ``count`` upward always hold Token.EMPTY.
    """

    def __init__(self, height: int):
        """
        Initialize an empty column.

        Args:
            height: Number of slots in the column (must be at least 1)
        """
        if height < 1:
            raise InvalidDimensionsError(f"Column height must be at least 1, got {height}")

        self._height = height
        self._slots: List[Token] = [Token.EMPTY] * height
        self._count = 0

    @property
    def height(self) -> int:
        return self._height

    @property
    def count(self) -> int:
        """Number of tokens currently in the column."""
        return self._count

    def is_full(self) -> bool:
        return self._count == self._height

    def is_empty(self) -> bool:
        return self._count == 0

    def push(self, token: Token) -> int:
        """
        Drop a token onto the column.

        Args:
            token: The token to add (must not be Token.EMPTY)

        Returns:
            The row the token landed on

        Raises:
            InvalidTokenError: If token is Token.EMPTY
            ColumnFullError: If the column has no free slot
        """
        if token.is_empty():
            raise InvalidTokenError("Cannot push an EMPTY token onto a column")
        if self._count == self._height:
            debug.debug(f"Push rejected: column of height {self._height} is full", "column")
            raise ColumnFullError(f"Column is full ({self._height} tokens)")

        row = self._count
        self._slots[row] = token
        self._count += 1
        return row

    def pop(self) -> Token:
        """
        Remove the topmost token.

        Returns:
            The token that was removed

        Raises:
            ColumnEmptyError: If the column holds no tokens
        """
        if self._count == 0:
            debug.debug("Pop rejected: column is empty", "column")
            raise ColumnEmptyError("Column is empty")

        self._count -= 1
        token = self._slots[self._count]
        self._slots[self._count] = Token.EMPTY
        return token

    def get(self, row: int) -> Token:
        """
        Get the token at a row, which may be Token.EMPTY.

        Raises:
            IndexOutOfRangeError: If row is not in [0, height)
        """
        if row < 0 or row >= self._height:
            raise IndexOutOfRangeError(
                f"Row {row} is out of range for a column of height {self._height}")
        return self._slots[row]

    def top(self) -> Token:
        """Get the topmost token, or Token.EMPTY if the column is empty."""
        if self._count == 0:
            return Token.EMPTY
        return self._slots[self._count - 1]

    def clear(self):
        """Reset every slot to Token.EMPTY."""
        self._slots = [Token.EMPTY] * self._height
        self._count = 0

    def copy(self) -> 'Column':
        new_column = Column(self._height)
        new_column._slots = self._slots.copy()
        new_column._count = self._count
        return new_column

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Token]:
        """Iterate over the tokens in the column, bottom first."""
        return iter(self._slots[:self._count])

    def __repr__(self) -> str:
        tokens = "".join(str(token) for token in self)
        return f"Column(height={self._height}, tokens='{tokens}')"
