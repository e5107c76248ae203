"""
board.py - Board representation and sequence detection for connect-N

This module implements the Board class: a fixed row of bottom-filling
columns plus the detection of sequences of equal tokens running vertically,
horizontally or along either diagonal through a given cell.
"""

import numpy as np
from typing import List, Optional, Tuple

from connectn.debug import debug, DebugLevel
from connectn.errors import (ColumnIndexError, InvalidDimensionsError,
                             InvalidLengthError, PositionError)
from connectn.game.column import Column
from connectn.utils import (ROWS, COLS, CONNECT_N, MIN_SEQUENCE_LENGTH,
                            DIRECTION_VECTORS, Direction, Token)


class Board:
    """
    Represents a connect-N game board.

    The board owns ``width`` columns of ``height`` slots each. Rows are
    counted from the bottom (row 0) and columns from the left (col 0).
    It tracks the number of tokens placed and answers whether a cell is
    part of a run of equal tokens. Turn order and players are left to
    the caller: tokens are just values.
    """

    def __init__(self, width: int = COLS, height: int = ROWS,
                 tokens_to_connect: int = CONNECT_N):
        """
        Initialize an empty board.

        Args:
            width: Number of columns
            height: Number of slots in each column
            tokens_to_connect: Length of the sequence that wins the game

        Raises:
            InvalidDimensionsError: If tokens_to_connect is below 1 or either
                dimension is smaller than tokens_to_connect
        """
        if tokens_to_connect < 1:
            raise InvalidDimensionsError(
                f"The number of tokens to connect must be at least 1, got {tokens_to_connect}")
        if width < tokens_to_connect:
            raise InvalidDimensionsError(
                f"The width ({width}) must be at least the number of tokens "
                f"to connect ({tokens_to_connect})")
        if height < tokens_to_connect:
            raise InvalidDimensionsError(
                f"The height ({height}) must be at least the number of tokens "
                f"to connect ({tokens_to_connect})")

        debug.debug(f"Initializing {width}x{height} board, connect {tokens_to_connect}", "board")
        self._width = width
        self._height = height
        self._tokens_to_connect = tokens_to_connect
        self._columns = [Column(height) for _ in range(width)]
        self._number_of_tokens = 0

    # --- Introspection ---

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def tokens_to_connect(self) -> int:
        return self._tokens_to_connect

    @property
    def number_of_tokens(self) -> int:
        """Number of tokens currently on the board."""
        return self._number_of_tokens

    @property
    def max_number_of_tokens(self) -> int:
        return self._width * self._height

    def is_valid_position(self, row: int, col: int) -> bool:
        return 0 <= row < self._height and 0 <= col < self._width

    def get_column(self, col: int) -> Column:
        """
        Get the column at an index.

        Raises:
            ColumnIndexError: If col is not in [0, width)
        """
        self._validate_column(col)
        return self._columns[col]

    def get_token(self, row: int, col: int) -> Token:
        """
        Get the token at (row, col), which may be Token.EMPTY.

        Raises:
            PositionError: If (row, col) is outside the board
        """
        self._validate_position(row, col)
        return self._columns[col].get(row)

    def is_column_full(self, col: int) -> bool:
        return self.get_column(col).is_full()

    def is_full(self) -> bool:
        return self._number_of_tokens == self.max_number_of_tokens

    def get_valid_moves(self) -> List[int]:
        """
        Get the columns that can still receive a token.

        Returns:
            List of column indices, left to right
        """
        return [col for col, column in enumerate(self._columns) if not column.is_full()]

    # --- Mutation ---

    def add_token(self, token: Token, col: int) -> bool:
        """
        Drop a token into a column.

        Args:
            token: The token to place
            col: Index of the receiving column

        Returns:
            True if the placed token completes a sequence of
            tokens_to_connect, False otherwise

        Raises:
            ColumnIndexError: If col is not in [0, width)
            ColumnFullError: If the column has no free slot
        """
        self._validate_column(col)

        row = self._columns[col].push(token)
        # Only counted once the push has succeeded
        self._number_of_tokens += 1
        debug.debug(f"Placed {token!r} at ({row}, {col})", "board")

        if debug.is_enabled_for(DebugLevel.TRACE, "board"):
            debug.start_timer("win_check")
            won = self.is_winning_position(row, col)
            debug.end_timer("win_check", "board")
        else:
            won = self.is_winning_position(row, col)

        if won:
            debug.info(f"Token at ({row}, {col}) completes a sequence of "
                       f"{self._tokens_to_connect}", "board")
        return won

    def remove_token(self, col: int) -> Token:
        """
        Remove the topmost token of a column.

        Earlier wins are not re-evaluated; undoing a winning move is the
        caller's business.

        Returns:
            The token that was removed

        Raises:
            ColumnIndexError: If col is not in [0, width)
            ColumnEmptyError: If the column holds no tokens
        """
        self._validate_column(col)

        token = self._columns[col].pop()
        self._number_of_tokens -= 1
        debug.debug(f"Removed top token from column {col}", "board")
        return token

    def clear(self):
        """Remove every token from the board."""
        debug.debug("Clearing board", "board")
        for column in self._columns:
            column.clear()
        self._number_of_tokens = 0

    def copy(self) -> 'Board':
        """
        Create a deep copy of the board.

        Returns:
            A new Board sharing no state with this one
        """
        debug.trace("Creating board copy", "board")
        new_board = Board(self._width, self._height, self._tokens_to_connect)
        new_board._columns = [column.copy() for column in self._columns]
        new_board._number_of_tokens = self._number_of_tokens
        return new_board

    # --- Sequence queries ---

    def is_winning_position(self, row: int, col: int) -> bool:
        """
        Check whether (row, col) is part of a sequence of tokens_to_connect
        equal tokens in any direction.

        Raises:
            PositionError: If (row, col) is outside the board
        """
        self._validate_position(row, col)
        return self._has_sequence(row, col, self._tokens_to_connect)

    def has_sequence(self, row: int, col: int, length: int) -> bool:
        """
        Check whether (row, col) is part of a sequence of ``length`` equal
        tokens in any direction.

        Raises:
            PositionError: If (row, col) is outside the board
            InvalidLengthError: If length is below MIN_SEQUENCE_LENGTH
        """
        self._validate_position(row, col)
        self._validate_length(length)
        return self._has_sequence(row, col, length)

    def check_vertical_sequence(self, row: int, col: int, length: int) -> bool:
        # |  row varies, col is fixed
        return self.check_sequence(row, col, 1, 0, length)

    def check_horizontal_sequence(self, row: int, col: int, length: int) -> bool:
        # -  col varies, row is fixed
        return self.check_sequence(row, col, 0, 1, length)

    def check_positive_diagonal_sequence(self, row: int, col: int, length: int) -> bool:
        # /  row and col both increase
        return self.check_sequence(row, col, 1, 1, length)

    def check_negative_diagonal_sequence(self, row: int, col: int, length: int) -> bool:
        # \  row increases, col decreases
        return self.check_sequence(row, col, 1, -1, length)

    def check_sequence(self, anchor_row: int, anchor_col: int,
                       row_step: int, col_step: int, length: int) -> bool:
        """
        Check whether the anchor cell is part of a run of ``length`` equal
        tokens along the line with step (row_step, col_step).

        Args:
            anchor_row: Row of the cell the run must contain
            anchor_col: Column of the cell the run must contain
            row_step: Row difference between adjacent cells of the run
            col_step: Column difference between adjacent cells of the run
            length: Number of tokens in the run

        Returns:
            True if such a run exists, False otherwise

        Raises:
            PositionError: If the anchor is outside the board
            InvalidLengthError: If length is below MIN_SEQUENCE_LENGTH
            ValueError: If both steps are zero
        """
        self._validate_position(anchor_row, anchor_col)
        self._validate_length(length)
        if row_step == 0 and col_step == 0:
            raise ValueError("At least one of row_step and col_step must be non-zero")
        return self._find_run_start(anchor_row, anchor_col, row_step, col_step, length) is not None

    def get_sequence(self, row: int, col: int,
                     length: Optional[int] = None) -> List[Tuple[int, int]]:
        """
        Get the cells of a run through (row, col).

        Directions are tried in the order vertical, horizontal, positive
        diagonal, negative diagonal; the first run found is returned.

        Args:
            row: Row of the anchor cell
            col: Column of the anchor cell
            length: Run length (defaults to tokens_to_connect)

        Returns:
            List of (row, col) positions from the start of the run, or an
            empty list if there is none
        """
        length = self._resolve_length(row, col, length)

        for row_step, col_step in DIRECTION_VECTORS.values():
            start = self._find_run_start(row, col, row_step, col_step, length)
            if start is not None:
                start_row, start_col = start
                return [(start_row + i * row_step, start_col + i * col_step)
                        for i in range(length)]
        return []

    def get_sequence_directions(self, row: int, col: int,
                                length: Optional[int] = None) -> List[Direction]:
        """
        Get every direction in which a run through (row, col) exists.

        Args:
            row: Row of the anchor cell
            col: Column of the anchor cell
            length: Run length (defaults to tokens_to_connect)
        """
        length = self._resolve_length(row, col, length)
        return [direction for direction, (row_step, col_step) in DIRECTION_VECTORS.items()
                if self._find_run_start(row, col, row_step, col_step, length) is not None]

    def _has_sequence(self, row: int, col: int, length: int) -> bool:
        for row_step, col_step in DIRECTION_VECTORS.values():
            if self._find_run_start(row, col, row_step, col_step, length) is not None:
                return True
        return False

    def _find_run_start(self, anchor_row: int, anchor_col: int,
                        row_step: int, col_step: int,
                        length: int) -> Optional[Tuple[int, int]]:
        """
        Find the first cell of a run of ``length`` tokens equal to the anchor
        token that passes through the anchor along (row_step, col_step).

        The anchor may sit at any of the ``length`` positions of the run, so
        each candidate start from ``length - 1`` steps behind the anchor up
        to the anchor itself is walked in turn. Leaving the board or meeting
        a different token rules out the current candidate only.

        Precondition: the anchor is on the board.

        Returns:
            (row, col) of the first cell of the run, or None
        """
        anchor_token = self._columns[anchor_col].get(anchor_row)
        if anchor_token.is_empty():
            return None

        steps = length - 1
        for steps_back in range(steps, -1, -1):
            start_row = anchor_row - row_step * steps_back
            start_col = anchor_col - col_step * steps_back

            for steps_taken in range(length):
                row = start_row + steps_taken * row_step
                col = start_col + steps_taken * col_step
                if not self.is_valid_position(row, col):
                    break
                if self._columns[col].get(row) != anchor_token:
                    break
            else:
                debug.trace(f"Run of {length} through ({anchor_row}, {anchor_col}) "
                            f"with step ({row_step}, {col_step}) starts at "
                            f"({start_row}, {start_col})", "board")
                return start_row, start_col

        return None

    # --- Validation ---

    def _validate_column(self, col: int):
        if col < 0 or col >= self._width:
            raise ColumnIndexError(f"Column {col} is out of bounds [0, {self._width})")

    def _validate_position(self, row: int, col: int):
        if not self.is_valid_position(row, col):
            raise PositionError(
                f"Position ({row}, {col}) is outside rows [0, {self._height}) "
                f"and columns [0, {self._width})")

    def _validate_length(self, length: int):
        if length < MIN_SEQUENCE_LENGTH:
            raise InvalidLengthError(
                f"The sequence length must be at least {MIN_SEQUENCE_LENGTH}, got {length}")

    def _resolve_length(self, row: int, col: int, length: Optional[int]) -> int:
        self._validate_position(row, col)
        if length is None:
            return self._tokens_to_connect
        self._validate_length(length)
        return length

    # --- Export ---

    def get_state(self) -> np.ndarray:
        """
        Get the board as a numpy array of token values.

        Returns:
            (height, width) integer array; index [0, c] is the bottom of column c
        """
        state = np.zeros((self._height, self._width), dtype=int)
        for col, column in enumerate(self._columns):
            for row, token in enumerate(column):
                state[row, col] = token.value
        return state

    def __repr__(self) -> str:
        return (f"Board(width={self._width}, height={self._height}, "
                f"tokens_to_connect={self._tokens_to_connect}, "
                f"tokens={self._number_of_tokens})")
