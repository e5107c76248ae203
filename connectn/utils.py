"""
utils.py - Constants and enumerations for the connect-N board

This module provides the default board configuration, the Token values
stored on the board and the direction step vectors used by sequence
detection.
"""

from enum import Enum, auto
from typing import Dict, Tuple

# Default board configuration
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of tokens in a row to win

# Shortest sequence a caller may ask about
MIN_SEQUENCE_LENGTH = 2


class Token(Enum):
    """Enumeration of the values a board cell can hold."""
    EMPTY = 0
    RED = 1
    YELLOW = 2

    def is_empty(self) -> bool:
        return self is Token.EMPTY

    def __str__(self):
        if self == Token.EMPTY:
            return " "
        elif self == Token.RED:
            return "X"
        else:
            return "O"


class Direction(Enum):
    """Enumeration of the four lines a sequence can run along."""
    VERTICAL = auto()
    HORIZONTAL = auto()
    POSITIVE_DIAGONAL = auto()  # "/" bottom-left to top-right
    NEGATIVE_DIAGONAL = auto()  # "\" top-left to bottom-right


# Step vectors (row, col); row 0 is the bottom of the board
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.VERTICAL: (1, 0),
    Direction.HORIZONTAL: (0, 1),
    Direction.POSITIVE_DIAGONAL: (1, 1),
    Direction.NEGATIVE_DIAGONAL: (1, -1),
}
