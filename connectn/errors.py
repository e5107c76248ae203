"""
errors.py - Exceptions raised by the connect-N board

Every error derives from ConnectNError. Errors caused by out-of-range
arguments also derive from IndexError, and errors caused by bad argument
values from ValueError, so callers can catch them either way.
"""


class ConnectNError(Exception):
    """Base class for all board errors."""


class InvalidDimensionsError(ConnectNError, ValueError):
    """The board or column cannot be built with the requested dimensions."""


class InvalidLengthError(ConnectNError, ValueError):
    """A sequence length below the minimum was requested."""


class InvalidTokenError(ConnectNError, ValueError):
    """The EMPTY sentinel was pushed as if it were a token."""


class IndexOutOfRangeError(ConnectNError, IndexError):
    """A row index outside a column was read."""


class ColumnIndexError(ConnectNError, IndexError):
    """A column index outside the board was used."""


class PositionError(ConnectNError, IndexError):
    """A (row, col) position outside the board was queried."""


class ColumnFullError(ConnectNError):
    """A token was added to a column that has no free slot."""


class ColumnEmptyError(ConnectNError):
    """A token was removed from a column that holds none."""
