"""
connectn - Generalized connect-N board

This package provides the board of a "connect-N" game: a fixed grid of
bottom-filling columns and the detection of sequences of equal tokens of
any length in the vertical, horizontal and diagonal directions. Game loops,
players and AI strategies are built on top of it by callers.
"""

from connectn.game import Board, Column
from connectn.utils import Token, Direction

# Version number
__version__ = '0.1.0'

__all__ = ['Board', 'Column', 'Token', 'Direction']
