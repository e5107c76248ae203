"""
connectn.game - Core board mechanics for connect-N

This package contains the column and board representations and the
sequence detection used to decide wins.
"""

from connectn.game.column import Column
from connectn.game.board import Board

__all__ = ['Column', 'Board']
