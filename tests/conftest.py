import os
import sys

import pytest

# Ensure the package is importable without installation
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from connectn.debug import debug, DebugLevel
from connectn.game.board import Board


@pytest.fixture
def board():
    """Standard 7x6 connect-4 board."""
    return Board(7, 6, 4)


@pytest.fixture(autouse=True)
def quiet_debug():
    """Restore the debug manager defaults after each test."""
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])
