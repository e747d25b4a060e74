"""Interactive crossword board.

This package exposes the public API surface via:

- ``crossboard.engine.board.BoardEngine``: selection, entry and completion state machine.
- ``crossboard.engine.grid.BoardGrid``: grid construction and clue numbering.
- ``crossboard.io.puzzle_loader`` helpers: parsing puzzle descriptions.
"""

from .core.constants import GRID_SIZE, Orientation
from .core.models import PlacedWord, PuzzleDescription
from .engine.board import BoardEngine
from .engine.grid import BoardGrid, GridConfig

__all__ = [
    "GRID_SIZE",
    "Orientation",
    "PlacedWord",
    "PuzzleDescription",
    "BoardEngine",
    "BoardGrid",
    "GridConfig",
]

__version__ = "0.1.0"
