"""Grid construction, clue numbering and coverage indexes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..core.constants import GRID_SIZE, Bounds
from ..core.models import Cell, Coord, PlacedWord, PuzzleDescription
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Configuration values driving the grid layout."""

    size: int = GRID_SIZE

    def bounds(self) -> Bounds:
        return Bounds(rows=self.size, cols=self.size)


class BoardGrid:
    """Fixed-size grid built once from a puzzle description.

    Besides the cells themselves the grid keeps two indexes that stay
    immutable until the next build: the words covering each cell, in
    declaration order, and the in-bounds cells covered by each word.
    """

    def __init__(self, puzzle: PuzzleDescription, config: Optional[GridConfig] = None) -> None:
        self.config = config or GridConfig()
        self.bounds = self.config.bounds()
        self.puzzle = puzzle
        self.cells: List[List[Cell]] = [
            [Cell(row=r, col=c) for c in range(self.bounds.cols)] for r in range(self.bounds.rows)
        ]
        self._covering: Dict[Coord, List[PlacedWord]] = {}
        self._word_cells: List[List[Tuple[Coord, str]]] = []
        self._numbers: Dict[Coord, int] = {}
        self._build()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def _build(self) -> None:
        counter = 1
        truncated = 0
        for word in self.puzzle.words:
            covered: List[Tuple[Coord, str]] = []
            for index, (row, col) in enumerate(word.cells):
                if not self.bounds.contains(row, col):
                    truncated += 1
                    continue
                cell = self.cells[row][col]
                letter = word.letter_at(index)
                cell.is_black = False
                cell.letter = letter
                if index == 0 and cell.clue_number is None:
                    cell.clue_number = counter
                    self._numbers[(row, col)] = counter
                    counter += 1
                self._covering.setdefault((row, col), []).append(word)
                covered.append(((row, col), letter))
            self._word_cells.append(covered)

        if truncated:
            LOGGER.warning("Truncated %s cells lying outside the %sx%s grid",
                           truncated, self.bounds.rows, self.bounds.cols)
        LOGGER.debug("Built grid for '%s': %s words, %s numbered cells",
                     self.puzzle.theme, len(self.puzzle.words), len(self._numbers))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Cell:
        if not self.bounds.contains(row, col):
            raise IndexError(f"Cell outside grid: {(row, col)}")
        return self.cells[row][col]

    def is_open(self, row: int, col: int) -> bool:
        """True for an in-bounds cell covered by at least one word."""

        return self.bounds.contains(row, col) and not self.cells[row][col].is_black

    def covering_words(self, row: int, col: int) -> List[PlacedWord]:
        return list(self._covering.get((row, col), ()))

    def word_cells(self) -> List[Tuple[PlacedWord, List[Tuple[Coord, str]]]]:
        """Each word paired with its in-bounds cells and expected letters."""

        return list(zip(self.puzzle.words, self._word_cells))

    def number_for(self, word: PlacedWord) -> Optional[int]:
        return self._numbers.get(word.origin)

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> List[List[dict]]:
        return [
            [
                {
                    "row": cell.row,
                    "col": cell.col,
                    "is_black": cell.is_black,
                    "letter": cell.letter,
                    "clue_number": cell.clue_number,
                }
                for cell in row
            ]
            for row in self.cells
        ]
