"""Data models supporting the crossword board."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .constants import Orientation


Coord = Tuple[int, int]


@dataclass(frozen=True)
class PlacedWord:
    """An answer with its clue, origin cell and orientation."""

    answer: str
    clue: str
    row: int
    col: int
    orientation: Orientation

    @property
    def step(self) -> Coord:
        return self.orientation.step

    @property
    def length(self) -> int:
        return len(self.answer)

    @property
    def origin(self) -> Coord:
        return (self.row, self.col)

    @property
    def cells(self) -> List[Coord]:
        dr, dc = self.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(self.length)]

    def letter_at(self, index: int) -> str:
        return self.answer[index].upper()

    def covers(self, row: int, col: int) -> bool:
        """Return True when ``(row, col)`` lies within this word's span."""

        if self.orientation == Orientation.ACROSS:
            return row == self.row and self.col <= col < self.col + self.length
        return col == self.col and self.row <= row < self.row + self.length


@dataclass(frozen=True)
class PuzzleDescription:
    """A themed set of placed words, as produced by the external generator."""

    theme: str
    words: Tuple[PlacedWord, ...] = ()


@dataclass
class Cell:
    """Represents a grid cell with metadata."""

    row: int
    col: int
    is_black: bool = True
    letter: Optional[str] = None
    clue_number: Optional[int] = None


@dataclass(frozen=True)
class Selection:
    active_cell: Optional[Coord] = None
    active_word: Optional[PlacedWord] = None


@dataclass(frozen=True)
class CellView:
    """Render-ready view of a single cell."""

    row: int
    col: int
    is_black: bool
    value: str = ""
    number: Optional[int] = None
    active: bool = False
    part_of_word: bool = False
    correct: bool = False


@dataclass(frozen=True)
class ClueEntry:
    number: Optional[int]
    orientation: Orientation
    clue: str
    word: PlacedWord


@dataclass
class BoardSnapshot:
    entries: Dict[Coord, str] = field(default_factory=dict)
    selection: Selection = field(default_factory=Selection)
    solved: bool = False
