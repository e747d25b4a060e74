"""Interactive board state machine.

The engine owns the grid built from a puzzle description together with the
only mutable player state: the letters typed so far, the current selection
and the solved flag. Player commands never raise; anything that does not
apply to the current state is ignored.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional

from ..core.models import (BoardSnapshot, CellView, ClueEntry, Coord, PlacedWord,
                           PuzzleDescription, Selection)
from ..core.constants import Orientation
from .grid import BoardGrid, GridConfig
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

LETTER_RE = re.compile(r"[A-Za-z]")


def _index_of(words: List[PlacedWord], target: Optional[PlacedWord]) -> Optional[int]:
    if target is None:
        return None
    for index, word in enumerate(words):
        if word is target:
            return index
    return None


class BoardEngine:
    """Selection, entry and completion logic over a :class:`BoardGrid`.

    ``on_complete`` is called with no arguments on the unsolved to solved
    transition. Exceptions it raises are not contained: they propagate out of
    :meth:`enter_letter` after the solved flag is set, and the cursor does not
    advance for that keystroke.
    """

    def __init__(
        self,
        config: Optional[GridConfig] = None,
        on_complete: Optional[Callable[[], None]] = None,
    ) -> None:
        self.config = config or GridConfig()
        self.on_complete = on_complete
        self._grid: Optional[BoardGrid] = None
        self._entries: Dict[Coord, str] = {}
        self._selection = Selection()
        self._solved = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self, puzzle: PuzzleDescription) -> BoardGrid:
        """Replace any previous board with a fresh one built from ``puzzle``."""

        self._grid = BoardGrid(puzzle, self.config)
        self._entries = {}
        self._selection = Selection()
        self._solved = False
        LOGGER.info("Board ready: theme '%s', %s words", puzzle.theme, len(puzzle.words))
        return self._grid

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def select_cell(self, row: int, col: int) -> Selection:
        grid = self._grid
        if grid is None or not grid.is_open(row, col):
            LOGGER.debug("Ignoring selection of closed cell (%s,%s)", row, col)
            return self._selection

        coord = (row, col)
        covering = grid.covering_words(row, col)
        word = self._selection.active_word
        if len(covering) == 1:
            word = covering[0]
        elif covering:
            position = _index_of(covering, word)
            if self._selection.active_cell == coord and position is not None:
                # Repeated click on an intersection flips direction.
                word = covering[(position + 1) % len(covering)]
            else:
                word = covering[0]

        self._selection = Selection(active_cell=coord, active_word=word)
        LOGGER.debug("Selected (%s,%s) word=%s", row, col, word.answer if word else None)
        return self._selection

    def enter_letter(self, ch: str) -> BoardSnapshot:
        cell = self._selection.active_cell
        if cell is None or self._solved:
            return self.snapshot()
        if not isinstance(ch, str) or not LETTER_RE.fullmatch(ch):
            LOGGER.debug("Rejected non-letter input %r", ch)
            return self.snapshot()

        self._entries[cell] = ch.upper()
        self.evaluate_completion()

        word = self._selection.active_word
        if word is not None:
            following = self._neighbour(cell, word, 1)
            if following is not None:
                self._selection = Selection(active_cell=following, active_word=word)
        return self.snapshot()

    def delete_letter(self) -> None:
        cell = self._selection.active_cell
        if cell is None:
            return
        self._entries.pop(cell, None)

        word = self._selection.active_word
        if word is not None:
            previous = self._neighbour(cell, word, -1)
            if previous is not None:
                self._selection = Selection(active_cell=previous, active_word=word)

    def evaluate_completion(self) -> bool:
        """Check every covered cell against its word; latch the solved flag."""

        if self._solved:
            return True
        if self._grid is None:
            return False

        checked = 0
        for _word, cells in self._grid.word_cells():
            for coord, expected in cells:
                if self._entries.get(coord) != expected:
                    return False
                checked += 1
        if not checked:
            return False

        self._solved = True
        LOGGER.info("Puzzle '%s' solved", self._grid.puzzle.theme)
        if self.on_complete is not None:
            self.on_complete()
        return True

    def _neighbour(self, cell: Coord, word: PlacedWord, delta: int) -> Optional[Coord]:
        dr, dc = word.step
        row, col = cell[0] + dr * delta, cell[1] + dc * delta
        if word.covers(row, col) and self._grid is not None and self._grid.is_open(row, col):
            return (row, col)
        return None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def grid(self) -> Optional[BoardGrid]:
        return self._grid

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def entries(self) -> Dict[Coord, str]:
        return dict(self._entries)

    @property
    def solved(self) -> bool:
        return self._solved

    @property
    def current_clue(self) -> Optional[str]:
        word = self._selection.active_word
        return word.clue if word is not None else None

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(entries=dict(self._entries), selection=self._selection, solved=self._solved)

    def is_part_of_active_word(self, row: int, col: int) -> bool:
        word = self._selection.active_word
        return word is not None and word.covers(row, col)

    def cell_views(self) -> List[List[CellView]]:
        if self._grid is None:
            return []
        views: List[List[CellView]] = []
        for row in self._grid.cells:
            view_row: List[CellView] = []
            for cell in row:
                if cell.is_black:
                    view_row.append(CellView(row=cell.row, col=cell.col, is_black=True))
                    continue
                value = self._entries.get((cell.row, cell.col), "")
                view_row.append(
                    CellView(
                        row=cell.row,
                        col=cell.col,
                        is_black=False,
                        value=value,
                        number=cell.clue_number,
                        active=self._selection.active_cell == (cell.row, cell.col),
                        part_of_word=self.is_part_of_active_word(cell.row, cell.col),
                        correct=bool(value) and value == cell.letter,
                    )
                )
            views.append(view_row)
        return views

    def clues(self) -> List[ClueEntry]:
        """Clue list ordered by number, across before down."""

        if self._grid is None:
            return []
        grid = self._grid
        entries = [
            ClueEntry(number=grid.number_for(word), orientation=word.orientation, clue=word.clue, word=word)
            for word in grid.puzzle.words
        ]
        unnumbered = len(entries) + 1
        return sorted(
            entries,
            key=lambda entry: (
                entry.number if entry.number is not None else unnumbered,
                0 if entry.orientation == Orientation.ACROSS else 1,
            ),
        )
