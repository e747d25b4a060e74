"""Optional boundary checks for puzzle descriptions.

The board tolerates malformed input, so nothing here runs implicitly; callers
that want stricter guarantees validate before handing the puzzle over.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..core.constants import Bounds
from ..core.exceptions import MalformedPuzzleError
from ..core.models import Coord, PuzzleDescription
from .grid import GridConfig
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic validation over a puzzle description."""

    def __init__(self, config: Optional[GridConfig] = None) -> None:
        self.bounds: Bounds = (config or GridConfig()).bounds()

    def validate(self, puzzle: PuzzleDescription) -> ValidationResult:
        messages: List[str] = []
        if not puzzle.words:
            messages.append("Puzzle has no words")
        self._check_answers(puzzle, messages)
        self._check_placements(puzzle, messages)
        self._check_overlaps(puzzle, messages)
        if messages:
            LOGGER.warning("Puzzle '%s' failed validation: %s", puzzle.theme, "; ".join(messages))
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def ensure_valid(self, puzzle: PuzzleDescription) -> PuzzleDescription:
        result = self.validate(puzzle)
        if not result.ok:
            raise MalformedPuzzleError(result.messages)
        return puzzle

    def _check_answers(self, puzzle: PuzzleDescription, messages: List[str]) -> None:
        for word in puzzle.words:
            if not word.answer:
                messages.append(f"Empty answer at {word.origin}")
            elif not (word.answer.isascii() and word.answer.isalpha()):
                messages.append(f"Answer '{word.answer}' contains non-letters")

    def _check_placements(self, puzzle: PuzzleDescription, messages: List[str]) -> None:
        for word in puzzle.words:
            if word.row < 0 or word.col < 0:
                messages.append(f"Word '{word.answer}' has a negative origin {word.origin}")
                continue
            outside = [cell for cell in word.cells if not self.bounds.contains(*cell)]
            if outside:
                messages.append(
                    f"Word '{word.answer}' leaves the {self.bounds.rows}x{self.bounds.cols} grid at {outside[0]}"
                )

    def _check_overlaps(self, puzzle: PuzzleDescription, messages: List[str]) -> None:
        letters: Dict[Coord, str] = {}
        owners: Dict[tuple, str] = {}
        for word in puzzle.words:
            for index, cell in enumerate(word.cells):
                letter = word.letter_at(index)
                existing = letters.get(cell)
                if existing is not None and existing != letter:
                    messages.append(
                        f"Letter conflict at {cell}: '{existing}' vs '{letter}' from '{word.answer}'"
                    )
                letters.setdefault(cell, letter)

                key = (cell, word.orientation)
                other = owners.get(key)
                if other is not None:
                    messages.append(f"Words '{other}' and '{word.answer}' overlap {word.orientation.value} at {cell}")
                else:
                    owners[key] = word.answer
