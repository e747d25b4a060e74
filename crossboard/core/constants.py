"""Shared constants and enumerations for the crossword board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


GRID_SIZE = 12


class Orientation(str, Enum):
    """Direction in which a placed word's letters progress."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Orientation.ACROSS else (1, 0)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
