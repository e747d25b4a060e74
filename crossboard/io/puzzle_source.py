"""Puzzle descriptions requested from the external Gemini generator.

Layout is entirely the model's job; this module only phrases the request and
turns the reply into a :class:`PuzzleDescription`.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from ..core.constants import GRID_SIZE
from ..core.exceptions import PuzzleLoadError, PuzzleSourceError
from ..core.models import PuzzleDescription
from ..utils.logger import get_logger
from .gemini_client import GeminiAPIError, GeminiClient
from .puzzle_loader import parse_puzzle_json


LOGGER = get_logger(__name__)


CROSSWORD_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "words": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "answer": {"type": "STRING"},
                    "clue": {"type": "STRING"},
                    "row": {"type": "INTEGER", "description": "0-indexed row start position"},
                    "col": {"type": "INTEGER", "description": "0-indexed col start position"},
                    "orientation": {"type": "STRING", "enum": ["across", "down"]},
                },
                "required": ["answer", "clue", "row", "col", "orientation"],
            },
        },
        "theme": {"type": "STRING"},
    },
    "required": ["words", "theme"],
}


class GeminiPuzzleSource:
    """Fetch ready-made puzzles from Gemini."""

    SYSTEM_INSTRUCTION = "You are a professional crossword puzzle generator."

    VOCABULARY_SYSTEM_INSTRUCTION = (
        "You are a professional crossword puzzle generator. Create valid, connected, "
        "intersection-free crossword layouts within a {size}x{size} grid."
    )

    DAILY_PROMPT = (
        "Generate a fun, daily crossword puzzle.\n"
        "Theme: General Knowledge or Trending Topics.\n"
        "Grid size: Max {size}x{size}.\n"
        "Number of words: 6-10.\n"
        "Ensure intersections are valid."
    )

    VOCABULARY_PROMPT = (
        "Create a crossword puzzle layout using a selection of the following words.\n"
        "The grid size should be maximum {size}x{size}.\n"
        "Try to connect as many words as possible.\n"
        "It is OK if not all words are used, but try to use at least 5-8 if provided.\n"
        "Ensure coordinates (row, col) are valid (0-{last}) and words do not overlap incorrectly.\n"
        "\n"
        "Words to use:\n"
        "{word_list}"
    )

    def __init__(self, client: Optional[GeminiClient] = None, size: int = GRID_SIZE) -> None:
        self._client = client
        self.size = size

    def daily_challenge(self) -> PuzzleDescription:
        prompt = self.DAILY_PROMPT.format(size=self.size)
        return self._request(prompt, self.SYSTEM_INSTRUCTION)

    def from_vocabulary(self, entries: Sequence[Tuple[str, str]]) -> PuzzleDescription:
        """Build a puzzle around ``(word, definition)`` pairs."""

        if not entries:
            raise PuzzleSourceError("No vocabulary words to build a puzzle from")
        word_list = "\n".join(f"{word}: {definition}" for word, definition in entries)
        prompt = self.VOCABULARY_PROMPT.format(size=self.size, last=self.size - 1, word_list=word_list)
        return self._request(prompt, self.VOCABULARY_SYSTEM_INSTRUCTION.format(size=self.size))

    def _request(self, prompt: str, system_instruction: str) -> PuzzleDescription:
        try:
            client = self._client or GeminiClient()
            self._client = client
            text = client.generate_json(
                prompt,
                system_instruction=system_instruction,
                response_schema=CROSSWORD_SCHEMA,
            )
            puzzle = parse_puzzle_json(text)
        except (GeminiAPIError, PuzzleLoadError, RuntimeError) as exc:
            LOGGER.error("Error generating crossword: %s", exc)
            raise PuzzleSourceError("Failed to generate crossword.") from exc
        LOGGER.info("Received puzzle '%s' with %s words", puzzle.theme, len(puzzle.words))
        return puzzle
