"""Parsing of JSON puzzle descriptions.

The generator emits a single object of the form::

    {"theme": "...", "words": [{"answer": "CAT", "clue": "...", "row": 0,
                                 "col": 0, "orientation": "across"}, ...]}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from ..core.constants import Orientation
from ..core.exceptions import PuzzleLoadError
from ..core.models import PlacedWord, PuzzleDescription
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

REQUIRED_WORD_KEYS = ("answer", "clue", "row", "col", "orientation")


def strip_code_fences(text: str) -> str:
    """Remove Markdown code fences the model sometimes wraps JSON in."""

    return text.replace("```json", "").replace("```", "").strip()


def _parse_orientation(value: Any) -> Orientation:
    if isinstance(value, str):
        try:
            return Orientation(value.strip().lower())
        except ValueError:
            pass
    raise PuzzleLoadError(f"Unknown orientation {value!r}")


def _parse_int(item: Dict[str, Any], key: str) -> int:
    value = item[key]
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, int):
        raise PuzzleLoadError(f"Field '{key}' must be an integer, got {value!r}")
    return value


def word_from_dict(item: Any) -> PlacedWord:
    if not isinstance(item, dict):
        raise PuzzleLoadError(f"Word entry must be an object, got {type(item).__name__}")
    missing = [key for key in REQUIRED_WORD_KEYS if key not in item]
    if missing:
        raise PuzzleLoadError(f"Word entry missing fields: {', '.join(missing)}")
    answer = item["answer"]
    clue = item["clue"]
    if not isinstance(answer, str) or not isinstance(clue, str):
        raise PuzzleLoadError("Fields 'answer' and 'clue' must be strings")
    return PlacedWord(
        answer=answer.strip().upper(),
        clue=clue.strip(),
        row=_parse_int(item, "row"),
        col=_parse_int(item, "col"),
        orientation=_parse_orientation(item["orientation"]),
    )


def puzzle_from_dict(data: Any) -> PuzzleDescription:
    if not isinstance(data, dict):
        raise PuzzleLoadError("Puzzle payload must be a JSON object")
    raw_words = data.get("words")
    if not isinstance(raw_words, list):
        raise PuzzleLoadError("Puzzle payload needs a 'words' list")
    theme = data.get("theme", "")
    if not isinstance(theme, str):
        raise PuzzleLoadError("Field 'theme' must be a string")
    words: List[PlacedWord] = [word_from_dict(item) for item in raw_words]
    return PuzzleDescription(theme=theme.strip(), words=tuple(words))


def parse_puzzle_json(text: str) -> PuzzleDescription:
    try:
        data = json.loads(strip_code_fences(text or ""))
    except json.JSONDecodeError as exc:
        raise PuzzleLoadError(f"Puzzle payload is not valid JSON: {exc}") from exc
    return puzzle_from_dict(data)


def load_puzzle(path: Path | str) -> PuzzleDescription:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PuzzleLoadError(f"Cannot read puzzle file {path}: {exc}") from exc
    puzzle = parse_puzzle_json(text)
    LOGGER.info("Loaded puzzle '%s' (%s words) from %s", puzzle.theme, len(puzzle.words), path)
    return puzzle
