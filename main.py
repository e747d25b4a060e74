"""CLI entrypoint for playing a crossword in the terminal."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Tuple

from crossboard.core.exceptions import CrosswordError
from crossboard.engine.board import BoardEngine
from crossboard.engine.grid import GridConfig
from crossboard.engine.validator import PuzzleValidator
from crossboard.io.puzzle_loader import load_puzzle
from crossboard.io.puzzle_source import GeminiPuzzleSource
from crossboard.utils.logger import configure_logging, get_logger, parse_level
from crossboard.utils.pretty import format_clues, pretty_print_board


LOGGER = get_logger("crossboard.cli")

HELP_TEXT = (
    "Commands: ROW COL selects a cell, a single letter fills it, "
    "'-' or 'del' erases, 'clues' lists clues, 'q' quits."
)


def parse_vocab_file(path: Path) -> List[Tuple[str, str]]:
    """Read ``WORD: definition`` entries, one per line. Blank lines and # comments are skipped."""
    entries: List[Tuple[str, str]] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        word, _, definition = line.partition(":")
        entries.append((word.strip(), definition.strip()))
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a crossword puzzle in the terminal")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--puzzle", type=Path, metavar="FILE", help="Puzzle description JSON file")
    source.add_argument("--daily", action="store_true", help="Ask Gemini for a daily challenge")
    source.add_argument(
        "--vocab",
        type=Path,
        metavar="FILE",
        help="Ask Gemini for a puzzle built from 'WORD: definition' lines",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject puzzles with conflicting letters or out-of-grid placements",
    )
    parser.add_argument("--grid-size", type=int, default=GridConfig().size, help="Grid size in cells")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def run_session(engine: BoardEngine, lines: Iterable[str], stream=None) -> bool:
    """Drive ``engine`` from text commands and return whether it was solved."""

    stream = stream or sys.stdout
    pretty_print_board(engine, stream=stream)
    print(HELP_TEXT, file=stream)
    for raw in lines:
        command = raw.strip()
        if not command:
            continue
        lowered = command.lower()
        if lowered in {"q", "quit", "exit"}:
            break
        if lowered == "clues":
            print(format_clues(engine), file=stream)
            continue

        was_solved = engine.solved
        parts = command.split()
        if lowered in {"-", "del"}:
            engine.delete_letter()
        elif len(parts) == 2 and all(part.lstrip("-").isdigit() for part in parts):
            engine.select_cell(int(parts[0]), int(parts[1]))
        elif len(command) == 1:
            engine.enter_letter(command)
        else:
            print(HELP_TEXT, file=stream)
            continue

        pretty_print_board(engine, stream=stream)
        if engine.solved and not was_solved:
            print("Puzzle solved!", file=stream)
    return engine.solved


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = parse_level(args.log_level)
    configure_logging(level)

    config = GridConfig(size=args.grid_size)
    try:
        if args.puzzle:
            puzzle = load_puzzle(args.puzzle)
        else:
            source = GeminiPuzzleSource(size=config.size)
            if args.daily:
                puzzle = source.daily_challenge()
            else:
                puzzle = source.from_vocabulary(parse_vocab_file(args.vocab))
        if args.strict:
            PuzzleValidator(config).ensure_valid(puzzle)
    except (CrosswordError, OSError) as exc:
        LOGGER.error("%s", exc)
        return 1

    engine = BoardEngine(config)
    engine.initialize(puzzle)
    print(puzzle.theme)
    run_session(engine, sys.stdin)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
