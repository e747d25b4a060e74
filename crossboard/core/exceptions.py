"""Custom exception hierarchy for the crossword board."""


class CrosswordError(Exception):
    """Base exception for board failures."""


class MalformedPuzzleError(CrosswordError):
    """Raised when a puzzle description fails the boundary checks."""

    def __init__(self, messages):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages) or "Malformed puzzle")


class PuzzleLoadError(CrosswordError):
    """Raised when a puzzle description cannot be parsed."""


class PuzzleSourceError(CrosswordError):
    """Raised when the external puzzle generator fails to deliver a puzzle."""
