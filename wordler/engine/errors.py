"""
Errors raised while turning guess tokens into a clue.

All of them are raised before any corpus scan starts, so a failing request
never touches the corpus index. They subclass ValueError so callers that only
care about "bad input" can catch that.
"""

from __future__ import annotations


class ClueError(ValueError):
    """Base class for every clue construction failure."""


class InvalidToken(ClueError):
    """A guess token does not match the `(letter digit)+` grammar."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid token: {token!r}")


class EmptyInput(ClueError):
    """No guesses were supplied."""

    def __init__(self):
        super().__init__("Empty pattern: at least one guess is required")


class PatternLengthMismatch(ClueError):
    """Two clues of different word lengths were combined."""

    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(f"Pattern length mismatch: {left} != {right}")


class PositionConflict(ClueError):
    """Two guesses fix different letters at the same position."""

    def __init__(self, position: int, left: str, right: str):
        self.position = position
        self.left = left
        self.right = right
        super().__init__(f"Conflict at position {position}: {left} != {right}")
