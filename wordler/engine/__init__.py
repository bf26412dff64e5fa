from .errors import ClueError, InvalidToken, EmptyInput, PatternLengthMismatch, PositionConflict
from .tokens import Verdict, LetterAnswer, parse_token, parse_tokens, split_tokens
from .clue import (
    Clue, FixedLetter, Excluded, LetterCount,
    extract_clue, merge, merge_all, clue_from_tokens,
)
from .constraints import matches, filter_candidates
from .frequency import frequency, overlap_score, weighted_score, letter_profile, best_by_score

__all__ = [
    "ClueError", "InvalidToken", "EmptyInput", "PatternLengthMismatch", "PositionConflict",
    "Verdict", "LetterAnswer", "parse_token", "parse_tokens", "split_tokens",
    "Clue", "FixedLetter", "Excluded", "LetterCount",
    "extract_clue", "merge", "merge_all", "clue_from_tokens",
    "matches", "filter_candidates",
    "frequency", "overlap_score", "weighted_score", "letter_profile", "best_by_score",
]
