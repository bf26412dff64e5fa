"""
Guess token parsing.

A token encodes one guess and the feedback it earned as `letter digit` pairs:

  - '0' : letter not in the word (subject to the duplicate-letter rule)
  - '1' : letter in the word, wrong position
  - '2' : letter in the right position

Example: "A0P1P2L0E0" is the guess APPLE where the second P is green, the first
P is yellow and the rest are grey. Letters are case-insensitive and normalized
to uppercase.

Several guesses travel together as a '/'-separated path ("A0P1P2L0E0/S2T0...").
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from .errors import InvalidToken

_TOKEN_RE = re.compile(r"(?:[A-Za-zçÇ][0-2])+")
_PAIR_RE = re.compile(r"([A-Za-zçÇ])([0-2])")


class Verdict(Enum):
    NOT_IN_WORD = 0
    INCORRECT = 1
    CORRECT = 2


@dataclass(frozen=True)
class LetterAnswer:
    letter: str
    verdict: Verdict


# One LetterAnswer per position of a single guess.
WordAnswer = Tuple[LetterAnswer, ...]


def parse_token(token: str) -> WordAnswer:
    """
    Decode one guess token into a WordAnswer.

    Raises InvalidToken for an empty token, an odd length, a character outside
    the alphabet or a digit other than 0/1/2.
    """
    if not isinstance(token, str) or not _TOKEN_RE.fullmatch(token):
        raise InvalidToken(token)
    return tuple(
        LetterAnswer(letter.upper(), Verdict(int(digit)))
        for letter, digit in _PAIR_RE.findall(token)
    )


def parse_tokens(tokens: Iterable[str]) -> List[WordAnswer]:
    return [parse_token(t) for t in tokens]


def split_tokens(path: str) -> List[str]:
    """Split a '/'-separated guess path into its tokens (empty segments kept)."""
    return path.split("/")


def answer_to_token(answer: WordAnswer) -> str:
    """Inverse of parse_token (letters stay uppercase)."""
    return "".join(f"{la.letter}{la.verdict.value}" for la in answer)
