"""
Candidate filtering given a clue.

Given:
  - a clue (merged from every guess seen so far)
  - the corpus bucket of words with the clue's length

Return:
  - the words satisfying every positional and letter-count constraint,
    in their original order.

Letters are compared as whole characters, so 'Ç' never matches 'C'.
"""

from __future__ import annotations

from typing import Iterable, List

from .clue import Clue, FixedLetter


def matches(clue: Clue, word: str) -> bool:
    """True iff `word` satisfies every constraint of `clue`."""
    if len(word) != len(clue.pattern):
        return False

    for ch, p in zip(word, clue.pattern):
        if isinstance(p, FixedLetter):
            if ch != p.letter:
                return False
        elif ch in p.letters:
            return False

    for lc in clue.letters.values():
        n = word.count(lc.letter)
        if lc.exact and n != lc.count:
            return False
        if n < lc.count:
            return False

    return True


def filter_candidates(clue: Clue, words: Iterable[str]) -> List[str]:
    """
    Keep only the words consistent with `clue` (order preserved).

    `words` should be the bucket for len(clue); words of any other length are
    dropped rather than raising.
    """
    return [w for w in words if matches(clue, w)]
