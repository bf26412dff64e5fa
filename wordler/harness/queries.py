"""
Request-level operations over a corpus index.

- words:        candidates consistent with a sequence of guess tokens.
- most_letters: words of length n best covering the letters of `pattern`.
- most_common:  words of length n made of the most widespread letters.

Each call is independent and read-only with respect to the index. Clue errors
are raised before the corpus is scanned. A length with no corpus bucket is not
an error: `words` returns [] and the rankings return the [""] placeholder.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from wordler.config import ALPHABET
from wordler.corpus import CorpusIndex
from wordler.engine import (
    InvalidToken, best_by_score, clue_from_tokens, filter_candidates,
    frequency, overlap_score, weighted_score,
)

log = logging.getLogger(__name__)


def words(index: CorpusIndex, tokens: Iterable[str]) -> List[str]:
    clue = clue_from_tokens(tokens)
    bucket = index.words(len(clue))
    if bucket is None:
        log.debug("no corpus bucket for N=%d", len(clue))
        return []
    out = filter_candidates(clue, bucket)
    log.debug("clue N=%d kept %d/%d words", len(clue), len(out), len(bucket))
    return out


def most_letters(index: CorpusIndex, n: int, pattern: str) -> List[str]:
    """Tie set maximizing overlap_score(frequency(pattern), frequency(word))."""
    pattern = pattern.upper()
    if not pattern or any(c not in ALPHABET for c in pattern):
        raise InvalidToken(pattern)
    expected = frequency(pattern)
    return best_by_score(index.words(n), lambda w: overlap_score(expected, frequency(w)))


def most_common(index: CorpusIndex, n: int) -> List[str]:
    """Tie set maximizing weighted_score(profile of bucket n, frequency(word))."""
    profile = index.profile(n)
    if profile is None:
        return [""]
    expected = dict(profile)
    return best_by_score(index.words(n), lambda w: weighted_score(expected, frequency(w)))
