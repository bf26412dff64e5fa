"""
Letter-frequency heuristics used to rank words.

Two scores are computed against an `expected` profile:

  - overlap_score  : sum over letters of min(expected count, count in word).
                     Rewards words that reproduce a target multiset of letters,
                     repetitions included.
  - weighted_score : sum of the weights of the expected letters the word
                     contains at least once. With a corpus-wide document
                     frequency profile this favours words made of common
                     letters.

Rankings never pick a single winner: best_by_score returns the whole tie set.
"""

from __future__ import annotations

from collections import Counter
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

# (letter, weight) pairs, sorted by weight descending.
Profile = Tuple[Tuple[str, int], ...]


def frequency(word: str) -> Counter:
    """Occurrences of each distinct letter in `word`."""
    return Counter(word)


def overlap_score(expected: Mapping[str, int], actual: Mapping[str, int]) -> int:
    return sum(min(n, actual.get(c, 0)) for c, n in expected.items())


def weighted_score(expected: Mapping[str, int], actual: Mapping[str, int]) -> int:
    """Presence only: the count of a letter in `actual` is ignored."""
    return sum(w for c, w in expected.items() if actual.get(c, 0) > 0)


def letter_profile(words: Iterable[str]) -> Profile:
    """
    Document frequency of every letter: how many words contain it at least
    once. Sorted descending; ties keep first-seen order.
    """
    counts: Dict[str, int] = {}
    for w in words:
        for c in dict.fromkeys(w):
            counts[c] = counts.get(c, 0) + 1
    # sorted() is stable, and dict order is first-seen
    ordered = sorted(counts, key=lambda c: counts[c], reverse=True)
    return tuple((c, counts[c]) for c in ordered)


def best_by_score(words: Optional[Sequence[str]], key: Callable[[str], int]) -> List[str]:
    """
    Every word reaching the maximum `key` score, in input order.

    A missing or empty word list yields [""]; existing consumers expect that
    placeholder rather than an empty list.
    """
    if not words:
        return [""]

    best_score = None
    best: List[str] = []
    for w in words:
        s = key(w)
        if best_score is None or s > best_score:
            best_score = s
            best = [w]
        elif s == best_score:
            best.append(w)
    return best
