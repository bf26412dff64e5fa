"""
Clues: the constraints implied by one or more guesses.

A clue has two parts:
  - pattern : one PositionConstraint per position, either FixedLetter(c)
              (the position must be c) or Excluded(S) (the position must not
              be any letter of S). An unconstrained position is Excluded({}).
  - letters : per-letter count constraints. LetterCount(c, n, exact) means
              the word holds at least n copies of c, or exactly n if `exact`.

extract_clue builds a clue from a single guess. merge combines two clues into
their conjunction; it is commutative and associative, so any number of
guesses can be folded in any order with merge_all.

The one subtle rule is the duplicate-letter case. A grey letter that is also
green/yellow elsewhere in the SAME guess does not mean "absent": it means the
word holds exactly as many copies as were coloured. Only a letter that is grey
everywhere in the guess is excluded from every open position.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Tuple, Union

from .errors import EmptyInput, PatternLengthMismatch, PositionConflict
from .tokens import Verdict, WordAnswer, parse_token


@dataclass(frozen=True)
class FixedLetter:
    letter: str


@dataclass(frozen=True)
class Excluded:
    letters: FrozenSet[str] = frozenset()


PositionConstraint = Union[FixedLetter, Excluded]


@dataclass(frozen=True)
class LetterCount:
    letter: str
    count: int
    exact: bool = False


@dataclass(frozen=True)
class Clue:
    """
    Immutable and hashable. `letters` is stored as a read-only mapping
    whatever mapping the caller passes in.
    """
    pattern: Tuple[PositionConstraint, ...]
    letters: Mapping[str, LetterCount]

    def __post_init__(self):
        object.__setattr__(self, "pattern", tuple(self.pattern))
        if not isinstance(self.letters, MappingProxyType):
            object.__setattr__(self, "letters", MappingProxyType(dict(self.letters)))

    def __hash__(self) -> int:
        return hash((self.pattern, frozenset(self.letters.items())))

    def __len__(self) -> int:
        return len(self.pattern)


def combine_letter(a: LetterCount, b: LetterCount) -> LetterCount:
    """Per-letter combine rule: count takes the max, exact is sticky."""
    return LetterCount(a.letter, max(a.count, b.count), a.exact or b.exact)


def combine_letters(a: Mapping[str, LetterCount],
                    b: Mapping[str, LetterCount]) -> Dict[str, LetterCount]:
    """
    Merge two letter maps. Letters found on one side only pass through.

    This is the single reducer used for all letter-map accumulation, both
    within a guess (marking exact counts) and across guesses.
    """
    out = dict(a)
    for letter, lc in b.items():
        out[letter] = combine_letter(out[letter], lc) if letter in out else lc
    return out


def extract_clue(answer: WordAnswer) -> Clue:
    """
    Convert one decoded guess into a clue.

    Position by position:
      CORRECT     -> FixedLetter(c), one more required copy of c
      INCORRECT   -> Excluded({c}),  one more required copy of c
      NOT_IN_WORD -> Excluded({c}),  c goes to the pending grey set

    Then each pending grey letter either caps an existing count (exact=True)
    or, if it was never coloured in this guess, is added to every Excluded
    position of the pattern.
    """
    pattern: List[PositionConstraint] = []
    present: Counter = Counter()
    grey: List[str] = []

    for la in answer:
        if la.verdict is Verdict.CORRECT:
            pattern.append(FixedLetter(la.letter))
            present[la.letter] += 1
        elif la.verdict is Verdict.INCORRECT:
            pattern.append(Excluded(frozenset(la.letter)))
            present[la.letter] += 1
        else:
            pattern.append(Excluded(frozenset(la.letter)))
            grey.append(la.letter)

    letters = {c: LetterCount(c, n) for c, n in present.items()}

    capped = {c: LetterCount(c, 0, exact=True) for c in grey if c in letters}
    letters = combine_letters(letters, capped)

    absent = frozenset(c for c in grey if c not in letters)
    if absent:
        pattern = [
            Excluded(p.letters | absent) if isinstance(p, Excluded) else p
            for p in pattern
        ]

    return Clue(tuple(pattern), letters)


def _merge_position(i: int, a: PositionConstraint, b: PositionConstraint) -> PositionConstraint:
    if isinstance(a, FixedLetter) and isinstance(b, FixedLetter):
        if a.letter != b.letter:
            raise PositionConflict(i, a.letter, b.letter)
        return a
    # a confirmed letter always wins over an exclusion set
    if isinstance(a, FixedLetter):
        return a
    if isinstance(b, FixedLetter):
        return b
    return Excluded(a.letters | b.letters)


def merge(a: Clue, b: Clue) -> Clue:
    """
    Conjunction of two clues.

    Raises:
      PatternLengthMismatch : the clues are for different word lengths
      PositionConflict      : both clues fix different letters at one position
    """
    if len(a.pattern) != len(b.pattern):
        raise PatternLengthMismatch(len(a.pattern), len(b.pattern))
    pattern = tuple(
        _merge_position(i, pa, pb)
        for i, (pa, pb) in enumerate(zip(a.pattern, b.pattern))
    )
    return Clue(pattern, combine_letters(a.letters, b.letters))


def merge_all(clues: Iterable[Clue]) -> Clue:
    """Left fold of merge over `clues`; raises EmptyInput when there are none."""
    it = iter(clues)
    try:
        result = next(it)
    except StopIteration:
        raise EmptyInput() from None
    for clue in it:
        result = merge(result, clue)
    return result


def clue_from_tokens(tokens: Iterable[str]) -> Clue:
    """Parse, extract and merge a sequence of guess tokens in one go."""
    # Parse everything first so grammar errors win over merge errors.
    answers = [parse_token(t) for t in tokens]
    return merge_all(extract_clue(a) for a in answers)
