"""
Corpus index: words bucketed by length, plus one letter profile per bucket.

Built once at startup and never mutated afterwards. Buckets are tuples and the
mappings are read-only proxies, so one index can be shared by any number of
concurrent callers without locking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from wordler.engine.frequency import Profile, letter_profile
from .io import load_words

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CorpusIndex:
    buckets: Mapping[int, Tuple[str, ...]]   # length -> words, file order
    profiles: Mapping[int, Profile]          # length -> letter document frequencies

    def words(self, length: int) -> Optional[Tuple[str, ...]]:
        """Bucket for `length`, or None when the corpus has no such words."""
        return self.buckets.get(length)

    def profile(self, length: int) -> Optional[Profile]:
        return self.profiles.get(length)

    def lengths(self) -> List[int]:
        return sorted(self.buckets)

    def __len__(self) -> int:
        return sum(len(b) for b in self.buckets.values())


def build_index(words: Iterable[str]) -> CorpusIndex:
    """
    Bucket `words` by length (characters, not bytes) and compute each bucket's
    letter profile.
    """
    grouped: Dict[int, List[str]] = {}
    for w in words:
        grouped.setdefault(len(w), []).append(w)

    buckets = {n: tuple(ws) for n, ws in sorted(grouped.items())}
    profiles = {n: letter_profile(ws) for n, ws in buckets.items()}

    for n, ws in buckets.items():
        log.debug("bucket N=%d: %d words, %d letters", n, len(ws), len(profiles[n]))

    return CorpusIndex(MappingProxyType(buckets), MappingProxyType(profiles))


def load_index(path: Path | str) -> CorpusIndex:
    """Read the corpus file at `path` and index it."""
    index = build_index(load_words(path))
    log.info("Indexed %d words in %d length bucket(s) from %s",
             len(index), len(index.buckets), path)
    return index
