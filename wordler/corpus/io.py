from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from wordler.config import ALPHABET

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_words(p: Path | str) -> List[str]:
    """
    Read a newline-separated word list, normalize to uppercase, drop blanks.

    Words with characters outside ALPHABET can never be named by a guess
    token, so they are skipped (validate_corpus reports them as invalid).
    File order is kept; duplicates are not removed.
    """
    words: List[str] = []
    skipped = 0
    for line in read_lines(p):
        w = line.strip().upper()
        if not w:
            continue
        if all(c in ALPHABET for c in w):
            words.append(w)
        else:
            skipped += 1

    if skipped:
        log.warning("Skipped %d word(s) outside the alphabet in %s", skipped, p)
    log.info("Read %d words from %s", len(words), p)
    return words
