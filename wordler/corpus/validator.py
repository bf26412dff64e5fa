"""
Corpus validator for wordler.

What this module does:
- Validate the corpus file (one word per line, any length).
- Enforce formatting rules (letters of the guess alphabet only, case-insensitive).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Report how many words fall in each length bucket.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordler.corpus import validate_corpus, pretty_summary
    rep = validate_corpus("data/corpus.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordler.config import ALPHABET


# -----------------------------
# Dataclass for the structured report
# -----------------------------

@dataclass
class CorpusReport:
    """Diagnostics and metadata for one corpus file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    lengths: Dict[int, int] = field(default_factory=dict)  # word length -> valid words
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from the corpus file and validate them.

    Rules:
      - one token per line
      - only letters of ALPHABET (case-insensitive)
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip().upper()
            if w and all(c in ALPHABET for c in w):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_corpus(corpus_path: str) -> Dict:
    """
    Validate the corpus word list.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see CorpusReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - per-length bucket sizes
          - `passed` boolean (strict: requires non-empty and no invalid lines)
          - `issues` (list of strings) to surface any problems
    """
    p = Path(corpus_path)

    if not p.exists():
        rep = CorpusReport(corpus_path, False, 0, "", 0, 0,
                           issues=[f"corpus file not found: {corpus_path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p)

    lengths: Dict[int, int] = {}
    for w in words:
        lengths[len(w)] = lengths.get(len(w), 0) + 1

    rep = CorpusReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        lengths=dict(sorted(lengths.items())),
    )

    if rep.count == 0:
        rep.issues.append("corpus contains 0 valid words")
    if invalid:
        rep.issues.append(f"corpus has {invalid} invalid line(s)")
    # Duplicates are tolerated (rankings just repeat them) but worth flagging.
    if rep.count != rep.unique_count:
        rep.issues.append("corpus contains duplicate words")

    rep.passed = rep.count > 0 and invalid == 0
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        corpus=5843 (uniq=5843, sha=abc123def456) | lengths=4:120,5:5723 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    lengths = ",".join(f"{n}:{c}" for n, c in report.get("lengths", {}).items()) or "-"
    return (
        f"corpus={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| lengths={lengths} | {status}"
    )
