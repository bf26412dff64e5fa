"""
Project-wide constants.

The corpus path can be overridden with the CORPUS_FILE environment variable
(and again per-invocation with the CLIs' --corpus flag).
"""

from __future__ import annotations

import os

# Guess alphabet: A-Z plus the one diacritic letter used by the source corpus.
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZÇ"

DEFAULT_CORPUS = os.environ.get("CORPUS_FILE", "data/corpus.txt")
