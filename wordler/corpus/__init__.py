from .io import read_lines, load_words
from .index import CorpusIndex, build_index, load_index
from .validator import validate_corpus, pretty_summary

__all__ = [
    "read_lines", "load_words",
    "CorpusIndex", "build_index", "load_index",
    "validate_corpus", "pretty_summary",
]
