from .queries import words, most_letters, most_common

__all__ = ["words", "most_letters", "most_common"]
