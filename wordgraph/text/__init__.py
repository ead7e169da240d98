"""Text normalization into word sequences."""

from .tokenize import normalize_word, tokenize

__all__ = ["normalize_word", "tokenize"]
