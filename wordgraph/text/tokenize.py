"""Deterministic tokenization into lowercase alphabetic words."""

import re

_TOKEN_RE = re.compile(r"[a-z]+")


def tokenize(text: str | None) -> tuple[str, ...]:
    """Split text into lowercase words; anything outside a-z separates words."""
    if not text:
        return ()
    return tuple(_TOKEN_RE.findall(text.lower()))


def normalize_word(word: str | None) -> str:
    """Normalize a single query word the way the graph stores nodes."""
    if word is None:
        return ""
    return word.strip().lower()
