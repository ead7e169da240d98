"""Word graph construction and export."""

from .builder import GraphStats, WordGraph

__all__ = ["GraphStats", "WordGraph"]
