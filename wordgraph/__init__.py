"""Word adjacency graph built from text, with bridge, path, rank and walk queries."""

__version__ = "0.1.0"
