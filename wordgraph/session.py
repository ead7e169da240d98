"""Holds the current word graph and refuses queries until one is built."""

import logging
from pathlib import Path
from typing import Iterable

from .errors import GraphNotReady
from .graph.builder import WordGraph
from .text.tokenize import tokenize

log = logging.getLogger(__name__)


class GraphSession:
    """The single in-memory graph that queries run against.

    Each build replaces the previous graph wholesale.
    """

    def __init__(self):
        self._graph: WordGraph | None = None
        self.last_source: Path | None = None

    @classmethod
    def from_file(cls, path: str | Path) -> "GraphSession":
        session = cls()
        session.build_from_file(path)
        return session

    @property
    def ready(self) -> bool:
        return self._graph is not None and not self._graph.is_empty

    def build(self, words: Iterable[str]) -> WordGraph:
        self._graph = WordGraph.build(words)
        self.last_source = None
        return self._graph

    def build_from_text(self, text: str) -> WordGraph:
        return self.build(tokenize(text))

    def build_from_file(self, path: str | Path) -> WordGraph:
        """Read a UTF-8 text file and build the graph from its words."""
        source = Path(path)
        text = source.read_text(encoding="utf-8")
        graph = self.build_from_text(text)
        self.last_source = source
        log.info(f"Built graph from {source}: {len(graph)} words")
        return graph

    def require_graph(self) -> WordGraph:
        """Return the current graph.

        Raises:
            GraphNotReady: if nothing was built or the text had no words
        """
        if self._graph is None:
            raise GraphNotReady()
        if self._graph.is_empty:
            raise GraphNotReady("The word graph is empty; build it from a text with words.")
        return self._graph
