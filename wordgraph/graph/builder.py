"""NetworkX word adjacency graph built from a token sequence."""

from dataclasses import dataclass
import logging
from typing import Iterable, Iterator

import networkx as nx

from ..text.tokenize import tokenize

log = logging.getLogger(__name__)


@dataclass
class GraphStats:
    """Statistics about the graph."""

    nodes: int
    edges: int
    total_weight: int
    self_loops: int
    dangling: int

    def __str__(self) -> str:
        return (
            f"Graph Stats:\n"
            f"  Nodes: {self.nodes} ({self.dangling} without outgoing edges)\n"
            f"  Edges: {self.edges} (total weight {self.total_weight}, "
            f"{self.self_loops} self-loops)"
        )


class WordGraph:
    """Directed graph of words weighted by how often one follows another.

    Built once from a full word sequence and frozen; a new text means a new
    WordGraph, never an update of an existing one.
    """

    def __init__(self, graph: nx.DiGraph | None = None):
        self.graph = nx.freeze(graph if graph is not None else nx.DiGraph())

    @classmethod
    def build(cls, words: Iterable[str]) -> "WordGraph":
        """Build a graph from an ordered sequence of normalized words."""
        graph = nx.DiGraph()
        sequence = list(words)

        # Every word is a node, including the last one with no successor
        graph.add_nodes_from(sequence)

        for source, target in zip(sequence, sequence[1:]):
            if graph.has_edge(source, target):
                graph[source][target]["weight"] += 1
            else:
                graph.add_edge(source, target, weight=1)

        log.info(
            f"Built word graph: {graph.number_of_nodes()} nodes, "
            f"{graph.number_of_edges()} edges from {len(sequence)} words"
        )
        return cls(graph)

    @classmethod
    def from_text(cls, text: str) -> "WordGraph":
        """Tokenize raw text and build a graph from it."""
        return cls.build(tokenize(text))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.graph.has_node(word)

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    @property
    def is_empty(self) -> bool:
        return self.graph.number_of_nodes() == 0

    def nodes(self) -> list[str]:
        """All words in first-seen order."""
        return list(self.graph.nodes)

    def edges(self) -> Iterator[tuple[str, str, int]]:
        """Yield (source, target, weight) for every edge."""
        for source, target, weight in self.graph.edges(data="weight"):
            yield source, target, weight

    def number_of_edges(self) -> int:
        return self.graph.number_of_edges()

    def successors(self, word: str) -> list[str]:
        """Distinct words that directly follow ``word``; empty if unknown."""
        if word not in self:
            return []
        return list(self.graph.successors(word))

    def has_edge(self, source: str, target: str) -> bool:
        return self.graph.has_edge(source, target)

    def weight(self, source: str, target: str) -> int:
        """Weight of source -> target, 0 when the edge does not exist."""
        if not self.graph.has_edge(source, target):
            return 0
        return self.graph[source][target]["weight"]

    def out_weight(self, word: str) -> int:
        """Sum of outgoing edge weights of ``word``."""
        return self.graph.out_degree(word, weight="weight")

    def get_stats(self) -> GraphStats:
        """Get statistics about the graph."""
        return GraphStats(
            nodes=self.graph.number_of_nodes(),
            edges=self.graph.number_of_edges(),
            total_weight=int(self.graph.size(weight="weight")),
            self_loops=nx.number_of_selfloops(self.graph),
            dangling=sum(1 for _, degree in self.graph.out_degree() if degree == 0),
        )
