"""Bridge words, shortest paths, PageRank and random walks over a word graph."""

from .bridges import bridge_words, expand_text, find_bridges
from .cancel import CancellationToken, cancel_on_enter, cancel_on_interrupt
from .pagerank import compute_pagerank
from .paths import (
    enumerate_paths,
    paths_to,
    paths_to_all,
    query_paths,
    shortest_paths,
)
from .types import (
    BridgeOutcome,
    BridgeResult,
    PageRankResult,
    PathOutcome,
    PathReport,
    ShortestPathResult,
    StopReason,
    WalkTrace,
)
from .walk import random_walk, write_walk

__all__ = [
    "BridgeOutcome",
    "BridgeResult",
    "CancellationToken",
    "PageRankResult",
    "PathOutcome",
    "PathReport",
    "ShortestPathResult",
    "StopReason",
    "WalkTrace",
    "bridge_words",
    "cancel_on_enter",
    "cancel_on_interrupt",
    "compute_pagerank",
    "enumerate_paths",
    "expand_text",
    "find_bridges",
    "paths_to",
    "paths_to_all",
    "query_paths",
    "random_walk",
    "shortest_paths",
    "write_walk",
]
