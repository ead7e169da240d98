"""Random walk that stops at dead ends and at the first repeated edge."""

import logging
from pathlib import Path
import random
from typing import Iterable

from ..errors import EmptyGraph, UnknownWordError
from ..fileio import write_text_atomic
from ..graph.builder import WordGraph
from .cancel import CancellationToken, is_cancelled
from .types import StopReason, WalkTrace

log = logging.getLogger(__name__)


def random_walk(
    graph: WordGraph,
    *,
    rng: random.Random | None = None,
    cancel: CancellationToken | None = None,
    visited_edges: Iterable[tuple[str, str]] | None = None,
    start: str | None = None,
) -> WalkTrace:
    """Walk the graph from a random word.

    Each step picks uniformly among the distinct successors; edge weights do
    not bias the choice. When the chosen edge was already used in this walk
    its target is still appended, then the walk stops.

    Args:
        graph: WordGraph to walk
        rng: source of randomness, a fresh ``random.Random`` by default
        cancel: token polled before every step
        visited_edges: edges to treat as already used (copied, not mutated)
        start: fixed start word instead of a random one

    Raises:
        EmptyGraph: if the graph has no nodes
        UnknownWordError: if ``start`` is not in the graph
    """
    if graph.is_empty:
        raise EmptyGraph("Cannot walk an empty graph.")

    chooser = rng if rng is not None else random.Random()
    if start is None:
        current = chooser.choice(graph.nodes())
    elif start in graph:
        current = start
    else:
        raise UnknownWordError(start)

    trace = WalkTrace(nodes=[current], visited_edges=set(visited_edges or ()))

    while True:
        if is_cancelled(cancel):
            trace.stop_reason = StopReason.CANCELLED
            break

        successors = graph.successors(current)
        if not successors:
            trace.stop_reason = StopReason.DEAD_END
            break

        following = chooser.choice(successors)
        edge = (current, following)
        trace.nodes.append(following)

        if edge in trace.visited_edges:
            trace.stop_reason = StopReason.CYCLE
            break

        trace.visited_edges.add(edge)
        current = following

    log.info(
        f"Random walk visited {len(trace.nodes)} nodes, "
        f"stopped: {trace.stop_reason.value}"
    )
    return trace


def write_walk(trace: WalkTrace, path: str | Path, separator: str = " -> ") -> Path:
    """Write the walk as a single line; the file is replaced in one step."""
    return write_text_atomic(path, trace.format(separator))
