"""Weighted PageRank over the word graph."""

import logging

from ..config import DEFAULT_ANALYSIS_CONFIG, validate_damping
from ..errors import InvalidParameter
from ..graph.builder import WordGraph
from .types import PageRankResult

log = logging.getLogger(__name__)


def compute_pagerank(
    graph: WordGraph,
    damping: float = DEFAULT_ANALYSIS_CONFIG.damping,
    max_iterations: int = DEFAULT_ANALYSIS_CONFIG.max_iterations,
    tolerance: float = DEFAULT_ANALYSIS_CONFIG.tolerance,
) -> PageRankResult:
    """Iterate weighted PageRank until the L1 change drops below ``tolerance``.

    A node passes its score to successors in proportion to edge weight.
    Dangling nodes (no outgoing edges) spread their score evenly over all
    nodes, so the total stays at 1.

    Args:
        graph: WordGraph to rank
        damping: probability of following an edge, in [0, 1)
        max_iterations: iteration cap
        tolerance: convergence threshold on the summed absolute change

    Returns:
        PageRankResult with scores sorted from highest to lowest
    """
    d = validate_damping(damping)
    if max_iterations < 1:
        raise InvalidParameter(f"max_iterations must be positive, got {max_iterations}")

    nodes = graph.nodes()
    n = len(nodes)
    if n == 0:
        log.info("PageRank on an empty graph, nothing to rank")
        return PageRankResult(scores=(), iterations=0, converged=True, damping=d)

    out_weight = {node: graph.out_weight(node) for node in nodes}
    dangling = [node for node in nodes if out_weight[node] == 0]

    # contributors[v] = [(u, weight(u->v) / out_weight(u)), ...]
    contributors: dict[str, list[tuple[str, float]]] = {node: [] for node in nodes}
    for source, target, weight in graph.edges():
        contributors[target].append((source, weight / out_weight[source]))

    rank = {node: 1.0 / n for node in nodes}
    converged = False
    iterations = 0

    for iterations in range(1, max_iterations + 1):
        dangling_mass = sum(rank[node] for node in dangling)
        base = (1.0 - d) / n + d * dangling_mass / n

        new_rank = {
            node: base + d * sum(rank[u] * share for u, share in contributors[node])
            for node in nodes
        }

        delta = sum(abs(new_rank[node] - rank[node]) for node in nodes)
        rank = new_rank

        if delta < tolerance:
            converged = True
            break

    if converged:
        log.info(f"PageRank converged after {iterations} iterations")
    else:
        log.info(f"PageRank stopped at the {max_iterations}-iteration cap")

    scores = tuple(sorted(rank.items(), key=lambda item: -item[1]))
    return PageRankResult(
        scores=scores, iterations=iterations, converged=converged, damping=d
    )
