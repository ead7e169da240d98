"""Shortest paths with every tied minimum-cost route.

Path cost is the sum of edge weights, and an edge weight counts how often
two words appear next to each other. Frequent word pairs are therefore
*more* expensive to traverse; "shortest" means least total co-occurrence,
not fewest hops.
"""

import heapq
import itertools
import logging

from ..graph.builder import WordGraph
from .cancel import CancellationToken, is_cancelled
from .types import PathOutcome, PathReport, ShortestPathResult

log = logging.getLogger(__name__)

Path = tuple[str, ...]


def shortest_paths(
    graph: WordGraph,
    source: str,
    cancel: CancellationToken | None = None,
) -> ShortestPathResult:
    """Run Dijkstra from ``source`` keeping all tied predecessors.

    A cancelled run keeps only the nodes settled before the token was seen;
    their distances and predecessors are final.

    Raises:
        KeyError: if ``source`` is not in the graph
    """
    if source not in graph:
        raise KeyError(source)

    distances: dict[str, int] = {source: 0}
    predecessors: dict[str, list[str]] = {source: []}
    settled: set[str] = {source}
    counter = itertools.count()
    queue: list[tuple[int, int, str]] = [(0, next(counter), source)]
    cancelled = False

    while queue:
        if is_cancelled(cancel):
            cancelled = True
            break

        dist_u, _, u = heapq.heappop(queue)
        if dist_u > distances[u]:
            continue  # stale entry
        settled.add(u)

        for v in graph.successors(u):
            candidate = dist_u + graph.weight(u, v)
            current = distances.get(v)
            if current is None or candidate < current:
                distances[v] = candidate
                predecessors[v] = [u]
                heapq.heappush(queue, (candidate, next(counter), v))
            elif candidate == current and u not in predecessors[v]:
                predecessors[v].append(u)

    if cancelled:
        log.info(f"Shortest paths from {source!r} cancelled after {len(settled)} nodes")
        distances = {n: d for n, d in distances.items() if n in settled}
    else:
        log.debug(f"Shortest paths from {source!r} reached {len(distances)} nodes")

    return ShortestPathResult(
        source=source,
        distances=distances,
        predecessors={n: tuple(predecessors[n]) for n in distances},
        cancelled=cancelled,
    )


def enumerate_paths(
    result: ShortestPathResult,
    target: str,
    cancel: CancellationToken | None = None,
) -> list[Path]:
    """All minimum-cost paths from the result's source to ``target``.

    Walks predecessor sets backwards from the target with an explicit stack,
    in the same order a recursive depth-first expansion would. The number of
    paths can grow exponentially with the number of ties; a cancelled
    enumeration returns the paths completed so far.
    """
    if not result.is_reachable(target):
        return []

    paths: list[Path] = []
    stack: list[tuple[str, Path]] = [(target, (target,))]

    while stack:
        if is_cancelled(cancel):
            log.info(f"Path enumeration to {target!r} cancelled at {len(paths)} paths")
            break

        node, chain = stack.pop()
        if node == result.source:
            paths.append(tuple(reversed(chain)))
            continue
        for pred in reversed(result.predecessors.get(node, ())):
            stack.append((pred, chain + (pred,)))

    return paths


def _collect_all(
    graph: WordGraph,
    result: ShortestPathResult,
    cancel: CancellationToken | None,
) -> dict[str, list[Path]]:
    all_paths: dict[str, list[Path]] = {}
    for node in graph.nodes():
        if node == result.source or not result.is_reachable(node):
            continue
        if is_cancelled(cancel):
            break
        all_paths[node] = enumerate_paths(result, node, cancel=cancel)
    return all_paths


def paths_to(
    graph: WordGraph,
    source: str,
    target: str,
    cancel: CancellationToken | None = None,
) -> list[Path]:
    """All shortest paths source -> target; empty if unknown or unreachable."""
    if source not in graph or target not in graph:
        return []
    result = shortest_paths(graph, source, cancel=cancel)
    return enumerate_paths(result, target, cancel=cancel)


def paths_to_all(
    graph: WordGraph,
    source: str,
    cancel: CancellationToken | None = None,
) -> dict[str, list[Path]]:
    """Shortest paths from ``source`` to every other reachable word."""
    if source not in graph:
        return {}
    result = shortest_paths(graph, source, cancel=cancel)
    return _collect_all(graph, result, cancel)


def query_paths(
    graph: WordGraph,
    source: str,
    target: str | None = None,
    cancel: CancellationToken | None = None,
) -> PathReport:
    """Shortest paths with the unknown-word and no-path cases kept apart.

    Without a target the report lists paths to every reachable word.
    """
    source_known = source in graph
    target_known = target is None or target in graph

    if not source_known and not target_known:
        return PathReport(source, target, PathOutcome.UNKNOWN_BOTH)
    if not source_known:
        return PathReport(source, target, PathOutcome.UNKNOWN_SOURCE)
    if not target_known:
        return PathReport(source, target, PathOutcome.UNKNOWN_TARGET)

    result = shortest_paths(graph, source, cancel=cancel)

    if target is None:
        all_paths = {
            node: tuple(paths)
            for node, paths in _collect_all(graph, result, cancel).items()
        }
        cancelled = is_cancelled(cancel)
        if all_paths:
            outcome = PathOutcome.FOUND
        elif cancelled:
            outcome = PathOutcome.CANCELLED
        else:
            outcome = PathOutcome.NO_PATH
        return PathReport(
            source,
            None,
            outcome,
            all_paths=all_paths,
            cancelled=cancelled,
        )

    paths = tuple(enumerate_paths(result, target, cancel=cancel))
    if not paths:
        # a cancelled search proves nothing about reachability
        if is_cancelled(cancel):
            return PathReport(
                source,
                target,
                PathOutcome.CANCELLED,
                distance=result.distance(target),
                cancelled=True,
            )
        return PathReport(source, target, PathOutcome.NO_PATH)
    return PathReport(
        source,
        target,
        PathOutcome.FOUND,
        paths=paths,
        distance=result.distance(target),
        cancelled=is_cancelled(cancel),
    )
