"""Human-readable rendering of query results."""

from .analysis.types import (
    BridgeOutcome,
    BridgeResult,
    PageRankResult,
    PathOutcome,
    PathReport,
    WalkTrace,
)
from .config import DEFAULT_ANALYSIS_CONFIG

_SEPARATOR = DEFAULT_ANALYSIS_CONFIG.path_separator


def format_bridges(result: BridgeResult) -> str:
    """Sentence describing a bridge word lookup."""
    w1, w2 = result.word1, result.word2
    outcome = result.outcome

    if outcome is BridgeOutcome.UNKNOWN_BOTH:
        return "No word1 or word2 in the graph!"
    if outcome is BridgeOutcome.UNKNOWN_WORD1:
        return "No word1 in the graph!"
    if outcome is BridgeOutcome.UNKNOWN_WORD2:
        return "No word2 in the graph!"
    if outcome is BridgeOutcome.NONE:
        return f"No bridge words from {w1} to {w2}!"
    if outcome is BridgeOutcome.SINGLE:
        return f"The bridge word from {w1} to {w2} is: {result.bridges[0]}."
    return f"The bridge words from {w1} to {w2} are: {', '.join(result.bridges)}."


def format_path(path: tuple[str, ...], separator: str = _SEPARATOR) -> str:
    return separator.join(path)


def format_path_report(report: PathReport, separator: str = _SEPARATOR) -> list[str]:
    """Lines for a shortest path query, one per path."""
    source, target = report.source, report.target

    if report.outcome is PathOutcome.UNKNOWN_BOTH:
        return [f"Neither '{source}' nor '{target}' is in the graph."]
    if report.outcome is PathOutcome.UNKNOWN_SOURCE:
        return [f"Start word '{source}' is not in the graph."]
    if report.outcome is PathOutcome.UNKNOWN_TARGET:
        return [f"End word '{target}' is not in the graph."]
    if report.outcome is PathOutcome.CANCELLED:
        if target is None:
            return [f"Search from '{source}' was cancelled before any path was found."]
        return [
            f"Search from '{source}' to '{target}' was cancelled "
            "before any path was found."
        ]

    lines: list[str] = []
    if report.outcome is PathOutcome.NO_PATH:
        if target is None:
            lines.append(f"No word is reachable from '{source}'.")
        else:
            lines.append(f"No path from '{source}' to '{target}'.")
    elif target is not None:
        lines.append(
            f"Shortest path(s) from '{source}' to '{target}' (length {report.distance}):"
        )
        lines.extend(format_path(path, separator) for path in report.paths)
    else:
        for node, paths in report.all_paths.items():
            lines.append(f"Shortest path(s) from '{source}' to '{node}':")
            lines.extend(f"  {format_path(path, separator)}" for path in paths)

    if report.cancelled:
        lines.append("(cancelled, results are partial)")
    return lines


def format_pagerank(
    result: PageRankResult,
    precision: int = DEFAULT_ANALYSIS_CONFIG.score_precision,
) -> list[str]:
    """``word  score`` table sorted by descending score."""
    if not result.scores:
        return ["Graph is empty."]
    return [f"{word:<5} {score:.{precision}f}" for word, score in result.scores]


def format_walk(trace: WalkTrace, separator: str = _SEPARATOR) -> str:
    return trace.format(separator)
