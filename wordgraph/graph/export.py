"""Plain-text and DOT renderings of a word graph."""

import logging
from pathlib import Path

from ..fileio import write_text_atomic
from .builder import WordGraph

log = logging.getLogger(__name__)


def _quote(word: str) -> str:
    return '"' + word.replace("\\", "\\\\").replace('"', '\\"') + '"'


def adjacency_lines(graph: WordGraph) -> list[str]:
    """One ``source -> target (weight)`` line per edge."""
    return [f"{source} -> {target} ({weight})" for source, target, weight in graph.edges()]


def to_dot(graph: WordGraph, name: str = "WordGraph") -> str:
    """Render the graph as a Graphviz digraph with weights as edge labels."""
    lines = [f"digraph {name} {{"]
    for source, target, weight in graph.edges():
        lines.append(f'  {_quote(source)} -> {_quote(target)} [label="{weight}"];')
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(graph: WordGraph, path: str | Path, name: str = "WordGraph") -> Path:
    """Write the DOT rendering of the graph to ``path``."""
    output_path = write_text_atomic(path, to_dot(graph, name=name))
    log.info(f"Wrote {graph.number_of_edges()} edges to {output_path}")
    return output_path
