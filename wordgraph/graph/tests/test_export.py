"""Tests for adjacency listing and DOT export."""

import re
from pathlib import Path

import networkx as nx

from wordgraph.graph.builder import WordGraph
from wordgraph.graph.export import adjacency_lines, to_dot, write_dot

_EDGE_RE = re.compile(r'^\s*"([^"]+)" -> "([^"]+)" \[label="(\d+)"\];$')


def _two_edge_graph() -> WordGraph:
    # A->B twice, B->C once
    return WordGraph.build(["a", "b", "c", "a", "b"])


def test_adjacency_lines():
    """Test the plain edge listing."""
    assert adjacency_lines(_two_edge_graph()) == [
        "a -> b (2)",
        "b -> c (1)",
        "c -> a (1)",
    ]


def test_dot_has_one_statement_per_edge():
    """Test DOT output against the edge count."""
    graph = WordGraph.build(["a", "b", "a", "b", "c"])
    dot = to_dot(graph)
    lines = dot.splitlines()

    assert lines[0] == "digraph WordGraph {"
    assert lines[-1] == "}"

    edges = [_EDGE_RE.match(line).groups() for line in lines[1:-1]]
    assert sorted(edges) == [("a", "b", "2"), ("b", "a", "1"), ("b", "c", "1")]


def test_dot_two_edge_labels():
    """Test DOT labels carry the weights."""
    graph = WordGraph(nx.DiGraph([("a", "b", {"weight": 2}), ("b", "c", {"weight": 1})]))
    dot = to_dot(graph)

    statements = [m.groups() for m in map(_EDGE_RE.match, dot.splitlines()) if m]
    assert statements == [("a", "b", "2"), ("b", "c", "1")]


def test_dot_exactly_two_statements_for_two_edges():
    graph = WordGraph.build(["x", "y", "z"])
    dot = to_dot(graph)

    assert dot.count("->") == 2
    assert '"x" -> "y" [label="1"];' in dot
    assert '"y" -> "z" [label="1"];' in dot


def test_write_dot(tmp_path: Path):
    """Test writing the DOT file to disk."""
    out = write_dot(_two_edge_graph(), tmp_path / "nested" / "graph.dot")

    assert out.exists()
    assert out.read_text(encoding="utf-8") == to_dot(_two_edge_graph())
    assert [p.name for p in out.parent.iterdir()] == ["graph.dot"]


def test_empty_graph_dot():
    """Test DOT output for an empty graph."""
    assert to_dot(WordGraph.build([])) == "digraph WordGraph {\n}\n"
