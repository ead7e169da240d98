"""Tests for weighted PageRank."""

import math

import pytest

from wordgraph.analysis.pagerank import compute_pagerank
from wordgraph.errors import InvalidParameter
from wordgraph.graph.builder import WordGraph


def test_scores_are_a_distribution(sample_graph):
    """Test that scores sum to one."""
    result = compute_pagerank(sample_graph)
    scores = result.as_dict()

    assert result.iterations <= 100
    assert set(scores) == set(sample_graph.nodes())
    assert all(score >= 0 for score in scores.values())
    assert sum(scores.values()) == pytest.approx(1.0, abs=1e-8 * len(scores))


def test_scores_sorted_descending(sample_graph):
    values = [score for _, score in compute_pagerank(sample_graph).scores]

    assert values == sorted(values, reverse=True)


def test_zero_damping_is_uniform(sample_graph):
    """Test that zero damping gives equal scores."""
    result = compute_pagerank(sample_graph, damping=0.0)
    n = len(sample_graph)

    assert all(score == pytest.approx(1.0 / n) for _, score in result.scores)
    assert result.iterations == 1


def test_dangling_mass_is_redistributed():
    """Test that rank from dead ends is spread evenly."""
    # "c" has no outgoing edges
    graph = WordGraph.build(["a", "b", "c"])
    scores = compute_pagerank(graph).as_dict()

    assert sum(scores.values()) == pytest.approx(1.0)
    assert scores["c"] > scores["b"] > scores["a"]


def test_two_node_closed_form():
    """Check a two-node graph against the exact solution."""
    # a -> b, b dangling: r_a = 0.5 / 1.425
    result = compute_pagerank(WordGraph.build(["a", "b"]), damping=0.85)
    scores = result.as_dict()

    assert scores["a"] == pytest.approx(0.5 / 1.425, abs=1e-7)
    assert scores["b"] == pytest.approx(1 - 0.5 / 1.425, abs=1e-7)
    assert [word for word, _ in result.scores] == ["b", "a"]
    assert result.converged


def test_edge_weight_shifts_rank():
    """Test that heavier edges pass more rank."""
    graph = WordGraph.build("s x s x s x s y s".split())
    scores = compute_pagerank(graph).as_dict()

    assert scores["x"] > scores["y"]


def test_iteration_cap_without_convergence(sample_graph):
    """Test stopping at the iteration cap."""
    result = compute_pagerank(sample_graph, max_iterations=2, tolerance=1e-30)

    assert not result.converged
    assert result.iterations == 2


def test_empty_graph_is_a_noop():
    """Test ranking an empty graph."""
    result = compute_pagerank(WordGraph.build([]))

    assert result.scores == ()
    assert result.iterations == 0


@pytest.mark.parametrize("damping", [-0.1, 1.0, 1.5, math.nan, "0.85", True])
def test_invalid_damping_rejected(sample_graph, damping):
    """Test rejected damping values."""
    with pytest.raises(InvalidParameter):
        compute_pagerank(sample_graph, damping=damping)


def test_invalid_iteration_cap_rejected(sample_graph):
    with pytest.raises(InvalidParameter):
        compute_pagerank(sample_graph, max_iterations=0)
