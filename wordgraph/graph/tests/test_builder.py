"""Tests for WordGraph construction."""

from collections import Counter
import random

import networkx as nx
import pytest

from wordgraph.graph.builder import WordGraph


@pytest.fixture
def words():
    return [
        "the", "scientist", "carefully", "analyzed", "the", "data",
        "wrote", "a", "detailed", "report", "and", "shared", "the", "report",
        "with", "the", "team", "but", "the", "team", "requested", "more", "data",
        "so", "the", "scientist", "analyzed", "it", "again",
    ]  # fmt: skip


def test_nodes_are_distinct_words(words):
    """Test that each distinct word becomes exactly one node."""
    graph = WordGraph.build(words)

    assert set(graph.nodes()) == set(words)
    assert len(graph) == len(set(words))
    # first-seen order
    assert graph.nodes()[:3] == ["the", "scientist", "carefully"]


def test_edge_weights_count_consecutive_pairs(words):
    """Test that edge weights count adjacent occurrences."""
    graph = WordGraph.build(words)

    assert graph.weight("the", "scientist") == 2
    assert graph.weight("the", "team") == 2
    assert graph.weight("the", "data") == 1
    assert graph.weight("again", "the") == 0
    assert graph.successors("again") == []


def test_random_sequences_match_pair_counts():
    """Compare weights against a Counter of adjacent pairs."""
    rng = random.Random(7)
    vocab = ["a", "b", "c", "d", "e"]
    for _ in range(20):
        seq = [rng.choice(vocab) for _ in range(rng.randint(0, 30))]
        graph = WordGraph.build(seq)
        pairs = Counter(zip(seq, seq[1:]))

        assert set(graph.nodes()) == set(seq)
        assert {(s, t): w for s, t, w in graph.edges()} == dict(pairs)


def test_self_loops_are_kept():
    """Test that a repeated word produces a self-loop."""
    graph = WordGraph.build(["so", "so", "so", "far"])

    assert graph.weight("so", "so") == 2
    assert graph.get_stats().self_loops == 1


def test_empty_sequence_gives_empty_graph():
    """Test building from no words."""
    graph = WordGraph.build([])

    assert graph.is_empty
    assert len(graph) == 0
    assert list(graph.edges()) == []


def test_single_word_is_a_node_without_edges():
    """Test that a lone word is still registered."""
    graph = WordGraph.build(["alone"])

    assert "alone" in graph
    assert graph.number_of_edges() == 0
    assert graph.out_weight("alone") == 0


def test_from_text_tokenizes():
    """Test building straight from raw text."""
    graph = WordGraph.from_text("To be, or not to be.")

    assert graph.weight("to", "be") == 2
    assert graph.weight("be", "or") == 1
    assert "To" not in graph


def test_graph_is_frozen(words):
    """Test that the built graph rejects mutation."""
    graph = WordGraph.build(words)

    assert nx.is_frozen(graph.graph)
    with pytest.raises(nx.NetworkXError):
        graph.graph.add_edge("new", "edge")


def test_stats(words):
    """Test the summary counters."""
    stats = WordGraph.build(words).get_stats()

    assert stats.nodes == len(set(words))
    assert stats.total_weight == len(words) - 1
    assert stats.dangling == 1  # "again"
    assert "Nodes:" in str(stats)
