import pytest

from wordgraph.analysis.cancel import CancellationToken
from wordgraph.graph.builder import WordGraph

SAMPLE_WORDS = [
    "the", "scientist", "carefully", "analyzed", "the", "data",
    "wrote", "a", "detailed", "report", "and", "shared", "the", "report",
    "with", "the", "team", "but", "the", "team", "requested", "more", "data",
    "so", "the", "scientist", "analyzed", "it", "again",
]  # fmt: skip


class CountdownToken(CancellationToken):
    """Reports cancelled once it has been polled more than ``polls`` times."""

    def __init__(self, polls: int):
        super().__init__()
        self.remaining = polls

    @property
    def cancelled(self) -> bool:
        if self.remaining <= 0:
            return True
        self.remaining -= 1
        return False


@pytest.fixture
def sample_graph() -> WordGraph:
    """Graph of the sample sentence used across the analysis tests."""
    return WordGraph.build(SAMPLE_WORDS)


@pytest.fixture
def countdown():
    """Factory for tokens that turn cancelled after a number of polls."""
    return CountdownToken
