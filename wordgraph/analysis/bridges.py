"""Bridge word lookup and bridge insertion into new text."""

import logging
import random

from ..graph.builder import WordGraph
from ..text.tokenize import tokenize
from .types import BridgeOutcome, BridgeResult

log = logging.getLogger(__name__)


def bridge_words(graph: WordGraph, word1: str, word2: str) -> list[str]:
    """Words ``b`` with edges word1 -> b and b -> word2, in successor order."""
    return [b for b in graph.successors(word1) if graph.has_edge(b, word2)]


def find_bridges(graph: WordGraph, word1: str, word2: str) -> BridgeResult:
    """Look up bridge words and classify the outcome.

    Unknown words are reported as such rather than as an empty result, so
    callers can tell "not in the graph" apart from "no bridge".
    """
    known1 = word1 in graph
    known2 = word2 in graph

    if not known1 and not known2:
        return BridgeResult(word1, word2, BridgeOutcome.UNKNOWN_BOTH)
    if not known1:
        return BridgeResult(word1, word2, BridgeOutcome.UNKNOWN_WORD1)
    if not known2:
        return BridgeResult(word1, word2, BridgeOutcome.UNKNOWN_WORD2)

    bridges = tuple(bridge_words(graph, word1, word2))
    if not bridges:
        outcome = BridgeOutcome.NONE
    elif len(bridges) == 1:
        outcome = BridgeOutcome.SINGLE
    else:
        outcome = BridgeOutcome.MULTIPLE

    log.debug(f"Bridges {word1!r} -> {word2!r}: {bridges}")
    return BridgeResult(word1, word2, outcome, bridges)


def expand_text(
    graph: WordGraph, text: str, rng: random.Random | None = None
) -> str:
    """Insert one randomly chosen bridge word between each bridged pair.

    The choice is uniform over the bridge set, not weighted by edge weight.
    Text with fewer than two words comes back unchanged.
    """
    words = tokenize(text)
    if len(words) < 2:
        return text

    chooser = rng if rng is not None else random.Random()
    expanded: list[str] = []
    inserted = 0

    for word1, word2 in zip(words, words[1:]):
        expanded.append(word1)
        bridges = bridge_words(graph, word1, word2)
        if bridges:
            expanded.append(chooser.choice(bridges))
            inserted += 1
    expanded.append(words[-1])

    log.info(f"Inserted {inserted} bridge words into {len(words)} words")
    return " ".join(expanded)
