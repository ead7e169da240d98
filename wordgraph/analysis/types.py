"""Typed results returned by the graph algorithms."""

from dataclasses import dataclass, field
from enum import Enum


class BridgeOutcome(Enum):
    UNKNOWN_BOTH = "unknown_both"
    UNKNOWN_WORD1 = "unknown_word1"
    UNKNOWN_WORD2 = "unknown_word2"
    NONE = "none"
    SINGLE = "single"
    MULTIPLE = "multiple"


class PathOutcome(Enum):
    UNKNOWN_BOTH = "unknown_both"
    UNKNOWN_SOURCE = "unknown_source"
    UNKNOWN_TARGET = "unknown_target"
    NO_PATH = "no_path"
    CANCELLED = "cancelled"  # stopped before any path was complete
    FOUND = "found"


class StopReason(Enum):
    DEAD_END = "dead_end"
    CYCLE = "cycle"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class BridgeResult:
    word1: str
    word2: str
    outcome: BridgeOutcome
    bridges: tuple[str, ...] = ()

    @property
    def is_unknown(self) -> bool:
        return self.outcome in (
            BridgeOutcome.UNKNOWN_BOTH,
            BridgeOutcome.UNKNOWN_WORD1,
            BridgeOutcome.UNKNOWN_WORD2,
        )


@dataclass(frozen=True)
class ShortestPathResult:
    """Single-source distances and tied predecessors.

    ``distances`` only holds reached nodes. ``cancelled`` marks a partial
    but still consistent result.
    """

    source: str
    distances: dict[str, int]
    predecessors: dict[str, tuple[str, ...]]
    cancelled: bool = False

    def distance(self, node: str) -> int | None:
        return self.distances.get(node)

    def is_reachable(self, node: str) -> bool:
        return node in self.distances


@dataclass(frozen=True)
class PathReport:
    source: str
    target: str | None
    outcome: PathOutcome
    paths: tuple[tuple[str, ...], ...] = ()
    distance: int | None = None
    all_paths: dict[str, tuple[tuple[str, ...], ...]] = field(default_factory=dict)
    cancelled: bool = False


@dataclass(frozen=True)
class PageRankResult:
    scores: tuple[tuple[str, float], ...]
    iterations: int
    converged: bool
    damping: float

    def as_dict(self) -> dict[str, float]:
        return dict(self.scores)


@dataclass
class WalkTrace:
    """Nodes visited by one walk and the edges it used."""

    nodes: list[str]
    visited_edges: set[tuple[str, str]]
    stop_reason: StopReason | None = None

    def format(self, separator: str = " -> ") -> str:
        return separator.join(self.nodes)
