"""Exceptions raised by the word graph."""


class WordGraphError(Exception):
    """Base class for word graph failures."""


class GraphNotReady(WordGraphError):
    """A query ran before a non-empty graph was built."""

    def __init__(self, message: str = "Build a word graph from a text first."):
        super().__init__(message)


class EmptyGraph(WordGraphError):
    """An operation needs at least one node."""

    def __init__(self, message: str = "Graph is empty."):
        super().__init__(message)


class InvalidParameter(WordGraphError, ValueError):
    """A numeric or configuration parameter is out of range."""


class UnknownWordError(WordGraphError, KeyError):
    """A word is not a node of the graph."""

    def __init__(self, word: str):
        super().__init__(word)
        self.word = word

    def __str__(self) -> str:
        return f"Word not in the graph: {self.word!r}"
