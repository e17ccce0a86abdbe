"""
Error types raised while loading, validating and initializing puzzles.

Initialization problems are collected rather than raised one at a time,
so authoring tools can show every problem of a puzzle at once.
"""

from typing import List


class PuzzleError(Exception):
    """Base class for every puzzle error."""


class PuzzleFormatError(PuzzleError):
    """Authoring data could not be parsed."""


# ----------------------------------------------------------------------
#  GRAPH INVARIANTS
# ----------------------------------------------------------------------

class MissingStartNode(PuzzleError):
    def __init__(self, message: str = "No puzzle start node found"):
        super().__init__(message)


class MissingEndNode(PuzzleError):
    def __init__(self, message: str = "No puzzle end node found"):
        super().__init__(message)


class BadPathIndex(PuzzleError):
    """An edge references an unknown node, or joins a node to itself."""


class DuplicateEdge(PuzzleError):
    """Two edges join the same pair of nodes (in either order)."""


class NodeOverlap(PuzzleError):
    """Two distinct nodes share a position."""


class InvalidGraphError(PuzzleError):
    """
    Composite error raised by Graph.validate().

    `errors` holds one exception per violated invariant, in the order the
    checks ran.
    """

    def __init__(self, errors: List[PuzzleError]):
        self.errors = list(errors)
        summary = "; ".join(str(e) for e in self.errors)
        super().__init__(f"Invalid puzzle graph ({len(self.errors)} problems): {summary}")


# ----------------------------------------------------------------------
#  INITIALIZATION
# ----------------------------------------------------------------------

class BoundaryGenerationFailed(PuzzleError):
    """The outer boundary polygon could not be traced."""


class ElementOutOfBounds(PuzzleError):
    """An element does not lie within the puzzle boundary."""
