"""
Shared fixtures: grid boards built from unit squares.

A grid node at column x, row y sits at position (x, y). Every grid gets one
end node dangling off the board, so the bounded area is the grid itself.
"""

import os
import random
import sys

import pytest

# Add repository root so the linepuzzle package imports without installation
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from linepuzzle.engine.puzzle_engine import PuzzleEngine
from linepuzzle.models.graph import Graph
from linepuzzle.models.node import NodeKind


PUZZLE_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "puzzles")


def make_grid(cols, rows, start=(0, 0), end_from=None, end_pos=None, missing=()):
    """
    Build a cols x rows node grid.

    Returns:
        graph: the Graph
        at:    dict mapping (x, y) -> Node, plus "end" -> end node
    """
    graph = Graph()
    at = {}
    for y in range(rows):
        for x in range(cols):
            if (x, y) in missing:
                continue
            kind = NodeKind.START if (x, y) == start else NodeKind.NORMAL
            at[(x, y)] = graph.add_node((x, y), kind)

    for (x, y), n in list(at.items()):
        if (x + 1, y) in at:
            graph.add_edge(n, at[(x + 1, y)])
        if (x, y + 1) in at:
            graph.add_edge(n, at[(x, y + 1)])

    if end_from is None:
        end_from = (cols - 1, rows - 1)
    if end_pos is None:
        end_pos = (end_from[0], end_from[1] + 0.4)
    end = graph.add_node(end_pos, NodeKind.END)
    graph.add_edge(at[end_from], end)
    at["end"] = end
    return graph, at


def walk(at, *cells):
    """Path through grid cells given as (x, y) pairs or "end"."""
    return [at[c] for c in cells]


@pytest.fixture
def grid():
    return make_grid


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def grid3():
    """3x3 nodes, start at the bottom-left corner, end above the top-right."""
    return make_grid(3, 3)


@pytest.fixture
def split_path(grid3):
    """Path cutting the 3x3 board into a left and a right half."""
    _, at = grid3
    return walk(at, (0, 0), (1, 0), (1, 1), (1, 2), (2, 2), "end")


@pytest.fixture
def make_engine(rng):
    def _make(graph, elements=()):
        engine = PuzzleEngine(graph, list(elements), rng=rng)
        assert engine.init(), engine.init_errors
        return engine
    return _make


@pytest.fixture
def puzzle_dir():
    return PUZZLE_DIR
