"""
Puzzle file I/O.

This module provides:
    • load_puzzle(path)             -> PuzzleSpec
    • load_puzzles(path_pattern)    -> (specs, names)
    • parse_puzzle(data, name)      -> PuzzleSpec

Puzzle files are YAML:

    name: two_halves
    nodes:
      - [0, 0]
      - {pos: [1, 0], kind: start}
      - {pos: [1, -0.5], kind: end}
    edges:
      - [0, 1]
    elements:
      - {kind: white_square, pos: [0.5, 0.5]}
    solutions:
      - {path: [1, 0], expect: false}

Node ids are their positions in the `nodes` list; edges and solution paths
refer to nodes by those indices.
"""

import glob
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import yaml

from linepuzzle.errors import PuzzleFormatError
from linepuzzle.models.element import Element, ElementKind
from linepuzzle.models.graph import Edge, Graph
from linepuzzle.models.node import Node, NodeKind


@dataclass
class Solution:
    path: List[int]
    expect: bool = True


@dataclass
class PuzzleSpec:
    name: str
    graph: Graph
    elements: List[Element] = field(default_factory=list)
    solutions: List[Solution] = field(default_factory=list)

    def resolve_path(self, indices: List[int]) -> List[Node]:
        """Turn a list of node indices into nodes of this puzzle's graph."""
        nodes = []
        for i in indices:
            node = self.graph.node(i)
            if node is None:
                raise PuzzleFormatError(f"{self.name}: solution references unknown node {i}")
            nodes.append(node)
        return nodes


# -------------------------------------------------------------------------
#  PARSING
# -------------------------------------------------------------------------

def _point(value, what: str) -> Tuple[float, float]:
    try:
        x, y = value
        return float(x), float(y)
    except (TypeError, ValueError) as e:
        raise PuzzleFormatError(f"{what}: expected [x, y], got {value!r}") from e


def _enum(enum_cls, value, what: str):
    try:
        return enum_cls(str(value).lower())
    except ValueError as e:
        choices = ", ".join(m.value for m in enum_cls)
        raise PuzzleFormatError(f"{what}: unknown kind {value!r} (expected one of {choices})") from e


def _parse_node(i: int, raw) -> Node:
    what = f"node {i}"
    if isinstance(raw, dict):
        if "pos" not in raw:
            raise PuzzleFormatError(f"{what}: missing 'pos'")
        pos = _point(raw["pos"], what)
        kind = _enum(NodeKind, raw.get("kind", "normal"), what)
    else:
        pos = _point(raw, what)
        kind = NodeKind.NORMAL
    return Node(i, pos, kind)


def _parse_edge(i: int, raw) -> Edge:
    try:
        a, b = raw
        return Edge(int(a), int(b))
    except (TypeError, ValueError) as e:
        raise PuzzleFormatError(f"edge {i}: expected [a, b], got {raw!r}") from e


def _parse_element(i: int, raw) -> Element:
    what = f"element {i}"
    if not isinstance(raw, dict) or "kind" not in raw or "pos" not in raw:
        raise PuzzleFormatError(f"{what}: expected {{kind, pos}}, got {raw!r}")
    return Element(_enum(ElementKind, raw["kind"], what), _point(raw["pos"], what))


def _parse_solution(i: int, raw) -> Solution:
    if isinstance(raw, dict):
        if "path" not in raw:
            raise PuzzleFormatError(f"solution {i}: missing 'path'")
        indices, expect = raw["path"], bool(raw.get("expect", True))
    else:
        indices, expect = raw, True
    try:
        return Solution([int(n) for n in indices], expect)
    except (TypeError, ValueError) as e:
        raise PuzzleFormatError(f"solution {i}: path must be a list of node indices") from e


def _section(data: Dict[str, Any], key: str, name: str) -> list:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise PuzzleFormatError(f"{name}: '{key}' must be a list")
    return value


def parse_puzzle(data: Dict[str, Any], name: str) -> PuzzleSpec:
    """Build a PuzzleSpec from already-loaded YAML data."""
    if not isinstance(data, dict):
        raise PuzzleFormatError(f"{name}: top level must be a mapping")
    if "nodes" not in data:
        raise PuzzleFormatError(f"{name}: missing 'nodes'")

    nodes = [_parse_node(i, raw) for i, raw in enumerate(_section(data, "nodes", name))]
    edges = [_parse_edge(i, raw) for i, raw in enumerate(_section(data, "edges", name))]
    elements = [_parse_element(i, raw) for i, raw in enumerate(_section(data, "elements", name))]
    solutions = [_parse_solution(i, raw) for i, raw in enumerate(_section(data, "solutions", name))]

    return PuzzleSpec(
        name=str(data.get("name", name)),
        graph=Graph(nodes, edges),
        elements=elements,
        solutions=solutions,
    )


# -------------------------------------------------------------------------
#  FILE LOADING
# -------------------------------------------------------------------------

def load_puzzle(path: str) -> PuzzleSpec:
    name = os.path.splitext(os.path.basename(path))[0]
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise PuzzleFormatError(f"{name}: invalid YAML ({e})") from e
    return parse_puzzle(data, name)


def load_puzzles(path_pattern: str) -> Tuple[List[PuzzleSpec], List[str]]:
    """
    Loads all puzzles matching the given glob pattern.

    Returns:
        specs:  list of PuzzleSpec
        names:  file stems, in the same order
    """
    file_list = sorted(glob.glob(path_pattern))
    specs = []
    names = []

    for fname in file_list:
        specs.append(load_puzzle(fname))
        names.append(os.path.splitext(os.path.basename(fname))[0])

    return specs, names
