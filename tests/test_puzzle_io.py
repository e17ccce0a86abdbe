"""
Tests for puzzle file loading and the bundled example puzzles.
"""

import os
import random

import pytest

from linepuzzle.engine.puzzle_engine import PuzzleEngine
from linepuzzle.errors import PuzzleFormatError
from linepuzzle.models.element import ElementKind
from linepuzzle.models.node import NodeKind
from linepuzzle.utils.puzzle_io import load_puzzle, load_puzzles, parse_puzzle


SMALL = {
    "name": "small",
    "nodes": [
        {"pos": [0, 0], "kind": "start"},
        [1, 0],
        [1, 1],
        [0, 1],
        {"pos": [1, 1.5], "kind": "END"},
    ],
    "edges": [[0, 1], [1, 2], [2, 3], [3, 0], [2, 4]],
    "elements": [{"kind": "star", "pos": [0.5, 0.5]}],
    "solutions": [[0, 1, 2, 4], {"path": [0, 3, 2, 4], "expect": False}],
}


class TestParse:

    def test_parse_small(self):
        spec = parse_puzzle(SMALL, "fallback")
        assert spec.name == "small"
        assert len(spec.graph.nodes) == 5
        assert spec.graph.nodes[0].kind is NodeKind.START
        assert spec.graph.nodes[4].kind is NodeKind.END
        assert spec.graph.nodes[1].pos == (1.0, 0.0)
        assert len(spec.graph.edges) == 5
        assert spec.elements[0].kind is ElementKind.STAR
        assert [s.expect for s in spec.solutions] == [True, False]

    def test_name_defaults_to_file_stem(self):
        data = dict(SMALL)
        del data["name"]
        assert parse_puzzle(data, "fallback").name == "fallback"

    def test_resolve_path(self):
        spec = parse_puzzle(SMALL, "small")
        path = spec.resolve_path([0, 1, 2, 4])
        assert [n.id for n in path] == [0, 1, 2, 4]
        with pytest.raises(PuzzleFormatError):
            spec.resolve_path([0, 9])

    @pytest.mark.parametrize("data", [
        [],
        {"edges": []},
        {"nodes": [[0, 0, 0]]},
        {"nodes": [{"kind": "start"}]},
        {"nodes": [[0, 0]], "edges": [[0]]},
        {"nodes": [{"pos": [0, 0], "kind": "portal"}]},
        {"nodes": [[0, 0]], "elements": [{"kind": "triangle", "pos": [0, 0]}]},
        {"nodes": [[0, 0]], "elements": [{"kind": "star"}]},
        {"nodes": [[0, 0]], "solutions": [{"expect": True}]},
        {"nodes": [[0, 0]], "solutions": [["a", "b"]]},
    ])
    def test_malformed(self, data):
        with pytest.raises(PuzzleFormatError):
            parse_puzzle(data, "bad")


class TestFiles:

    def test_load_from_yaml(self, tmp_path):
        f = tmp_path / "square.yaml"
        f.write_text(
            "nodes:\n"
            "  - {pos: [0, 0], kind: start}\n"
            "  - [1, 0]\n"
            "  - [1, 1]\n"
            "  - [0, 1]\n"
            "  - {pos: [1, 1.5], kind: end}\n"
            "edges: [[0, 1], [1, 2], [2, 3], [3, 0], [2, 4]]\n",
            encoding="utf-8",
        )
        spec = load_puzzle(str(f))
        assert spec.name == "square"
        assert spec.elements == []
        assert PuzzleEngine(spec.graph).init()

    def test_invalid_yaml(self, tmp_path):
        f = tmp_path / "broken.yaml"
        f.write_text("nodes: [[0, 0]\n", encoding="utf-8")
        with pytest.raises(PuzzleFormatError):
            load_puzzle(str(f))

    def test_load_pattern(self, puzzle_dir):
        specs, names = load_puzzles(os.path.join(puzzle_dir, "*.yaml"))
        assert names == sorted(names)
        assert len(specs) == len(names) >= 3

    def test_no_match(self, tmp_path):
        assert load_puzzles(str(tmp_path / "*.yaml")) == ([], [])


class TestBundledPuzzles:

    def test_every_solution_behaves(self, puzzle_dir):
        specs, _ = load_puzzles(os.path.join(puzzle_dir, "*.yaml"))
        for spec in specs:
            engine = PuzzleEngine(spec.graph, spec.elements, rng=random.Random(7), name=spec.name)
            assert engine.init(), (spec.name, engine.init_errors)
            for solution in spec.solutions:
                passed, _ = engine.test(spec.resolve_path(solution.path))
                assert passed == solution.expect, (spec.name, solution.path)
