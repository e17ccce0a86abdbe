"""
Tests for the command line entry point.
"""

import os

from linepuzzle.main import main, process_puzzle
from linepuzzle.utils.puzzle_io import load_puzzle


class TestMain:

    def test_bundled_puzzles_pass(self, puzzle_dir, capsys):
        assert main([os.path.join(puzzle_dir, "*.yaml"), "--seed", "3"]) == 0
        out = capsys.readouterr().out
        assert "[WARN]" not in out
        assert "ok ===" in out

    def test_no_match(self, tmp_path, capsys):
        assert main([str(tmp_path / "*.yaml")]) == 1
        assert "No puzzles matched" in capsys.readouterr().out

    def test_bad_file(self, tmp_path, capsys):
        (tmp_path / "bad.yaml").write_text("nodes: 3\n", encoding="utf-8")
        assert main([str(tmp_path / "*.yaml")]) == 1
        assert "[ERROR]" in capsys.readouterr().out

    def test_wrong_expectation_is_reported(self, tmp_path, puzzle_dir, capsys):
        text = open(os.path.join(puzzle_dir, "two_halves.yaml"), encoding="utf-8").read()
        f = tmp_path / "flipped.yaml"
        f.write_text(text.replace("expect: false", "expect: true"), encoding="utf-8")

        assert not process_puzzle(load_puzzle(str(f)), seed=1)
        assert "[WARN] solution 1" in capsys.readouterr().out

    def test_invalid_puzzle(self, tmp_path, capsys):
        f = tmp_path / "empty.yaml"
        f.write_text("nodes: [[0, 0], [1, 0]]\n", encoding="utf-8")
        assert not process_puzzle(load_puzzle(str(f)))
        out = capsys.readouterr().out
        assert "MissingStartNode" in out
        assert "MissingEndNode" in out
