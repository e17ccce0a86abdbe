"""
Visualization Tools

Provides debug drawing utilities for:
- The board (edges, nodes, elements)
- The traced boundary
- Tested paths and their regions
"""

from .draw_board import (
    BoardFrame,
    make_canvas,
    draw_board,
    draw_boundary,
    draw_regions,
    draw_path,
)
from .save_outputs import save_all_outputs, save_board, save_attempt

__all__ = [
    "BoardFrame",
    "make_canvas",
    "draw_board",
    "draw_boundary",
    "draw_regions",
    "draw_path",
    "save_all_outputs",
    "save_board",
    "save_attempt",
]
