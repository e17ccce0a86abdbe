"""
Saving debug images for a tested puzzle.

This module provides:
    • save_board(output_dir, name, engine)
    • save_attempt(output_dir, name, index, engine, path, regions)
    • save_all_outputs(output_dir, name, engine, attempts)
"""

import os
from typing import List, Sequence, Tuple

import cv2

from linepuzzle.models.node import Node
from linepuzzle.models.node_loop import Region
from linepuzzle.visualization.draw_board import (
    draw_board,
    draw_boundary,
    draw_path,
    draw_regions,
    make_canvas,
)


def _save(path: str, image):
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    cv2.imwrite(path, image)
    return path


def save_board(output_dir: str, name: str, engine) -> str:
    """Board with its traced boundary: {name}_board.png"""
    image, frame = make_canvas(engine)
    draw_board(image, frame, engine)
    draw_boundary(image, frame, engine.boundary)
    return _save(os.path.join(output_dir, f"{name}_board.png"), image)


def save_attempt(output_dir: str, name: str, index: int, engine,
                 path: List[Node], regions: Sequence[Region]) -> str:
    """One tested path with the regions it produced: {name}_attempt{index}.png"""
    image, frame = make_canvas(engine)
    draw_regions(image, frame, regions, seed=index)
    draw_board(image, frame, engine)
    draw_path(image, frame, path)
    return _save(os.path.join(output_dir, f"{name}_attempt{index}.png"), image)


def save_all_outputs(output_dir: str, name: str, engine,
                     attempts: Sequence[Tuple[List[Node], Sequence[Region]]]) -> List[str]:
    written = [save_board(output_dir, name, engine)]
    for i, (path, regions) in enumerate(attempts):
        written.append(save_attempt(output_dir, name, i, engine, path, regions))
    return written
