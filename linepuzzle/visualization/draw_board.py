"""
Visualization utilities for rendering a puzzle board.

This module provides:
    • make_canvas(engine)
    • draw_board(image, frame, engine)
    • draw_boundary(image, frame, loop, color)
    • draw_path(image, frame, path)
    • draw_regions(image, frame, regions, seed)

Board coordinates have y pointing up; image rows grow downwards, so every
point goes through BoardFrame.to_pixel().
"""

import random
from typing import List, Sequence, Tuple

import cv2
import numpy as np

from linepuzzle.config import (
    COLOR_BLACK_SQUARE,
    COLOR_BOUNDARY,
    COLOR_EDGE,
    COLOR_HEXAGON,
    COLOR_PATH,
    COLOR_STAR,
    COLOR_WHITE_SQUARE,
    DRAW_MARGIN,
    DRAW_SCALE,
)
from linepuzzle.models.element import ElementKind
from linepuzzle.models.node import Node
from linepuzzle.models.node_loop import NodeLoop, Region


class BoardFrame:
    """Maps board coordinates to integer pixel coordinates."""

    def __init__(self, engine, scale: int = DRAW_SCALE, margin: int = DRAW_MARGIN):
        xy = np.asarray([n.pos for n in engine.graph.nodes], dtype=float)
        self.low = xy.min(axis=0)
        self.high = xy.max(axis=0)
        self.scale = scale
        self.margin = margin

    @property
    def size(self) -> Tuple[int, int]:
        w, h = (self.high - self.low) * self.scale + 2 * self.margin
        return int(w), int(h)

    def to_pixel(self, p) -> Tuple[int, int]:
        x = self.margin + (p[0] - self.low[0]) * self.scale
        y = self.margin + (self.high[1] - p[1]) * self.scale
        return int(round(x)), int(round(y))


# ---------------------------------------------------------------------
#  CANVAS
# ---------------------------------------------------------------------

def make_canvas(engine) -> Tuple[np.ndarray, BoardFrame]:
    frame = BoardFrame(engine)
    w, h = frame.size
    image = np.full((h, w, 3), 40, dtype=np.uint8)
    return image, frame


# ---------------------------------------------------------------------
#  BOARD: edges, nodes, elements
# ---------------------------------------------------------------------

def draw_board(image, frame: BoardFrame, engine, thickness: int = 6):
    for a, b in engine.node_connections():
        cv2.line(image, frame.to_pixel(a.pos), frame.to_pixel(b.pos), COLOR_EDGE, thickness)

    for n in engine.graph.nodes:
        radius = thickness * 2 if n.is_start else thickness // 2
        cv2.circle(image, frame.to_pixel(n.pos), radius, COLOR_EDGE, -1)

    r = max(4, frame.scale // 8)
    for e in engine.elements:
        cx, cy = frame.to_pixel(e.pos)
        match e.kind:
            case ElementKind.WHITE_SQUARE:
                cv2.rectangle(image, (cx - r, cy - r), (cx + r, cy + r), COLOR_WHITE_SQUARE, -1)
            case ElementKind.BLACK_SQUARE:
                cv2.rectangle(image, (cx - r, cy - r), (cx + r, cy + r), COLOR_BLACK_SQUARE, -1)
            case ElementKind.STAR:
                cv2.drawMarker(image, (cx, cy), COLOR_STAR, cv2.MARKER_STAR, 2 * r, 2)
            case ElementKind.HEXAGON:
                pts = _hexagon_points(cx, cy, r // 2 + 2)
                cv2.fillPoly(image, [pts], COLOR_HEXAGON)

    return image


def _hexagon_points(cx: int, cy: int, r: int) -> np.ndarray:
    angles = np.deg2rad(np.arange(0, 360, 60))
    pts = np.stack([cx + r * np.cos(angles), cy + r * np.sin(angles)], axis=1)
    return pts.round().astype(np.int32)


# ---------------------------------------------------------------------
#  LOOPS: boundary and regions
# ---------------------------------------------------------------------

def draw_boundary(image, frame: BoardFrame, loop: NodeLoop, color=COLOR_BOUNDARY, thickness: int = 2):
    if loop is None or len(loop) < 2:
        return image
    pts = np.asarray([frame.to_pixel(p) for p in loop.positions()], dtype=np.int32)
    cv2.polylines(image, [pts], loop.closed, color, thickness)
    return image


def draw_regions(image, frame: BoardFrame, regions: Sequence[Region], seed: int = 0):
    """
    Fills every closed region with a random translucent color; open
    regions are only outlined.
    """
    rng = random.Random(seed)
    overlay = image.copy()
    for region in regions:
        color = tuple(rng.randrange(60, 256) for _ in range(3))
        pts = np.asarray([frame.to_pixel(p) for p in region.positions()], dtype=np.int32)
        if region.closed:
            cv2.fillPoly(overlay, [pts], color)
        else:
            cv2.polylines(overlay, [pts], False, color, 2)
    cv2.addWeighted(overlay, 0.4, image, 0.6, 0, dst=image)
    return image


# ---------------------------------------------------------------------
#  PATH
# ---------------------------------------------------------------------

def draw_path(image, frame: BoardFrame, path: List[Node], thickness: int = 6):
    for a, b in zip(path, path[1:]):
        cv2.line(image, frame.to_pixel(a.pos), frame.to_pixel(b.pos), COLOR_PATH, thickness)
    if path:
        cv2.circle(image, frame.to_pixel(path[0].pos), thickness * 2, COLOR_PATH, -1)
    return image
