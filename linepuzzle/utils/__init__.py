"""
Utility Functions

Provides geometry operations and logging setup used across the engine.
Puzzle file loading lives in utils.puzzle_io.
"""

from .geometry import (
    points_close,
    values_close,
    distance,
    midpoint,
    bounding_box,
    is_between,
    point_in_polygon,
    point_on_polygon_edge,
    angle_between,
)
from .logger_config import configure_logging

__all__ = [
    "points_close",
    "values_close",
    "distance",
    "midpoint",
    "bounding_box",
    "is_between",
    "point_in_polygon",
    "point_on_polygon_edge",
    "angle_between",
    "configure_logging",
]
