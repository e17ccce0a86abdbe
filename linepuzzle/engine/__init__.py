"""
Engine Package

Contains the puzzle-solving modules:
- Boundary tracing
- Region extraction
- Element checks
- Puzzle engine (init + test)
- Line session (path bookkeeping for one attempt)
"""

from .boundary_builder import BoundaryBuilder
from .region_extractor import (
    RegionExtractor,
    find_seeds,
    surrounding_region,
    regions_complete,
)
from .element_checks import (
    ElementCheck,
    HexagonCheck,
    SquareCheck,
    StarCheck,
    check_for,
    requires_regions,
)
from .puzzle_engine import PuzzleEngine
from .line_session import LineSession

__all__ = [
    "BoundaryBuilder",
    "RegionExtractor",
    "find_seeds",
    "surrounding_region",
    "regions_complete",
    "ElementCheck",
    "HexagonCheck",
    "SquareCheck",
    "StarCheck",
    "check_for",
    "requires_regions",
    "PuzzleEngine",
    "LineSession",
]
