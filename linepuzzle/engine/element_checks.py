"""
Per-element rule checks.

This module provides:
    • ElementCheck base class (setup + check)
    • HexagonCheck, SquareCheck, StarCheck
    • check_for(kind)          static dispatch from ElementKind to its check
    • requires_regions(elements)

New element kinds are added by writing an ElementCheck subclass and a case
in check_for().
"""

import logging
from typing import List, Optional, Sequence

from linepuzzle.engine.region_extractor import regions_complete, surrounding_region
from linepuzzle.models.element import Element, ElementKind
from linepuzzle.models.node import Node
from linepuzzle.models.node_loop import Region
from linepuzzle.utils.geometry import is_between

logger = logging.getLogger(__name__)


class ElementCheck:
    """
    Base class for element checks.

    setup() hands the check the engine (for the full element list) and
    the regions of the current attempt. Checks that need regions fail
    when any region is still open, so a malformed region can never make
    a puzzle count as solved.
    """

    requires_regions = False

    def __init__(self):
        self.engine = None
        self.regions: Optional[List[Region]] = None

    def setup(self, engine, regions: Optional[List[Region]]):
        self.engine = engine
        self.regions = regions

    def check(self, element: Element, path: Sequence[Node]) -> bool:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _regions_usable(self) -> bool:
        if self.engine is None or self.regions is None:
            return False
        return regions_complete(self.regions)

    def _elements(self, kind: ElementKind) -> List[Element]:
        return [e for e in self.engine.elements if e.kind is kind]


class HexagonCheck(ElementCheck):
    """
    The line must pass through the hexagon. Only the path is needed.
    """

    requires_regions = False

    def check(self, element: Element, path: Sequence[Node]) -> bool:
        for a, b in zip(path, path[1:]):
            if is_between(a.pos, element.pos, b.pos):
                return True
        return False


class SquareCheck(ElementCheck):
    """
    No square of the opposite color may share this square's region.
    """

    requires_regions = True

    def check(self, element: Element, path: Sequence[Node]) -> bool:
        if not self._regions_usable():
            return False

        this_region = surrounding_region(element.pos, self.regions)
        for other in self._elements(element.opposite_color()):
            if surrounding_region(other.pos, self.regions) is this_region:
                return False
        return True


class StarCheck(ElementCheck):
    """
    Stars come in pairs: exactly one other star must share this star's
    region. Zero or two-or-more both fail.
    """

    requires_regions = True

    def check(self, element: Element, path: Sequence[Node]) -> bool:
        if not self._regions_usable():
            return False

        this_region = surrounding_region(element.pos, self.regions)
        partners = 0
        for other in self._elements(ElementKind.STAR):
            if other is element:
                continue
            if surrounding_region(other.pos, self.regions) is this_region:
                partners += 1
        return partners == 1


# ----------------------------------------------------------------------
#  DISPATCH
# ----------------------------------------------------------------------

def check_for(kind) -> Optional[ElementCheck]:
    """Fresh check instance for an element kind, or None if unregistered."""
    match kind:
        case ElementKind.HEXAGON:
            return HexagonCheck()
        case ElementKind.WHITE_SQUARE | ElementKind.BLACK_SQUARE:
            return SquareCheck()
        case ElementKind.STAR:
            return StarCheck()
        case _:
            return None


def requires_regions(elements: Sequence[Element]) -> bool:
    for e in elements:
        check = check_for(e.kind)
        if check is not None and check.requires_regions:
            return True
    return False
