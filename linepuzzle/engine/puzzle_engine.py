"""
Puzzle engine: one-time initialization plus per-attempt path testing.

This module provides:
    • PuzzleEngine(graph, elements, rng).init()
    • PuzzleEngine.test(path) -> (passed, regions)
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from linepuzzle.config import get_active_params
from linepuzzle.engine.boundary_builder import BoundaryBuilder
from linepuzzle.engine.element_checks import check_for, requires_regions
from linepuzzle.engine.region_extractor import RegionExtractor
from linepuzzle.errors import (
    BoundaryGenerationFailed,
    ElementOutOfBounds,
    InvalidGraphError,
    PuzzleError,
)
from linepuzzle.models.element import Element, ElementKind
from linepuzzle.models.graph import Graph
from linepuzzle.models.node import Node
from linepuzzle.models.node_loop import Boundary, Region

logger = logging.getLogger(__name__)


class PuzzleEngine:
    """
    Holds one puzzle (graph + elements) and tests candidate paths.

    Call init() once before anything else. Any initialization problem
    leaves the engine permanently unusable: test() then always fails.
    """

    def __init__(
        self,
        graph: Graph,
        elements: Optional[Sequence[Element]] = None,
        rng: Optional[random.Random] = None,
        name: str = "puzzle",
    ):
        self.graph = graph
        self.elements: List[Element] = list(elements or [])
        self.name = name
        self.rng = rng if rng is not None else random.Random(get_active_params()["RANDOM_SEED"])

        self.boundary: Optional[Boundary] = None
        self.board: Optional[Graph] = None  # graph + synthesized corners
        self.bounds_low = (0.0, 0.0)
        self.bounds_high = (0.0, 0.0)
        self.init_errors: List[PuzzleError] = []
        self._valid = False

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def init(self) -> bool:
        """
        Validate the graph, build the boundary and check element placement.
        Returns True if the puzzle is usable.
        """
        self._valid = False
        self.boundary = None
        self.board = None
        self.init_errors = []

        try:
            self.graph.validate()
        except InvalidGraphError as e:
            self.init_errors.extend(e.errors)
            logger.error("No valid puzzle data found in %s", self.name)
            return False

        builder = BoundaryBuilder(self.graph.bounded_copy(), next_id=self.graph.next_id())
        try:
            boundary = builder.build()
        except BoundaryGenerationFailed as e:
            self.init_errors.append(e)
            logger.error("Failed to generate puzzle bounds for %s: %s", self.name, e)
            return False

        self.bounds_low = builder.bounds_low
        self.bounds_high = builder.bounds_high

        misplaced = self._misplaced_elements(boundary)
        if misplaced:
            self.init_errors.extend(misplaced)
            for err in misplaced:
                logger.warning("%s: %s", self.name, err)
            return False

        board = Graph(
            self.graph.nodes + builder.synthesized_nodes,
            self.graph.edges + builder.synthesized_edges,
        )

        self.boundary = boundary
        self.board = board
        self._valid = True
        logger.info(
            "Puzzle %s ready: %d nodes, %d boundary nodes, %d elements",
            self.name, len(self.graph.nodes), len(boundary.vertices), len(self.elements),
        )
        return True

    def _misplaced_elements(self, boundary: Boundary) -> List[ElementOutOfBounds]:
        """
        Hexagons sit on the lines, so they may lie on the boundary itself;
        every other element must be strictly inside.
        """
        errors = []
        for i, e in enumerate(self.elements):
            if e.kind is ElementKind.HEXAGON:
                ok = boundary.touches_point(e.pos) or boundary.contains_point(e.pos)
            else:
                ok = boundary.strictly_contains(e.pos)
            if not ok:
                errors.append(ElementOutOfBounds(
                    f"Element {i} ({e.kind.value}) at {e.pos} is outside of puzzle bounds"
                ))
        return errors

    @property
    def is_valid(self) -> bool:
        return self._valid

    # ------------------------------------------------------------------
    # Queries for the input / presentation layer
    # ------------------------------------------------------------------

    def adjacent_nodes(self, node: Node) -> List[Node]:
        return self.graph.adjacent_nodes(node)

    def start_node(self) -> Node:
        return self.graph.start_node()

    def node_connections(self):
        return self.graph.node_connections()

    # ------------------------------------------------------------------
    # Testing
    # ------------------------------------------------------------------

    def is_complete_path(self, path: Sequence[Node]) -> bool:
        """
        A path from the start node to an end node along edges, never
        visiting a node twice and touching no other end node on the way.
        """
        if len(path) < 2:
            return False
        if not path[0].is_start or not path[-1].is_end:
            return False
        if any(n.is_end for n in path[:-1]):
            return False  # reaching an end node finishes the line
        if len(set(path)) != len(path):
            return False
        for a, b in zip(path, path[1:]):
            if b not in self.graph.adjacent_nodes(a):
                return False
        return True

    def extract_regions(self, path: Sequence[Node]) -> List[Region]:
        extractor = RegionExtractor(self.boundary, self.board, rng=self.rng)
        return extractor.extract(path)

    def test(self, path: Sequence[Node]) -> Tuple[bool, List[Region]]:
        """
        Test a completed path against every element.

        Returns (passed, regions). The regions are only for diagnostics;
        they are empty when no element needs them.
        """
        regions: List[Region] = []
        if not self._valid:
            return False, regions  # invalid data or uninitialized
        if not self.is_complete_path(path):
            logger.warning("Rejected incomplete path of %d nodes in %s", len(path), self.name)
            return False, regions
        if not self.elements:
            return True, regions  # no test needed

        if requires_regions(self.elements):
            regions = self.extract_regions(path)

        for e in self.elements:
            check = check_for(e.kind)
            if check is None:
                logger.error("No test found for element type: %s", e.kind)
                return False, regions

            check.setup(self, regions)
            if not check.check(e, path):
                logger.debug("Element %s failed in %s", e, self.name)
                return False, regions

        return True, regions

    def __repr__(self):
        return f"PuzzleEngine({self.name}, valid={self._valid})"
