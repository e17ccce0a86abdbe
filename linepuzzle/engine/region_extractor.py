"""
Region extraction: splits the bounded area into the closed regions cut out
by a candidate path.

This module provides:
    • RegionExtractor(boundary, board, rng, ...).extract(path)
    • find_seeds(path, boundary)
    • surrounding_region(point, regions)
    • regions_complete(regions)

Growth order is randomized. A bad early choice is recovered by retrying
the region from its seed, up to MAX_REGION_ATTEMPTS times.
"""

import logging
import random
from typing import List, Optional, Sequence

from linepuzzle.config import get_active_params
from linepuzzle.models.graph import Graph
from linepuzzle.models.node import Node
from linepuzzle.models.node_loop import Boundary, Region
from linepuzzle.utils.geometry import midpoint

logger = logging.getLogger(__name__)


# ========================================================================
# 1. SEEDS (path fragments crossing the interior)
# ========================================================================

def _along_boundary(u: Node, v: Node, boundary: Boundary) -> bool:
    return boundary.contains_node(u) and boundary.contains_node(v) and boundary.is_edge(u, v)


def find_seeds(path: Sequence[Node], boundary: Boundary) -> List[List[Node]]:
    """
    Sub-paths that leave the boundary and come back to it.

    A segment leaves the boundary when it starts on a boundary node but does
    not run along a boundary edge, and returns when it ends on a boundary
    node without running along a boundary edge. A direct chord between two
    boundary nodes is therefore a two-node seed.

    Fragments before the first boundary touch or after the last one are
    spurs: they do not split anything and produce no seed.
    """
    seeds = []
    seed_start = None

    for i in range(1, len(path)):
        u, v = path[i - 1], path[i]
        if _along_boundary(u, v, boundary):
            continue

        if boundary.contains_node(u):
            seed_start = i - 1  # left the boundary

        if boundary.contains_node(v) and seed_start is not None:
            seeds.append(list(path[seed_start:i + 1]))  # came back
            seed_start = None

    return seeds


# ========================================================================
# 2. REGION LOOKUP
# ========================================================================

def surrounding_region(point, regions: Sequence[Region]) -> Optional[Region]:
    """
    The closed region strictly containing point.

    None means the point lies in no extracted region, i.e. in the remainder
    of the board that no seed claimed. Two points both mapping to None share
    that remainder region.
    """
    for r in regions:
        if r.closed and r.contains_point(point):
            return r
    return None


def regions_complete(regions: Sequence[Region]) -> bool:
    return all(r.closed for r in regions)


# ========================================================================
# 3. EXTRACTOR
# ========================================================================

class RegionExtractor:
    """
    Grows one region from every seed of a path.

    `board` is the full puzzle graph including any synthetic corner nodes,
    so region walks can pass through corners that were missing in the
    authored data.
    """

    def __init__(
        self,
        boundary: Boundary,
        board: Graph,
        rng: Optional[random.Random] = None,
        max_attempts: Optional[int] = None,
        max_passes: Optional[int] = None,
    ):
        params = get_active_params()
        self.boundary = boundary
        self.board = board
        self.rng = rng if rng is not None else random.Random(params["RANDOM_SEED"])
        self.max_attempts = max_attempts if max_attempts is not None else params["MAX_REGION_ATTEMPTS"]
        self.max_passes = max_passes if max_passes is not None else params["MAX_EXTRACTION_PASSES"]

    # ------------------------------------------------------------
    # Public entry point
    # ------------------------------------------------------------
    def extract(self, path: Sequence[Node]) -> List[Region]:
        """
        Regions cut out by path. Regions whose growth exhausted every retry
        are returned open; callers must treat them as unusable.
        """
        seeds = find_seeds(path, self.boundary)
        interior_segments = [
            (seed[k], seed[k + 1]) for seed in seeds for k in range(len(seed) - 1)
        ]

        regions: List[Region] = []
        for n_pass in range(1, max(1, self.max_passes) + 1):
            regions = [Region(seed) for seed in seeds]
            for i in range(len(regions)):
                self._grow(i, regions, interior_segments)

            if regions_complete(regions):
                break
            logger.warning(
                "Region extraction pass %d left %d open regions",
                n_pass, sum(1 for r in regions if not r.closed),
            )

        return regions

    # ------------------------------------------------------------
    # Growth with bounded retry
    # ------------------------------------------------------------
    def _grow(self, index: int, regions: List[Region], interior_segments) -> bool:
        region = regions[index]
        attempt = 0

        while attempt < self.max_attempts:
            attempt += 1
            while not region.closed:
                step = self._next_node(index, regions)
                if step is None:
                    break
                region.nodes.append(step)

            if region.closed and self._is_new_face(index, regions, interior_segments):
                logger.debug("Region %d created in %d tries", index, attempt)
                return True

            # error, try again
            region.reset()

        logger.warning("Region %d FAILED in %d tries", index, attempt)
        return False

    def _next_node(self, index: int, regions: List[Region]) -> Optional[Node]:
        """
        Next node for the region's open end, by priority:

          a. close the loop when the first node is adjacent
          b. walk along another region (or seed) next to the current node
          c. walk along a boundary edge

        A boundary edge borders a single face, so one already used by a
        closed region is never taken again.
        """
        region = regions[index]
        current = region.nodes[-1]
        first = region.nodes[0]

        candidates = self.board.adjacent_nodes(current)
        self.rng.shuffle(candidates)

        if len(region.nodes) > 2 and first in candidates:
            return first

        fresh = [
            c for c in candidates
            if c not in region and not self._claimed_boundary_edge(index, regions, current, c)
        ]

        for c in fresh:
            for j, other in enumerate(regions):
                if j == index:
                    continue
                if c in other.neighbors_of(current):
                    return c

        for c in fresh:
            if _along_boundary(current, c, self.boundary):
                return c

        return None

    def _claimed_boundary_edge(self, index: int, regions: List[Region], u: Node, v: Node) -> bool:
        if not _along_boundary(u, v, self.boundary):
            return False
        return any(
            r.closed and r.is_edge(u, v)
            for j, r in enumerate(regions) if j != index
        )

    def _is_new_face(self, index: int, regions: List[Region], interior_segments) -> bool:
        """
        A closed region is accepted only if it is a face of the cut board:
        it must not repeat an earlier region, and no interior path segment
        it does not use may run through its inside.
        """
        region = regions[index]

        for j in range(index):
            if regions[j].closed and region.same_nodes(regions[j]):
                return False  # double region

        for u, v in interior_segments:
            if region.is_edge(u, v):
                continue
            if region.strictly_contains(midpoint(u.pos, v.pos)):
                return False  # swallowed another wall

        return True
