"""
Outer boundary tracing for a puzzle graph.

This module provides:
    • BoundaryBuilder(bounded_graph, next_id).build()

The builder works on the bounded copy of the puzzle graph (see
Graph.bounded_copy) and may add synthetic corner nodes to it.
"""

import logging
from typing import List, Optional

from linepuzzle.errors import BoundaryGenerationFailed
from linepuzzle.models.graph import Edge, Graph
from linepuzzle.models.node import Node
from linepuzzle.models.node_loop import Boundary
from linepuzzle.utils.geometry import (
    bounding_box,
    distance,
    point_in_polygon,
    point_on_polygon_edge,
    points_close,
    values_close,
)

logger = logging.getLogger(__name__)


class BoundaryBuilder:
    """
    Computes the Boundary polygon of a bounded graph.

      1. bounding box of the bounded nodes
      2. find or synthesize a node at each box corner (BL, TL, TR, BR)
      3. trace the perimeter from the bottom-left corner, always stepping
         to the neighbour farthest from the box centre
      4. verify the loop closed and encloses every bounded node

    The farthest-point rule assumes the outline has no concavity deep
    enough to make an inner node the farthest candidate. That is an
    authoring constraint and is not checked here.
    """

    def __init__(self, graph: Graph, next_id: Optional[int] = None):
        # work on a copy: synthetic corners must not leak into the caller's graph
        self.graph = graph.copy()
        self._next_id = next_id if next_id is not None else graph.next_id()

        self.bounds_low = (0.0, 0.0)
        self.bounds_high = (0.0, 0.0)
        self.synthesized_nodes: List[Node] = []
        self.synthesized_edges: List[Edge] = []

    # ------------------------------------------------------------
    # Public entry point
    # ------------------------------------------------------------
    def build(self) -> Boundary:
        if len(self.graph.nodes) < 3:
            raise BoundaryGenerationFailed(
                f"Need at least 3 bounded nodes, got {len(self.graph.nodes)}"
            )

        self.bounds_low, self.bounds_high = bounding_box([n.pos for n in self.graph.nodes])
        corners = self._find_corners()
        boundary = self._trace(corners[0])
        self._check_enclosure(boundary)

        logger.debug(
            "Boundary traced with %d nodes (%d synthesized corners)",
            len(boundary.vertices), len(self.synthesized_nodes),
        )
        return boundary

    @property
    def center(self):
        return (
            (self.bounds_low[0] + self.bounds_high[0]) / 2.0,
            (self.bounds_low[1] + self.bounds_high[1]) / 2.0,
        )

    # ------------------------------------------------------------
    # Corners
    # ------------------------------------------------------------
    def corner_positions(self):
        """Bounding-box corners: bottom-left, top-left, top-right, bottom-right."""
        (lx, ly), (hx, hy) = self.bounds_low, self.bounds_high
        return [(lx, ly), (lx, hy), (hx, hy), (hx, ly)]

    def _find_corners(self) -> List[Node]:
        corners = []
        for corner in self.corner_positions():
            found = None
            for n in self.graph.nodes:
                if points_close(n.pos, corner):
                    found = n
                    break
            if found is None:
                found = self._synthesize_corner(corner)
            corners.append(found)
        return corners

    def _synthesize_corner(self, corner) -> Node:
        """
        Add a node at a missing corner and connect it to the nearest node
        on the corner's vertical side and on its horizontal side.
        """
        cx, cy = corner
        vertical = [
            n for n in self.graph.nodes
            if values_close(n.x, cx) and not values_close(n.y, cy)
        ]
        horizontal = [
            n for n in self.graph.nodes
            if values_close(n.y, cy) and not values_close(n.x, cx)
        ]
        if not vertical or not horizontal:
            raise BoundaryGenerationFailed(
                f"Cannot synthesize corner at {corner}: no nodes along both adjacent sides"
            )

        nb = min(vertical, key=lambda n: distance(corner, n.pos))
        nc = min(horizontal, key=lambda n: distance(corner, n.pos))

        node = self.graph.add_node(corner, synthetic=True, node_id=self._next_id)
        self._next_id += 1
        self.synthesized_nodes.append(node)
        self.synthesized_edges.append(self.graph.add_edge(node, nb))
        self.synthesized_edges.append(self.graph.add_edge(node, nc))

        logger.info("Synthesized missing corner node %d at %s", node.id, corner)
        return node

    # ------------------------------------------------------------
    # Perimeter trace
    # ------------------------------------------------------------
    def _trace(self, start: Node) -> Boundary:
        center = self.center
        traced = [start]
        current = start

        # every step adds an untraced node, so this is bounded by the node count
        while True:
            step = None
            max_dist = 0.0
            for n in self.graph.adjacent_nodes(current):
                if n == start and len(traced) >= 3:
                    step = n
                    break  # close loop
                if n in traced:
                    continue  # double back
                d = distance(center, n.pos)
                if step is None or d > max_dist:
                    max_dist = d
                    step = n

            if step is None:
                raise BoundaryGenerationFailed(
                    f"Boundary trace stuck at node {current.id} after {len(traced)} nodes"
                )

            traced.append(step)
            current = step
            if current == start:
                break

        if len(traced) < 4:
            raise BoundaryGenerationFailed(f"Boundary too small ({len(traced)} nodes)")
        return Boundary(traced)

    def _check_enclosure(self, boundary: Boundary):
        """Every bounded node must lie inside or on the traced polygon."""
        polygon = boundary.positions()
        outside = [
            n for n in self.graph.nodes
            if n not in boundary
            and not point_on_polygon_edge(n.pos, polygon)
            and not point_in_polygon(n.pos, polygon)
        ]
        if outside:
            ids = ", ".join(str(n.id) for n in outside)
            raise BoundaryGenerationFailed(f"Nodes outside the traced boundary: {ids}")
