from typing import Iterable, List, Optional, Tuple

from linepuzzle.models.node import Node
from linepuzzle.utils.geometry import point_in_polygon, point_on_polygon_edge


class NodeLoop:
    """
    Ordered sequence of nodes describing a polygon.

    A loop is closed once its last node is its first node again; the
    repeated node stays in `nodes`, as in the traced sequence.
    """

    def __init__(self, nodes: Optional[Iterable[Node]] = None):
        self.nodes: List[Node] = list(nodes or [])

    # ------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------
    @property
    def closed(self) -> bool:
        return len(self.nodes) > 1 and self.nodes[0] == self.nodes[-1]

    @property
    def vertices(self) -> List[Node]:
        """Nodes without the closing repeat."""
        return self.nodes[:-1] if self.closed else list(self.nodes)

    def positions(self) -> List[Tuple[float, float]]:
        return [n.pos for n in self.nodes]

    def contains_node(self, n: Node) -> bool:
        return n in self.nodes

    def __contains__(self, n: Node) -> bool:
        return n in self.nodes

    def __len__(self):
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)

    # ------------------------------------------------------------
    # Neighbourhood along the loop
    # ------------------------------------------------------------
    def neighbors_of(self, n: Node) -> List[Node]:
        """
        Nodes next to n along this loop.

        Closed loops wrap around; open ones (seed fragments, regions still
        growing) only link consecutive entries.
        """
        ring = self.vertices
        if n not in ring:
            return []

        i = ring.index(n)
        out = []
        if self.closed:
            out.append(ring[i - 1])
            out.append(ring[(i + 1) % len(ring)])
        else:
            if i > 0:
                out.append(ring[i - 1])
            if i + 1 < len(ring):
                out.append(ring[i + 1])
        return out

    def is_edge(self, a: Node, b: Node) -> bool:
        """True if a and b are consecutive along the loop."""
        return b in self.neighbors_of(a)

    def edges(self) -> List[Tuple[Node, Node]]:
        return list(zip(self.nodes, self.nodes[1:]))

    # ------------------------------------------------------------
    # Point membership
    # ------------------------------------------------------------
    def contains_point(self, p) -> bool:
        """Even-odd ray casting over the node positions."""
        return point_in_polygon(p, self.positions())

    def touches_point(self, p) -> bool:
        """True if p lies on one of the loop's edges."""
        return point_on_polygon_edge(p, self.positions())

    def strictly_contains(self, p) -> bool:
        return self.contains_point(p) and not self.touches_point(p)

    def same_nodes(self, other: "NodeLoop") -> bool:
        """Same node count and same node set."""
        return len(self.nodes) == len(other.nodes) and set(self.nodes) == set(other.nodes)

    def __repr__(self):
        ids = ", ".join(str(n.id) for n in self.nodes)
        return f"{type(self).__name__}([{ids}], closed={self.closed})"


class Boundary(NodeLoop):
    """
    Outer polygon of the playable graph. Built once, then read only.
    """

    def __init__(self, nodes: Iterable[Node]):
        super().__init__(nodes)
        self._members = frozenset(self.nodes)

    def contains_node(self, n: Node) -> bool:
        return n in self._members

    def __contains__(self, n: Node) -> bool:
        return n in self._members


class Region(NodeLoop):
    """
    Sub-polygon of the boundary carved out by a candidate path.

    Starts as a seed fragment of the path and grows until closed.
    Regions live for a single test attempt.
    """

    def __init__(self, seed: Iterable[Node]):
        super().__init__(seed)
        self.seed_length = len(self.nodes)

    def seed(self) -> List[Node]:
        return self.nodes[:self.seed_length]

    def reset(self):
        """Drop everything grown since the seed."""
        del self.nodes[self.seed_length:]
