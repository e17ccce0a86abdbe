import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple, Union

from linepuzzle.errors import (
    BadPathIndex,
    DuplicateEdge,
    InvalidGraphError,
    MissingEndNode,
    MissingStartNode,
    NodeOverlap,
)
from linepuzzle.models.node import Node, NodeKind
from linepuzzle.utils.geometry import points_close

logger = logging.getLogger(__name__)

NodeRef = Union[Node, int]


@dataclass(frozen=True)
class Edge:
    """Undirected connection between two node ids."""

    a: int
    b: int

    def key(self) -> frozenset:
        return frozenset((self.a, self.b))

    def other(self, node_id: int) -> int:
        return self.b if node_id == self.a else self.a


def _node_id(n: NodeRef) -> int:
    return n.id if isinstance(n, Node) else int(n)


class Graph:
    """
    Nodes plus undirected edges.

    Supports:
      - adjacency queries (cached, rebuilt after mutation)
      - start / end node lookup
      - full invariant validation, reporting every problem at once
      - the bounded copy used to trace the outer boundary

    Edges hold node ids. An edge whose endpoints do not resolve is kept (so
    validate() can report it) but ignored by adjacency queries.
    """

    def __init__(self, nodes: Optional[Iterable[Node]] = None, edges: Optional[Iterable[Edge]] = None):
        self.nodes: List[Node] = list(nodes or [])
        self.edges: List[Edge] = list(edges or [])
        self._adjacency: Optional[Dict[int, List[Node]]] = None
        self._by_id: Optional[Dict[int, Node]] = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def next_id(self) -> int:
        return max((n.id for n in self.nodes), default=-1) + 1

    def add_node(self, pos, kind: NodeKind = NodeKind.NORMAL, synthetic: bool = False, node_id=None) -> Node:
        if node_id is None:
            node_id = self.next_id()
        node = Node(node_id, (float(pos[0]), float(pos[1])), kind, synthetic)
        self.nodes.append(node)
        self._adjacency = None
        self._by_id = None
        return node

    def add_edge(self, a: NodeRef, b: NodeRef) -> Edge:
        edge = Edge(_node_id(a), _node_id(b))
        self.edges.append(edge)
        self._adjacency = None
        return edge

    def copy(self) -> "Graph":
        """Structural copy; node handles are shared."""
        return Graph(self.nodes, self.edges)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def node(self, node_id: int) -> Optional[Node]:
        return self._index().get(node_id)

    def __contains__(self, n: Node) -> bool:
        return self.node(n.id) is not None

    def _index(self) -> Dict[int, Node]:
        if self._by_id is None:
            self._by_id = {n.id: n for n in self.nodes}
        return self._by_id

    def _build_adjacency(self) -> Dict[int, List[Node]]:
        index = self._index()
        adjacency: Dict[int, List[Node]] = {n.id: [] for n in self.nodes}
        for e in self.edges:
            na, nb = index.get(e.a), index.get(e.b)
            if na is None or nb is None or na == nb:
                continue
            adjacency[na.id].append(nb)
            adjacency[nb.id].append(na)
        return adjacency

    def adjacent_nodes(self, n: Node) -> List[Node]:
        """
        All nodes connected to n by an edge, in edge order.
        Empty for a node that is not part of this graph.
        """
        if self._adjacency is None:
            self._adjacency = self._build_adjacency()
        return list(self._adjacency.get(n.id, []))

    def degree(self, n: Node) -> int:
        return len(self.adjacent_nodes(n))

    def start_node(self) -> Node:
        for n in self.nodes:
            if n.is_start:
                return n
        raise MissingStartNode()

    def end_nodes(self) -> List[Node]:
        return [n for n in self.nodes if n.is_end]

    def node_connections(self) -> List[Tuple[Node, Node]]:
        """Resolved (node, node) pairs for every valid edge."""
        index = self._index()
        pairs = []
        for e in self.edges:
            if e.a in index and e.b in index:
                pairs.append((index[e.a], index[e.b]))
        return pairs

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self):
        """
        Check every graph invariant and raise InvalidGraphError listing all
        violations. All checks run to completion.
        """
        errors = []
        index = self._index()

        # edge endpoints
        for i, e in enumerate(self.edges):
            if e.a not in index or e.b not in index:
                errors.append(BadPathIndex(f"Edge {i} ({e.a}, {e.b}) references an unknown node"))
            elif e.a == e.b:
                errors.append(BadPathIndex(f"Edge {i} joins node {e.a} to itself"))

        # duplicate edges, either order
        seen: Dict[frozenset, int] = {}
        for i, e in enumerate(self.edges):
            k = e.key()
            if k in seen:
                errors.append(DuplicateEdge(f"Edge {i} ({e.a}, {e.b}) duplicates edge {seen[k]}"))
            else:
                seen[k] = i

        # overlapping positions
        for i, n in enumerate(self.nodes):
            for other in self.nodes[i + 1:]:
                if points_close(n.pos, other.pos):
                    errors.append(NodeOverlap(f"Nodes {n.id} and {other.id} overlap at {n.pos}"))

        if not any(n.is_start for n in self.nodes):
            errors.append(MissingStartNode())
        if not self.end_nodes():
            errors.append(MissingEndNode())

        for err in errors:
            logger.error("%s: %s", type(err).__name__, err)

        if errors:
            raise InvalidGraphError(errors)

    # ------------------------------------------------------------------
    # Bounded copy
    # ------------------------------------------------------------------

    def bounded_copy(self) -> "Graph":
        """
        Copy of the nodes that make up the playable area.

        End nodes are dropped, and so is the start node unless it is
        "inline" (more than one incident edge). Terminal nodes usually
        dangle outside the board and must not distort its outer shape.
        Edges survive only when both endpoints do.
        """
        inline_start = self.degree(self.start_node()) > 1

        kept = []
        for n in self.nodes:
            if n.is_end or (n.is_start and not inline_start):
                continue
            kept.append(n)

        kept_ids = {n.id for n in kept}
        edges = [e for e in self.edges if e.a in kept_ids and e.b in kept_ids]
        return Graph(kept, edges)

    def __repr__(self):
        return f"Graph(nodes={len(self.nodes)}, edges={len(self.edges)})"
