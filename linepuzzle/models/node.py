from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

Point2D = Tuple[float, float]


class NodeKind(Enum):
    NORMAL = "normal"
    START = "start"
    END = "end"


@dataclass(frozen=True)
class Node:
    """
    A graph vertex.

    Nodes are handles: equality and hashing use `id` only, so two nodes at
    the same position are still different nodes. Adjacency and path
    membership always go through the id, never through the position.

    `synthetic` marks corner nodes added while building the boundary.
    """

    id: int
    pos: Point2D = field(compare=False)
    kind: NodeKind = field(default=NodeKind.NORMAL, compare=False)
    synthetic: bool = field(default=False, compare=False)

    @property
    def x(self) -> float:
        return self.pos[0]

    @property
    def y(self) -> float:
        return self.pos[1]

    @property
    def is_start(self) -> bool:
        return self.kind is NodeKind.START

    @property
    def is_end(self) -> bool:
        return self.kind is NodeKind.END

    def __repr__(self):
        tag = "*" if self.synthetic else ""
        return f"Node({self.id}{tag}, pos={self.pos}, {self.kind.value})"
