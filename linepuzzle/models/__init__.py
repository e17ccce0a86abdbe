"""
Data Models

Defines the core data structures:
- Node / NodeKind
- Edge / Graph
- Element / ElementKind
- Boundary / Region
"""

from .node import Node, NodeKind
from .graph import Edge, Graph
from .element import Element, ElementKind
from .node_loop import NodeLoop, Boundary, Region

__all__ = [
    "Node",
    "NodeKind",
    "Edge",
    "Graph",
    "Element",
    "ElementKind",
    "NodeLoop",
    "Boundary",
    "Region",
]
