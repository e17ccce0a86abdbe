"""
Path bookkeeping for one player attempt.

Tracks the line the player is drawing, node by node, and hands it to the
engine once it reaches an end node. Cursor sampling and drawing stay with
the caller; this class only decides which node the line moves to.
"""

import logging
from typing import List, Optional

from linepuzzle.engine.puzzle_engine import PuzzleEngine
from linepuzzle.models.node import Node
from linepuzzle.models.node_loop import Region
from linepuzzle.utils.geometry import angle_between

logger = logging.getLogger(__name__)


class LineSession:
    def __init__(self, engine: PuzzleEngine):
        self.engine = engine
        self.path: List[Node] = []
        self.completed = False
        self.last_regions: List[Region] = []
        if engine.is_valid:
            self.reset()

    @property
    def current(self) -> Optional[Node]:
        return self.path[-1] if self.path else None

    def reset(self):
        """Back to a single-node line at the start node."""
        self.completed = False
        self.path = [self.engine.start_node()]

    def steer(self, direction) -> Optional[Node]:
        """
        Adjacent node best aligned with the given direction vector, i.e.
        the node the cursor is heading for.
        """
        current = self.current
        if current is None:
            return None

        connected = self.engine.adjacent_nodes(current)
        if not connected:
            return None

        def off_angle(n: Node) -> float:
            to_node = (n.x - current.x, n.y - current.y)
            return angle_between(direction, to_node)

        return min(connected, key=off_angle)

    def back_up(self) -> bool:
        """Remove the last node. The start node is never removed."""
        if self.completed or len(self.path) <= 1:
            return False
        self.path.pop()
        return True

    def hit_node(self, node: Node) -> Optional[bool]:
        """
        Move the line onto node.

        Moving onto the previous node backs up. Non-adjacent or already
        visited nodes are ignored. Reaching an end node tests the line:
        a pass locks the session, a failure resets it to the start.

        Returns the test result when a test ran, otherwise None.
        """
        if self.completed or not self.path:
            return None

        if len(self.path) > 1 and node == self.path[-2]:
            self.back_up()
            return None
        if node in self.path:
            return None  # disallow overlapping
        if node not in self.engine.adjacent_nodes(self.current):
            return None

        self.path.append(node)
        if not node.is_end:
            return None

        passed, self.last_regions = self.engine.test(self.path)
        if passed:
            logger.info("Puzzle %s completed", self.engine.name)
            self.completed = True
        else:
            self.reset()
        return passed
