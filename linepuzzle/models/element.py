from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ElementKind(Enum):
    HEXAGON = "hexagon"
    WHITE_SQUARE = "white_square"
    BLACK_SQUARE = "black_square"
    STAR = "star"


@dataclass(eq=False)
class Element:
    """
    A rule object placed on the board, independent of the node graph.

    Compared by identity: two stars at the same spot are still two stars.
    """

    kind: ElementKind
    pos: Tuple[float, float]

    @property
    def is_square(self) -> bool:
        return self.kind in (ElementKind.WHITE_SQUARE, ElementKind.BLACK_SQUARE)

    def opposite_color(self) -> ElementKind:
        """Kind of square this square must be separated from."""
        match self.kind:
            case ElementKind.WHITE_SQUARE:
                return ElementKind.BLACK_SQUARE
            case ElementKind.BLACK_SQUARE:
                return ElementKind.WHITE_SQUARE
            case _:
                raise ValueError(f"{self.kind.value} has no color")

    def __repr__(self):
        return f"Element({self.kind.value}, pos={self.pos})"
