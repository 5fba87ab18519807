"""Core geometry: vectors, anchors and diagrams."""

from .vector import Vector2, V2
from .anchors import Anchor, ANCHOR_POSITIONS, parse_anchor, resolve_anchor
from .diagram import Diagram, Shape, Group, combine, rectangle, square

__all__ = [
    "Vector2",
    "V2",
    "Anchor",
    "ANCHOR_POSITIONS",
    "parse_anchor",
    "resolve_anchor",
    "Diagram",
    "Shape",
    "Group",
    "combine",
    "rectangle",
    "square",
]
