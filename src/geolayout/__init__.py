"""Alignment and distribution of 2D diagrams."""

from .core import Anchor, Diagram, Group, Shape, V2, Vector2, combine, rectangle, square
from .layout import (
    Arrangement,
    ArrangementLoader,
    HorizontalAlignment,
    VerticalAlignment,
    align_horizontal,
    align_horizontal_c,
    align_vertical,
    align_vertical_c,
    distribute_horizontal,
    distribute_horizontal_and_align,
    distribute_horizontal_and_align_c,
    distribute_horizontal_c,
    distribute_vertical,
    distribute_vertical_and_align,
    distribute_vertical_and_align_c,
    distribute_vertical_c,
)

__all__ = [
    "Anchor",
    "Diagram",
    "Group",
    "Shape",
    "V2",
    "Vector2",
    "combine",
    "rectangle",
    "square",
    "Arrangement",
    "ArrangementLoader",
    "HorizontalAlignment",
    "VerticalAlignment",
    "align_horizontal",
    "align_horizontal_c",
    "align_vertical",
    "align_vertical_c",
    "distribute_horizontal",
    "distribute_horizontal_and_align",
    "distribute_horizontal_and_align_c",
    "distribute_horizontal_c",
    "distribute_vertical",
    "distribute_vertical_and_align",
    "distribute_vertical_and_align_c",
    "distribute_vertical_c",
]
