"""Layout operations: alignment, distribution and YAML arrangements."""

from .alignment import (
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
from .loader import Arrangement, ArrangementLoader

__all__ = [
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
    "Arrangement",
    "ArrangementLoader",
]
