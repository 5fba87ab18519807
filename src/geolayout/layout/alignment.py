"""Alignment and distribution of diagram sequences.

Every function here is pure: diagrams are only ever moved through
``translate``, so shapes are preserved and inputs are left untouched.
Alignment is relative to the first diagram; distribution chains each
diagram off the already placed one before it.
"""

import logging
from enum import Enum
from typing import Sequence

from ..core.anchors import Anchor
from ..core.diagram import Diagram, Group, combine
from ..core.vector import V2

logger = logging.getLogger(__name__)


class VerticalAlignment(str, Enum):
    """Which horizontal line diagrams share after vertical alignment."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class HorizontalAlignment(str, Enum):
    """Which vertical line diagrams share after horizontal alignment."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


VERTICAL_ANCHORS: dict[VerticalAlignment, Anchor] = {
    VerticalAlignment.TOP: Anchor.TOP_LEFT,
    VerticalAlignment.CENTER: Anchor.CENTER_LEFT,
    VerticalAlignment.BOTTOM: Anchor.BOTTOM_LEFT,
}

HORIZONTAL_ANCHORS: dict[HorizontalAlignment, Anchor] = {
    HorizontalAlignment.LEFT: Anchor.TOP_LEFT,
    HorizontalAlignment.CENTER: Anchor.TOP_CENTER,
    HorizontalAlignment.RIGHT: Anchor.TOP_RIGHT,
}


def _vertical(alignment: VerticalAlignment | str) -> VerticalAlignment:
    try:
        return VerticalAlignment(alignment)
    except ValueError:
        raise ValueError(f"Unknown vertical alignment: {alignment!r}") from None


def _horizontal(alignment: HorizontalAlignment | str) -> HorizontalAlignment:
    try:
        return HorizontalAlignment(alignment)
    except ValueError:
        raise ValueError(f"Unknown horizontal alignment: {alignment!r}") from None


def align_vertical(
    diagrams: Sequence[Diagram],
    alignment: VerticalAlignment | str = VerticalAlignment.CENTER,
) -> list[Diagram]:
    """Align diagrams vertically, following the first diagram.

    Args:
        diagrams: Diagrams to align
        alignment: 'top', 'center' or 'bottom'

    Returns:
        New list of diagrams whose chosen edge (or center line) shares the
        first diagram's y coordinate. X positions are unchanged.

    Raises:
        ValueError: If ``alignment`` is not a vertical alignment
    """
    anchor = VERTICAL_ANCHORS[_vertical(alignment)]
    if not diagrams:
        return []

    ref_y = diagrams[0].get_anchor(anchor).y
    logger.debug("align_vertical: %d diagrams to %s y=%g", len(diagrams), anchor.value, ref_y)
    return [d.translate(V2(0, ref_y - d.get_anchor(anchor).y)) for d in diagrams]


def align_horizontal(
    diagrams: Sequence[Diagram],
    alignment: HorizontalAlignment | str = HorizontalAlignment.CENTER,
) -> list[Diagram]:
    """Align diagrams horizontally, following the first diagram.

    Args:
        diagrams: Diagrams to align
        alignment: 'left', 'center' or 'right'

    Returns:
        New list of diagrams sharing the first diagram's x coordinate at the
        chosen anchor. Y positions are unchanged.

    Raises:
        ValueError: If ``alignment`` is not a horizontal alignment
    """
    anchor = HORIZONTAL_ANCHORS[_horizontal(alignment)]
    if not diagrams:
        return []

    ref_x = diagrams[0].get_anchor(anchor).x
    logger.debug("align_horizontal: %d diagrams to %s x=%g", len(diagrams), anchor.value, ref_x)
    return [d.translate(V2(ref_x - d.get_anchor(anchor).x, 0)) for d in diagrams]


def distribute_horizontal(diagrams: Sequence[Diagram], space: float = 0) -> list[Diagram]:
    """Distribute diagrams left to right.

    Each diagram's left edge is placed ``space`` units right of the right
    edge of the previous, already placed, diagram. The first diagram stays
    where it is.

    Args:
        diagrams: Diagrams to distribute
        space: Gap between neighbours (may be negative)

    Returns:
        New list of distributed diagrams
    """
    if not diagrams:
        return []

    logger.debug("distribute_horizontal: %d diagrams, space=%s", len(diagrams), space)
    distributed: list[Diagram] = [diagrams[0]]
    for this in diagrams[1:]:
        prev_right = distributed[-1].get_anchor(Anchor.TOP_RIGHT).x
        this_left = this.get_anchor(Anchor.TOP_LEFT).x
        dx = prev_right - this_left + space
        distributed.append(this.translate(V2(dx, 0)))
    return distributed


def distribute_vertical(diagrams: Sequence[Diagram], space: float = 0) -> list[Diagram]:
    """Distribute diagrams top to bottom.

    Each diagram's top edge is placed ``space`` units below the bottom edge
    of the previous, already placed, diagram.

    Args:
        diagrams: Diagrams to distribute
        space: Gap between neighbours (may be negative)

    Returns:
        New list of distributed diagrams
    """
    if not diagrams:
        return []

    logger.debug("distribute_vertical: %d diagrams, space=%s", len(diagrams), space)
    distributed: list[Diagram] = [diagrams[0]]
    for this in diagrams[1:]:
        prev_bottom = distributed[-1].get_anchor(Anchor.BOTTOM_LEFT).y
        this_top = this.get_anchor(Anchor.TOP_LEFT).y
        # y points up, so subtracting the gap moves the next diagram down
        dy = prev_bottom - this_top - space
        distributed.append(this.translate(V2(0, dy)))
    return distributed


def distribute_horizontal_and_align(
    diagrams: Sequence[Diagram],
    horizontal_space: float = 0,
    alignment: VerticalAlignment | str = VerticalAlignment.CENTER,
) -> list[Diagram]:
    """Vertically align diagrams, then distribute them horizontally."""
    return distribute_horizontal(align_vertical(diagrams, alignment), horizontal_space)


def distribute_vertical_and_align(
    diagrams: Sequence[Diagram],
    vertical_space: float = 0,
    alignment: HorizontalAlignment | str = HorizontalAlignment.CENTER,
) -> list[Diagram]:
    """Horizontally align diagrams, then distribute them vertically."""
    return distribute_vertical(align_horizontal(diagrams, alignment), vertical_space)


# Variants that combine the result into a single Group

def align_vertical_c(
    diagrams: Sequence[Diagram],
    alignment: VerticalAlignment | str = VerticalAlignment.CENTER,
) -> Group:
    return combine(*align_vertical(diagrams, alignment))


def align_horizontal_c(
    diagrams: Sequence[Diagram],
    alignment: HorizontalAlignment | str = HorizontalAlignment.CENTER,
) -> Group:
    return combine(*align_horizontal(diagrams, alignment))


def distribute_horizontal_c(diagrams: Sequence[Diagram], space: float = 0) -> Group:
    return combine(*distribute_horizontal(diagrams, space))


def distribute_vertical_c(diagrams: Sequence[Diagram], space: float = 0) -> Group:
    return combine(*distribute_vertical(diagrams, space))


def distribute_horizontal_and_align_c(
    diagrams: Sequence[Diagram],
    horizontal_space: float = 0,
    alignment: VerticalAlignment | str = VerticalAlignment.CENTER,
) -> Group:
    return combine(*distribute_horizontal_and_align(diagrams, horizontal_space, alignment))


def distribute_vertical_and_align_c(
    diagrams: Sequence[Diagram],
    vertical_space: float = 0,
    alignment: HorizontalAlignment | str = HorizontalAlignment.CENTER,
) -> Group:
    return combine(*distribute_vertical_and_align(diagrams, vertical_space, alignment))


# Base operations by name, used by the arrangement loader
OPERATIONS = {
    "align_vertical": align_vertical,
    "align_horizontal": align_horizontal,
    "distribute_horizontal": distribute_horizontal,
    "distribute_vertical": distribute_vertical,
    "distribute_horizontal_and_align": distribute_horizontal_and_align,
    "distribute_vertical_and_align": distribute_vertical_and_align,
}
