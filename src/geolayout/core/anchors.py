"""Anchor point system for locating positions on a diagram's bounding box."""

from enum import Enum

import numpy as np
from numpy.typing import NDArray

from .vector import Vector2


class Anchor(str, Enum):
    """Named anchor points on a 3x3 grid over a bounding box.

    Anchors are defined in normalized coordinates (0-1) where:
    - U: 0 = left, 1 = right
    - V: 0 = bottom, 1 = top
    """

    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"

    CENTER_LEFT = "center-left"
    CENTER_CENTER = "center-center"
    CENTER_RIGHT = "center-right"

    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"

    @classmethod
    def _missing_(cls, value: object) -> "Anchor | None":
        if value == "center":
            return cls.CENTER_CENTER
        return None


# Mapping from anchor to normalized coordinates (u, v)
# U: 0=left, 1=right | V: 0=bottom, 1=top
ANCHOR_POSITIONS: dict[Anchor, tuple[float, float]] = {
    Anchor.TOP_LEFT: (0.0, 1.0),
    Anchor.TOP_CENTER: (0.5, 1.0),
    Anchor.TOP_RIGHT: (1.0, 1.0),

    Anchor.CENTER_LEFT: (0.0, 0.5),
    Anchor.CENTER_CENTER: (0.5, 0.5),
    Anchor.CENTER_RIGHT: (1.0, 0.5),

    Anchor.BOTTOM_LEFT: (0.0, 0.0),
    Anchor.BOTTOM_CENTER: (0.5, 0.0),
    Anchor.BOTTOM_RIGHT: (1.0, 0.0),
}


def parse_anchor(anchor: Anchor | str) -> Anchor:
    """Coerce an anchor name to an Anchor.

    Raises:
        ValueError: If the name is not one of the grid anchors
    """
    if isinstance(anchor, Anchor):
        return anchor
    try:
        return Anchor(anchor)
    except ValueError:
        raise ValueError(f"Unknown anchor: {anchor!r}") from None


def resolve_anchor(
    anchor: Anchor | str,
    bounds: tuple[NDArray[np.float64], NDArray[np.float64]],
) -> Vector2:
    """Convert an anchor point to coordinates on a bounding box.

    Args:
        anchor: The anchor point (enum or string name)
        bounds: ``(min_corner, max_corner)`` of the bounding box

    Returns:
        Position of the anchor in the same space as ``bounds``
    """
    anchor = parse_anchor(anchor)
    lo, hi = bounds
    norm_pos = np.array(ANCHOR_POSITIONS[anchor])
    return Vector2.from_array(lo + norm_pos * (hi - lo))
