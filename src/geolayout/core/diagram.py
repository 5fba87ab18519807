"""Diagram protocol and the immutable shapes the layout operations act on."""

from __future__ import annotations

from typing import Iterator, Protocol, runtime_checkable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .anchors import Anchor, resolve_anchor
from .vector import Vector2

Bounds = tuple[NDArray[np.float64], NDArray[np.float64]]


@runtime_checkable
class Diagram(Protocol):
    """Protocol for anything the layout operations can position.

    Only anchor lookup and translation are required. A diagram is an
    immutable value: ``translate`` returns a new diagram and leaves the
    original untouched. ``bounds()`` belongs to the concrete types, not here.
    """

    def get_anchor(self, anchor: Anchor | str) -> Vector2:
        """Return the position of a named anchor."""
        ...

    def translate(self, offset: Vector2) -> Diagram:
        """Return a copy of this diagram shifted by ``offset``."""
        ...


def _frozen(values: ArrayLike) -> NDArray[np.float64]:
    arr = np.array(values, dtype=np.float64)
    arr.setflags(write=False)
    return arr


class Shape:
    """A single polygonal diagram.

    Stores the outline as an Nx2 array of vertex positions. The array is
    read-only; every transformation builds a new Shape.
    """

    def __init__(self, outline: ArrayLike, name: str | None = None) -> None:
        """Create a shape from its outline.

        Args:
            outline: Nx2 array of vertex positions (at least one vertex)
            name: Optional label used in listings
        """
        self.outline = _frozen(outline)
        if self.outline.ndim != 2 or self.outline.shape[1] != 2 or len(self.outline) == 0:
            raise ValueError(
                f"Shape outline must be a non-empty Nx2 array, got shape {self.outline.shape}"
            )
        self.name = name

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the outline."""
        return len(self.outline)

    def bounds(self) -> Bounds:
        return self.outline.min(axis=0), self.outline.max(axis=0)

    def get_anchor(self, anchor: Anchor | str) -> Vector2:
        return resolve_anchor(anchor, self.bounds())

    def translate(self, offset: Vector2) -> Shape:
        """Shift the outline, returning a new shape.

        Args:
            offset: Displacement to apply to every vertex

        Returns:
            New Shape with the same outline moved by ``offset``
        """
        return Shape(self.outline + offset.to_array(), name=self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self.name == other.name and np.array_equal(self.outline, other.outline)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        lo, hi = self.bounds()
        name_str = f"{self.name!r}, " if self.name else ""
        return f"Shape({name_str}x=[{lo[0]:g}, {hi[0]:g}], y=[{lo[1]:g}, {hi[1]:g}])"


class Group:
    """A composite diagram made of positioned members.

    Members keep their own positions; the group's bounding box spans their
    bottom-left and top-right anchors.
    """

    def __init__(self, members: tuple[Diagram, ...] = (), name: str | None = None) -> None:
        self.members = tuple(members)
        self.name = name

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[Diagram]:
        return iter(self.members)

    def bounds(self) -> Bounds:
        if not self.members:
            return np.zeros(2), np.zeros(2)
        lows = np.vstack([m.get_anchor(Anchor.BOTTOM_LEFT).to_array() for m in self.members])
        highs = np.vstack([m.get_anchor(Anchor.TOP_RIGHT).to_array() for m in self.members])
        return lows.min(axis=0), highs.max(axis=0)

    def get_anchor(self, anchor: Anchor | str) -> Vector2:
        return resolve_anchor(anchor, self.bounds())

    def translate(self, offset: Vector2) -> Group:
        """Translate every member, returning a new group."""
        return Group(tuple(m.translate(offset) for m in self.members), name=self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.name == other.name and self.members == other.members

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        name_str = f"{self.name!r}, " if self.name else ""
        return f"Group({name_str}members={len(self.members)})"


def combine(*diagrams: Diagram) -> Group:
    """Merge diagrams into a single Group, preserving order and positions."""
    return Group(diagrams)


def rectangle(width: float, height: float, name: str | None = None) -> Shape:
    """Create an axis-aligned rectangle centered on the origin.

    Args:
        width: Extent along X
        height: Extent along Y
        name: Optional label

    Returns:
        Shape with four corner vertices
    """
    hw = width / 2
    hh = height / 2
    outline = np.array([
        [-hw, -hh],
        [hw, -hh],
        [hw, hh],
        [-hw, hh],
    ], dtype=np.float64)
    return Shape(outline, name=name)


def square(side: float = 1.0, name: str | None = None) -> Shape:
    """Create an axis-aligned square centered on the origin."""
    return rectangle(side, side, name=name)
