"""Tests for vectors, anchors and diagrams."""

import numpy as np
import pytest

from geolayout.core import (
    ANCHOR_POSITIONS,
    Anchor,
    Diagram,
    Group,
    Shape,
    V2,
    Vector2,
    combine,
    rectangle,
    resolve_anchor,
    square,
)


def test_vector_arithmetic():
    """Vectors add, subtract, negate and scale component-wise."""
    a = V2(1, 2)
    b = V2(3, -4)
    assert a + b == Vector2(4, -2)
    assert a - b == Vector2(-2, 6)
    assert -a == Vector2(-1, -2)
    assert a * 2 == Vector2(2, 4)
    assert 2 * a == Vector2(2, 4)


def test_vector_is_immutable():
    """Assigning to a coordinate fails."""
    v = V2(1, 2)
    with pytest.raises(AttributeError):
        v.x = 5


def test_vector_array_conversion():
    """Vectors convert to numpy arrays and back."""
    v = Vector2.from_array(np.array([1.5, -2.0]))
    assert v == V2(1.5, -2.0)
    np.testing.assert_array_equal(v.to_array(), [1.5, -2.0])


def test_vector_from_array_rejects_wrong_length():
    with pytest.raises(ValueError, match="Expected 2 coordinates"):
        Vector2.from_array([1, 2, 3])


def test_anchor_grid_is_complete():
    """Every one of the nine grid anchors has a normalized position."""
    assert len(Anchor) == 9
    assert set(ANCHOR_POSITIONS) == set(Anchor)


@pytest.mark.parametrize("name,expected", [
    ("top-left", (0.0, 4.0)),
    ("top-center", (1.0, 4.0)),
    ("top-right", (2.0, 4.0)),
    ("center-left", (0.0, 2.0)),
    ("center-center", (1.0, 2.0)),
    ("center-right", (2.0, 2.0)),
    ("bottom-left", (0.0, 0.0)),
    ("bottom-center", (1.0, 0.0)),
    ("bottom-right", (2.0, 0.0)),
    ("center", (1.0, 2.0)),
])
def test_resolve_anchor(name, expected):
    """Anchors resolve on a bounding box with y pointing up."""
    bounds = (np.array([0.0, 0.0]), np.array([2.0, 4.0]))
    assert resolve_anchor(name, bounds) == V2(*expected)


def test_resolve_anchor_accepts_enum():
    bounds = (np.array([-1.0, -1.0]), np.array([1.0, 1.0]))
    assert resolve_anchor(Anchor.TOP_RIGHT, bounds) == V2(1, 1)


def test_unknown_anchor_raises():
    bounds = (np.zeros(2), np.ones(2))
    with pytest.raises(ValueError, match="Unknown anchor: 'middle'"):
        resolve_anchor("middle", bounds)


def test_rectangle_is_centered_on_origin():
    """Rectangles span half their size on each side of the origin."""
    rect = rectangle(4, 2, name="r")
    lo, hi = rect.bounds()
    np.testing.assert_array_equal(lo, [-2, -1])
    np.testing.assert_array_equal(hi, [2, 1])
    assert rect.vertex_count == 4
    assert rect.name == "r"


def test_shape_satisfies_diagram_protocol():
    assert isinstance(square(), Diagram)
    assert isinstance(combine(square()), Diagram)


def test_translate_returns_new_shape():
    """Translation leaves the original shape untouched."""
    original = square(2)
    moved = original.translate(V2(3, -1))

    assert moved is not original
    assert moved.get_anchor("center") == V2(3, -1)
    assert original.get_anchor("center") == V2(0, 0)


def test_translate_preserves_shape():
    """Translated outlines are congruent to the original."""
    original = Shape([[0, 0], [3, 0], [1, 2]])
    moved = original.translate(V2(5, 5))
    np.testing.assert_allclose(moved.outline - original.outline, 5.0)


def test_outline_is_read_only():
    shape = square()
    with pytest.raises(ValueError):
        shape.outline[0, 0] = 10.0


def test_shape_rejects_bad_outline():
    with pytest.raises(ValueError, match="Nx2"):
        Shape([1, 2, 3])


def test_shape_equality():
    assert square(1, name="a") == square(1, name="a")
    assert square(1, name="a") != square(1, name="b")
    assert square(1) != square(2)


def test_combine_bounds_cover_members():
    """A group's bounding box is the union of its members'."""
    a = square(2)
    b = square(2).translate(V2(5, 3))
    group = combine(a, b)

    assert isinstance(group, Group)
    assert group.members == (a, b)
    assert group.get_anchor("bottom-left") == V2(-1, -1)
    assert group.get_anchor("top-right") == V2(6, 4)


def test_group_translate_moves_members():
    group = combine(square(), square().translate(V2(2, 0)))
    moved = group.translate(V2(0, 10))

    assert len(moved) == 2
    assert [m.get_anchor("center") for m in moved] == [V2(0, 10), V2(2, 10)]
    assert group.get_anchor("center") == V2(1, 0)


def test_empty_group():
    group = combine()
    assert len(group) == 0
    assert group.get_anchor("center") == V2(0, 0)


class Marker:
    """A diagram that only offers anchor lookup and translation."""

    def __init__(self, at: Vector2) -> None:
        self.at = at

    def get_anchor(self, anchor):
        return self.at

    def translate(self, offset):
        return Marker(self.at + offset)


def test_group_needs_only_anchor_and_translate():
    """Groups work over any diagram, not just Shapes."""
    marker = Marker(V2(10, -3))
    assert isinstance(marker, Diagram)

    group = combine(square(2), marker)
    assert group.get_anchor("top-right") == V2(10, 1)
    assert group.get_anchor("bottom-left") == V2(-1, -3)
    assert group.translate(V2(1, 1)).members[1].at == V2(11, -2)
