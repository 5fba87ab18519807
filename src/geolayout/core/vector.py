"""Vector2 value type for 2D points and displacements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

import numpy as np
from numpy.typing import ArrayLike, NDArray


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector.

    Used both as a position (anchor point) and as a displacement passed to
    ``translate``. The y axis points up.
    """

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def to_array(self) -> NDArray[np.float64]:
        """Convert to a length-2 numpy array."""
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_array(cls, values: ArrayLike) -> Self:
        """Create a Vector2 from any length-2 sequence or array.

        Raises:
            ValueError: If ``values`` does not hold exactly two numbers
        """
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.shape != (2,):
            raise ValueError(f"Expected 2 coordinates, got {arr.size}")
        return cls(arr[0], arr[1])


def V2(x: float, y: float) -> Vector2:
    """Shorthand constructor for Vector2."""
    return Vector2(x, y)
