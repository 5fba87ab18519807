"""YAML loader for arrangement definitions."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..core.diagram import Diagram, Group, combine, rectangle
from ..core.vector import Vector2
from .alignment import OPERATIONS

logger = logging.getLogger(__name__)

# Step parameters that must be plain numbers
SPACING_PARAMS = frozenset({"space", "horizontal_space", "vertical_space"})


@dataclass
class Arrangement:
    """A named, laid-out sequence of diagrams."""

    name: str
    diagrams: tuple[Diagram, ...] = field(default_factory=tuple)

    def combined(self) -> Group:
        """Merge the arranged diagrams into one Group."""
        return combine(*self.diagrams)


class ArrangementLoader:
    """Loads shape arrangements from YAML files and applies their steps.

    YAML format:
        name: toolbar
        shapes:
          - name: a              # Optional label
            size: [w, h]         # Required
            position: [x, y]     # Center of the shape (default [0, 0])
        steps:
          - op: align_vertical   # Any base alignment/distribution operation
            alignment: top       # Remaining keys are passed as arguments
          - op: distribute_horizontal
            space: 0.5

    Steps run in order, each one receiving the previous step's output.
    """

    def load(self, path: str | Path) -> Arrangement:
        """Load an arrangement from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Arrangement with all steps applied

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the YAML format is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Arrangement file not found: {path}")
        with open(path) as f:
            data = yaml.safe_load(f)

        return self._build_arrangement(data, default_name=path.stem)

    def load_string(self, yaml_string: str) -> Arrangement:
        """Load an arrangement from a YAML string."""
        data = yaml.safe_load(yaml_string)
        return self._build_arrangement(data)

    def _build_arrangement(self, data: Any, default_name: str = "arrangement") -> Arrangement:
        if not isinstance(data, dict):
            raise ValueError("Arrangement must be a YAML mapping")

        name = data.get("name", default_name)
        diagrams: list[Diagram] = [
            self._create_shape(i, shape_def) for i, shape_def in enumerate(data.get("shapes") or [])
        ]

        for step in data.get("steps") or []:
            diagrams = self._apply_step(step, diagrams)

        logger.debug("Loaded arrangement %r with %d shapes", name, len(diagrams))
        return Arrangement(name=name, diagrams=tuple(diagrams))

    def _create_shape(self, index: int, shape_def: Any) -> Diagram:
        """Create a rectangle from a shape definition."""
        if not isinstance(shape_def, dict):
            raise ValueError(f"Shape #{index} must be a mapping")
        if "size" not in shape_def:
            raise ValueError(f"Shape #{index} has no 'size'")

        width, height = Vector2.from_array(shape_def["size"]).to_array()
        if width <= 0 or height <= 0:
            raise ValueError(f"Shape #{index} has non-positive size [{width:g}, {height:g}]")
        position = Vector2.from_array(shape_def.get("position", [0, 0]))
        name = shape_def.get("name", f"shape_{index}")
        return rectangle(width, height, name=name).translate(position)

    def _apply_step(self, step: Any, diagrams: list[Diagram]) -> list[Diagram]:
        """Run one named operation over the current diagrams."""
        if not isinstance(step, dict) or "op" not in step:
            raise ValueError(f"Step must be a mapping with an 'op' key, got {step!r}")

        params = dict(step)
        op_name = params.pop("op")
        if not isinstance(op_name, str) or op_name not in OPERATIONS:
            raise ValueError(f"Unknown operation: {op_name!r}")

        for key in SPACING_PARAMS.intersection(params):
            value = params[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"'{key}' for '{op_name}' must be a number, got {value!r}")

        try:
            return OPERATIONS[op_name](diagrams, **params)
        except TypeError as e:
            raise ValueError(f"Invalid parameters for '{op_name}': {e}") from e
