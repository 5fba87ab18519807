"""Tests for loading arrangements from YAML."""

from pathlib import Path

import pytest

from geolayout.core import V2, Group
from geolayout.layout import Arrangement, ArrangementLoader

ASSETS_DIR = Path(__file__).parent.parent / "assets"


@pytest.fixture
def loader():
    return ArrangementLoader()


def test_load_toolbar_asset(loader):
    """The bundled toolbar is top-aligned and spaced by half a unit."""
    arrangement = loader.load(ASSETS_DIR / "toolbar.yaml")

    assert arrangement.name == "toolbar"
    assert [d.name for d in arrangement.diagrams] == ["open", "save", "settings"]
    assert [d.get_anchor("top-left") for d in arrangement.diagrams] == [
        V2(-1, 1),
        V2(1.5, 1),
        V2(4, 1),
    ]

    group = arrangement.combined()
    assert isinstance(group, Group)
    assert group.get_anchor("bottom-left") == V2(-1, -2)
    assert group.get_anchor("top-right") == V2(7, 1)


def test_shapes_without_steps_keep_their_positions(loader):
    arrangement = loader.load_string("""
name: loose
shapes:
  - {size: [2, 4], position: [10, 20]}
  - {size: [1, 1]}
""")

    first, second = arrangement.diagrams
    assert first.get_anchor("center") == V2(10, 20)
    assert first.get_anchor("top-right") == V2(11, 22)
    assert second.get_anchor("center") == V2(0, 0)
    assert [d.name for d in arrangement.diagrams] == ["shape_0", "shape_1"]


def test_steps_run_in_order(loader):
    arrangement = loader.load_string("""
shapes:
  - {size: [1, 1], position: [0, 0]}
  - {size: [1, 1], position: [5, 5]}
steps:
  - op: align_horizontal
    alignment: left
  - op: distribute_vertical
    space: 1
""")

    assert arrangement.name == "arrangement"
    assert [d.get_anchor("center") for d in arrangement.diagrams] == [V2(0, 0), V2(0, -2)]


def test_empty_arrangement(loader):
    arrangement = loader.load_string("name: nothing")
    assert arrangement == Arrangement(name="nothing")
    assert len(arrangement.combined()) == 0


def test_name_defaults_to_file_stem(loader, tmp_path):
    path = tmp_path / "row.yaml"
    path.write_text("shapes:\n  - {size: [1, 1]}\n")
    assert loader.load(path).name == "row"


def test_missing_file_raises(loader, tmp_path):
    with pytest.raises(FileNotFoundError):
        loader.load(tmp_path / "missing.yaml")


@pytest.mark.parametrize("yaml_string,message", [
    ("- just\n- a list\n", "must be a YAML mapping"),
    ("shapes:\n  - {position: [0, 0]}\n", "has no 'size'"),
    ("shapes:\n  - 3\n", "must be a mapping"),
    ("shapes:\n  - {size: [1, 2, 3]}\n", "Expected 2 coordinates"),
    ("steps:\n  - {op: rotate}\n", "Unknown operation: 'rotate'"),
    ("steps:\n  - {op: [a]}\n", "Unknown operation: \\['a'\\]"),
    ("steps:\n  - {op: distribute_horizontal, space: wide}\n",
     "'space' for 'distribute_horizontal' must be a number"),
    ("steps:\n  - {op: distribute_vertical_and_align, vertical_space: true}\n", "must be a number"),
    ("shapes:\n  - {size: [-2, 1]}\n", "Shape #0 has non-positive size"),
    ("shapes:\n  - {size: [1, 1]}\n  - {size: [3, 0]}\n", "Shape #1 has non-positive size"),
    ("steps:\n  - distribute_vertical\n", "'op' key"),
    ("steps:\n  - {op: distribute_vertical, gap: 2}\n", "Invalid parameters"),
    ("shapes:\n  - {size: [1, 1]}\nsteps:\n  - {op: align_vertical, alignment: left}\n",
     "Unknown vertical alignment"),
])
def test_invalid_arrangements_raise(loader, yaml_string, message):
    with pytest.raises(ValueError, match=message):
        loader.load_string(yaml_string)
