"""Main entry point for geolayout."""

import argparse
from typing import Sequence

from .config import configure_logging
from .core.anchors import Anchor
from .layout import Arrangement, ArrangementLoader


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Geolayout - align and distribute 2D shapes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "arrangement",
        metavar="PATH",
        help="Arrangement YAML file to load and lay out",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log each layout operation to stderr",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit logs as JSON lines",
    )
    return parser.parse_args(argv)


def format_arrangement(arrangement: Arrangement) -> list[str]:
    """Format each shape's corners and the overall bounds as text lines."""
    lines = [
        f"Arrangement '{arrangement.name}' ({len(arrangement.diagrams)} shapes)",
        "=" * 40,
    ]
    for diagram in arrangement.diagrams:
        name = getattr(diagram, "name", None) or "-"
        top_left = diagram.get_anchor(Anchor.TOP_LEFT)
        bottom_right = diagram.get_anchor(Anchor.BOTTOM_RIGHT)
        lines.append(
            f"  {name:<12} top-left=({top_left.x:g}, {top_left.y:g})"
            f"  bottom-right=({bottom_right.x:g}, {bottom_right.y:g})"
        )

    if arrangement.diagrams:
        lo, hi = arrangement.combined().bounds()
        lines.append("-" * 40)
        lines.append(f"Bounds: x=[{lo[0]:g}, {hi[0]:g}] y=[{lo[1]:g}, {hi[1]:g}]")
    return lines


def main(argv: Sequence[str] | None = None) -> None:
    """Lay out an arrangement file and print the result."""
    args = parse_args(argv)
    configure_logging(verbose=args.verbose, log_json=args.log_json)

    arrangement = ArrangementLoader().load(args.arrangement)
    for line in format_arrangement(arrangement):
        print(line)


if __name__ == "__main__":
    main()
