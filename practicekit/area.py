"""Areas of squares, rectangles and circles."""

from __future__ import annotations

import argparse
import sys

PI = 3.14


def square_area(side: float) -> float:
    """Area of a square with the given side."""
    return side * side


def rectangle_area(length: float, width: float) -> float:
    """Area of a rectangle with the given length and width."""
    return length * width


def circle_area(radius: float) -> float:
    """Area of a circle, using PI = 3.14."""
    return PI * radius * radius


def _report() -> list[str]:
    examples = [
        ("area of a square with side 3.2", square_area(3.2)),
        ("area of a rectangle with length 4 and width 3", rectangle_area(4.3, 3.8)),
        ("area of a circle with radius 5", circle_area(5)),
    ]
    return [f"{label}: {value:g}" for label, value in examples]


def main(argv: list[str] | None = None) -> int:
    """Print the areas of a sample square, rectangle and circle."""
    parser = argparse.ArgumentParser(
        prog="practicekit-area",
        description="Print the areas of a sample square, rectangle and circle.",
    )
    parser.parse_args(argv)
    sys.stdout.write("\n".join(_report()))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())