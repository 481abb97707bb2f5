"""Factorial of a whole number."""

from __future__ import annotations

import math
import sys


def factorial(number: int) -> int:
    """Return number!; zero and negative numbers give the empty product, 1."""
    return math.prod(range(1, number + 1))


def main(argv: list[str] | None = None) -> int:
    for number in (10, 3, 1, 0):
        print(factorial(number))
    return 0


if __name__ == "__main__":
    sys.exit(main())