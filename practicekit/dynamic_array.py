"""Read a list of integers of a chosen length and print it."""

from __future__ import annotations

import sys
from typing import Callable


def _read_int(read: Callable[[], str], write: Callable[[str], object], prompt: str) -> int:
    write(prompt)
    return int(read())


def read_values(read: Callable[[], str], write: Callable[[str], object]) -> list[int]:
    """Prompt for a size, then for that many integers, and return them.

    Raises ValueError for a negative size or a non-integer entry.
    """
    size = _read_int(read, write, "Enter the size for the array: ")
    if size < 0:
        raise ValueError(f"array size must not be negative, got {size}")
    return [
        _read_int(read, write, f"Enter the num for {position} position: ")
        for position in range(size)
    ]


def main(argv: list[str] | None = None) -> int:
    try:
        values = read_values(input, sys.stdout.write)
    except (ValueError, EOFError) as exc:
        print(f"\nInvalid input: {exc}", file=sys.stderr)
        return 1
    print("[" + ", ".join(str(value) for value in values) + "]")
    return 0


if __name__ == "__main__":
    sys.exit(main())