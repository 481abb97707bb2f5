"""Printing, reversing and sorting lists."""

from __future__ import annotations

import sys
from typing import Any, Iterable, MutableSequence


def format_array(values: Iterable[Any]) -> str:
    """Render values as '[a, b, c]'."""
    return "[" + ", ".join(str(value) for value in values) + "]"


def reverse_in_place(values: MutableSequence[Any]) -> None:
    """Reverse the sequence in place."""
    values.reverse()


def sorted_ascending(values: Iterable[Any]) -> list[Any]:
    """Return a new list in ascending order."""
    return sorted(values)


def sorted_descending(values: Iterable[Any]) -> list[Any]:
    """Return a new list in descending order."""
    return sorted(values, reverse=True)


def main(argv: list[str] | None = None) -> int:
    numbers = [1, 4, 5, 9, 12]
    print("Initially the array is ")
    print(format_array(numbers))
    reverse_in_place(numbers)
    print("The reversed array is ")
    print(format_array(numbers))

    original = [1, 4, 5, 2, 6, 3]
    print("--- Original Array ---")
    print(format_array(original))
    print("--- Sorted Ascending ---")
    print(format_array(sorted_ascending(original)))
    print("--- Sorted Descending ---")
    print(format_array(sorted_descending(original)))
    return 0


if __name__ == "__main__":
    sys.exit(main())