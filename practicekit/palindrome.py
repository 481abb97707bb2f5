"""Palindrome checking."""

from __future__ import annotations

import sys


def is_palindrome(word: str) -> bool:
    """Return True if the text reads the same both ways (case-sensitive)."""
    return word == word[::-1]


def main(argv: list[str] | None = None) -> int:
    try:
        text = input("Enter a string: ")
    except EOFError:
        text = ""
    verdict = "is" if is_palindrome(text) else "is NOT"
    print(f'"{text}" {verdict} a palindrome.')
    return 0


if __name__ == "__main__":
    sys.exit(main())