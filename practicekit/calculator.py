"""A four-function calculator."""

from __future__ import annotations

import operator as _op
import sys

OPERATORS = {
    "+": _op.add,
    "-": _op.sub,
    "*": _op.mul,
    "/": _op.truediv,
}


def calculate(operator: str, first: float, second: float) -> float:
    """Apply one of + - * / to the two numbers.

    Raises ValueError for an unknown operator and ZeroDivisionError
    when dividing by zero.
    """
    try:
        function = OPERATORS[operator]
    except KeyError:
        raise ValueError(f"unknown operator {operator!r}") from None
    if operator == "/" and second == 0:
        raise ZeroDivisionError("Division by zero is not allowed.")
    return function(first, second)


def _read_number(prompt: str) -> float:
    print(prompt)
    while True:
        try:
            return float(input())
        except ValueError:
            print("Invalid input. Please enter a numeric value: ")


def main(argv: list[str] | None = None) -> int:
    try:
        print("Pick an operator (+, -, *, /): ")
        operator = input().strip()
        while operator not in OPERATORS:
            print("Invalid operator. Please pick one from (+, -, *, /): ")
            operator = input().strip()
        first = _read_number("Pick the first number: ")
        second = _read_number("Pick the second number: ")
    except EOFError:
        return 1

    try:
        result = calculate(operator, first, second)
    except ZeroDivisionError as exc:
        print(f"Result: Error: {exc}")
    else:
        print(f"Result: {result:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())