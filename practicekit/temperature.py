"""Celsius and Fahrenheit conversion."""

from __future__ import annotations

import sys


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9.0 / 5.0 + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32) * 5.0 / 9.0


def convert(value: float, unit: str) -> float:
    """Convert from the given unit ('C' or 'F', any case) to the other one."""
    normalized = unit.strip().lower()
    if normalized == "c":
        return celsius_to_fahrenheit(value)
    if normalized == "f":
        return fahrenheit_to_celsius(value)
    raise ValueError(f"unknown unit {unit!r}; expected 'C' or 'F'")


def main(argv: list[str] | None = None) -> int:
    try:
        prompt = "Enter the temperature value: "
        while True:
            try:
                value = float(input(prompt))
                break
            except ValueError:
                prompt = "Invalid input. Please enter a numeric value: "

        unit = input("Enter the unit (C for Celsius, F for Fahrenheit): ").strip()
        while unit.lower() not in ("c", "f"):
            unit = input("Invalid unit. Please enter 'C' or 'F': ").strip()
    except EOFError:
        return 1

    converted = convert(value, unit)
    if unit.lower() == "c":
        print(f"{value:g} Celsius is {converted:g} Fahrenheit.")
    else:
        print(f"{value:g} Fahrenheit is {converted:g} Celsius.")
    return 0


if __name__ == "__main__":
    sys.exit(main())