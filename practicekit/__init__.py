"""Small practice exercises: a student list, a calculator, a palindrome check, converters, areas, factorials and list handling."""

__version__ = "0.1.0"