import pytest

from practicekit.arrays import (
    format_array,
    main,
    reverse_in_place,
    sorted_ascending,
    sorted_descending,
)


def test_format_array():
    assert format_array([1, 4, 5, 9, 12]) == "[1, 4, 5, 9, 12]"


def test_format_empty_and_single():
    assert format_array([]) == "[]"
    assert format_array([7]) == "[7]"


def test_reverse_in_place():
    values = [1, 4, 5, 9, 12]
    assert reverse_in_place(values) is None
    assert values == [12, 9, 5, 4, 1]


@pytest.mark.parametrize("values", [[], [1], [1, 2], [3, 1, 2, 5], ["a", "b", "c"]])
def test_reverse_twice_restores(values):
    original = list(values)
    reverse_in_place(values)
    reverse_in_place(values)
    assert values == original


def test_reverse_swaps_ends():
    values = [3, 1, 2, 5]
    reverse_in_place(values)
    assert values[0] == 5 and values[-1] == 3


def test_sorted_ascending_leaves_original():
    original = [1, 4, 5, 2, 6, 3]
    result = sorted_ascending(original)
    assert result == [1, 2, 3, 4, 5, 6]
    assert original == [1, 4, 5, 2, 6, 3]


def test_sorted_descending_mirrors_ascending():
    original = [1, 4, 5, 2, 6, 3]
    descending = sorted_descending(original)
    assert descending == sorted_ascending(original)[::-1]
    assert all(a >= b for a, b in zip(descending, descending[1:]))
    assert original == [1, 4, 5, 2, 6, 3]


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[lines.index("The reversed array is ") + 1] == "[12, 9, 5, 4, 1]"
    assert lines[lines.index("--- Original Array ---") + 1] == "[1, 4, 5, 2, 6, 3]"
    assert lines[lines.index("--- Sorted Ascending ---") + 1] == "[1, 2, 3, 4, 5, 6]"
    assert lines[lines.index("--- Sorted Descending ---") + 1] == "[6, 5, 4, 3, 2, 1]"