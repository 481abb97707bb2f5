import io

import pytest

from practicekit.temperature import (
    celsius_to_fahrenheit,
    convert,
    fahrenheit_to_celsius,
    main,
)


def test_freezing_point():
    assert fahrenheit_to_celsius(32) == 0


def test_boiling_point():
    assert celsius_to_fahrenheit(100) == 212


def test_minus_forty_is_fixed_point():
    assert celsius_to_fahrenheit(-40) == -40
    assert fahrenheit_to_celsius(-40) == -40


@pytest.mark.parametrize("value", [-273.15, -10.0, 0.0, 36.6, 1000.0])
def test_round_trip(value):
    assert fahrenheit_to_celsius(celsius_to_fahrenheit(value)) == pytest.approx(value)
    assert celsius_to_fahrenheit(fahrenheit_to_celsius(value)) == pytest.approx(value)


@pytest.mark.parametrize("value", [-5.0, 20.0, 75.5])
def test_convert_dispatches_case_insensitively(value):
    assert convert(value, "C") == convert(value, "c") == celsius_to_fahrenheit(value)
    assert convert(value, "F") == convert(value, "f") == fahrenheit_to_celsius(value)


def test_convert_is_monotonic():
    assert convert(10.0, "C") < convert(11.0, "C")
    assert convert(10.0, "F") < convert(11.0, "F")


def test_convert_rejects_unknown_unit():
    with pytest.raises(ValueError):
        convert(10.0, "K")


def test_main_reprompts_and_converts(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("warm\n100\nK\nc\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Invalid input. Please enter a numeric value: " in out
    assert "Invalid unit. Please enter 'C' or 'F': " in out
    assert out.endswith("100 Celsius is 212 Fahrenheit.\n")


def test_main_fahrenheit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("-40\nF\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("-40 Fahrenheit is -40 Celsius.\n")