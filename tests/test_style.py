"""Tests for ANSI color styling."""

import pytest

from piechart.style import Color, Fixed, Rgb, paint, parse_color, plain


def test_no_color_passes_through():
    assert paint(None, "*") == "*"


def test_basic_color():
    assert paint(Color.GREEN, "•") == "\x1b[32m•\x1b[0m"


def test_palette_and_true_color():
    assert paint(Fixed(208), "x") == "\x1b[38;5;208mx\x1b[0m"
    assert paint(Rgb(255, 136, 0), "x") == "\x1b[38;2;255;136;0mx\x1b[0m"


def test_plain_drops_color():
    assert plain(Color.RED, "x") == "x"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", Color.RED),
        (" Purple ", Color.PURPLE),
        ("208", Fixed(208)),
        ("#ff8800", Rgb(255, 136, 0)),
        ("00FF00", Rgb(0, 255, 0)),
    ],
)
def test_parse_color(name, expected):
    assert parse_color(name) == expected


@pytest.mark.parametrize("name", ["mauve", "256", "#12345", ""])
def test_parse_color_rejects_unknown(name):
    with pytest.raises(ValueError):
        parse_color(name)
