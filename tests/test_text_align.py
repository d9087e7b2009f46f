"""Tests for cell alignment and currency formatting."""

from shopping_ticket.utils.money import format_money
from shopping_ticket.utils.text_align import Alignment, append_formatted, format_cell


def test_append_formatted():
    """Cells are padded to width and followed by one space."""
    cases = [
        ("string", Alignment.LEFT, 3, "str "),       # truncated
        ("str", Alignment.LEFT, 7, "str     "),
        ("str", Alignment.CENTER, 7, "  str   "),
        ("str", Alignment.RIGHT, 7, "    str "),
    ]
    for value, alignment, width, expected in cases:
        buffer = []
        append_formatted(buffer, value, alignment, width)
        assert "".join(buffer) == expected, f"{value!r} {alignment.name} {width}"


def test_append_formatted_keeps_existing_fragments():
    buffer = ["# "]
    append_formatted(buffer, "Item", Alignment.LEFT, 6)
    assert "".join(buffer) == "# Item   "


def test_center_puts_extra_space_on_the_right():
    assert format_cell("ab", Alignment.CENTER, 5) == " ab   "
    assert format_cell("abc", Alignment.CENTER, 4) == "abc  "


def test_truncation_applies_to_every_alignment():
    assert format_cell("abcdef", Alignment.RIGHT, 4) == "abcd "
    assert format_cell("abcdef", Alignment.CENTER, 2) == "ab "


def test_empty_value_and_zero_width():
    assert format_cell("", Alignment.RIGHT, 3) == "    "
    assert format_cell("", Alignment.LEFT, 0) == " "


def test_format_money():
    cases = [
        (0.3, "$.30"),
        (0.6, "$.60"),
        (0.01, "$.01"),
        (1, "$1.00"),
        (100, "$100.00"),
        (199860.6, "$199860.60"),
        (1234567.891, "$1234567.89"),
    ]
    for amount, expected in cases:
        assert format_money(amount) == expected, f"{amount} -> {format_money(amount)}"


def test_format_money_rounds_to_two_decimals():
    assert format_money(4.949999) == "$4.95"
    assert format_money(0.004) == "$.00"
