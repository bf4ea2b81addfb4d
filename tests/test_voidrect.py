import pytest

from soupdl.voidrect import (
    VOID_RECT_STR_LEN,
    Rect,
    VoidRect,
    parse_void_rect_value,
)


def test_parse_integer_from_documented_example():
    assert parse_void_rect_value("i5") == 5


def test_parse_string_value():
    assert parse_void_rect_value("shello") == "hello"


def test_parse_strips_trailing_newline():
    assert parse_void_rect_value("i5\n") == 5


@pytest.mark.parametrize("value", [0, 5, -3, 127, -128, "", "abc", "x" * 19])
def test_format_parse_round_trip(value):
    vr = VoidRect(Rect(0, 0, 1, 1), value)
    assert parse_void_rect_value(vr.format_value()) == value


def test_format_value_prefixes():
    assert VoidRect(Rect(0, 0, 1, 1), 5).format_value() == "i5"
    assert VoidRect(Rect(0, 0, 1, 1), "door").format_value() == "sdoor"


def test_integer_is_kept_in_signed_byte_range():
    for raw in (200, 1000, -500):
        value = parse_void_rect_value(f"i{raw}")
        assert -128 <= value <= 127
        assert (value - raw) % 256 == 0


def test_bad_integer_raises():
    with pytest.raises(ValueError):
        parse_void_rect_value("i")
    with pytest.raises(ValueError):
        parse_void_rect_value("iabc")


def test_empty_value_raises():
    with pytest.raises(ValueError):
        parse_void_rect_value("")


def test_string_too_long_raises():
    with pytest.raises(ValueError):
        parse_void_rect_value("s" + "x" * VOID_RECT_STR_LEN)
    with pytest.raises(ValueError):
        VoidRect(Rect(0, 0, 1, 1), "x" * VOID_RECT_STR_LEN)


def test_value_is_str():
    assert VoidRect(Rect(0, 0, 1, 1), "a").value_is_str
    assert not VoidRect(Rect(0, 0, 1, 1), 1).value_is_str


def test_rect_cells_cover_area():
    rect = Rect(2, 3, 4, 2)
    cells = list(rect.cells())
    assert len(cells) == rect.w * rect.h
    assert cells[0] == (rect.x, rect.y)
    assert all(rect.x <= x < rect.x + rect.w and rect.y <= y < rect.y + rect.h for x, y in cells)