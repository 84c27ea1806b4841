import pytest

from ansiw32.console import (
    BACKGROUND_BLUE,
    BACKGROUND_RED,
    DEFAULT_ATTRIBUTES,
    FOREGROUND_BLUE,
    FOREGROUND_RED,
    Coord,
    MemoryConsole,
    SmallRect,
    swap_colors,
)


def test_swap_colors_moves_foreground_to_background():
    assert swap_colors(FOREGROUND_RED) == BACKGROUND_RED
    assert swap_colors(BACKGROUND_BLUE) == FOREGROUND_BLUE


@pytest.mark.parametrize("attribute", range(256))
def test_swap_colors_is_an_involution(attribute):
    assert swap_colors(swap_colors(attribute)) == attribute


def test_initial_geometry():
    console = MemoryConsole(80, 25)
    info = console.screen_buffer_info()
    assert info.size == Coord(80, 25)
    assert info.window == SmallRect(0, 0, 79, 24)
    assert info.cursor_position == Coord(0, 0)
    assert info.attributes == DEFAULT_ATTRIBUTES
    assert console.row_text(0) == " " * 80


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_size_rejected(width, height):
    with pytest.raises(ValueError):
        MemoryConsole(width, height)


def test_fill_character_wraps_rows():
    console = MemoryConsole(10, 3)
    written = console.fill_character("x", 12, Coord(5, 0))
    assert written == 12
    assert console.row_text(0) == " " * 5 + "x" * 5
    assert console.row_text(1) == "x" * 7 + " " * 3
    assert console.row_text(2) == " " * 10


def test_fill_character_clipped_at_buffer_end():
    console = MemoryConsole(10, 3)
    written = console.fill_character("y", 1000, Coord(0, 2))
    assert written == console.width
    assert console.row_text(2) == "y" * 10


def test_fill_rejects_negative_count_and_outside_origin():
    console = MemoryConsole(10, 3)
    with pytest.raises(ValueError):
        console.fill_character("x", -1, Coord(0, 0))
    with pytest.raises(ValueError):
        console.fill_attribute(FOREGROUND_RED, 1, Coord(10, 0))


def test_fill_attribute_changes_cells():
    console = MemoryConsole(6, 2)
    written = console.fill_attribute(FOREGROUND_RED, 3, Coord(1, 1))
    assert written == 3
    assert console.row_attributes(1) == [DEFAULT_ATTRIBUTES] + [FOREGROUND_RED] * 3 + [DEFAULT_ATTRIBUTES] * 2
    assert console.row_attributes(0) == [DEFAULT_ATTRIBUTES] * 6


def test_set_cursor_position_validates():
    console = MemoryConsole(10, 3)
    console.set_cursor_position(Coord(9, 2))
    assert console.screen_buffer_info().cursor_position == Coord(9, 2)
    with pytest.raises(ValueError):
        console.set_cursor_position(Coord(10, 0))


def test_put_char_uses_current_attribute_and_newline():
    console = MemoryConsole(10, 3)
    console.set_text_attribute(FOREGROUND_RED)
    for char in "ab\ncd":
        console.put_char(char)
    assert console.row_text(0).rstrip() == "ab"
    assert console.row_text(1).rstrip() == "cd"
    assert console.row_attributes(1)[:2] == [FOREGROUND_RED, FOREGROUND_RED]
    assert console.cursor == Coord(2, 1)


def test_put_char_wraps_and_scrolls():
    console = MemoryConsole(3, 2)
    for char in "abcdefg":
        console.put_char(char)
    assert console.row_text(0) == "def"
    assert console.row_text(1) == "g  "
    assert console.cursor == Coord(1, 1)


def test_carriage_return_returns_to_column_zero():
    console = MemoryConsole(5, 2)
    for char in "abc\rX":
        console.put_char(char)
    assert console.row_text(0) == "Xbc  "


def test_set_buffer_size_keeps_content():
    console = MemoryConsole(4, 2)
    for char in "abcd":
        console.put_char(char)
    console.set_buffer_size(Coord(6, 2))
    assert console.row_text(0) == "abcd  "
    assert console.screen_buffer_info().size == Coord(6, 2)


def test_set_buffer_size_smaller_than_window_rejected():
    console = MemoryConsole(10, 3)
    with pytest.raises(ValueError):
        console.set_buffer_size(Coord(5, 3))


def test_set_window_must_fit():
    console = MemoryConsole(10, 3)
    console.set_window(SmallRect(0, 0, 4, 2))
    assert console.screen_buffer_info().window == SmallRect(0, 0, 4, 2)
    with pytest.raises(ValueError):
        console.set_window(SmallRect(0, 0, 10, 2))


def test_row_text_out_of_range():
    console = MemoryConsole(10, 3)
    with pytest.raises(IndexError):
        console.row_text(3)