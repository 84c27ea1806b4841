"""An in-memory model of a character-cell console screen buffer."""

from __future__ import annotations

from dataclasses import dataclass

FOREGROUND_BLUE = 0x0001
FOREGROUND_GREEN = 0x0002
FOREGROUND_RED = 0x0004
FOREGROUND_INTENSITY = 0x0008
BACKGROUND_BLUE = 0x0010
BACKGROUND_GREEN = 0x0020
BACKGROUND_RED = 0x0040
BACKGROUND_INTENSITY = 0x0080

FOREGROUND_MASK = FOREGROUND_RED | FOREGROUND_GREEN | FOREGROUND_BLUE | FOREGROUND_INTENSITY
BACKGROUND_MASK = BACKGROUND_RED | BACKGROUND_GREEN | BACKGROUND_BLUE | BACKGROUND_INTENSITY

DEFAULT_ATTRIBUTES = FOREGROUND_RED | FOREGROUND_GREEN | FOREGROUND_BLUE


def swap_colors(attribute: int) -> int:
    """Exchange the foreground and background halves of a colour attribute."""
    return ((attribute & FOREGROUND_MASK) << 4) | ((attribute & BACKGROUND_MASK) >> 4)


@dataclass(frozen=True)
class Coord:
    """A cell position in the screen buffer."""

    x: int
    y: int


@dataclass(frozen=True)
class SmallRect:
    """An inclusive rectangle of cells."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1


@dataclass(frozen=True)
class ScreenBufferInfo:
    """A snapshot of the console's geometry, cursor and current colours."""

    size: Coord
    cursor_position: Coord
    attributes: int
    window: SmallRect


class MemoryConsole:
    """A screen buffer of characters and colour attributes held in memory."""

    def __init__(self, width: int = 80, height: int = 25, attributes: int = DEFAULT_ATTRIBUTES):
        if width < 1 or height < 1:
            raise ValueError("console size must be at least one cell in each direction")
        self.width = width
        self.height = height
        self.attributes = attributes
        self.cursor = Coord(0, 0)
        self.window = SmallRect(0, 0, width - 1, height - 1)
        self.cursor_visible = True
        self._chars = [" "] * (width * height)
        self._attrs = [attributes] * (width * height)

    def _contains(self, coord: Coord) -> bool:
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def _span(self, count: int, origin: Coord) -> tuple[int, int]:
        if count < 0:
            raise ValueError("count must not be negative")
        if not self._contains(origin):
            raise ValueError(f"position {origin} is outside the screen buffer")
        start = origin.y * self.width + origin.x
        return start, min(start + count, len(self._chars))

    def screen_buffer_info(self) -> ScreenBufferInfo:
        """Return the buffer size, cursor, current attributes and window."""
        return ScreenBufferInfo(
            size=Coord(self.width, self.height),
            cursor_position=self.cursor,
            attributes=self.attributes,
            window=self.window,
        )

    def fill_character(self, char: str, count: int, origin: Coord) -> int:
        """Write ``char`` into ``count`` cells from ``origin``; return cells written."""
        start, end = self._span(count, origin)
        self._chars[start:end] = [char] * (end - start)
        return end - start

    def fill_attribute(self, attribute: int, count: int, origin: Coord) -> int:
        """Set the attribute of ``count`` cells from ``origin``; return cells changed."""
        start, end = self._span(count, origin)
        self._attrs[start:end] = [attribute] * (end - start)
        return end - start

    def set_cursor_position(self, coord: Coord) -> None:
        if not self._contains(coord):
            raise ValueError(f"position {coord} is outside the screen buffer")
        self.cursor = coord

    def set_text_attribute(self, attribute: int) -> None:
        self.attributes = attribute

    def set_buffer_size(self, size: Coord) -> None:
        """Resize the buffer, keeping the overlapping content."""
        if size.x < self.window.right + 1 or size.y < self.window.bottom + 1:
            raise ValueError("the screen buffer cannot be smaller than the window")
        new_chars = [" "] * (size.x * size.y)
        new_attrs = [self.attributes] * (size.x * size.y)
        keep = min(self.width, size.x)
        for row in range(min(self.height, size.y)):
            old_start, new_start = row * self.width, row * size.x
            new_chars[new_start:new_start + keep] = self._chars[old_start:old_start + keep]
            new_attrs[new_start:new_start + keep] = self._attrs[old_start:old_start + keep]
        self._chars, self._attrs = new_chars, new_attrs
        self.width, self.height = size.x, size.y
        self.cursor = Coord(min(self.cursor.x, size.x - 1), min(self.cursor.y, size.y - 1))

    def set_window(self, window: SmallRect) -> None:
        if (
            window.left < 0
            or window.top < 0
            or window.left > window.right
            or window.top > window.bottom
            or window.right >= self.width
            or window.bottom >= self.height
        ):
            raise ValueError(f"window {window} does not fit the screen buffer")
        self.window = window

    def _new_line(self) -> None:
        y = self.cursor.y + 1
        if y >= self.height:
            del self._chars[:self.width]
            del self._attrs[:self.width]
            self._chars.extend([" "] * self.width)
            self._attrs.extend([self.attributes] * self.width)
            y = self.height - 1
        self.cursor = Coord(0, y)

    def put_char(self, char: str) -> None:
        """Output one character at the cursor with the current attributes."""
        if char == "\n":
            self._new_line()
            return
        if char == "\r":
            self.cursor = Coord(0, self.cursor.y)
            return
        index = self.cursor.y * self.width + self.cursor.x
        self._chars[index] = char
        self._attrs[index] = self.attributes
        if self.cursor.x + 1 >= self.width:
            self._new_line()
        else:
            self.cursor = Coord(self.cursor.x + 1, self.cursor.y)

    def row_text(self, y: int) -> str:
        """Return the characters of row ``y``."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is outside the screen buffer")
        return "".join(self._chars[y * self.width:(y + 1) * self.width])

    def row_attributes(self, y: int) -> list[int]:
        """Return the attributes of row ``y``."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is outside the screen buffer")
        return self._attrs[y * self.width:(y + 1) * self.width]