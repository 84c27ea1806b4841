"""Interpret ANSI escape sequences as operations on a console screen buffer."""

from __future__ import annotations

import contextlib
import sys
from dataclasses import dataclass, replace
from typing import Optional, TextIO

from .console import (
    BACKGROUND_BLUE,
    BACKGROUND_GREEN,
    BACKGROUND_INTENSITY,
    BACKGROUND_MASK,
    BACKGROUND_RED,
    FOREGROUND_BLUE,
    FOREGROUND_GREEN,
    FOREGROUND_INTENSITY,
    FOREGROUND_MASK,
    FOREGROUND_RED,
    Coord,
    MemoryConsole,
    ScreenBufferInfo,
    swap_colors,
)

ESC = "\x1b"
MAX_PARAMS = 6
_DWORD_MASK = 0xFFFFFFFF
_DIGITS = "0123456789"


@dataclass(frozen=True)
class EscapeSequence:
    """A parsed escape sequence.

    ``command`` is None when the text ended before a command character, or
    when ``overflow`` is set because more than six parameters were given.
    ``end`` is the index just past what was consumed.
    """

    params: tuple[Optional[int], ...]
    marker: Optional[str]
    command: Optional[str]
    end: int
    overflow: bool = False

    def param(self, index: int) -> Optional[int]:
        return self.params[index] if index < len(self.params) else None


def parse_escape(text: str, start: int) -> EscapeSequence:
    """Parse the escape sequence whose ESC character is at ``text[start]``."""
    if start >= len(text) or text[start] != ESC:
        raise ValueError(f"no escape character at index {start}")
    values: list[Optional[int]] = [None]
    marker: Optional[str] = None
    pos = start + 1
    while pos < len(text):
        char = text[pos]
        pos += 1
        if char in _DIGITS:
            digit = int(char)
            values[-1] = digit if values[-1] is None else values[-1] * 10 + digit
        elif char == "[":
            continue
        elif char == ";":
            if len(values) == MAX_PARAMS:
                return EscapeSequence(tuple(values), marker, None, pos, overflow=True)
            values.append(None)
        elif char in ">?":
            marker = char
        else:
            return EscapeSequence(tuple(values), marker, char, pos)
    return EscapeSequence(tuple(values), marker, None, pos)


def _foreground(index: int) -> int:
    return (
        (FOREGROUND_RED if index & 1 else 0)
        | (FOREGROUND_GREEN if index & 2 else 0)
        | (FOREGROUND_BLUE if index & 4 else 0)
    )


def _background(index: int) -> int:
    return (
        (BACKGROUND_RED if index & 1 else 0)
        | (BACKGROUND_GREEN if index & 2 else 0)
        | (BACKGROUND_BLUE if index & 4 else 0)
    )


class AnsiWriter:
    """Write text to a console, carrying out the escape sequences it holds.

    Plain characters go to ``stream`` when one is given, otherwise into the
    console itself.
    """

    def __init__(self, console: MemoryConsole, stream: Optional[TextIO] = None):
        self.console = console
        self.stream = stream
        self._original: Optional[int] = None

    def _emit(self, chunk: str) -> None:
        if self.stream is not None:
            self.stream.write(chunk)
        else:
            for char in chunk:
                self.console.put_char(char)

    def write(self, text: str) -> int:
        """Write ``text`` and return the number of characters consumed."""
        attr = self.console.screen_buffer_info().attributes
        if self._original is None:
            self._original = attr
        saved = attr
        pos = 0
        while pos < len(text):
            escape_at = text.find(ESC, pos)
            if escape_at != pos:
                stop = len(text) if escape_at < 0 else escape_at
                self._emit(text[pos:stop])
                pos = stop
                continue
            sequence = parse_escape(text, pos)
            pos = sequence.end
            if sequence.command is None:
                break
            attr = self._apply(sequence, attr, saved)
        return pos

    def printf(self, fmt: str, *args) -> int:
        """Format with ``%`` and write the result."""
        return self.write(fmt % args)

    def puts(self, text: str) -> int:
        """Write ``text`` followed by a newline."""
        return self.write(text) + self.write("\n")

    def _apply(self, sequence: EscapeSequence, attr: int, saved: int) -> int:
        match sequence.command:
            case "h":
                return self._set_mode(sequence, attr)
            case "l":
                return self._reset_mode(sequence, attr)
            case "m":
                return self._select_rendition(sequence, saved)
            case "K":
                self._erase_line(sequence)
            case "J":
                self._erase_display(sequence)
            case "H":
                self._cursor_position(sequence)
            case "A" | "B" | "C" | "D":
                self._move_cursor(sequence.command, sequence.param(0))
        return attr

    def _swap(self, attr: int) -> int:
        attr = swap_colors(attr)
        self.console.set_text_attribute(attr)
        return attr

    def _fill(self, origin: Coord, count: int, info: ScreenBufferInfo) -> None:
        count &= _DWORD_MASK
        self.console.fill_character(" ", count, origin)
        self.console.fill_attribute(info.attributes, count, origin)

    def _clear_window(self) -> ScreenBufferInfo:
        info = self.console.screen_buffer_info()
        height = info.window.bottom - info.window.top + 1
        self._fill(Coord(0, info.window.top), info.size.x * (height + 1), info)
        self.console.set_cursor_position(info.cursor_position)
        return info

    def _set_mode(self, sequence: EscapeSequence, attr: int) -> int:
        if sequence.marker == "?":
            for value in sequence.params:
                if value == 3:
                    info = self._clear_window()
                    with contextlib.suppress(ValueError):
                        self.console.set_buffer_size(replace(info.size, x=132))
                    with contextlib.suppress(ValueError):
                        self.console.set_window(replace(info.window, right=info.window.left + 131))
                elif value == 5:
                    attr = self._swap(attr)
                elif value == 25:
                    self.console.cursor_visible = True
                elif value == 47:
                    self.console.set_cursor_position(Coord(0, 0))
        elif sequence.marker == ">" and sequence.param(0) == 5:
            self.console.cursor_visible = False
        return attr

    def _reset_mode(self, sequence: EscapeSequence, attr: int) -> int:
        if sequence.marker == "?":
            for value in sequence.params:
                if value == 3:
                    info = self._clear_window()
                    with contextlib.suppress(ValueError):
                        self.console.set_window(replace(info.window, right=info.window.left + 79))
                    with contextlib.suppress(ValueError):
                        self.console.set_buffer_size(replace(info.size, x=80))
                elif value == 5:
                    attr = self._swap(attr)
                elif value == 25:
                    self.console.cursor_visible = False
        elif sequence.marker == ">" and sequence.param(0) == 5:
            self.console.cursor_visible = True
        return attr

    def _select_rendition(self, sequence: EscapeSequence, saved: int) -> int:
        attr = saved
        for value in sequence.params:
            if value is None or value == 0:
                attr = self._original
            elif value in (1, 4, 5):
                attr |= FOREGROUND_INTENSITY
            elif value in (7, 27):
                attr = swap_colors(attr)
            elif value in (22, 24, 25):
                attr &= ~FOREGROUND_INTENSITY
            elif 30 <= value <= 37:
                attr = (attr & BACKGROUND_MASK) | _foreground(value - 30)
            elif 40 <= value <= 47:
                attr = (attr & FOREGROUND_MASK) | _background(value - 40)
            elif 90 <= value <= 97:
                attr = (attr & BACKGROUND_MASK) | FOREGROUND_INTENSITY | _foreground(value - 90)
            elif 100 <= value <= 107:
                attr = (attr & FOREGROUND_MASK) | BACKGROUND_INTENSITY | _background(value - 100)
        self.console.set_text_attribute(attr)
        return attr

    def _erase_line(self, sequence: EscapeSequence) -> None:
        info = self.console.screen_buffer_info()
        cursor = info.cursor_position
        mode = sequence.param(0)
        if mode == 1:
            origin, count = Coord(0, cursor.y), cursor.x
        elif mode == 2:
            origin, count = Coord(0, cursor.y), info.size.x
        else:
            origin, count = cursor, info.size.x - cursor.x
        self._fill(origin, count, info)
        self.console.set_cursor_position(cursor)

    def _erase_display(self, sequence: EscapeSequence) -> None:
        info = self.console.screen_buffer_info()
        width = info.size.x
        height = info.window.bottom - info.window.top + 1
        cursor = info.cursor_position
        mode = sequence.param(0)
        if mode == 1:
            origin, count = Coord(0, info.window.top), width * cursor.y + cursor.x
        elif mode == 2:
            origin, count = Coord(0, info.window.top), width * (height + 1)
        else:
            origin, count = Coord(0, cursor.y), width * (height - cursor.y) - cursor.x
        self._fill(origin, count, info)
        self.console.set_cursor_position(cursor)

    def _cursor_position(self, sequence: EscapeSequence) -> None:
        info = self.console.screen_buffer_info()
        window = info.window
        x, y = info.cursor_position.x, info.cursor_position.y
        row, column = sequence.param(0), sequence.param(1)
        if row is None:
            x, y = 0, window.top
        elif column is None:
            x = row - 1
        else:
            x, y = column - 1, window.top + row - 1
        x = min(max(x, window.left), window.right)
        y = min(max(y, window.top), window.bottom)
        self.console.set_cursor_position(Coord(x, y))

    def _move_cursor(self, direction: str, amount: Optional[int]) -> None:
        info = self.console.screen_buffer_info()
        window = info.window
        x, y = info.cursor_position.x, info.cursor_position.y
        step = amount or 0
        if direction == "A":
            y = max(y - step, window.top)
        elif direction == "B":
            y = min(y + step, window.bottom)
        elif direction == "C":
            x = min(x + step, window.right)
        else:
            x = max(x - step, window.left)
        self.console.set_cursor_position(Coord(x, y))


def main(argv: Optional[list[str]] = None) -> int:
    """Print a red greeting through the escape-sequence writer."""
    console = MemoryConsole()
    writer = AnsiWriter(console, sys.stdout)
    writer.printf("\x1b[22;31mhello world\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())