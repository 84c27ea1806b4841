# ansiw32

`ansiw32` reads ANSI escape sequences and applies them to an in-memory
console model. The sequences it handles are SGR colours, cursor movement,
line and screen erasing, and a few private modes. Plain characters go to
an output stream, or into the console's own character grid if you give
no stream. Escape sequences change the state of the console.

## Installation

```
pip install .
```

## Usage

```python
import io

from ansiw32.console import MemoryConsole
from ansiw32.writer import AnsiWriter

console = MemoryConsole(80, 25, 0x07)
out = io.StringIO()
writer = AnsiWriter(console, out)

writer.write("\x1b[31mred\x1b[0m plain\n")
writer.printf("%s = %d\n", "answer", 42)
writer.puts("line")

print(out.getvalue())
print(hex(console.screen_buffer_info().attributes))
```

If you leave out the stream, `AnsiWriter(console)` writes plain
characters into the console with `put_char`. Each character takes the
current text attribute. Newlines scroll the buffer when they reach the
bottom.

`AnsiWriter` has these methods:

- `write(text)` returns the number of characters it consumed.
  Processing stops early in two cases: when an escape sequence ends
  before its command character, and when a sequence has more than six
  parameters.
- `printf(fmt, *args)` formats its arguments with `%` and then writes
  the result.
- `puts(text)` writes `text` and then a newline.

### The console model

`MemoryConsole(width, height, attributes)` holds:

- a grid of characters, with an attribute for each cell
- a cursor
- a visible window
- the current text attribute
- a cursor-visibility flag

Its methods:

- `screen_buffer_info()` returns a `ScreenBufferInfo`. It holds the
  buffer size, the cursor position, the attributes and the window, as
  `Coord` and `SmallRect` values.
- `row_text(y)` and `row_attributes(y)` return the contents of one row.
- `fill_character` and `fill_attribute` fill cells.
- `set_cursor_position`, `set_text_attribute`, `set_buffer_size` and
  `set_window` change the state of the console. They raise `ValueError`
  for a position, size or window that does not fit the buffer.

`ansiw32.console` also defines the attribute bits `FOREGROUND_RED`,
`BACKGROUND_BLUE`, `FOREGROUND_INTENSITY` and the rest.
`swap_colors(attribute)` swaps the foreground bits of an attribute with
its background bits.

### Parsing

`parse_escape(text, start)` parses the escape sequence whose ESC is at
`text[start]`. It returns an `EscapeSequence` with these fields:

- `params`: the parameters, with `None` for an empty parameter.
- `marker`: the `>` or `?` marker.
- `command`: the final command character.
- `end`: the index just past the sequence.
- `overflow`: set when the sequence has more than six parameters.

`parse_escape` raises `ValueError` if there is no ESC at `start`.

### Supported sequences

- `m`: reset (0 or empty), intensity on (1, 4, 5), intensity off
  (22, 24, 25), reverse (7, 27), foreground 30–37 and 90–97, background
  40–47 and 100–107.
- `A` `B` `C` `D`: move the cursor up, down, forward and back. The
  cursor stays inside the window.
- `H`: cursor position. The cursor is clamped to the window.
- `K`: erase in line (0, 1, 2).
- `J`: erase in display (0, 1, 2).
- `?…h` and `?…l` set and reset these private modes:
  - 3: clears the window and switches to 132 or 80 columns. A size or
    window that does not fit is ignored.
  - 5: swaps the colours.
  - 25: shows or hides the cursor.
  - 47: moves the cursor home. This applies to `h` only.
- `>5h` hides the cursor and `>5l` shows it.

## Command line

```
ansiw32
```

This command writes the text `\x1b[22;31mhello world\n` through the
interpreter to standard output. Only the plain characters
(`hello world`) reach standard output. The colour sequence changes the
attribute of an in-memory console, not the colour of the terminal.

## What it does not do

The package works only on its in-memory `MemoryConsole`. It does not
drive a real terminal or console window. It does not change the colours
or the cursor you see on screen.