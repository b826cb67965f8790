# hirestext

A text screen drawn in software into a bitmap buffer. Characters are
rendered with small built-in ISO-8859-1 fonts into one of three layouts:

- 42 columns × 24 rows in a 256×192 one-bit-per-pixel buffer (5×8 font)
- 51 columns × 24 rows in a 256×192 one-bit-per-pixel buffer (4×8 font)
- 64 columns × 24 rows in a 320×192 four-bits-per-pixel buffer (4×8 font,
  with foreground, bold foreground and background colours)

A screen object sits on top of the renderers. It keeps the cursor and
scrolls when needed. It also handles the control characters bell,
backspace, tab, newline, form feed and carriage return. An optional VT52
interpreter turns escape sequences into cursor moves, clears and inverse
video.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
pytest
```

## Modules

- `hirestext.config`: `ScreenInit`, `ExtendedScreenInit`, `ScreenState`,
  `fill_nybbles`, `state_from_init`, `state_from_extended_init`
- `hirestext.renderers`: `write_char_at_42cols`, `write_char_at_51cols`,
  `write_char_at_320x16`, `put_bitmask_in_screen_word`, `convert_tayste`
- `hirestext.screen`: `HiResTextScreen`
- `hirestext.vt52`: `Vt52Interpreter`
- `hirestext.font4x8`, `hirestext.font5x8`: the fonts and `glyph()`

## Usage

### A 51- or 42-column screen

```python
from hirestext.config import ScreenInit
from hirestext.screen import HiResTextScreen

screen = HiResTextScreen.open(ScreenInit(num_columns=51))
screen.clrscr()
screen.write_centered_line(0, "Hello")
screen.move_cursor(0, 2)
screen.write_string("Tabs\tand newlines\nwork too. ")
screen.write_dec_word(65535)
```

`num_columns=42` selects the 42-column layout. Any other value selects 51.
If `write_char_at` is left out, the renderer that matches the layout is
chosen for you.

If no `buffer` is given, a buffer of the right size is allocated and
filled with paper. If you pass a `bytearray`, it must hold at least
`buffer_size()` bytes; otherwise `ValueError` is raised. The pixel data is
in `screen.state.buffer`. `screen.state.bytes_per_pixel_row()` gives the
row stride. In one-bit modes a set bit is paper and a clear bit is ink.

### A 64-column colour screen

```python
from hirestext.config import ExtendedScreenInit, ScreenInit
from hirestext.screen import HiResTextScreen

screen = HiResTextScreen.open_extended(ExtendedScreenInit(
    init=ScreenInit(num_columns=51),
    num_pixels_per_row=320,
    num_bits_per_pixel=4,
    fg_color=6, fg_bold_color=4, bg_color=1,
))
screen.clrscr()
screen.bold = True
screen.write_string("bold text")
```

In `ExtendedScreenInit`, geometry fields left at zero default to 256
pixels per row, 192 pixel rows and 1 bit per pixel. Pixels per row must be
a multiple of 8. The width in characters is the pixels per row divided by
6 when `num_columns` is 42, and by 5 otherwise. With 4 bits per pixel the
320×16 renderer is used, so pass `num_columns=51` (5-pixel cells) there.
Colours 0..15 are set through the `foreground_color`,
`foreground_bold_color` and `background_color` properties. A value outside
that range raises `ValueError`.

### Screen operations

- Cursor: `move_cursor(x, y)` ignores positions that are out of range.
  `home()` moves to the top left. The read-only properties are
  `cursor_column`, `cursor_row` and `width`. The cursor column may equal
  the width after a full row has been written; a following newline then
  does not leave an empty row.
- Writing: `write_char(ch)` takes a code 0..255 or a one-character string.
  `write_string(text)` takes `str`, encoded as Latin-1, or `bytes`, and
  stops at the first NUL. `write_centered_line(row, line)` centres a line
  on a row. `write_dec_word(value)` writes a value in 0..65535 and raises
  `ValueError` for anything else. `write_char_at(x, y, code)` draws
  without moving the cursor; code 0 inverts the cell instead.
- Modes: the `bold` and `inverse_video` properties. Inverse video does not
  apply the bold colour in the colour mode.
- Clearing: `clear()`, `clear_n(n)`, `clrscr()`, `clrscr_n(n)`,
  `clrtoeol()`, `clrtobot()`, `clear_rows_to_eos(byte, row)`,
  `clear_rows_n(byte, row, count)`, and `scroll_up()`.

### Cursor blinking and keys

The screen reads time and keys only through callables you give in
`ScreenInit`. `timer` returns a counter that goes up 60 times per second.
`inkey` returns a key code, or 0 when no key is pressed. `bell` is called
when character 7 is written.

`animate_cursor()` shows or hides the cursor from the low byte of the
timer and `cursor_animation_low_timer_byte_mask` (0x30 when left at 0).
Call it from your own loop. `remove_cursor()` takes the cursor off the
screen. `wait_key_blinking_cursor()` polls `inkey`, blinking the cursor,
and returns the first non-zero key. If no `inkey` was given, it returns 3
(Break) at once.

`HiResTextScreen` is a context manager; leaving the block calls
`close()`.

### VT52

```python
from hirestext.vt52 import Vt52Interpreter

vt = Vt52Interpreter(screen)
vt.write("\x1bH\x1bJCleared. \x1bpinverse\x1bq normal\n")
vt.write("\x1bY\x2b\x25at row 11, column 5")
```

| Sequence | Effect |
|---|---|
| `ESC Y r c` | move the cursor to row `r - 32`, column `c - 32` |
| `ESC A` / `ESC B` / `ESC C` / `ESC D` | cursor up / down / right / left |
| `ESC H` | cursor home |
| `ESC J` | clear to end of screen |
| `ESC E` | home and clear the whole screen |
| `ESC K` | clear to end of line |
| `ESC p` / `ESC q` | inverse video on / off |
| `ESC S x` | the byte after `S` is ignored |

Any other character after ESC is dropped. `write()` treats a carriage
return as a newline. `process_char(ch)` handles a single character, and
`reset()` drops a partial sequence.

`redirect()` is a context manager that sends standard output (for example
`print`) to the screen while the block runs. It only redirects when the
screen was opened with `redirect_printf=True` and has not been closed;
otherwise output is left alone.

### Fonts

`hirestext.font4x8.glyph(code)` returns the 8-byte bitmap of a character.
`hirestext.font5x8.glyph(code, box_drawing=True)` does the same for the
5×8 font. Both accept codes 32–127 and 160–255 and raise `ValueError` for
other codes. In the 5×8 font, codes 160–185 are box-drawing and block
glyphs by default. Pass `box_drawing=False` to get the regular Latin-1
symbols for those codes. The screen renderers always use the default
tables.

## What it does not do

The package only fills a byte buffer. It does not open a window, put the
buffer on a display or read the keyboard. Turning the buffer into an image
or a display, and supplying the timer, key and bell callables, is left to
the program that uses it. There is no command-line program.