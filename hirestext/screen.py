"""A text screen drawn in software on a graphics buffer.

The screen has 24 rows of 42, 51 or 64 columns, depending on the font and
graphics mode.  The cursor column may equal the screen width: after a full
row of characters the cursor stays past the last column, so that a
following newline does not produce an empty row.
"""

from __future__ import annotations

from typing import Union

from .config import (
    HIRESHEIGHT,
    PIXEL_ROWS_PER_TEXT_ROW,
    ExtendedScreenInit,
    ScreenInit,
    ScreenState,
    fill_nybbles,
    state_from_extended_init,
    state_from_init,
)
from .renderers import (
    write_char_at_42cols,
    write_char_at_51cols,
    write_char_at_320x16,
)

BREAK_KEY = 3
"""Key code returned by the wait loop when no keyboard is available."""

_BELL = 0x07
_BACKSPACE = 0x08
_TAB = 0x09
_NEWLINE = 0x0A
_FORM_FEED = 0x0C
_CARRIAGE_RETURN = 0x0D
_DELETE = 0x7F

Char = Union[int, str]


def _code_of(ch: Char) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError("expected a single character")
        code = ord(ch)
    else:
        code = ch
    if not 0 <= code <= 0xFF:
        raise ValueError(f"character code {code} is outside 0..255")
    return code


def _check_color(color: int) -> int:
    if not 0 <= color <= 15:
        raise ValueError(f"colour {color} is outside 0..15")
    return fill_nybbles(color)


class HiResTextScreen:
    """A 24-row text screen with a cursor, scrolling and a blinking cursor."""

    def __init__(self, state: ScreenState) -> None:
        self.state = state

    @classmethod
    def open(cls, init: ScreenInit) -> "HiResTextScreen":
        """Start a 42x24 or 51x24 screen on a 256x192x2 buffer."""
        state = state_from_init(init)
        if state.write_char_at is None:
            state.write_char_at = (write_char_at_42cols if state.hi_res_width == 42
                                   else write_char_at_51cols)
        return cls(state)

    @classmethod
    def open_extended(cls, init: ExtendedScreenInit) -> "HiResTextScreen":
        """Start a screen whose graphics mode and colours are given explicitly."""
        state = state_from_extended_init(init)
        if state.write_char_at is None:
            if state.num_bits_per_pixel == 4:
                state.write_char_at = write_char_at_320x16
            elif init.init.num_columns == 42:
                state.write_char_at = write_char_at_42cols
            else:
                state.write_char_at = write_char_at_51cols
        return cls(state)

    def __enter__(self) -> "HiResTextScreen":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Stop redirecting console output to this screen."""
        self.state.redirect_printf = False

    # Cursor position and modes.

    @property
    def cursor_column(self) -> int:
        """Column of the cursor; may equal the screen width."""
        return self.state.text_pos_x

    @property
    def cursor_row(self) -> int:
        """Row of the cursor."""
        return self.state.text_pos_y

    @property
    def width(self) -> int:
        """Number of characters per row."""
        return self.state.hi_res_width

    @property
    def bold(self) -> bool:
        """Whether characters are written in bold."""
        return self.state.bold

    @bold.setter
    def bold(self, value: bool) -> None:
        self.state.bold = bool(value)

    @property
    def inverse_video(self) -> bool:
        """Whether characters are written in inverted colours."""
        return self.state.inverse_video

    @inverse_video.setter
    def inverse_video(self, value: bool) -> None:
        self.state.inverse_video = bool(value)

    @property
    def foreground_color(self) -> int:
        """Text colour (0..15) in 4-bit pixel modes."""
        return self.state.fg_color_mask & 0x0F

    @foreground_color.setter
    def foreground_color(self, color: int) -> None:
        self.state.fg_color_mask = _check_color(color)

    @property
    def foreground_bold_color(self) -> int:
        """Bold text colour (0..15) in 4-bit pixel modes."""
        return self.state.fg_bold_color_mask & 0x0F

    @foreground_bold_color.setter
    def foreground_bold_color(self, color: int) -> None:
        self.state.fg_bold_color_mask = _check_color(color)

    @property
    def background_color(self) -> int:
        """Background colour (0..15) in 4-bit pixel modes."""
        return self.state.bg_color_mask & 0x0F

    @background_color.setter
    def background_color(self, color: int) -> None:
        self.state.bg_color_mask = _check_color(color)

    def move_cursor(self, x: int, y: int) -> None:
        """Put the cursor at (x, y); does nothing if either is out of range."""
        if not 0 <= x < self.state.hi_res_width:
            return
        if not 0 <= y < HIRESHEIGHT:
            return
        self.state.text_pos_x = x
        self.state.text_pos_y = y

    def home(self) -> None:
        """Put the cursor in the upper left position."""
        self.move_cursor(0, 0)

    # Clearing and scrolling.

    def _blank_byte(self) -> int:
        return self.state.bg_color_mask if self.state.num_bits_per_pixel == 4 else 0xFF

    def clear(self) -> None:
        """Fill the screen with spaces without moving the cursor."""
        self.clear_rows_to_eos(self._blank_byte(), 0)

    def clear_n(self, n: int) -> None:
        """Fill the first ``n`` rows with spaces without moving the cursor."""
        self.clear_rows_n(self._blank_byte(), 0, n)

    def clrscr(self) -> None:
        """Home the cursor and clear the screen."""
        self.home()
        self.clear()

    def clrscr_n(self, n: int) -> None:
        """Home the cursor and clear the first ``n`` rows."""
        self.home()
        self.clear_n(n)

    def _fill(self, start: int, end: int, value: int) -> None:
        if start < end:
            self.state.buffer[start:end] = bytes([value & 0xFF]) * (end - start)

    def clear_rows_to_eos(self, byte_to_clear_with: int, text_row: int) -> None:
        """Fill the buffer from ``text_row`` to the end of the screen."""
        if not 0 <= text_row < HIRESHEIGHT:
            return
        start = text_row * self.state.bytes_per_text_row()
        self._fill(start, self.state.buffer_size(), byte_to_clear_with)

    def clear_rows_n(self, byte_to_clear_with: int, text_row: int,
                     rows_to_clear: int) -> None:
        """Fill ``rows_to_clear`` text rows starting at ``text_row``.

        The count is clamped so that clearing never goes past the last row.
        """
        if not 0 <= text_row < HIRESHEIGHT:
            return
        if rows_to_clear <= 0:
            return
        rows_to_clear = min(rows_to_clear, HIRESHEIGHT - text_row)
        per_row = self.state.bytes_per_text_row()
        start = text_row * per_row
        end = min(start + rows_to_clear * per_row, self.state.buffer_size())
        self._fill(start, end, byte_to_clear_with)

    def clrtoeol(self) -> None:
        """Write spaces from the cursor to the end of its row; the cursor stays."""
        for x in range(self.state.text_pos_x, self.state.hi_res_width):
            self.write_char_at(x, self.state.text_pos_y, ord(" "))

    def clrtobot(self) -> None:
        """Write spaces from the cursor to the end of the screen; the cursor stays."""
        blank = self._blank_byte()
        below = 0
        if self.state.text_pos_x > 0:
            self.clrtoeol()
            below = 1
        self.clear_rows_to_eos(blank, self.state.text_pos_y + below)

    def scroll_up(self) -> None:
        """Scroll the screen one text row up and blank the bottom row."""
        buffer = self.state.buffer
        per_pixel_row = self.state.bytes_per_pixel_row()
        kept = per_pixel_row * (self.state.num_pixel_rows_per_screen
                                - PIXEL_ROWS_PER_TEXT_ROW)
        source = per_pixel_row * PIXEL_ROWS_PER_TEXT_ROW
        buffer[0:kept] = buffer[source:source + kept]
        self._fill(kept, self.state.buffer_size(), self._blank_byte())

    # Writing.

    def write_char_at(self, x: int, y: int, ascii_code: Char) -> None:
        """Draw a character at (x, y) without moving the cursor.

        A code of zero inverts the colours of that cell.
        """
        self.state.write_char_at(self.state, x, y, _code_of(ascii_code))

    def _next_row_if_past_end(self) -> None:
        state = self.state
        if state.text_pos_x < state.hi_res_width:
            return
        state.text_pos_x = 0
        state.text_pos_y += 1
        if state.text_pos_y < HIRESHEIGHT:
            return
        self.scroll_up()
        state.text_pos_y = HIRESHEIGHT - 1

    def write_char(self, ch: Char) -> None:
        """Write a character at the cursor and advance it.

        Handles bell, backspace, tab, newline, form feed and carriage return;
        other non-printable characters are ignored.  Scrolls when needed.
        """
        code = _code_of(ch)
        state = self.state
        if code == _BELL:
            if state.bell is not None:
                state.bell()
        elif code == _BACKSPACE:
            if state.text_pos_x > 0:
                state.text_pos_x -= 1
            elif state.text_pos_y > 0:
                state.text_pos_x = state.hi_res_width - 1
                state.text_pos_y -= 1
        elif code == _TAB:
            self._next_row_if_past_end()
            new_x = min((state.text_pos_x | 7) + 1, state.hi_res_width)
            for _ in range(new_x - state.text_pos_x):
                self.write_char(" ")
        elif code == _NEWLINE:
            state.text_pos_x = 0
            state.text_pos_y += 1
            if state.text_pos_y >= HIRESHEIGHT:
                self.scroll_up()
                state.text_pos_y = HIRESHEIGHT - 1
        elif code == _FORM_FEED:
            self.clrscr()
        elif code == _CARRIAGE_RETURN:
            state.text_pos_x = 0
        elif code >= 0x20 and code != _DELETE:
            self._next_row_if_past_end()
            self.write_char_at(state.text_pos_x, state.text_pos_y, code)
            state.text_pos_x += 1

    def write_string(self, text: Union[str, bytes]) -> None:
        """Write each character of ``text`` up to the first NUL character."""
        data = text.encode("latin-1") if isinstance(text, str) else bytes(text)
        for code in data:
            if code == 0:
                break
            self.write_char(code)

    def write_centered_line(self, row: int, line: str) -> None:
        """Write ``line`` centred on ``row``, leaving the cursor after it."""
        self.move_cursor((self.state.hi_res_width - len(line)) // 2, row)
        self.write_string(line)

    def write_dec_word(self, value: int) -> None:
        """Write an unsigned 16-bit value in decimal."""
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"{value} is not an unsigned 16-bit value")
        self.write_string(str(value))

    # Cursor display.

    def invert_pixels_at_cursor(self) -> None:
        """Invert the colours of the cell under the cursor."""
        x = self.state.text_pos_x
        y = self.state.text_pos_y
        if x >= self.state.hi_res_width:
            x = 0
            y = min(y + 1, HIRESHEIGHT - 1)
        self.state.write_char_at(self.state, x, y, 0)

    def remove_cursor(self) -> None:
        """Erase the cursor if it is displayed."""
        if self.state.cursor_present:
            self.invert_pixels_at_cursor()
            self.state.cursor_present = False

    def animate_cursor(self) -> None:
        """Show or hide the cursor according to the timer; call periodically."""
        mask = self.state.cursor_animation_low_timer_byte_mask
        ticks = self.state.timer() if self.state.timer is not None else 0
        shown = (ticks & 0xFF & mask) != mask
        if shown != self.state.cursor_present:
            self.invert_pixels_at_cursor()
            self.state.cursor_present = shown

    def wait_key_blinking_cursor(self) -> int:
        """Blink the cursor until a key is pressed and return its code.

        Returns the break code 3 at once when no keyboard function is set.
        """
        inkey = self.state.inkey
        if inkey is None:
            return BREAK_KEY
        while True:
            key = inkey()
            if key:
                break
            self.animate_cursor()
        self.remove_cursor()
        return key