"""Initialisation parameters and run-time state of a high-resolution text screen.

The text screen is drawn in software on a graphics buffer: either a
256x192 monochrome buffer (1 bit per pixel) holding a 42x24 or 51x24 text
screen, or a 320x192 buffer with 16 colours (4 bits per pixel) holding a
64x24 text screen.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

HIRESHEIGHT = 24
"""Number of text rows."""
PIXEL_COLS_PER_SCREEN = 256
PIXEL_ROWS_PER_SCREEN = 192
PIXEL_ROWS_PER_TEXT_ROW = 8
BYTES_PER_PIXEL_ROW = 32

DEFAULT_CURSOR_ANIMATION_MASK = 0x30
"""Timer mask used when the initialiser leaves the cursor mask at zero."""

WriteCharAt = Callable[["ScreenState", int, int, int], None]
"""Draws a character at (x, y); a code of zero inverts the cell instead."""


def fill_nybbles(nybble: int) -> int:
    """Return a byte whose two nybbles both hold ``nybble``."""
    return (nybble | (nybble << 4)) & 0xFF


@dataclass
class ScreenInit:
    """Parameters for a 42x24 or 51x24 text screen on a 256x192x2 buffer.

    ``num_columns`` is 42 or 51; any other value means 51.
    ``write_char_at`` must match the column count.
    ``buffer`` is the graphics buffer; when omitted, one is allocated.
    ``timer`` returns a counter incremented 60 times per second; it drives
    the cursor animation.
    A zero ``cursor_animation_low_timer_byte_mask`` selects the default.
    ``inkey`` polls the keyboard and returns a key code, or 0 if none.
    ``bell`` plays a short sound when character 7 is written.
    """

    num_columns: int = 51
    write_char_at: Optional[WriteCharAt] = None
    buffer: Optional[bytearray] = None
    redirect_printf: bool = False
    timer: Optional[Callable[[], int]] = None
    cursor_animation_low_timer_byte_mask: int = 0
    inkey: Optional[Callable[[], int]] = None
    bell: Optional[Callable[[], None]] = None


@dataclass
class ExtendedScreenInit:
    """Parameters that also describe the graphics mode and its colours.

    Zero geometry fields take the defaults 256 pixels per row, 192 pixel
    rows and 1 bit per pixel.  The colours (0..15) only matter in 4-bit
    pixel modes.
    """

    init: ScreenInit = field(default_factory=ScreenInit)
    num_pixels_per_row: int = 0
    num_pixel_rows_per_screen: int = 0
    num_bits_per_pixel: int = 0
    fg_color: int = 0
    fg_bold_color: int = 0
    bg_color: int = 0


@dataclass
class ScreenState:
    """Everything a running text screen keeps track of."""

    hi_res_width: int = 51
    num_pixels_per_row: int = PIXEL_COLS_PER_SCREEN
    num_pixel_rows_per_screen: int = PIXEL_ROWS_PER_SCREEN
    num_bits_per_pixel: int = 1
    fg_color_mask: int = 0
    fg_bold_color_mask: int = 0
    bg_color_mask: int = 0
    text_pos_x: int = 0
    text_pos_y: int = 0
    buffer: bytearray = field(default_factory=bytearray)
    cursor_present: bool = False
    timer: Optional[Callable[[], int]] = None
    redirect_printf: bool = False
    write_char_at: Optional[WriteCharAt] = None
    inkey: Optional[Callable[[], int]] = None
    cursor_animation_low_timer_byte_mask: int = DEFAULT_CURSOR_ANIMATION_MASK
    bell: Optional[Callable[[], None]] = None
    inverse_video: bool = False
    bold: bool = False

    def bytes_per_pixel_row(self) -> int:
        """Number of buffer bytes in one row of pixels."""
        return self.num_pixels_per_row * self.num_bits_per_pixel // 8

    def bytes_per_text_row(self) -> int:
        """Number of buffer bytes covered by one row of text."""
        return self.bytes_per_pixel_row() * PIXEL_ROWS_PER_TEXT_ROW

    def buffer_size(self) -> int:
        """Number of bytes in the whole graphics buffer."""
        return (self.num_pixels_per_row // 8
                * self.num_pixel_rows_per_screen
                * self.num_bits_per_pixel)


def _finish(state: ScreenState, init: ScreenInit) -> ScreenState:
    if state.num_pixels_per_row % 8:
        raise ValueError("pixels per row must be a multiple of 8")

    state.write_char_at = init.write_char_at
    state.text_pos_x = 0
    state.text_pos_y = 0

    size = state.buffer_size()
    if init.buffer is None:
        blank = state.bg_color_mask if state.num_bits_per_pixel == 4 else 0xFF
        state.buffer = bytearray([blank]) * size
    else:
        if len(init.buffer) < size:
            raise ValueError(
                f"screen buffer holds {len(init.buffer)} bytes, {size} needed")
        state.buffer = init.buffer

    state.cursor_present = False
    state.redirect_printf = bool(init.redirect_printf)
    state.timer = init.timer
    state.inkey = init.inkey
    state.cursor_animation_low_timer_byte_mask = (
        init.cursor_animation_low_timer_byte_mask & 0xFF
        or DEFAULT_CURSOR_ANIMATION_MASK)
    state.bell = init.bell
    state.inverse_video = False
    state.bold = False
    return state


def state_from_init(init: ScreenInit) -> ScreenState:
    """Build the state of a 42x24 or 51x24 screen on a 256x192x2 buffer."""
    state = ScreenState(
        hi_res_width=42 if init.num_columns == 42 else 51,
        num_pixels_per_row=PIXEL_COLS_PER_SCREEN,
        num_pixel_rows_per_screen=PIXEL_ROWS_PER_SCREEN,
        num_bits_per_pixel=1,
    )
    return _finish(state, init)


def state_from_extended_init(init: ExtendedScreenInit) -> ScreenState:
    """Build the state of a screen whose graphics mode is given explicitly."""
    col_width = 6 if init.init.num_columns == 42 else 5
    pixels_per_row = init.num_pixels_per_row or PIXEL_COLS_PER_SCREEN
    state = ScreenState(
        hi_res_width=(pixels_per_row // col_width) & 0xFF,
        num_pixels_per_row=pixels_per_row,
        num_pixel_rows_per_screen=(init.num_pixel_rows_per_screen
                                   or PIXEL_ROWS_PER_SCREEN) & 0xFF,
        num_bits_per_pixel=(init.num_bits_per_pixel or 1) & 0xFF,
        fg_color_mask=fill_nybbles(init.fg_color),
        fg_bold_color_mask=fill_nybbles(init.fg_bold_color),
        bg_color_mask=fill_nybbles(init.bg_color),
    )
    return _finish(state, init.init)