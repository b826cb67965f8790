"""Character renderers that draw glyphs into the graphics buffer of a screen.

Three layouts are supported:

* 42 columns on a 256x192x2 buffer, 6-pixel cells, using the 5x8 font;
* 51 columns on a 256x192x2 buffer, 5-pixel cells, using the 4x8 font;
* 64 columns on a 320x192x16 buffer, 5-pixel cells, using the 4x8 font.

Every renderer takes the screen state, a text column ``x``, a text row ``y``
and a character code.  A code of zero inverts the colours of the cell at
(x, y) instead of drawing a glyph.
"""

from __future__ import annotations

from . import font4x8, font5x8
from .config import BYTES_PER_PIXEL_ROW, PIXEL_ROWS_PER_TEXT_ROW, ScreenState

_MONO_TEXT_ROW_BYTES = BYTES_PER_PIXEL_ROW * PIXEL_ROWS_PER_TEXT_ROW

# (byte offset in frame, right shifts, AND mask) for each cell of a frame.
# A 42-column frame is 3 bytes holding 4 cells of 6 pixels.
_FRAME_42COLS = (
    (0, 0, 0x03FF),
    (0, 6, 0xFC0F),
    (1, 4, 0xF03F),
    (2, 2, 0xC0FF),
)
_FRAME_42COLS_BYTES = 3

# A 51-column frame is 5 bytes holding 8 cells of 5 pixels.
_FRAME_51COLS = (
    (0, 0, 0x07FF),
    (0, 5, 0xF83F),
    (1, 2, 0xC1FF),
    (1, 7, 0xFE0F),
    (2, 4, 0xF07F),
    (3, 1, 0x83FF),
    (3, 6, 0xFC1F),
    (4, 3, 0xE0FF),
)
_FRAME_51COLS_BYTES = 5

# Two 4-bit pixels per byte: each bit of a tayste selects one nybble.
_NYBBLE_TABLE = (0x00, 0x0F, 0xF0, 0xFF)

_COLOR_PIXEL_ROW_BYTES = 320 * 4 // 8
_COLOR_TEXT_ROW_BYTES = _COLOR_PIXEL_ROW_BYTES * PIXEL_ROWS_PER_TEXT_ROW
_COLOR_CELL_BITS = 5 * 4


def _read_word(buffer: bytearray, offset: int) -> int:
    high = buffer[offset]
    low = buffer[offset + 1] if offset + 1 < len(buffer) else 0
    return (high << 8) | low


def _write_word(buffer: bytearray, offset: int, value: int) -> None:
    buffer[offset] = (value >> 8) & 0xFF
    if offset + 1 < len(buffer):
        buffer[offset + 1] = value & 0xFF


def put_bitmask_in_screen_word(state: ScreenState, ascii_code: int, offset: int,
                               char_bitmask: bytes, shifts: int, mask: int) -> None:
    """Draw one monochrome glyph cell, 8 pixel rows, starting at byte ``offset``.

    Each pixel row is handled as a big-endian 16-bit word: the bits kept by
    ``mask`` are preserved and the glyph row, shifted right by ``shifts``,
    fills the others.  With ``ascii_code`` zero, the cell bits are inverted
    and ``char_bitmask`` is not used.  Bold and inverse video follow the
    state's flags.
    """
    mask &= 0xFFFF
    inv_mask = ~mask & 0xFFFF
    buffer = state.buffer
    for row in range(PIXEL_ROWS_PER_TEXT_ROW):
        word = _read_word(buffer, offset)
        if ascii_code:
            char_word = char_bitmask[row] << 8
            if state.bold:
                inverted = ~char_word & 0xFFFF
                char_word = ~(inverted | (inverted >> 1)) & 0xFFFF
            char_word >>= shifts
            if state.inverse_video:
                char_word ^= inv_mask
            word = (word & mask) | char_word
        else:
            word ^= inv_mask
        _write_word(buffer, offset, word & 0xFFFF)
        offset += BYTES_PER_PIXEL_ROW


def _write_mono(state: ScreenState, x: int, y: int, ascii_code: int,
                frame: tuple, frame_bytes: int, glyph_of) -> None:
    frame_col = x % len(frame)
    byte_in_frame, shifts, mask = frame[frame_col]
    offset = (y * _MONO_TEXT_ROW_BYTES
              + x // len(frame) * frame_bytes
              + byte_in_frame)
    bitmask = glyph_of(ascii_code) if ascii_code else b""
    put_bitmask_in_screen_word(state, ascii_code, offset, bitmask, shifts, mask)


def write_char_at_42cols(state: ScreenState, x: int, y: int, ascii_code: int) -> None:
    """Draw a character at (x, y) of a 42x24 screen on a 256x192x2 buffer."""
    _write_mono(state, x, y, ascii_code, _FRAME_42COLS, _FRAME_42COLS_BYTES,
                font5x8.glyph)


def write_char_at_51cols(state: ScreenState, x: int, y: int, ascii_code: int) -> None:
    """Draw a character at (x, y) of a 51x24 screen on a 256x192x2 buffer."""
    _write_mono(state, x, y, ascii_code, _FRAME_51COLS, _FRAME_51COLS_BYTES,
                font4x8.glyph)


def convert_tayste(state: ScreenState, tayste: int, fg_mask: int) -> int:
    """Turn two glyph bits into a byte of two 4-bit pixels.

    A set bit (paper) takes the background colour, a reset bit (ink) takes
    the colour of ``fg_mask``.  The higher bit gives the left pixel.
    """
    octet = _NYBBLE_TABLE[tayste & 0x03]
    return ((octet & state.bg_color_mask) | (~octet & fg_mask)) & 0xFF


def write_char_at_320x16(state: ScreenState, x: int, y: int, ascii_code: int) -> None:
    """Draw a character at (x, y) of a 64x24 screen on a 320x192x16 buffer.

    An even column covers the first 20 bits of a 3-byte region, an odd
    column its last 20 bits; the remaining nybble is left unchanged.
    Inverting bold colours is not supported.
    """
    buffer = state.buffer
    offset = y * _COLOR_TEXT_ROW_BYTES + x * _COLOR_CELL_BITS // 8
    bitmask = font4x8.glyph(ascii_code) if ascii_code else b""
    fg_mask = state.fg_bold_color_mask if state.bold else state.fg_color_mask
    even = x % 2 == 0

    for row in range(PIXEL_ROWS_PER_TEXT_ROW):
        first, second, third = offset, offset + 1, offset + 2
        if ascii_code:
            bits = bitmask[row]
            xor_arg = (fg_mask ^ state.bg_color_mask) if state.inverse_video else 0
            if even:
                bits >>= 2
                pixel_pair = convert_tayste(state, bits & 0x03, fg_mask)
                bits >>= 2
                buffer[second] = convert_tayste(state, bits & 0x03, fg_mask) ^ xor_arg
                bits >>= 2
                buffer[first] = convert_tayste(state, bits, fg_mask) ^ xor_arg
                buffer[third] = (buffer[third] & 0x0F) | ((pixel_pair ^ xor_arg) & 0xF0)
            else:
                bits >>= 3
                buffer[third] = convert_tayste(state, bits & 0x03, fg_mask) ^ xor_arg
                bits >>= 2
                buffer[second] = convert_tayste(state, bits & 0x03, fg_mask) ^ xor_arg
                bits >>= 2
                low = (convert_tayste(state, bits, fg_mask) ^ xor_arg) & 0x0F
                buffer[first] = (buffer[first] & 0xF0) | low
        else:
            combo = fg_mask ^ state.bg_color_mask
            if even:
                buffer[first] ^= combo
                buffer[second] ^= combo
                buffer[third] = (buffer[third] & 0x0F) | ((buffer[third] ^ combo) & 0xF0)
            else:
                buffer[first] = (buffer[first] & 0xF0) | ((buffer[first] ^ combo) & 0x0F)
                buffer[second] ^= combo
                buffer[third] ^= combo
        offset += _COLOR_PIXEL_ROW_BYTES