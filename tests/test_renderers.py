import pytest

from hirestext import font4x8, font5x8
from hirestext.config import (
    ExtendedScreenInit,
    ScreenInit,
    ScreenState,
    fill_nybbles,
    state_from_extended_init,
    state_from_init,
)
from hirestext.renderers import (
    convert_tayste,
    put_bitmask_in_screen_word,
    write_char_at_320x16,
    write_char_at_42cols,
    write_char_at_51cols,
)


def mono_state(columns=51):
    return state_from_init(ScreenInit(num_columns=columns))


def color_state(fg=6, bold_fg=4, bg=1):
    return state_from_extended_init(ExtendedScreenInit(
        init=ScreenInit(num_columns=51),
        num_pixels_per_row=320,
        num_pixel_rows_per_screen=192,
        num_bits_per_pixel=4,
        fg_color=fg,
        fg_bold_color=bold_fg,
        bg_color=bg,
    ))


def mono_row_byte(state, y, row, byte=0):
    return state.buffer[y * 256 + row * 32 + byte]


def color_pixels(state, x, y, row):
    """Decode the five 4-bit pixels of a cell row on a 320x16 screen."""
    start = y * 1280 + row * 160 + x * 20 // 8
    nybbles = []
    for b in state.buffer[start:start + 3]:
        nybbles.extend((b >> 4, b & 0x0F))
    return nybbles[0:5] if x % 2 == 0 else nybbles[1:6]


def test_space_leaves_blank_51col_buffer_unchanged():
    state = mono_state()
    before = bytes(state.buffer)
    write_char_at_51cols(state, 0, 0, ord(" "))
    assert bytes(state.buffer) == before


def test_51col_glyph_at_column_zero_matches_font():
    state = mono_state()
    write_char_at_51cols(state, 0, 3, ord("A"))
    glyph = font4x8.glyph(ord("A"))
    for row in range(8):
        assert mono_row_byte(state, 3, row) & 0xF8 == glyph[row] & 0xF8
        assert mono_row_byte(state, 3, row) & 0x07 == 0x07


def test_51col_adjacent_character_keeps_first():
    state = mono_state()
    write_char_at_51cols(state, 0, 0, ord("A"))
    write_char_at_51cols(state, 1, 0, ord("W"))
    glyph = font4x8.glyph(ord("A"))
    for row in range(8):
        assert mono_row_byte(state, 0, row) & 0xF8 == glyph[row] & 0xF8


def test_51col_write_touches_only_its_text_row():
    state = mono_state()
    write_char_at_51cols(state, 17, 5, ord("M"))
    outside = state.buffer[:5 * 256] + state.buffer[6 * 256:]
    assert set(outside) == {0xFF}
    assert state.buffer[5 * 256:6 * 256] != bytearray([0xFF]) * 256


def test_51col_invert_twice_restores():
    state = mono_state()
    write_char_at_51cols(state, 9, 7, ord("g"))
    before = bytes(state.buffer)
    write_char_at_51cols(state, 9, 7, 0)
    assert bytes(state.buffer) != before
    write_char_at_51cols(state, 9, 7, 0)
    assert bytes(state.buffer) == before


def test_51col_inverse_video_inverts_glyph_bits():
    state = mono_state()
    state.inverse_video = True
    write_char_at_51cols(state, 0, 0, ord("A"))
    glyph = font4x8.glyph(ord("A"))
    for row in range(8):
        assert mono_row_byte(state, 0, row) & 0xF8 == ~glyph[row] & 0xF8


def test_51col_bold_only_adds_ink():
    normal = mono_state()
    bold = mono_state()
    bold.bold = True
    write_char_at_51cols(normal, 0, 0, ord("I"))
    write_char_at_51cols(bold, 0, 0, ord("I"))
    for row in range(8):
        n = mono_row_byte(normal, 0, row)
        b = mono_row_byte(bold, 0, row)
        assert b & ~n & 0xFF == 0


def test_51col_last_cell_of_screen_stays_in_bounds():
    state = mono_state()
    write_char_at_51cols(state, 50, 23, ord("Z"))
    assert len(state.buffer) == 6144
    before = bytes(state.buffer)
    write_char_at_51cols(state, 50, 23, 0)
    write_char_at_51cols(state, 50, 23, 0)
    assert bytes(state.buffer) == before


def test_51col_rejects_code_without_glyph():
    state = mono_state()
    with pytest.raises(ValueError):
        write_char_at_51cols(state, 0, 0, 10)


def test_42col_glyph_at_column_zero_matches_font():
    state = mono_state(42)
    write_char_at_42cols(state, 0, 2, ord("Q"))
    glyph = font5x8.glyph(ord("Q"))
    for row in range(8):
        assert mono_row_byte(state, 2, row) & 0xFC == glyph[row] & 0xFC


def test_42col_invert_twice_restores():
    state = mono_state(42)
    write_char_at_42cols(state, 41, 23, ord("x"))
    before = bytes(state.buffer)
    write_char_at_42cols(state, 41, 23, 0)
    write_char_at_42cols(state, 41, 23, 0)
    assert bytes(state.buffer) == before


def test_put_bitmask_copies_rows_into_cleared_buffer():
    state = ScreenState(buffer=bytearray(6144))
    put_bitmask_in_screen_word(state, 65, 0, bytes([0xF8] * 8), 0, 0x07FF)
    for row in range(8):
        assert state.buffer[row * 32] == 0xF8
        assert state.buffer[row * 32 + 1] == 0


def test_put_bitmask_zero_code_inverts_masked_bits_only():
    state = ScreenState(buffer=bytearray(6144))
    put_bitmask_in_screen_word(state, 0, 0, b"", 0, 0x07FF)
    for row in range(8):
        assert state.buffer[row * 32] == 0xF8
        assert state.buffer[row * 32 + 1] == 0


def test_convert_tayste_selects_colors():
    state = ScreenState(bg_color_mask=fill_nybbles(1))
    fg = fill_nybbles(2)
    assert convert_tayste(state, 3, fg) == fill_nybbles(1)
    assert convert_tayste(state, 0, fg) == fg
    assert convert_tayste(state, 1, fg) == 0x21


def test_320_space_leaves_background():
    state = color_state()
    before = bytes(state.buffer)
    write_char_at_320x16(state, 0, 0, ord(" "))
    write_char_at_320x16(state, 1, 0, ord(" "))
    assert bytes(state.buffer) == before


@pytest.mark.parametrize("x", [0, 1, 62, 63])
def test_320_glyph_pixels_match_font(x):
    state = color_state(fg=6, bg=1)
    write_char_at_320x16(state, x, 4, ord("A"))
    glyph = font4x8.glyph(ord("A"))
    for row in range(8):
        expected = [1 if glyph[row] & (0x80 >> i) else 6 for i in range(5)]
        assert color_pixels(state, x, 4, row) == expected


def test_320_bold_uses_bold_color():
    state = color_state(fg=6, bold_fg=4, bg=1)
    state.bold = True
    write_char_at_320x16(state, 2, 0, ord("H"))
    glyph = font4x8.glyph(ord("H"))
    for row in range(8):
        expected = [1 if glyph[row] & (0x80 >> i) else 4 for i in range(5)]
        assert color_pixels(state, 2, 0, row) == expected


def test_320_inverse_space_fills_with_foreground():
    state = color_state(fg=6, bg=1)
    state.inverse_video = True
    write_char_at_320x16(state, 1, 0, ord(" "))
    for row in range(8):
        assert color_pixels(state, 1, 0, row) == [6] * 5
        assert state.buffer[row * 160 + 2] >> 4 == 1


def test_320_invert_twice_restores():
    state = color_state()
    write_char_at_320x16(state, 5, 10, ord("k"))
    before = bytes(state.buffer)
    write_char_at_320x16(state, 5, 10, 0)
    assert bytes(state.buffer) != before
    write_char_at_320x16(state, 5, 10, 0)
    assert bytes(state.buffer) == before


def test_320_neighbour_cells_do_not_overlap():
    state = color_state(fg=6, bg=1)
    write_char_at_320x16(state, 0, 0, ord("B"))
    write_char_at_320x16(state, 1, 0, ord("#"))
    glyph = font4x8.glyph(ord("B"))
    for row in range(8):
        expected = [1 if glyph[row] & (0x80 >> i) else 6 for i in range(5)]
        assert color_pixels(state, 0, 0, row) == expected


def test_320_rejects_code_without_glyph():
    state = color_state()
    with pytest.raises(ValueError):
        write_char_at_320x16(state, 0, 0, 140)