import pytest

from hirestext.font5x8 import FONT5X8, FONT5X8_LATIN1, GLYPH_HEIGHT, glyph

ALL_CODES = list(range(32, 128)) + list(range(160, 256))


def test_tables_hold_192_glyphs():
    box_total = sum(len(glyph(code, True)) for code in ALL_CODES)
    latin_total = sum(len(glyph(code, False)) for code in ALL_CODES)
    assert box_total == 192 * GLYPH_HEIGHT == len(FONT5X8)
    assert latin_total == 192 * GLYPH_HEIGHT == len(FONT5X8_LATIN1)


@pytest.mark.parametrize("box_drawing", [True, False])
def test_every_glyph_has_eight_rows(box_drawing):
    for code in ALL_CODES:
        assert len(glyph(code, box_drawing)) == GLYPH_HEIGHT


@pytest.mark.parametrize("box_drawing", [True, False])
def test_two_low_bits_are_zero(box_drawing):
    for code in ALL_CODES:
        assert all(row & 0x03 == 0 for row in glyph(code, box_drawing))


def test_space_is_all_paper():
    assert glyph(32) == bytes([0xFC] * 8)


def test_letter_a_matches_source_rows():
    assert glyph(ord("A")) == bytes([0xDC, 0xAC, 0x74, 0x74, 0x04, 0x74, 0x74, 0xFC])


def test_box_drawing_is_default():
    for code in range(160, 186):
        assert glyph(code) == glyph(code, True)


def test_inverted_space_is_all_ink_but_low_bits():
    assert glyph(183, True) == bytes([0x04] * 8)


def test_box_horizontal_matches_hyphen():
    assert glyph(169, True) == glyph(ord("-"))


def test_latin1_nonbreaking_space_matches_space():
    assert glyph(160, False) == glyph(32)


def test_variants_share_ascii_and_high_latin1():
    for code in list(range(32, 128)) + list(range(186, 256)):
        assert glyph(code, True) == glyph(code, False)


def test_variants_differ_in_160_to_185():
    differing = [c for c in range(160, 186) if glyph(c, True) != glyph(c, False)]
    assert len(differing) == 26


@pytest.mark.parametrize("code", [0, 31, 128, 159, 256, -1])
def test_codes_without_glyph_raise(code):
    with pytest.raises(ValueError):
        glyph(code)


def test_glyph_slices_match_table():
    assert glyph(255) == FONT5X8[-GLYPH_HEIGHT:]
    assert glyph(32, False) == FONT5X8_LATIN1[:GLYPH_HEIGHT]