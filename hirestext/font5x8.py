"""ISO-8859-1 font for a 42-column software text screen.

Each glyph is 8 bytes, one per pixel row, top row first.
Only the 6 high bits of each byte are part of the glyph: a reset bit is ink,
a set bit is paper.  The 2 low bits of each byte are zero.
The font covers code points 32 to 127 and 160 to 255.

Code points 160 to 185 exist in two variants: box-drawing and block
characters (the default), or the regular Latin-1 symbols.
"""

GLYPH_HEIGHT = 8
GLYPH_WIDTH = 6

_ASCII = (
    # 32..127
    "fcfcfcfcfcfcfcfc", "dcdcdcdcdcfcdcfc", "acacacfcfcfcfcfc", "acac04ac04acacfc",
    "dc847c8cf40cdcfc", "3434ecdcbc6464fc", "bc5c5cbc546c94fc", "dcdcbcfcfcfcfcfc",
    "ecdcbcbcbcdcecfc", "bcdcecececdcbcfc", "fc748c8c8c74fcfc", "fcdcdc04dcdcfcfc",
    "fcfcfcfcfcdcdcbc", "fcfcfc04fcfcfcfc", "fcfcfcfcfc9c9cfc", "f4f4ecdcbc7c7cfc",
    "8c74645434748cfc", "dc9cdcdcdcdc8cfc", "8c74f48c7c7c04fc", "8c74f48cf4748cfc",
    "ecccac6c04ececfc", "047c7c0cf4f40cfc", "8c747c0c74748cfc", "04f4f4ecdcdcdcfc",
    "8c74748c74748cfc", "8c747484f4748cfc", "fcfc9c9cfc9c9cfc", "fcfc9c9cfcdcdcbc",
    "f4ecdcbcdcecf4fc", "fcfc04fc04fcfcfc", "7cbcdcecdcbc7cfc", "8c74f4ecdcfcdcfc",
    "8c74f49464748cfc", "dcac7474047474fc", "0c74740c74740cfc", "8c747c7c7c748cfc",
    "0c74747474740cfc", "047c7c0c7c7c04fc", "047c7c0c7c7c7cfc", "8c747c6474748cfc",
    "74747404747474fc", "8cdcdcdcdcdc8cfc", "f4f4f4f4f4748cfc", "746c5c3c5c6c74fc",
    "7c7c7c7c7c7c04fc", "74245474747474fc", "74343454646474fc", "8c74747474748cfc",
    "0c74740c7c7c7cfc", "8c747474746c94fc", "0c74740c747474fc", "8c747c8cf4748cfc",
    "04dcdcdcdcdcdcfc", "7474747474748cfc", "74747474acacdcfc", "74747474542474fc",
    "7474acdcac7474fc", "7474acdcdcdcdcfc", "04f4ecdcbc7c04fc", "8cbcbcbcbcbc8cfc",
    "7c7cbcdcecf4f4fc", "8cececececec8cfc", "dcac74fcfcfcfcfc", "fcfcfcfcfcfc04fc",
    "dcdcecfcfcfcfcfc", "fcfc8cf4847484fc", "7c7c0c7474740cfc", "fcfc847c7c7c84fc",
    "f4f48474747484fc", "fcfc8c74047c8cfc", "e4dcdc04dcdcdcfc", "fcfc84747484f48c",
    "7c7c0c74747474fc", "dcfc9cdcdcdc8cfc", "dcfc9cdcdcdcdc3c", "7c7c746c1c6c74fc",
    "9cdcdcdcdcdc8cfc", "fcfc2c54545454fc", "fcfc0c74747474fc", "fcfc8c7474748cfc",
    "fcfc0c74740c7c7c", "fcfc84747484f4f4", "fcfc0c6c7c7c7cfc", "fcfc847c8cf40cfc",
    "dcdc04dcdcdce4fc", "fcfc7474747484fc", "fcfc747474acdcfc", "fcfc747454048cfc",
    "fcfc74acdcac74fc", "fcfc74747484f48c", "fcfc04ecdcbc04fc", "ecdcdcbcdcdcecfc",
    "dcdcdcdcdcdcdcfc", "bcdcdcecdcdcbcfc", "946cfcfcfcfcfcfc", "fcfcfcfcfcfcfcfc",
)

_BOX_DRAWING = (
    # 160..185: corners, tees, lines, blocks
    "fcfcfcc4dcdcdcdc", "fcfcfc1cdcdcdcdc", "dcdcdcc4fcfcfcfc", "dcdcdc1cfcfcfcfc",
    "dcdcdc1cdcdcdcdc", "dcdcdcc4dcdcdcdc", "04dcdcdcdcdcdcdc", "dcdcdcdcdcdcdc04",
    "dcdcdcdcdcdcdcdc", "fcfcfc04fcfcfcfc", "dcdcdc04dcdcdcdc", "3c3c3c3c3c3c3c3c",
    "e4e4e4e4e4e4e4e4", "fcfcfcfc04040404", "04040404fcfcfcfc", "fcfcfcfc3c3c3c3c",
    "fcfcfcfce4e4e4e4", "3c3c3c3cfcfcfcfc", "e4e4e4e4fcfcfcfc", "04040404c4c4c4c4",
    "040404041c1c1c1c", "c4c4c4c404040404", "1c1c1c1c04040404", "0404040404040404",
    "1c1c1c1cc4c4c4c4", "c4c4c4c41c1c1c1c",
)

_LATIN1_LOW = (
    # 160..185: regular Latin-1 symbols
    "fcfcfcfcfcfcfcfc", "dcfcdcdcdcdcdcfc", "fcdc847c7c84dcfc", "8c747c1c7c7c04fc",
    "fc748c74748c74fc", "7474ac04dc8cdcfc", "dcdcdcfcdcdcdcfc", "847c0c7484f40cfc",
    "acacd4fcfcfcfcfc", "847c7c84fcfcfcfc", "84747484fcfcfcfc", "fcfcb46cb4fcfcfc",
    "fcfcfc04f4f4fcfc", "fcfcfc1cfcfcfcfc", "847c7c7cfcfcfcfc", "8cfcfcfcfcfcfcfc",
    "0c6c6c0cfcfcfcfc", "dcdc8cdcdcfc8cfc", "8cec8cbc8cfcfcfc", "8cec8cec8cfcfcfc",
    "ecdcbcfcfcfcfcfc", "fcfc74747464147c", "84545494d4d4d4fc", "fcfcfc9c9cfcfcfc",
    "fcfcfcfcfcdcec9c", "dc9cdcdc8cfcfcfc",
)

_LATIN1_HIGH = (
    # 186..255
    "9c6c6c9cfcfcfcfc", "fcfc6cb46cfcfcfc", "7c6c5cbc54c4f4fc", "7c6c5cbc44ecc4fc",
    "3c2c1cbc54c4f4fc", "dcfcdcbc7c748cfc", "bcdcac74047474fc", "ecdc8c74047474fc",
    "dcac8c74047474fc", "b44c8c74047474fc", "acfc8c74047474fc", "8c748c74047474fc",
    "845c5c045c5c44fc", "8c747c7c7c748cdc", "bcdc047c0c7c04fc", "ecdc047c0c7c04fc",
    "dcac047c0c7c04fc", "acfc047c0c7c04fc", "bcdc8cdcdcdc8cfc", "ecdc8cdcdcdc8cfc",
    "dcac8cdcdcdc8cfc", "acfc8cdcdcdc8cfc", "8cb4b414b4b48cfc", "b44c7434546474fc",
    "bcdc0474747404fc", "ecdc0474747404fc", "dcac0474747404fc", "b44c0474747404fc",
    "acfc0474747404fc", "fc74acdcac74fcfc", "8474645434740cfc", "bcdc747474748cfc",
    "ecdc747474748cfc", "dcac747474748cfc", "74fc747474748cfc", "ecdc74acdcdcdcfc",
    "7c0c7474740c7cfc", "9c6c6c1c6c740cfc", "bcdc8cf4847484fc", "ecdc8cf4847484fc",
    "dcac8cf4847484fc", "b45c8cf4847484fc", "acfc8cf4847484fc", "cccc8cf4847484fc",
    "fcfc2cd4045c04fc", "fcfc847c7c7c84dc", "bcdc8c74047c8cfc", "ecdc8c74047c8cfc",
    "dcac8c74047c8cfc", "acfc8c74047c8cfc", "bcdc9cdcdcdc8cfc", "ecdc9cdcdcdc8cfc",
    "dcac9cdcdcdc8cfc", "acfc9cdcdcdc8cfc", "acdcacf484748cfc", "b44c0c74747474fc",
    "bcdc8c7474748cfc", "ecdc8c7474748cfc", "dcac8c7474748cfc", "b44c8c7474748cfc",
    "acfc8c7474748cfc", "fcdcfc04fcdcfcfc", "fcfc8c6454348cfc", "bcdc7474747484fc",
    "ecdc7474747484fc", "dcac7474747484fc", "acfc7474747484fc", "ecdc74747484f48c",
    "7c7c7c0c74740c7c", "acfc74747484f48c",
)


def _build(*sections: tuple) -> bytes:
    rows = [row for section in sections for row in section]
    if any(len(row) != 2 * GLYPH_HEIGHT for row in rows):
        raise RuntimeError("every 5x8 glyph must hold 8 bytes")
    table = bytes.fromhex("".join(rows))
    if len(table) != 1536:
        raise RuntimeError("5x8 font table must hold 192 glyphs of 8 bytes")
    return table


FONT5X8 = _build(_ASCII, _BOX_DRAWING, _LATIN1_HIGH)
FONT5X8_LATIN1 = _build(_ASCII, _LATIN1_LOW, _LATIN1_HIGH)


def _glyph_index(code: int) -> int:
    if 32 <= code <= 127:
        return code - 32
    if 160 <= code <= 255:
        return code - 64
    raise ValueError(f"character code {code} has no 5x8 glyph")


def glyph(code: int, box_drawing: bool = True) -> bytes:
    """Return the 8 pixel-row bytes of the glyph for ``code`` (32..127, 160..255).

    With ``box_drawing`` true, codes 160..185 give box-drawing and block
    characters; otherwise they give the regular Latin-1 symbols.
    """
    table = FONT5X8 if box_drawing else FONT5X8_LATIN1
    start = _glyph_index(code) * GLYPH_HEIGHT
    return table[start:start + GLYPH_HEIGHT]