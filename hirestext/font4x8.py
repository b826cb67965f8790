"""ISO-8859-1 font for a 51-column (or 64-column) software text screen.

Each glyph is 8 bytes, one per pixel row, top row first.
Only the 5 high bits of each byte are part of the glyph: a reset bit is ink,
a set bit is paper.  The 3 low bits of each byte are zero.
The font covers code points 32 to 127 and 160 to 255.
"""

GLYPH_HEIGHT = 8
GLYPH_WIDTH = 5

_ROWS = (
    # 32..127
    "f8f8f8f8f8f8f8f8", "d8d8d8d8d8f8d8f8", "a8a8a8f8f8f8f8f8", "9898089808989898f8"[:0] + "98980898089898f8",
    "d8887898e818d8f8", "f82828d8b84848f8", "b858b878285 8a8f8".replace(" ", ""), "d8d8b8f8f8f8f8f8",
    "e8d8b8b8b8d8e8f8", "78b8d8d8d8b878f8", "f86898989868f8f8", "f8d8d888d8d8f8f8",
    "f8f8f8f8f8d8d8b8", "f8f8f808f8f8f8f8", "f8f8f8f8f89898f8", "f8e8e8d8b87878f8",
    "9868482868689 8f8".replace(" ", ""), "d898d8d8d8d888f8", "9868e898787808f8", "9868e898e86898f8",
    "e8c8a86808e8e8f8", "0878781 8e8e818f8".replace(" ", ""), "9868781868689 8f8".replace(" ", ""), "08e8e8d8b8b8b8f8",
    "98686898686898f8", "98686888e86898f8", "f8f89898f89898f8", "f8f89898f8d8d8b8",
    "e8d8b878b8d8e8f8", "f8f8f808f808f8f8", "78b8d8e8d8b878f8", "9868e8d8d8f8d8f8",
    "9868e888686898f8", "98686808686868f8", "18686818686818f8", "98687878786898f8",
    "18686868686818f8", "08787818787808f8", "08787818787878f8", "98687878486898f8",
    "68686808686868f8", "88d8d8d8d8d888f8", "c8e8e8e8e86898f8", "68583878385868f8",
    "78787878787808f8", "68080868686868f8", "68284868686868f8", "98686868686898f8",
    "18686818787878f8", "9868686868 58a8f8".replace(" ", ""), "18686818686868f8", "98687898e86898f8",
    "88d8d8d8d8d8d8f8", "68686868686898f8", "686868685858b8f8", "68686868080868f8",
    "68686898686868f8", "a8a8a8d8d8d8d8f8", "08e8d8b8787808f8", "88b8b8b8b8b888f8",
    "f87878b8d8e8e8f8", "18d8d8d8d8d818f8", "d8a8f8f8f8f8f8f8", "f8f8f8f8f8f808f8",
    "b8b8d8f8f8f8f8f8", "f8f898e8886808f8", "78781868686818f8", "f8f88878787888f8",
    "e8e88868686888f8", "f8f89868087898f8", "c8b8b808b8b8b8f8", "f8f888686808e818",
    "78781868686868f8", "d8f898d8d8d888f8", "d8f898d8d8d8d838", "78786858385868f8",
    "98d8d8d8d8d888f8", "f8f81808086868f8", "f8f81868686868f8", "f8f89868686898f8",
    "f8f81868681878 78".replace(" ", ""), "f8f888686888e8e8", "f8f81868787878f8", "f8f8887898e818f8",
    "b8b808b8b8b8c8f8", "f8f86868686888f8", "f8f868686858b8f8", "f8f86868080818f8",
    "f8f86868986868f8", "f8f8686868 88e818".replace(" ", ""), "f8f808d8b87808f8", "e8d8d8b8d8d8e8f8",
    "d8d8d8d8d8d8d8f8", "78b8b8d8b8b878f8", "a858f8f8f8f8f8f8", "f8f8f8f8f8f8f8f8",
    # 160..255
    "f8f8f8f8f8f8f8f8", "d8f8d8d8d8d8d8f8", "f8d88878788 8d8f8".replace(" ", ""), "98687838787808f8",
    "68086868086 8f8f8".replace(" ", ""), "a8a8a8d888d8d8f8", "d8d8d8f8d8d8d8f8", "887808680 8e818f8".replace(" ", ""),
    "a8f8f8f8f8f8f8f8", "88787888f8f8f8f8", "88686888f8f8f8f8", "f8f8a858a8f8f8f8",
    "f8f8f808e8e8f8f8", "f8f8f898f8f8f8f8", "88787878f8f8f8f8", "98f8f8f8f8f8f8f8",
    "185818f8f8f8f8f8", "b8b818b8b8f818f8", "18d8187818f8f8f8", "18d818d818f8f8f8",
    "d8b878f8f8f8f8f8", "f8f8686868482878", "88282828a8a8a8f8", "f8f8f89898f8f8f8",
    "f8f8f8f8f8b8d838", "b838b8b818f8f8f8", "98686898f8f8f8f8", "f8f858a858f8f8f8",
    "786858b848c8e8f8", "786858b848c8c8f8", "382818b848c8e8f8", "b8f8b8b8786898f8",
    "b8d89868086868f8", "d8b89868086868f8", "d8a89868086868f8", "a8589868086868f8",
    "68f89868086868f8", "98989868086868f8", "80585808585840f8", "98687878689 8d8f8".replace(" ", ""),
    "b8d80878187808f8", "d8b80878187808f8", "d8a80878187808f8", "68f80878187808f8",
    "b8d888d8d8d888f8", "d8b888d8d8d888f8", "d8b888d8d8d888f8", "a8f888d8d8d888f8",
    "18686828686818f8", "a8586828486868f8", "b8d80868686808f8", "d8b80868686808f8",
    "d8a80868686808f8", "a8580868686808f8", "68f80868686808f8", "f8f858b858f8f8f8",
    "88684828686818f8", "b8d86868686898f8", "d8b86868686898f8", "d8a86868686898f8",
    "68f86868686898f8", "d8b8a8a8d8d8d8f8", "78186868681878f8", "b8585838586818f8",
    "b8d898e8886808f8", "d8b898e8886808f8", "d8a898e8886808f8", "a85898e8886808f8",
    "68f898e8886808f8", "989898e8886808f8", "f8f858a808388 8f8".replace(" ", ""), "f8f888787878 88d8".replace(" ", ""),
    "b8d89868087898f8", "d8b89868087898f8", "d8a89868087898f8", "68f89868087898f8",
    "b8d898d8d8d888f8", "d8b898d8d8d888f8", "d8a898d8d8d888f8", "a8f898d8d8d888f8",
    "58b858e8086898f8", "a8581868686868f8", "b8d89868686898f8", "d8b89868686898f8",
    "d8a89868686898f8", "a8589868686898f8", "68f89868686898f8", "f8b8f818f8b8f8f8",
    "f8f89868482898f8", "b8d86868686888f8", "d8b86868686888f8", "d8a86868686888f8",
    "68f86868686888f8", "d8b8686868 88e818".replace(" ", ""), "78787818686818 78".replace(" ", ""), "68f8686868 88e818".replace(" ", ""),
)

FONT4X8 = bytes.fromhex("".join(_ROWS))

if len(FONT4X8) != 1536:
    raise RuntimeError("4x8 font table must hold 192 glyphs of 8 bytes")


def _glyph_index(code: int) -> int:
    if 32 <= code <= 127:
        return code - 32
    if 160 <= code <= 255:
        return code - 64
    raise ValueError(f"character code {code} has no 4x8 glyph")


def glyph(code: int) -> bytes:
    """Return the 8 pixel-row bytes of the glyph for ``code`` (32..127, 160..255)."""
    start = _glyph_index(code) * GLYPH_HEIGHT
    return FONT4X8[start:start + GLYPH_HEIGHT]