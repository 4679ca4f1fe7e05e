"""8x8 bitmap font covering the printable ASCII range."""

FIRST_CHAR = " "
LAST_CHAR = "~"
GLYPH_WIDTH = 8

# Each glyph is eight column bytes; bit 0 is the top row.
_FONT = bytes((
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x5F, 0x5F, 0x00, 0x00, 0x00,
    0x00, 0x07, 0x07, 0x00, 0x07, 0x07, 0x00, 0x00,
    0x14, 0x7F, 0x7F, 0x14, 0x7F, 0x7F, 0x14, 0x00,
    0x24, 0x2E, 0x2A, 0x6B, 0x6B, 0x3A, 0x12, 0x00,
    0x46, 0x66, 0x30, 0x18, 0x0C, 0x66, 0x62, 0x00,
    0x30, 0x7A, 0x4F, 0x5D, 0x37, 0x7A, 0x48, 0x00,
    0x00, 0x04, 0x07, 0x03, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x1C, 0x3E, 0x63, 0x41, 0x00, 0x00,
    0x00, 0x00, 0x41, 0x63, 0x3E, 0x1C, 0x00, 0x00,
    0x08, 0x2A, 0x3E, 0x1C, 0x1C, 0x3E, 0x2A, 0x08,
    0x00, 0x08, 0x08, 0x3E, 0x3E, 0x08, 0x08, 0x00,
    0x00, 0x00, 0x80, 0xE0, 0x60, 0x00, 0x00, 0x00,
    0x00, 0x08, 0x08, 0x08, 0x08, 0x08, 0x08, 0x00,
    0x00, 0x00, 0x00, 0x60, 0x60, 0x00, 0x00, 0x00,
    0x60, 0x30, 0x18, 0x0C, 0x06, 0x03, 0x01, 0x00,
    0x3E, 0x7F, 0x59, 0x4D, 0x47, 0x7F, 0x3E, 0x00,
    0x00, 0x40, 0x42, 0x7F, 0x7F, 0x40, 0x40, 0x00,
    0x72, 0x7B, 0x49, 0x49, 0x49, 0x4F, 0x46, 0x00,
    0x41, 0x41, 0x49, 0x49, 0x49, 0x7F, 0x36, 0x00,
    0x1E, 0x1E, 0x10, 0x10, 0x7F, 0x7F, 0x10, 0x00,
    0x27, 0x67, 0x45, 0x45, 0x45, 0x7D, 0x39, 0x00,
    0x3E, 0x7F, 0x49, 0x49, 0x49, 0x79, 0x30, 0x00,
    0x01, 0x01, 0x61, 0x71, 0x19, 0x0F, 0x07, 0x00,
    0x36, 0x7F, 0x49, 0x49, 0x49, 0x7F, 0x36, 0x00,
    0x06, 0x4F, 0x49, 0x49, 0x49, 0x7F, 0x3E, 0x00,
    0x00, 0x00, 0x00, 0x66, 0x66, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x80, 0xE6, 0x66, 0x00, 0x00, 0x00,
    0x00, 0x08, 0x1C, 0x36, 0x63, 0x41, 0x00, 0x00,
    0x00, 0x14, 0x14, 0x14, 0x14, 0x14, 0x14, 0x00,
    0x00, 0x00, 0x41, 0x63, 0x36, 0x1C, 0x08, 0x00,
    0x00, 0x02, 0x03, 0x59, 0x5D, 0x07, 0x02, 0x00,
    0x3E, 0x7F, 0x41, 0x5D, 0x5D, 0x5F, 0x5E, 0x00,
    0x7C, 0x7E, 0x13, 0x11, 0x13, 0x7E, 0x7C, 0x00,
    0x7F, 0x7F, 0x49, 0x49, 0x49, 0x7F, 0x36, 0x00,
    0x3E, 0x7F, 0x41, 0x41, 0x41, 0x63, 0x22, 0x00,
    0x7F, 0x7F, 0x41, 0x41, 0x63, 0x3E, 0x1C, 0x00,
    0x7F, 0x7F, 0x49, 0x49, 0x49, 0x41, 0x41, 0x00,
    0x7F, 0x7F, 0x09, 0x09, 0x09, 0x01, 0x01, 0x00,
    0x3E, 0x7F, 0x41, 0x41, 0x51, 0x73, 0x32, 0x00,
    0x7F, 0x7F, 0x08, 0x08, 0x08, 0x7F, 0x7F, 0x00,
    0x00, 0x41, 0x41, 0x7F, 0x7F, 0x41, 0x41, 0x00,
    0x20, 0x60, 0x40, 0x40, 0x40, 0x7F, 0x3F, 0x00,
    0x7F, 0x7F, 0x08, 0x1C, 0x36, 0x63, 0x41, 0x00,
    0x7F, 0x7F, 0x40, 0x40, 0x40, 0x40, 0x40, 0x00,
    0x7F, 0x7F, 0x0E, 0x1C, 0x0E, 0x7F, 0x7F, 0x00,
    0x7F, 0x7F, 0x06, 0x0C, 0x18, 0x7F, 0x7F, 0x00,
    0x3E, 0x7F, 0x41, 0x41, 0x41, 0x7F, 0x3E, 0x00,
    0x7F, 0x7F, 0x09, 0x09, 0x09, 0x0F, 0x06, 0x00,
    0x3E, 0x7F, 0x41, 0x71, 0x61, 0xFF, 0xBE, 0x00,
    0x7F, 0x7F, 0x09, 0x19, 0x39, 0x6F, 0x46, 0x00,
    0x26, 0x6F, 0x49, 0x49, 0x49, 0x7B, 0x32, 0x00,
    0x01, 0x01, 0x01, 0x7F, 0x7F, 0x01, 0x01, 0x01,
    0x7F, 0x7F, 0x40, 0x40, 0x40, 0x7F, 0x7F, 0x00,
    0x1F, 0x3F, 0x60, 0x60, 0x60, 0x3F, 0x1F, 0x00,
    0x3F, 0x7F, 0x60, 0x30, 0x60, 0x7F, 0x3F, 0x00,
    0x63, 0x77, 0x1C, 0x08, 0x1C, 0x77, 0x63, 0x00,
    0x47, 0x4F, 0x68, 0x38, 0x18, 0x0F, 0x07, 0x00,
    0x41, 0x61, 0x71, 0x59, 0x4D, 0x47, 0x43, 0x00,
    0x00, 0x00, 0x7F, 0x7F, 0x41, 0x41, 0x00, 0x00,
    0x01, 0x03, 0x06, 0x0C, 0x18, 0x30, 0x60, 0x00,
    0x00, 0x00, 0x41, 0x41, 0x7F, 0x7F, 0x00, 0x00,
    0x08, 0x0C, 0x06, 0x03, 0x06, 0x0C, 0x08, 0x00,
    0x80, 0x80, 0x80, 0x80, 0x80, 0x80, 0x80, 0x80,
    0x00, 0x00, 0x00, 0x03, 0x07, 0x04, 0x00, 0x00,
    0x20, 0x74, 0x54, 0x54, 0x54, 0x7C, 0x78, 0x00,
    0x7F, 0x7F, 0x48, 0x48, 0x48, 0x78, 0x30, 0x00,
    0x38, 0x7C, 0x44, 0x44, 0x44, 0x6C, 0x28, 0x00,
    0x30, 0x78, 0x48, 0x48, 0x48, 0x7F, 0x7F, 0x00,
    0x38, 0x7C, 0x54, 0x54, 0x54, 0x5C, 0x18, 0x00,
    0x00, 0x48, 0x7E, 0x7F, 0x49, 0x03, 0x02, 0x00,
    0x98, 0xBC, 0xA4, 0xA4, 0xA4, 0xFC, 0x7C, 0x00,
    0x7F, 0x7F, 0x04, 0x04, 0x04, 0x7C, 0x78, 0x00,
    0x00, 0x00, 0x44, 0x7D, 0x7D, 0x40, 0x00, 0x00,
    0x40, 0xC0, 0x80, 0x80, 0x80, 0xFD, 0x7D, 0x00,
    0x7F, 0x7F, 0x10, 0x18, 0x3C, 0x64, 0x40, 0x00,
    0x00, 0x00, 0x41, 0x7F, 0x7F, 0x40, 0x00, 0x00,
    0x7C, 0x7C, 0x18, 0x78, 0x1C, 0x7C, 0x78, 0x00,
    0x7C, 0x7C, 0x04, 0x04, 0x04, 0x7C, 0x78, 0x00,
    0x38, 0x7C, 0x44, 0x44, 0x44, 0x7C, 0x38, 0x00,
    0xFC, 0xFC, 0x24, 0x24, 0x24, 0x3C, 0x18, 0x00,
    0x18, 0x3C, 0x24, 0x24, 0x24, 0xFC, 0xFC, 0x00,
    0x7C, 0x7C, 0x04, 0x04, 0x04, 0x0C, 0x08, 0x00,
    0x48, 0x5C, 0x54, 0x54, 0x54, 0x74, 0x24, 0x00,
    0x00, 0x04, 0x04, 0x3F, 0x7F, 0x44, 0x44, 0x00,
    0x3C, 0x7C, 0x40, 0x40, 0x40, 0x7C, 0x7C, 0x00,
    0x1C, 0x3C, 0x60, 0x60, 0x60, 0x3C, 0x1C, 0x00,
    0x3C, 0x7C, 0x60, 0x30, 0x60, 0x7C, 0x3C, 0x00,
    0x44, 0x6C, 0x38, 0x10, 0x38, 0x6C, 0x44, 0x00,
    0x9C, 0xBC, 0xA0, 0xA0, 0xA0, 0xFC, 0x7C, 0x00,
    0x44, 0x64, 0x74, 0x54, 0x5C, 0x4C, 0x44, 0x00,
    0x00, 0x08, 0x08, 0x3E, 0x77, 0x41, 0x41, 0x00,
    0x00, 0x00, 0x00, 0x77, 0x77, 0x00, 0x00, 0x00,
    0x00, 0x41, 0x41, 0x77, 0x3E, 0x08, 0x08, 0x00,
    0x02, 0x03, 0x01, 0x03, 0x02, 0x03, 0x01, 0x00,
))


def glyph(char: str) -> bytes:
    """Return the eight column bytes for ``char``.

    Characters outside the printable ASCII range are drawn as a space.
    """
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if FIRST_CHAR <= char <= LAST_CHAR:
        start = (ord(char) - ord(FIRST_CHAR)) * GLYPH_WIDTH
    else:
        start = 0
    return _FONT[start:start + GLYPH_WIDTH]