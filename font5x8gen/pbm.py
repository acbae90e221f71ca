from pathlib import Path

from .errors import (
    NotPlainBitmapError,
    WrongDimensionsError,
    TruncatedBitmapError,
    InvalidPixelError,
)
from .lexer import tokenize

PBM_MAGIC = "P1"
GLYPH_WIDTH = 5
GLYPH_HEIGHT = 8
GLYPH_PIXELS = GLYPH_WIDTH * GLYPH_HEIGHT

# One byte per column, row 0 in the most significant bit.
Bitmap = tuple[int, ...]


def decode_bitmap(text: str, source: Path | str = "<bitmap>") -> Bitmap:
    pbm = tokenize(text)

    if len(pbm) < 1 or pbm[0] != PBM_MAGIC:
        raise NotPlainBitmapError(source)
    if pbm[1:3] != [str(GLYPH_WIDTH), str(GLYPH_HEIGHT)]:
        raise WrongDimensionsError(source)

    # Plain PBM allows pixels without separating whitespace.
    pixels = "".join(pbm[3:])[:GLYPH_PIXELS]
    if len(pixels) < GLYPH_PIXELS:
        raise TruncatedBitmapError(source, len(pixels))
    for pixel in pixels:
        if pixel not in "01":
            raise InvalidPixelError(source, pixel)

    rows = [
        pixels[i : i + GLYPH_WIDTH] for i in range(0, GLYPH_PIXELS, GLYPH_WIDTH)
    ]
    columns = ["".join(column) for column in zip(*rows)]

    return tuple(int(column, 2) for column in columns)


def read_bitmap(path: Path) -> Bitmap:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as err:
        # binary (raw) PBM or some other non-text file
        raise NotPlainBitmapError(path) from err
    return decode_bitmap(text, source=path)
