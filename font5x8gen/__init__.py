from .errors import (
    FontError,
    UsageError,
    ManifestError,
    ManifestFormatError,
    ManifestEncodingError,
    InvalidCharacterSpecError,
    OutOfRangeError,
    BitmapError,
    NotPlainBitmapError,
    WrongDimensionsError,
    TruncatedBitmapError,
    InvalidPixelError,
    MissingDefaultGlyphError,
)
from .manifest import ManifestEntry, parse_manifest, read_manifest
from .pbm import Bitmap, decode_bitmap, read_bitmap
from .table import CharacterSpec, SpecKind, FontTable, resolve_character, build_font_table
from .render import include_guard, render_header, write_header
from .cli import generate, main

__version__ = "0.1.0"
