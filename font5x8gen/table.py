import re
from enum import StrEnum
from dataclasses import dataclass, field
from collections.abc import Callable, Iterable

from .errors import (
    InvalidCharacterSpecError,
    OutOfRangeError,
    MissingDefaultGlyphError,
)
from .manifest import ManifestEntry
from .pbm import Bitmap, read_bitmap

ASCII_SIZE = 128
DEFAULT_KEYWORD = "default"
HEX_PATTERN = re.compile(r"^0x[0-9a-fA-F]{2}$")


class SpecKind(StrEnum):
    char = "char"
    hex = "hex"
    default = "default"


@dataclass(frozen=True, eq=True)
class CharacterSpec:
    kind: SpecKind
    code: int | None = None


def _is_char(token: str) -> bool:
    return len(token) == 1


def _is_hex(token: str) -> bool:
    return HEX_PATTERN.match(token) is not None


def _is_default(token: str) -> bool:
    return token == DEFAULT_KEYWORD


# Checked in order, first match wins.
SPEC_PREDICATES: list[tuple[SpecKind, Callable[[str], bool]]] = [
    (SpecKind.char, _is_char),
    (SpecKind.hex, _is_hex),
    (SpecKind.default, _is_default),
]


def resolve_character(token: str, lineno: int) -> CharacterSpec:
    kind = next((kind for kind, pred in SPEC_PREDICATES if pred(token)), None)

    if kind is None:
        raise InvalidCharacterSpecError(lineno, token)

    if kind == SpecKind.default:
        return CharacterSpec(kind)

    code = ord(token) if kind == SpecKind.char else int(token, 16)
    if code >= ASCII_SIZE:
        raise OutOfRangeError(lineno, token, code)

    return CharacterSpec(kind, code)


@dataclass
class FontTable:
    """
    Collects the default glyph and the ASCII assignments of a font.

    Glyph indices are only handed out by `build()`, once the final default
    glyph is known: slot 0 is always the default glyph, every other bitmap
    gets the next free slot the first time it is seen, and bitmaps equal
    to an already placed glyph (slot 0 included) share its index.
    """

    default: Bitmap | None = None
    assignments: list[tuple[int, Bitmap]] = field(default_factory=list)

    def set_default(self, bitmap: Bitmap):
        self.default = bitmap

    def assign(self, code: int, bitmap: Bitmap):
        if not 0 <= code < ASCII_SIZE:
            raise ValueError(f"character code {code} is outside ASCII range")
        self.assignments.append((code, bitmap))

    def build(self) -> tuple[list[Bitmap], list[int]]:
        if self.default is None:
            raise MissingDefaultGlyphError()

        glyphs: list[Bitmap] = [self.default]
        indices: dict[Bitmap, int] = {self.default: 0}
        ascii_map = [0] * ASCII_SIZE

        for code, bitmap in self.assignments:
            index = indices.get(bitmap)
            if index is None:
                index = len(glyphs)
                indices[bitmap] = index
                glyphs.append(bitmap)
            ascii_map[code] = index

        return glyphs, ascii_map


def build_font_table(
    entries: Iterable[ManifestEntry],
    load_bitmap: Callable[..., Bitmap] = read_bitmap,
    on_entry: Callable[[ManifestEntry, CharacterSpec], None] | None = None,
) -> FontTable:
    table = FontTable()

    for entry in entries:
        bitmap = load_bitmap(entry.bitmap_path)
        spec = resolve_character(entry.character, entry.lineno)

        if on_entry is not None:
            on_entry(entry, spec)

        if spec.kind == SpecKind.default:
            table.set_default(bitmap)
        else:
            table.assign(spec.code, bitmap)

    return table
