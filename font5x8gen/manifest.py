from pathlib import Path
from dataclasses import dataclass

from .errors import ManifestFormatError, ManifestEncodingError
from .lexer import tokenize


@dataclass(frozen=True, eq=True)
class ManifestEntry:
    lineno: int
    line: str
    character: str
    bitmap_path: Path


def parse_manifest(text: str, base_dir: Path) -> list[ManifestEntry]:
    """
    Parses the glyph manifest. Every non-blank line (after stripping
    '#' comments) must hold exactly a character spec and a bitmap path,
    the latter relative to `base_dir`.
    """
    entries: list[ManifestEntry] = list()

    for lineno, line in enumerate(text.split("\n"), 1):
        line = line.removesuffix("\r")
        cols = tokenize(line)
        if len(cols) == 0:
            continue
        elif len(cols) != 2:
            raise ManifestFormatError(lineno, line)

        character, bitmap = cols
        entries.append(
            ManifestEntry(
                lineno=lineno,
                line=line,
                character=character,
                bitmap_path=base_dir / bitmap,
            )
        )

    return entries


def read_manifest(path: Path) -> list[ManifestEntry]:
    try:
        source_code = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as err:
        raise ManifestEncodingError(path) from err
    return parse_manifest(source_code, path.parent)
