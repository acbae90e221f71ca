from pathlib import Path


class FontError(Exception):
    pass


class UsageError(FontError):
    pass


class ManifestError(FontError):
    lineno: int

    def __init__(self, lineno: int, message: str):
        super().__init__(f"line {lineno}: {message}")
        self.lineno = lineno


class ManifestFormatError(ManifestError):
    line: str

    def __init__(self, lineno: int, line: str):
        super().__init__(lineno, f"invalid line: {line}")
        self.line = line


class InvalidCharacterSpecError(ManifestError):
    character: str

    def __init__(self, lineno: int, character: str):
        super().__init__(lineno, f"invalid character: {character}")
        self.character = character


class OutOfRangeError(ManifestError):
    character: str
    code: int

    def __init__(self, lineno: int, character: str, code: int):
        super().__init__(
            lineno, f"character {character} (code {code}) is outside ASCII range"
        )
        self.character = character
        self.code = code


class BitmapError(FontError):
    source: Path | str

    def __init__(self, source: Path | str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source


class NotPlainBitmapError(BitmapError):
    def __init__(self, source: Path | str):
        super().__init__(source, "not a Plain PBM file")


class WrongDimensionsError(BitmapError):
    def __init__(self, source: Path | str):
        super().__init__(source, "not a 5x8 bitmap")


class TruncatedBitmapError(BitmapError):
    def __init__(self, source: Path | str, count: int):
        super().__init__(source, f"expected 40 pixels, found {count}")
        self.count = count


class InvalidPixelError(BitmapError):
    def __init__(self, source: Path | str, pixel: str):
        super().__init__(source, f"invalid pixel value {pixel!r}")
        self.pixel = pixel


class MissingDefaultGlyphError(FontError):
    def __init__(self):
        super().__init__("default character must be defined")


class ManifestEncodingError(FontError):
    def __init__(self, source: Path | str):
        super().__init__(f"{source}: manifest is not valid UTF-8 text")
        self.source = source
