import sys
from typing import NoReturn
from pathlib import Path
from argparse import ArgumentParser

from .errors import FontError, UsageError
from .manifest import ManifestEntry, read_manifest
from .table import CharacterSpec, build_font_table
from .render import include_guard, render_header, write_header


def log(*args, **kwargs):
    if len(args) > 0:
        print(" ".join(str(v) for v in args), file=sys.stderr)
    if len(kwargs) == 0:
        return
    l = max(len(k) for k in kwargs.keys())
    for k, v in kwargs.items():
        print(f"{k.rjust(l)}: {v}", file=sys.stderr)


class CliParser(ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        raise UsageError(message)


def create_parser() -> CliParser:
    cli_parser = CliParser(
        prog="font5x8gen",
        add_help=False,
        description="Generate a PROGMEM 5x8 font header from a glyph manifest.",
    )
    cli_parser.add_argument("manifest", type=Path, help="glyph manifest file")
    cli_parser.add_argument("output", type=Path, help="header file to generate")
    cli_parser.add_argument("-v", "--verbose", action="store_true", required=False)
    return cli_parser


def generate(manifest_path: Path, output_path: Path, verbose: bool = False):
    def trace_entry(entry: ManifestEntry, spec: CharacterSpec):
        log(
            line=entry.lineno,
            character=entry.character,
            code=spec.code if spec.code is not None else spec.kind,
            bitmap=entry.bitmap_path,
        )

    entries = read_manifest(manifest_path)
    table = build_font_table(entries, on_entry=trace_entry if verbose else None)
    glyphs, ascii_map = table.build()

    generated_code = render_header(glyphs, ascii_map, include_guard(output_path))
    write_header(output_path, generated_code)

    if verbose:
        log(f"wrote {output_path}", glyphs=len(glyphs), entries=len(entries))


def main(argv: list[str] | None = None) -> int:
    cli_parser = create_parser()

    try:
        cli = cli_parser.parse_args(argv)
    except UsageError as err:
        log(f"{cli_parser.prog}: error: {err}")
        return 2

    manifest_path: Path = cli.manifest
    output_path: Path = cli.output

    try:
        generate(manifest_path, output_path, verbose=cli.verbose)
    except (FontError, OSError) as err:
        log(f"error: {err}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
