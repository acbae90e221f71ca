from pathlib import Path

import pytest

from font5x8gen.errors import ManifestFormatError, ManifestEncodingError
from font5x8gen.manifest import parse_manifest, read_manifest


def test_entries_keep_order_and_line_numbers():
    text = "# header comment\n\nA a.pbm\n  0x42   glyphs/b.pbm  # B\ndefault d.pbm\n"
    entries = parse_manifest(text, Path("fonts"))

    assert [(e.lineno, e.character, e.bitmap_path) for e in entries] == [
        (3, "A", Path("fonts/a.pbm")),
        (4, "0x42", Path("fonts/glyphs/b.pbm")),
        (5, "default", Path("fonts/d.pbm")),
    ]


@pytest.mark.parametrize("line", ["A", "A a.pbm extra", "lonely # comment"])
def test_wrong_token_count_reports_line(line):
    with pytest.raises(ManifestFormatError) as info:
        parse_manifest(f"default d.pbm\n{line}\n", Path("."))

    assert info.value.lineno == 2
    assert info.value.line == line
    assert "line 2" in str(info.value)
    assert line in str(info.value)


def test_hash_character_needs_hex_form():
    # '#' always starts a comment, so a leading '#' blanks the line
    assert parse_manifest("# hash.pbm\n", Path(".")) == []
    with pytest.raises(ManifestFormatError):
        parse_manifest("x # hash.pbm\n", Path("."))

    (entry,) = parse_manifest("0x23 hash.pbm\n", Path("."))
    assert entry.character == "0x23"


def test_read_manifest_resolves_against_its_directory(tmp_path):
    (tmp_path / "sub").mkdir()
    path = tmp_path / "sub" / "font.txt"
    path.write_text("A glyphs/a.pbm\n", encoding="utf-8")

    (entry,) = read_manifest(path)
    assert entry.bitmap_path == tmp_path / "sub" / "glyphs" / "a.pbm"


def test_missing_manifest_raises_os_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_manifest(tmp_path / "nope.txt")


def test_line_numbers_count_only_newlines():
    text = "default d.pbm\r\nA\x0ca.pbm\nB b.pbm c\n"
    with pytest.raises(ManifestFormatError) as info:
        parse_manifest(text, Path("."))
    assert info.value.lineno == 3

    (_, entry) = parse_manifest("default d.pbm\r\nA a.pbm\r\n", Path("."))
    assert entry.line == "A a.pbm"
    assert entry.lineno == 2


def test_binary_manifest_is_rejected(tmp_path):
    path = tmp_path / "font.bin"
    path.write_bytes(b"default \xf8\xff.pbm\n")

    with pytest.raises(ManifestEncodingError):
        read_manifest(path)
