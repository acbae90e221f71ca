from pathlib import Path

import pytest

BLANK = ["00000"] * 8

LETTER_A = [
    "01110",
    "10001",
    "10001",
    "11111",
    "10001",
    "10001",
    "10001",
    "00000",
]


def pbm_text(rows: list[str], width: int = 5, height: int = 8, magic: str = "P1") -> str:
    pixels = "\n".join(" ".join(row) for row in rows)
    return f"{magic}\n# test glyph\n{width} {height}\n{pixels}\n"


@pytest.fixture
def write_pbm(tmp_path: Path):
    def _write(name: str, rows: list[str], **kwargs) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(pbm_text(rows, **kwargs), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_manifest(tmp_path: Path):
    def _write(text: str, name: str = "font.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
