import os
import re
import stat
import tempfile
import jinja2

from pathlib import Path

from .pbm import Bitmap

THIS_PATH = Path(__file__).parent
TEMPLATE_PATH = THIS_PATH / "templates" / "font5x8.hpp.j2"

_environment = jinja2.Environment(
    trim_blocks=True,
    keep_trailing_newline=True,
    undefined=jinja2.StrictUndefined,
)


def include_guard(output_path: Path | str) -> str:
    name = Path(output_path).name
    return re.sub(r"[^A-Za-z0-9]", "_", name).upper() + "_"


def render_header(glyphs: list[Bitmap], ascii_map: list[int], guard: str) -> str:
    template = _environment.from_string(TEMPLATE_PATH.read_text(encoding="utf-8"))
    return template.render(
        guard=guard,
        glyphs=glyphs,
        ascii_map=ascii_map,
    )


def _output_mode(output_path: Path) -> int:
    try:
        return stat.S_IMODE(output_path.stat().st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_header(output_path: Path, generated_code: str):
    """
    Replaces `output_path` with `generated_code`. The text is staged in a
    temporary file next to the target, so readers never see a partial
    header.
    """
    fd, staging = tempfile.mkstemp(
        dir=output_path.parent,
        prefix=f".{output_path.name}.",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fp:
            fp.write(generated_code)
        os.chmod(staging, _output_mode(output_path))
        os.replace(staging, output_path)
    except BaseException:
        os.unlink(staging)
        raise
