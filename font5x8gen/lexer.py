from pathlib import Path
from lark import Lark, Transformer

THIS_PATH = Path(__file__).parent
GRAMMAR_PATH = THIS_PATH / "plain.lark"


class TokenTransformer(Transformer):
    def start(self, items) -> list[str]:
        return [str(item) for item in items]


_parser = Lark(
    GRAMMAR_PATH.read_text(encoding="utf-8"),
    start="start",
    parser="lalr",
    transformer=TokenTransformer(),
)


def tokenize(text: str) -> list[str]:
    """Strips '#' comments and splits the remaining text on whitespace."""
    return _parser.parse(text)
