"""Filter-file entry points: text in, validated actions or graph out.

No file-system or process access happens here except in
load_filter_file, which only reads the filter file.
"""

from pathlib import Path

from .actions import Action, build_actions
from .graph import compile_graph
from .lexer import tokenize
from .validate import validate_actions


def parse_filter(text: str) -> list[Action]:
    """Lex, build and validate a filter file's actions.

    Raises:
        FilterError: Any lexing, parsing or validation failure.
    """
    actions = build_actions(tokenize(text))
    validate_actions(actions)
    return actions


def compile_filter(text: str) -> str:
    """Compile filter-file text into an ffmpeg filter_complex expression.

    Raises:
        FilterError: Any failure, with line/column where available.
    """
    return compile_graph(parse_filter(text))


def load_filter_file(path: str | Path) -> list[Action]:
    """Read and parse a filter file from disk.

    Raises:
        FileNotFoundError: Missing filter file.
        FilterError: Invalid contents.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Filter file not found: {path}")
    return parse_filter(p.read_text(encoding="utf-8"))
