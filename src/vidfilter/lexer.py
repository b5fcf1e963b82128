"""Filter-file lexer.

Each line is scanned on its own with a four-field state machine:

    VERB  --space-->  START  --'-'-->  END  --'('-->  REASON  --')'--> done

A field only terminates once it holds content, so leading whitespace (or
a leading '-' in a time) never closes an empty field. A '#' ends the line;
the token being accumulated is kept, except inside an open '(...)'
annotation where it is dropped along with the rest of the line.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import LexError


class LexState(Enum):
    VERB = "verb"
    START = "start"
    END = "end"
    REASON = "reason"


class Step(Enum):
    KEEP = "keep"        # character belongs to the current field
    EMIT = "emit"        # close the current token, move to the next field
    FINISH = "finish"    # close the current token, ignore the rest of the line
    COMMENT = "comment"  # close a pending token, ignore the rest of the line
    ABANDON = "abandon"  # drop the pending token and the rest of the line


COMMENT_CHAR = "#"

# Field -> character that closes it (only when the field has content,
# except REASON which closes on ')' unconditionally).
_TERMINATORS = {
    LexState.START: ("-", LexState.END),
    LexState.END: ("(", LexState.REASON),
}


@dataclass(frozen=True)
class Token:
    value: str
    line: int
    column: int


def next_state(state: LexState, ch: str, has_content: bool) -> tuple[Step, LexState]:
    """Pure transition function: (state, char) -> (step, new state).

    Raises:
        LexError: `state` is not one of the four fields.
    """
    if ch == COMMENT_CHAR:
        if state is LexState.REASON:
            return Step.ABANDON, state
        return Step.COMMENT, state

    if state is LexState.VERB:
        if ch.isspace() and has_content:
            return Step.EMIT, LexState.START
    elif state in _TERMINATORS:
        terminator, following = _TERMINATORS[state]
        if ch == terminator and has_content:
            return Step.EMIT, following
    elif state is LexState.REASON:
        if ch == ")":
            return Step.FINISH, state
    else:
        raise LexError(f"unexpected lexer state {state!r}")

    return Step.KEEP, state


def _scan_line(line: str, line_num: int) -> list[Token]:
    tokens = []
    state = LexState.VERB
    value = ""
    column = None

    for col, ch in enumerate(line, start=1):
        step, state = next_state(state, ch, bool(value))

        if step is Step.ABANDON:
            return tokens
        if step is Step.COMMENT:
            break

        if step in (Step.EMIT, Step.FINISH):
            # An empty '()' still yields a token; it points at the ')'.
            tokens.append(Token(value.strip(), line_num, column or col))
            value, column = "", None
            if step is Step.FINISH:
                return tokens
            continue

        # Skip leading whitespace of a field.
        if not value and ch.isspace():
            continue
        if column is None:
            column = col
        value += ch

    if value:
        tokens.append(Token(value.strip(), line_num, column))
    return tokens


def tokenize(text: str) -> list[Token]:
    """Scan filter-file text into positioned tokens.

    Lines end at a newline (a trailing carriage return is dropped); form
    feeds and other Unicode line breaks do not start a new line. Tokens
    never span lines. Blank and comment-only lines yield nothing.
    """
    tokens = []
    for line_num, line in enumerate(text.split("\n"), start=1):
        tokens.extend(_scan_line(line.removesuffix("\r"), line_num))
    return tokens
