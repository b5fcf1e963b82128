"""Action builder — groups tokens by line into edit actions."""

from dataclasses import dataclass, field
from enum import Enum
from itertools import groupby
from types import MappingProxyType

from .annotation import Annotation, parse_annotation
from .errors import (
    AnnotationFormatError,
    TimeParseError,
    UnexpectedTokenCountError,
    UnrecognizedVerbError,
)
from .lexer import Token
from .timecode import ZERO, Time, parse_time


class Verb(Enum):
    CUT = "cut"
    MUTE = "mute"


# Closed vocabulary; lookups are lower-cased first.
VERBS = MappingProxyType({v.value: v for v in Verb})


@dataclass(frozen=True)
class Action:
    verb: Verb
    start: Time = ZERO
    end: Time = ZERO
    annotation: Annotation = field(default_factory=Annotation)
    tokens: tuple[Token, ...] = ()

    @property
    def line(self) -> int | None:
        return self.tokens[0].line if self.tokens else None

    @property
    def duration(self) -> float:
        return self.end.total_seconds - self.start.total_seconds

    def __str__(self) -> str:
        text = f"{self.verb.value} {self.start}-{self.end}"
        if self.annotation:
            text += f" ({self.annotation})"
        return text


def _parse_time_token(token: Token, label: str) -> Time:
    try:
        return parse_time(token.value)
    except TimeParseError as err:
        raise TimeParseError(
            f"invalid {label} time: {err.message}", token.line, token.column,
        ) from err


def _build_action(line_tokens: list[Token]) -> Action:
    verb_token = line_tokens[0]
    verb = VERBS.get(verb_token.value.lower())
    if verb is None:
        raise UnrecognizedVerbError(verb_token.value, verb_token.line, verb_token.column)

    if len(line_tokens) > 4:
        extra = line_tokens[4]
        raise UnexpectedTokenCountError(
            f"unexpected token count of {len(line_tokens)}", extra.line, extra.column,
        )

    start = end = ZERO
    annotation = Annotation()
    if len(line_tokens) > 1:
        start = _parse_time_token(line_tokens[1], "start")
    if len(line_tokens) > 2:
        end = _parse_time_token(line_tokens[2], "end")
    if len(line_tokens) > 3:
        token = line_tokens[3]
        try:
            annotation = parse_annotation(token.value)
        except AnnotationFormatError as err:
            raise AnnotationFormatError(
                f"invalid annotation: {err.message}", token.line, token.column,
            ) from err

    return Action(
        verb=verb, start=start, end=end, annotation=annotation,
        tokens=tuple(line_tokens),
    )


def build_actions(tokens: list[Token]) -> list[Action]:
    """Build one Action per source line, in file order.

    Token 0 is the verb, 1 the start time, 2 the end time and 3 the
    annotation. Missing times default to zero and are left for the
    validator to reject.

    Raises:
        UnrecognizedVerbError: Verb not in VERBS.
        TimeParseError: Bad start or end time (with token location).
        AnnotationFormatError: Bad annotation (with token location).
        UnexpectedTokenCountError: More than four tokens on one line.
    """
    return [
        _build_action(list(line_tokens))
        for _, line_tokens in groupby(tokens, key=lambda t: t.line)
    ]
