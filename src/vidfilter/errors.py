"""Error taxonomy for filter-file compilation.

Every error is terminal for a run. Errors carry the 1-based source line
(and column for token-level errors) so the CLI can point at the exact spot.
"""


class FilterError(Exception):
    """Base class for all filter-file errors.

    Attributes:
        message: Human-readable description without location.
        line: 1-based source line, or None when unknown.
        column: 1-based column of the offending token, or None.
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(str(self))

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"line {self.line}: {self.message}"
        return f"line {self.line}:{self.column}: {self.message}"


class LexError(FilterError):
    """Lexer reached a state it has no transition for."""


class UnrecognizedVerbError(FilterError):
    """First token on a line is not a known verb."""

    def __init__(self, verb: str, line: int, column: int):
        self.verb = verb
        super().__init__(f"unrecognized verb '{verb}'", line, column)


class TimeParseError(FilterError):
    """Time literal could not be parsed."""


class AnnotationFormatError(FilterError):
    """Annotation has more than one ':' separator."""


class UnexpectedTokenCountError(FilterError):
    """A line carries more than verb, start, end and annotation."""


class ValidationError(FilterError):
    """Base for segment ordering/duration errors.

    Attributes:
        lines: The source line(s) of the offending action(s).
    """

    def __init__(self, message: str, lines: tuple[int, ...]):
        self.lines = tuple(lines)
        super().__init__(message, self.lines[-1] if self.lines else None)

    def __str__(self) -> str:
        if len(self.lines) > 1:
            return f"lines {self.lines[0]}-{self.lines[-1]}: {self.message}"
        return super().__str__()


class OutOfOrderWithinActionError(ValidationError):
    """End time comes before start time."""


class SegmentTooShortError(ValidationError):
    """Start and end are closer than the threshold."""


class OutOfOrderAcrossActionsError(ValidationError):
    """An action starts before the previous one ends."""


class OverlapOrAdjacentError(ValidationError):
    """Two actions are closer together than the threshold."""


class EmptyActionListError(FilterError):
    """Nothing to compile."""


class UnsupportedVerbError(FilterError):
    """Graph compiler was handed a verb it cannot translate."""
