"""Time literals — `[[H:]M:]S` offsets from media start."""

import math
import re
from dataclasses import dataclass

from .errors import TimeParseError


@dataclass(frozen=True)
class Time:
    """Offset from media start. Immutable once parsed."""

    hour: int = 0
    minute: int = 0
    second: float = 0.0

    @property
    def total_seconds(self) -> float:
        return self.hour * 3600 + self.minute * 60 + self.second

    def seconds_str(self) -> str:
        """Total seconds with two decimals, as rendered into the graph."""
        return f"{self.total_seconds:.2f}"

    def __str__(self) -> str:
        # H:MM:SS.ss when hours are present, M:SS.ss otherwise.
        if self.hour > 0:
            return f"{self.hour}:{self.minute:02d}:{self.second:05.2f}"
        return f"{self.minute}:{self.second:05.2f}"


ZERO = Time()

# ASCII digits only; no sign, underscores or inner whitespace.
_INT_RE = re.compile(r"[0-9]+")
_SECOND_RE = re.compile(r"([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _parse_int(value: str, field: str, text: str) -> int:
    if not _INT_RE.fullmatch(value):
        raise TimeParseError(f"bad {field} value '{value}' in '{text}'")
    return int(value)


def parse_time(text: str) -> Time:
    """Parse a colon-separated time literal.

    One part is seconds, two are minute:second, three are
    hour:minute:second. Empty parts default to "00". An empty string
    yields the zero Time so an omitted end time falls through to the
    validator instead of failing here.

    Raises:
        TimeParseError: Hour/minute not plain digits, seconds negative
            or non-finite, or more than three parts.
    """
    text = text.strip()
    if not text:
        return ZERO

    parts = [p if p else "00" for p in text.split(":")]
    if len(parts) > 3:
        raise TimeParseError(f"bad time format '{text}'")

    hour = minute = 0
    if len(parts) == 3:
        hour = _parse_int(parts[0], "hour", text)
    if len(parts) >= 2:
        minute = _parse_int(parts[-2], "minute", text)

    # Negative, nan and inf seconds are rejected; "1e400" overflows to inf.
    second = float(parts[-1]) if _SECOND_RE.fullmatch(parts[-1]) else math.nan
    if not math.isfinite(second):
        raise TimeParseError(f"bad second value '{parts[-1]}' in '{text}'")

    return Time(hour=hour, minute=minute, second=second)
