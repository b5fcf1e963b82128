"""Segment validator — ordering, overlap and minimum-duration checks."""

from .actions import Action
from .errors import (
    OutOfOrderAcrossActionsError,
    OutOfOrderWithinActionError,
    OverlapOrAdjacentError,
    SegmentTooShortError,
)

# Minimum segment duration and minimum gap between segments, in seconds.
THRESHOLD = 0.001

# Absorbs float error so a gap written as exactly 0.001s is accepted.
_EPSILON = 1e-9


def validate_actions(actions: list[Action], threshold: float = THRESHOLD) -> None:
    """Check that actions are chronological, non-overlapping and long enough.

    Stops at the first violation. An empty list passes; the graph compiler
    rejects it.

    Raises:
        OutOfOrderWithinActionError: end < start.
        SegmentTooShortError: end - start < threshold.
        OutOfOrderAcrossActionsError: start < previous end.
        OverlapOrAdjacentError: start - previous end < threshold.
    """
    prev = None
    for act in actions:
        start = act.start.total_seconds
        end = act.end.total_seconds

        if end < start:
            raise OutOfOrderWithinActionError(
                f"end time {act.end} comes before start time {act.start}",
                (act.line,),
            )
        if end - start < threshold - _EPSILON:
            raise SegmentTooShortError(
                f"start time {act.start} and end time {act.end} are too close; "
                f"within {threshold} of each other",
                (act.line,),
            )

        if prev is not None:
            prev_end = prev.end.total_seconds
            if start < prev_end:
                raise OutOfOrderAcrossActionsError(
                    f"segments are out of order ({act.start} starts before "
                    f"previous segment ends at {prev.end})",
                    (prev.line, act.line),
                )
            if start - prev_end < threshold - _EPSILON:
                raise OverlapOrAdjacentError(
                    "segments overlap or are too close",
                    (prev.line, act.line),
                )
        prev = act
