"""Tests for segment validation."""

import pytest

from vidfilter.actions import Action, Verb, build_actions
from vidfilter.errors import (
    OutOfOrderAcrossActionsError,
    OutOfOrderWithinActionError,
    OverlapOrAdjacentError,
    SegmentTooShortError,
    ValidationError,
)
from vidfilter.lexer import tokenize
from vidfilter.timecode import Time
from vidfilter.validate import THRESHOLD, validate_actions


def _validate(text):
    validate_actions(build_actions(tokenize(text)))


class TestValidateActions:
    def test_empty_list_passes(self):
        validate_actions([])

    def test_separated_actions_pass(self):
        _validate("cut 0:10-0:20\ncut 0:25-0:30")

    def test_end_before_start(self):
        with pytest.raises(OutOfOrderWithinActionError, match="line 1") as exc_info:
            _validate("cut 0:20-0:10")
        assert exc_info.value.lines == (1,)

    def test_missing_end_is_out_of_order(self):
        with pytest.raises(OutOfOrderWithinActionError):
            _validate("cut 1:32")

    def test_zero_length_segment(self):
        with pytest.raises(SegmentTooShortError):
            _validate("cut 0:10-0:10")

    def test_short_segment_anywhere_in_list(self):
        with pytest.raises(SegmentTooShortError, match="line 3"):
            _validate("cut 1-2\ncut 3-4\nmute 5-5.0005")

    def test_overlap_is_out_of_order(self):
        with pytest.raises(OutOfOrderAcrossActionsError) as exc_info:
            _validate("cut 0:10-0:20\nmute 0:15-0:18")
        assert exc_info.value.lines == (1, 2)
        assert str(exc_info.value).startswith("lines 1-2:")

    def test_reordered_actions(self):
        with pytest.raises(OutOfOrderAcrossActionsError):
            _validate("cut 1:00-1:10\ncut 0:10-0:20")

    def test_adjacent_actions(self):
        with pytest.raises(OverlapOrAdjacentError):
            _validate("cut 0:10-0:20\ncut 0:20-0:30")

    def test_gap_below_threshold(self):
        with pytest.raises(OverlapOrAdjacentError):
            _validate("cut 10-20\ncut 20.0005-30")

    def test_gap_at_threshold_passes(self):
        _validate("cut 10-20\ncut 20.001-30")

    def test_all_validator_errors_share_base(self):
        with pytest.raises(ValidationError):
            _validate("cut 0:10-0:20\ncut 0:20-0:30")

    def test_custom_threshold(self):
        actions = [
            Action(Verb.CUT, Time(second=1), Time(second=2)),
            Action(Verb.CUT, Time(second=2.5), Time(second=3)),
        ]
        validate_actions(actions)
        with pytest.raises(OverlapOrAdjacentError):
            validate_actions(actions, threshold=1.0)

    def test_threshold_value(self):
        assert THRESHOLD == 0.001
