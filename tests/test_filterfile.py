"""Tests for the filter-file entry points."""

import pytest

from vidfilter import FilterError, compile_filter, parse_filter
from vidfilter.actions import Verb
from vidfilter.errors import (
    EmptyActionListError,
    OutOfOrderAcrossActionsError,
    OutOfOrderWithinActionError,
    UnrecognizedVerbError,
)
from vidfilter.filterfile import load_filter_file

SAMPLE = """\
# episode 12 edits
cut  0:00:05-0:00:12          # cold open
mute 2:19.2-2:19.85 (profanity:f-word)
mute 3:01-3:02.5 (profanity)

cut 1:02:00-1:03:30 (credits)
"""


class TestParseFilter:
    def test_sample_file(self):
        actions = parse_filter(SAMPLE)
        assert [a.verb for a in actions] == [Verb.CUT, Verb.MUTE, Verb.MUTE, Verb.CUT]
        assert [a.line for a in actions] == [2, 3, 4, 6]
        assert actions[-1].start.total_seconds == 3720.0

    def test_empty_text_gives_no_actions(self):
        assert parse_filter("# nothing yet\n") == []

    def test_validation_runs(self):
        with pytest.raises(OutOfOrderAcrossActionsError):
            parse_filter("cut 0:10-0:20\nmute 0:15-0:18")

    def test_missing_end_time(self):
        with pytest.raises(OutOfOrderWithinActionError):
            parse_filter("cut 1:32")


class TestCompileFilter:
    def test_returns_expression(self):
        graph = compile_filter(SAMPLE)
        assert graph.endswith("concat=v=0:a=1[outa]")
        assert "[0:v]trim=duration=5.00" in graph

    def test_empty_file_rejected(self):
        with pytest.raises(EmptyActionListError):
            compile_filter("\n\n# only comments\n")

    def test_errors_are_structured(self):
        with pytest.raises(FilterError) as exc_info:
            compile_filter("cut 1-2\nzoom 3-4")
        err = exc_info.value
        assert isinstance(err, UnrecognizedVerbError)
        assert err.kind == "UnrecognizedVerbError"
        assert (err.line, err.column) == (2, 1)


class TestLoadFilterFile:
    def test_reads_file(self, write_filter):
        path = write_filter(SAMPLE)
        assert len(load_filter_file(path)) == 4

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="not found"):
            load_filter_file(tmp_path / "missing.filter")
