"""Tests for annotation parsing."""

import pytest

from vidfilter.annotation import Annotation, parse_annotation
from vidfilter.errors import AnnotationFormatError


class TestParseAnnotation:
    def test_empty(self):
        a = parse_annotation("")
        assert a == Annotation()
        assert not a

    def test_category_only(self):
        assert parse_annotation("intro") == Annotation(category="intro")

    def test_category_and_specifier(self):
        a = parse_annotation("profanity:f-word")
        assert a.category == "profanity"
        assert a.specifier == "f-word"

    def test_parts_are_trimmed(self):
        a = parse_annotation("  violence :  gore ")
        assert a == Annotation(category="violence", specifier="gore")

    def test_three_parts_raises(self):
        with pytest.raises(AnnotationFormatError, match="a:b:c"):
            parse_annotation("a:b:c")

    def test_str(self):
        assert str(Annotation("profanity", "f-word")) == "profanity:f-word"
        assert str(Annotation("intro")) == "intro"
