"""
Tests for field address encoding and decoding.

Focus Areas:
1. Segment prefixes for objects, components and fields
2. Joining segments onto parent addresses
3. Splitting addresses back into typed segments
"""

import logging

from fieldtree.core.path_utils import (
    PathSegment,
    SegmentKind,
    component_segment,
    contains_reserved,
    field_segment,
    join_path,
    object_segment,
    split_path,
)


class TestSegments:
    """Test segment constructors."""

    def test_object_segment_prefix(self):
        assert object_segment("My Scene Object") == "!My Scene Object"

    def test_component_segment_prefix(self):
        assert component_segment("Camera") == ":Camera"

    def test_field_segment_has_no_prefix(self):
        assert field_segment("fieldOfView") == "fieldOfView"

    def test_segment_str_reencodes(self):
        """Decoded segments print back to their encoded form."""
        assert str(PathSegment(SegmentKind.OBJECT, "SO1")) == "!SO1"
        assert str(PathSegment(SegmentKind.COMPONENT, "Light")) == ":Light"
        assert str(PathSegment(SegmentKind.FIELD, "range")) == "range"


class TestJoinPath:
    """Test address composition."""

    def test_empty_parent_yields_segment(self):
        assert join_path("", "!SO1") == "!SO1"

    def test_join_adds_separator(self):
        assert join_path("!SO1", ":Camera") == "!SO1/:Camera"

    def test_full_address(self):
        """Test the documented example address."""
        address = join_path("", object_segment("My Scene Object"))
        address = join_path(address, component_segment("Camera"))
        for name in ("path", "to", "field"):
            address = join_path(address, field_segment(name))

        assert address == "!My Scene Object/:Camera/path/to/field"

    def test_join_is_associative(self):
        left = join_path(join_path("!A", ":B"), "c")
        right = join_path("!A", join_path(":B", "c"))
        assert left == right == "!A/:B/c"


class TestSplitPath:
    """Test address decoding."""

    def test_empty_address(self):
        assert split_path("") == []

    def test_split_classifies_segments(self):
        segments = split_path("!SO1/!Child1/:Camera/post_process/tint")

        assert [segment.kind for segment in segments] == [
            SegmentKind.OBJECT,
            SegmentKind.OBJECT,
            SegmentKind.COMPONENT,
            SegmentKind.FIELD,
            SegmentKind.FIELD,
        ]
        assert [segment.name for segment in segments] == [
            "SO1",
            "Child1",
            "Camera",
            "post_process",
            "tint",
        ]

    def test_split_then_join_round_trip(self):
        address = "!SO1/:Light/color"
        rebuilt = ""
        for segment in split_path(address):
            rebuilt = join_path(rebuilt, str(segment))
        assert rebuilt == address


class TestReservedCharacters:
    """Names with reserved characters are passed through, not escaped."""

    def test_contains_reserved(self):
        assert contains_reserved("a/b")
        assert contains_reserved("!bang")
        assert contains_reserved("ns:name")
        assert not contains_reserved("plain name")

    def test_reserved_name_is_not_escaped(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="fieldtree.core.path_utils"):
            segment = object_segment("a/b")

        assert segment == "!a/b"
        assert "reserved" in caplog.text

    def test_reserved_name_produces_ambiguous_split(self):
        """A "/" inside a name splits into two segments."""
        assert len(split_path(join_path("!Root", field_segment("a/b")))) == 3
