"""Domain Types — verifies enum members and string serialization."""

from immutable_ops.core.domain_types import BoundaryPolicy, Section


def test_boundary_policy_has_three_policies():
    assert set(BoundaryPolicy) == {
        BoundaryPolicy.RAISE,
        BoundaryPolicy.NOOP,
        BoundaryPolicy.CLAMP,
    }


def test_boundary_policy_round_trips_from_string():
    assert BoundaryPolicy("clamp") is BoundaryPolicy.CLAMP
    assert BoundaryPolicy.RAISE.value == "raise"


def test_sections_in_cheatsheet_order():
    assert list(Section) == [Section.ARRAYS, Section.OBJECTS]


def test_section_heading_is_capitalized():
    assert Section.ARRAYS.heading == "Arrays"
    assert Section.OBJECTS.heading == "Objects"
