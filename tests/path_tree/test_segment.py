"""Unit tests for path segment classification and matching."""

import pytest

from pathtree.path_tree.path_node import PathNode
from pathtree.path_tree.segment import SegmentKind, classify_segment, segment_matches


@pytest.mark.parametrize(
    "segment,kind",
    [
        ("*", SegmentKind.WILDCARD),
        ("neis*", SegmentKind.PREFIX),
        ("**", SegmentKind.PREFIX),
        ("carlos", SegmentKind.EXACT),
        ("*carlos", SegmentKind.EXACT),
        ("", SegmentKind.EXACT),
    ],
)
def test_classify_segment(segment, kind):
    assert classify_segment(segment) is kind


def test_wildcard_matches_any_node():
    assert segment_matches(PathNode("carlos"), "*")
    assert segment_matches(PathNode(), "*")


def test_prefix_matches_value_only():
    node = PathNode("carlos", aliases=["blakgeek"])
    assert segment_matches(node, "car*")
    assert segment_matches(node, "carlos*")
    assert not segment_matches(node, "blak*")
    assert not segment_matches(PathNode(), "car*")


def test_exact_matches_value_or_alias():
    node = PathNode("sandra", aliases=["mummy", 1])
    assert segment_matches(node, "sandra")
    assert segment_matches(node, "mummy")
    assert segment_matches(node, "1")
    assert not segment_matches(node, "Sandra")
    assert not segment_matches(node, "")


def test_exact_does_not_treat_inner_star_as_wildcard():
    assert not segment_matches(PathNode("carlos"), "c*s")
    assert segment_matches(PathNode("c*s"), "c*s")
