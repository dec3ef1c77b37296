"""Matching rules for a single path expression segment."""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathtree.path_tree.path_node import PathNode

WILDCARD = "*"


class SegmentKind(Enum):
    """Enumeration of the ways a path segment selects children.

    Attributes:
        WILDCARD: ``*``, selects every child.
        PREFIX: ``foo*``, selects children whose value starts with ``foo``.
        EXACT: Anything else, selects children by value or alias.
    """

    WILDCARD = "wildcard"
    PREFIX = "prefix"
    EXACT = "exact"


def classify_segment(segment: str) -> SegmentKind:
    """Determine which matching rule applies to a segment.

    Example:
        >>> classify_segment("*")
        <SegmentKind.WILDCARD: 'wildcard'>
        >>> classify_segment("neis*")
        <SegmentKind.PREFIX: 'prefix'>
        >>> classify_segment("carlos")
        <SegmentKind.EXACT: 'exact'>
    """
    if segment == WILDCARD:
        return SegmentKind.WILDCARD
    if segment.endswith(WILDCARD):
        return SegmentKind.PREFIX
    return SegmentKind.EXACT


def segment_matches(node: "PathNode", segment: str) -> bool:
    """Check whether a node is selected by a path segment.

    Prefix segments are tested against the node's value only; aliases take part in
    exact matches only. A node without a value is never selected by a prefix or
    exact segment.

    Args:
        node: The candidate child node.
        segment: One segment of a path expression.

    Returns:
        True if the segment selects the node.
    """
    kind = classify_segment(segment)
    if kind is SegmentKind.WILDCARD:
        return True

    value_text = node.value_text
    if kind is SegmentKind.PREFIX:
        return value_text is not None and value_text.startswith(segment[: -len(WILDCARD)])
    return segment == value_text or segment in node.aliases
