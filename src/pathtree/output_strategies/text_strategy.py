"""Plain text output strategy for match formatting."""

from typing import Optional

from pathtree.path_tree.path_node import PathNode

from .base_strategy import MatchOutputStrategy


class TextOutputStrategy(MatchOutputStrategy):
    """Output strategy that writes one matched path per line.

    When an ancestor is supplied, its path follows the match path after a tab and an
    arrow.

    Example:
        >>> henry = PathNode("henry", parent=PathNode())
        >>> carlos = PathNode("carlos", parent=henry)
        >>> strategy = TextOutputStrategy()
        >>> strategy.format_match(carlos)
        '/henry/carlos\\n'
        >>> strategy.format_match(carlos, henry)
        '/henry/carlos\\t-> /henry\\n'
    """

    def format_start(self) -> str:
        return ""

    def format_match(self, node: PathNode, ancestor: Optional[PathNode] = None) -> str:
        if ancestor is None:
            return f"{node.path}\n"
        return f"{node.path}\t-> {ancestor.path}\n"

    def format_end(self) -> str:
        return ""
