"""Path queries over tree source files with streaming output.

This module ties together tree loading, tree rendering and match formatting so that
callers (chiefly the command-line interface) can stream results line by line.
"""

from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Union

from pathtree.exceptions import UnsupportedFormatError
from pathtree.output_strategies.base_strategy import MatchOutputStrategy
from pathtree.output_strategies.json_strategy import JSONOutputStrategy
from pathtree.output_strategies.text_strategy import TextOutputStrategy
from pathtree.path_tree.path_node import PathNode
from pathtree.path_tree.path_tree import PathTree
from pathtree.path_tree.tree_builder import load_tree_source
from pathtree.types import Identifier, LevelType

OUTPUT_STRATEGIES = {
    "text": TextOutputStrategy,
    "json": JSONOutputStrategy,
}


class StreamingPathQuery:
    """Streaming path query runner over one tree.

    The tree is loaded once at construction. Its top-level nodes are wrapped in a
    PathTree for rendering and counting, while queries run against the anonymous root
    so that matches keep the root's level names for ancestor lookups.

    Metrics:
    - node_count and leaf_count are available immediately
    - match_count reflects the matches streamed so far

    Attributes:
        root (PathNode): The anonymous root of the loaded tree.
        tree (PathTree): The top-level nodes of the loaded tree.

    Example:
        >>> query = StreamingPathQuery("tree.json", levels=["grandparent", "parent"])  # doctest: +SKIP
        >>> for chunk in query.stream_matches(["/henry/*"], ancestor_level="grandparent"):  # doctest: +SKIP
        ...     print(chunk, end="")
        /henry/carlos	-> /henry
        /henry/althea	-> /henry
        >>> query.match_count  # doctest: +SKIP
        2

    Raises:
        TreeSourceError: If the source cannot be loaded.
        UnsupportedFormatError: If the output format is unknown.
    """

    def __init__(
        self,
        source: Union[str, Path, PathNode],
        *,
        output_format: str = "text",
        levels: Optional[Iterable[Identifier]] = None,
    ) -> None:
        """Initialize a streaming query.

        Args:
            source: Path to a JSON tree source file, or an already built root node.
            output_format: Format for matches ('text' or 'json').
            levels: Level names overriding those of the source. Ignored when a node is
                given as source.

        Raises:
            TreeSourceError: If the source file cannot be loaded.
            UnsupportedFormatError: If the output format is unknown.
        """
        if output_format not in OUTPUT_STRATEGIES:
            raise UnsupportedFormatError(output_format)
        self._strategy: MatchOutputStrategy = OUTPUT_STRATEGIES[output_format]()

        if isinstance(source, PathNode):
            self.root = source
        else:
            self.root = load_tree_source(source, levels)
        self.tree = PathTree(self.root.children)

        self._node_count = self.tree.get_node_count()
        self._leaf_count = self.tree.get_leaf_count()
        self._match_count = 0

    @property
    def node_count(self) -> int:
        """Number of nodes in the tree, excluding the anonymous root."""
        return self._node_count

    @property
    def leaf_count(self) -> int:
        """Number of nodes without children."""
        return self._leaf_count

    @property
    def match_count(self) -> int:
        """Number of matches streamed so far."""
        return self._match_count

    def find(self, patterns: Sequence[str]) -> Iterator[PathNode]:
        """Yield the matches of each pattern in turn, without formatting."""
        for pattern in patterns:
            yield from self.root.find(pattern)

    def stream_tree(self) -> Iterator[str]:
        """Stream the drawing of the tree.

        Yields:
            Lines of the tree drawing, each ending with a newline.
        """
        for line in self.tree.stream_tree_representation():
            yield line + "\n"

    def stream_matches(self, patterns: Sequence[str], ancestor_level: Optional[LevelType] = None) -> Iterator[str]:
        """Stream the formatted matches of one or more path expressions.

        Matches are emitted in pattern order, then in tree order. When an ancestor level
        is given, each match is reported with its ancestor at that level (omitted when
        the level does not resolve for that match).

        Args:
            patterns: Path expressions to resolve against the tree.
            ancestor_level: Optional level index or level name.

        Yields:
            Formatted output chunks.
        """
        yield self._strategy.format_start()
        for node in self.find(patterns):
            ancestor = None if ancestor_level is None else node.get_ancestor_at_level(ancestor_level)
            self._match_count += 1
            yield self._strategy.format_match(node, ancestor)
        yield self._strategy.format_end()
