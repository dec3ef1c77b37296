"""Multi-rooted path tree representation.

This module provides the PathTree class, an ordered collection of top-level nodes
that can be queried with path expressions as a whole, together with helpers for
rendering and counting the nodes it holds.
"""

from typing import Iterator, List, Optional, Sequence

from anytree import ContStyle, PreOrderIter, RenderTree

from pathtree.path_tree.path_node import PathNode

ANONYMOUS_LABEL = "."


def format_node_label(node: PathNode) -> str:
    """Format the label used for a node in tree drawings.

    Example:
        >>> format_node_label(PathNode("carlos", aliases=["blakgeek", 2]))
        'carlos [blakgeek, 2]'
        >>> format_node_label(PathNode())
        '.'
    """
    value_text = node.value_text
    label = ANONYMOUS_LABEL if value_text is None else value_text
    if node.aliases:
        label += f" [{', '.join(node.aliases)}]"
    return label


def render_node(node: PathNode) -> Iterator[str]:
    """Generate a drawing of a node and its descendants one line at a time.

    Example:
        >>> henry = PathNode("henry", children=[PathNode("carlos"), PathNode("althea", aliases=[3])])
        >>> for line in render_node(henry):
        ...     print(line)
        henry
        ├── carlos
        └── althea [3]
    """
    for prefix, _, current in RenderTree(node, style=ContStyle()):
        yield f"{prefix}{format_node_label(current)}"


class PathTree:
    """An ordered collection of top-level PathNodes queried as one structure.

    A PathTree is used when the data has several disconnected top-level nodes rather
    than one root. ``find`` is forwarded to each top-level node in order and the
    results are flattened.

    Attributes:
        children (List[PathNode]): The top-level nodes, in order.

    Example:
        >>> tree = PathTree([
        ...     PathNode("henry", children=[PathNode("carlos")]),
        ...     PathNode("sandra", children=[PathNode("carla")]),
        ... ])
        >>> [node.value for node in tree.find("carlos")]
        ['carlos']
        >>> tree.get_node_count()
        4
    """

    def __init__(self, children: Optional[Sequence[PathNode]] = None) -> None:
        """Initialize a PathTree.

        Args:
            children: The top-level nodes. Defaults to an empty tree.
        """
        self.children: List[PathNode] = list(children) if children else []

    def find(self, path: str) -> List[PathNode]:
        """Find nodes matching a path expression below any top-level node.

        Each top-level node resolves the path against its own children, so the first
        segment of the path selects among the top-level nodes' children.

        Args:
            path: The path expression (see PathNode.find).

        Returns:
            A new list with the matches of every top-level node, in order.
        """
        return [found for node in self.children for found in node.find(path)]

    def iterate_nodes(self) -> Iterator[PathNode]:
        """Iterate over every node in the tree, depth first, top-level nodes in order."""
        for node in self.children:
            yield from PreOrderIter(node)

    def get_node_count(self) -> int:
        """Get the total number of nodes, top-level nodes included."""
        return sum(1 for _ in self.iterate_nodes())

    def get_leaf_count(self) -> int:
        """Get the number of nodes that have no children."""
        return sum(1 for node in self.iterate_nodes() if node.is_leaf)

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate a drawing of the tree one line at a time.

        Every top-level node is drawn as its own tree, in order.

        Yields:
            Lines of the tree drawing, without trailing newlines.
        """
        for node in self.children:
            yield from render_node(node)

    def get_tree_representation(self) -> str:
        """Get the complete drawing of the tree as a string."""
        return "\n".join(self.stream_tree_representation())
