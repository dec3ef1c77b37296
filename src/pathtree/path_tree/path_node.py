"""Node representation for path-addressable tree elements."""

from typing import Iterable, List, Optional, Tuple

from anytree import NodeMixin

from pathtree.path_tree.segment import segment_matches
from pathtree.types import Identifier, LevelType


class PathNode(NodeMixin):  # type: ignore
    """Node class representing one addressable element of a path tree.

    Extends anytree.NodeMixin with a value, text aliases and level names, and with
    path-expression lookup of descendants. Parent/child bookkeeping is inherited from
    anytree: a node has exactly one parent and both sides of the link are kept in sync.

    Attributes:
        value (Identifier): The segment identifier of this node. None for an anonymous root.
        parent (Optional[PathNode]): The parent node in the tree.
        children (tuple[PathNode]): The child nodes in insertion order (inherited from anytree).
        aliases (tuple[str]): Alternate identifiers usable in place of the value, as text.
        levels (tuple[str]): Level names; only consulted on the ancestry root.

    Example:
        >>> root = PathNode(levels=["parent", "child"])
        >>> carlos = PathNode("carlos", aliases=["blakgeek", 2], parent=root)
        >>> norah = PathNode("norah", parent=carlos)
        >>> norah.path
        '/carlos/norah'
        >>> carlos.aliases
        ('blakgeek', '2')
        >>> [node.path for node in root.find("/2/*")]
        ['/carlos/norah']
        >>> norah.get_ancestor_at_level("parent").value
        'carlos'
    """

    def __init__(
        self,
        value: Identifier = None,
        children: Optional[Iterable["PathNode"]] = None,
        aliases: Optional[Iterable[Identifier]] = None,
        levels: Optional[Iterable[Identifier]] = None,
        parent: Optional["PathNode"] = None,
    ) -> None:
        """Initialize a PathNode.

        Args:
            value: The segment identifier. Defaults to None (anonymous node).
            children: Nodes to attach as children, in order. Each one is re-parented
                to this node. Defaults to no children.
            aliases: Alternate identifiers; each is stored as its ``str()`` form.
            levels: Level names for ancestor lookups below this node, stored as text.
            parent: The parent node. Defaults to None.

        Example:
            >>> node = PathNode("sandra", aliases=["mummy", 1])
            >>> node.aliases
            ('mummy', '1')
            >>> node.is_root and node.is_leaf
            True
        """
        self.value = value
        self.aliases: Tuple[str, ...] = tuple(str(alias) for alias in aliases or ())
        self.levels: Tuple[str, ...] = tuple(str(level) for level in levels or ())
        self.parent = parent
        if children:
            self.children = children

    @property
    def value_text(self) -> Optional[str]:
        """The value as text, or None when the node has no value."""
        return None if self.value is None else str(self.value)

    @property
    def path(self) -> str:
        """The identifier path from the ancestry root down to this node.

        The root's value is the first component (empty when it has none), so nodes
        below an anonymous root get a leading slash. A valueless node below the root
        contributes an empty component.

        Example:
            >>> root = PathNode(children=[PathNode("henry", children=[PathNode(), PathNode("malik")])])
            >>> [node.path for node in root.find("henry/*")]
            ['/henry/', '/henry/malik']
        """
        return self.separator.join(node.value_text or "" for node in self.ancestry)

    @property
    def ancestry(self) -> Tuple["PathNode", ...]:
        """All nodes from the top-most ancestor down to and including this node."""
        return tuple(reversed(list(self.iter_path_reverse())))

    @property
    def ancestors(self) -> Tuple["PathNode", ...]:
        """All nodes above this one, top-most first."""
        return self.ancestry[:-1]

    def get_ancestor_at_level(self, level: LevelType) -> Optional["PathNode"]:
        """Get the ancestor at a depth below the ancestry root.

        Level 0 is the top-level node of this node's ancestry (the first node below the
        root); the root itself is never returned. The level can also be given by one of
        the names configured in the root's ``levels``, which resolves to that name's
        position. A node counts as its own ancestor at its own depth.

        Args:
            level: A non-negative depth index, or a level name.

        Returns:
            The ancestor node, or None if the level is unknown or out of range. Only
            whole numbers index: a float such as ``1.0`` gives None.

        Example:
            >>> root = PathNode(levels=["grandparent", "parent", "child"])
            >>> henry = PathNode("henry", parent=root)
            >>> norah = PathNode("norah", parent=PathNode("carlos", parent=henry))
            >>> norah.get_ancestor_at_level(0) is henry
            True
            >>> norah.get_ancestor_at_level("grandparent") is henry
            True
            >>> norah.get_ancestor_at_level(99) is None
            True
        """
        root, *rest = self.ancestry
        level_text = str(level)
        if level_text in root.levels:
            level = root.levels.index(level_text)
        elif isinstance(level, str) and level.isdecimal():
            level = int(level)

        if isinstance(level, bool) or not isinstance(level, int):
            return None
        if not 0 <= level < len(rest):
            return None
        return rest[level]

    def add_child(self, node: "PathNode") -> "PathNode":
        """Append a child node and return it for chaining.

        The child is re-parented to this node, so it leaves any previous parent. A node
        that is already a child of this node keeps its position and is not added twice.
        """
        node.parent = self
        return node

    def find(self, path: str) -> List["PathNode"]:
        """Find descendant nodes matching a path expression.

        The expression is a ``/``-separated list of segments, each matched against the
        children of the nodes selected by the previous segment. A segment is ``*`` (all
        children), ``prefix*`` (children whose value starts with prefix) or a literal
        (children whose value or one of whose aliases equals it). One leading slash is
        ignored, here and in the remainder handed to each matched child, so a doubled
        slash inside the expression behaves like a single one. Any other empty segment
        matches nothing.

        Args:
            path: The path expression, relative to this node.

        Returns:
            A new list of matching nodes in tree order. Nodes reached through different
            branches are all kept; the list is empty when nothing matches.

        Example:
            >>> root = PathNode(children=[
            ...     PathNode("neisha", aliases=[22], children=[PathNode("khepri"), PathNode("cayo")]),
            ... ])
            >>> [node.value for node in root.find("/neis*/*")]
            ['khepri', 'cayo']
            >>> [node.value for node in root.find("22/khe*")]
            ['khepri']
            >>> [node.value for node in root.find("/neisha//cayo")]
            ['cayo']
            >>> root.find("/neisha///cayo")
            []
        """
        if path.startswith(self.separator):
            path = path[len(self.separator) :]
        segment, _, tail = path.partition(self.separator)
        matching_nodes = [child for child in self.children if segment_matches(child, segment)]
        if tail:
            return [found for node in matching_nodes for found in node.find(tail)]
        return matching_nodes

    def __repr__(self) -> str:
        args = [repr(self.path)]
        if self.aliases:
            args.append(f"aliases={list(self.aliases)!r}")
        if self.levels:
            args.append(f"levels={list(self.levels)!r}")
        return f"{self.__class__.__name__}({', '.join(args)})"
