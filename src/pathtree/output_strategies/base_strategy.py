"""Output strategy base class defining the interface for match formatting.

This module provides the abstract base class that defines how the nodes matched by
a path query are formatted for output.
"""

from abc import ABC, abstractmethod
from typing import Optional

from pathtree.path_tree.path_node import PathNode


class MatchOutputStrategy(ABC):
    """Abstract base class defining the interface for match output formatting strategies.

    This class implements the Strategy pattern for formatting query results in different
    formats (e.g., plain text, JSON). The output process is divided into three phases:
    1. Start - outputs the opening wrapper, once per query output
    2. Match - formats one matched node, once per match
    3. End - outputs the closing wrapper, once per query output

    Strategies may keep state between the phases (e.g., separators), so a single
    instance formats one output stream at a time.

    Example:
        >>> class ValueStrategy(MatchOutputStrategy):
        ...     def format_start(self) -> str:
        ...         return ""
        ...
        ...     def format_match(self, node, ancestor=None) -> str:
        ...         return f"{node.value}\\n"
        ...
        ...     def format_end(self) -> str:
        ...         return ""
    """

    @abstractmethod
    def format_start(self) -> str:
        """Format the opening wrapper of the match output.

        Returns:
            The formatted opening wrapper string (may be empty).
        """
        pass

    @abstractmethod
    def format_match(self, node: PathNode, ancestor: Optional[PathNode] = None) -> str:
        """Format one matched node.

        Args:
            node: The matched node.
            ancestor: The requested ancestor of the node, if an ancestor level was
                requested and it exists.

        Returns:
            The formatted match string.
        """
        pass

    @abstractmethod
    def format_end(self) -> str:
        """Format the closing wrapper of the match output.

        Returns:
            The formatted closing wrapper string (may be empty).
        """
        pass
