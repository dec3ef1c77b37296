"""JSON output strategy for match formatting.

This module provides a strategy for formatting query matches as a streamed JSON array,
producing valid JSON once the start, all matches and the end have been written.
"""

import json
from typing import Any, Dict, Optional

from pathtree.path_tree.path_node import PathNode

from .base_strategy import MatchOutputStrategy


class JSONOutputStrategy(MatchOutputStrategy):
    """Output strategy that formats matches as a JSON array of objects.

    Each match is formatted as an object with the following structure:
    {
        "path": "/henry/carlos",
        "value": "carlos",
        "aliases": ["blakgeek", "2"],
        "is_leaf": false,
        "ancestor": "/henry"  # Optional, only included when an ancestor is supplied
    }

    Values are emitted as JSON where they are JSON-native and as their text form otherwise.

    Attributes:
        encoder: JSON encoder instance used for consistent escaping.

    Example:
        >>> henry = PathNode("henry", parent=PathNode())
        >>> carlos = PathNode("carlos", aliases=["blakgeek", 2], parent=henry)
        >>> strategy = JSONOutputStrategy()
        >>> strategy.format_start()
        '['
        >>> strategy.format_match(carlos)
        '\\n{"path": "/henry/carlos", "value": "carlos", "aliases": ["blakgeek", "2"], "is_leaf": true}'
        >>> strategy.format_match(henry)
        ',\\n{"path": "/henry", "value": "henry", "aliases": [], "is_leaf": false}'
        >>> strategy.format_end()
        '\\n]\\n'
    """

    def __init__(self) -> None:
        """Initialize the JSON output strategy."""
        self.encoder = json.JSONEncoder(ensure_ascii=False, default=str)
        self._match_written = False

    def format_start(self) -> str:
        self._match_written = False
        return "["

    def format_match(self, node: PathNode, ancestor: Optional[PathNode] = None) -> str:
        entry: Dict[str, Any] = {
            "path": node.path,
            "value": node.value,
            "aliases": list(node.aliases),
            "is_leaf": node.is_leaf,
        }
        if ancestor is not None:
            entry["ancestor"] = ancestor.path

        separator = ",\n" if self._match_written else "\n"
        self._match_written = True
        return separator + self.encoder.encode(entry)

    def format_end(self) -> str:
        return "\n]\n" if self._match_written else "]\n"
