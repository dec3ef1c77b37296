"""Path-addressable in-memory trees.

This package provides a small hierarchical tree whose nodes can be located with
slash-delimited path expressions (literal names, aliases and ``*`` wildcards),
plus helpers for building, rendering and querying such trees.
"""

from importlib.metadata import PackageNotFoundError, version

from pathtree.path_tree.path_node import PathNode
from pathtree.path_tree.path_tree import PathTree

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("pathtree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = ["PathNode", "PathTree", "__version__"]
