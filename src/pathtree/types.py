from enum import Enum
from typing import Any, Union

# Anything usable as a node value or alias; compared by its text form
Identifier = Any

# Ancestor level: a depth index below the ancestry root or a configured level name
LevelType = Union[int, str]


class SourceFormat(Enum):
    """Enumeration of the supported tree source document layouts.

    Attributes:
        COMPACT: A list of ``{"v": ..., "a": [...], "c": [...]}`` node mappings.
        KEYED: A mapping of node value to ``{"aliases": [...], "children": {...}}``.
    """

    COMPACT = "compact"
    KEYED = "keyed"
