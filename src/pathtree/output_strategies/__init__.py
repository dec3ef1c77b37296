"""Output strategies for formatting path query matches."""

from .base_strategy import MatchOutputStrategy
from .json_strategy import JSONOutputStrategy
from .text_strategy import TextOutputStrategy

__all__ = [
    "MatchOutputStrategy",
    "JSONOutputStrategy",
    "TextOutputStrategy",
]
