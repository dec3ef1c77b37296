from typing import Optional


class TreeSourceError(Exception):
    """
    Exception raised when a tree source document cannot be turned into nodes.

    This covers source files that cannot be read or parsed as JSON as well as documents
    whose structure follows neither supported layout (compact node lists or keyed mappings).

    Attributes:
        reason (str): What is wrong with the source.
        source (Optional[str]): Description of the offending source, usually a file path.

    Example:
        >>> error = TreeSourceError("children must be a list", source="tree.json")
        >>> str(error)
        'Invalid tree source tree.json: children must be a list'
        >>> str(TreeSourceError("node must be a mapping"))
        'Invalid tree source: node must be a mapping'
    """

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        """
        Initialize the exception with the reason and, optionally, where it happened.

        Args:
            message (str): What is wrong with the source.
            source (str, optional): Description of the source (e.g. a file path). Defaults to None.
        """
        self.reason = message
        self.source = source
        if source is None:
            super().__init__(f"Invalid tree source: {message}")
        else:
            super().__init__(f"Invalid tree source {source}: {message}")


class UnsupportedFormatError(ValueError):
    """
    Exception raised when an unknown output format is requested.

    Example:
        >>> str(UnsupportedFormatError("yaml"))
        "Unsupported output format: 'yaml'. Must be one of: 'text', 'json'"
    """

    def __init__(self, format_name: str) -> None:
        self.format_name = format_name
        super().__init__(f"Unsupported output format: {format_name!r}. Must be one of: 'text', 'json'")
