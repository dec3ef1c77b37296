"""Building path trees from source documents.

Two document layouts are supported:

Compact layout, a list of node mappings::

    [{"v": "henry", "a": [1], "c": [{"v": "carlos", "a": ["blakgeek", "2"]}]}]

The long keys ``value``, ``aliases`` and ``children`` may be used instead of
``v``, ``a`` and ``c``.

Keyed layout, a mapping of node value to node description::

    {"henry": {"aliases": [1], "children": {"carlos": {"aliases": ["blakgeek", "2"]}}}}

A source file holds either layout directly, or an envelope that also carries
level names::

    {"levels": ["grandparent", "parent", "child"], "nodes": [...]}
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Union

from pathtree.exceptions import TreeSourceError
from pathtree.path_tree.path_node import PathNode
from pathtree.types import Identifier, SourceFormat

COMPACT_KEYS = {"v": "value", "a": "aliases", "c": "children"}
ENVELOPE_KEYS = frozenset({"levels", "nodes"})


def _as_list(value: Any, what: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise TreeSourceError(f"{what} must be a list, got {type(value).__name__}")
    return list(value)


def build_node(source: Mapping) -> PathNode:
    """Build a node and its descendants from a compact node mapping.

    Args:
        source: Mapping with an optional value (``v``/``value``), aliases
            (``a``/``aliases``) and child mappings (``c``/``children``).

    Returns:
        The new node, with its children attached.

    Raises:
        TreeSourceError: If the mapping or any nested child is malformed.

    Example:
        >>> node = build_node({"v": "carlos", "a": ["blakgeek", "2"], "c": [{"v": "norah"}]})
        >>> node.aliases, [child.value for child in node.children]
        (('blakgeek', '2'), ['norah'])
    """
    if not isinstance(source, Mapping):
        raise TreeSourceError(f"node must be a mapping, got {type(source).__name__}")

    fields = {COMPACT_KEYS.get(key, key): item for key, item in source.items()}
    unknown = set(fields) - set(COMPACT_KEYS.values())
    if unknown:
        raise TreeSourceError(f"unknown node keys: {', '.join(sorted(map(str, unknown)))}")

    return PathNode(
        value=fields.get("value"),
        children=[build_node(child) for child in _as_list(fields.get("children"), "children")],
        aliases=_as_list(fields.get("aliases"), "aliases"),
    )


def build_keyed(mapping: Mapping) -> List[PathNode]:
    """Build the nodes described by a keyed mapping, in mapping order.

    Each key is a node value; each value is a mapping with optional ``aliases`` (a list)
    and ``children`` (another keyed mapping). An empty mapping describes a leaf.

    Raises:
        TreeSourceError: If the mapping or any nested description is malformed.

    Example:
        >>> [sandra] = build_keyed({"sandra": {"aliases": ["mummy", 888], "children": {"neisha": {}}}})
        >>> sandra.aliases, sandra.children[0].value
        (('mummy', '888'), 'neisha')
    """
    if not isinstance(mapping, Mapping):
        raise TreeSourceError(f"children must be a mapping, got {type(mapping).__name__}")

    nodes = []
    for value, description in mapping.items():
        if description is None:
            description = {}
        if not isinstance(description, Mapping):
            raise TreeSourceError(f"description of {value!r} must be a mapping, got {type(description).__name__}")
        unknown = set(description) - {"aliases", "children"}
        if unknown:
            raise TreeSourceError(f"unknown keys for {value!r}: {', '.join(sorted(map(str, unknown)))}")
        nodes.append(
            PathNode(
                value=value,
                children=build_keyed(description.get("children") or {}),
                aliases=_as_list(description.get("aliases"), f"aliases of {value!r}"),
            )
        )
    return nodes


def populate(nodes: Sequence[PathNode], levels: Optional[Iterable[Identifier]] = None) -> PathNode:
    """Attach top-level nodes below an anonymous root carrying the level names.

    Example:
        >>> root = populate(build_keyed({"henry": {}}), ["grandparent", "parent"])
        >>> root.value is None, root.levels, root.children[0].path
        (True, ('grandparent', 'parent'), '/henry')
    """
    return PathNode(children=nodes, levels=levels)


def detect_format(document: Any) -> SourceFormat:
    """Determine the layout of a parsed source document (without envelope).

    Raises:
        TreeSourceError: If the document is neither a list nor a mapping.
    """
    if isinstance(document, (list, tuple)):
        return SourceFormat.COMPACT
    if isinstance(document, Mapping):
        return SourceFormat.KEYED
    raise TreeSourceError(f"document must be a list or a mapping, got {type(document).__name__}")


def build_document(document: Any, levels: Optional[Iterable[Identifier]] = None) -> PathNode:
    """Build an anonymous root from a parsed source document.

    Args:
        document: A compact list, a keyed mapping, or an envelope mapping with
            ``nodes`` and optional ``levels``.
        levels: Level names overriding any found in the envelope.

    Returns:
        The anonymous root node.

    Raises:
        TreeSourceError: If the document is malformed.
    """
    if isinstance(document, Mapping) and "nodes" in document and set(document) <= ENVELOPE_KEYS:
        if levels is None:
            levels = _as_list(document.get("levels"), "levels")
        document = document["nodes"]

    if detect_format(document) is SourceFormat.COMPACT:
        nodes = [build_node(source) for source in document]
    else:
        nodes = build_keyed(document)
    return populate(nodes, levels)


def load_tree_source(
    source_file: Union[str, Path], levels: Optional[Iterable[Identifier]] = None
) -> PathNode:
    """Load a JSON tree source file into an anonymous root node.

    Args:
        source_file: Path to the JSON source document.
        levels: Level names overriding any found in the document.

    Returns:
        The anonymous root node, whose children are the document's top-level nodes.

    Raises:
        TreeSourceError: If the file cannot be read, is not valid JSON, or is malformed.

    Example:
        >>> root = load_tree_source("tree.json")  # doctest: +SKIP
        >>> [node.path for node in root.find("/henry/*")]  # doctest: +SKIP
        ['/henry/carlos', '/henry/althea']
    """
    source_path = Path(source_file)
    try:
        with source_path.open("r", encoding="utf-8") as handle:
            document = json.load(handle)
    except OSError as e:
        raise TreeSourceError(f"cannot read file: {e.strerror or e}", source=str(source_path)) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise TreeSourceError(f"not valid JSON: {e}", source=str(source_path)) from e

    try:
        return build_document(document, levels)
    except TreeSourceError as e:
        raise TreeSourceError(e.reason, source=str(source_path)) from e
