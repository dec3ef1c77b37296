"""Command-line argument parsing for pathtree.

This module defines the command-line interface for pathtree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import List, Union

from pathtree import __version__


def parse_levels(value: str) -> List[str]:
    """Parse a comma-separated list of level names.

    Example:
        >>> parse_levels("grandparent, parent,child")
        ['grandparent', 'parent', 'child']
    """
    levels = [level.strip() for level in value.split(",")]
    if not all(levels):
        raise argparse.ArgumentTypeError(f"invalid level list: {value!r} (empty level name)")
    return levels


def parse_level(value: str) -> Union[int, str]:
    """Parse an ancestor level: decimal digits give a depth index, anything else a name.

    Example:
        >>> parse_level("0"), parse_level("grandparent")
        (0, 'grandparent')
    """
    return int(value) if value.isdecimal() else value


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with pathtree's options.
    """
    description = """
    pathtree: Locate nodes of a tree by slash-delimited path expressions.

    The tree is read from a JSON source file, either a list of compact node objects
    ({"v": value, "a": [aliases], "c": [children]}), a keyed mapping
    ({"value": {"aliases": [...], "children": {...}}}), or an envelope holding
    one of these under "nodes" together with "levels".

    Path expression segments:
    - literal   matches children by value or by alias
    - prefix*   matches children whose value starts with prefix
    - *         matches all children
    """

    epilog = """
    Examples:
      # Draw the tree
      pathtree tree.json

      # Find nodes by exact path, wildcards or aliases
      pathtree tree.json /henry/carlos/norah
      pathtree tree.json '/henry/*/ma*' '/mummy/*'

      # Report each match with its ancestor, by index or by level name
      pathtree tree.json '/henry/*/*' -a 0
      pathtree tree.json '/henry/*/*' -l grandparent,parent,child -a grandparent

      # Generate JSON output and save to file
      pathtree tree.json '/*/*' --format json -o matches.json

      # Print node and match counts to stderr
      pathtree tree.json '/*/*' -s stderr
    """

    parser = argparse.ArgumentParser(
        prog="pathtree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"pathtree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "source",
        type=Path,
        help="JSON file describing the tree.",
    )
    parser.add_argument(
        "patterns",
        nargs="*",
        metavar="PATTERN",
        help="Path expressions to resolve. If none is given, the tree is drawn instead.",
    )
    parser.add_argument(
        "-l",
        "--levels",
        type=parse_levels,
        metavar="NAMES",
        help="Comma-separated level names, overriding the levels of the source file.",
    )
    parser.add_argument(
        "-a",
        "--ancestor",
        type=parse_level,
        metavar="LEVEL",
        help="Report each match's ancestor at LEVEL (a depth index or a level name).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format for matches (default: text).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print summary report. Valid destinations: stderr, stdout",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.ancestor is not None and not args.patterns:
        raise ValueError("-a/--ancestor requires at least one PATTERN")
