"""Command-line interface for pathtree.

This module provides the command-line interface for pathtree, allowing users to draw
a tree read from a JSON source file and to resolve path expressions against it. It
handles command-line argument parsing, output formatting, and clean exits when the
output pipe is closed or the run is interrupted.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (e.g., when piping to `head`)

Example:
    # Draw the tree
    $ pathtree tree.json

    # Resolve path expressions
    $ pathtree tree.json '/henry/*/norah' '/mummy/*'

    # Display version information
    $ pathtree --version
"""

import os
import sys
from collections.abc import Mapping
from contextlib import ExitStack
from typing import Optional, TextIO

from pathtree.cli.argparser import create_parser, validate_args
from pathtree.path_query import StreamingPathQuery


def format_counts(counts: Mapping[str, Optional[int]]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping containing various count metrics.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    result = [
        f"Nodes: {counts['nodes']}",
        f"Leaves: {counts['leaves']}",
    ]

    if counts["matches"] is not None:
        result.append(f"Matches: {counts['matches']}")

    return "\n".join(result)


def _silence_stdout() -> None:
    # Point stdout at the null device so the interpreter's final flush cannot fail again
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main() -> None:
    """Main entry point for the pathtree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe
    """
    parser = create_parser()
    args = parser.parse_args()

    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        query = StreamingPathQuery(args.source, output_format=args.format, levels=args.levels)

        with ExitStack() as stack:
            output: TextIO
            if args.output:
                output = stack.enter_context(args.output.open("w", encoding="utf-8"))
            else:
                output = sys.stdout

            if args.patterns:
                for chunk in query.stream_matches(args.patterns, ancestor_level=args.ancestor):
                    output.write(chunk)
            else:
                for line in query.stream_tree():
                    output.write(line)

            if args.summary:
                counts = {
                    "nodes": query.node_count,
                    "leaves": query.leaf_count,
                    "matches": query.match_count if args.patterns else None,
                }
                count_output_str = format_counts(counts)
                if args.summary == "stdout":
                    output.write("\n" + count_output_str + "\n")
                else:
                    print(count_output_str, file=sys.stderr)

            output.flush()

        if args.patterns and query.match_count == 0:
            print("Warning: No nodes matched the given path expressions.", file=sys.stderr)

    except BrokenPipeError:
        _silence_stdout()
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
