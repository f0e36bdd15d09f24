"""Command-line interface for depcheck: expand dependency listings, render graphs."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from depcheck.api import SAMPLE_INPUT, process
from depcheck.core.errors import DependencyCheckError
from depcheck.core.formatter import to_dot, to_mermaid
from depcheck.core.graph import build_structure, expand_structure
from depcheck.core.parser import extract_listings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "DEPCHECK_LOG_LEVEL"


def configure_logging(verbose: bool = False) -> None:
    """Send depcheck logs to stderr; DEBUG if verbose, else $DEPCHECK_LOG_LEVEL or WARNING."""
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger("depcheck")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


def _read_text(args: argparse.Namespace) -> str:
    """Return the document to check: --text, a file path, or stdin ("-" or omitted)."""
    if getattr(args, "text", None) is not None:
        return args.text
    file = getattr(args, "file", None)
    if file is None or file == "-":
        return sys.stdin.read()
    logger.debug("Reading %s", file)
    return Path(file).read_text(encoding="utf-8")


def cmd_check(args: argparse.Namespace) -> int:
    """Print every library's full dependency list."""
    try:
        text = _read_text(args)
        result = process(text)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: could not read {args.file or 'stdin'}: {e}", file=sys.stderr)
        return 1
    except DependencyCheckError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    elif args.show_input:
        print("Input:")
        print(result.normalized_input)
        print()
        print("Output:")
        print(result.expanded_output)
    else:
        print(result.expanded_output)
    return 0


def cmd_graph(args: argparse.Namespace) -> int:
    """Generate a dependency graph in DOT or Mermaid format."""
    try:
        text = _read_text(args)
        structure = build_structure(extract_listings(text))
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: could not read {args.file or 'stdin'}: {e}", file=sys.stderr)
        return 1
    except DependencyCheckError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.expanded:
        structure = expand_structure(structure)

    if args.no_title:
        title = None
    elif args.expanded:
        title = "Full dependencies"
    else:
        title = "Direct dependencies"

    if args.format == "mermaid":
        output = to_mermaid(structure, title=title)
    else:  # dot
        output = to_dot(structure, title=title)

    if args.output:
        try:
            Path(args.output).write_text(output + "\n")
        except OSError as e:
            print(f"Error: could not write {args.output}: {e}", file=sys.stderr)
            return 1
        print(f"Graph written to: {args.output}", file=sys.stderr)
    else:
        print(output)
    return 0


def cmd_sample(args: argparse.Namespace) -> int:
    """Print the sample input document."""
    print(SAMPLE_INPUT)
    return 0


def cmd_tui(args: argparse.Namespace) -> int:
    """Launch the interactive TUI."""
    from depcheck.tui.app import DepCheckApp

    path = Path(args.file) if getattr(args, "file", None) else None
    app = DepCheckApp(initial_path=path)
    app.run()
    return 0


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "file",
        nargs="?",
        help='Text file with one "<lib> depends on <dep> ..." per line (default: stdin, or "-")',
    )
    parser.add_argument(
        "-t",
        "--text",
        metavar="TEXT",
        help="Check TEXT instead of reading a file",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the depcheck CLI."""
    parser = argparse.ArgumentParser(
        prog="depcheck",
        description="Compute the complete dependency list of every library in a listing.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # depcheck check
    check_parser = subparsers.add_parser(
        "check",
        help="Print each library's full dependency list",
        description="Read dependency listings and print them with transitive dependencies added.",
    )
    _add_input_arguments(check_parser)
    check_parser.add_argument(
        "--show-input",
        action="store_true",
        help="Also print the listings that were understood",
    )
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    check_parser.set_defaults(func=cmd_check)

    # depcheck graph
    graph_parser = subparsers.add_parser(
        "graph",
        help="Generate a dependency graph (DOT/Mermaid format)",
        description="Render the dependency listings as a Graphviz or Mermaid graph.",
    )
    _add_input_arguments(graph_parser)
    graph_parser.add_argument(
        "-f",
        "--format",
        choices=["dot", "mermaid"],
        default="dot",
        help="Output format: dot (Graphviz) or mermaid (default: dot)",
    )
    graph_parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Output file (default: stdout)",
    )
    graph_parser.add_argument(
        "--expanded",
        action="store_true",
        help="Draw an edge to every transitive dependency, not only direct ones",
    )
    graph_parser.add_argument(
        "--no-title",
        action="store_true",
        help="Don't include a title in the graph",
    )
    graph_parser.set_defaults(func=cmd_graph)

    # depcheck sample
    sample_parser = subparsers.add_parser(
        "sample",
        help="Print a sample input document",
    )
    sample_parser.set_defaults(func=cmd_sample)

    # depcheck tui (default if no command)
    tui_parser = subparsers.add_parser(
        "tui",
        help="Launch the interactive terminal UI",
        description="Start the interactive TUI for editing and checking dependency listings.",
    )
    tui_parser.add_argument(
        "file",
        nargs="?",
        help="Optional: start with this file loaded",
    )
    tui_parser.set_defaults(func=cmd_tui)

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    # Default to TUI if no command specified
    if args.command is None:
        return cmd_tui(argparse.Namespace(file=None))

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
