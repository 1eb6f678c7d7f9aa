#!/usr/bin/env python3
"""
Import Graph CLI

Scans a JavaScript/TypeScript project for import statements and writes the
resulting dependency graph as JSON for a graph renderer.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Set

from scanner.builder import build_graph, RootNotFoundError
from scanner.parser import SOURCE_EXTENSIONS
from exporters import to_json


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="importgraph",
        description="Scan a project for import statements and output its dependency graph as JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  importgraph .                        # Scan current directory, JSON to stdout
  importgraph ./web -o graph.json      # Write the graph to a file
  importgraph . --include-ext .ts .tsx # Only parse TypeScript files
  importgraph . --show-all             # Keep folders and unconnected files
  importgraph . --no-manifest          # Skip package.json dependencies
        """,
    )

    # Positional arguments
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Project root directory (default: current directory)",
    )

    # Output options
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation level (default: 2)",
    )

    # Scanning options
    parser.add_argument(
        "--include-ext",
        nargs="+",
        default=None,
        help=f"Source extensions to parse (default: {' '.join(sorted(SOURCE_EXTENSIONS))})",
    )

    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum directory depth to scan",
    )

    parser.add_argument(
        "--show-all",
        action="store_true",
        help="Include nodes that have no connections (by default, only connected nodes are kept)",
    )

    parser.add_argument(
        "--no-manifest",
        action="store_true",
        help="Do not add dependencies declared in package.json",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log scanning details to stderr",
    )

    return parser.parse_args(args)


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    root = Path(parsed.root)

    # Prepare scanning options
    include_ext: Optional[Set[str]] = None
    if parsed.include_ext:
        include_ext = set()
        for ext in parsed.include_ext:
            if not ext.startswith("."):
                ext = "." + ext
            include_ext.add(ext.lower())

    # Build the graph
    try:
        graph = build_graph(
            root=root,
            include_ext=include_ext,
            max_depth=parsed.max_depth,
            prune=not parsed.show_all,
            include_manifest=not parsed.no_manifest,
        )
    except RootNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if len(graph) == 0:
        print(
            "No connected nodes found: the project may be empty or have no import statements.",
            file=sys.stderr,
        )

    output = to_json(graph, indent=parsed.indent)

    # Write output
    if parsed.output:
        try:
            output_path = Path(parsed.output)
            output_path.write_text(output, encoding="utf-8")
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
