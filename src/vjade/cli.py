"""Command-line interface for vjade.

Provides the ``vjade`` command, which compiles a serialized node tree
(pug-parser JSON, or the same structure in YAML) to JavaScript.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from vjade.compiler import compile_to_js
from vjade.errors import CompileError
from vjade.loader import load_file
from vjade.options import CompilerOptions


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="vjade",
        description="Compile a Jade/Pug node tree to virtual-dom JavaScript",
    )
    parser.add_argument(
        "tree",
        type=Path,
        help="Node tree file (.json, .yaml or .yml)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the JavaScript here instead of stdout",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent the generated code",
    )
    parser.add_argument(
        "--no-runtime",
        dest="runtime",
        action="store_false",
        help="Do not prepend the virtual-dom require() bindings",
    )
    parser.add_argument(
        "--no-marshal-dataset",
        dest="marshal_dataset",
        action="store_false",
        help="Keep data-* attributes as plain properties",
    )
    parser.add_argument(
        "--capital-constructors",
        action="store_true",
        help="Treat capitalized tag names as constructor references",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    if not args.tree.exists():
        print(f"Error: Node tree not found: {args.tree}", file=sys.stderr)
        return 1

    options = CompilerOptions(
        pretty=args.pretty,
        runtime=args.runtime,
        marshal_dataset=args.marshal_dataset,
        capital_constructors=args.capital_constructors,
    )

    try:
        nodes = load_file(args.tree)
        js = compile_to_js(nodes, options)
    except (CompileError, yaml.YAMLError, KeyError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output is None:
        sys.stdout.write(js)
    else:
        args.output.write_text(js, encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())
