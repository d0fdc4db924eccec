#!/usr/bin/env python3
"""
Command line entry point.

  python -m fnindex serve [--project-dir DIR]
  python -m fnindex lookup ROOT FILE FUNCTION [--qualifier Q] [--lines N]
"""

import argparse
import itertools
import os
import sys

import uvicorn

from .core.config import configure_logging, get_settings
from .core.errors import ConfigurationError, FileReadError, IndexIntegrityError
from .core.indexer import Indexer


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least one."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def serve(args: argparse.Namespace) -> int:
    settings = get_settings()
    if args.project_dir:
        # Settings are read again inside the app factory
        os.environ["FNINDEX_PROJECT_DIR"] = args.project_dir
        get_settings.cache_clear()
    uvicorn.run(
        "fnindex.main:build_app",
        factory=True,
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_level=settings.log_level.lower()
    )
    return 0


def lookup(args: argparse.Namespace) -> int:
    indexer = Indexer(args.root)
    try:
        indexer.index()
    except (ConfigurationError, FileReadError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    file_path = args.file if os.path.isabs(args.file) else os.path.join(args.root, args.file)
    try:
        lines = indexer.iter_fn_content(file_path, args.function, args.qualifier)
        for line in itertools.islice(lines, args.lines):
            print(line)
    except IndexIntegrityError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="fnindex", description="Cross-file JavaScript function index")
    sub = ap.add_subparsers(dest="command", required=True)

    serve_p = sub.add_parser("serve", help="Index a project and serve the HTTP API")
    serve_p.add_argument("--project-dir", "-p", help="Project directory (default: FNINDEX_PROJECT_DIR)")
    serve_p.add_argument("--host", help="Bind address")
    serve_p.add_argument("--port", type=int, help="Bind port")
    serve_p.set_defaults(handler=serve)

    lookup_p = sub.add_parser("lookup", help="Print a function's source starting at its definition")
    lookup_p.add_argument("root", help="Project directory")
    lookup_p.add_argument("file", help="File the function is referenced from, relative to ROOT")
    lookup_p.add_argument("function", help="Function name")
    lookup_p.add_argument("--qualifier", "-q", help="Object the function is accessed through")
    lookup_p.add_argument("--lines", "-n", type=positive_int, default=None, help="Maximum lines to print")
    lookup_p.set_defaults(handler=lookup)

    args = ap.parse_args(argv)
    configure_logging(get_settings())
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
