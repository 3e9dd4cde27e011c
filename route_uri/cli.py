"""
Command-line interface for route-uri.

This module provides the CLI entry point for inspecting the URIs of a
routes file, asking for completions and resolving selections.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from route_uri import __version__
from route_uri.core.config import AppConfig
from route_uri.core.exceptions import RouteUriError


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging based on verbosity level.

    Args:
        verbose: Enable verbose (DEBUG) logging
        quiet: Enable quiet mode (WARNING+ only)
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its sub-commands."""
    parser = argparse.ArgumentParser(
        prog="route-uri",
        description="Inspect and complete URIs in route configuration files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List every route URI with its location
  route-uri list conf/routes

  # Completion candidates for a typed prefix
  route-uri complete conf/routes /us

  # Segments touched by a selection inside a URI
  route-uri touched /users/:id/edit 7 3
        """,
    )

    parser.add_argument(
        "-c", "--config", type=Path, default=None, help="Path to configuration YAML file"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output (DEBUG level)"
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="List route URIs with offset and length")
    list_cmd.add_argument("routes", type=Path, help="Routes file")
    list_cmd.add_argument(
        "--unique", action="store_true", help="Print each distinct URI once, alphabetically"
    )

    complete_cmd = commands.add_parser("complete", help="Show completion candidates")
    complete_cmd.add_argument("routes", type=Path, help="Routes file")
    complete_cmd.add_argument("prefix", help="Typed URI prefix")

    touched_cmd = commands.add_parser("touched", help="Show segments touched by a range")
    touched_cmd.add_argument("uri", help="Raw URI")
    touched_cmd.add_argument("offset", type=int, help="Range start inside the URI")
    touched_cmd.add_argument("length", type=int, nargs="?", default=0, help="Range length")

    return parser


def _run(args: argparse.Namespace, config: AppConfig) -> None:
    from route_uri.completion import CompletionEngine
    from route_uri.located import sorted_uris
    from route_uri.routes_file import RoutesFileScanner
    from route_uri.uri import RouteUri

    if args.command == "touched":
        prefix, touched = RouteUri(args.uri).parts_touched_by(args.offset, args.length)
        print(f"prefix: {' '.join(prefix)}")
        print(f"touched: {' '.join(touched)}")
        return

    located = RoutesFileScanner(config).located_uris(args.routes)

    if args.command == "list":
        if args.unique:
            for uri in sorted_uris({item.uri for item in located}):
                print(uri)
        else:
            for item in located:
                print(f"{item.offset}\t{item.length}\t{item}")
    elif args.command == "complete":
        engine = CompletionEngine(located, config)
        for uri in engine.candidates(args.prefix):
            print(uri)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = build_parser().parse_args(argv)

    setup_logging(verbose=args.verbose, quiet=args.quiet)
    logger = logging.getLogger(__name__)

    try:
        if args.config is not None:
            logger.debug(f"Loading configuration from: {args.config}")
            config = AppConfig.from_yaml(args.config)
        else:
            config = AppConfig.from_defaults()

        _run(args, config)
        return 0

    except RouteUriError as e:
        logger.error(e.message)
        if e.details and args.verbose:
            logger.error(f"Details: {e.details}")
        return 1

    except KeyboardInterrupt:
        logger.warning("Operation cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
