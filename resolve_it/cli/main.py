#!/usr/bin/env python
"""Main entry point for resolve_it when run as a script."""

import sys
import argparse

from resolve_it import __version__
from resolve_it.core.resolver import FORMAT_NAMES
from resolve_it.utils.validation import parse_quality


def create_parent_parser():
    """Create a parent parser with common arguments."""
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show detailed progress information",
    )
    parser.add_argument(
        "--quality",
        "-q",
        type=parse_quality,
        default=None,
        help="Quality (1-100). Omit for lossless WebP/JPEG XL",
    )

    # Add version information for parent parser epilog
    parser.epilog = f"resolve_it {__version__}"

    return parser


def build_parser():
    """Build the argument parser with all subcommands."""
    parent_parser = create_parent_parser()

    parser = argparse.ArgumentParser(
        prog="resolve-it",
        description="Resolve image output formats into encoding settings",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        epilog=parent_parser.epilog,
    )

    # Set up subparsers for commands
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Resolve command
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Resolve a single format request",
        parents=[parent_parser],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    resolve_parser.add_argument(
        "format", help=f"Output format ({', '.join(FORMAT_NAMES)})"
    )
    source = resolve_parser.add_mutually_exclusive_group()
    source.add_argument(
        "--lossy",
        action="store_true",
        help="Treat the content as safe for lossy compression",
    )
    source.add_argument(
        "--input",
        "-i",
        type=str,
        help="Source image, lossy sources are treated as safe for lossy compression",
    )
    resolve_parser.add_argument(
        "--stem",
        "-s",
        type=str,
        help="Base name for the output file name (default: input name or 'output')",
    )

    # Batch command
    batch_parser = subparsers.add_parser(
        "batch",
        help="Resolve output file names for several source images",
        parents=[parent_parser],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    batch_parser.add_argument(
        "format", help=f"Output format ({', '.join(FORMAT_NAMES)})"
    )
    batch_parser.add_argument("images", nargs="+", help="Source image files")
    batch_parser.add_argument(
        "--output-dir",
        "-o",
        type=str,
        help="Directory for the output files (default: next to each source)",
    )

    # Version command
    subparsers.add_parser("version", help="Show version information")

    return parser


def main(argv=None):
    """Main entry point for the script."""
    parser = build_parser()

    # Parse arguments
    args = parser.parse_args(argv)

    # Handle commands
    if args.command == "resolve":
        from resolve_it.cli.resolve_cli import run_resolve

        return run_resolve(args)

    elif args.command == "batch":
        from resolve_it.cli.resolve_cli import run_batch

        return run_batch(args)

    elif args.command == "version":
        print(f"resolve_it version {__version__}")
        return 0

    else:
        # No command specified, show help
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
