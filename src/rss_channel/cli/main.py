"""Main CLI entry point for the rss-channel command-line tool.

Reads a JSON feed description of the form::

    {"channel": {"title": ..., "link": ..., "description": ...},
     "items": [{"title": ...}, ...]}

and either renders it to RSS 2.0 markup or only validates it.
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from rss_channel import __version__
from rss_channel.api import ChannelBuilder, flatten_entries, is_empty_input
from rss_channel.shared import ChannelConfig, ConfigError, FeedValidationError
from rss_channel.shared.logging import get_logger
from rss_channel.tree import DATE_FIELDS, drop_none, validate_entry, validate_feed

logger = get_logger(__name__, component="cli")


class DescriptionError(Exception):
    """Raised when a description file cannot be read or has the wrong shape."""


def _utc_suffix(value: str) -> str:
    """Spell a trailing ``Z`` designator as ``+00:00`` for ``fromisoformat``."""
    if value.endswith(("Z", "z")):
        return value[:-1] + "+00:00"
    return value


def _parse_dates(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert ISO-8601 strings in date fields to datetimes."""
    result = dict(fields)
    for name in DATE_FIELDS:
        value = result.get(name)
        if isinstance(value, str):
            try:
                result[name] = datetime.fromisoformat(_utc_suffix(value))
            except ValueError:
                # Not ISO-8601: assume the caller already formatted it
                pass
    return result


def load_description(path: Path) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
    """Load a feed description file.

    Returns:
        Tuple of (channel fields, item descriptions)

    Raises:
        DescriptionError: If the file is missing, not JSON or badly shaped
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise DescriptionError(f"Could not read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DescriptionError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise DescriptionError(f"{path} must contain a JSON object")

    feed = data.get("channel") or {}
    items = data.get("items") or []
    if not isinstance(feed, dict):
        raise DescriptionError("'channel' must be a JSON object")
    if not isinstance(items, list):
        raise DescriptionError("'items' must be a JSON array")

    try:
        entries = [_parse_dates(entry) for entry in flatten_entries(items)]
    except TypeError as e:
        raise DescriptionError(str(e)) from e

    return _parse_dates(feed), entries


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="rss-channel",
        description="Build and validate RSS 2.0 documents from JSON feed descriptions"
    )

    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Build command
    build_parser = subparsers.add_parser("build", help="Render a description to RSS")
    build_parser.add_argument(
        "description",
        type=Path,
        help="JSON feed description file"
    )
    build_parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file (default: stdout)"
    )
    build_parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip field validation"
    )
    build_parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file path"
    )

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a description")
    validate_parser.add_argument(
        "description",
        type=Path,
        help="JSON feed description file"
    )
    validate_parser.add_argument(
        "--format", "-f",
        choices=["json", "text"],
        default="text",
        help="Output format"
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    return parser


def cmd_build(args: argparse.Namespace) -> int:
    """Handle build command."""
    try:
        config = ChannelConfig.from_file(args.config) if args.config else ChannelConfig()
        feed, entries = load_description(args.description)
    except (ConfigError, DescriptionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    validate = False if args.no_validate else None
    try:
        output = ChannelBuilder(config).build_xml(feed, entries, validate=validate)
    except FeedValidationError as e:
        logger.error(
            "Build failed",
            extra={"file": str(args.description), "error_type": type(e).__name__},
            exc_info=False
        )
        print(f"Invalid description: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            args.output.write_text(output, encoding="utf-8")
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
        print(f"Channel written to {args.output}", file=sys.stderr)
    else:
        print(output)

    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle validate command."""
    try:
        feed, entries = load_description(args.description)
    except DescriptionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    errors: List[Dict[str, Any]] = []
    # An empty description builds the placeholder channel, so it passes here too
    if not is_empty_input(feed, (entries,)):
        try:
            validate_feed(drop_none(feed))
        except FeedValidationError as e:
            errors.append({"scope": "channel", "error": type(e).__name__, "message": str(e)})

    for index, entry in enumerate(entries):
        try:
            validate_entry(drop_none(entry))
        except FeedValidationError as e:
            errors.append({
                "scope": f"item[{index}]",
                "error": type(e).__name__,
                "message": str(e),
            })

    valid = not errors
    logger.info(
        "Validated description",
        extra={"file": str(args.description), "error_count": len(errors)}
    )

    if args.format == "json":
        print(json.dumps({
            "file": str(args.description),
            "valid": valid,
            "item_count": len(entries),
            "errors": errors,
        }, indent=2))
    else:
        status = "✓" if valid else "✗"
        print(f"{status} {args.description} ({len(entries)} items)")
        for error in errors:
            print(f"   {error['scope']}: {error['message']}")

    return 0 if valid else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Set up logging verbosity
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif args.quiet:
        logging.basicConfig(level=logging.ERROR)

    try:
        if args.command == "build":
            return cmd_build(args)
        elif args.command == "validate":
            return cmd_validate(args)
        else:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            return 1

    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
