import argparse
import json
import sys
from typing import Any, List, Optional, Tuple

from .core.config import get_settings
from .core.exceptions import InvalidOptionError, MissingArgumentError, UnknownOperationError
from .core.logging import setup_logging
from .dispatch import api


def parse_option(raw: str) -> Tuple[str, str]:
    """Split ``key=value``; the value is kept as typed."""
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected key=value, got: {raw}")
    return key, value


def parse_json_option(raw: str) -> Tuple[str, Any]:
    """Split ``key=json`` and decode the value (lists, mappings, numbers, booleans)."""
    key, value = parse_option(raw)
    try:
        return key, json.loads(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON for {key}: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lin-api",
        description="Print the request descriptor for an API operation as JSON",
    )
    parser.add_argument("group", help="Endpoint group, e.g. groups or groupsAPI")
    parser.add_argument("operation", help="Operation name, e.g. show or postToGroup")
    parser.add_argument("args", nargs="*", help="Positional arguments for the operation, passed as text")
    parser.add_argument(
        "-o",
        "--option",
        dest="options",
        action="append",
        type=parse_option,
        default=[],
        metavar="KEY=VALUE",
        help="Operation option passed as text, repeatable",
    )
    parser.add_argument(
        "-j",
        "--json-option",
        dest="json_options",
        action="append",
        type=parse_json_option,
        default=[],
        metavar="KEY=JSON",
        help="Operation option decoded as JSON, repeatable",
    )
    parser.add_argument("--api-version", default=None, help="API version (default from settings)")
    parser.add_argument("--log-level", default=None, help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.log_level, debug=settings.debug)

    options = dict(args.options)
    options.update(args.json_options)
    try:
        descriptor = api(
            args.api_version,
            args.group,
            args.operation,
            *args.args,
            strict=True,
            **options,
        )
    except MissingArgumentError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except (UnknownOperationError, InvalidOptionError) as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2

    print(json.dumps(descriptor.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
