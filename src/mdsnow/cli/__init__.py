"""Command-line interface for the mdsnow converter.

This module provides a small CLI that converts Markdown read from a file or
stdin into ticketing-platform markup, written to a file or stdout.

Custom alert definitions and output flags can be persisted in a
configuration file (see :mod:`mdsnow.cli.config`); command-line flags always
override file values.

Examples
--------
Convert a file to stdout::

    $ mdsnow notes.md

Convert stdin, without the [code] wrapper, into a file::

    $ cat notes.md | mdsnow --no-code-tags --out notes.txt

Use an explicit configuration file::

    $ mdsnow notes.md --config team-alerts.yaml

List the merged alert catalog::

    $ mdsnow --list-alerts

"""

import argparse
import json
import logging
import sys
from pathlib import Path

from mdsnow.alerts import alerts_to_dict, merge_alerts
from mdsnow.api import convert
from mdsnow.cli.config import load_config_with_priority, options_from_config
from mdsnow.exceptions import ConfigError, InvalidOptionsError, MdSnowError
from mdsnow.logging_utils import configure_logging, resolve_log_level
from mdsnow.options import ConversionOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4

__all__ = [
    "main",
    "create_parser",
    "EXIT_SUCCESS",
    "EXIT_ERROR",
    "EXIT_VALIDATION_ERROR",
    "EXIT_FILE_ERROR",
]


def _get_version() -> str:
    from mdsnow import __version__

    return __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mdsnow command."""
    parser = argparse.ArgumentParser(
        prog="mdsnow",
        description="Convert Markdown to ServiceNow-style journal field markup.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Markdown file to convert, or '-' to read stdin (default: stdin)",
    )
    parser.add_argument("--out", "-o", help="Write output to this file instead of stdout")
    parser.add_argument(
        "--no-pretty-print",
        action="store_true",
        help="Do not insert newlines after block-level tags",
    )
    parser.add_argument(
        "--no-code-tags",
        action="store_true",
        help="Do not prepend CSS or wrap the output in [code] tags",
    )

    config_group = parser.add_mutually_exclusive_group()
    config_group.add_argument("--config", help="Load options and custom alerts from this config file")
    config_group.add_argument("--no-config", action="store_true", help="Disable config file discovery")

    parser.add_argument(
        "--list-alerts",
        action="store_true",
        help="Print the merged alert catalog as JSON and exit",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG")
    parser.add_argument("--trace", action="store_true", help="Log with timestamps and logger names")
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_get_version()}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    log_level = resolve_log_level(parsed_args.log_level, verbose=parsed_args.verbose, trace=parsed_args.trace)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _build_options(parsed_args: argparse.Namespace) -> ConversionOptions:
    """Load file configuration and apply command-line overrides."""
    config = load_config_with_priority(explicit_path=parsed_args.config, discover=not parsed_args.no_config)
    options = options_from_config(config)

    overrides = {}
    if parsed_args.no_pretty_print:
        overrides["skip_pretty_print"] = True
    if parsed_args.no_code_tags:
        overrides["skip_code_tags"] = True
    if overrides:
        options = options.create_updated(**overrides)
    return options


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _write_output(text: str, destination: str | None) -> None:
    if destination:
        Path(destination).write_text(text, encoding="utf-8")
        logger.info("Wrote %d characters to %s", len(text), destination)
    else:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")


def main(args: list[str] | None = None) -> int:
    """Run the mdsnow command.

    Parameters
    ----------
    args : list[str], optional
        Command-line arguments, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging_level(parsed_args)

    try:
        options = _build_options(parsed_args)
    except ConfigError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except InvalidOptionsError as e:
        print(f"Error: invalid configuration: {e.message}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    if parsed_args.list_alerts:
        catalog = alerts_to_dict(merge_alerts(options.custom_alerts))
        print(json.dumps(catalog, indent=2, ensure_ascii=False))
        return EXIT_SUCCESS

    try:
        markdown_text = _read_input(parsed_args.input).strip()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: could not read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    if not markdown_text:
        logger.warning("No text to convert")
        return EXIT_SUCCESS

    try:
        result = convert(markdown_text, options)
    except MdSnowError as e:
        logger.error("Conversion error: %s", e.message)
        return EXIT_ERROR

    logger.info("Converted %d characters into %d characters", len(markdown_text), len(result))

    try:
        _write_output(result, parsed_args.out)
    except OSError as e:
        print(f"Error: could not write {parsed_args.out}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    return EXIT_SUCCESS
