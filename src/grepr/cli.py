"""Entry point for the `grepr` CLI."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

from grepr.config import ConfigError, GreprConfig, load_config
from grepr.matcher import SearchOptions
from grepr.render import COLOR_CHOICES, should_use_color, write_result
from grepr.searcher import SearchEngine
from grepr.source import SourceError, read_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grepr",
        description="Search a file for lines containing a query string.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    parser.add_argument("query", help="String to search for.")
    parser.add_argument("path", type=Path, help="File to search.")
    case_group = parser.add_mutually_exclusive_group()
    case_group.add_argument(
        "-i",
        "--ignore-case",
        action="store_true",
        help="Ignore case distinctions in the query and the input.",
    )
    case_group.add_argument(
        "--case-sensitive",
        action="store_true",
        help="Match case exactly, overriding a configured ignore_case.",
    )
    parser.add_argument(
        "-v",
        "--invert-match",
        action="store_true",
        help="Report lines that do not match.",
    )

    # Substring matching unless one of these is given
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "-w",
        "--word",
        action="store_true",
        help="Match only whole words.",
    )
    mode_group.add_argument(
        "-x",
        "--line",
        action="store_true",
        help="Match only whole lines.",
    )

    parser.add_argument(
        "--color",
        choices=COLOR_CHOICES,
        default=None,
        help="Highlight matches (default: auto).",
    )
    parser.add_argument(
        "--line-number-base",
        type=int,
        choices=(0, 1),
        default=None,
        help="Number the first line 0 or 1 (default: 0).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, search the file and print matching lines."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(project_path=Path.cwd(), cli_overrides=_cli_overrides(args))
        text = read_text(args.path)
    except (ConfigError, SourceError) as e:
        logger.debug("Aborting: %r", e)
        print(f"Application error: {e}", file=sys.stderr)
        sys.exit(1)

    options = _build_options(args, config)
    result = SearchEngine(options).run(text, args.query)

    write_result(
        result,
        sys.stdout,
        color=should_use_color(config.output.color, sys.stdout),
        number_base=config.output.line_number_base,
    )


def _cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Collect output settings given on the command line.

    Args:
        args: Parsed command-line arguments
    """
    output: dict[str, Any] = {}
    if args.color is not None:
        output["color"] = args.color
    if args.line_number_base is not None:
        output["line_number_base"] = args.line_number_base
    return {"output": output} if output else {}


def _build_options(args: argparse.Namespace, config: GreprConfig) -> SearchOptions:
    """Combine command-line flags with configured defaults.

    Args:
        args: Parsed command-line arguments
        config: Resolved configuration
    """
    options = SearchOptions.from_flags(
        ignore_case=_resolve_ignore_case(args, config),
        invert=args.invert_match,
        word=args.word,
        line=args.line,
    )
    if not (args.word or args.line):
        options = replace(options, mode=config.default_mode)
    return options


def _resolve_ignore_case(args: argparse.Namespace, config: GreprConfig) -> bool:
    if args.ignore_case:
        return True
    if args.case_sensitive:
        return False
    return config.search.ignore_case


def _get_version() -> str:
    from grepr import __version__

    return __version__


if __name__ == "__main__":
    main()
