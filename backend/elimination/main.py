"""
Division Elimination - command line entry point.

Loads a division's standings and reports which teams are eliminated.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .core.config import Settings, OutputFormat, configure_logging
from .schemas import ErrorReport
from .solver import EliminationEngine, MalformedInputError, UnknownTeamError
from .solver.report import build_report, format_report_lines
from .sources import get_source, SourceError


logger = logging.getLogger("elimination")

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_USAGE_ERROR = 2


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="division-elimination",
        description="Report which teams in a division can no longer finish first."
    )
    parser.add_argument("location", help="Standings file (text or .json) or http(s) URL")
    parser.add_argument(
        "--team",
        action="append",
        dest="teams",
        metavar="NAME",
        help="Only report this team (repeatable)"
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=settings.output_format.value,
        help="Output format (default: %(default)s)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.http_timeout,
        help="HTTP timeout in seconds (default: %(default)s)"
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: %(default)s)"
    )
    return parser


def _fail(message: str, code: str, output_format: str) -> None:
    if output_format == OutputFormat.JSON.value:
        print(ErrorReport(detail=message, code=code).model_dump_json(), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    parser = build_parser(settings)
    args = parser.parse_args(argv)
    if not isinstance(logging.getLevelName(args.log_level.upper()), int):
        parser.error(f"invalid log level: {args.log_level}")
    configure_logging(args.log_level)

    try:
        source = get_source(args.location, timeout=args.timeout)
    except ValueError as e:
        _fail(str(e), "usage_error", args.format)
        return EXIT_USAGE_ERROR
    logger.debug(f"Using {source.source_name} source for {args.location}")

    try:
        standings = asyncio.run(source.load())
    except SourceError as e:
        logger.error(f"Failed to load standings: {e}")
        _fail(str(e), "source_error", args.format)
        return EXIT_INPUT_ERROR
    except MalformedInputError as e:
        logger.error(f"Malformed standings: {e}")
        _fail(str(e), "malformed_input", args.format)
        return EXIT_INPUT_ERROR

    engine = EliminationEngine(standings)
    try:
        report = build_report(engine, args.teams)
    except UnknownTeamError as e:
        _fail(str(e), "unknown_team", args.format)
        return EXIT_USAGE_ERROR

    if args.format == OutputFormat.JSON.value:
        print(report.model_dump_json(indent=2))
    else:
        for line in format_report_lines(report):
            print(line)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
