"""Command line entry point for the FIX checksum tools."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from check_config import default_check_config, load_check_config
from check_reporter import print_summary, write_json_report
from const import DEFAULT_CONFIG_FILENAME, DISPLAY_DELIMITER
from exceptions import ChecksumValidationError
from fix_checksum import generate, read_checksum_field
from log_checker import check_log_file, normalize_delimiter
from logger_config import setup_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2

_EXIT_BY_VERDICT = {"PASS": EXIT_OK, "FAIL": EXIT_MISMATCH, "ERROR": EXIT_ERROR}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the generate, validate and check commands."""
    parser = argparse.ArgumentParser(
        prog="fix-checksum",
        description="Generate and validate the FIX tag 10 checksum.",
        epilog=(
            "Examples:\n"
            "  fix-checksum generate '8=FIX.4.2|9=73|35=0|'\n"
            "  fix-checksum validate '8=FIX.4.2|9=73|35=0|10=123|'\n"
            "  fix-checksum check logs/session.log"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log at DEBUG level, including every checksum mismatch.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text, arg_name in (
        ("generate", "Print the checksum of a message body.", "body"),
        ("validate", "Validate the checksum field of a message.", "message"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(arg_name)
        sub.add_argument(
            "--delimiter",
            default=DISPLAY_DELIMITER,
            help="Printable character used in place of SOH (default: '|').",
        )

    check = subparsers.add_parser("check", help="Check every message in a FIX log.")
    check.add_argument("logfile")
    check.add_argument(
        "--config",
        help=(
            "Path to a JSON check configuration "
            f"(default: ./{DEFAULT_CONFIG_FILENAME} when present)."
        ),
    )
    check.add_argument(
        "--no-report",
        action="store_true",
        help="Do not write the JSON report.",
    )
    return parser


def run_generate(body: str, delimiter: str) -> int:
    """Print the checksum of *body*."""
    print(generate(normalize_delimiter(body, delimiter)))
    return EXIT_OK


def run_validate(message: str, delimiter: str) -> int:
    """Print whether the checksum of *message* is valid."""
    try:
        checksum_field = read_checksum_field(normalize_delimiter(message, delimiter))
    except ChecksumValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if checksum_field.is_valid:
        print("valid")
        return EXIT_OK
    print(
        f"invalid (expected {checksum_field.expected:03d}, "
        f"received {checksum_field.received:03d})"
    )
    return EXIT_MISMATCH


def resolve_config_path(config_path: str | None) -> Path | None:
    """Return the explicit config path, else the default file if it exists."""
    if config_path:
        return Path(config_path)
    default = Path(DEFAULT_CONFIG_FILENAME)
    return default if default.is_file() else None


def run_check(logfile: str, config_path: str | None, *, no_report: bool) -> int:
    """Check a log file, print the summary and optionally write the report."""
    try:
        resolved = resolve_config_path(config_path)
        cfg = load_check_config(resolved) if resolved else default_check_config()
        result = check_log_file(logfile, cfg)
    except (OSError, ValueError) as exc:
        logger.error("Cannot check %s: %s", logfile, exc)  # noqa: TRY400
        return EXIT_ERROR

    print_summary(result)
    if cfg.write_report and not no_report:
        write_json_report(result, cfg.output_dir)
    return _EXIT_BY_VERDICT[result.overall_verdict]


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and dispatch to the selected command."""
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else None)

    if args.command == "generate":
        return run_generate(args.body, args.delimiter)
    if args.command == "validate":
        return run_validate(args.message, args.delimiter)
    return run_check(args.logfile, args.config, no_report=args.no_report)


if __name__ == "__main__":
    sys.exit(main())
