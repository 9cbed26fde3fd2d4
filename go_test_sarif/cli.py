"""CLI entry point for converting go test output to SARIF."""

import argparse
import logging
import sys
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from go_test_sarif.converter import ConvertOptions, convert_to_sarif
from go_test_sarif.errors import GoTestSarifError
from go_test_sarif.sarif import DEFAULT_VERSION, supported_versions

APP_NAME = "go-test-sarif"


def get_version() -> str:
    """Return the installed package version, or "dev" when not installed."""
    try:
        return version(APP_NAME)
    except PackageNotFoundError:
        return "dev"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Convert go test -json output into a SARIF report",
    )
    parser.add_argument("input", nargs="?", type=Path, help="go test -json log file")
    parser.add_argument("output", nargs="?", type=Path, help="SARIF file to write")
    parser.add_argument(
        "--sarif-version",
        default=DEFAULT_VERSION,
        help=(
            f"SARIF version ({', '.join(supported_versions())}) "
            f"(default {DEFAULT_VERSION!r})"
        ),
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="store_true",
        help="Display version information",
    )
    return parser


def run(argv: Sequence[str]) -> int:
    """Run the conversion and return the process exit code."""
    log = logging.getLogger("go_test_sarif")
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return 0 if e.code == 0 else 1

    if args.version:
        print(f"{APP_NAME} {get_version()}")
        return 0

    if args.input is None or args.output is None:
        parser.print_usage(sys.stderr)
        return 1

    options = ConvertOptions(sarif_version=args.sarif_version, pretty=args.pretty)

    try:
        convert_to_sarif(args.input, args.output, options)
    except (GoTestSarifError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log.info("SARIF report generated: %s", args.output)
    return 0


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":  # pragma: no cover
    main()
