"""Command-line entry point.

Usage:
    rc2po input-path output-path
    rc2po src/win/languages src/qt/languages --reference en-US -v
    python -m rc2po input-path output-path

Exit Codes:
    0   All catalogs written (warnings do not change the exit code)
    1   Invalid invocation, missing reference locale or I/O failure

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from rc2po.constants import DEFAULT_INPUT_ENCODING, REFERENCE_LOCALE
from rc2po.diagnostics import Rc2PoError
from rc2po.localization import convert_directory

__all__ = ["build_parser", "configure_logging", "main", "print_usage"]

logger = logging.getLogger("rc2po")

PROG = "rc2po"


class _ConsoleFormatter(logging.Formatter):
    """Plain console lines; warnings and errors get a level prefix."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.ERROR:
            return f"Error: {message}"
        if record.levelno >= logging.WARNING:
            return f"Warning: {message}"
        return message


def configure_logging(verbosity: int = 0, stream: TextIO | None = None) -> None:
    """Route rc2po log records to the console.

    Args:
        verbosity: -1 for warnings only, 0 for info, 1+ for debug
        stream: Output stream (defaults to stdout)
    """
    if verbosity < 0:
        level = logging.WARNING
    elif verbosity == 0:
        level = logging.INFO
    else:
        level = logging.DEBUG

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(_ConsoleFormatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


def print_usage(stream: TextIO | None = None) -> None:
    """Print the usage banner shown for invalid invocations."""
    out = stream if stream is not None else sys.stdout
    print("Converter for 86Box language files from .rc to .po", file=out)
    print(file=out)
    print(f"Usage: {PROG} input-path output-path", file=out)
    print(file=out)
    print("Input path should point to 86Box local repository folder (src\\win\\languages).", file=out)
    print("Output path should point to 86Box local repository folder (src\\qt\\languages).", file=out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Convert Windows resource script language files (.rc) to gettext catalogs (.po).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Convert every xx-YY.rc in the input folder:
  {PROG} src/win/languages src/qt/languages

  # Use another locale as msgid source and show per-locale details:
  {PROG} src/win/languages src/qt/languages --reference en-GB -v
""",
    )
    parser.add_argument("input_path", nargs="?", type=Path, help="Folder containing xx-YY.rc files")
    parser.add_argument("output_path", nargs="?", type=Path, help="Folder receiving xx-YY.po files")
    parser.add_argument(
        "--reference",
        default=REFERENCE_LOCALE,
        metavar="LOCALE",
        help=f"Locale whose strings become msgids (default: {REFERENCE_LOCALE})",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_INPUT_ENCODING,
        help=f"Encoding of the .rc files (default: {DEFAULT_INPUT_ENCODING})",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v", action="count", default=0, help="Show debug details"
    )
    verbosity.add_argument(
        "--quiet", "-q", action="store_true", help="Only show warnings and errors"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args, extra = build_parser().parse_known_args(argv)

    input_path: Path | None = args.input_path
    output_path: Path | None = args.output_path
    if (
        extra
        or input_path is None
        or output_path is None
        or not input_path.is_dir()
        or not output_path.is_dir()
    ):
        print_usage()
        return 1

    configure_logging(-1 if args.quiet else args.verbose)

    try:
        summary = convert_directory(
            input_path,
            output_path,
            reference_locale=args.reference,
            encoding=args.encoding,
        )
    except Rc2PoError as e:
        logger.error("%s", e)
        return 1
    except UnicodeDecodeError as e:
        logger.error("Cannot read input: %s", e)
        return 1
    except OSError as e:
        logger.error("I/O error: %s", e)
        return 1

    logger.debug("%r", summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
