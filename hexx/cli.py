from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass

from hexx.core.config import load_settings
from hexx.core.errors import HexxError, InvalidNumericArgument, MissingFilename
from hexx.core.paths import config_path
from hexx.core.ranges import resolve
from hexx.core.reader import read_file
from hexx.core.settings import Settings
from hexx.ui.console import err, warn
from hexx.ui.table import render_table
from hexx.ui.theme import THEMES, get_theme

_EXAMPLES = """\
Examples:
        hexx -s 100 filename.bin
        hexx --start 10 --end 0x40 filename.bin"""


@dataclass
class HexxArgs:
    filename: str
    start: int
    end: int
    theme: str | None = None
    no_header: bool = False


def parse_offset(text: str, option: str = "offset") -> int:
    """Parse a non-negative offset written in decimal or with a 0x prefix."""
    cleaned = text.strip()
    if cleaned[:2].lower() == "0x":
        digits = cleaned[2:]
        if digits and all(ch in "0123456789abcdefABCDEF" for ch in digits):
            return int(digits, 16)
    elif cleaned.isascii() and cleaned.isdigit():
        return int(cleaned, 10)
    raise InvalidNumericArgument(option, text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexx",
        description="A simple colorized hex viewer.",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-s",
        "--start",
        default="0",
        metavar="START",
        help="Specify the START index, processing of the file will start from here.",
    )
    parser.add_argument(
        "-e",
        "--end",
        default="0",
        metavar="END",
        help="Specify the END index, processing of the file will end here.",
    )
    parser.add_argument(
        "-t",
        "--theme",
        choices=sorted(THEMES.keys()),
        help="Color theme for the table.",
    )
    parser.add_argument(
        "--no-header",
        action="store_true",
        help="Print only the rows, without the table header and footer.",
    )
    parser.add_argument("filename", nargs="?", help="File to display.")
    return parser


def parse_args(
    argv: list[str],
    parser: argparse.ArgumentParser | None = None,
) -> tuple[HexxArgs, HexxError | None]:
    if parser is None:
        parser = build_parser()
    ns = parser.parse_args(argv)

    try:
        start = parse_offset(ns.start, "start")
        end = parse_offset(ns.end, "end")
    except InvalidNumericArgument as exc:
        return _default_args(), exc

    if not ns.filename:
        return _default_args(), MissingFilename()

    return (
        HexxArgs(
            filename=ns.filename,
            start=start,
            end=end,
            theme=ns.theme,
            no_header=ns.no_header,
        ),
        None,
    )


def _default_args() -> HexxArgs:
    return HexxArgs(filename="", start=0, end=0)


def _load_settings() -> Settings:
    settings = Settings()
    path = config_path()
    if not load_settings(settings, path) and os.path.isfile(path):
        warn(f"ignoring unreadable config: {path}")
    return settings


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    if not argv:
        print(parser.format_help())
        return 1

    args, error = parse_args(argv, parser)
    settings = _load_settings()
    theme = get_theme(args.theme or settings.theme)

    if error:
        err(str(error), theme)
        if isinstance(error, MissingFilename):
            parser.print_usage(sys.stderr)
        return 1

    try:
        data = read_file(args.filename)
    except HexxError as exc:
        err(str(exc), theme)
        return 1

    rng = resolve(args.start, args.end, len(data))
    show_header = settings.show_header and not args.no_header
    for line in render_table(data, rng, theme, show_header):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
