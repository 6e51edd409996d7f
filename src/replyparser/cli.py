"""Command-line front end.

Usage:
    replyparser message.txt                 # Print the visible reply
    replyparser --fragments message.txt     # Show every fragment with its flags
    cat message.txt | replyparser           # Read the body from stdin
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from replyparser.exceptions import ReplyParserError
from replyparser.message import Email
from replyparser.parser import ReplyParser
from replyparser.pipeline.segmenter import DEFAULT_MAX_LINE_LENGTH

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_READ_ERROR = 2


def print_fragments(email: Email) -> None:
    """Print a table of fragments with their flags."""
    print(f"{'#':>3}  {'QUOTED':<7}{'SIG':<5}{'HIDDEN':<7}TEXT")
    print("-" * 60)
    for index, fragment in enumerate(email.fragments):
        flags = (
            f"{'yes' if fragment.quoted else '-':<7}"
            f"{'yes' if fragment.signature else '-':<5}"
            f"{'yes' if fragment.hidden else '-':<7}"
        )
        lines = fragment.content.split("\n")
        print(f"{index:>3}  {flags}{lines[0]!r}")
        for line in lines[1:]:
            print(f"{'':>3}  {'':<19}{line!r}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="replyparser",
        description="Extract the visible reply from email bodies",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Files holding email bodies (default: read stdin)",
    )
    parser.add_argument(
        "--fragments",
        "-f",
        action="store_true",
        help="Show every fragment instead of the visible reply",
    )
    parser.add_argument(
        "--max-line-length",
        type=int,
        default=DEFAULT_MAX_LINE_LENGTH,
        help=f"Longest line accepted, in characters (default: {DEFAULT_MAX_LINE_LENGTH})",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of input files and stdin (default: utf-8)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    arg_parser = _build_parser()
    args = arg_parser.parse_args(argv)

    if args.max_line_length <= 0:
        arg_parser.error("--max-line-length must be positive")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    reply_parser = ReplyParser(max_line_length=args.max_line_length)

    if args.files:
        sources: list[tuple[str, Path | None]] = [(str(path), path) for path in args.files]
    else:
        sources = [("<stdin>", None)]

    status = EXIT_OK
    for name, path in sources:
        try:
            if path is None:
                email = reply_parser.parse(sys.stdin.buffer.read().decode(args.encoding))
            else:
                email = reply_parser.parse_file(path, encoding=args.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error: cannot read {name}: {exc}", file=sys.stderr)
            status = max(status, EXIT_READ_ERROR)
            continue
        except ReplyParserError as exc:
            print(f"Error: cannot parse {name}: {exc}", file=sys.stderr)
            status = max(status, EXIT_PARSE_ERROR)
            continue

        if len(sources) > 1:
            print(f"==> {name} <==")

        if args.fragments:
            print_fragments(email)
        else:
            print(email.visible_text())

    return status
