"""
scripts/to_postfix.py

Converts infix expressions to postfix. Expressions come from the command
line, or one per line from a file / stdin when none are given.

Usage:
    python scripts/to_postfix.py "a+b*c" "(a+b)*c"
    python scripts/to_postfix.py --file exprs.txt --keep-going
    echo "a=b=c" | python scripts/to_postfix.py
"""

import argparse
import logging
import sys

from pratt.config import LOGGING_CONFIG, PARSER_CONFIG
from pratt.errors import ParseError
from pratt.parser import parse

logger = logging.getLogger(__name__)


def positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"capacity must be positive, got {value}")
    return value


def iter_sources(args):
    if args.expr:
        yield from args.expr
        return
    stream = open(args.file, "r", encoding="utf-8") if args.file else sys.stdin
    with stream:
        for line in stream:
            line = line.rstrip("\r\n")
            if line:
                yield line


def main(argv=None):
    ap = argparse.ArgumentParser(description="Convert infix expressions to postfix.")
    ap.add_argument("expr", nargs="*", help="expressions to convert")
    ap.add_argument("--file", help="read expressions from this file instead of stdin")
    ap.add_argument("--capacity", type=positive_int, default=PARSER_CONFIG["max_output"],
                    help="output capacity, end sentinel included")
    ap.add_argument("--keep-going", action="store_true", help="report errors and continue")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level="DEBUG" if args.verbose else LOGGING_CONFIG["level"],
                        format=LOGGING_CONFIG["format"])

    status = 0
    for src in iter_sources(args):
        try:
            print(parse(src, args.capacity))
        except ParseError as e:
            print(f"fatal error: {e.message}", file=sys.stderr)
            status = 1
            if not args.keep_going:
                break
    return status


if __name__ == "__main__":
    sys.exit(main())
