"""
Interactive token printer for Monkey.

Reads one line at a time, lexes it with a fresh Lexer and prints every
token until EOF. Given file arguments, prints the token stream of each
file instead.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .lexer import Lexer, tokenize_file

logger = logging.getLogger(__name__)

PROMPT = ">>"


def start(input_stream: TextIO, output_stream: TextIO, prompt: str = PROMPT):
    """Run the read-tokenize-print loop until the input stream is exhausted."""
    while True:
        output_stream.write(f"{prompt} ")
        output_stream.flush()

        line = input_stream.readline()
        if not line:
            break

        for token in Lexer(line):
            print(repr(token), file=output_stream)


def _print_files(paths: List[str], output_stream: TextIO) -> int:
    status = 0
    for path in paths:
        try:
            tokens = tokenize_file(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot read %s: %s", path, e)
            status = 1
            continue

        for token in tokens:
            print(repr(token), file=output_stream)
    return status


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="monkey-repl",
        description="Print the Monkey tokens of each input line",
    )
    parser.add_argument("files", nargs="*", help="Monkey source files to tokenize instead of reading stdin")
    parser.add_argument("--prompt", default=PROMPT, help=f"Prompt shown before each line (default: {PROMPT})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.files:
        return _print_files(args.files, sys.stdout)

    try:
        start(sys.stdin, sys.stdout, args.prompt)
    except KeyboardInterrupt:
        print(file=sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
