import argparse
import io
import logging
import sys
from typing import Optional, Sequence

from deskcalc.logging import log
from deskcalc.runtime import Session
from deskcalc.source import CharSource, StreamSource, StringSource

DEFAULT_PROMPT = "> "
MAX_EXIT_STATUS = 255


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deskcalc",
        description="Desk calculator: evaluates + - * / ( ) and variables, one statement per line or ';'.",
    )
    inputs = parser.add_mutually_exclusive_group()
    inputs.add_argument("expression", nargs="?", help="statements to evaluate instead of reading stdin")
    inputs.add_argument("-f", "--file", help="read statements from FILE")
    parser.add_argument("--prompt", help=f"prompt shown when reading stdin (default {DEFAULT_PROMPT!r} on a terminal)")
    parser.add_argument("--debug", action="store_true", help="log tokens, assignments and errors to stderr")
    return parser


def open_source(args: argparse.Namespace) -> CharSource:
    if args.expression is not None:
        return StringSource(args.expression)
    if args.file is not None:
        return StreamSource(open(args.file, encoding="utf-8", errors="replace"), owns_stream=True)
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors="replace")
    prompt = args.prompt
    if prompt is None and sys.stdin.isatty():
        prompt = DEFAULT_PROMPT
    return StreamSource(sys.stdin, prompt=prompt, prompt_stream=sys.stdout)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_arg_parser().parse_args(argv)
    if args.debug:
        log.setLevel(logging.DEBUG)

    try:
        source = open_source(args)
    except OSError as e:
        print(f"deskcalc: cannot read {args.file}: {e.strerror}", file=sys.stderr)
        raise SystemExit(MAX_EXIT_STATUS)

    session = Session()
    try:
        errors = session.run(source)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        raise SystemExit(130)
    raise SystemExit(min(errors, MAX_EXIT_STATUS))
