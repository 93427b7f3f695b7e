"""
TINY CLI Entrypoint.

This module provides the command-line interface for parsing TINY source code.

Features:
    - Read source from `.tiny` files or inline strings.
    - Scan and parse the source into an AST.
    - Print the AST as canonical TINY source, JSON, or a Python repr.
    - Output to console or file.
    - Launch an interactive REPL.

Example usage:
    tiny hello.tiny
    tiny -s "x = (1 + 2); print x;" -f json
    tiny myfile.tiny -f json -o myfile.json
    tiny --repl --verbose

Functions:
    run_tiny(source: str, is_string: bool = False, fmt: str = "tiny", out: Optional[str] = None,
             pretty: bool = False) -> Program:
        Executes the TINY pipeline (scan → parse → render → output).

    main() -> None:
        Parses CLI arguments and invokes the appropriate action (REPL or parse).
"""

import argparse
import io
import sys
import traceback
from typing import TextIO

from tiny.tiny_ast import Program
from tiny.tiny_errors import TinySyntaxError
from tiny.tiny_parser import Parser
from tiny.tiny_render import Renderer
from tiny.tiny_scanner import CharacterStream, Scanner

FORMATS = ("tiny", "json", "repr")


def format_program(program: Program, fmt: str) -> str:
    if fmt == "repr":
        return repr(program)
    return Renderer(fmt).render(program)


def report_error(
    exc: BaseException, verbose: bool = False, file: TextIO | None = None
) -> None:
    """Print `[error] >>> <message>`, then the traceback when `verbose`.

    Writes to `file`, or stderr when not given.
    """
    out = sys.stderr if file is None else file
    print(f"[error] >>> {exc}", file=out)
    if verbose:
        buf = io.StringIO()
        traceback.print_exception(type(exc), exc, exc.__traceback__, file=buf)
        print(buf.getvalue(), file=out)


def run_tiny(
    source: str,
    is_string: bool = False,
    fmt: str = "tiny",
    out: str | None = None,
    pretty: bool = False,
) -> Program:
    """
    Run the TINY front end: scan, parse, render, and print or write the result.

    Args:
        source (str): The TINY source code or path to a `.tiny` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path. Defaults to False.
        fmt (str): Output form ('tiny', 'json' or 'repr'). Defaults to 'tiny'.
        out (str | None): Optional path to write the output to. If None, prints to stdout.
        pretty (bool): If True, prints a banner around the output. Defaults to False.

    Returns:
        Program: The parsed program.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.tiny'.
        TinySyntaxError: On the first malformed construct.
    """
    if not is_string and not source.endswith(".tiny"):
        raise ValueError("Only .tiny files are supported.")
    # 1. Read source
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    # 2. Scanning and parsing
    program = Parser(Scanner(CharacterStream(source, 0, 1, 1))).parse()

    # 3. Rendering
    text = format_program(program, fmt)

    # 4. Output result
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(text)
        if pretty:
            print(f"(wrote {len(program.statements)} statements to {out})")
    elif pretty:
        banner = "=" * 20
        print(f"{banner}\nParsed TINY ({fmt})\n{banner}\n{text}\n{banner}")
    else:
        print(text)

    return program


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tiny", description="Parse TINY programs.")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="fmt",
        choices=FORMATS,
        default="tiny",
        help="Output form (default: tiny)",
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")
    parser.add_argument(
        "-p", "--pretty", action="store_true", help="Show output with banners"
    )
    parser.add_argument(
        "--repl",
        action="store_true",
        help="Launch interactive REPL instead of parsing a source",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Print tracebacks on errors"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """
    Entry point for the TINY CLI.

    Launches the REPL if no arguments are passed or `--repl` is given, otherwise
    parses the given file or string. Exits with status 1 on a parse error.
    """
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        # No args passed: open REPL instead
        from tiny.tiny_repl import start_repl

        start_repl()
        return

    args = build_arg_parser().parse_args(argv)

    if args.repl or args.source is None:
        from tiny.tiny_repl import start_repl

        start_repl(fmt=args.fmt, verbose=args.verbose)
        return

    try:
        run_tiny(
            source=args.source,
            is_string=args.string,
            fmt=args.fmt,
            out=args.out,
            pretty=args.pretty,
        )
    except TinySyntaxError as e:
        report_error(e, verbose=args.verbose)
        sys.exit(1)


if __name__ == "__main__":
    main()
