import sys

from tiny.tiny_errors import TinySyntaxError
from tiny.tiny_parser import Parser
from tiny.tiny_scanner import CharacterStream, Scanner


COMMANDS = ("exit", "quit", "verbose-mode")


def read_chunk() -> str:
    """Read lines until one ends with `;` or is blank.

    A command or `#` comment on the first line is returned on its own.
    """
    src_lines: list[str] = []
    while True:
        prompt = ">>> " if not src_lines else "... "
        line = input(prompt)
        if not src_lines and (line.strip() in COMMANDS or line.strip().startswith("#")):
            return line.strip()
        src_lines.append(line)
        if not line.strip() or line.rstrip().endswith(";"):
            break
    return "\n".join(src_lines).strip()


def start_repl(fmt: str = "tiny", verbose: bool = False) -> None:
    # imported here: tiny_cli imports this module lazily
    from tiny.tiny_cli import format_program, report_error

    print(f"Tiny REPL [format={fmt}]. Type 'exit' or 'quit' to leave.")

    while True:
        try:
            src = read_chunk()
        except (EOFError, KeyboardInterrupt):
            print()
            src = "exit"
        if src in ("exit", "quit"):
            print("Exiting Tiny REPL.")
            return
        if not src or src.startswith("#"):
            continue
        if src.lower() == "verbose-mode":
            verbose = not verbose
            print(f"[mode] >>> Verbose mode {'ON' if verbose else 'OFF'}")
            continue

        try:
            program = Parser(Scanner(CharacterStream(src, 0, 1, 1))).parse()
        except TinySyntaxError as e:
            report_error(e, verbose, file=sys.stdout)
            continue

        print(format_program(program, fmt))


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
