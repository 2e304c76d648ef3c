"""
Command line and interactive loop for minilisp.

    minilisp program.lisp          run a file, printing each non-Void result
    minilisp -e "(+ 1 2)"          evaluate an expression
    minilisp                       start the interactive loop
"""

from __future__ import annotations

import argparse
import atexit
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

# Readline support for history
try:
    import readline
    READLINE_AVAILABLE = True
except ImportError:
    READLINE_AVAILABLE = False

from minilisp import __version__, config
from minilisp.errors import MiniLispError, IncompleteInput, ReaderError
from minilisp.interpreter import Interpreter
from minilisp.printer import to_lisp_string
from minilisp.reader.parser import lex, TokenStream, read
from minilisp.types.void import Void

logger = logging.getLogger(__name__)

PROMPT = "minilisp> "
CONTINUATION_PROMPT = "......... "

HELP = """\
Enter s-expressions; input continues over several lines until parentheses balance.
  :env     list the bindings of the root environment
  :help    show this message
  :quit    leave (also 'exit' or end-of-file)"""


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilisp",
        description="A minimal Lisp interpreter.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s script.lisp             # Run a script
  %(prog)s -e "(+ 1 2)"            # Evaluate an expression
  %(prog)s script.lisp -i          # Run a script, then stay interactive
        """,
    )
    parser.add_argument("scripts", nargs="*", help="source files to evaluate, in order")
    parser.add_argument("-e", "--expr", action="append", default=[], help="evaluate an expression (repeatable)")
    parser.add_argument("-i", "--interactive", action="store_true", help="start the interactive loop after running scripts")
    parser.add_argument("-v", "--verbose", action="store_true", help="log evaluation at DEBUG level")
    parser.add_argument("--no-prelude", action="store_true", help="do not load files from MINILISP_PRELUDE_PATH")
    parser.add_argument("--recursion-limit", type=int, default=None, help="maximum evaluation depth (default: MINILISP_RECURSION_LIMIT or 10000)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def report_error(error: MiniLispError, err: TextIO) -> None:
    print(f"error: {type(error).__name__}: {error}", file=err)


def run_source(interp: Interpreter, source: str, out: TextIO, err: TextIO) -> bool:
    """Evaluate each form of `source`, printing non-Void results.

    Stops at the first error and returns False; earlier definitions stay.
    """
    try:
        for expr in TokenStream(lex(source)).parse_all():
            value = interp.evaluate(expr)
            if value is not Void:
                print(to_lisp_string(value), file=out)
    except MiniLispError as e:
        report_error(e, err)
        return False
    return True


def show_env(interp: Interpreter, out: TextIO) -> None:
    names = list(interp.env.names())
    if not names:
        print("(no bindings)", file=out)
        return
    for name in names:
        text = to_lisp_string(interp.env.vars[name])
        if len(text) > 60:
            text = text[:57] + "..."
        print(f"  {name} = {text}", file=out)


def run_repl(
    interp: Interpreter,
    read_line: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> None:
    """Read-eval-print until :quit or end of input.

    Errors are reported and the loop carries on with the same root
    environment.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    buffer: list[str] = []
    while True:
        try:
            line = read_line(CONTINUATION_PROMPT if buffer else PROMPT)
        except EOFError:
            print(file=out)
            break
        except KeyboardInterrupt:
            buffer.clear()
            print(file=out)
            continue

        if not buffer:
            command = line.strip()
            if not command:
                continue
            if command in (":quit", "exit"):
                break
            if command == ":help":
                print(HELP, file=out)
                continue
            if command == ":env":
                show_env(interp, out)
                continue

        buffer.append(line)
        try:
            forms = read("\n".join(buffer))
        except IncompleteInput:
            continue
        except ReaderError as e:
            buffer.clear()
            report_error(e, err)
            continue
        buffer.clear()

        for expr in forms:
            try:
                value = interp.evaluate(expr)
            except MiniLispError as e:
                report_error(e, err)
                break
            if value is not Void:
                print(to_lisp_string(value), file=out)


def setup_readline(history_file: Path) -> None:
    """Load and persist line history when readline is available"""
    if not READLINE_AVAILABLE:
        return
    try:
        readline.read_history_file(history_file)
    except OSError:
        logger.debug("no readable history at %s", history_file)
    readline.set_history_length(1000)

    def save_history():
        try:
            readline.write_history_file(history_file)
        except OSError as e:
            logger.warning("could not save history to %s: %s", history_file, e)

    atexit.register(save_history)


def main(argv: Optional[list[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)

    out, err = sys.stdout, sys.stderr
    try:
        level = logging.DEBUG if args.verbose else config.get_log_level()
        limit = args.recursion_limit or config.get_recursion_limit()
    except ValueError as e:
        print(f"error: {e}", file=err)
        return 1

    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    sys.setrecursionlimit(limit)

    interp = Interpreter()

    sources = [] if args.no_prelude else list(config.get_prelude_paths())
    sources.extend(Path(script) for script in args.scripts)
    for path in sources:
        logger.info("running %s", path)
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as e:
            print(f"error: cannot read {path}: {e.strerror}", file=err)
            return 1
        if not run_source(interp, source, out, err):
            return 1
    for expr in args.expr:
        if not run_source(interp, expr, out, err):
            return 1

    if args.interactive or not (args.scripts or args.expr):
        setup_readline(config.get_history_file())
        print(f"minilisp {__version__}  (:help for commands)", file=out)
        run_repl(interp, input, out, err)
    return 0
