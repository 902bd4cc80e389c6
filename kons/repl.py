"""Console driver for kons: an interactive read-eval-print loop and a file runner.

Both feed one line at a time to the interpreter and print one rendered value
per top-level form. Errors are reported per line and the loop carries on.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from kons.config import get_log_level, get_prompt, get_recursion_limit
from kons.interpreter import Interpreter
from kons.types.errors import KonsError, KonsSyntaxError
from kons.types.value import to_string

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


def evaluate_line(
    interp: Interpreter, line: str, stdout: TextIO, stderr: TextIO
) -> bool:
    """Evaluate one line, printing each result. Returns False if an error was reported."""
    try:
        for value in interp.eval_iter(line):
            stdout.write(to_string(value) + "\n")
    except KonsSyntaxError as exc:
        logger.debug("parse error in %r: %s", line, exc)
        stderr.write(f"Parse Error: {exc}\n")
        return False
    except KonsError as exc:
        logger.debug("evaluation error in %r: %s", line, exc)
        stderr.write(f"Error: {exc}\n")
        return False
    except RecursionError:
        # only rendering a deeply nested value gets here
        logger.debug("value too deeply nested to print in %r", line)
        stderr.write("Error: Value too deeply nested to print\n")
        return False
    return True


def repl(
    interp: Interpreter,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    """Prompt, read a line, print its results; stop on EOF or `exit`."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    if prompt is None:
        prompt = get_prompt()
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        line = line.strip()
        if line == EXIT_COMMAND:
            break
        if line:
            evaluate_line(interp, line, stdout, stderr)


def run_file(
    interp: Interpreter,
    path: str,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Evaluate a source file line by line. Returns the number of lines that failed."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    failures = 0
    logger.debug("running %s", path)
    with open(path, encoding="utf-8") as source:
        for line in source:
            if line.strip() and not evaluate_line(interp, line, stdout, stderr):
                failures += 1
    logger.debug("finished %s with %d failing line(s)", path, failures)
    return failures


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="kons", description="A small Lisp interpreter")
    parser.add_argument(
        "path", nargs="?", default=None, help="source file to run line by line"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level())
    sys.setrecursionlimit(max(sys.getrecursionlimit(), get_recursion_limit()))

    interp = Interpreter()
    if args.path is None:
        repl(interp)
        return 0
    try:
        failures = run_file(interp, args.path)
    except OSError as exc:
        sys.stderr.write(f"File Error: {exc}\n")
        return 2
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
