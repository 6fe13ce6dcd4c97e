"""Interpreter session and the line-oriented read-eval-print loop.

One line of input is one program. A line that fails to parse or evaluate
prints its error and the session carries on with the same environment.
"""

from __future__ import annotations

import logging
import sys
from typing import NamedTuple, TextIO

from skeme import LispValue
from skeme import config
from skeme.builtin.env_builtin import get_base_environment
from skeme.errors import SkemeError
from skeme.evaluation.evaluator import evaluate, eval_expression
from skeme.printer import to_string
from skeme.reader.parser import parse
from skeme.types.environment import Environment

logger = logging.getLogger(__name__)


class EvalResult(NamedTuple):
    value: LispValue
    error: SkemeError | None

    @property
    def ok(self) -> bool:
        return self.error is None


class Interpreter:
    """
    Keeps one environment across lines, on top of the shared base frame.
    """
    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else Environment(outer=get_base_environment())

    def eval(self, code: str) -> LispValue:
        """Parse and evaluate one line; raises SkemeError on failure."""
        return evaluate(parse(code), self.env)

    def run_line(self, code: str) -> EvalResult:
        """Parse and evaluate one line without raising for language errors."""
        try:
            expr = parse(code)
        except SkemeError as err:
            logger.debug("failed to parse %r: %s", code, err)
            return EvalResult(None, err)
        value, self.env, err = eval_expression(expr, self.env)
        return EvalResult(value, err)


def repl(stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout, prompt: str | None = None) -> Interpreter:
    """Read, evaluate and print until end of input; returns the session."""
    if prompt is None:
        prompt = config.get_prompt()
    interp = Interpreter()
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        if not line.strip():
            continue
        result = interp.run_line(line)
        if result.ok:
            stdout.write(to_string(result.value) + "\n")
        else:
            stdout.write(f"error: {result.error}\n")
    return interp


def main() -> None:
    logging.basicConfig(level=config.get_log_level())
    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)
    repl()


if __name__ == "__main__":
    main()
