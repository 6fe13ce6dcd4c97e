"""Closure representation and argument binding for Skeme."""

from __future__ import annotations

from io import StringIO

from skeme import SExpression, LispValue
from skeme.errors import SkemeArityError
from skeme.types.environment import Environment
from skeme.types.symbol import Symbol


class Closure:
    """A first-class procedure: formal parameters, one body form, and a private env.

    `env` is the copy of the defining chain taken when the lambda form was
    evaluated; nothing outside this closure holds a reference to it.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.formals)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind `args` to the formals in a new frame on top of the captured env.

        Every call gets its own frame, so a closure applied to itself cannot
        overwrite the bindings of a call that is still running.
        """
        if len(args) != len(self.formals):
            raise SkemeArityError(
                f"procedure expects {len(self.formals)} arguments, got {len(args)}"
            )
        frame = Environment(outer=self.env)
        for name, value in zip(self.formals, args):
            frame.define(name, value)
        return frame

    def __str__(self) -> str:
        from skeme.printer import to_string

        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(to_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the closure."""
        return str(self)
