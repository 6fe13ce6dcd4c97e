"""Runtime environment for Skeme.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Closures never share a chain with the scope
that created them: `duplicate` copies every frame up to and including the base.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from skeme import LispValue
from skeme.errors import SkemeTypeError, SkemeUnboundSymbol
from skeme.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any earlier binding.

        Raises SkemeTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SkemeTypeError(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the frame where it is found.

        Raises SkemeUnboundSymbol if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise SkemeUnboundSymbol(f"Cannot set unbound symbol {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises SkemeUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise SkemeUnboundSymbol(f"symbol {name} does not exist in environment")
        return env.vars[name]

    def duplicate(self) -> Environment:
        """Copy the whole chain into new, independent frames.

        Values are shared between the copies; only the bindings are copied, so a
        later define or set! on either chain is invisible to the other.
        """
        frames: list[Environment] = []
        env: Optional[Environment] = self
        while env is not None:
            frames.append(env)
            env = env.outer
        dup: Optional[Environment] = None
        for frame in reversed(frames):
            new = Environment(dup)
            new.vars = dict(frame.vars)
            dup = new
        return dup

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def depth(self) -> int:
        """Number of frames in the chain, counting this one."""
        n = 0
        env: Optional[Environment] = self
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
