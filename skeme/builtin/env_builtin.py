"""Built-in procedures for the Skeme runtime environment.

This module defines the arithmetic, comparison, boolean and list primitives
exposed to Lisp code, and the base environment they live in.

Every builtin has the signature (env, args) -> value and checks the count and
types of its arguments before computing anything. Arithmetic accumulates in a
float; when no operand was a float the result is rounded, so integer results
are floats equal to their rounded value.
"""
from __future__ import annotations

import math
from typing import Callable

from skeme import LispValue, BuiltinFn
from skeme.errors import SkemeArityError, SkemeEmptyListError, SkemeTypeError
from skeme.printer import to_string
from skeme.types.environment import Environment
from skeme.types.symbol import Symbol

# All-integer division presents as a whole number when it lands this close to one
DIVISION_EPSILON = 1e-5

BUILTINS: dict[Symbol, BuiltinFn] = {}

CONSTANTS: dict[Symbol, LispValue] = {
    Symbol("#t"): True,
    Symbol("#f"): False,
    Symbol("true"): True,
    Symbol("false"): False,
}


def builtin(name: str) -> Callable[[BuiltinFn], BuiltinFn]:
    """Register the decorated function as the builtin bound to `name`."""
    def wrap(fn: BuiltinFn) -> BuiltinFn:
        fn.lisp_name = name
        BUILTINS[Symbol(name)] = fn
        return fn
    return wrap


def is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def round_half_away(value: float) -> float:
    """Round to the nearest whole number, halves away from zero; inf and nan pass through."""
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _require_at_least(op: str, args: list[LispValue], n: int) -> None:
    if len(args) < n:
        raise SkemeArityError(f"{op} requires at least {n} arguments, got {len(args)}")


def _require_exactly(op: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        noun = "argument" if n == 1 else "arguments"
        raise SkemeArityError(f"{op} requires exactly {n} {noun}, got {len(args)}")


def _require_numbers(op: str, args: list[LispValue]) -> bool:
    """Type-check numeric operands; return True if any of them is a float."""
    saw_float = False
    for arg in args:
        if not is_number(arg):
            raise SkemeTypeError(f"non-number argument to {op}: {to_string(arg)}")
        if isinstance(arg, float):
            saw_float = True
    return saw_float


def _fold(op: str, args: list[LispValue], step: Callable[[float, float], float]) -> float:
    _require_at_least(op, args, 2)
    saw_float = _require_numbers(op, args)
    total = float(args[0])
    for arg in args[1:]:
        total = step(total, float(arg))
    return total if saw_float else round_half_away(total)


def _divide(a: float, b: float) -> float:
    # IEEE semantics instead of ZeroDivisionError
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


# -------------------------------
# Arithmetic
# -------------------------------
@builtin("+")
def add(env: Environment, args: list[LispValue]) -> float:
    return _fold("+", args, lambda a, b: a + b)


@builtin("-")
def sub(env: Environment, args: list[LispValue]) -> float:
    return _fold("-", args, lambda a, b: a - b)


@builtin("*")
def mul(env: Environment, args: list[LispValue]) -> float:
    return _fold("*", args, lambda a, b: a * b)


@builtin("/")
def div(env: Environment, args: list[LispValue]) -> float:
    _require_exactly("/", args, 2)
    saw_float = _require_numbers("/", args)
    total = _divide(float(args[0]), float(args[1]))
    if saw_float:
        return total
    # Heuristic, not rational arithmetic: close enough to whole counts as whole
    rounded = round_half_away(total)
    if abs(rounded - total) < DIVISION_EPSILON:
        return rounded
    return total


# -------------------------------
# Comparison
# -------------------------------
def _comparable(op: str, args: list[LispValue]) -> tuple[int | float, int | float]:
    """Both operands, as floats if either one is a float; two integers stay exact."""
    _require_exactly(op, args, 2)
    a, b = args
    if _require_numbers(op, args):
        return float(a), float(b)
    return a, b


@builtin("=")
def equals(env: Environment, args: list[LispValue]) -> bool:
    a, b = _comparable("=", args)
    return a == b


@builtin(">")
def gt(env: Environment, args: list[LispValue]) -> bool:
    a, b = _comparable(">", args)
    return a > b


# -------------------------------
# Boolean logic
# -------------------------------
def _require_booleans(op: str, args: list[LispValue]) -> None:
    for arg in args:
        if not isinstance(arg, bool):
            raise SkemeTypeError(f"non-boolean argument to {op}: {to_string(arg)}")


@builtin("and")
def logical_and(env: Environment, args: list[LispValue]) -> bool:
    # The arguments were all evaluated by the caller; only the result short-circuits.
    _require_at_least("and", args, 2)
    _require_booleans("and", args)
    return all(args)


@builtin("or")
def logical_or(env: Environment, args: list[LispValue]) -> bool:
    _require_at_least("or", args, 2)
    _require_booleans("or", args)
    return any(args)


@builtin("boolean?")
def is_boolean(env: Environment, args: list[LispValue]) -> bool:
    _require_exactly("boolean?", args, 1)
    return isinstance(args[0], bool)


# -------------------------------
# List operations
# -------------------------------
def _require_list(op: str, value: LispValue) -> list[LispValue]:
    if not isinstance(value, list):
        raise SkemeTypeError(f"cannot call {op} on non-list: {to_string(value)}")
    return value


@builtin("cons")
def cons(env: Environment, args: list[LispValue]) -> list[LispValue]:
    # No dotted pairs: the tail must already be a list.
    _require_exactly("cons", args, 2)
    head, tail = args
    return [head, *_require_list("cons", tail)]


@builtin("empty?")
def is_empty(env: Environment, args: list[LispValue]) -> bool:
    _require_exactly("empty?", args, 1)
    return not _require_list("empty?", args[0])


@builtin("car")
def car(env: Environment, args: list[LispValue]) -> LispValue:
    _require_exactly("car", args, 1)
    lst = _require_list("car", args[0])
    if not lst:
        raise SkemeEmptyListError("cannot use car on empty list")
    return lst[0]


@builtin("cdr")
def cdr(env: Environment, args: list[LispValue]) -> list[LispValue]:
    _require_exactly("cdr", args, 1)
    lst = _require_list("cdr", args[0])
    if not lst:
        raise SkemeEmptyListError("cannot use cdr on empty list")
    return lst[1:]


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    """Bind the constants and every builtin in `env`'s own frame."""
    env.update(CONSTANTS)
    env.update(BUILTINS)


_base_env: Environment | None = None


def get_base_environment() -> Environment:
    """The process-wide base frame, built on first use and kept for the process lifetime."""
    global _base_env
    if _base_env is None:
        env = Environment()
        register(env)
        _base_env = env
    return _base_env
