"""Core evaluator for the Skeme interpreter.

`evaluate` interprets one expression against an environment and raises a
SkemeError on failure. `eval_expression` is the boundary used by the read loop:
it never raises for language errors and hands back (value, env, error).

There is no tail-call elimination; every nested call uses the host stack.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from skeme import SExpression, LispValue
from skeme.errors import SkemeError, SkemeEvalError
from skeme.printer import to_string
from skeme.types.environment import Environment
from skeme.types.symbol import Symbol
from skeme.evaluation.apply import apply
from skeme.evaluation.special_forms import SPECIAL_FORMS

logger = logging.getLogger(__name__)


class EvalOutcome(NamedTuple):
    value: LispValue
    env: Environment
    error: SkemeError | None


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`; define and set! mutate `env` in place."""
    match expr:
        case []:
            return []

        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)

        case [head, *tail_args]:
            try:
                fn = evaluate(head, env)
            except SkemeError as err:
                raise err.with_context(f"could not evaluate {to_string(head)}")
            # Left to right against the live env: later arguments see
            # definitions made by earlier ones.
            args = []
            for arg in tail_args:
                try:
                    args.append(evaluate(arg, env))
                except SkemeError as err:
                    raise err.with_context(f"could not evaluate {to_string(arg)}")
            return apply(fn, args, env, evaluate, head)

        case Symbol():
            return env.lookup(expr)

    # --- Atoms (and values re-entered as code) return as-is ---
    return expr


def eval_expression(expr: SExpression, env: Environment) -> EvalOutcome:
    """Evaluate without raising: failures come back in the `error` slot.

    Effects of define/set! that ran before a failure are kept in `env`.
    """
    try:
        return EvalOutcome(evaluate(expr, env), env, None)
    except SkemeError as err:
        logger.debug("evaluation of %s failed: %s", to_string(expr), err)
        return EvalOutcome(None, env, err)
    except RecursionError as err:
        logger.debug("evaluation of %s exhausted the stack", to_string(expr))
        return EvalOutcome(
            None, env, SkemeEvalError("maximum recursion depth exceeded", err)
        )
