"""Application engine for Skeme.

Applies an already-evaluated head to already-evaluated arguments:
- Closures bind their arguments in a fresh frame over the captured env.
- Builtins (plain Python callables) are called with (env, args); their
  failures are wrapped in SkemeEvalError naming the operator and arguments.
- A list in head position is treated as code: it is evaluated against the
  calling env, and the result is applied to the arguments if there are any.
"""

from skeme import LispValue, EvaluatorFn, SExpression
from skeme.errors import SkemeError, SkemeEvalError, SkemeNotCallableError
from skeme.printer import to_string
from skeme.types.environment import Environment
from skeme.types.lambda_fn import Closure


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Bind `args` to the closure's formals and evaluate its body there.

    Raises SkemeArityError if the argument count differs from the formals.
    """
    frame = fn.extend_env(args)
    try:
        return evaluate_fn(fn.body, frame)
    except SkemeError as err:
        raise err.with_context(f"failed to evaluate procedure body {to_string(fn.body)}")


def apply_builtin(
    fn,
    args: list[LispValue],
    env: Environment,
    head: SExpression,
) -> LispValue:
    try:
        return fn(env, args)
    except SkemeError as err:
        raise SkemeEvalError(
            f"procedure with identifier {to_string(head)} called with arguments "
            f"{to_string(args)} failed: {err}",
            err,
        ) from err


def apply(
    fn: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    head: SExpression = None,
) -> LispValue:
    """Apply an evaluated head to evaluated arguments.

    `head` is the unevaluated head expression, used only in error messages.
    Raises SkemeNotCallableError for numbers, booleans, symbols and the like.
    """
    if head is None:
        head = fn
    if isinstance(fn, Closure):
        return apply_closure(fn, args, evaluate_fn)
    if isinstance(fn, list):
        result = evaluate_fn(fn, env)
        if not args:
            return result
        return apply(result, args, env, evaluate_fn, fn)
    if callable(fn):
        return apply_builtin(fn, args, env, head)
    raise SkemeNotCallableError(f"{to_string(head)} is not a procedure: {to_string(fn)}")
