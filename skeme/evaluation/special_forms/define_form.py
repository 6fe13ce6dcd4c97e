from skeme import EvaluatorFn
from skeme import SExpression, LispValue
from skeme.errors import SkemeArityError, SkemeError, SkemeTypeError
from skeme.printer import to_string
from skeme.types.environment import Environment
from skeme.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only; redefinition is always allowed.
    """
    if len(tail) != 2:
        raise SkemeArityError(f"incorrect number of arguments to define: {to_string(tail)}")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SkemeTypeError(f"symbol {to_string(name)} in define is not a name")
    try:
        value = evaluate_fn(val_expr, env)
    except SkemeError as err:
        raise err.with_context(f"failed to evaluate {to_string(val_expr)} for symbol {name}")
    env.define(name, value)
    return []
