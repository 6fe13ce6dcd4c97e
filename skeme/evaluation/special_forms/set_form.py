from skeme import EvaluatorFn
from skeme import SExpression, LispValue
from skeme.errors import SkemeArityError, SkemeError, SkemeTypeError, SkemeUnboundSymbol
from skeme.printer import to_string
from skeme.types.environment import Environment
from skeme.types.symbol import Symbol


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set! var value) rebinds var in the frame where it is already bound."""
    if len(tail) != 2:
        raise SkemeArityError(f"incorrect number of arguments to set!: {to_string(tail)}")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise SkemeTypeError(f"set! first argument must be a name, got {to_string(var_sym)}")
    if env.find(var_sym) is None:
        raise SkemeUnboundSymbol(f"Cannot set unbound symbol {var_sym}")
    try:
        value = evaluate_fn(val_expr, env)
    except SkemeError as err:
        raise err.with_context(f"failed to evaluate {to_string(val_expr)} for symbol {var_sym}")
    env.set(var_sym, value)
    return []
