from skeme import EvaluatorFn
from skeme import SExpression, LispValue
from skeme.errors import SkemeArityError, SkemeTypeError
from skeme.printer import to_string
from skeme.types.environment import Environment
from skeme.types.lambda_fn import Closure
from skeme.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body) takes exactly one body form; there is no implicit begin.
    # The closure gets a copy of the whole chain, so later define/set! in the
    # defining scope are not seen by it.
    if len(tail) != 2:
        raise SkemeArityError(f"incorrect number of arguments to lambda: {to_string(tail)}")

    params, body = tail
    if not isinstance(params, list):
        raise SkemeTypeError(f"first argument to lambda {to_string(params)} was not a list")
    for param in params:
        if not isinstance(param, Symbol):
            raise SkemeTypeError(f"argument {to_string(param)} was not a name")

    return Closure(list(params), body, env.duplicate())
