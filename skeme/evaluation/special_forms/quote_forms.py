from skeme import EvaluatorFn
from skeme import SExpression, LispValue
from skeme.errors import SkemeArityError
from skeme.printer import to_string
from skeme.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote expr) returns expr exactly as the reader built it."""
    if len(tail) != 1:
        raise SkemeArityError(f"incorrect number of arguments to quote: {to_string(tail)}")
    return tail[0]
