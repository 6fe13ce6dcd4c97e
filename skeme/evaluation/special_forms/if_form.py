from skeme import EvaluatorFn
from skeme import SExpression, LispValue
from skeme.errors import SkemeArityError, SkemeError, SkemeTypeError
from skeme.printer import to_string
from skeme.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(if test conseq alt); the test must produce a boolean."""
    if len(tail) != 3:
        raise SkemeArityError(f"incorrect number of arguments to if: {to_string(tail)}")

    test, consequence, alternative = tail
    try:
        result = evaluate_fn(test, env)
    except SkemeError as err:
        raise err.with_context(f"failed to evaluate test {to_string(test)}")

    if not isinstance(result, bool):
        raise SkemeTypeError(f"test {to_string(test)} did not evaluate to a boolean")

    branch = consequence if result else alternative
    try:
        return evaluate_fn(branch, env)
    except SkemeError as err:
        which = "consequence" if result else "alternative"
        raise err.with_context(f"failed to evaluate {which} {to_string(branch)}")
