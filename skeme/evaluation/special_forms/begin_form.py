from skeme import EvaluatorFn
from skeme import SExpression, LispValue
from skeme.errors import SkemeError
from skeme.printer import to_string
from skeme.types.environment import Environment


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = []
    for e in tail:
        try:
            result = evaluate_fn(e, env)
        except SkemeError as err:
            raise err.with_context(f"failed to evaluate {to_string(e)} in begin")
    return result
