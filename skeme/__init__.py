# Core type aliases for Skeme's data model.
# Plain Python types represent both code (forms) and runtime values:
# int, float, bool, Symbol, list, Closure and builtin callables. The reader's
# output is fed to the evaluator unchanged, so a quoted list is the same object
# the parser built.
#
# Naming guidance:
# - SExpression: reader/parser code and special forms handling unevaluated syntax.
# - LispValue:  evaluator/runtime code handling evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias; the same objects flow through the reader and the evaluator
SExpression = LispValue

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

# Builtin procedure signature: (env, evaluated_args) -> value
BuiltinFn = Callable[[Any, list], LispValue]
