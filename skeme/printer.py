"""Printed surface form of Skeme values.

Arithmetic always produces floats; a float equal to its rounded value prints
as an integer, which is how integer results show up at the prompt.

Lists are walked with an explicit stack, so printing a deeply nested value
does not depend on the host recursion limit.
"""

import math

from skeme import LispValue
from skeme.types.symbol import Symbol


class _Text(str):
    """Literal output queued on the print stack, as opposed to a value."""


_OPEN, _CLOSE, _SPACE = _Text("("), _Text(")"), _Text(" ")


def format_number(value: int | float) -> str:
    if isinstance(value, float) and math.isfinite(value) and value == round(value):
        return str(int(value))
    return repr(value)


def format_atom(obj: LispValue) -> str:
    # bool before numbers: bool is an int subclass
    if isinstance(obj, bool):
        return "#t" if obj else "#f"
    if isinstance(obj, (int, float)):
        return format_number(obj)
    if isinstance(obj, Symbol):
        return str(obj)
    from skeme.types.lambda_fn import Closure

    if isinstance(obj, Closure):
        return str(obj)
    if callable(obj):
        return f"#<builtin {getattr(obj, 'lisp_name', getattr(obj, '__name__', obj))}>"
    return str(obj)


def to_string(obj: LispValue) -> str:
    out: list[str] = []
    stack: list[LispValue] = [obj]
    while stack:
        item = stack.pop()
        if isinstance(item, _Text):
            out.append(item)
        elif isinstance(item, list):
            # Pushed in reverse so the elements pop left to right
            stack.append(_CLOSE)
            for i, element in enumerate(reversed(item)):
                if i:
                    stack.append(_SPACE)
                stack.append(element)
            stack.append(_OPEN)
        else:
            out.append(format_atom(item))
    return "".join(out)
