"""
  Lisp Reader: tokenizer, atom classifier and parser.

- One line of text is one program: exactly one expression is read from it.
- Emits Python primitives, the same objects the evaluator works on:

    - lists -> Python list
    - integers -> int (base 10, 64-bit signed range)
    - floats -> float
    - everything else -> Symbol (including #t, #f, quote, lambda ...)

  There are no string or character literals, no comments, and no reader macros:
  parentheses are the only structure.
"""

from __future__ import annotations

import re

from skeme import SExpression
from skeme.errors import SkemeSyntaxError
from skeme.types.symbol import Symbol


INT_RE = re.compile(r"[+-]?[0-9]+\Z")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def tokenize(source: str) -> list[str]:
    """Pad every paren with spaces and split on runs of whitespace."""
    return source.replace("(", " ( ").replace(")", " ) ").split()


def classify_atom(token: str) -> int | float | Symbol:
    """Integer if possible, then float, otherwise a symbol named by the token."""
    if INT_RE.match(token):
        value = int(token)
        if INT64_MIN <= value <= INT64_MAX:
            return value
    # float() also accepts digit-group underscores and non-ASCII digits
    if "_" not in token and token.isascii():
        try:
            return float(token)
        except ValueError:
            pass
    return Symbol(token)


def _read(tokens: list[str], pos: int) -> tuple[SExpression, int]:
    """Read one expression starting at `pos`; return it with the next unread position.

    Open lists are kept on an explicit stack, so nesting depth is not bounded
    by the host recursion limit.
    """
    if pos >= len(tokens):
        raise SkemeSyntaxError("no tokens to read")

    open_lists: list[list[SExpression]] = []
    while pos < len(tokens):
        token = tokens[pos]
        pos += 1

        if token == "(":
            open_lists.append([])
            continue
        if token == ")":
            if not open_lists:
                raise SkemeSyntaxError("unexpected close paren")
            expr = open_lists.pop()
        else:
            expr = classify_atom(token)

        if not open_lists:
            return expr, pos
        open_lists[-1].append(expr)

    raise SkemeSyntaxError("missing close paren")


def read_from_tokens(tokens: list[str]) -> tuple[SExpression, int]:
    """Parse the first expression in `tokens`.

    Returns the expression and the number of tokens it consumed.
    Raises SkemeSyntaxError on an empty token list or unbalanced parens.
    """
    return _read(tokens, 0)


def parse(program: str) -> SExpression:
    """Parse one line of source into a single expression.

    Every token must belong to that expression: trailing tokens after a
    complete expression are a syntax error, as is a stray ')'.
    """
    tokens = tokenize(program)
    try:
        expr, consumed = read_from_tokens(tokens)
        if consumed != len(tokens):
            if tokens[consumed] == ")":
                raise SkemeSyntaxError("unexpected close paren")
            raise SkemeSyntaxError(
                f"unexpected tokens after expression: {' '.join(tokens[consumed:])}"
            )
    except SkemeSyntaxError as err:
        raise err.with_context("parse error")
    return expr
