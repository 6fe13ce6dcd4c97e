
class SkemeError(Exception):
    """ Base class for all Skeme errors"""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message
        self.context: list[str] = []

    def with_context(self, note: str) -> "SkemeError":
        """Record where the error passed through on its way out; returns self for re-raising."""
        self.context.append(note)
        return self

    def __str__(self) -> str:
        # Outermost context first, the original failure last
        return ": ".join([*reversed(self.context), self.message])


class SkemeSyntaxError(SkemeError):
    """ Raised when the parens of the input do not balance, or there is no input"""


class SkemeUnboundSymbol(SkemeError):
    """ Raised when a symbol is used before it is bound"""


class SkemeTypeError(SkemeError):
    """ Raised when a value has the wrong shape for a special form or builtin"""


class SkemeArityError(SkemeError):
    """ Raised when the number of arguments or parameters is incorrect"""


class SkemeEmptyListError(SkemeError):
    """ Raised by car/cdr on the empty list"""


class SkemeNotCallableError(SkemeError):
    """ Raised when the head of an application is not a procedure"""


class SkemeEvalError(SkemeError):
    """ Raised when a builtin procedure fails; wraps the builtin's own error"""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause
