"""Error classes and helpers"""

__all__ = [
    "EvalError",
    "IntegerOverflowError",
    "DivideByZeroError",
    "InvalidRangeError",
    "UseOfVoidResultError",
    "TypeMismatchError",
    "UndefinedNameError",
    "ImmutableBindingError",
    "IndexOutOfRangeError",
]


class EvalError(Exception):
    """Error raised while checking or evaluating an expression.

    Args:
        message: (str) Error description
        node: (AstNode | None) Optional node that failed

    Attributes:
        message: (str) Error description
        node: (AstNode | None) Node that failed, when known
    """

    def __init__(self, message, node=None):
        self.message = message
        self.node = node
        super().__init__(message)


class IntegerOverflowError(EvalError, OverflowError):
    """Checked arithmetic produced a value outside its type's range."""


class DivideByZeroError(EvalError, ZeroDivisionError):
    """Checked division or remainder with a zero divisor."""


class InvalidRangeError(EvalError, ValueError):
    """Range bounds where the start is past the end."""


class UseOfVoidResultError(EvalError):
    """Result of an assignment or declaration used as a value."""


class TypeMismatchError(EvalError, TypeError):
    """Operator applied to operand types it does not support."""


class UndefinedNameError(EvalError, NameError):
    """Reference to a name with no binding."""


class ImmutableBindingError(EvalError):
    """Assignment to a `let` constant."""


class IndexOutOfRangeError(EvalError, IndexError):
    """Subscript outside the bounds of an array."""
