"""Perform builtin operations on Values.

These raise EvalError subclasses when an operation is rejected. There is
generally a function here for each family of operator nodes, and the
nodes only take care of evaluation order before calling in here.
"""

__all__ = [
    "convert",
    "common",
    "math_binary",
    "math_unary",
    "wrapping_binary",
    "bitwise_binary",
    "bitwise_not",
    "shift",
    "logic_unary",
    "require_bool",
    "compare",
    "identical",
    "binary",
    "BINARY_OPERATORS",
]

import math

from . import _types
from ._error import (
    DivideByZeroError,
    IntegerOverflowError,
    TypeMismatchError,
    UseOfVoidResultError,
)
from ._value import Value


def convert(value, type):
    """Convert a value to a destination type.

    Only literals convert implicitly. An integer literal becomes any other
    integer type (when it fits) or a Double. Everything else must already
    have the destination type.

    Args:
        value: (Value) Source value
        type: (Type) Destination type

    Returns:
        (Value) Value of the destination type

    Raises:
        IntegerOverflowError: If an integer literal does not fit
        TypeMismatchError: If the value cannot become the type
    """
    _usable(value)
    if value.type == type:
        return value
    if value.literal and value.is_int:
        if isinstance(type, _types.IntType):
            if not type.contains(value.data):
                raise IntegerOverflowError(
                    f"integer literal '{value.data}' overflows when stored into '{type.name}'"
                )
            return Value(value.data, type, literal=True)
        if type == _types.Double:
            return Value(float(value.data), type, literal=True)
    raise TypeMismatchError(
        f"cannot convert value of type '{value.type.name}' to '{type.name}'"
    )


def common(value, type, literal, op):
    """Bring a value to the type it shares with a counterpart of known type.

    Args:
        value: (Value) Evaluated value
        type: (Type) Type of the counterpart
        literal: (bool) Counterpart is an integer literal
        op: (str) Operator for error messages

    Returns:
        (Value) The value, converted when it is the side that adopts
    """
    _usable(value)
    if value.type == type:
        return value
    if literal and value.is_number:
        return value  # The counterpart adopts this type
    if value.literal and value.is_int:
        return convert(value, type)
    raise TypeMismatchError(
        f"result values in '{op}' expression have mismatching types "
        f"'{value.type.name}' and '{type.name}'"
    )


def math_binary(op, left, right):
    """Checked arithmetic binary operation.

    `+` also concatenates strings and characters.

    Args:
        op: (str) Operator like "+" "-" "*" "/" "%"
        left: (Value) Left value
        right: (Value) Right value

    Returns:
        (Value) Result of operation

    Raises:
        TypeMismatchError: If operands are not compatible numbers
        IntegerOverflowError: If an integer result leaves its type's range
        DivideByZeroError: If dividing by zero
    """
    _usable(left, right)
    if op == "+" and (left.is_text or right.is_text):
        return _concat(left, right)

    lval, rval, type, literal = _unify(op, left, right)

    if isinstance(type, _types.IntType):
        match op:
            case "+":
                result = lval + rval
            case "-":
                result = lval - rval
            case "*":
                result = lval * rval
            case "/":
                if rval == 0:
                    raise DivideByZeroError("Division by zero")
                result = _trunc_div(lval, rval)
            case "%":
                if rval == 0:
                    raise DivideByZeroError(
                        "Division by zero in remainder operation"
                    )
                result = lval - rval * _trunc_div(lval, rval)
            case _:
                raise ValueError(f"Unknown math binary operator: {op}")
        if not type.contains(result):
            raise IntegerOverflowError(
                f"arithmetic operation '{lval} {op} {rval}' (on type "
                f"'{type.name}') results in an overflow"
            )
        return Value(result, type, literal=literal)

    match op:
        case "+":
            result = lval + rval
        case "-":
            result = lval - rval
        case "*":
            result = lval * rval
        case "/":
            if rval == 0:
                raise DivideByZeroError("Division by zero")
            result = lval / rval
        case "%":
            if rval == 0:
                raise DivideByZeroError("Division by zero in remainder operation")
            if math.isinf(lval):
                result = math.nan
            else:
                # fmod keeps the sign of the dividend, matching integer %
                result = math.fmod(lval, rval)
        case _:
            raise ValueError(f"Unknown math binary operator: {op}")
    return Value(result, type, literal=literal)


def wrapping_binary(op, left, right):
    """Overflow (wrapping) arithmetic on fixed-width integers.

    Results are truncated to the operand type's width. Division and
    remainder by zero produce 0 rather than failing.

    Args:
        op: (str) Operator like "&+" "&-" "&*" "&/" "&%"
        left: (Value) Left value
        right: (Value) Right value

    Returns:
        (Value) Wrapped result
    """
    _usable(left, right)
    lval, rval, type, literal = _unify(op, left, right)
    if not isinstance(type, _types.IntType):
        raise TypeMismatchError(
            f"binary operator '{op}' requires integer operands, got '{type.name}'"
        )

    match op:
        case "&+":
            result = lval + rval
        case "&-":
            result = lval - rval
        case "&*":
            result = lval * rval
        case "&/":
            result = 0 if rval == 0 else _trunc_div(lval, rval)
        case "&%":
            result = 0 if rval == 0 else lval - rval * _trunc_div(lval, rval)
        case _:
            raise ValueError(f"Unknown wrapping operator: {op}")
    return Value(type.wrap(result), type, literal=literal)


def math_unary(op, operand):
    """Math unary operation.

    Args:
        op: (str) Operator like "+" "-"
        operand: (Value) Operand value

    Returns:
        (Value) Result of operation

    Raises:
        TypeMismatchError: If operand is not numeric
        IntegerOverflowError: If the negation is not representable
    """
    _usable(operand)
    if not operand.is_number:
        raise TypeMismatchError(
            f"unary operator '{op}' cannot be applied to an operand of type "
            f"'{operand.type.name}'"
        )
    if op == "+":
        return operand  # Unary + is a no-op
    if op != "-":
        raise ValueError(f"Unknown math unary operator: {op}")

    result = -operand.data
    if operand.is_int and not operand.type.contains(result):
        raise IntegerOverflowError(
            f"negation of '{operand.data}' (on type '{operand.type.name}') "
            f"results in an overflow"
        )
    return Value(result, operand.type, literal=operand.literal)


def bitwise_binary(op, left, right):
    """Bitwise AND, OR, XOR on the fixed-width bit patterns.

    Args:
        op: (str) Operator like "&" "|" "^"
        left: (Value) Left value
        right: (Value) Right value

    Returns:
        (Value) Result of operation
    """
    _usable(left, right)
    lval, rval, type, literal = _unify(op, left, right)
    if not isinstance(type, _types.IntType):
        raise TypeMismatchError(
            f"binary operator '{op}' requires integer operands, got '{type.name}'"
        )
    match op:
        case "&":
            result = lval & rval
        case "|":
            result = lval | rval
        case "^":
            result = lval ^ rval
        case _:
            raise ValueError(f"Unknown bitwise operator: {op}")
    return Value(type.wrap(result), type, literal=literal)


def bitwise_not(operand):
    """Invert every bit of a fixed-width integer.

    For an unsigned N-bit value this is `(2^N - 1) - value`.
    """
    _usable(operand)
    if not operand.is_int:
        raise TypeMismatchError(
            f"unary operator '~' cannot be applied to an operand of type "
            f"'{operand.type.name}'"
        )
    return Value(operand.type.wrap(~operand.data), operand.type,
                 literal=operand.literal)


def shift(op, left, right):
    """Bit shift of a fixed-width integer.

    The shift amount may have any integer type. Bits moved past the width
    are discarded. Right shifts copy the sign bit on signed types and fill
    with zeros on unsigned types. Amounts at or past the width saturate to
    0 (or -1 for right shifts of negative values) and negative amounts
    shift in the opposite direction.

    Args:
        op: (str) Operator "<<" or ">>"
        left: (Value) Value to shift
        right: (Value) Shift amount

    Returns:
        (Value) Result with the left operand's type
    """
    _usable(left, right)
    if not (left.is_int and right.is_int):
        raise TypeMismatchError(
            f"binary operator '{op}' cannot be applied to operands of type "
            f"'{left.type.name}' and '{right.type.name}'"
        )
    if op not in ("<<", ">>"):
        raise ValueError(f"Unknown shift operator: {op}")

    type = left.type
    value = left.data
    amount = right.data
    if amount < 0:
        op = ">>" if op == "<<" else "<<"
        amount = -amount

    if op == "<<":
        result = 0 if amount >= type.bits else type.wrap(value << amount)
    elif amount >= type.bits:
        result = -1 if value < 0 else 0
    else:
        # Python's >> is arithmetic, unsigned values are never negative
        result = value >> amount
    return Value(result, type, literal=left.literal)


def logic_unary(op, operand):
    """Logical NOT.

    Args:
        op: (str) Operator "!"
        operand: (Value) Bool value

    Returns:
        (Value) Inverted Bool
    """
    if op != "!":
        raise ValueError(f"Unknown logic unary operator: {op}")
    require_bool(operand, op)
    return Value(not operand.data)


def require_bool(value, op):
    """Reject anything other than a Bool operand for a logical operator."""
    _usable(value)
    if not value.is_bool:
        raise TypeMismatchError(
            f"operator '{op}' requires a 'Bool' operand, got '{value.type.name}'"
        )
    return value


def compare(op, left, right):
    """Comparison operation by value.

    Equality works for every pair of compatible types. Ordering works on
    numbers and on text of the same type.

    Args:
        op: (str) Operator like "==" "!=" "<" "<=" ">" ">="
        left: (Value) Left value
        right: (Value) Right value

    Returns:
        (Value) Bool result
    """
    _usable(left, right)
    match op:
        case "==":
            return Value(_equal(op, left, right))
        case "!=":
            return Value(not _equal(op, left, right))
        case "<" | "<=" | ">" | ">=":
            lval, rval = _orderable(op, left, right)
            if op == "<":
                return Value(lval < rval)
            if op == "<=":
                return Value(lval <= rval)
            if op == ">":
                return Value(lval > rval)
            return Value(lval >= rval)

    raise ValueError(f"Unknown comparison operator: {op}")


def identical(op, left, right):
    """Identity comparison: do both operands share the same storage.

    Args:
        op: (str) Operator "===" or "!=="
        left: (Value) Left value
        right: (Value) Right value

    Returns:
        (Value) Bool result
    """
    _usable(left, right)
    if op == "===":
        return Value(left is right)
    if op == "!==":
        return Value(left is not right)
    raise ValueError(f"Unknown identity operator: {op}")


BINARY_OPERATORS = {
    "+": math_binary,
    "-": math_binary,
    "*": math_binary,
    "/": math_binary,
    "%": math_binary,
    "&+": wrapping_binary,
    "&-": wrapping_binary,
    "&*": wrapping_binary,
    "&/": wrapping_binary,
    "&%": wrapping_binary,
    "&": bitwise_binary,
    "|": bitwise_binary,
    "^": bitwise_binary,
    "<<": shift,
    ">>": shift,
    "==": compare,
    "!=": compare,
    "<": compare,
    "<=": compare,
    ">": compare,
    ">=": compare,
    "===": identical,
    "!==": identical,
}


def binary(op, left, right):
    """Dispatch any strict (non short-circuit) binary operator."""
    func = BINARY_OPERATORS.get(op)
    if func is None:
        raise ValueError(f"Unknown binary operator: {op}")
    return func(op, left, right)


def _usable(*values):
    """Reject void values used as operands."""
    for value in values:
        if value.is_void:
            raise UseOfVoidResultError(
                "result of an assignment or declaration '()' cannot be used as a value"
            )


def _trunc_div(lval, rval):
    """Integer division rounding toward zero."""
    quotient = abs(lval) // abs(rval)
    return quotient if (lval < 0) == (rval < 0) else -quotient


def _unify(op, left, right):
    """Bring two numeric operands to a common type.

    Returns:
        (tuple) left data, right data, common Type, and whether the result
        is still a literal
    """
    if not (left.is_number and right.is_number):
        raise TypeMismatchError(
            f"binary operator '{op}' cannot be applied to operands of type "
            f"'{left.type.name}' and '{right.type.name}'"
        )
    if left.type != right.type:
        # An integer literal adopts the other operand's type
        if left.literal and left.is_int:
            left = convert(left, right.type)
        elif right.literal and right.is_int:
            right = convert(right, left.type)
        if left.type != right.type:
            raise TypeMismatchError(
                f"binary operator '{op}' cannot be applied to operands of type "
                f"'{left.type.name}' and '{right.type.name}'"
            )
    return left.data, right.data, left.type, left.literal and right.literal


def _concat(left, right):
    """Concatenate String and Character operands into a String."""
    if not (left.is_text and right.is_text):
        raise TypeMismatchError(
            f"binary operator '+' cannot be applied to operands of type "
            f"'{left.type.name}' and '{right.type.name}'"
        )
    return Value(left.data + right.data, _types.String)


def _equal(op, left, right):
    """Helper for value equality of two Values."""
    if left.is_number and right.is_number:
        lval, rval, _, _ = _unify(op, left, right)
        return lval == rval
    if left.is_text and right.is_text and left.type == right.type:
        return left.data == right.data
    if isinstance(left.data, (tuple, list)) and isinstance(right.data, (tuple, list)):
        if type(left.data) is not type(right.data) or len(left.data) != len(right.data):
            return False
        return all(_equal(op, l, r) for l, r in zip(left.data, right.data))
    if left.type != right.type:
        raise TypeMismatchError(
            f"binary operator '{op}' cannot be applied to operands of type "
            f"'{left.type.name}' and '{right.type.name}'"
        )
    return left.data == right.data


def _orderable(op, left, right):
    """Data for an ordering comparison, rejecting unordered types."""
    if left.is_number and right.is_number:
        lval, rval, _, _ = _unify(op, left, right)
        return lval, rval
    if left.is_text and right.is_text and left.type == right.type:
        return left.data, right.data
    raise TypeMismatchError(
        f"binary operator '{op}' cannot be applied to operands of type "
        f"'{left.type.name}' and '{right.type.name}'"
    )
