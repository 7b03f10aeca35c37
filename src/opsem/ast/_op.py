"""Operator nodes for arithmetic, comparison, range and boolean operations."""

__all__ = [
    "UnaryOp",
    "BinaryOp",
    "ArithmeticOp",
    "WrappingOp",
    "BitwiseOp",
    "ShiftOp",
    "ComparisonOp",
    "IdentityOp",
    "BooleanOp",
    "Conditional",
    "RangeOp",
]

from ._base import ValueNode, require_node
from .. import _ops, _types
from .._error import TypeMismatchError
from .._value import RangeValue, Value


class UnaryOp(ValueNode):
    """Prefix operation: -x, +x, !x, ~x."""

    def __init__(self, op: str, operand):
        if op not in ("-", "+", "!", "~"):
            raise ValueError(f"UnaryOp requires -, +, ! or ~, got {op!r}")
        self.op = op
        self.operand = require_node("UnaryOp", "operand", operand)

    def operands(self):
        return (self.operand,)

    def evaluate(self, frame):
        """Evaluate operand, then apply unary operator."""
        value = yield self.operand
        match self.op:
            case "-" | "+":
                return _ops.math_unary(self.op, value)
            case "!":
                return _ops.logic_unary(self.op, value)
            case "~":
                return _ops.bitwise_not(value)

    def unparse(self) -> str:
        """Convert back to source code."""
        return f"{self.op}{self.operand.unparse()}"

    def __repr__(self):
        return f"UnaryOp({self.op!r}, {self.operand})"


class BinaryOp(ValueNode):
    """Strict binary operation.

    Both operands are always evaluated, left first. Subclasses name the
    operators they accept and the operation family that applies them.
    """

    operators = ()

    def __init__(self, op: str, left, right):
        name = self.__class__.__name__
        if op not in self.operators:
            raise ValueError(f"{name} requires one of {', '.join(self.operators)}, got {op!r}")
        self.op = op
        self.left = require_node(name, "left", left)
        self.right = require_node(name, "right", right)

    def operands(self):
        return (self.left, self.right)

    def evaluate(self, frame):
        """Evaluate both operands, then apply the operation."""
        left_value = yield self.left
        right_value = yield self.right
        return self.apply(self.op, left_value, right_value)

    @staticmethod
    def apply(op, left, right):
        return _ops.binary(op, left, right)

    def unparse(self) -> str:
        """Convert back to source code."""
        return f"({self.left.unparse()} {self.op} {self.right.unparse()})"

    def __repr__(self):
        return f"{self.__class__.__name__}({self.left}, {self.op!r}, {self.right})"


class ArithmeticOp(BinaryOp):
    """Checked arithmetic: x + y, x - y, x * y, x / y, x % y.

    Integer overflow and division by zero raise. `+` also concatenates
    strings and characters.
    """

    operators = ("+", "-", "*", "/", "%")
    apply = staticmethod(_ops.math_binary)


class WrappingOp(BinaryOp):
    """Overflow arithmetic: x &+ y, x &- y, x &* y, x &/ y, x &% y."""

    operators = ("&+", "&-", "&*", "&/", "&%")
    apply = staticmethod(_ops.wrapping_binary)


class BitwiseOp(BinaryOp):
    """Bitwise combination: x & y, x | y, x ^ y."""

    operators = ("&", "|", "^")
    apply = staticmethod(_ops.bitwise_binary)


class ShiftOp(BinaryOp):
    """Bit shift: x << n, x >> n."""

    operators = ("<<", ">>")
    apply = staticmethod(_ops.shift)


class ComparisonOp(BinaryOp):
    """Value comparison: ==, !=, <, <=, >, >=. Returns Bool."""

    operators = ("==", "!=", "<", "<=", ">", ">=")
    apply = staticmethod(_ops.compare)


class IdentityOp(BinaryOp):
    """Storage identity comparison: x === y, x !== y.

    Distinct from value equality. Two separately created values with the
    same content are equal but not identical.
    """

    operators = ("===", "!==")
    apply = staticmethod(_ops.identical)


class BooleanOp(ValueNode):
    """Boolean operation: x && y, x || y.

    Short-circuits evaluation:
    - && returns false without evaluating right when left is false
    - || returns true without evaluating right when left is true

    Both operands must be Bool values.
    """

    def __init__(self, op: str, left, right):
        if op not in ("&&", "||"):
            raise ValueError(f"BooleanOp requires && or ||, got {op!r}")
        self.op = op
        self.left = require_node("BooleanOp", "left", left)
        self.right = require_node("BooleanOp", "right", right)

    def operands(self):
        return (self.left, self.right)

    def evaluate(self, frame):
        """Evaluate left operand, short-circuit if possible, else evaluate right."""
        left_value = _ops.require_bool((yield self.left), self.op)

        if self.op == "&&":
            if not left_value.data:
                return Value(False)
        elif left_value.data:
            return Value(True)

        right_value = _ops.require_bool((yield self.right), self.op)
        return Value(right_value.data)

    def unparse(self) -> str:
        """Convert back to source code."""
        return f"({self.left.unparse()} {self.op} {self.right.unparse()})"

    def __repr__(self):
        return f"BooleanOp({self.op!r}, {self.left}, {self.right})"


class Conditional(ValueNode):
    """Ternary conditional: cond ? a : b.

    Only the chosen branch is evaluated, so side effects in the other
    branch never happen. The result takes the common type of both
    branches when the other branch's type is known without evaluating it
    (literals, limits and bound names), so `flag ? 1 : 2.5` is a Double.
    """

    def __init__(self, condition, then, otherwise):
        self.condition = require_node("Conditional", "condition", condition)
        self.then = require_node("Conditional", "then", then)
        self.otherwise = require_node("Conditional", "otherwise", otherwise)

    def operands(self):
        return (self.condition, self.then, self.otherwise)

    def evaluate(self, frame):
        condition = _ops.require_bool((yield self.condition), "?:")
        if condition.data:
            chosen, other = self.then, self.otherwise
        else:
            chosen, other = self.otherwise, self.then
        value = yield chosen

        known = other.static_type(frame.env)
        if known is None:
            return value
        return _ops.common(value, *known, op="?:")

    def unparse(self) -> str:
        return (f"({self.condition.unparse()} ? {self.then.unparse()} : "
                f"{self.otherwise.unparse()})")

    def __repr__(self):
        return f"Conditional({self.condition}, {self.then}, {self.otherwise})"


class RangeOp(ValueNode):
    """Range construction: a...b (closed) or a..<b (half-open).

    Bounds are integers of a common type. The resulting range is lazy and
    can be iterated repeatedly.
    """

    def __init__(self, start, end, closed: bool = True):
        self.start = require_node("RangeOp", "start", start)
        self.end = require_node("RangeOp", "end", end)
        self.closed = closed

    @property
    def op(self):
        return "..." if self.closed else "..<"

    def operands(self):
        return (self.start, self.end)

    def evaluate(self, frame):
        start = yield self.start
        end = yield self.end
        if not (start.is_int and end.is_int):
            raise TypeMismatchError(
                f"range operator '{self.op}' requires integer bounds, got "
                f"'{start.type.name}' and '{end.type.name}'"
            )
        if start.type != end.type:
            if start.literal:
                start = _ops.convert(start, end.type)
            else:
                end = _ops.convert(end, start.type)
        rng = RangeValue(start.data, end.data, self.closed)
        return Value(rng, _types.RangeType(start.type, self.closed))

    def unparse(self) -> str:
        return f"{self.start.unparse()}{self.op}{self.end.unparse()}"

    def __repr__(self):
        return f"RangeOp({self.start}, {self.end}, closed={self.closed})"
