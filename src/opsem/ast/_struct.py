"""Tuple and array nodes, with subscripts and members."""

__all__ = ["TupleLiteral", "ArrayLiteral", "Index", "Member"]

from ._base import ValueNode, require_node
from .. import _ops, _types
from .._error import IndexOutOfRangeError, TypeMismatchError
from .._value import RangeValue, Value


class TupleLiteral(ValueNode):
    """Tuple of values, `(1, 2)`. Elements are evaluated left to right."""

    def __init__(self, items):
        self.items = tuple(require_node("TupleLiteral", "item", i) for i in items)

    def operands(self):
        return self.items

    def evaluate(self, frame):
        values = []
        for item in self.items:
            values.append((yield item))
        return Value(tuple(values))

    def unparse(self) -> str:
        return "(" + ", ".join(i.unparse() for i in self.items) + ")"

    def __repr__(self):
        return f"TupleLiteral({list(self.items)})"


class ArrayLiteral(ValueNode):
    """Array of values sharing one element type, `["SFO", "LAS"]`.

    Integer literals adopt the type of the first non-literal element.
    """

    def __init__(self, items):
        self.items = tuple(require_node("ArrayLiteral", "item", i) for i in items)
        if not self.items:
            raise ValueError("ArrayLiteral requires at least one item")

    def operands(self):
        return self.items

    def evaluate(self, frame):
        values = []
        for item in self.items:
            values.append((yield item))

        element = next((v.type for v in values if not v.literal), values[0].type)
        values = [_ops.convert(v, element) for v in values]
        return Value(values, _types.ArrayType(element))

    def unparse(self) -> str:
        return "[" + ", ".join(i.unparse() for i in self.items) + "]"

    def __repr__(self):
        return f"ArrayLiteral({list(self.items)})"


class Index(ValueNode):
    """Subscript of an array or a string, `places[index]`."""

    def __init__(self, target, index):
        self.target = require_node("Index", "target", target)
        self.index = require_node("Index", "index", index)

    def operands(self):
        return (self.target, self.index)

    def evaluate(self, frame):
        target = yield self.target
        index = yield self.index
        if not index.is_int:
            raise TypeMismatchError(
                f"subscript index must be an integer, got '{index.type.name}'"
            )
        if isinstance(target.data, list):
            items = target.data
        elif target.type == _types.String:
            items = [Value(c, _types.Character) for c in target.data]
        else:
            raise TypeMismatchError(
                f"value of type '{target.type.name}' has no subscripts"
            )
        if not 0 <= index.data < len(items):
            raise IndexOutOfRangeError(
                f"index {index.data} out of range for {len(items)} elements"
            )
        return items[index.data]

    def unparse(self) -> str:
        return f"{self.target.unparse()}[{self.index.unparse()}]"

    def __repr__(self):
        return f"Index({self.target}, {self.index})"


class Member(ValueNode):
    """Read-only `count` or `isEmpty` of an array, string or range."""

    members = ("count", "isEmpty")

    def __init__(self, target, name: str):
        if name not in self.members:
            raise ValueError(f"Member requires one of {self.members}, got {name!r}")
        self.target = require_node("Member", "target", target)
        self.name = name

    def operands(self):
        return (self.target,)

    def evaluate(self, frame):
        target = yield self.target
        if not isinstance(target.data, (list, str, RangeValue)):
            raise TypeMismatchError(
                f"value of type '{target.type.name}' has no member '{self.name}'"
            )
        count = len(target.data)
        if self.name == "isEmpty":
            return Value(count == 0)
        return Value(count)

    def unparse(self) -> str:
        return f"{self.target.unparse()}.{self.name}"

    def __repr__(self):
        return f"Member({self.target}, {self.name!r})"
