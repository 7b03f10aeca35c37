"""Statement nodes: blocks, conditionals, loops and output."""

__all__ = ["Block", "If", "ForIn", "Print"]

from ._base import StatementNode, require_node
from .. import _ops, _types
from .._engine import Compute
from .._error import TypeMismatchError
from .._value import VOID, RangeValue, Value


class Block(StatementNode):
    """Sequence of statements run in a nested scope."""

    def __init__(self, statements):
        self.body = tuple(require_node("Block", "statement", s) for s in statements)

    def statements(self):
        return self.body

    def evaluate(self, frame):
        env = frame.env.child()
        for statement in self.body:
            yield Compute(statement, env)
        return VOID

    def unparse(self) -> str:
        inner = "; ".join(s.unparse() for s in self.body)
        return f"{{ {inner} }}" if inner else "{ }"

    def __repr__(self):
        return f"Block({list(self.body)})"


class If(StatementNode):
    """Conditional statement, `if cond { ... } else { ... }`."""

    def __init__(self, condition, then, otherwise=None):
        self.condition = require_node("If", "condition", condition)
        self.then = _as_block(then)
        self.otherwise = None if otherwise is None else _as_block(otherwise)

    def operands(self):
        return (self.condition,)

    def statements(self):
        if self.otherwise is None:
            return (self.then,)
        return (self.then, self.otherwise)

    def evaluate(self, frame):
        condition = _ops.require_bool((yield self.condition), "if")
        if condition.data:
            yield self.then
        elif self.otherwise is not None:
            yield self.otherwise
        return VOID

    def unparse(self) -> str:
        text = f"if {self.condition.unparse()} {self.then.unparse()}"
        if self.otherwise is not None:
            text += f" else {self.otherwise.unparse()}"
        return text

    def __repr__(self):
        return f"If({self.condition}, {self.then}, {self.otherwise})"


class ForIn(StatementNode):
    """Loop over a range, array or string, `for index in 1...10 { ... }`.

    Each iteration binds the loop name as a constant in a fresh scope.
    """

    def __init__(self, name: str, sequence, body):
        if not isinstance(name, str) or not name:
            raise TypeError(f"ForIn name must be a non-empty str, got {name!r}")
        self.name = name
        self.sequence = require_node("ForIn", "sequence", sequence)
        self.body = _as_block(body)

    def operands(self):
        return (self.sequence,)

    def statements(self):
        return (self.body,)

    def evaluate(self, frame):
        sequence = yield self.sequence
        for element in _elements(sequence):
            env = frame.env.child()
            env.declare(self.name, element, mutable=False)
            yield Compute(self.body, env)
        return VOID

    def unparse(self) -> str:
        return f"for {self.name} in {self.sequence.unparse()} {self.body.unparse()}"

    def __repr__(self):
        return f"ForIn({self.name!r}, {self.sequence}, {self.body})"


class Print(StatementNode):
    """Write a value to the evaluation output, `print(value)`.

    Strings and characters are written without quotes.
    """

    def __init__(self, value):
        self.value = require_node("Print", "value", value)

    def operands(self):
        return (self.value,)

    def evaluate(self, frame):
        value = yield self.value
        frame.write(value.data if value.is_text else value.format())
        return VOID

    def unparse(self) -> str:
        return f"print({self.value.unparse()})"

    def __repr__(self):
        return f"Print({self.value})"


def _as_block(node):
    if isinstance(node, (list, tuple)):
        return Block(node)
    require_node("statement", "body", node)
    return node if isinstance(node, Block) else Block([node])


def _elements(sequence):
    """Iterate the element Values of a sequence value."""
    data = sequence.data
    if isinstance(data, RangeValue):
        element = sequence.type.element
        for number in data:
            yield Value(number, element)
    elif isinstance(data, list):
        yield from data
    elif sequence.type == _types.String:
        for char in data:
            yield Value(char, _types.Character)
    else:
        raise TypeMismatchError(
            f"for-in loop requires a sequence, got '{sequence.type.name}'"
        )
