"""Nodes that read, bind and update names."""

__all__ = ["Identifier", "Declare", "Assign", "CompoundAssign", "Increment"]

from ._base import StatementNode, ValueNode, require_node
from .. import _ops
from .._error import TypeMismatchError
from .._value import VOID, Value

COMPOUND_OPERATORS = (
    "+=", "-=", "*=", "/=", "%=",
    "&+=", "&-=", "&*=",
    "<<=", ">>=", "&=", "|=", "^=",
    "&&=", "||=",
)


class Identifier(ValueNode):
    """Reference to a bound name.

    Evaluates to the binding's current storage, so reading the same name
    twice gives identical values.
    """

    def __init__(self, name: str):
        if not isinstance(name, str) or not name:
            raise TypeError(f"Identifier name must be a non-empty str, got {name!r}")
        self.name = name

    def evaluate(self, frame):
        return frame.env.get(self.name)
        yield  # Make it a generator

    def static_type(self, env):
        """Bindings keep the type of their first value."""
        if self.name not in env:
            return None
        return env.get(self.name).type, False

    def unparse(self) -> str:
        return self.name

    def __repr__(self):
        return f"Identifier({self.name!r})"


class Declare(StatementNode):
    """Constant or variable declaration, `let x = 1` or `var y: UInt8 = 4`.

    The target may be a tuple of names to decompose a tuple value,
    `let (x, y) = (1, 2)`. An optional annotation converts literals to
    the declared type and otherwise requires the value to already have it.

    Args:
        target: (str | tuple[str, ...]) Name or names to bind
        value: (AstNode) Initial value expression
        mutable: (bool) True for `var`, False for `let`
        type: (Type | None) Optional type annotation
    """

    def __init__(self, target, value, mutable=False, type=None):
        if isinstance(target, list):
            target = tuple(target)
        if not isinstance(target, (str, tuple)) or not target:
            raise TypeError(f"Declare target must be a name or tuple of names, got {target!r}")
        self.target = target
        self.value = require_node("Declare", "value", value)
        self.mutable = mutable
        self.type = type

    def operands(self):
        return (self.value,)

    def bound_names(self):
        if isinstance(self.target, str):
            return (self.target,)
        return self.target

    def evaluate(self, frame):
        """Evaluate the initial value, then bind it."""
        value = yield self.value
        if self.type is not None:
            value = _ops.convert(value, self.type)

        if isinstance(self.target, str):
            frame.env.declare(self.target, _settle(value), self.mutable)
            return VOID

        if not isinstance(value.data, tuple) or len(value.data) != len(self.target):
            raise TypeMismatchError(
                f"cannot decompose value of type '{value.type.name}' into "
                f"{len(self.target)} names"
            )
        for name, element in zip(self.target, value.data):
            frame.env.declare(name, _settle(element), self.mutable)
        return VOID

    def unparse(self) -> str:
        keyword = "var" if self.mutable else "let"
        if isinstance(self.target, str):
            target = self.target
        else:
            target = "(" + ", ".join(self.target) + ")"
        if self.type is not None:
            target = f"{target}: {self.type.name}"
        return f"{keyword} {target} = {self.value.unparse()}"

    def __repr__(self):
        return f"Declare({self.target!r}, {self.value}, mutable={self.mutable})"


class Assign(StatementNode):
    """Assignment to an existing variable, `a = b`.

    Produces no value. Using it as an operand is rejected statically.
    """

    def __init__(self, name: str, value):
        if not isinstance(name, str) or not name:
            raise TypeError(f"Assign name must be a non-empty str, got {name!r}")
        self.name = name
        self.value = require_node("Assign", "value", value)

    def operands(self):
        return (self.value,)

    def bound_names(self):
        return (self.name,)

    def evaluate(self, frame):
        value = yield self.value
        binding = frame.env.lookup(self.name)
        frame.env.assign(self.name, _settle(_ops.convert(value, binding.type)))
        return VOID

    def unparse(self) -> str:
        return f"{self.name} = {self.value.unparse()}"

    def __repr__(self):
        return f"Assign({self.name!r}, {self.value})"


class CompoundAssign(StatementNode):
    """Operator combined with assignment, `a += 2`.

    Equivalent to `a = a op b` with `a` read once. The logical forms
    `&&=` and `||=` short-circuit and leave the right side unevaluated
    when the variable already decides the result.
    """

    def __init__(self, op: str, name: str, value):
        if op not in COMPOUND_OPERATORS:
            raise ValueError(f"CompoundAssign requires one of {COMPOUND_OPERATORS}, got {op!r}")
        if not isinstance(name, str) or not name:
            raise TypeError(f"CompoundAssign name must be a non-empty str, got {name!r}")
        self.op = op
        self.name = name
        self.value = require_node("CompoundAssign", "value", value)

    def operands(self):
        return (self.value,)

    def bound_names(self):
        return (self.name,)

    def evaluate(self, frame):
        binary = self.op[:-1]
        current = frame.env.get(self.name)

        if binary in ("&&", "||"):
            _ops.require_bool(current, binary)
            if current.data is (binary == "||"):
                return VOID  # Short-circuit: right side is never evaluated
            result = _ops.require_bool((yield self.value), binary)
        else:
            right = yield self.value
            result = _ops.binary(binary, current, right)

        result = _ops.convert(result, current.type)
        frame.env.assign(self.name, _settle(result))
        return VOID

    def unparse(self) -> str:
        return f"{self.name} {self.op} {self.value.unparse()}"

    def __repr__(self):
        return f"CompoundAssign({self.op!r}, {self.name!r}, {self.value})"


class Increment(ValueNode):
    """Increment or decrement of a variable, `++i`, `i++`, `--i`, `i--`.

    The prefix form evaluates to the updated value. The postfix form
    evaluates to the value captured before the update.

    Args:
        op: (str) "++" or "--"
        name: (str) Variable to update
        prefix: (bool) Operator written before the name
    """

    def __init__(self, op: str, name: str, prefix: bool = True):
        if op not in ("++", "--"):
            raise ValueError(f"Increment requires ++ or --, got {op!r}")
        if not isinstance(name, str) or not name:
            raise TypeError(f"Increment name must be a non-empty str, got {name!r}")
        self.op = op
        self.name = name
        self.prefix = prefix

    def evaluate(self, frame):
        before = frame.env.get(self.name)
        if not before.is_number:
            raise TypeMismatchError(
                f"operator '{self.op}' cannot be applied to an operand of type "
                f"'{before.type.name}'"
            )
        after = _ops.math_binary(self.op[0], before, Value(1, literal=True))
        after = _settle(after)
        frame.env.assign(self.name, after)
        return after if self.prefix else before
        yield  # Make it a generator

    def unparse(self) -> str:
        if self.prefix:
            return f"{self.op}{self.name}"
        return f"{self.name}{self.op}"

    def __repr__(self):
        return f"Increment({self.op!r}, {self.name!r}, prefix={self.prefix})"


def _settle(value):
    """Give a literal value its own non-literal storage once it is bound."""
    if value.literal:
        return Value(value.data, value.type)
    return value
