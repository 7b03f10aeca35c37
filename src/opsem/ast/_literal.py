"""Literal value nodes."""

__all__ = ["Number", "Bool", "String", "Char", "Limit"]

from ._base import ValueNode
from .. import _types
from .._value import Value

_RADIX_PREFIX = {2: "0b", 8: "0o", 10: "", 16: "0x"}


class Number(ValueNode):
    """Numeric literal.

    Without an explicit type, an int is an Int literal and a float is a
    Double literal. Integer literals adopt the type of the operand they
    are combined with. Giving a type makes a typed (non-literal) value,
    written like a conversion `UInt8(4)`.

    Args:
        value: (int | float) Literal value
        type: (IntType | FloatType | None) Explicit type
        radix: (int) Base used when unparsing integers (2, 8, 10, 16)
    """

    def __init__(self, value: int | float, type=None, radix: int = 10):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Number value must be int or float, got {value.__class__}")
        if radix not in _RADIX_PREFIX:
            raise ValueError(f"Number radix must be 2, 8, 10 or 16, got {radix}")
        if type is not None:
            if not isinstance(type, (_types.IntType, _types.FloatType)):
                raise TypeError(f"Number type must be IntType or FloatType, got {type!r}")
            if isinstance(type, _types.IntType):
                if isinstance(value, float):
                    raise TypeError(f"Number of type {type.name} requires an int, got {value!r}")
                if not type.contains(value):
                    raise ValueError(f"Number {value} does not fit in {type.name}")
        self.value = value
        self.type = type
        self.radix = radix

    def evaluate(self, frame):
        """Numbers evaluate to new storage every time."""
        if self.type is not None:
            return Value(self.value, self.type)
        return Value(self.value, literal=True)
        yield  # Make it a generator

    def static_type(self, env):
        if self.type is not None:
            return self.type, False
        if isinstance(self.value, float):
            return _types.Double, False
        return _types.Int, True

    def unparse(self) -> str:
        """Convert back to source code."""
        text = self._digits()
        if self.type is not None:
            return f"{self.type.name}({text})"
        return text

    def _digits(self):
        if isinstance(self.value, float) or self.radix == 10:
            return str(self.value)
        sign = "-" if self.value < 0 else ""
        digits = format(abs(self.value), {2: "b", 8: "o", 16: "X"}[self.radix])
        if self.radix == 2:
            # Pad binary literals to whole bytes so bit patterns line up
            digits = digits.zfill(-(-len(digits) // 8) * 8)
        return f"{sign}{_RADIX_PREFIX[self.radix]}{digits}"

    def __repr__(self):
        if self.type is not None:
            return f"Number({self.value}, {self.type.name})"
        return f"Number({self.value})"


class Bool(ValueNode):
    """Boolean literal `true` or `false`."""

    def __init__(self, value: bool):
        if not isinstance(value, bool):
            raise TypeError(f"Bool value must be bool, got {type(value)}")
        self.value = value

    def evaluate(self, frame):
        return Value(self.value)
        yield  # Make it a generator

    def static_type(self, env):
        return _types.Bool, False

    def unparse(self) -> str:
        return "true" if self.value else "false"

    def __repr__(self):
        return f"Bool({self.value})"


class String(ValueNode):
    """String literal.

    Each evaluation creates separate storage, so two evaluations of equal
    literals are equal but not identical.
    """

    def __init__(self, value: str):
        if not isinstance(value, str):
            raise TypeError(f"String value must be str, got {type(value)}")
        self.value = value

    def evaluate(self, frame):
        """Strings evaluate to fresh storage."""
        return Value(self.value, _types.String)
        yield  # Make it a generator

    def static_type(self, env):
        return _types.String, False

    def unparse(self) -> str:
        """Convert back to source code."""
        # Escape quotes and backslashes
        escaped = self.value.replace('\\', '\\\\').replace('"', '\\"')
        return f'"{escaped}"'

    def __repr__(self):
        return f"String({self.value!r})"


class Char(ValueNode):
    """Character literal holding a single Unicode scalar."""

    def __init__(self, value: str):
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f"Char value must be a single character, got {value!r}")
        self.value = value

    def evaluate(self, frame):
        return Value(self.value, _types.Character)
        yield  # Make it a generator

    def static_type(self, env):
        return _types.Character, False

    def unparse(self) -> str:
        return f'"{self.value}"'

    def __repr__(self):
        return f"Char({self.value!r})"


class Limit(ValueNode):
    """Bound of an integer type, `UInt8.max` or `Int8.min`."""

    def __init__(self, type, bound: str):
        if not isinstance(type, _types.IntType):
            raise TypeError(f"Limit type must be IntType, got {type!r}")
        if bound not in ("min", "max"):
            raise ValueError(f"Limit bound must be 'min' or 'max', got {bound!r}")
        self.type = type
        self.bound = bound

    def evaluate(self, frame):
        return Value(getattr(self.type, self.bound), self.type)
        yield  # Make it a generator

    def static_type(self, env):
        return self.type, False

    def unparse(self) -> str:
        return f"{self.type.name}.{self.bound}"

    def __repr__(self):
        return f"Limit({self.type.name}, {self.bound!r})"
