"""Runtime values for the playground engine."""

__all__ = ["Value", "RangeValue", "VOID"]

from . import _types
from ._error import IntegerOverflowError, InvalidRangeError


class RangeValue:
    """Lazy ascending integer sequence.

    Iterating creates a fresh iterator each time, so a range can be walked
    any number of times. Nothing is materialized up front.

    Args:
        start: (int) First element
        end: (int) Upper bound
        closed: (bool) True when `end` itself is included

    Raises:
        InvalidRangeError: If the bounds are reversed
    """
    __slots__ = ("start", "end", "closed")

    def __init__(self, start: int, end: int, closed: bool):
        if end < start:
            op = "..." if closed else "..<"
            raise InvalidRangeError(
                f"Range requires lowerBound <= upperBound, got {start}{op}{end}"
            )
        self.start = start
        self.end = end
        self.closed = closed

    @property
    def stop(self) -> int:
        """Exclusive upper bound."""
        return self.end + 1 if self.closed else self.end

    def __iter__(self):
        return iter(range(self.start, self.stop))

    def __len__(self):
        return self.stop - self.start

    def __contains__(self, number):
        return self.start <= number < self.stop

    def __eq__(self, other):
        return (isinstance(other, RangeValue) and self.start == other.start
                and self.end == other.end and self.closed == other.closed)

    def __hash__(self):
        return hash((self.start, self.end, self.closed))

    def __repr__(self):
        op = "..." if self.closed else "..<"
        return f"{self.start}{op}{self.end}"


class Value:
    """Playground runtime value.

    A value pairs Python data with the playground Type it represents.
    Integers are Python ints kept inside their type's range, Doubles are
    floats, Bool is bool, String and Character are str, tuples are Python
    tuples of Values, arrays are lists of Values and ranges are RangeValue.

    Each Value instance is its own storage. Value equality compares type
    and data while identity comparison uses the instance itself.

    Values produced straight from an integer literal are flagged as
    literals. A literal can still adopt the type of whatever it is combined
    with, the way an untyped numeric literal does.

    Args:
        data: The underlying Python data
        type: (Type | None) Playground type, inferred from data when None
        literal: (bool) Value came directly from a numeric literal
    """
    __slots__ = ("data", "type", "literal")

    def __init__(self, data, type=None, literal=False):
        if isinstance(data, Value):
            # Values are storage; copying one means a new storage instance
            self.data = data.data
            self.type = data.type if type is None else type
            self.literal = data.literal
            return

        if type is None:
            type = _infer(data)
        if isinstance(type, _types.IntType):
            if isinstance(data, bool) or not isinstance(data, int):
                raise ValueError(f"{type.name} requires an int, got {data!r}")
            if not type.contains(data):
                raise IntegerOverflowError(
                    f"{data} overflows when stored into {type.name}"
                )
        elif type == _types.Double:
            data = float(data)

        self.data = data
        self.type = type
        self.literal = literal

    @property
    def is_int(self) -> bool:
        return isinstance(self.type, _types.IntType)

    @property
    def is_float(self) -> bool:
        return isinstance(self.type, _types.FloatType)

    @property
    def is_number(self) -> bool:
        return self.type.is_numeric

    @property
    def is_bool(self) -> bool:
        return self.type == _types.Bool

    @property
    def is_text(self) -> bool:
        """String or Character."""
        return self.type in (_types.String, _types.Character)

    @property
    def is_void(self) -> bool:
        return self.type == _types.Void

    def format(self):
        """Convert value to playground display text.

        Returns:
            (str) Literal-like representation
        """
        data = self.data
        if self.is_bool:
            return "true" if data else "false"
        if self.is_text:
            escaped = data.replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        if self.is_float:
            return repr(data)
        if isinstance(data, tuple):
            return "(" + ", ".join(v.format() for v in data) + ")"
        if isinstance(data, list):
            return "[" + ", ".join(v.format() for v in data) + "]"
        return str(data)

    def to_python(self):
        """Convert this value to a plain Python equivalent."""
        if isinstance(self.data, tuple):
            return tuple(v.to_python() for v in self.data)
        if isinstance(self.data, list):
            return [v.to_python() for v in self.data]
        if isinstance(self.data, RangeValue):
            return range(self.data.start, self.data.stop)
        return self.data

    def __repr__(self):
        return f"Value({self.data!r}, {self.type.name})"

    def __eq__(self, other):
        if not isinstance(other, Value):
            return False
        return self.type == other.type and self.data == other.data

    def __hash__(self):
        data = self.data
        if isinstance(data, list):
            data = tuple(data)
        return hash((self.type, data))


def _infer(data):
    """Pick a playground type for a plain Python object."""
    if isinstance(data, bool):
        return _types.Bool
    if isinstance(data, int):
        return _types.Int
    if isinstance(data, float):
        return _types.Double
    if isinstance(data, str):
        return _types.String
    if isinstance(data, tuple):
        return _types.TupleType(v.type for v in data)
    if isinstance(data, list):
        if not data:
            raise ValueError("Cannot infer element type of an empty array")
        return _types.ArrayType(data[0].type)
    if isinstance(data, RangeValue):
        return _types.RangeType(_types.Int, data.closed)
    raise ValueError(f"Cannot convert Python {type(data)} to a playground Value")


VOID = Value((), _types.Void)
