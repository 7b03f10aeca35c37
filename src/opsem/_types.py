"""Static types for playground values.

Every runtime Value carries one of these. Integer types emulate fixed-width
storage; the wrapping and range helpers here are what the operators use to
decide between wrapping and rejecting a result.
"""

__all__ = [
    "Type",
    "IntType",
    "FloatType",
    "TupleType",
    "ArrayType",
    "RangeType",
    "Int8", "Int16", "Int32", "Int64",
    "UInt8", "UInt16", "UInt32", "UInt64",
    "Int", "UInt", "Double", "Bool", "String", "Character", "Void",
]


class Type:
    """A named type.

    Types are compared by name, so two separately built tuple or array
    types with the same shape are equal.
    """

    def __init__(self, name: str):
        self.name = name

    @property
    def is_numeric(self) -> bool:
        return False

    def __repr__(self):
        return self.name

    def __eq__(self, other):
        return isinstance(other, Type) and self.name == other.name

    def __hash__(self):
        return hash(self.name)


class IntType(Type):
    """Fixed-width two's complement or unsigned integer type.

    Args:
        name: (str) Display name like "UInt8"
        bits: (int) Storage width
        signed: (bool) Two's complement when true

    Attributes:
        min: (int) Smallest representable value
        max: (int) Largest representable value
        mask: (int) All-ones bit pattern for the width
    """

    def __init__(self, name: str, bits: int, signed: bool):
        super().__init__(name)
        self.bits = bits
        self.signed = signed
        self.mask = (1 << bits) - 1
        if signed:
            self.min = -(1 << (bits - 1))
            self.max = (1 << (bits - 1)) - 1
        else:
            self.min = 0
            self.max = self.mask

    @property
    def is_numeric(self) -> bool:
        return True

    def contains(self, number: int) -> bool:
        """Check if a mathematical integer is representable."""
        return self.min <= number <= self.max

    def wrap(self, number: int) -> int:
        """Truncate an integer to this width.

        The low `bits` bits are kept and reinterpreted, so signed types
        get two's complement wraparound.
        """
        number &= self.mask
        if self.signed and number > self.max:
            number -= 1 << self.bits
        return number


class FloatType(Type):
    """IEEE 754 floating point type."""

    @property
    def is_numeric(self) -> bool:
        return True


class TupleType(Type):
    """Fixed sequence of element types."""

    def __init__(self, elements):
        self.elements = tuple(elements)
        super().__init__("(" + ", ".join(t.name for t in self.elements) + ")")


class ArrayType(Type):
    """Homogeneous array type."""

    def __init__(self, element: Type):
        self.element = element
        super().__init__(f"[{element.name}]")


class RangeType(Type):
    """Closed or half-open integer range type."""

    def __init__(self, element: Type, closed: bool):
        self.element = element
        self.closed = closed
        kind = "ClosedRange" if closed else "Range"
        super().__init__(f"{kind}<{element.name}>")


Int8 = IntType("Int8", 8, True)
Int16 = IntType("Int16", 16, True)
Int32 = IntType("Int32", 32, True)
Int64 = IntType("Int64", 64, True)
UInt8 = IntType("UInt8", 8, False)
UInt16 = IntType("UInt16", 16, False)
UInt32 = IntType("UInt32", 32, False)
UInt64 = IntType("UInt64", 64, False)

# Platform word sized aliases, always 64 bit here
Int = IntType("Int", 64, True)
UInt = IntType("UInt", 64, False)

Double = FloatType("Double")
Bool = Type("Bool")
String = Type("String")
Character = Type("Character")
Void = TupleType(())
