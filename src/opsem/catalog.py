"""The operator tour: a fixed catalog of playground sections.

Each section is a short page of statements demonstrating one operator
family. Some statements fail on purpose (checked overflow, division by
zero, using an assignment's result) to show the errors those operators
raise.
"""

__all__ = ["Section", "sections", "section", "names"]

from . import _types as t
from .ast import (
    ArithmeticOp,
    ArrayLiteral,
    Assign,
    BitwiseOp,
    Bool,
    BooleanOp,
    Char,
    ComparisonOp,
    CompoundAssign,
    Conditional,
    Declare,
    ForIn,
    Identifier,
    IdentityOp,
    If,
    Increment,
    Index,
    Limit,
    Member,
    Number,
    Print,
    RangeOp,
    ShiftOp,
    String,
    TupleLiteral,
    UnaryOp,
    WrappingOp,
)


class Section:
    """Named page of statements.

    Statements are built fresh on every call to `sections()`, so a section
    can be run on any number of engines.
    """

    def __init__(self, name, title, statements):
        self.name = name
        self.title = title
        self.statements = statements

    def __repr__(self):
        return f"Section({self.name!r}, {len(self.statements)} statements)"


def _let(target, value, type=None):
    return Declare(target, value, mutable=False, type=type)


def _var(target, value, type=None):
    return Declare(target, value, mutable=True, type=type)


def _n(value, radix=10):
    return Number(value, radix=radix)


_ID = Identifier


def _assignment():
    return [
        _let("b", _n(10)),
        _var("a", _n(5)),
        Assign("a", _ID("b")),
        # Assignment produces no value, this is rejected before it runs
        _var("c", Assign("a", _ID("b"))),
        _let("z", TupleLiteral([_n(1), _n(2)])),
        _let(("x", "y"), TupleLiteral([_n(1), _n(2)])),
        _ID("x"),
        _ID("y"),
    ]


def _arithmetic():
    return [
        ArithmeticOp("+", _n(2), _n(3)),
        ArithmeticOp("-", _n(10), _n(3)),
        ArithmeticOp("*", _n(2), _n(4)),
        ArithmeticOp("/", _n(20.0), _n(2.5)),
        ArithmeticOp("+", String("hello, "), String("world")),
        _let("dog", Char("🐶"), t.Character),
        _let("cow", Char("🐮"), t.Character),
        _let("dogCow", ArithmeticOp("+", _ID("dog"), _ID("cow"))),
    ]


def _remainder():
    return [
        ArithmeticOp("%", _n(9), _n(4)),
        ArithmeticOp("%", UnaryOp("-", _n(1)), _n(3)),
        ArithmeticOp("%", _n(9), _n(2.5)),
    ]


def _overflow():
    return [
        _var("potentialOverflow", Limit(t.UInt8, "max")),
        Assign("potentialOverflow", ArithmeticOp("+", _ID("potentialOverflow"), _n(10))),
        _var("willOverflow", Limit(t.UInt8, "max")),
        Assign("willOverflow", WrappingOp("&+", _ID("willOverflow"), _n(1))),
        _var("willUnderflow", Limit(t.UInt8, "min")),
        Assign("willUnderflow", WrappingOp("&-", _ID("willUnderflow"), _n(1))),
        _let("x1", _n(1)),
        _let("y1", WrappingOp("&/", _ID("x1"), _n(0))),
        WrappingOp("&%", _ID("x1"), _n(0)),
        ArithmeticOp("/", _ID("x1"), _n(0)),
        WrappingOp("&-", Limit(t.Int8, "min"), _n(1)),
        ArithmeticOp("-", Limit(t.Int8, "min"), _n(1)),
    ]


def _increment():
    return [
        _var("i", _n(0)),
        Increment("++", "i"),
        Increment("--", "i"),
        _var("j", Increment("++", "i")),
        _var("k", Increment("++", "i", prefix=False)),
        _ID("j"),
        _ID("k"),
        _ID("i"),
        _var("l", _n(8.5)),
        Increment("++", "l"),
    ]


def _unary():
    return [
        _let("three", _n(3)),
        _let("minusThree", UnaryOp("-", _ID("three"))),
        _let("plusThree", UnaryOp("-", _ID("minusThree"))),
        _let("alsoMinusThree", UnaryOp("+", _ID("minusThree"))),
    ]


def _compound():
    return [
        _var("a1", _n(1)),
        CompoundAssign("+=", "a1", _n(2)),
        Assign("a1", ArithmeticOp("+", _ID("a1"), _n(2))),
        _ID("a1"),
        # Compound assignment yields nothing either
        _let("sum", CompoundAssign("+=", "a1", _n(2))),
    ]


def _comparison():
    return [
        ComparisonOp("==", _n(1), _n(1)),
        ComparisonOp("!=", _n(2), _n(1)),
        _var("firstObj", String("test1")),
        _var("secondObj", String("test1")),
        ComparisonOp("==", _ID("firstObj"), _ID("secondObj")),
        IdentityOp("===", _ID("firstObj"), _ID("secondObj")),
        IdentityOp("===", _ID("firstObj"), _ID("firstObj")),
    ]


def _ternary():
    return [
        _let("contentHeight", _n(40)),
        _let("hasHeader", Bool(True)),
        _let("rowHeight", ArithmeticOp(
            "+",
            _ID("contentHeight"),
            Conditional(_ID("hasHeader"), _n(50), _n(20)),
        )),
    ]


def _range():
    return [
        _var("total", _n(0)),
        ForIn("index", RangeOp(_n(1), _n(10), closed=True), [
            Increment("++", "total", prefix=False),
        ]),
        _ID("total"),
        _let("places", ArrayLiteral([String("SFO"), String("LAS"), String("BOS")])),
        _var("count", Member(_ID("places"), "count")),
        _var("result", String("")),
        ForIn("index", RangeOp(_n(0), _ID("count"), closed=False), [
            CompoundAssign("+=", "result", Index(_ID("places"), _ID("index"))),
        ]),
        _ID("result"),
        RangeOp(_n(5), _n(1), closed=True),
    ]


def _logical():
    welcome = [Print(String("Welcome!"))]
    denied = [Print(String("ACCESS DENIED"))]
    entered = _ID("enteredDoorCode")
    scanned = _ID("passedRetinaScan")
    key = _ID("hasDoorKey")
    password = _ID("knowsOverridePassword")
    return [
        _let("allowed", Bool(True)),
        UnaryOp("!", _ID("allowed")),
        If(UnaryOp("!", _ID("allowed")), [Print(String("Access Denied"))]),
        _let("enteredDoorCode", Bool(True)),
        _let("passedRetinaScan", Bool(False)),
        If(BooleanOp("&&", entered, scanned), welcome, denied),
        _let("hasDoorKey", Bool(False)),
        _let("knowsOverridePassword", Bool(True)),
        If(BooleanOp("||", key, password), welcome, denied),
        If(BooleanOp("||", BooleanOp("||", BooleanOp("&&", entered, scanned), key), password),
           welcome, denied),
    ]


def _bitwise():
    return [
        _let("initialBits", _n(0b01010101, 2), t.UInt8),
        _let("invertedBit", UnaryOp("~", _ID("initialBits"))),
        _let("firstSixBits", _n(0b11111100, 2), t.UInt8),
        _let("lastSixBits", _n(0b00111111, 2), t.UInt8),
        _let("middleFourBits", BitwiseOp("&", _ID("firstSixBits"), _ID("lastSixBits"))),
        _let("someBits", _n(0b10110010, 2), t.UInt8),
        _let("moreBits", _n(0b01011110, 2), t.UInt8),
        _let("combinedbits", BitwiseOp("|", _ID("someBits"), _ID("moreBits"))),
        _let("firstBits", _n(0b00010100, 2), t.UInt8),
        _let("otherBits", _n(0b00000101, 2), t.UInt8),
        _let("outputBits", BitwiseOp("^", _ID("firstBits"), _ID("otherBits"))),
    ]


def _shift():
    unsigned = _ID("shiftBits")
    signed = _ID("shiftBitsSigned")
    color = _ID("color")
    return [
        _let("shiftBits", _n(4), t.UInt8),
        ShiftOp("<<", unsigned, _n(1)),
        ShiftOp("<<", unsigned, _n(2)),
        ShiftOp("<<", unsigned, _n(5)),
        ShiftOp("<<", unsigned, _n(6)),
        ShiftOp(">>", unsigned, _n(2)),
        _let("shiftBitsSigned", UnaryOp("-", _n(4)), t.Int8),
        ShiftOp("<<", signed, _n(1)),
        ShiftOp("<<", signed, _n(2)),
        ShiftOp("<<", signed, _n(5)),
        ShiftOp("<<", signed, _n(6)),
        ShiftOp(">>", signed, _n(2)),
        _let("color", _n(0xCC6699, 16), t.UInt32),
        _let("redComponent", ShiftOp(">>", BitwiseOp("&", color, _n(0xFF0000, 16)), _n(16))),
        _let("greenComponent", ShiftOp(">>", BitwiseOp("&", color, _n(0x00FF00, 16)), _n(8))),
        _let("blueComponent", BitwiseOp("&", color, _n(0x0000FF, 16))),
    ]


_SECTIONS = (
    ("assignment", "Assignment Operator", _assignment),
    ("arithmetic", "Arithmetic Operators", _arithmetic),
    ("remainder", "Remainder Operator", _remainder),
    ("overflow", "Overflow Operators", _overflow),
    ("increment", "Increment and Decrement Operators", _increment),
    ("unary", "Unary Minus and Plus Operators", _unary),
    ("compound", "Compound Assignment Operators", _compound),
    ("comparison", "Comparison Operators", _comparison),
    ("ternary", "Ternary Conditional Operator", _ternary),
    ("range", "Range Operators", _range),
    ("logical", "Logical Operators", _logical),
    ("bitwise", "Bitwise Operators", _bitwise),
    ("shift", "Bitwise Shift Operators", _shift),
)


def names():
    """Section names in tour order."""
    return [name for name, _, _ in _SECTIONS]


def sections():
    """Build every section in tour order."""
    return [Section(name, title, build()) for name, title, build in _SECTIONS]


def section(name):
    """Build one section by name.

    Raises:
        KeyError: If there is no section with that name
    """
    for key, title, build in _SECTIONS:
        if key == name:
            return Section(key, title, build())
    raise KeyError(f"Unknown section: {name}")
