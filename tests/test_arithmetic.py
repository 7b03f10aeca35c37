"""Test checked arithmetic, remainder and unary sign"""

import math

import pytest
import opsemtest

import opsem
from opsem import ast


@opsemtest.params(
    "left op right expected",
    add=(2, "+", 3, 5),
    sub=(10, "-", 3, 7),
    mul=(2, "*", 4, 8),
    div=(7, "/", 2, 3),
    divneg=(-7, "/", 2, -3),
    rem=(9, "%", 4, 1),
    remneg=(-1, "%", 3, -1),
    remnegdivisor=(7, "%", -3, 1),
)
def test_integer_math(key, left, op, right, expected):
    """Integer division truncates and remainder follows the dividend."""
    value = opsemtest.run(ast.ArithmeticOp(op, opsemtest.num(left), opsemtest.num(right)))
    assert value == opsem.Value(expected)


def test_double_math():
    value = opsemtest.run(ast.ArithmeticOp("/", opsemtest.num(20.0), opsemtest.num(2.5)))
    assert value == opsem.Value(8.0)
    assert value.type == opsem.Double


def test_floating_remainder():
    """Integer literals promote to Double next to a Double."""
    value = opsemtest.run(ast.ArithmeticOp("%", opsemtest.num(9), opsemtest.num(2.5)))
    assert value.type == opsem.Double
    assert math.isclose(value.data, 1.5)

    value = opsemtest.run(ast.ArithmeticOp("%", opsemtest.num(-9.5), opsemtest.num(2.0)))
    assert math.isclose(value.data, -1.5)


def test_overflow_is_rejected():
    """Checked operators never wrap silently."""
    expr = ast.ArithmeticOp("+", ast.Limit(opsem.UInt8, "max"), opsemtest.num(10))
    with pytest.raises(opsem.IntegerOverflowError):
        opsemtest.run(expr)

    expr = ast.ArithmeticOp("-", ast.Limit(opsem.Int8, "min"), opsemtest.num(1))
    with pytest.raises(OverflowError):
        opsemtest.run(expr)

    expr = ast.ArithmeticOp("*", opsemtest.i8(64), opsemtest.num(2))
    with pytest.raises(opsem.IntegerOverflowError):
        opsemtest.run(expr)


def test_underflow_unsigned():
    expr = ast.ArithmeticOp("-", opsemtest.u8(0), opsemtest.num(1))
    with pytest.raises(opsem.IntegerOverflowError):
        opsemtest.run(expr)


def test_min_divided_by_minus_one_overflows():
    expr = ast.ArithmeticOp("/", ast.Limit(opsem.Int8, "min"), opsemtest.num(-1))
    with pytest.raises(opsem.IntegerOverflowError):
        opsemtest.run(expr)


@opsemtest.params(
    "op left",
    intdiv=("/", 1),
    intrem=("%", 1),
    floatdiv=("/", 1.5),
    floatrem=("%", 1.5),
)
def test_divide_by_zero(key, op, left):
    expr = ast.ArithmeticOp(op, opsemtest.num(left), opsemtest.num(0))
    with pytest.raises(opsem.DivideByZeroError):
        opsemtest.run(expr)


def test_literal_adopts_operand_type():
    value = opsemtest.run(ast.ArithmeticOp("+", opsemtest.u8(250), opsemtest.num(5)))
    assert value == opsem.Value(255, opsem.UInt8)


def test_literal_out_of_range_for_operand_type():
    expr = ast.ArithmeticOp("+", opsemtest.u8(1), opsemtest.num(300))
    with pytest.raises(opsem.IntegerOverflowError):
        opsemtest.run(expr)


def test_mixed_types_rejected():
    expr = ast.ArithmeticOp("+", opsemtest.u8(1), opsemtest.i8(1))
    with pytest.raises(opsem.TypeMismatchError):
        opsemtest.run(expr)

    expr = ast.ArithmeticOp("+", opsemtest.num(1), ast.Bool(True))
    with pytest.raises(TypeError):
        opsemtest.run(expr)


@opsemtest.params(
    "left right expected",
    strings=(ast.String("hello, "), ast.String("world"), "hello, world"),
    chars=(ast.Char("🐶"), ast.Char("🐮"), "🐶🐮"),
    charstring=(ast.Char("a"), ast.String("bc"), "abc"),
    stringchar=(ast.String("ab"), ast.Char("c"), "abc"),
)
def test_concatenation(key, left, right, expected):
    """Text concatenation always yields a String."""
    value = opsemtest.run(ast.ArithmeticOp("+", left, right))
    assert value == opsem.Value(expected, opsem.String)


def test_text_only_concatenates():
    expr = ast.ArithmeticOp("-", ast.String("a"), ast.String("b"))
    with pytest.raises(opsem.TypeMismatchError):
        opsemtest.run(expr)

    expr = ast.ArithmeticOp("+", ast.String("a"), opsemtest.num(1))
    with pytest.raises(opsem.TypeMismatchError):
        opsemtest.run(expr)


def test_unary_sign():
    engine = opsemtest.run_all(
        ast.Declare("three", opsemtest.num(3)),
        ast.Declare("minusThree", ast.UnaryOp("-", ast.Identifier("three"))),
    )
    assert engine.env.get("minusThree") == opsem.Value(-3)
    value = opsemtest.run(ast.UnaryOp("-", ast.Identifier("minusThree")), engine)
    assert value == opsem.Value(3)
    value = opsemtest.run(ast.UnaryOp("+", ast.Identifier("minusThree")), engine)
    assert value == opsem.Value(-3)


@pytest.mark.parametrize("number", [-127, -1, 0, 1, 127])
def test_double_negation_round_trips(number):
    expr = ast.UnaryOp("-", ast.UnaryOp("-", opsemtest.i8(number)))
    assert opsemtest.run(expr) == opsem.Value(number, opsem.Int8)


def test_negating_min_overflows():
    with pytest.raises(opsem.IntegerOverflowError):
        opsemtest.run(ast.UnaryOp("-", ast.Limit(opsem.Int8, "min")))

    with pytest.raises(opsem.IntegerOverflowError):
        opsemtest.run(ast.UnaryOp("-", opsemtest.u8(1)))


def test_unary_sign_requires_number():
    with pytest.raises(opsem.TypeMismatchError):
        opsemtest.run(ast.UnaryOp("-", ast.String("cat")))


def test_remainder_of_infinity_is_nan():
    infinity = ast.ArithmeticOp("*", opsemtest.num(1e308), opsemtest.num(10.0))
    value = opsemtest.run(ast.ArithmeticOp("%", infinity, opsemtest.num(2.5)))
    assert value.type == opsem.Double
    assert math.isnan(value.data)


def test_remainder_by_infinity_keeps_dividend():
    infinity = ast.ArithmeticOp("*", opsemtest.num(1e308), opsemtest.num(10.0))
    value = opsemtest.run(ast.ArithmeticOp("%", opsemtest.num(7.5), infinity))
    assert value == opsem.Value(7.5)


def test_infinite_remainder_does_not_stop_playground():
    infinity = ast.ArithmeticOp("*", opsemtest.num(1e308), opsemtest.num(10.0))
    results = opsem.Playground().run([
        ast.ArithmeticOp("%", infinity, opsemtest.num(2.5)),
        ast.ArithmeticOp("+", opsemtest.num(1), opsemtest.num(2)),
    ])
    assert [r.ok for r in results] == [True, True]
    assert results[0].display == "nan"
    assert results[1].value == opsem.Value(3)
