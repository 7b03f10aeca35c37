"""Test value comparison and identity comparison"""

import pytest
import opsemtest

import opsem
from opsem import ast


@opsemtest.params(
    "op left right expected",
    eq=("==", 1, 1, True),
    ne=("!=", 2, 1, True),
    lt=("<", 1, 2, True),
    le=("<=", 2, 2, True),
    gt=(">", 1, 2, False),
    ge=(">=", 3, 2, True),
    mixed=("<", 1, 1.5, True),
)
def test_numeric_comparison(key, op, left, right, expected):
    value = opsemtest.run(ast.ComparisonOp(op, opsemtest.num(left), opsemtest.num(right)))
    assert value == opsem.Value(expected)


def test_text_comparison():
    value = opsemtest.run(ast.ComparisonOp("<", ast.String("apple"), ast.String("banana")))
    assert value == opsem.Value(True)
    value = opsemtest.run(ast.ComparisonOp("==", ast.Char("a"), ast.Char("a")))
    assert value == opsem.Value(True)


def test_ordering_rejects_bool():
    with pytest.raises(opsem.TypeMismatchError):
        opsemtest.run(ast.ComparisonOp("<", ast.Bool(False), ast.Bool(True)))


def test_equality_rejects_unrelated_types():
    with pytest.raises(opsem.TypeMismatchError):
        opsemtest.run(ast.ComparisonOp("==", ast.Bool(True), ast.String("true")))


def test_tuple_equality():
    left = ast.TupleLiteral([opsemtest.num(1), ast.String("a")])
    right = ast.TupleLiteral([opsemtest.num(1), ast.String("a")])
    assert opsemtest.run(ast.ComparisonOp("==", left, right)) == opsem.Value(True)
    other = ast.TupleLiteral([opsemtest.num(2), ast.String("a")])
    assert opsemtest.run(ast.ComparisonOp("!=", left, other)) == opsem.Value(True)


def test_equal_strings_are_not_identical():
    """Separately created strings share content but not storage."""
    engine = opsemtest.run_all(
        ast.Declare("firstObj", ast.String("test1"), mutable=True),
        ast.Declare("secondObj", ast.String("test1"), mutable=True),
    )
    first = ast.Identifier("firstObj")
    second = ast.Identifier("secondObj")
    assert engine.run(ast.ComparisonOp("==", first, second)) == opsem.Value(True)
    assert engine.run(ast.IdentityOp("===", first, second)) == opsem.Value(False)
    assert engine.run(ast.IdentityOp("!==", first, second)) == opsem.Value(True)


def test_same_binding_is_identical():
    engine = opsemtest.run_all(ast.Declare("firstObj", ast.String("test1")))
    first = ast.Identifier("firstObj")
    assert engine.run(ast.IdentityOp("===", first, first)) == opsem.Value(True)


def test_literals_are_fresh_storage():
    value = opsemtest.run(ast.IdentityOp("===", ast.String("x"), ast.String("x")))
    assert value == opsem.Value(False)


@opsemtest.params(
    "op",
    eq="==",
    ne="!=",
    lt="<",
)
def test_character_and_string_do_not_compare(key, op):
    expr = ast.ComparisonOp(op, ast.Char("a"), ast.String("a"))
    with pytest.raises(opsem.TypeMismatchError):
        opsemtest.run(expr)
