"""Test the evaluation engine, scopes and statement nodes"""

import pytest
import opsemtest

import opsem
from opsem import ast


def test_run_returns_value():
    engine = opsem.Engine()
    value = engine.run(ast.ArithmeticOp("+", opsemtest.num(1), opsemtest.num(2)))
    assert value == opsem.Value(3)
    assert value.literal


def test_environment_persists_between_runs():
    engine = opsem.Engine()
    engine.run(ast.Declare("a", opsemtest.num(5)))
    value = engine.run(ast.ArithmeticOp("*", ast.Identifier("a"), opsemtest.num(2)))
    assert value == opsem.Value(10)
    assert not value.literal


def test_error_records_failing_node():
    failing = ast.ArithmeticOp("/", opsemtest.num(1), opsemtest.num(0))
    expr = ast.ArithmeticOp("+", opsemtest.num(1), failing)
    with pytest.raises(opsem.DivideByZeroError) as info:
        opsemtest.run(expr)
    assert info.value.node is failing


def test_static_error_records_void_operand():
    assign = ast.Assign("a", opsemtest.num(1))
    with pytest.raises(opsem.UseOfVoidResultError) as info:
        opsemtest.run(ast.Declare("c", assign))
    assert info.value.node is assign


def test_static_check_runs_before_side_effects():
    engine = opsemtest.run_all(ast.Declare("a", opsemtest.num(0), mutable=True))
    expr = ast.ArithmeticOp("+", ast.Increment("++", "a"), ast.Assign("a", opsemtest.num(7)))
    with pytest.raises(opsem.UseOfVoidResultError):
        engine.run(expr)
    assert engine.env.get("a") == opsem.Value(0)


def test_errors_are_builtin_subclasses():
    assert issubclass(opsem.IntegerOverflowError, OverflowError)
    assert issubclass(opsem.DivideByZeroError, ZeroDivisionError)
    assert issubclass(opsem.TypeMismatchError, TypeError)
    assert issubclass(opsem.IndexOutOfRangeError, IndexError)
    assert issubclass(opsem.InvalidRangeError, opsem.EvalError)


def test_deep_nesting_without_recursion():
    expr = opsemtest.num(0)
    for _ in range(5000):
        expr = ast.ArithmeticOp("+", expr, opsemtest.num(1))
    assert opsemtest.run(expr) == opsem.Value(5000)


@opsemtest.params(
    "node expected",
    add=(ast.ArithmeticOp("+", opsemtest.num(1), opsemtest.num(2)), "(1 + 2)"),
    typed=(opsemtest.u8(4), "UInt8(4)"),
    binary=(ast.Number(0b1111, radix=2), "0b00001111"),
    hexa=(ast.Number(0xCC6699, radix=16), "0xCC6699"),
    limit=(ast.Limit(opsem.Int8, "min"), "Int8.min"),
    unary=(ast.UnaryOp("-", ast.Identifier("x")), "-x"),
    declare=(ast.Declare("x", opsemtest.num(1)), "let x = 1"),
    annotated=(ast.Declare("y", opsemtest.num(4), mutable=True, type=opsem.UInt8), "var y: UInt8 = 4"),
    tuple=(ast.Declare(("x", "y"), ast.TupleLiteral([opsemtest.num(1), opsemtest.num(2)])), "let (x, y) = (1, 2)"),
    compound=(ast.CompoundAssign("+=", "a", opsemtest.num(2)), "a += 2"),
    prefix=(ast.Increment("++", "i"), "++i"),
    postfix=(ast.Increment("--", "i", prefix=False), "i--"),
    ternary=(ast.Conditional(ast.Identifier("h"), opsemtest.num(50), opsemtest.num(20)), "(h ? 50 : 20)"),
    halfopen=(ast.RangeOp(opsemtest.num(0), ast.Identifier("n"), closed=False), "0..<n"),
    index=(ast.Index(ast.Identifier("places"), opsemtest.num(0)), "places[0]"),
    member=(ast.Member(ast.Identifier("places"), "count"), "places.count"),
    string=(ast.String('say "hi"'), '"say \\"hi\\""'),
    output=(ast.Print(ast.String("hi")), 'print("hi")'),
)
def test_unparse(key, node, expected):
    assert node.unparse() == expected


def test_constructors_validate_children():
    with pytest.raises(TypeError):
        ast.ArithmeticOp("+", 1, opsemtest.num(2))
    with pytest.raises(ValueError):
        ast.ArithmeticOp("&+", opsemtest.num(1), opsemtest.num(2))
    with pytest.raises(ValueError):
        ast.Member(ast.Identifier("a"), "length")
    with pytest.raises(ValueError):
        ast.ArrayLiteral([])


def test_block_scope():
    engine = opsemtest.run_all(
        ast.Declare("outer", opsemtest.num(1), mutable=True),
        ast.Block([
            ast.Declare("inner", opsemtest.num(2)),
            ast.Assign("outer", ast.ArithmeticOp("+", ast.Identifier("outer"), ast.Identifier("inner"))),
            ast.Print(ast.Identifier("inner")),
        ]),
    )
    assert engine.env.get("outer") == opsem.Value(3)
    assert "inner" not in engine.env
    assert engine.output == ["2"]


def test_block_shadowing():
    engine = opsemtest.run_all(
        ast.Declare("x", opsemtest.num(1)),
        ast.Block([ast.Declare("x", ast.String("shadow")), ast.Print(ast.Identifier("x"))]),
        ast.Print(ast.Identifier("x")),
    )
    assert engine.output == ["shadow", "1"]


def test_if_else():
    engine = opsemtest.run_all(
        ast.Declare("enteredDoorCode", ast.Bool(True)),
        ast.Declare("passedRetinaScan", ast.Bool(False)),
        ast.If(
            ast.BooleanOp("&&", ast.Identifier("enteredDoorCode"), ast.Identifier("passedRetinaScan")),
            [ast.Print(ast.String("Welcome!"))],
            [ast.Print(ast.String("ACCESS DENIED"))],
        ),
        ast.If(ast.Identifier("enteredDoorCode"), ast.Print(opsemtest.num(1.5))),
    )
    assert engine.output == ["ACCESS DENIED", "1.5"]


def test_if_requires_bool():
    with pytest.raises(opsem.TypeMismatchError):
        opsemtest.run(ast.If(opsemtest.num(1), [ast.Print(ast.String("x"))]))


def test_print_formats_values():
    engine = opsemtest.run_all(
        ast.Print(ast.Bool(False)),
        ast.Print(ast.TupleLiteral([opsemtest.num(1), ast.String("a")])),
        ast.Print(ast.ArrayLiteral([opsemtest.u8(1), opsemtest.num(2)])),
        ast.Print(ast.Char("z")),
    )
    assert engine.output == ["false", '(1, "a")', "[1, 2]", "z"]


def test_array_literal_adopts_typed_element():
    value = opsemtest.run(ast.ArrayLiteral([opsemtest.num(1), opsemtest.u8(2)]))
    assert value.type.name == "[UInt8]"
    assert value.to_python() == [1, 2]


def test_array_literal_rejects_mixed_types():
    with pytest.raises(opsem.TypeMismatchError):
        opsemtest.run(ast.ArrayLiteral([ast.String("a"), opsemtest.num(1)]))


def test_string_subscript_is_character():
    value = opsemtest.run(ast.Index(ast.String("SFO"), opsemtest.num(1)))
    assert value == opsem.Value("F", opsem.Character)


@opsemtest.params(
    "target member expected",
    count=(ast.String("abc"), "count", 3),
    empty=(ast.String(""), "isEmpty", True),
    array=(ast.ArrayLiteral([opsemtest.num(1), opsemtest.num(2)]), "isEmpty", False),
    rng=(ast.RangeOp(opsemtest.num(1), opsemtest.num(10)), "count", 10),
)
def test_members(key, target, member, expected):
    assert opsemtest.run(ast.Member(target, member)) == opsem.Value(expected)


def test_member_requires_collection():
    with pytest.raises(opsem.TypeMismatchError):
        opsemtest.run(ast.Member(opsemtest.num(1), "count"))
