"""Statement-by-statement playground runner.

A playground page is a list of statements evaluated top to bottom against
one engine. Every statement produces a Result holding either its value
(or the values it bound) or the error that stopped it. A failing
statement never stops the statements after it.
"""

__all__ = ["Result", "Playground"]

import logging

from ._engine import Engine
from ._error import EvalError
from .ast import BinaryOp, BooleanOp, Conditional

logger = logging.getLogger("opsem.playground")


class Result:
    """Outcome of one playground statement.

    Attributes:
        node: (AstNode) The evaluated statement
        value: (Value | None) Result value, None when the statement failed
        bindings: (dict[str, Value]) Names the statement declared or assigned
        output: (list[str]) Lines printed while evaluating the statement
        error: (EvalError | None) Failure, None on success
    """
    __slots__ = ("node", "value", "bindings", "output", "error")

    def __init__(self, node, value=None, bindings=None, output=None, error=None):
        self.node = node
        self.value = value
        self.bindings = bindings or {}
        self.output = output or []
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def source(self) -> str:
        """Statement text, without the outer parentheses of an operator."""
        text = self.node.unparse()
        if isinstance(self.node, (BinaryOp, BooleanOp, Conditional)):
            text = text[1:-1]
        return text

    @property
    def type_name(self) -> str:
        """Type of the displayed value, empty for failures."""
        if self.error is not None:
            return ""
        if self.value is not None and not self.value.is_void:
            return self.value.type.name
        if len(self.bindings) == 1:
            return next(iter(self.bindings.values())).type.name
        if self.bindings:
            return "(" + ", ".join(v.type.name for v in self.bindings.values()) + ")"
        return self.value.type.name if self.value is not None else ""

    @property
    def display(self) -> str:
        """Value text the way a playground sidebar shows it."""
        if self.error is not None:
            return f"{type(self.error).__name__}: {self.error.message}"
        if self.value is not None and not self.value.is_void:
            return self.value.format()
        if self.output:
            return "\n".join(self.output)
        if len(self.bindings) == 1:
            return next(iter(self.bindings.values())).format()
        if self.bindings:
            return ", ".join(f"{k} = {v.format()}" for k, v in self.bindings.items())
        return "()"

    def __repr__(self):
        if self.error is not None:
            return f"Result({self.source!r}, error={self.error!r})"
        return f"Result({self.source!r}, {self.display})"


class Playground:
    """Evaluate statements in order against a shared engine.

    Args:
        engine: (Engine | None) Engine to evaluate with, new when omitted
    """

    def __init__(self, engine=None):
        self.engine = engine if engine is not None else Engine()

    def run(self, statements):
        """Evaluate each statement, returning one Result per statement."""
        return [self.run_one(statement) for statement in statements]

    def run_one(self, node):
        """Evaluate a single statement, capturing any EvalError.

        Args:
            node: AST node for the statement

        Returns:
            (Result) Value, bindings and output, or the error
        """
        mark = len(self.engine.output)
        try:
            value = self.engine.run(node)
        except EvalError as e:
            logger.debug("Statement failed: %s: %s", node.unparse(), e.message)
            return Result(node, output=self.engine.output[mark:], error=e)

        bindings = {name: self.engine.env.get(name) for name in node.bound_names()}
        return Result(node, value, bindings, self.engine.output[mark:])

    def value(self, name):
        """Current value bound to a name in the global scope."""
        return self.engine.env.get(name)
