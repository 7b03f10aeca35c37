"""Base classes for AST node hierarchies.

The hierarchy is split by whether a node produces a value:
- ValueNode: Expressions that evaluate to a usable Value
- StatementNode: Assignments, declarations and control flow that
  evaluate to the void value and may not be used as operands
"""

__all__ = ["AstNode", "ValueNode", "StatementNode", "require_node"]

from collections.abc import Generator

from .._value import Value


class AstNode:
    """Base class for all AST nodes.

    All AST nodes are immutable after construction and implement
    the generator-based evaluation protocol.

    The evaluate() method is a generator that:
    - Yields: Child node instances (or Compute requests) to evaluate
    - Receives: Value results from child evaluation
    - Returns: Final Value result

    Nodes also describe their children for static checking. Children in
    value position come from operands(), children in statement position
    from statements().

    This is a base class that should not be instantiated directly.
    """

    void = False

    def evaluate(self, frame) -> Generator['AstNode', Value, Value]:
        """Evaluate this node to produce a Value.

        Args:
            frame: The evaluation frame (environment and engine access)

        Yields:
            Child node instances that need evaluation

        Receives:
            Value instances (results from evaluating children)

        Returns:
            Final Value result
        """
        raise NotImplementedError(f"{self.__class__.__name__}.evaluate() not implemented")

    def unparse(self) -> str:
        """Convert this node back to playground source text.

        Used for display and error messages.

        Returns:
            Source code string
        """
        raise NotImplementedError(f"{self.__class__.__name__}.unparse() not implemented")

    def operands(self) -> tuple['AstNode', ...]:
        """Children whose results are used as values."""
        return ()

    def statements(self) -> tuple['AstNode', ...]:
        """Children evaluated only for their effects."""
        return ()

    def bound_names(self) -> tuple[str, ...]:
        """Names this node declares or assigns at the current scope."""
        return ()

    def static_type(self, env):
        """Type this node would produce, known without evaluating it.

        Args:
            env: (Environment) Scope the node would be evaluated in

        Returns:
            (tuple[Type, bool] | None) The type and whether the result is
            an integer literal, or None when it can't be known up front
        """
        return None


class ValueNode(AstNode):
    """Base class for nodes that evaluate to usable Values."""


class StatementNode(AstNode):
    """Base class for nodes that produce no usable value.

    These evaluate to the void value `()`. The static check rejects any
    tree that places one where an operand is expected.
    """

    void = True


def require_node(owner, role, node):
    """Validate a constructor argument is an AST node."""
    if not isinstance(node, AstNode):
        raise TypeError(f"{owner} {role} must be AstNode, got {type(node)}")
    return node
