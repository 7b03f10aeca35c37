"""Static checks run over a node tree before evaluation."""

__all__ = ["check"]

from ._error import UseOfVoidResultError


def check(node):
    """Reject trees that use the result of a void node as a value.

    Assignments, compound assignments, declarations and other statements
    produce no value. They may appear where a statement is expected (the
    top of the tree or inside a block) but never as an operand.

    Args:
        node: Root AST node

    Raises:
        UseOfVoidResultError: If a void node appears in value position
    """
    pending = [node]
    while pending:
        current = pending.pop()
        for operand in current.operands():
            if operand.void:
                raise UseOfVoidResultError(
                    f"'{operand.unparse()}' produces no value and cannot be "
                    f"used in '{current.unparse()}'",
                    operand,
                )
            pending.append(operand)
        pending.extend(current.statements())
