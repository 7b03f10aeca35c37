"""Engine for evaluating AST nodes.

The engine is a generic processor for nodes that contain `evaluate`
generators. The generators return `Value` objects and yield child nodes
(or `Compute` requests) for further evaluation. Children are always run
to completion before the parent continues, which gives strict left to
right evaluation without Python recursion per tree level.

The engine doesn't know about operator semantics - it just drives
generators. AST nodes decide what to evaluate and in which order, which
is how short-circuit operators skip their unevaluated operands.
"""

__all__ = ["Engine", "Compute"]

import logging

from . import _check
from ._error import EvalError
from ._scope import Environment
from ._value import VOID

logger = logging.getLogger("opsem.engine")


class Engine:
    """Evaluation engine with a persistent global environment.

    Bindings declared by one `run` stay visible to the next, so a
    sequence of statements behaves like a playground page evaluated top
    to bottom.

    Args:
        env: (Environment | None) Global scope, a new one when omitted

    Attributes:
        env: (Environment) Global scope
        output: (list[str]) Lines written by print statements
    """

    def __init__(self, env=None):
        self.env = env if env is not None else Environment()
        self.output = []

    def run(self, node, env=None):
        """Check and evaluate a node, returning its Value.

        The static check runs first, so misuse of an assignment's result
        is reported before any side effect happens.

        Args:
            node: AST node to evaluate
            env: Optional environment to evaluate in (defaults to global)

        Returns:
            Final Value result from node evaluation

        Raises:
            EvalError: If checking or evaluation fails
        """
        _check.check(node)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Evaluating %s", node.unparse())
        return self.evaluate(node, env)

    def evaluate(self, node, env=None):
        """Evaluate a node without the static check (frame-based evaluation).

        This handles the generator protocol: yielding children, sending
        results back, getting the final result.

        Args:
            node: AST node to evaluate
            env: Optional environment to evaluate in

        Returns:
            Final Value result from node evaluation
        """
        result = VOID  # Set by first StopIteration before use

        newest = _Frame(node, None, env if env is not None else self.env, self)
        current = newest

        while current:
            try:
                # Advance generator - yields a node or Compute request
                if current is newest:
                    request = next(current.gen)
                else:
                    request = current.gen.send(result)

                if not isinstance(request, Compute):
                    request = Compute(request)

                newest = _Frame(request.node, current, request.env, self)
                current = newest

            except StopIteration as e:
                # Handle returned value and step out to parent
                result = e.value
                current = current.previous

            except EvalError as e:
                if e.node is None:
                    e.node = current.node
                _unwind(current)
                raise

        return result


class Compute:
    """Request to evaluate a child AST node.

    Nodes may yield a bare child node, or a Compute when the child needs
    a different environment (block bodies, loop iterations).

    Args:
        node: AST node to evaluate (required)
        env: Environment for the child, inherited when None
    """

    __slots__ = ("node", "env")

    def __init__(self, node, env=None):
        self.node = node
        self.env = env

    def __repr__(self):
        if self.env is not None:
            return f"Compute(node={self.node!r}, env={self.env!r})"
        return f"Compute(node={self.node!r})"


class _Frame:
    """Evaluation frame - represents one step in the call stack.

    Frames form a linked list through `previous`, eliminating the need for
    a separate stack. The generator is created during initialization.

    Args:
        node: AST node being evaluated
        previous: Parent frame (None for root)
        env: Environment for this frame, None to inherit from the parent
        engine: Engine that owns the evaluation
    """
    __slots__ = ("node", "gen", "previous", "env", "engine")

    def __init__(self, node, previous, env, engine):
        self.node = node
        self.previous = previous
        self.engine = engine
        if env is None:
            env = previous.env
        self.env = env
        self.gen = node.evaluate(self)

    def write(self, text):
        """Append a line of program output."""
        logger.debug("print: %s", text)
        self.engine.output.append(text)

    def __repr__(self):
        depth = 0
        frame = self
        while frame.previous:
            depth += 1
            frame = frame.previous
        return f"_Frame(depth={depth}, node={self.node!r})"


def _unwind(frame):
    """Close every suspended generator from frame outward."""
    while frame is not None:
        frame.gen.close()
        frame = frame.previous
