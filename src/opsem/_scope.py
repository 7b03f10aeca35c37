"""Named bindings for playground evaluation."""

__all__ = ["Binding", "Environment"]

from ._error import ImmutableBindingError, TypeMismatchError, UndefinedNameError


class Binding:
    """Storage slot for a name.

    Args:
        name: (str) Bound name
        value: (Value) Current value
        mutable: (bool) True for `var`, False for `let`
    """
    __slots__ = ("name", "value", "mutable")

    def __init__(self, name, value, mutable):
        self.name = name
        self.value = value
        self.mutable = mutable

    @property
    def type(self):
        """The binding's type is fixed by its first value."""
        return self.value.type

    def __repr__(self):
        keyword = "var" if self.mutable else "let"
        return f"Binding({keyword} {self.name}: {self.type.name} = {self.value.format()})"


class Environment:
    """Lexical scope of bindings with an optional parent.

    Lookups walk outward through parents. Declarations always land in the
    innermost environment, and may shadow an outer name.

    Args:
        parent: (Environment | None) Enclosing scope
    """

    def __init__(self, parent=None):
        self.parent = parent
        self.bindings = {}

    def child(self):
        """Create a nested scope."""
        return Environment(self)

    def declare(self, name, value, mutable):
        """Bind a new name in this scope.

        Redeclaring a name in the same scope replaces it, which is what
        re-running a playground statement would do.
        """
        binding = Binding(name, value, mutable)
        self.bindings[name] = binding
        return binding

    def lookup(self, name):
        """Find the binding for a name.

        Raises:
            UndefinedNameError: If no scope binds the name
        """
        env = self
        while env is not None:
            binding = env.bindings.get(name)
            if binding is not None:
                return binding
            env = env.parent
        raise UndefinedNameError(f"cannot find '{name}' in scope")

    def get(self, name):
        """Current value bound to a name."""
        return self.lookup(name).value

    def assign(self, name, value):
        """Store a new value into an existing `var` binding.

        Raises:
            ImmutableBindingError: If the binding is a `let` constant
            TypeMismatchError: If the value's type differs from the binding's
        """
        binding = self.lookup(name)
        if not binding.mutable:
            raise ImmutableBindingError(
                f"cannot assign to value: '{name}' is a 'let' constant"
            )
        if value.type != binding.type:
            raise TypeMismatchError(
                f"cannot assign value of type '{value.type.name}' to type "
                f"'{binding.type.name}'"
            )
        binding.value = value
        return binding

    def names(self):
        """All visible names, innermost first."""
        seen = {}
        env = self
        while env is not None:
            for name, binding in env.bindings.items():
                seen.setdefault(name, binding)
            env = env.parent
        return seen

    def __contains__(self, name):
        try:
            self.lookup(name)
        except UndefinedNameError:
            return False
        return True

    def __repr__(self):
        depth = 0
        env = self.parent
        while env is not None:
            depth += 1
            env = env.parent
        return f"Environment(depth={depth}, names={list(self.bindings)})"
