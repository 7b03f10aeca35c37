"""
Operator Semantics Playground

Evaluates operator expressions over fixed-width integers, doubles,
characters, strings and booleans, statement by statement, with explicit
overflow, wrapping, short-circuit and range semantics.
"""

__version__ = "0.1.0"


from ._error import *
from ._types import *
from ._value import *
from ._scope import *
from ._check import *
from ._engine import *
from . import ast
from .playground import *
