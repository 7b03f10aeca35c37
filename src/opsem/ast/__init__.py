"""AST nodes designed for evaluation."""

from ._base import *
from ._literal import *
from ._ident import *
from ._op import *
from ._struct import *
from ._stmt import *
