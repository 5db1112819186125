from typing import Sequence
from ..syntax import ast
from ..runtime.types import ArityError

def check_arity(function: ast.Function, args: Sequence[ast.Expr]):
    if function.arity is not None and len(args) != function.arity:
        raise ArityError(function, function.arity, len(args))
