from typing import Dict, Iterator, Optional
from ..syntax import ast

# ======================================
# Values & Environment
# ======================================

# The only runtime type: a signed 64-bit integer, truthy when nonzero.
Value = int

class Env:
    def __init__(self, values: Optional[Dict[str, Value]] = None):
        self.values = values if values is not None else {}

    def get(self, name: str) -> Value:
        if name not in self.values:
            raise UndefinedName(name)
        return self.values[name]

    def set(self, name: str, value: Value) -> Value:
        self.values[name] = value
        return value

    def contains(self, name: str) -> bool: return name in self.values

    def names(self) -> Iterator[str]: return iter(sorted(self.values))

    def __repr__(self): return f"Env({self.values})"

    @staticmethod
    def initial(bindings: Optional[Dict[str, Value]] = None) -> 'Env':
        return Env(dict(bindings) if bindings else {})

# ======================================
# Evaluation Errors
# ======================================

class EvalError(Exception): pass

class UndefinedName(EvalError):
    def __init__(self, name: str):
        super().__init__(f"Undefined name '{name}'")
        self.name = name

class NotAssignable(EvalError):
    def __init__(self, expr: ast.Expr):
        super().__init__(f"Cannot assign to {expr}")
        self.expr = expr

class ArityError(EvalError):
    def __init__(self, function: ast.Function, expected: int, got: int):
        super().__init__(f"'{function.name}' expects {expected} arguments, got {got}")
        self.function = function
        self.expected = expected
        self.got = got
