from dataclasses import dataclass
from typing import Optional, Tuple

# ======================================
# Function Nodes
# ======================================

class Function:
    name: str = ""
    arity: Optional[int] = None  # None means variadic

@dataclass(frozen=True)
class Add(Function):
    name = "+"
    arity = None
    def __repr__(self): return "Add"

@dataclass(frozen=True)
class If(Function):
    name = "if"
    arity = 3
    def __repr__(self): return "If"

@dataclass(frozen=True)
class Set(Function):
    name = "set!"
    arity = 2
    def __repr__(self): return "Set"

# ======================================
# Expression Nodes
# ======================================

class Expr: pass

@dataclass(frozen=True)
class Literal(Expr):
    value: int
    def __repr__(self): return f"Literal({self.value})"

@dataclass(frozen=True)
class Reference(Expr):
    name: str
    def __repr__(self): return f"Reference({self.name})"

@dataclass(frozen=True)
class Call(Expr):
    function: Function
    args: Tuple[Expr, ...] = ()
    def __repr__(self): return f"Call({self.function}, {list(self.args)})"
