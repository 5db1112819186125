from ..syntax.ast import Add, If, Set
from . import arithmetic, logic, primitives

# Reader spellings of the built-in functions
initial_functions = {f.name: f for f in (Add(), If(), Set())}

eval_add = arithmetic.add
is_true = logic.is_true
check_arity = primitives.check_arity
