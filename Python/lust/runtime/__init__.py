from .types import Value, Env, EvalError, UndefinedName, NotAssignable, ArityError
from .evaluator import eval_program, eval_expr, eval_lvalue, call_function

__all__ = [
    "Value", "Env", "EvalError", "UndefinedName", "NotAssignable", "ArityError",
    "eval_program", "eval_expr", "eval_lvalue", "call_function"
]
