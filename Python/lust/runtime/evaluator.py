import sys
from typing import List, Sequence
from ..syntax import ast
from .types import Value, Env, NotAssignable
from .. import prelude

DEBUG_EVAL = False

def log(msg: str):
    if DEBUG_EVAL:
        print(f"[EVAL] {msg}", file=sys.stderr)

def eval_expr(expr: ast.Expr, env: Env) -> Value:
    """Evaluates expr against env. Assignments nested anywhere in expr are
    visible to everything evaluated after them, including later siblings.
    """
    if isinstance(expr, ast.Literal):
        return expr.value
    if isinstance(expr, ast.Reference):
        val = env.get(expr.name)
        log(f"{expr.name} -> {val}")
        return val
    if isinstance(expr, ast.Call):
        return call_function(expr.function, expr.args, env)
    raise TypeError(f"Not an expression: {expr!r}")

def eval_lvalue(expr: ast.Expr, env: Env) -> str:
    """Returns the environment slot named by expr. Only references are assignable."""
    if isinstance(expr, ast.Reference):
        return expr.name
    raise NotAssignable(expr)

def call_function(function: ast.Function, args: Sequence[ast.Expr], env: Env) -> Value:
    log(f"call {function.name} with {len(args)} args")
    prelude.check_arity(function, args)

    if isinstance(function, ast.Add):
        return prelude.eval_add(eval_expr(arg, env) for arg in args)

    if isinstance(function, ast.If):
        cond, then_branch, else_branch = args
        if prelude.is_true(eval_expr(cond, env)):
            log("  -> then branch")
            return eval_expr(then_branch, env)
        log("  -> else branch")
        return eval_expr(else_branch, env)

    if isinstance(function, ast.Set):
        target, value_expr = args
        name = eval_lvalue(target, env)
        val = env.set(name, eval_expr(value_expr, env))
        log(f"  {name} := {val}")
        return val

    raise TypeError(f"Not a function: {function!r}")

def eval_program(exprs: Sequence[ast.Expr], env: Env) -> List[Value]:
    results = []
    for i, expr in enumerate(exprs):
        log(f"Evaluating stmt {i}: {expr}")
        results.append(eval_expr(expr, env))
    return results
