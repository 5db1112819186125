from .lexing import CharStream, decode_utf8, ReadError, StreamError, InvalidSyntax, MalformedNumber, EndOfInput
from .parsing import ReaderConfig, read_expr, read_function_name, read_function_params, read_number, parse_all, show_expr
from .syntax.ast import Expr, Literal, Reference, Call, Function, Add, If, Set
from .runtime import Env, EvalError, UndefinedName, NotAssignable, ArityError, eval_expr, eval_lvalue, call_function, eval_program
from .core import repl, eval_source

__all__ = [
    "CharStream", "decode_utf8",
    "ReadError", "StreamError", "InvalidSyntax", "MalformedNumber", "EndOfInput",
    "ReaderConfig", "read_expr", "read_function_name", "read_function_params", "read_number",
    "parse_all", "show_expr",
    "Expr", "Literal", "Reference", "Call",
    "Function", "Add", "If", "Set",
    "Env", "EvalError", "UndefinedName", "NotAssignable", "ArityError",
    "eval_expr", "eval_lvalue", "call_function", "eval_program",
    "repl", "eval_source"
]
