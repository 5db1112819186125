import sys
from typing import Dict, Iterable, List, Optional
from .lexing import CharStream, InvalidSyntax, MalformedNumber, EndOfInput
from .syntax import ast
from .prelude import initial_functions
from .z3_ops import bitvec

DEBUG_READ = False

def log(msg: str):
    if DEBUG_READ:
        print(f"[READ] {msg}", file=sys.stderr)

DIGITS = "0123456789"
NAME_PUNCTUATION = "_-!?*"

# ======================================
# Reader Configuration
# ======================================

class ReaderConfig:
    def __init__(self, whitespace: Iterable[str], separators: Iterable[str], terminators: Iterable[str],
                 functions: Dict[str, ast.Function], allow_references: bool):
        self.whitespace = frozenset(whitespace)    # skipped before an expression
        self.separators = frozenset(separators)    # skipped between parameters
        self.terminators = frozenset(terminators)  # end a number or name, left unconsumed
        self.functions = functions
        self.allow_references = allow_references

    @staticmethod
    def default() -> 'ReaderConfig':
        ws = " \n\r"
        return ReaderConfig(
            whitespace=ws,
            separators=ws,
            terminators=ws + ")",
            functions=dict(initial_functions),
            allow_references=True
        )

    @staticmethod
    def strict() -> 'ReaderConfig':
        return ReaderConfig(
            whitespace=" \n\r",
            separators=" ",
            terminators=" )",
            functions={name: f for name, f in initial_functions.items() if name in ("+", "if")},
            allow_references=False
        )

    def __repr__(self):
        return f"ReaderConfig(functions={sorted(self.functions)}, allow_references={self.allow_references})"

def is_name_start(c: str) -> bool:
    return c.isalpha() or c == "_"

def is_name_char(c: str) -> bool:
    return c.isalnum() or c in NAME_PUNCTUATION

# ======================================
# Recursive Descent Reader
# ======================================

def read_expr(stream: CharStream, config: Optional[ReaderConfig] = None) -> ast.Expr:
    config = config or ReaderConfig.default()
    c = stream.peek()
    while c is not None and c in config.whitespace:
        stream.advance()
        c = stream.peek()
    if c is None:
        raise EndOfInput("EOF while reading expr")

    if c == "(":
        stream.advance()
        function = read_function_name(stream, config)
        params = read_function_params(stream, config)
        if function.arity is not None and len(params) != function.arity:
            raise InvalidSyntax(f"'{function.name}' expects {function.arity} arguments, got {len(params)}")
        return ast.Call(function, tuple(params))
    if c in DIGITS or c in "+-":
        return ast.Literal(read_number(stream, config))
    raise InvalidSyntax(f"Invalid input '{c}'")

def read_function_name(stream: CharStream, config: Optional[ReaderConfig] = None) -> ast.Function:
    """Reads a function name up to and including the next space.

    A `)` also ends the name but stays in the stream, so `(+)` is an empty
    call. Exhaustion ends a non-empty name; the caller reports the missing rest.
    """
    config = config or ReaderConfig.default()
    name = ""
    while True:
        c = stream.peek()
        if c is None:
            if not name:
                raise EndOfInput("EOF while reading function name")
            break
        if c == ")":
            break
        stream.advance()
        if c == " ":
            break
        name += c

    function = config.functions.get(name)
    if function is None:
        raise InvalidSyntax(f"Unknown function '{name}'")
    log(f"function {name} -> {function!r}")
    return function

def read_function_params(stream: CharStream, config: Optional[ReaderConfig] = None) -> List[ast.Expr]:
    """Reads parameters up to and including the closing `)`."""
    config = config or ReaderConfig.default()
    params: List[ast.Expr] = []
    while True:
        c = stream.peek()
        if c is None:
            raise EndOfInput("EOF while reading params")
        log(f"Reading param starting with {c!r}")
        if c in DIGITS or c == "-":
            params.append(ast.Literal(read_number(stream, config)))
        elif c == "(":
            params.append(read_expr(stream, config))
        elif c in config.separators:
            stream.advance()
        elif c == ")":
            stream.advance()
            return params
        elif config.allow_references and is_name_start(c):
            params.append(ast.Reference(read_name(stream, config)))
        else:
            raise InvalidSyntax(f"Invalid input '{c}'")

def read_number(stream: CharStream, config: Optional[ReaderConfig] = None) -> int:
    """Reads an optionally negative integer. The terminating character is not consumed."""
    config = config or ReaderConfig.default()
    buf = ""
    while True:
        c = stream.peek()
        if c is None:
            raise EndOfInput(f"EOF while reading number '{buf}'")
        if c == "-":
            buf += c
            stream.advance()
            if len(buf) > 1:
                raise InvalidSyntax(f"invalid number {buf}")
        elif c in DIGITS:
            buf += c
            stream.advance()
        elif c in config.terminators:
            break
        else:
            raise InvalidSyntax(f"Invalid input '{c}'")

    try:
        val = int(buf)
    except ValueError as e:
        raise MalformedNumber(buf) from e
    if not bitvec.fits_int64(val):
        raise MalformedNumber(buf, f"out of range for {bitvec.WIDTH}-bit integer")
    return val

def read_name(stream: CharStream, config: Optional[ReaderConfig] = None) -> str:
    """Reads a variable name. The terminating character is not consumed."""
    config = config or ReaderConfig.default()
    name = ""
    while True:
        c = stream.peek()
        if c is None:
            raise EndOfInput(f"EOF while reading name '{name}'")
        if c in config.terminators:
            break
        if not is_name_char(c):
            raise InvalidSyntax(f"Invalid character '{c}' in name '{name}'")
        name += c
        stream.advance()
    return name

def at_end(stream: CharStream, config: Optional[ReaderConfig] = None) -> bool:
    """Skips whitespace and reports whether the stream is exhausted."""
    config = config or ReaderConfig.default()
    c = stream.peek()
    while c is not None and c in config.whitespace:
        stream.advance()
        c = stream.peek()
    return c is None

def parse_all(text: str, config: Optional[ReaderConfig] = None) -> List[ast.Expr]:
    stream = CharStream.from_string(text)
    exprs = []
    while not at_end(stream, config):
        exprs.append(read_expr(stream, config))
    return exprs

def show_expr(expr: ast.Expr) -> str:
    if isinstance(expr, ast.Literal): return str(expr.value)
    if isinstance(expr, ast.Reference): return expr.name
    if isinstance(expr, ast.Call):
        parts = [expr.function.name] + [show_expr(a) for a in expr.args]
        return f"({' '.join(parts)})"
    return str(expr)
