from typing import Callable, List, Optional, Union
from .lexing import CharStream, ReadError, EndOfInput
from .parsing import ReaderConfig, at_end, read_expr, show_expr
from .runtime import evaluator
from .runtime.types import Env, EvalError, Value

# ======================================
# Read-Eval-Print Driver
# ======================================

Output = Callable[[str], None]

def format_result(result: Union[Value, Exception]) -> str:
    if isinstance(result, Exception):
        return f"error: {result}"
    return str(result)

def read_eval(stream: CharStream, env: Env, config: ReaderConfig) -> Value:
    expr = read_expr(stream, config)
    evaluator.log(f"read {show_expr(expr)}")
    return evaluator.eval_expr(expr, env)

def repl(stream: CharStream, env: Optional[Env] = None, config: Optional[ReaderConfig] = None,
         out: Output = print) -> Env:
    """Reads, evaluates and prints expressions until the stream is exhausted.

    A failing expression is reported and reading resumes wherever the failure
    left the stream, one character later if the failure consumed nothing.
    """
    env = env if env is not None else Env.initial()
    config = config or ReaderConfig.default()
    while True:
        start = stream.position
        try:
            if at_end(stream, config):
                evaluator.log("end of session")
                break
            start = stream.position
            result: Union[Value, Exception] = read_eval(stream, env, config)
        except EndOfInput as e:
            evaluator.log(f"end of session: {e}")
            break
        except ReadError as e:
            result = e
            # A character rejected at expression start would be read again forever
            if stream.position == start:
                stream.advance()
        except EvalError as e:
            result = e
        except RecursionError:
            result = EvalError("expression nested too deeply")
        out(format_result(result))
    return env

def eval_source(text: str, env: Optional[Env] = None, config: Optional[ReaderConfig] = None) -> List[str]:
    """Runs every expression in text and returns the printed lines."""
    lines: List[str] = []
    repl(CharStream.from_string(text), env, config, lines.append)
    return lines
