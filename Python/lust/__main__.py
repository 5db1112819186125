import sys
import os
from typing import List, Optional

from . import core, lexing, parsing
from .runtime import evaluator as runtime_evaluator
from .runtime.types import Env

OPTIONS = {"debug", "strict"}

def print_usage():
    print("Usage: python -m lust [input-file] [options...]")
    print("Options:")
    print("  debug   trace reading and evaluation on stderr")
    print("  strict  only accept the minimal grammar (+ and if, no variables)")

def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if "-h" in args or "--help" in args:
        print_usage()
        return 0

    options = set(args) & OPTIONS
    paths = [a for a in args if a not in OPTIONS]
    if len(paths) > 1:
        print_usage()
        return 2

    if "debug" in options:
        runtime_evaluator.DEBUG_EVAL = True
        parsing.DEBUG_READ = True

    config = parsing.ReaderConfig.strict() if "strict" in options else parsing.ReaderConfig.default()

    if paths:
        input_path = os.path.abspath(paths[0])
        try:
            source = open(input_path, "rb")
        except OSError as e:
            print(f"Failed to read file: {input_path}", file=sys.stderr)
            print(f"Error: {e}", file=sys.stderr)
            return 1
    else:
        source = sys.stdin.buffer

    if "debug" in options:
        print("=== lust ===", file=sys.stderr)
        print(f"Input: {paths[0] if paths else '<stdin>'}", file=sys.stderr)
        print(f"Config: {config}", file=sys.stderr)

    with source:
        stream = lexing.CharStream(lexing.decode_utf8(source))
        env = core.repl(stream, Env.initial(), config, lambda line: print(line, flush=True))

    if "debug" in options:
        print(f"Final environment: {dict((n, env.get(n)) for n in env.names())}", file=sys.stderr)
    return 0

if __name__ == "__main__":
    sys.exit(main())
