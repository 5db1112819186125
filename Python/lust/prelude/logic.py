from ..runtime.types import Value

def is_true(val: Value) -> bool:
    return val != 0
