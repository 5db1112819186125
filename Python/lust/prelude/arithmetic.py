from typing import Iterable
from ..runtime.types import Value
from ..z3_ops import bitvec

def add(vals: Iterable[Value]) -> Value:
    # vals may be lazy; each value is pulled in order so an error stops the fold
    return bitvec.bv_sum(vals)
