from typing import Iterable
import z3

WIDTH = 64
INT64_MIN = -(1 << (WIDTH - 1))
INT64_MAX = (1 << (WIDTH - 1)) - 1

def fits_int64(val: int) -> bool:
    return INT64_MIN <= val <= INT64_MAX

def from_z3(ref) -> int:
    simp = z3.simplify(ref)
    if isinstance(simp, z3.BitVecNumRef):
        return simp.as_signed_long()
    raise RuntimeError(f"Z3 result not concrete: {simp}")

def to_int64(val: int) -> int:
    # Two's complement truncation to WIDTH bits
    return from_z3(z3.BitVecVal(val, WIDTH))

def bv_add(a: int, b: int) -> int:
    return from_z3(z3.BitVecVal(a, WIDTH) + z3.BitVecVal(b, WIDTH))

def bv_sum(vals: Iterable[int]) -> int:
    acc = 0
    for v in vals:
        acc = bv_add(acc, v)
    return acc
