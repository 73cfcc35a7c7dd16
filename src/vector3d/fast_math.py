# vector3d/fast_math.py
import numpy as np

# Bit-level initial guess for 1/sqrt(x) on IEEE-754 single precision
# (Lomont's refinement of the classic 0x5F3759DF).
FAST_INV_SQRT_MAGIC = 0x5F375A86

# Upper bound of |approx - exact| / exact after one Newton-Raphson step.
FAST_INV_SQRT_MAX_RELATIVE_ERROR = 0.001752

_THREE_HALVES = np.float32(1.5)
_HALF = np.float32(0.5)


def _float_bits(value: np.float32) -> int:
    return int(np.array([value], dtype=np.float32).view(np.uint32)[0])


def _bits_float(bits: int) -> np.float32:
    return np.array([bits], dtype=np.uint32).view(np.float32)[0]


def fast_inv_sqrt(number: float) -> np.float32:
    """
    Approximates 1 / sqrt(number) in single precision without a division
    or an exact square root.

    The float's bit pattern is read as an unsigned integer, halved and
    subtracted from FAST_INV_SQRT_MAGIC, which gives a first guess. One
    Newton-Raphson iteration then brings the relative error under
    FAST_INV_SQRT_MAX_RELATIVE_ERROR for any positive normal input.

    Zero returns a large finite value (about 1.98e19); negative and NaN
    inputs return meaningless values. Nothing is raised for either.
    """
    x = np.float32(number)
    bits = (FAST_INV_SQRT_MAGIC - (_float_bits(x) >> 1)) & 0xFFFFFFFF
    y = _bits_float(bits)
    with np.errstate(over="ignore", invalid="ignore"):
        return np.float32(y * (_THREE_HALVES - _HALF * x * y * y))
