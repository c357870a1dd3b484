import numpy as np
from generic_math import as_int64_sequence, wrapped_index, check_accumulation_bound


def _validate_same_length(a: np.ndarray, b: np.ndarray):
    if len(a) != len(b):
        raise ValueError(f"Input sequences must have the same length ({len(a)} != {len(b)})")
    if len(a) == 0:
        raise ValueError("Input sequences must not be empty")


def linear_convolve(a, b, check_overflow: bool = False) -> np.ndarray:
    """Compute the coefficients of A(x)*B(x) (discrete linear convolution)

    :param a: coefficients of A, lowest degree first
    :param b: coefficients of B, lowest degree first
    :param check_overflow: raise OverflowError if int64 accumulation could overflow
    :return: int64 array of length len(a)+len(b)-1
    """
    a = as_int64_sequence(a, "a")
    b = as_int64_sequence(b, "b")
    n, m = len(a), len(b)
    if n == 0 or m == 0:
        raise ValueError("Input sequences must not be empty")
    if check_overflow:
        check_accumulation_bound(a, b, min(n, m))
    result = np.zeros(n + m - 1, dtype=np.int64)
    # row i adds a[i]*b[j] into result[i+j] for every j
    for i in range(n):
        result[i:i + m] += a[i] * b
    return result


def circular_convolve(a, b, check_overflow: bool = False) -> np.ndarray:
    """Positive wrapped convolution, i.e. a*b in Z[x]/(x^n - 1)

    R[x] = sum_i a[i] * b[(x - i) mod n]
    """
    a = as_int64_sequence(a, "a")
    b = as_int64_sequence(b, "b")
    _validate_same_length(a, b)
    n = len(a)
    if check_overflow:
        check_accumulation_bound(a, b, n)
    result = np.zeros(n, dtype=np.int64)
    x = np.arange(n)
    for i in range(n):
        j = wrapped_index(x, i, n)
        result += a[i] * b[j]
    return result


def negacyclic_convolve(a, b, check_overflow: bool = False) -> np.ndarray:
    """Negative wrapped convolution, a*b in Z[x]/(x^n + 1). Terms that wrap past x^n are negated"""
    a = as_int64_sequence(a, "a")
    b = as_int64_sequence(b, "b")
    _validate_same_length(a, b)
    n = len(a)
    if check_overflow:
        check_accumulation_bound(a, b, n)
    result = np.zeros(n, dtype=np.int64)
    x = np.arange(n)
    for i in range(n):
        j = wrapped_index(x, i, n)
        # x < i means i + j == x + n, so x^n = -1 flips the sign
        sign = np.where(x < i, -1, 1).astype(np.int64)
        result += sign * (a[i] * b[j])
    return result
