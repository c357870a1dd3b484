# generic_math.py
import numpy as np
from collections.abc import Iterable

INT64_MAX = int(np.iinfo(np.int64).max)
INT64_MIN = int(np.iinfo(np.int64).min)


def is_int64_range(x) -> bool:
    return INT64_MIN <= int(x) <= INT64_MAX

def as_int64_sequence(seq: Iterable, name: str = "sequence") -> np.ndarray:
    """Return seq as a 1d int64 np.ndarray (no copy if it already is one), callers must not write to it.

    Raises TypeError for non integer elements and ValueError for anything that is not 1d.
    """
    arr = np.asarray(seq)
    if (not isinstance(seq, np.ndarray) and arr.ndim == 1 and arr.dtype.kind == 'f'
            and all(isinstance(x, int) and not isinstance(x, bool) for x in seq)):
        # mixed huge/negative python ints fall back to float64, keep them exact
        arr = np.asarray(seq, dtype=object)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1d, got shape {arr.shape}")
    if arr.size == 0:
        # np.asarray([]) is float64, an empty list is still a valid (if degenerate) sequence
        return np.zeros(0, dtype=np.int64)
    if arr.dtype == object:
        # python ints that do not fit a numpy integer dtype land here
        if not all(isinstance(x, (int, np.integer)) and not isinstance(x, bool) for x in arr):
            raise TypeError(f"{name} must contain integers")
        if not all(is_int64_range(x) for x in arr):
            raise OverflowError(f"{name} has coefficients outside the int64 range")
        return arr.astype(np.int64)
    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"{name} must contain integers, got dtype {arr.dtype}")
    if arr.dtype == np.uint64 and arr.max() > INT64_MAX:
        raise OverflowError(f"{name} has coefficients outside the int64 range")
    return arr.astype(np.int64, copy=False)

def wrapped_index(x, i, n):
    """(x - i) mod n for 0 <= x, i < n, written as (x + n - i) % n.

    Works elementwise when x (or i) is an np.ndarray.
    """
    pre = x + n - i # in [1, 2n-1], never negative
    assert np.all(pre >= 0), "negative index before modulo"
    return pre % n

def fold_coefficients(c: Iterable, n: int, negacyclic: bool = False) -> np.ndarray:
    """Reduce a coefficient sequence modulo x^n - 1 (or x^n + 1 if negacyclic)

    Coefficient k lands in slot k % n. In the negacyclic ring x^n = -1 so it
    picks up a sign of (-1)^(k // n).
    """
    n = int(n)
    if n < 1:
        raise ValueError("n must be >= 1")
    c = as_int64_sequence(c, "c")
    res = np.zeros(n, dtype=np.int64)
    for start in range(0, len(c), n):
        block = c[start:start + n]
        if negacyclic and (start // n) % 2 == 1:
            res[:len(block)] -= block
        else:
            res[:len(block)] += block
    return res

def accumulation_bound(a: np.ndarray, b: np.ndarray, terms: int) -> int:
    """Upper bound on |sum of `terms` products a[i]*b[j]| computed with python ints"""
    if len(a) == 0 or len(b) == 0:
        return 0
    max_a = max(abs(int(x)) for x in a)
    max_b = max(abs(int(x)) for x in b)
    return max_a * max_b * int(terms)

def check_accumulation_bound(a: np.ndarray, b: np.ndarray, terms: int):
    bound = accumulation_bound(a, b, terms)
    if bound > INT64_MAX:
        raise OverflowError(
            f"convolution may overflow int64 (bound {bound} > {INT64_MAX})"
        )
