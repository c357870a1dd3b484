# conv_config.py
import numpy as np
from generic_math import as_int64_sequence, fold_coefficients
from conv_math import linear_convolve, circular_convolve, negacyclic_convolve

class ConvolutionConfiguration:
    def __init__(self, n: int, check_overflow: bool = False):
        """
        :param n: Ring dimension (x^n wraps to +1 or -1), i.e. degree of polynomial + 1
        :param check_overflow: If true, refuse inputs whose int64 accumulation could overflow
        """
        self.n = int(n)
        if self.n < 1:
            raise ValueError("ring dimension n must be >= 1")
        self.check_overflow = bool(check_overflow)

    def is_sequence_valid(self, seq) -> bool:
        """
        Checks that seq is an n long 1d sequence of int64 coefficients
        """
        # type problems are still raised, only a bad length is reported as False
        arr = as_int64_sequence(seq)
        return len(arr) == self.n

    def validate_sequence(self, seq):
        if not self.is_sequence_valid(seq):
            raise ValueError(f"the passed sequence does not have length n={self.n} for this configuration")

    def validate_pair(self, a, b):
        self.validate_sequence(a)
        self.validate_sequence(b)

    def ring_mult(self, a, b, negacyclic: bool = False) -> np.ndarray:
        """Compute a*b mod x^n-1 (or x^n+1 if negacyclic)"""
        self.validate_pair(a, b)
        if negacyclic:
            return negacyclic_convolve(a, b, check_overflow=self.check_overflow)
        return circular_convolve(a, b, check_overflow=self.check_overflow)

    def polynomial_mult(self, a, b) -> np.ndarray:
        """Unreduced product, no length requirement"""
        return linear_convolve(a, b, check_overflow=self.check_overflow)

    def reduce(self, c, negacyclic: bool = False) -> np.ndarray:
        return fold_coefficients(c, self.n, negacyclic)

    def print_summary(self):
        print("ring dimension n =", self.n)
        print("cyclic ring: Z[x]/(x^n - 1), negacyclic ring: Z[x]/(x^n + 1)")
        print("overflow check:", "on" if self.check_overflow else "off")
        print()
