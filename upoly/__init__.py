from .euclid import EuclidStep, monic_gcd, remainder_sequence, remainder_table
from .modint import GF, ModInt
from .poly import Polynomial

__all__ = [
    "EuclidStep",
    "GF",
    "ModInt",
    "Polynomial",
    "monic_gcd",
    "remainder_sequence",
    "remainder_table",
]
