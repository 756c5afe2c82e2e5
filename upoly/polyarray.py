"""
polyarray: moving polynomials in and out of numpy.

A polynomial c_0 + c_1 x + ... + c_k x^k is the 1D array [c_0, ..., c_k], in the same order as Polynomial.coeffs (note
that this is the reverse of np.polyval's convention, and the same as numpy.polynomial.polynomial).
"""

import numpy as np
import numpy.typing as npt

from .poly import Polynomial


def trim(A: npt.NDArray):
    """
    Trim trailing zeros from a coefficient array, leaving at least one entry.

    >>> trim(np.array([1, 2, 0, 0]))
    array([1, 2])
    >>> trim(np.array([0, 0]))
    array([0])
    """
    assert len(A.shape) == 1, "Coefficient arrays must be one-dimensional."
    last = A.shape[-1]
    while last > 1 and not np.any(A[last - 1]):
        last -= 1

    return A[:last] if last < A.shape[-1] else A


def from_array(A: npt.NDArray) -> Polynomial:
    """
    Build a polynomial from a 1D array of coefficients. The coefficients become Python scalars, and the ring is taken
    from them.

    >>> from_array(np.array([1, 0, 3, 0]))
    Polynomial('3*x^2+1')
    """
    return Polynomial(*trim(np.asarray(A)).tolist())


def to_array(p: Polynomial, dtype=None) -> npt.NDArray:
    """
    >>> to_array(Polynomial(1, 0, 3))
    array([1, 0, 3])
    """
    return np.array(p.coeffs, dtype=dtype)


def zeropad(A: npt.NDArray, D: int):
    """(L,) ↦ (D,) by padding with zeros. Must have L ≤ D or an error will be thrown."""
    assert len(A.shape) == 1 and A.shape[-1] <= D
    result = np.zeros(D, dtype=A.dtype)
    result[:A.shape[-1]] = A
    return result


def evaluate_many(p: Polynomial, xs: npt.ArrayLike) -> npt.NDArray:
    """
    Evaluate a polynomial at an array of points by Horner's method, giving an array of the same shape.

    >>> evaluate_many(Polynomial(1, 0, 1), np.array([[0, 1], [2, 3]]))
    array([[ 1,  2],
           [ 5, 10]])
    """
    xs = np.asarray(xs)
    coeffs = to_array(p)
    result = np.zeros(xs.shape, dtype=np.result_type(coeffs, xs))
    for c in coeffs[::-1]:
        result = result * xs + c

    return result


def stack(ps: list[Polynomial], dtype=None) -> npt.NDArray:
    """
    Pack several polynomials into a 2D array of shape (len(ps), D), where D is the largest size among them, padding
    with zeros.

    >>> stack([Polynomial(1), Polynomial(0, 1, 1)])
    array([[1, 0, 0],
           [0, 1, 1]])
    """
    assert len(ps) >= 1
    D = max(p.size() for p in ps)
    return np.stack([zeropad(to_array(p, dtype=dtype), D) for p in ps])
