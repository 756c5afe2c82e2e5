"""
Coefficients.

A polynomial can be built over any type T which behaves like a field: it needs the literals 0, 1 and -1, equality,
an ordering (only used to decide signs when printing), negation, and the four arithmetic operations. This module
names that requirement as a protocol, so that it can be used as the bound on the coefficient type variable.

>>> from fractions import Fraction
>>> zero_of(Fraction), one_of(Fraction)
(Fraction(0, 1), Fraction(1, 1))
"""
from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar


class Coefficient(Protocol):
    """The operations a coefficient type must support."""

    def __eq__(self, other: Any) -> bool: ...
    def __lt__(self, other: Any) -> bool: ...
    def __neg__(self) -> Any: ...
    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __truediv__(self, other: Any) -> Any: ...


T = TypeVar('T', bound=Coefficient)

# A ring is anything which turns an integer literal into a coefficient: int, float, Fraction, or GF(p).
Ring = Callable[[int], Any]


def zero_of(ring: Ring):
    return ring(0)


def one_of(ring: Ring):
    return ring(1)


def infer_ring(coeffs) -> Ring:
    """
    The ring of a list of coefficients is the type of its first entry, or int if there are none.

    >>> infer_ring([2.5, 1])
    <class 'float'>
    >>> infer_ring([])
    <class 'int'>
    """
    return type(coeffs[0]) if len(coeffs) > 0 else int
