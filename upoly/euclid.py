"""
The Euclidean algorithm for polynomials.

Over a field, repeatedly replacing (a, b) by (b, a mod b) ends with the last nonzero remainder, which is a greatest
common divisor of a and b. Scaling it to be monic makes it unique.

>>> from fractions import Fraction as F
>>> a = Polynomial(F(-1), F(0), F(1))      # (x - 1)(x + 1)
>>> b = Polynomial(F(2), F(-3), F(1))      # (x - 1)(x - 2)
>>> monic_gcd(a, b)
Polynomial('x-1')
"""
from __future__ import annotations

import dataclasses

import pandas as pd

from .coefficient import T
from .poly import Polynomial


def monic_gcd(a: Polynomial[T], b: Polynomial[T] | T) -> Polynomial[T]:
    """
    Run the Euclidean algorithm on (a, b) and return the last nonzero remainder scaled to be monic. When both
    arguments are zero there is nothing to scale, and the zero polynomial is returned.

    >>> from fractions import Fraction as F
    >>> monic_gcd(Polynomial(F(1), F(1)), Polynomial(F(-1), F(1)))
    Polynomial('1')
    >>> monic_gcd(Polynomial(F(0), F(2)), Polynomial(F(0)))
    Polynomial('x')
    """
    b = Polynomial.coerce(b, a.ring)
    while not b.is_zero():
        a, b = b, a % b

    return a.monic()


@dataclasses.dataclass(frozen=True)
class EuclidStep:
    """One division in the Euclidean algorithm: dividend = quotient * divisor + remainder."""
    dividend: Polynomial
    divisor: Polynomial
    quotient: Polynomial
    remainder: Polynomial


def remainder_sequence(a: Polynomial[T], b: Polynomial[T] | T) -> list[EuclidStep]:
    """
    The divisions performed by the Euclidean algorithm on (a, b), in order. The remainder of the final step is zero,
    and its divisor is the (not necessarily monic) greatest common divisor.

    >>> from fractions import Fraction as F
    >>> [str(step.remainder) for step in remainder_sequence(Polynomial(F(1), F(0), F(1)), Polynomial(F(1), F(1)))]
    ['2', '0']
    """
    b = Polynomial.coerce(b, a.ring)
    steps: list[EuclidStep] = []
    while not b.is_zero():
        q, r = divmod(a, b)
        steps.append(EuclidStep(dividend=a, divisor=b, quotient=q, remainder=r))
        a, b = b, r

    return steps


def remainder_table(a: Polynomial[T], b: Polynomial[T] | T) -> pd.DataFrame:
    """Retrieve a DataFrame describing each step of the Euclidean algorithm on (a, b), with polynomials as strings."""
    return pd.DataFrame(
        columns=['step', 'dividend', 'divisor', 'quotient', 'remainder', 'degree'],
        data=[
            (
                i,
                str(step.dividend),
                str(step.divisor),
                str(step.quotient),
                str(step.remainder),
                step.remainder.degree(),
            )
            for i, step in enumerate(remainder_sequence(a, b))
        ],
    )
