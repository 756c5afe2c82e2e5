"""
Dense univariate polynomials.

In this module a polynomial is represented by a tuple of coefficients starting with the constant term, so that
1 - 2x + x^3 is stored as (1, -2, 0, 1). The coefficients may be of any type which behaves like a field (see
upoly.coefficient): exact types such as Fraction or GF(p) make every operation exact, while int and float coefficients
get whatever Python's own arithmetic gives them.
"""
from __future__ import annotations

import dataclasses
import itertools
from typing import Callable, Generic, Iterable, Iterator, Literal

from .coefficient import Ring, T, infer_ring, one_of, zero_of


@dataclasses.dataclass(init=False, eq=False)
class Polynomial(Generic[T]):
    """
    A polynomial in one variable, represented by a dense tuple of coefficients starting with the constant term. Thus
    Polynomial(1) is the constant 1, and Polynomial(0, 1) is the variable x.

    >>> Polynomial(1, 0, 1)
    Polynomial('x^2+1')
    >>> Polynomial(-1, 2, 0, 0)
    Polynomial('2*x-1')

    The tuple is never empty, and never has a trailing zero unless it is the zero polynomial (0,). Alongside the
    coefficients we keep the ring, which is used to produce zeros when padding, and defaults to the type of the
    first coefficient. A ring passed explicitly is also applied to each coefficient.

    >>> Polynomial(0, 0, 0).coeffs
    (0,)
    >>> Polynomial().degree(), Polynomial(7).degree(), Polynomial(0, 1).degree()
    (-1, 0, 1)
    >>> from fractions import Fraction
    >>> Polynomial(1, 2, ring=Fraction).coeffs
    (Fraction(1, 1), Fraction(2, 1))
    """
    coeffs: tuple[T, ...]
    ring: Ring

    def __init__(self, *args: T, ring: Ring | None = None):
        if ring is None:
            ring = infer_ring(args)
        else:
            args = tuple(ring(c) for c in args)
        self._normalise(args, ring)

    @classmethod
    def _build(cls, coeffs: Iterable[T], ring: Ring) -> Polynomial[T]:
        # Results of arithmetic keep whatever type the coefficient operations produced.
        p = cls.__new__(cls)
        p._normalise(tuple(coeffs), ring)
        return p

    def _normalise(self, args: tuple[T, ...], ring: Ring):
        zero = zero_of(ring)

        # Trim trailing zeros, stopping at the constant term.
        end = len(args)
        while end > 1 and args[end - 1] == zero:
            end -= 1

        self.coeffs = args[:end] if end >= 1 and not (end == 1 and args[0] == zero) else (zero,)
        self.ring = ring

    @classmethod
    def from_coeffs(cls, coeffs: Iterable[T], ring: Ring | None = None) -> Polynomial[T]:
        """
        Build a polynomial from any iterable of coefficients, constant term first.

        >>> Polynomial.from_coeffs(iter([3, 2, 1]))
        Polynomial('x^2+2*x+3')
        """
        return cls(*coeffs, ring=ring)

    @classmethod
    def from_range(cls, source: Iterable[T], first: int, last: int, ring: Ring | None = None) -> Polynomial[T]:
        """
        Build a polynomial from the positions [first, last) of a source of coefficients.

        >>> Polynomial.from_range([9, 1, 0, 1, 9], 1, 4)
        Polynomial('x^2+1')
        """
        if not 0 <= first <= last:
            raise ValueError(f"Invalid coefficient range [{first}, {last}).")
        return cls(*itertools.islice(source, first, last), ring=ring)

    @classmethod
    def x(cls, ring: Ring = int) -> Polynomial:
        """The polynomial x, with coefficients in the given ring."""
        return cls(zero_of(ring), one_of(ring), ring=ring)

    @staticmethod
    def coerce(other: T | Polynomial[T], ring: Ring) -> Polynomial[T]:
        """Treat a scalar as a polynomial of degree 0 (or the zero polynomial), and pass polynomials through."""
        if isinstance(other, Polynomial):
            return other
        return Polynomial._build((other,), ring)

    @property
    def _zero(self) -> T:
        return zero_of(self.ring)

    def _lift(self, other: T | Polynomial[T]) -> Polynomial[T]:
        return Polynomial.coerce(other, self.ring)

    def is_zero(self) -> bool:
        return len(self.coeffs) == 1 and self.coeffs[0] == self._zero

    def degree(self) -> int:
        """The degree of a polynomial is the degree of its leading term. The zero polynomial has degree -1."""
        return -1 if self.is_zero() else len(self.coeffs) - 1

    def size(self) -> int:
        """The number of stored coefficients: one more than the degree, or 1 for the zero polynomial."""
        return len(self.coeffs)

    def leading(self) -> T:
        return self.coeffs[-1]

    def coeff(self, i: int) -> T:
        """
        The coefficient of x^i, which is zero for any i past the degree.

        >>> p = Polynomial(4, 5)
        >>> p.coeff(1), p.coeff(2), p.coeff(100)
        (5, 0, 0)
        """
        if i < 0:
            raise IndexError(f"Coefficient index {i} is negative.")
        return self.coeffs[i] if i < len(self.coeffs) else self._zero

    __getitem__ = coeff

    def __len__(self) -> int:
        return len(self.coeffs)

    def __iter__(self) -> Iterator[T]:
        return iter(self.coeffs)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other) -> bool:
        """
        Polynomials are equal when their coefficients are. A scalar is compared as a constant polynomial.

        >>> Polynomial(0, 1) == Polynomial(0, 1, 0)
        True
        >>> Polynomial(3) == 3, Polynomial() == 0
        (True, True)
        """
        return self.coeffs == self._lift(other).coeffs

    def __hash__(self) -> int:
        # Constant polynomials hash like the scalar they are equal to.
        return hash(self.coeffs[0]) if len(self.coeffs) == 1 else hash(self.coeffs)

    def map(self, f: Callable[[T], T], ring: Ring | None = None) -> Polynomial:
        """
        Map a function over the coefficients, optionally changing the ring.
        Takes a + bx + cx^2 to f(a) + f(b) x + f(c) x^2.

        >>> Polynomial(1, 2, 3).map(lambda c: c % 2)
        Polynomial('x^2+1')
        """
        if ring is not None:
            return Polynomial(*(f(c) for c in self.coeffs), ring=ring)
        return Polynomial._build((f(c) for c in self.coeffs), self.ring)

    def __add__(self, other: T | Polynomial[T]) -> Polynomial[T]:
        other = self._lift(other)
        return Polynomial._build(
            (c + d for c, d in itertools.zip_longest(self.coeffs, other.coeffs, fillvalue=self._zero)),
            self.ring,
        )

    def __sub__(self, other: T | Polynomial[T]) -> Polynomial[T]:
        other = self._lift(other)
        return Polynomial._build(
            (c - d for c, d in itertools.zip_longest(self.coeffs, other.coeffs, fillvalue=self._zero)),
            self.ring,
        )

    def __rsub__(self, other: T | Polynomial[T]) -> Polynomial[T]:
        return self._lift(other) - self

    def __neg__(self) -> Polynomial[T]:
        return Polynomial._build((-c for c in self.coeffs), self.ring)

    def __mul__(self, other: T | Polynomial[T]) -> Polynomial[T]:
        """
        >>> Polynomial(1, 1) * Polynomial(-1, 1)
        Polynomial('x^2-1')
        >>> 3 * Polynomial(0, 1)
        Polynomial('3*x')
        """
        other = self._lift(other)
        result = [self._zero] * (len(self.coeffs) + len(other.coeffs))
        for (i, c), (j, d) in itertools.product(enumerate(self.coeffs), enumerate(other.coeffs)):
            result[i + j] += c * d
        return Polynomial._build(result, self.ring)

    def __rmul__(self, other: T | Polynomial[T]) -> Polynomial[T]:
        return self._lift(other) * self

    __radd__ = __add__

    def __pow__(self, n: int) -> Polynomial[T]:
        if n < 0:
            raise ValueError("Cannot invert a polynomial.")
        if n == 0:
            return Polynomial._build((one_of(self.ring),), self.ring)
        if n == 1:
            return self

        sqrt = self ** (n // 2)
        return sqrt * sqrt if n % 2 == 0 else sqrt * sqrt * self

    def evaluate(self, x):
        """
        Evaluate the polynomial at some point by Horner's method. The point can be anything which can be multiplied
        by and added to the coefficients, for instance a numpy array.

        >>> Polynomial(1, 0, 2).evaluate(3)
        19
        """
        result = self._zero
        for c in reversed(self.coeffs):
            result = result * x + c
        return result

    __call__ = evaluate

    def compose(self, other: T | Polynomial[T]) -> Polynomial[T]:
        """
        Substitute another polynomial for the variable, giving x ↦ self(other(x)).

        >>> Polynomial(1, 0, 1).compose(Polynomial(1, 1))
        Polynomial('x^2+2*x+2')
        >>> Polynomial(0, 2) & Polynomial(5, 0, 1)
        Polynomial('2*x^2+10')
        """
        other = self._lift(other)
        result = Polynomial(ring=self.ring)
        for c in reversed(self.coeffs):
            result = result * other + c
        return result

    __and__ = compose

    def __divmod__(self, other: T | Polynomial[T]) -> tuple[Polynomial[T], Polynomial[T]]:
        """
        Return the quotient and remainder of long division, i.e. the solution of n = dq + r where deg(r) < deg(d).
        The coefficients should come from a field: each step divides leading coefficients with their own '/'.

        >>> from fractions import Fraction as F
        >>> divmod(Polynomial(F(-1), F(0), F(1)), Polynomial(F(1), F(1)))      # x^2 - 1 / x + 1
        (Polynomial('x-1'), Polynomial('0'))
        >>> divmod(Polynomial(F(1), F(0), F(1)), Polynomial(F(0), F(2)))       # x^2 + 1 / 2x
        (Polynomial('1/2*x'), Polynomial('1'))
        >>> divmod(Polynomial(F(1)), Polynomial(F(0)))
        Traceback (most recent call last):
        ...
        ZeroDivisionError: polynomial division by zero
        """
        d = self._lift(other)
        if d.is_zero():
            raise ZeroDivisionError("polynomial division by zero")

        zero = self._zero
        q, r = Polynomial(ring=self.ring), self
        while r.degree() >= d.degree():
            t_deg = r.degree() - d.degree()
            tt = Polynomial._build((zero,) * t_deg + (r.leading() / d.leading(),), self.ring)
            q = q + tt

            # The leading term of r cancels by construction. Drop it rather than trusting the arithmetic to give an
            # exact zero, so that the degree of r always goes down.
            r = Polynomial._build((r - tt * d).coeffs[:r.degree()], self.ring)

        return q, r

    def __rdivmod__(self, other: T | Polynomial[T]) -> tuple[Polynomial[T], Polynomial[T]]:
        return divmod(self._lift(other), self)

    def __truediv__(self, other: T | Polynomial[T]) -> Polynomial[T]:
        """
        The quotient of long division. Dividing by a scalar divides each coefficient by it.

        >>> from fractions import Fraction as F
        >>> Polynomial(F(2), F(4), F(6)) / 2
        Polynomial('3*x^2+2*x+1')
        """
        return divmod(self, other)[0]

    def __rtruediv__(self, other: T | Polynomial[T]) -> Polynomial[T]:
        return divmod(self._lift(other), self)[0]

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other: T | Polynomial[T]) -> Polynomial[T]:
        return divmod(self, other)[1]

    def __rmod__(self, other: T | Polynomial[T]) -> Polynomial[T]:
        return divmod(self._lift(other), self)[1]

    def monic(self) -> Polynomial[T]:
        """
        Scale so that the leading coefficient is 1. The zero polynomial is left alone.

        >>> from fractions import Fraction as F
        >>> Polynomial(F(3), F(6), F(3)).monic()
        Polynomial('x^2+2*x+1')
        """
        if self.is_zero():
            return self
        return self / self.leading()

    def fmt(self, var: str = 'x', mode: Literal[None, 'latex'] = None) -> str:
        """
        Format the polynomial highest degree first, leaving out zero terms, unit coefficients, x^1 and x^0.

        >>> Polynomial(-1, 0, -3).fmt()
        '-3*x^2-1'
        >>> Polynomial(1, -1).fmt(var='t')
        '-t+1'
        >>> Polynomial(0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2).fmt(mode='latex')
        '2x^{10}'
        """
        zero = self._zero
        if self.coeffs[-1] == zero:
            return str(zero)

        power_fmt = '{}^{}' if mode is None else '{}^{{{}}}'
        times = '*' if mode is None else ''
        one = one_of(self.ring)
        top = len(self.coeffs) - 1

        parts: list[str] = []
        for i, c in reversed(list(enumerate(self.coeffs))):
            if c == zero:
                continue

            if c < zero:
                sign = '-'
                coeff = '' if (i != 0 and -c == one) else f'{-c}'
            else:
                sign = '' if i == top else '+'
                coeff = '' if (i != 0 and c == one) else f'{c}'
            term = '' if i == 0 else var if i == 1 else power_fmt.format(var, i)
            parts += [sign + coeff + (times if coeff and term else '') + term]

        return ''.join(parts)

    def __str__(self):
        return self.fmt()

    def __repr__(self):
        return f"Polynomial('{self.fmt()}')"

    def _repr_latex_(self):
        return self.fmt(mode='latex')
