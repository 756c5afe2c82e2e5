"""
Prime fields.

GF(p) returns a class whose instances are the integers modulo the prime p. The class can be called with an integer
literal, so it can be used directly as the ring of a polynomial:

>>> F7 = GF(7)
>>> F7(3) / F7(5)
GF(7)(2)
>>> F7(-1)
GF(7)(6)
>>> GF(7) is F7
True
"""
from __future__ import annotations

import dataclasses
import functools
import math


@dataclasses.dataclass(init=False, frozen=True, eq=False)
class ModInt:
    """An element of Z/pZ, stored by its canonical representative in [0, p). Subclasses fix the modulus."""
    value: int
    modulus = 0

    def __init__(self, value: int | ModInt = 0):
        if isinstance(value, ModInt):
            if value.modulus != self.modulus:
                raise ValueError(f"Cannot convert an element of GF({value.modulus}) into GF({self.modulus}).")
            value = value.value
        elif not isinstance(value, int):
            raise TypeError(f"GF({self.modulus}) elements are built from integers, not {type(value).__name__}.")
        object.__setattr__(self, 'value', value % self.modulus)

    def _value_of(self, other) -> int | None:
        if isinstance(other, ModInt):
            if other.modulus != self.modulus:
                raise ValueError(f"Cannot combine elements of GF({self.modulus}) and GF({other.modulus}).")
            return other.value
        if isinstance(other, int):
            return other % self.modulus
        return None

    def __eq__(self, other) -> bool:
        """
        Elements of the same field compare by residue. An integer is equal only to its canonical representative, so
        that equal objects hash alike, and elements of different fields are never equal.

        >>> GF(7)(8) == 1, GF(7)(1) == 8, GF(7)(1) == GF(5)(1)
        (True, False, False)
        """
        if isinstance(other, ModInt):
            return self.modulus == other.modulus and self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other) -> bool:
        if not isinstance(other, (ModInt, int)) or getattr(other, 'modulus', self.modulus) != self.modulus:
            return NotImplemented
        return self.value < int(other)

    def __int__(self) -> int:
        return self.value

    def __add__(self, other):
        value = self._value_of(other)
        if value is None:
            return NotImplemented
        return type(self)(self.value + value)

    __radd__ = __add__

    def __sub__(self, other):
        value = self._value_of(other)
        if value is None:
            return NotImplemented
        return type(self)(self.value - value)

    def __rsub__(self, other):
        value = self._value_of(other)
        if value is None:
            return NotImplemented
        return type(self)(value - self.value)

    def __neg__(self):
        return type(self)(-self.value)

    def __mul__(self, other):
        value = self._value_of(other)
        if value is None:
            return NotImplemented
        return type(self)(self.value * value)

    __rmul__ = __mul__

    def inverse(self) -> ModInt:
        """
        The multiplicative inverse, by Fermat's little theorem.

        >>> GF(11)(2).inverse()
        GF(11)(6)
        """
        if self.value == 0:
            raise ZeroDivisionError(f"0 has no inverse in GF({self.modulus}).")
        return type(self)(pow(self.value, self.modulus - 2, self.modulus))

    def __truediv__(self, other):
        value = self._value_of(other)
        if value is None:
            return NotImplemented
        return self * type(self)(value).inverse()

    def __rtruediv__(self, other):
        value = self._value_of(other)
        if value is None:
            return NotImplemented
        return type(self)(value) * self.inverse()

    def __pow__(self, n: int):
        if n < 0:
            return self.inverse() ** -n
        return type(self)(pow(self.value, n, self.modulus))

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"GF({self.modulus})({self.value})"


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    return all(n % d != 0 for d in range(2, math.isqrt(n) + 1))


@functools.lru_cache(maxsize=None)
def GF(p: int) -> type[ModInt]:
    """Return the class of integers modulo the prime p. Repeated calls give the same class."""
    if not is_prime(p):
        raise ValueError(f"GF(p) needs a prime modulus, but {p} is not prime.")

    return type(f'GF{p}', (ModInt,), {'modulus': p, '__module__': __name__})
