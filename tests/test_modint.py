import itertools
import unittest
from fractions import Fraction

import pytest

from upoly import GF, Polynomial
from upoly.modint import is_prime


class TestGF(unittest.TestCase):
    def test_literals(self):
        F = GF(7)
        self.assertEqual(0, F(0).value)
        self.assertEqual(1, F(1).value)
        self.assertEqual(6, F(-1).value)
        self.assertEqual(F(3), F(10))
        self.assertEqual(F(3), 3)
        self.assertNotEqual(F(3), 10)

    def test_cached(self):
        self.assertIs(GF(13), GF(13))
        self.assertIsNot(GF(13), GF(11))

    def test_field_laws(self):
        F = GF(11)
        elements = [F(i) for i in range(11)]
        for a, b in itertools.product(elements, repeat=2):
            self.assertEqual(a + b, b + a)
            self.assertEqual(a * b, b * a)
            self.assertEqual(a, (a - b) + b)
            if b != 0:
                self.assertEqual(a, (a / b) * b)
        for a in elements[1:]:
            self.assertEqual(F(1), a * a.inverse())
            self.assertEqual(a.inverse(), a ** -1)

    def test_mixed_with_int(self):
        F = GF(7)
        self.assertEqual(F(5), F(3) + 2)
        self.assertEqual(F(5), 2 + F(3))
        self.assertEqual(F(6), 2 - F(3))
        self.assertEqual(F(6), F(2) * 3)
        self.assertEqual(F(4), 1 / F(2))

    def test_division_by_zero(self):
        F = GF(5)
        with self.assertRaises(ZeroDivisionError):
            F(3) / F(0)
        with self.assertRaises(ZeroDivisionError):
            F(0).inverse()

    def test_different_fields(self):
        with self.assertRaises(ValueError):
            GF(5)(1) + GF(7)(1)
        with self.assertRaises(ValueError):
            GF(5)(GF(7)(1))

    def test_different_fields_compare_unequal(self):
        self.assertNotEqual(GF(5)(1), GF(7)(1))
        self.assertNotIn(Polynomial(GF(5)(1)), [Polynomial(GF(7)(1))])
        self.assertEqual(2, len({GF(5)(1), GF(7)(1)}))
        self.assertEqual(2, len({Polynomial(GF(5)(1), GF(5)(2)), Polynomial(GF(7)(1), GF(7)(2))}))
        with self.assertRaises(TypeError):
            GF(5)(1) < GF(7)(2)

    def test_ordering(self):
        F = GF(7)
        self.assertLess(F(2), F(3))
        self.assertFalse(F(-1) < F(0))
        self.assertEqual([F(0), F(1), F(6)], sorted([F(6), F(1), F(0)]))

    def test_hash(self):
        F = GF(7)
        self.assertEqual(hash(F(3)), hash(F(10)))
        self.assertEqual(1, len({F(3), F(10)}))

    def test_hash_agrees_with_equality(self):
        F = GF(7)
        values = [F(1), F(3), F(8), 1, 3, 8, 10, Polynomial(F(3)), Polynomial(3), Polynomial(10), Polynomial(F(1), F(3))]
        for a, b in itertools.product(values, repeat=2):
            if a == b:
                self.assertEqual(hash(a), hash(b), (a, b))
        self.assertNotEqual(F(1), 8)
        self.assertNotEqual(Polynomial(F(3)), Polynomial(10))
        self.assertEqual(Polynomial(F(3)), Polynomial(3))
        self.assertEqual(1, len({Polynomial(F(3)), Polynomial(3)}))

    def test_str(self):
        self.assertEqual('4', str(GF(5)(-1)))
        self.assertEqual('GF(5)(4)', repr(GF(5)(-1)))

    def test_not_a_number(self):
        self.assertNotEqual(GF(5)(1), Fraction(1, 2))
        with self.assertRaises(TypeError):
            GF(5)(1) + Fraction(1, 2)

    def test_only_integers_convert(self):
        F = GF(7)
        self.assertEqual(F(1), F(True))
        for value in [2.5, 2.0, Fraction(5, 2), "2"]:
            with self.assertRaises(TypeError):
                F(value)


@pytest.mark.parametrize("n", [0, 1, 4, 9, 15, 91])
def test_rejects_composite(n):
    assert not is_prime(n)
    with pytest.raises(ValueError):
        GF(n)


@pytest.mark.parametrize("p", [2, 3, 5, 97, 101])
def test_accepts_prime(p):
    assert GF(p).modulus == p


def test_polynomial_over_gf():
    F = GF(3)
    x = Polynomial.x(F)
    # Frobenius: (x + 1)^3 = x^3 + 1 in characteristic 3.
    assert (x + 1) ** 3 == x ** 3 + 1
    assert ((x + 1) ** 3)(F(2)) == F(0)
    assert str(x * 2 + 1) == "2*x+1"
