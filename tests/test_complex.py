"""Tests for radixfft.complex_number – arithmetic, trigonometry, IEEE edges."""

import cmath
import math
import unittest

from radixfft.complex_number import I, Complex


def _setup():
    return Complex(5.0, 3.0), Complex(2.0, 7.0)


class TestArithmetic(unittest.TestCase):
    def test_add(self):
        a, b = _setup()
        self.assertEqual(a + b, Complex(7.0, 10.0))
        self.assertEqual(a.add(b), Complex(7.0, 10.0))

    def test_sub(self):
        a, b = _setup()
        self.assertEqual(a - b, Complex(3.0, -4.0))

    def test_mul(self):
        a, b = _setup()
        self.assertEqual(a * b, Complex(-11.0, 41.0))

    def test_mul_example(self):
        self.assertEqual(Complex(3, 2) * Complex(4, -1), Complex(14.0, 5.0))

    def test_i_squared(self):
        self.assertEqual(I * I, Complex(-1.0, 0.0))
        self.assertEqual(Complex.i(), Complex(0.0, 1.0))

    def test_div(self):
        a, _ = _setup()
        self.assertEqual(a / 2.0, Complex(2.5, 1.5))

    def test_mod(self):
        a, _ = _setup()
        self.assertEqual(a % 2.0, Complex(1.0, 1.0))

    def test_mod_truncates_toward_zero(self):
        self.assertEqual(Complex(-5.0, 3.0).mod(2.0), Complex(-1.0, 1.0))

    def test_compound_assignment(self):
        a, b = _setup()
        original = a
        a += b
        self.assertEqual(a, Complex(7.0, 10.0))
        self.assertEqual(original, Complex(5.0, 3.0))
        a -= b
        a *= b
        self.assertEqual(a, Complex(-11.0, 41.0))
        a /= 2.0
        self.assertEqual(a, Complex(-5.5, 20.5))
        a %= 2.0
        self.assertEqual(a, Complex(-1.5, 0.5))

    def test_named_in_place_forms(self):
        a, b = _setup()
        self.assertEqual(a.iadd(b), Complex(7.0, 10.0))
        self.assertEqual(a.isub(b), Complex(3.0, -4.0))
        self.assertEqual(a.imul(b), Complex(-11.0, 41.0))
        self.assertEqual(a.idiv(2.0), Complex(2.5, 1.5))
        self.assertEqual(a.imod(2.0), Complex(1.0, 1.0))

    def test_mixed_types_rejected(self):
        with self.assertRaises(TypeError):
            Complex(1, 1) + 1.0
        with self.assertRaises(TypeError):
            Complex(1, 1) / Complex(1, 0)


class TestValueSemantics(unittest.TestCase):
    def test_immutable(self):
        z = Complex(1.0, 2.0)
        with self.assertRaises(AttributeError):
            z.re = 3.0
        with self.assertRaises(AttributeError):
            z._im = 3.0

    def test_exact_equality(self):
        self.assertNotEqual(Complex(0.1 + 0.2, 0.0), Complex(0.3, 0.0))
        nan = float("nan")
        self.assertNotEqual(Complex(nan, 0.0), Complex(nan, 0.0))

    def test_hash_matches_equality(self):
        self.assertEqual(hash(Complex(1.0, 2.0)), hash(Complex(1, 2)))
        self.assertEqual(len({Complex(1.0, 2.0), Complex(1, 2)}), 1)

    def test_conversions(self):
        z = Complex(1.5, -2.0)
        self.assertEqual(complex(z), complex(1.5, -2.0))
        self.assertEqual(tuple(z), (1.5, -2.0))
        self.assertEqual(Complex.from_complex(3 - 4j), Complex(3.0, -4.0))
        self.assertEqual(Complex.from_complex(2), Complex(2.0, 0.0))
        self.assertIs(Complex.from_complex(z), z)
        self.assertEqual(repr(z), "Complex(1.5, -2.0)")


class TestNormAndPolar(unittest.TestCase):
    def test_norm(self):
        self.assertEqual(Complex(3.0, 4.0).norm(), 5.0)

    def test_norm_does_not_overflow(self):
        self.assertAlmostEqual(Complex(3e200, 4e200).norm() / 5e200, 1.0)

    def test_from_polar(self):
        z = Complex.from_polar(2.0, math.pi / 2)
        self.assertAlmostEqual(z.re, 0.0, places=12)
        self.assertAlmostEqual(z.im, 2.0, places=12)


class TestTrigonometry(unittest.TestCase):
    def _assert_close(self, ours, ref):
        self.assertAlmostEqual(ours.re, ref.real, places=10)
        self.assertAlmostEqual(ours.im, ref.imag, places=10)

    def test_sin(self):
        for z in (0.5 + 0.25j, -1.2 + 2.0j, 3.0 - 0.7j):
            self._assert_close(Complex.from_complex(z).sin(), cmath.sin(z))

    def test_cos(self):
        for z in (0.5 + 0.25j, -1.2 + 2.0j, 3.0 - 0.7j):
            self._assert_close(Complex.from_complex(z).cos(), cmath.cos(z))

    def test_real_argument(self):
        self.assertEqual(Complex(0.0, 0.0).sin(), Complex(0.0, 0.0))
        self.assertEqual(Complex(0.0, 0.0).cos(), Complex(1.0, -0.0))


class TestNonFinite(unittest.TestCase):
    """Non-finite values propagate instead of raising."""

    def test_division_by_zero(self):
        z = Complex(1.0, -2.0) / 0.0
        self.assertEqual(z.re, math.inf)
        self.assertEqual(z.im, -math.inf)
        self.assertTrue(math.isnan((Complex(0.0, 0.0) / 0.0).re))

    def test_mod_by_zero(self):
        z = Complex(1.0, 2.0) % 0.0
        self.assertTrue(math.isnan(z.re) and math.isnan(z.im))

    def test_trig_overflow(self):
        z = Complex(1.0, 1000.0).sin()
        self.assertEqual(z.re, math.inf)
        self.assertEqual(z.im, math.inf)

    def test_trig_of_infinity(self):
        z = Complex(math.inf, 0.0).cos()
        self.assertTrue(math.isnan(z.re))

    def test_mul_with_infinity(self):
        z = Complex(math.inf, 0.0) * Complex(0.0, 1.0)
        self.assertTrue(math.isnan(z.re))
        self.assertEqual(z.im, math.inf)

    def test_mul_overflow(self):
        z = Complex(1e300, 0.0) * Complex(1e300, 0.0)
        self.assertEqual(z.re, math.inf)

    def test_nan_norm(self):
        self.assertTrue(math.isnan(Complex(math.nan, 1.0).norm()))


if __name__ == "__main__":
    unittest.main()
