# -*- coding: utf-8 -*-

import unittest

import numpy as np
import scipy.special as sps
from absl.testing import parameterized

from specfun import constants
from specfun.special import (gamma,
                             is_gamma_pole,
                             sinpi,
                             cospi,
                             complex_sinpi,
                             euler_reflection_prefactor,
                             log_abs_reflection_prefactor,
                             gamma_stirling_series,
                             lngamma_stirling_series)


class TestPoles(parameterized.TestCase):
  @parameterized.product(x=[0., -0., -1., -2., -37., -np.inf])
  def test_poles(self, x):
    self.assertTrue(is_gamma_pole(np.float64(x)))

  @parameterized.product(x=[1., 0.5, -0.5, -2.01, np.inf, np.nan])
  def test_not_poles(self, x):
    self.assertFalse(is_gamma_pole(np.float64(x)))

  def test_complex(self):
    self.assertTrue(is_gamma_pole(np.complex128(-3.)))
    self.assertFalse(is_gamma_pole(np.complex128(complex(-3., 1e-10))))


class TestSinPi(parameterized.TestCase):
  @parameterized.product(x=[-7.3, -2.5, -0.75, 0., 0.1, 0.5, 1.25, 1.9, 3.6, 10.2])
  def test_against_sin(self, x):
    np.testing.assert_allclose(sinpi(np.float64(x)), np.sin(np.pi * x), rtol=1e-13, atol=1e-15)
    np.testing.assert_allclose(cospi(np.float64(x)), np.cos(np.pi * x), rtol=1e-13, atol=1e-15)

  @parameterized.parameters((2.5, 1.), (-2.5, -1.), (0.5, 1.), (1.5, -1.), (3., 0.), (-6., 0.))
  def test_sinpi_exact(self, x, expected):
    self.assertEqual(sinpi(np.float64(x)), expected)

  @parameterized.product(x=[-6.5, -0.5, 0.5, 3.5, 1e15 + 0.5])
  def test_cospi_half_integers(self, x):
    r = cospi(np.float64(x))
    self.assertEqual(r, 0.)
    self.assertFalse(np.signbit(r))

  def test_single_precision(self):
    self.assertIsInstance(sinpi(np.float32(0.3)), np.float32)
    self.assertIsInstance(cospi(np.float32(0.3)), np.float32)
    self.assertIsInstance(complex_sinpi(np.complex64(0.3 + 1j)), np.complex64)

  @parameterized.product(z=[0.3 + 0.7j, -2.2 - 1.5j, 4.9 + 0.01j, -0.5 + 3.j])
  def test_complex_against_sin(self, z):
    np.testing.assert_allclose(complex_sinpi(np.complex128(z)), np.sin(np.pi * z), rtol=1e-12)

  def test_complex_half_integer_sign(self):
    self.assertFalse(np.signbit(complex_sinpi(np.complex128(-6.5 + 1.j)).imag))
    self.assertTrue(np.signbit(complex_sinpi(np.complex128(-6.5 - 1.j)).imag))
    self.assertTrue(np.signbit(complex_sinpi(np.complex128(-8.5 - 0.5j)).imag))


class TestReflection(parameterized.TestCase):
  @parameterized.product(x=[-3.7, -1.5, -0.5, 0.25, 0.5, 1.5, 2.9, 10.1])
  def test_real_matches_direct_formula(self, x):
    expected = -np.pi / (x * np.sin(np.pi * x))
    np.testing.assert_allclose(euler_reflection_prefactor(np.float64(x)), expected, rtol=1e-13)

  def test_half(self):
    np.testing.assert_allclose(euler_reflection_prefactor(np.float64(0.5)), -constants.TAU, rtol=1e-15)
    np.testing.assert_allclose(euler_reflection_prefactor(np.complex128(0.5)), -constants.TAU, rtol=1e-15)

  @parameterized.product(x=[-4.25, -0.7, 0.3, 2.6])
  def test_gamma_reflection(self, x):
    x = np.float64(x)
    np.testing.assert_allclose(gamma(x) * gamma(-x), euler_reflection_prefactor(x), rtol=1e-13)

  @parameterized.product(x=[-5.3, -0.2, 0.45, 3.75])
  def test_log_abs(self, x):
    np.testing.assert_allclose(log_abs_reflection_prefactor(np.float64(x)),
                               np.log(abs(euler_reflection_prefactor(np.float64(x)))),
                               rtol=1e-13)


class TestStirling(parameterized.TestCase):
  @parameterized.product(x=[34., 50., 100.5, 143.5, 160.5, 171.5])
  def test_gamma_series(self, x):
    np.testing.assert_allclose(gamma_stirling_series(np.float64(x)), sps.gamma(x), rtol=1e-12)

  def test_gamma_series_overflow(self):
    self.assertEqual(gamma_stirling_series(np.float64(172.)), np.inf)
    self.assertEqual(gamma_stirling_series(np.float64(1e10)), np.inf)
    self.assertEqual(gamma_stirling_series(np.float64(1e300)), np.inf)
    r = gamma_stirling_series(np.float32(40.))
    self.assertIsInstance(r, np.float32)
    self.assertEqual(r, np.inf)

  @parameterized.product(x=[13., 20., 75.5, 1e4, 1e100])
  def test_lngamma_series(self, x):
    np.testing.assert_allclose(lngamma_stirling_series(np.float64(x)), sps.gammaln(x), rtol=1e-14)

  def test_lngamma_series_complex(self):
    np.testing.assert_allclose(lngamma_stirling_series(np.complex128(7.5 + 1j)),
                               7.46329489273832466759 + 1.95012140717825057479j,
                               rtol=1e-13)


if __name__ == '__main__':
  unittest.main()
