# -*- coding: utf-8 -*-

import unittest

import numpy as np
import scipy.special as sps
from absl.testing import parameterized

import specfun
from specfun.special import erf, erfc


class TestErf(parameterized.TestCase):
  @parameterized.product(
    x=[-5., -1.2, -0.3, 1e-12, 1e-5, 0.2, 0.49, 0.5, 0.7, 1.49, 1.7, 2.6, 3., 4.4, 5., 6.]
  )
  def test_against_scipy(self, x):
    np.testing.assert_allclose(erf(x), sps.erf(x), rtol=1e-13)

  @parameterized.product(x=[0.1, 0.8, 2.2, 3.9])
  def test_odd(self, x):
    self.assertEqual(erf(-x), -erf(x))

  def test_special_values(self):
    self.assertEqual(erf(0.), 0.)
    self.assertEqual(erf(7.), 1.)
    self.assertEqual(erf(np.inf), 1.)
    self.assertEqual(erf(-np.inf), -1.)
    self.assertTrue(np.isnan(erf(np.nan)))

  def test_single_precision(self):
    r = erf(np.float32(0.5))
    self.assertIsInstance(r, np.float32)
    np.testing.assert_allclose(r, 0.5204998778130465, rtol=1e-6)
    with specfun.environment(x64=False):
      self.assertIsInstance(erf(1.5), np.float32)


class TestErfc(parameterized.TestCase):
  @parameterized.product(
    x=[-3., -1.2, -0.3, 0., 0.3, 0.5, 1., 2., 3.5, 4., 4.6, 10., 20., 26.]
  )
  def test_against_scipy(self, x):
    np.testing.assert_allclose(erfc(x), sps.erfc(x), rtol=1e-12)

  def test_literal(self):
    np.testing.assert_allclose(erfc(0.5), 0.4795001221869534, rtol=1e-14)

  def test_special_values(self):
    self.assertEqual(erfc(0.), 1.)
    self.assertEqual(erfc(np.inf), 0.)
    self.assertEqual(erfc(120.), 0.)
    self.assertEqual(erfc(-np.inf), 2.)
    self.assertTrue(np.isnan(erfc(np.nan)))

  @parameterized.product(x=[-2.5, -0.4, 0.25, 1.3, 3.3])
  def test_complement(self, x):
    np.testing.assert_allclose(erf(x) + erfc(x), 1., rtol=1e-15)

  def test_single_precision(self):
    r = erfc(np.float32(2.))
    self.assertIsInstance(r, np.float32)
    np.testing.assert_allclose(r, 0.004677734981047266, rtol=1e-5)


if __name__ == '__main__':
  unittest.main()
