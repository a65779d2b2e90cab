# -*- coding: utf-8 -*-

import unittest

import numpy as np
from absl.testing import parameterized

from specfun.special import bernoulli, tangent_numbers, secant_numbers

# OEIS A000182
TANGENT_NUMBERS = [
  1, 2, 16, 272, 7936, 353792, 22368256, 1903757312, 209865342976,
  29088885112832, 4951498053124096, 1015423886506852352,
  246921480190207983616, 70251601603943959887872,
  23119184187809597841473536, 8713962757125169296170811392,
  3729407703720529571097509625856,
]

# OEIS A000364
SECANT_NUMBERS = [
  1, 1, 5, 61, 1385, 50521, 2702765, 199360981, 19391512145, 2404879675441,
  370371188237525, 69348874393137901, 15514534163557086905,
  4087072509293123892361, 1252259641403629865468285,
  441543893249023104553682821, 177519391579539289436664789665,
]


class TestBernoulli(parameterized.TestCase):
  def test_first_numbers(self):
    expected = [1., -0.5, 1. / 6., 0., -1. / 30., 0., 1. / 42., 0., -1. / 30., 0., 5. / 66.]
    self.assertEqual(bernoulli(10), expected)

  @parameterized.product(n=[0, 1, 2, 3, 4, 9, 20])
  def test_length(self, n):
    self.assertEqual(len(bernoulli(n)), n + 1)

  def test_odd_vanish(self):
    b = bernoulli(25)
    for i in range(3, 26, 2):
      self.assertEqual(b[i], 0.)

  def test_larger(self):
    b = bernoulli(30)
    self.assertEqual(b[12], -691. / 2730.)
    self.assertEqual(b[20], -174611. / 330.)
    self.assertEqual(b[30], 8615841276005. / 14322.)

  @parameterized.product(n=[10, 40, 80])
  def test_correctly_rounded(self, n):
    self.assertEqual(bernoulli(n)[10], 5. / 66.)
    self.assertEqual(bernoulli(n, np.float32)[10], np.float32(5. / 66.))

  def test_dtype(self):
    self.assertIsInstance(bernoulli(4)[4], np.float64)
    self.assertIsInstance(bernoulli(4, np.float32)[4], np.float32)

  def test_invalid(self):
    with self.assertRaises(ValueError):
      bernoulli(-1)


class TestTangentNumbers(parameterized.TestCase):
  def test_values(self):
    self.assertEqual(tangent_numbers(17), TANGENT_NUMBERS)

  @parameterized.product(n=[0, 1, 2, 5])
  def test_prefix(self, n):
    self.assertEqual(tangent_numbers(n), TANGENT_NUMBERS[:n])

  def test_invalid(self):
    with self.assertRaises(ValueError):
      tangent_numbers(-2)


class TestSecantNumbers(parameterized.TestCase):
  def test_values(self):
    self.assertEqual(secant_numbers(17), SECANT_NUMBERS)

  @parameterized.product(n=[0, 1, 2, 5])
  def test_prefix(self, n):
    self.assertEqual(secant_numbers(n), SECANT_NUMBERS[:n])


if __name__ == '__main__':
  unittest.main()
