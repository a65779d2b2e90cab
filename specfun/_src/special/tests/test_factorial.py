# -*- coding: utf-8 -*-

import math
import unittest

import numpy as np
import scipy.special as sps
from absl.testing import parameterized

from specfun import check
from specfun.special import (factorial,
                             factorial2,
                             factorialk,
                             checked_factorial,
                             checked_factorial2,
                             checked_factorialk)


class TestFactorial(parameterized.TestCase):
  @parameterized.product(n=[0, 1, 2, 5, 15, 16, 17, 18, 33, 34, 35, 100, 500])
  def test_values(self, n):
    self.assertEqual(factorial(n), math.factorial(n))

  def test_numpy_integer(self):
    self.assertEqual(factorial(np.int32(10)), 3628800)

  def test_negative(self):
    self.assertEqual(factorial(-1), 0)
    self.assertEqual(factorial(-20), 0)

  def test_invalid(self):
    with self.assertRaises(ValueError):
      factorial(2.5)
    with self.assertRaises(ValueError):
      factorial(True)

  def test_checked(self):
    r = checked_factorial(5, np.uint8)
    self.assertEqual(r, 120)
    self.assertIsInstance(r, np.uint8)
    self.assertIsNone(checked_factorial(6, np.uint8))
    self.assertEqual(checked_factorial(20), 2432902008176640000)
    self.assertIsInstance(checked_factorial(20), np.int64)
    self.assertIsNone(checked_factorial(21))
    self.assertEqual(checked_factorial(21, np.uint64), None)
    self.assertEqual(checked_factorial(12, np.int32), 479001600)
    self.assertIsNone(checked_factorial(13, np.int32))

  def test_checked_invalid_dtype(self):
    with self.assertRaises(ValueError):
      checked_factorial(5, np.float64)


class TestFactorial2(parameterized.TestCase):
  @parameterized.product(n=[0, 1, 2, 3, 7, 8, 31, 32, 33, 34, 35, 36, 66, 67, 68, 101, 200])
  def test_against_scipy(self, n):
    self.assertEqual(factorial2(n), int(sps.factorial2(n, exact=True)))

  def test_literal(self):
    self.assertEqual(factorial2(7), 105)
    self.assertEqual(factorial2(8), 384)

  def test_negative(self):
    self.assertEqual(factorial2(-3), 0)

  def test_checked(self):
    self.assertEqual(checked_factorial2(19, np.int32), 654729075)
    self.assertIsNone(checked_factorial2(20, np.int32))
    self.assertEqual(checked_factorial2(33), 6332659870762850625)
    self.assertIsNone(checked_factorial2(34))


class TestFactorialK(parameterized.TestCase):
  @parameterized.product(
    n=[0, 1, 2, 5, 6, 16, 17, 48, 49, 50, 100, 250],
    k=[1, 2, 3, 7],
  )
  def test_against_scipy(self, n, k):
    self.assertEqual(factorialk(n, k), int(sps.factorialk(n, k, exact=True)))

  def test_literal(self):
    self.assertEqual(factorialk(5, 3), 10)
    self.assertEqual(factorialk(6, 3), 18)
    self.assertEqual(factorialk(10, 3), 280)

  def test_reduces_to_factorials(self):
    self.assertEqual(factorialk(40, 1), factorial(40))
    self.assertEqual(factorialk(41, 2), factorial2(41))

  def test_negative(self):
    self.assertEqual(factorialk(-5, 2), 0)

  def test_invalid_k(self):
    with self.assertRaises(ValueError):
      factorialk(5, 0)
    with self.assertRaises(ValueError):
      factorialk(5, -2)

  def test_checking_turned_off(self):
    check.turn_off()
    try:
      self.assertEqual(factorialk(np.int64(6), np.int64(3)), 18)
    finally:
      check.turn_on()

  def test_checked(self):
    self.assertIsNone(checked_factorialk(10, 3, np.uint8))
    self.assertEqual(checked_factorialk(10, 3, np.int16), 280)
    self.assertIsInstance(checked_factorialk(10, 3, np.int16), np.int16)


if __name__ == '__main__':
  unittest.main()
