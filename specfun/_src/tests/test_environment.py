import unittest

import numpy as np

import specfun


class TestEnvironment(unittest.TestCase):
  def test_float(self):
    with specfun.environment(float_=np.float32):
      self.assertTrue(specfun.get_float() == np.float32)
      self.assertIsInstance(specfun.gamma(2.5), np.float32)
    self.assertTrue(specfun.get_float() == np.float64)

  def test_complex(self):
    with specfun.environment(complex_=np.complex64):
      self.assertTrue(specfun.get_complex() == np.complex64)
      self.assertIsInstance(specfun.gamma(2.5 + 1j), np.complex64)
    self.assertTrue(specfun.get_complex() == np.complex128)

  def test_x64(self):
    with specfun.environment(x64=False):
      self.assertFalse(specfun.is_x64())
      self.assertTrue(specfun.get_float() == np.float32)
      self.assertTrue(specfun.get_complex() == np.complex64)
    self.assertTrue(specfun.is_x64())

  def test_numpy_inputs_keep_precision(self):
    with specfun.environment(x64=False):
      self.assertIsInstance(specfun.gamma(np.float64(2.5)), np.float64)

  def test_decorator(self):
    @specfun.environment(float_=np.float32)
    def f(x):
      return specfun.lngamma(x)

    self.assertIsInstance(f(3.5), np.float32)
    self.assertIsInstance(specfun.lngamma(3.5), np.float64)

  def test_generator(self):
    @specfun.environment(x64=False)
    def gen():
      yield specfun.get_float()
      yield specfun.get_float()

    self.assertEqual(list(gen()), [np.float32, np.float32])
    self.assertTrue(specfun.get_float() == np.float64)

  def test_restore_on_error(self):
    with self.assertRaises(RuntimeError):
      with specfun.environment(float_=np.float32):
        raise RuntimeError
    self.assertTrue(specfun.get_float() == np.float64)

  def test_set(self):
    try:
      specfun.set_environment(x64=False)
      self.assertIsInstance(specfun.erf(0.5), np.float32)
      specfun.set_x64(True)
      self.assertIsInstance(specfun.erf(0.5), np.float64)
      specfun.disable_x64()
      self.assertFalse(specfun.is_x64())
    finally:
      specfun.enable_x64()
    self.assertTrue(specfun.is_x64())

  def test_unsupported(self):
    with self.assertRaises(specfun.PrecisionError):
      specfun.set_float(np.float16)
    with self.assertRaises(specfun.PrecisionError):
      specfun.set_complex(np.float64)
    self.assertTrue(specfun.get_float() == np.float64)
