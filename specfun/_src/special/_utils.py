# -*- coding: utf-8 -*-

import functools
from typing import Dict, Tuple

import numpy as np

from specfun._errors import UnsupportedError, PrecisionError
from specfun._src import environment

__all__ = [
  'coefficient_table',
  'is_complex',
  'as_real',
  'as_real_pair',
  'as_complex',
  'real_type',
  'ignore_fp_errors',
  'fit_integer',
]

_real_types = (np.float32, np.float64)
_complex_types = (np.complex64, np.complex128)
_python_numbers = (bool, int, float, np.integer, np.bool_)


def coefficient_table(*values) -> Dict[type, Tuple]:
  """Round a table of coefficients once for every supported precision.

  The returned mapping is indexed by the numpy scalar type of the argument,
  e.g. ``table[type(x)]``.
  """
  return {dtype: tuple(dtype(v) for v in values) for dtype in _real_types}


def ignore_fp_errors(func):
  """Evaluate ``func`` with IEEE overflow, underflow and invalid warnings silenced.

  Infinities and zeros produced by overflow and underflow are legitimate
  results of the special functions.
  """

  @functools.wraps(func)
  def wrapper(*args, **kwargs):
    with np.errstate(all='ignore'):
      return func(*args, **kwargs)

  return wrapper


def _unwrap(x, name):
  if isinstance(x, np.ndarray):
    if x.ndim != 0:
      raise UnsupportedError(f'"{name}" must be a scalar, but we got an '
                             f'array with the shape of {x.shape}.')
    return x[()]
  return x


def is_complex(x) -> bool:
  """Whether ``x`` is a complex scalar (or a 0-d complex array)."""
  if isinstance(x, np.ndarray):
    return np.iscomplexobj(x)
  return isinstance(x, (complex, np.complexfloating))


def real_type(dtype: type) -> type:
  """The real scalar type matching a real or complex scalar type."""
  return np.finfo(dtype).dtype.type


def as_real(x, name: str = 'x', dtype: type = None):
  """Convert ``x`` into a real numpy scalar of the working precision.

  Parameters
  ----------
  x: int, float, np.floating, np.integer, np.ndarray
    The argument. Only 0-d arrays are accepted.
  name: str
    The argument name used in the error messages.
  dtype: type, optional
    The precision used for Python numbers. Default is the environment
    float type.

  Returns
  -------
  x: np.float32, np.float64
    The argument as a numpy scalar.
  """
  x = _unwrap(x, name)
  if isinstance(x, np.floating):
    if type(x) not in _real_types:
      raise PrecisionError(type(x))
    return x
  if isinstance(x, _python_numbers):
    if dtype is None:
      dtype = environment.get_float()
    return dtype(x)
  raise UnsupportedError(f'"{name}" must be a real number, but we got {type(x)}.')


def as_real_pair(a, b, names=('a', 'b')):
  """Convert two arguments into real numpy scalars of one common precision.

  A numpy float argument decides the precision of a Python number argument,
  in the same way numpy promotes a Python scalar against a numpy one.
  """
  a = _unwrap(a, names[0])
  b = _unwrap(b, names[1])
  dtype = None
  if isinstance(a, np.floating) and not isinstance(b, np.floating):
    dtype = type(a)
  elif isinstance(b, np.floating) and not isinstance(a, np.floating):
    dtype = type(b)
  a = as_real(a, names[0], dtype)
  b = as_real(b, names[1], dtype)
  if type(a) is not type(b):
    dtype = np.promote_types(type(a), type(b)).type
    a, b = dtype(a), dtype(b)
  return a, b


def as_complex(z, name: str = 'z'):
  """Convert ``z`` into a complex numpy scalar of the working precision."""
  z = _unwrap(z, name)
  if isinstance(z, np.complexfloating):
    if type(z) not in _complex_types:
      raise PrecisionError(type(z))
    return z
  if isinstance(z, np.floating):
    if type(z) not in _real_types:
      raise PrecisionError(type(z))
    return np.complex64(z) if type(z) is np.float32 else np.complex128(z)
  if isinstance(z, (complex,) + _python_numbers):
    return environment.get_complex()(z)
  raise UnsupportedError(f'"{name}" must be a complex number, but we got {type(z)}.')


def fit_integer(value: int, dtype):
  """Cast a Python integer into ``dtype``, or None if it is out of range."""
  info = np.iinfo(dtype)
  if value < info.min or value > info.max:
    return None
  return dtype.type(value)
