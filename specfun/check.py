# -*- coding: utf-8 -*-

import numpy as np

__all__ = [
  'is_checking',
  'turn_on',
  'turn_off',

  'is_integer',
  'is_integer_dtype',
]

_check = True


def is_checking():
  """Whether the checking is turn on."""
  return _check


def turn_on():
  """Turn on the checking."""
  global _check
  _check = True


def turn_off():
  """Turn off the checking."""
  global _check
  _check = False


def is_integer(value: int, name=None, min_bound=None, max_bound=None, allow_none=False):
  """Check integer type.

  Parameters
  ----------
  value: int, optional
  name: optional, str
  min_bound: optional, int
    The allowed minimum value.
  max_bound: optional, int
    The allowed maximum value.
  allow_none: bool
    Whether allow the value is None.
  """
  if name is None: name = ''
  if value is None:
    if allow_none:
      return
    else:
      raise ValueError(f'{name} must be an int, but got None')
  if not _check:
    return value
  if isinstance(value, (bool, np.bool_)):
    raise ValueError(f'{name} must be an int, but got {value}')
  if not isinstance(value, (int, np.integer)):
    if hasattr(value, '__array__'):
      if not (np.issubdtype(value.dtype, np.integer) and value.ndim == 0 and value.size == 1):
        raise ValueError(f'{name} must be an int, but got {value}')
    else:
      raise ValueError(f'{name} must be an int, but got {value}')
  if min_bound is not None and value < min_bound:
    raise ValueError(f"{name} must be an int bigger than {min_bound}, "
                     f"while we got {value}")
  if max_bound is not None and value > max_bound:
    raise ValueError(f"{name} must be an int smaller than {max_bound}, "
                     f"while we got {value}")
  return value


def is_integer_dtype(dtype, name=None):
  """Check the given ``dtype`` is a fixed-width numpy integer type.

  Returns
  -------
  dtype: np.dtype
    The normalized data type.
  """
  if name is None: name = 'dtype'
  try:
    dt = np.dtype(dtype)
  except TypeError:
    raise ValueError(f'{name} must be a numpy integer type, but got {dtype}')
  if not np.issubdtype(dt, np.integer):
    raise ValueError(f'{name} must be a numpy integer type, but got {dtype}')
  return dt
