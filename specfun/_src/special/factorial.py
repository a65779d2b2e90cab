# -*- coding: utf-8 -*-

"""Factorial, double factorial and multifactorial of integers.

The exact functions return Python integers and never overflow. The
``checked_*`` functions return a numpy integer of the requested type, or
``None`` when the value cannot be represented by it.
"""

import numpy as np

from specfun import check
from ._utils import fit_integer

__all__ = [
  'factorial',
  'factorial2',
  'factorialk',
  'checked_factorial',
  'checked_factorial2',
  'checked_factorialk',
]

# The number of multiplications done before falling back to the cached
# values (or to the next window of terms).
_MAX_MULTIPLICATIONS = 16

# 0!, 1!, ..., 16!
_FACTORIAL_CACHE = (
  1, 1, 2, 6, 24, 120, 720, 5040, 40320, 362880, 3628800, 39916800, 479001600,
  6227020800, 87178291200, 1307674368000, 20922789888000,
)

# 0!!, 1!!, ..., 32!!
_FACTORIAL2_CACHE = (
  1, 1, 2, 3, 8, 15, 48, 105, 384, 945, 3840, 10395, 46080, 135135, 645120,
  2027025, 10321920, 34459425, 185794560, 654729075, 3715891200, 13749310575,
  81749606400, 316234143225, 1961990553600, 7905853580625, 51011754393600,
  213458046676875, 1428329123020800, 6190283353629375, 42849873690624000,
  191898783962510625, 1371195958099968000,
)


def _partial_product(start: int, stop: int, step: int) -> int:
  """``start * (start + step) * ... `` up to and including ``stop``."""
  result = 1
  for i in range(start, stop + 1, step):
    result *= i
  return result


def factorial(n) -> int:
  r"""The factorial :math:`n! = 1 \cdot 2 \cdots n`.

  Parameters
  ----------
  n: int
    A non-negative integer. Negative values give ``0``.

  Returns
  -------
  value: int
    The exact factorial.

  Examples
  --------
  >>> factorial(5)
  120
  """
  check.is_integer(n, 'n')
  n = int(n)
  if n < 0:
    return 0
  result = 1
  while n >= len(_FACTORIAL_CACHE):
    result *= _partial_product(n - _MAX_MULTIPLICATIONS, n, 1)
    n -= _MAX_MULTIPLICATIONS + 1
  return result * _FACTORIAL_CACHE[n]


def factorial2(n) -> int:
  r"""The double factorial :math:`n!! = n (n - 2) (n - 4) \cdots`.

  The product stops at ``1`` for odd ``n`` and at ``2`` for even ``n``;
  ``0!! = 1`` and negative values give ``0``.

  Examples
  --------
  >>> factorial2(7)
  105
  """
  check.is_integer(n, 'n')
  n = int(n)
  if n < 0:
    return 0
  window = 2 * _MAX_MULTIPLICATIONS
  result = 1
  while n >= len(_FACTORIAL2_CACHE):
    result *= _partial_product(n - window, n, 2)
    n -= window + 2
  return result * _FACTORIAL2_CACHE[max(n, 0)]


def factorialk(n, k) -> int:
  r"""The multifactorial :math:`n!_{(k)} = n (n - k) (n - 2k) \cdots`.

  The product continues as long as the factors are positive.

  Parameters
  ----------
  n: int
    Negative values give ``0``, and ``0`` gives ``1``.
  k: int
    The step, a positive integer.

  Returns
  -------
  value: int

  Examples
  --------
  >>> factorialk(5, 3)   # 5 * 2
  10
  """
  check.is_integer(n, 'n')
  check.is_integer(k, 'k', min_bound=1)
  n, k = int(n), int(k)
  if n < 0:
    return 0
  if n == 0:
    return 1
  max_window = k * _MAX_MULTIPLICATIONS
  result = 1
  while n > max_window:
    result *= _partial_product(n - max_window, n, k)
    n -= max_window + k
  if n <= 0:
    return result
  window = k * (n // k)
  if window == n:
    window -= k
  return result * _partial_product(n - window, n, k)


def checked_factorial(n, dtype=np.int64):
  """:func:`factorial` as a numpy integer of type ``dtype``.

  Returns ``None`` when :math:`n!` does not fit into ``dtype``.

  Examples
  --------
  >>> checked_factorial(5, np.uint8)
  np.uint8(120)
  >>> checked_factorial(10, np.uint8) is None
  True
  """
  dtype = check.is_integer_dtype(dtype)
  return fit_integer(factorial(n), dtype)


def checked_factorial2(n, dtype=np.int64):
  """:func:`factorial2` as a numpy integer of type ``dtype``, or ``None`` on overflow."""
  dtype = check.is_integer_dtype(dtype)
  return fit_integer(factorial2(n), dtype)


def checked_factorialk(n, k, dtype=np.int64):
  """:func:`factorialk` as a numpy integer of type ``dtype``, or ``None`` on overflow."""
  dtype = check.is_integer_dtype(dtype)
  return fit_integer(factorialk(n, k), dtype)
