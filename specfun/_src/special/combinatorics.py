# -*- coding: utf-8 -*-

import numpy as np

from specfun import check
from ._utils import fit_integer

__all__ = [
  'choose',
  'choose_rep',
  'perm',
  'checked_choose',
  'checked_choose_rep',
  'checked_perm',
]


def _check_args(n, k):
  check.is_integer(n, 'n')
  check.is_integer(k, 'k')
  return int(n), int(k)


def _is_empty(n, k):
  return k > n or n < 0 or k < 0


def choose(n, k) -> int:
  r"""The binomial coefficient, the number of ways to choose ``k`` of ``n`` items.

  .. math::

     \binom{n}{k} = \frac{n!}{k! (n - k)!}

  It is ``0`` when ``k > n`` or when either argument is negative.

  Examples
  --------
  >>> choose(5, 2)
  10
  """
  n, k = _check_args(n, k)
  if _is_empty(n, k):
    return 0
  result = 1
  for i in range(1, min(k, n - k) + 1):
    result = result * (n + 1 - i) // i
  return result


def choose_rep(n, k) -> int:
  r"""The number of ways to choose ``k`` of ``n`` items with repetition.

  .. math::

     \binom{n + k - 1}{k}
  """
  n, k = _check_args(n, k)
  return choose(n + k - 1, k)


def perm(n, k) -> int:
  r"""The number of ``k``-permutations of ``n`` items, :math:`n! / (n - k)!`.

  It is ``0`` when ``k > n`` or when either argument is negative.
  """
  n, k = _check_args(n, k)
  if _is_empty(n, k):
    return 0
  result = 1
  for i in range(n - k + 1, n + 1):
    result *= i
  return result


def checked_choose(n, k, dtype=np.int64):
  """:func:`choose` evaluated in the integer type ``dtype``.

  Returns ``None`` when the value, or one of the intermediate products
  of the multiplicative formula, overflows ``dtype``. For instance
  ``checked_choose(10, 5, np.uint8)`` is ``None`` although
  :math:`\\binom{10}{5} = 252` fits in 8 bits.
  """
  n, k = _check_args(n, k)
  dtype = check.is_integer_dtype(dtype)
  if _is_empty(n, k):
    return dtype.type(0)
  if fit_integer(n + 1, dtype) is None:
    return None
  result = 1
  for i in range(1, min(k, n - k) + 1):
    product = result * (n + 1 - i)
    if fit_integer(product, dtype) is None:
      return None
    result = product // i
  return dtype.type(result)


def checked_choose_rep(n, k, dtype=np.int64):
  """:func:`choose_rep` evaluated in the integer type ``dtype``, or ``None`` on overflow."""
  n, k = _check_args(n, k)
  dtype = check.is_integer_dtype(dtype)
  if fit_integer(n + k, dtype) is None:
    return None
  return checked_choose(n + k - 1, k, dtype)


def checked_perm(n, k, dtype=np.int64):
  """:func:`perm` as a numpy integer of type ``dtype``, or ``None`` on overflow."""
  n, k = _check_args(n, k)
  dtype = check.is_integer_dtype(dtype)
  return fit_integer(perm(n, k), dtype)
