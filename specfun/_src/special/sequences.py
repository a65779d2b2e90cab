# -*- coding: utf-8 -*-

"""Integer sequences: Bernoulli, tangent and secant numbers."""

from fractions import Fraction
from typing import List

from specfun import check
from specfun._src import environment
from .combinatorics import choose
from .factorial import factorial

__all__ = [
  'bernoulli',
  'tangent_numbers',
  'secant_numbers',
]

# B_0, B_1, B_2, B_3
_BERNOULLI_CACHE = (Fraction(1), Fraction(-1, 2), Fraction(1, 6), Fraction(0))


def bernoulli(n, dtype: type = None) -> List:
  r"""The Bernoulli numbers :math:`B_0, B_1, \ldots, B_n`.

  Uses the convention :math:`B_1 = -1/2` and the recurrence

  .. math::

     B_m = -\frac{1}{m + 1} \sum_{k=0}^{m-1} \binom{m + 1}{k} B_k

  for even :math:`m`; every odd :math:`m \ge 3` gives zero.

  Parameters
  ----------
  n: int
    The index of the last Bernoulli number, ``n >= 0``.
  dtype: type, optional
    The float type of the numbers. Default is the environment float type.

  Returns
  -------
  numbers: list
    ``n + 1`` floats.

  Examples
  --------
  >>> [float(b) for b in bernoulli(4)]
  [1.0, -0.5, 0.16666666666666666, 0.0, -0.03333333333333333]
  """
  check.is_integer(n, 'n', min_bound=0)
  if dtype is None:
    dtype = environment.get_float()
  n = int(n)
  result = list(_BERNOULLI_CACHE[:n + 1])
  for i in range(len(_BERNOULLI_CACHE), n + 1):
    if i % 2 == 1:
      result.append(Fraction(0))
    else:
      bn = sum(choose(i + 1, k) * bk for k, bk in enumerate(result))
      result.append(-bn / (i + 1))
  return [dtype(float(b)) for b in result]


def tangent_numbers(n) -> List[int]:
  r"""The first ``n`` tangent numbers (OEIS A000182), :math:`1, 2, 16, 272, \ldots`.

  They are the coefficients of the Taylor series of :math:`\tan x`,
  :math:`\tan x = \sum_k T_k x^{2k-1} / (2k - 1)!`, and are computed with
  the integer algorithm of Brent and Harvey (arXiv:1108.0286, section 6.1).

  Examples
  --------
  >>> tangent_numbers(5)
  [1, 2, 16, 272, 7936]
  """
  check.is_integer(n, 'n', min_bound=0)
  zags = [factorial(k) for k in range(int(n))]
  for k in range(1, len(zags)):
    for j in range(k, len(zags)):
      zags[j] = (j - k) * zags[j - 1] + (j - k + 2) * zags[j]
  return zags


def secant_numbers(n) -> List[int]:
  r"""The first ``n`` secant (Euler zig) numbers (OEIS A000364), :math:`1, 1, 5, 61, \ldots`.

  They are the coefficients of the Taylor series of :math:`\sec x`,
  :math:`\sec x = \sum_k S_k x^{2k} / (2k)!`, computed with the integer
  algorithm of Brent and Harvey (arXiv:1108.0286, section 6.2).

  Examples
  --------
  >>> secant_numbers(5)
  [1, 1, 5, 61, 1385]
  """
  check.is_integer(n, 'n', min_bound=0)
  zigs = [factorial(k) for k in range(int(n))]
  for k in range(1, len(zigs)):
    for j in range(k + 1, len(zigs)):
      zigs[j] = (j - k) * zigs[j - 1] + (j - k + 1) * zigs[j]
  return zigs
