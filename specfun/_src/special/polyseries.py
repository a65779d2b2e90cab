# -*- coding: utf-8 -*-

"""Polynomial and Chebyshev series evaluation.

Both evaluators are generic: they work on Python numbers and numpy scalars,
real or complex, and keep the type of the arithmetic they are given.
"""

from typing import Sequence

__all__ = [
  'eval_poly',
  'eval_cheby',
]


def eval_poly(x, coeffs: Sequence):
  r"""Evaluate a polynomial with Horner's method.

  .. math::

     p(x) = c_0 x^{n-1} + c_1 x^{n-2} + \cdots + c_{n-1}

  Parameters
  ----------
  x: float, complex
    The evaluation point.
  coeffs: sequence
    The coefficients, ordered from the highest degree to the constant term.

  Returns
  -------
  value: float, complex
    The value of the polynomial. An empty table evaluates to zero.

  Examples
  --------
  >>> eval_poly(2.0, [1.0, 0.0, -1.0])  # x^2 - 1
  3.0
  """
  if len(coeffs) == 0:
    return type(x)(0)
  if len(coeffs) == 1:
    return coeffs[0]
  result = coeffs[0]
  for c in coeffs[1:]:
    result = result * x + c
  return result


def eval_cheby(x, coeffs: Sequence):
  r"""Evaluate a Chebyshev series with Clenshaw's recurrence.

  .. math::

     S(x) = \sum_{k=0}^{n-1} c_{n-1-k} T_k(x)

  The series is only meaningful for :math:`x \in [-1, 1]`. A function
  approximated on :math:`[a, b]` must map its argument first with
  :math:`x \to (2x - b - a) / (b - a)`; no check is performed here.

  Parameters
  ----------
  x: float, complex
    The (mapped) evaluation point.
  coeffs: sequence
    The Chebyshev coefficients, ordered so that the last entry multiplies
    :math:`T_0`.

  Returns
  -------
  value: float, complex
    The value of the series.
  """
  n = len(coeffs)
  if n == 0:
    return type(x)(0)
  if n == 1:
    return coeffs[0]
  if n == 2:
    return x * coeffs[0] + coeffs[1]

  bk = coeffs[0]
  bk1 = type(x)(0)
  for c in coeffs[1:-1]:
    bk2 = bk1
    bk1 = bk
    bk = 2 * x * bk1 - bk2 + c
  return x * bk - bk1 + coeffs[-1]
