# -*- coding: utf-8 -*-

import numpy as np

from specfun._src.constants import MAX_GAMMA
from ._utils import ignore_fp_errors, as_real_pair
from .gamma import real_gamma
from .gamma_util import is_gamma_pole
from .lgamma import real_lngamma, real_gammasgn

__all__ = [
  'beta',
  'lbeta',
]

_ASYMP_FACTOR = 1e6


def _lbeta_asymp(a, b):
  """ln|B(a, b)| for ``a`` much larger than ``b``.

  Avoids the loss of precision in ``lngamma(a + b) - lngamma(a)``.
  """
  r = real_lngamma(b)
  r -= b * np.log(a)
  r += b * (1 - b) / (2 * a)
  r += b * (1 - b) * (1 - 2 * b) / (12 * a * a)
  r -= b * b * (1 - b) * (1 - b) / (12 * a * a * a)
  return r


def _is_asymptotic(a, b):
  return abs(a) > _ASYMP_FACTOR * abs(b) and a > _ASYMP_FACTOR


def _exceeds_max_gamma(a, b, y):
  return abs(y) > MAX_GAMMA or abs(a) > MAX_GAMMA or abs(b) > MAX_GAMMA


def _beta_negint(a, b):
  # ``a`` is a non-positive integer
  if b != np.floor(b) or 1 - a - b <= 0:
    return type(a)(np.inf)
  sign = -1 if abs(np.fmod(b, 2)) == 1 else 1
  return sign * real_beta(1 - a - b, b)


def real_beta(a, b):
  if np.isnan(a) or np.isnan(b):
    return a + b
  if is_gamma_pole(a):
    return _beta_negint(a, b)
  if is_gamma_pole(b):
    return _beta_negint(b, a)

  if abs(a) < abs(b):
    a, b = b, a

  if _is_asymptotic(a, b):
    return real_gammasgn(b) * np.exp(_lbeta_asymp(a, b))

  y = a + b
  if _exceeds_max_gamma(a, b, y):
    sign = real_gammasgn(y) * real_gammasgn(a) * real_gammasgn(b)
    return sign * np.exp(real_lngamma(a) + real_lngamma(b) - real_lngamma(y))

  if is_gamma_pole(y):
    # 1 / Gamma(a + b) vanishes
    return real_gammasgn(a) * real_gammasgn(b) * type(y)(0)

  y = real_gamma(y)
  a = real_gamma(a)
  b = real_gamma(b)

  # the order of the division and multiplication avoids intermediate overflow
  if abs(abs(a) - abs(y)) > abs(abs(b) - abs(y)):
    return (b / y) * a
  return (a / y) * b


def _lbeta_negint(a, b):
  # ``a`` is a non-positive integer
  if b != np.floor(b) or 1 - a - b <= 0:
    return type(a)(np.inf)
  return real_lbeta(1 - a - b, b)


def real_lbeta(a, b):
  if np.isnan(a) or np.isnan(b):
    return a + b
  if is_gamma_pole(a):
    return _lbeta_negint(a, b)
  if is_gamma_pole(b):
    return _lbeta_negint(b, a)

  if abs(a) < abs(b):
    a, b = b, a

  if _is_asymptotic(a, b):
    return _lbeta_asymp(a, b)

  y = a + b
  if _exceeds_max_gamma(a, b, y):
    return real_lngamma(a) + real_lngamma(b) - real_lngamma(y)

  if is_gamma_pole(y):
    return type(y)(-np.inf)

  y = real_gamma(y)
  a = real_gamma(a)
  b = real_gamma(b)
  if y == 0:
    return type(y)(np.inf)
  if abs(abs(a) - abs(y)) > abs(abs(b) - abs(y)):
    return np.log(abs((b / y) * a))
  return np.log(abs((a / y) * b))


@ignore_fp_errors
def beta(a, b):
  r"""The Beta function.

  .. math::

     B(a, b) = \frac{\Gamma(a)\Gamma(b)}{\Gamma(a + b)}
     = \int_0^1 t^{a-1} (1 - t)^{b-1} dt

  The evaluation follows the Cephes ``beta`` routine:

  1. A non-positive integer argument is handled with
     :math:`B(a, b) = (-1)^b B(1 - a - b, b)`, which diverges (``inf``)
     unless ``b`` is an integer with :math:`1 - a - b > 0`.
  2. The arguments are ordered so that :math:`|a| \ge |b|`. For
     :math:`a > 10^6 \max(|b|, 1)` an asymptotic expansion of
     :math:`\ln|B(a, b)|` in :math:`1/a` is used.
  3. When one of :math:`a, b, a + b` exceeds ``MAX_GAMMA`` the logarithms
     of the Gamma functions are combined instead.
  4. Otherwise the three Gamma values are combined directly.

  Parameters
  ----------
  a: float
  b: float

  Returns
  -------
  value: np.floating

  Examples
  --------
  >>> beta(2.0, 2.0)
  np.float64(0.16666666666666666)
  >>> beta(-1.0, 3.0)
  np.float64(inf)
  """
  a, b = as_real_pair(a, b)
  return real_beta(a, b)


@ignore_fp_errors
def lbeta(a, b):
  r"""Natural logarithm of the absolute value of the Beta function.

  .. math::

     \ln\left|B(a, b)\right|

  Follows the same branches as :func:`beta` without the final
  exponentiation, which keeps the result finite for arguments where
  :math:`B(a, b)` under- or overflows.

  Parameters
  ----------
  a: float
  b: float

  Returns
  -------
  value: np.floating
  """
  a, b = as_real_pair(a, b)
  return real_lbeta(a, b)
