# -*- coding: utf-8 -*-

import numpy as np

from ._utils import ignore_fp_errors, as_real_pair
from .lgamma import real_lngamma, real_gammasgn

__all__ = [
  'poch',
]

# Above this x (and for |m| <= 1) the ratio is expanded in powers of 1/x.
_MIN_FOR_EXPANSION = 1e4


def _is_nonpositive_int(x):
  return bool(np.isfinite(x) and x <= 0 and x == np.ceil(x))


def real_poch(x, m):
  T = type(x)
  r = T(1)

  # Move m into (-1, 1) with Gamma(x + 1) = x Gamma(x).
  while m >= 1:
    if x + m == 1:
      break
    m -= 1
    r *= x + m
    if not np.isfinite(r) or r == 0:
      break

  while m <= -1:
    if x + m == 1:
      break
    r /= x + m
    m += 1
    if not np.isfinite(r) or r == 0:
      break

  if m == 0:
    return r

  if x > _MIN_FOR_EXPANSION and abs(m) <= 1:
    return r * x ** m * (1
                         + m * (m - 1) / (2 * x)
                         + m * (m - 1) * (m - 2) * (3 * m - 1) / (24 * x * x)
                         + m * m * (m - 1) * (m - 1) * (m - 2) * (m - 3) / (48 * x * x * x))

  # Gamma(x + m) is infinite while Gamma(x) is finite.
  if _is_nonpositive_int(x + m) and not _is_nonpositive_int(x) and x + m != m:
    return T(np.nan)

  # Gamma(x) is infinite while Gamma(x + m) is finite.
  if not _is_nonpositive_int(x + m) and _is_nonpositive_int(x):
    return T(0)

  return (r
          * np.exp(real_lngamma(x + m) - real_lngamma(x))
          * real_gammasgn(x + m)
          * real_gammasgn(x))


@ignore_fp_errors
def poch(x, m):
  r"""Pochhammer symbol, the rising factorial.

  .. math::

     (x)_m = \frac{\Gamma(x + m)}{\Gamma(x)}

  For a non-negative integer ``m`` it reduces to
  :math:`x (x + 1) \cdots (x + m - 1)`.

  Parameters
  ----------
  x: float
    The base.
  m: float
    The (real) number of factors.

  Returns
  -------
  value: np.floating
    The Pochhammer symbol. It is NaN when only :math:`\Gamma(x + m)` is at
    a pole and ``0`` when only :math:`\Gamma(x)` is.

  Examples
  --------
  >>> poch(1.0, 4.0)   # 4!
  np.float64(24.0)
  >>> poch(-2.0, 1.0)
  np.float64(-2.0)
  """
  x, m = as_real_pair(x, m, ('x', 'm'))
  return real_poch(x, m)
