# -*- coding: utf-8 -*-

import numpy as np

from ._utils import coefficient_table, ignore_fp_errors, is_complex, as_real, as_complex
from .cgamma import complex_rgamma
from .gamma_util import is_gamma_pole, log_abs_reflection_prefactor
from .lgamma import real_lngamma, real_gammasgn
from .polyseries import eval_cheby

__all__ = [
  'rgamma',
]

# Chebyshev coefficients of x / Gamma(x + 1) - x on (0, 1), the constant term
# last. The interval is mapped onto [-1, 1] with 2x - 1.
_R = coefficient_table(
  3.13173458231230000000E-17,
  -6.70718606477908000000E-16,
  2.20039078172259550000E-15,
  2.47691630348254132600E-13,
  -6.60074100411295197440E-12,
  5.13850186324226978840E-11,
  1.08965386454418662084E-9,
  -3.33964630686836942556E-8,
  2.68975996440595483619E-7,
  2.96001177518801696639E-6,
  -8.04814124978471142852E-5,
  4.16609138709688864714E-4,
  5.06579864028608725080E-3,
  -6.41925436109158228810E-2,
  -4.98558728684003594785E-3,
  6.37730078052619747675E-2,
)

_MIN_VALUE_FOR_EXP = 34.84425627277176174


def real_rgamma(x):
  T = type(x)
  if is_gamma_pole(x):
    return T(0)

  if x > _MIN_VALUE_FOR_EXP:
    return np.exp(-real_lngamma(x))
  if x < -_MIN_VALUE_FOR_EXP:
    y = real_lngamma(-x) - log_abs_reflection_prefactor(x)
    return real_gammasgn(x) * np.exp(y)

  z = T(1)
  w = x
  while w > 1:
    w -= 1
    z *= w
  while w < 0:
    z /= w
    w += 1
  if w == 1:
    return 1 / z
  return w * (1 + eval_cheby(2 * w - 1, _R[T])) / z


@ignore_fp_errors
def rgamma(x):
  r"""Reciprocal of the Gamma function.

  .. math::

     \frac{1}{\Gamma(x)}

  The Gamma function is never zero, so the reciprocal is an entire
  function: it is exactly ``0`` at the poles ``0, -1, -2, ...``.

  Following the Cephes ``rgamma`` routine, arguments in
  :math:`|x| \le 34.84` are moved into :math:`(0, 1]` by recursion and
  evaluated with a Chebyshev series of order 16. Larger arguments use
  :math:`e^{-\ln\Gamma(x)}` (and the reflection formula for negative ones);
  overflow and underflow can still occur there.

  Parameters
  ----------
  x: float, complex, np.floating, np.complexfloating
    The argument.

  Returns
  -------
  value: np.floating, np.complexfloating

  Examples
  --------
  >>> rgamma(-2.0)
  np.float64(0.0)
  """
  if is_complex(x):
    return complex_rgamma(as_complex(x))
  return real_rgamma(as_real(x))
