# -*- coding: utf-8 -*-

import numpy as np

from specfun._src.constants import PI, EULER_GAMMA
from ._utils import coefficient_table, ignore_fp_errors, is_complex, as_real, as_complex
from .cgamma import complex_gamma
from .gamma_util import is_gamma_pole, euler_reflection_prefactor, gamma_stirling_series
from .polyseries import eval_poly

__all__ = [
  'gamma',
]

# Rational approximation of Gamma(x + 2) on [0, 1).
_P = coefficient_table(
  1.60119522476751861407E-4,
  1.19135147006586384913E-3,
  1.04213797561761569935E-2,
  4.76367800457137231464E-2,
  2.07448227648435975150E-1,
  4.94214826801497100753E-1,
  9.99999999999999996796E-1,
)
_Q = coefficient_table(
  -2.31581873324120129819E-5,
  5.39605580493303397842E-4,
  -4.45641913851797240494E-3,
  1.18139785222060435552E-2,
  3.58236398605498653373E-2,
  -2.34591795718243348568E-1,
  7.14304917030273074085E-2,
  1.00000000000000000320E0,
)

_MIN_TO_USE_STIRLING = 33.0
_MAX_FOR_LAURENT = 1e-7

# pi^2 / 6 + gamma_E^2
_LAURENT_X = PI * PI / 6 + EULER_GAMMA * EULER_GAMMA


def real_gamma(x):
  T = type(x)
  if is_gamma_pole(x):
    return T(np.nan)
  if not np.isfinite(x):
    return x

  if x < 0:
    return euler_reflection_prefactor(x) / real_gamma(-x)

  if x > _MIN_TO_USE_STIRLING:
    return gamma_stirling_series(x)

  if x < _MAX_FOR_LAURENT:
    return 1 / x - T(EULER_GAMMA) + x / 2 * T(_LAURENT_X)

  z = T(1)
  while x >= 3:
    x -= 1
    z *= x
  while x < 2:
    z /= x
    x += 1
  if x == 2:
    return z

  x -= 2
  return z * eval_poly(x, _P[T]) / eval_poly(x, _Q[T])


@ignore_fp_errors
def gamma(x):
  r"""The Gamma function.

  .. math::

     \Gamma(z) = \int_0^\infty t^{z-1} e^{-t} dt

  for :math:`\Re z > 0`, and by analytic continuation elsewhere. For
  integers :math:`\Gamma(n + 1) = n!`.

  Real arguments are evaluated in the style of the Cephes library:

  - negative arguments are reflected with
    :math:`\Gamma(-x)\Gamma(x) = -\pi / (x \sin \pi x)`;
  - :math:`x > 33` uses Stirling's series;
  - :math:`x < 10^{-7}` uses the Laurent series around zero,
    :math:`1/x - \gamma + (\pi^2/6 + \gamma^2) x / 2`;
  - everything else is shifted into :math:`[2, 3)` with
    :math:`\Gamma(x + 1) = x \Gamma(x)` and evaluated with a rational
    function of degree 6/7.

  Complex arguments are evaluated as :math:`\exp(\ln\Gamma(z))`.

  Parameters
  ----------
  x: float, complex, np.floating, np.complexfloating
    The argument.

  Returns
  -------
  value: np.floating, np.complexfloating
    :math:`\Gamma(x)`, in the precision of ``x``. It is NaN at the poles
    ``0, -1, -2, ...`` and ``-inf``, and ``inf`` at ``+inf``.

  Examples
  --------
  >>> import specfun
  >>> specfun.gamma(4.)
  np.float64(6.0)
  >>> specfun.gamma(0.)
  np.float64(nan)
  """
  if is_complex(x):
    return complex_gamma(as_complex(x))
  return real_gamma(as_real(x))
