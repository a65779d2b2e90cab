# -*- coding: utf-8 -*-

import numpy as np

from ._utils import coefficient_table, ignore_fp_errors, is_complex, as_real, as_complex
from .cgamma import complex_loggamma
from .gamma_util import is_gamma_pole, log_abs_reflection_prefactor, lngamma_stirling_series
from .polyseries import eval_poly

__all__ = [
  'lngamma',
  'lgamma',
  'loggamma',
  'gammasgn',
]

# ln Gamma(x + 2) = ln Gamma(2) + x B(x) / C(x) for x in [0, 1)
_B = coefficient_table(
  -1.37825152569120859100E3,
  -3.88016315134637840924E4,
  -3.31612992738871184744E5,
  -1.16237097492762307383E6,
  -1.72173700820839662146E6,
  -8.53555664245765465627E5,
)
_C = coefficient_table(
  1.0,
  -3.51815701436523470549E2,
  -1.70642106651881159223E4,
  -2.20528590553854454839E5,
  -1.13933444367982507207E6,
  -2.53252307177582951285E6,
  -2.01889141433532773231E6,
)

_MIN_TO_USE_STIRLING = 13.0


def real_lngamma(x):
  T = type(x)
  if is_gamma_pole(x):
    return T(np.inf)
  if not np.isfinite(x):
    return abs(x)

  if x < 0:
    return log_abs_reflection_prefactor(x) - real_lngamma(-x)

  if x >= _MIN_TO_USE_STIRLING:
    return lngamma_stirling_series(x)

  z = T(1)
  while x >= 3:
    x -= 1
    z *= x
  while x < 2:
    z /= x
    x += 1
  z = abs(z)
  if x == 2:
    return np.log(z)

  x -= 2
  return np.log(z) + x * eval_poly(x, _B[T]) / eval_poly(x, _C[T])


def real_gammasgn(x):
  T = type(x)
  if np.isnan(x):
    return x
  if x > 0:
    return T(1)
  if x == 0:
    return T(0)
  q = abs(x)
  p = np.floor(q)
  if p == q:
    return T(0)
  return T(1) if np.fmod(p, 2) == 1 else T(-1)


@ignore_fp_errors
def lngamma(x):
  r"""Natural logarithm of the absolute value of the Gamma function.

  .. math::

     \ln\left|\Gamma(x)\right|

  For real arguments the sign is recovered with :func:`gammasgn`:
  :math:`\Gamma(x) = \mathrm{gammasgn}(x) e^{\ln|\Gamma(x)|}`. This avoids
  choosing a branch of the complex logarithm, and stays finite far beyond
  the overflow threshold of :func:`gamma`.

  The implementation follows the Cephes ``lgam`` routine: negative
  arguments are reflected, :math:`x \geq 13` uses Stirling's series and
  the remaining arguments are shifted into :math:`[2, 3)` where a rational
  function of degree 5/6 is used.

  For a complex argument the principal branch of :math:`\ln\Gamma(z)` is
  returned, see :func:`loggamma`.

  Parameters
  ----------
  x: float, complex, np.floating, np.complexfloating
    The argument.

  Returns
  -------
  value: np.floating, np.complexfloating
    ``+inf`` at the poles ``0, -1, -2, ...`` of the Gamma function.
  """
  if is_complex(x):
    return complex_loggamma(as_complex(x))
  return real_lngamma(as_real(x))


lgamma = lngamma


@ignore_fp_errors
def loggamma(x):
  r"""Principal branch of the logarithm of the Gamma function.

  For complex :math:`z` the single branch cut lies on the negative real
  axis. For real :math:`x` the principal branch is only real when
  :math:`x > 0`; other real arguments give NaN. Pass ``complex(x, 0)`` to
  get the complex value instead.

  Parameters
  ----------
  x: float, complex, np.floating, np.complexfloating
    The argument.

  Returns
  -------
  value: np.floating, np.complexfloating
  """
  if is_complex(x):
    return complex_loggamma(as_complex(x))
  x = as_real(x)
  if x <= 0:
    return type(x)(np.nan)
  return real_lngamma(x)


@ignore_fp_errors
def gammasgn(x):
  r"""Sign of the Gamma function.

  .. math::

     \mathrm{gammasgn}(x) = \begin{cases}
       +1 & \Gamma(x) > 0 \\
       -1 & \Gamma(x) < 0
     \end{cases}

  :math:`\Gamma(x)` is never zero, so the sign is well defined except at
  the poles :math:`0, -1, -2, \ldots` (and :math:`-\infty`), where ``0`` is
  returned. NaN gives NaN.

  Examples
  --------
  >>> float(gammasgn(1.23)), float(gammasgn(-0.23)), float(gammasgn(-1.5))
  (1.0, -1.0, 1.0)
  """
  return real_gammasgn(as_real(x))
