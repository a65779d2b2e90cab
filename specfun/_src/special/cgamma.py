# -*- coding: utf-8 -*-

"""Gamma family on the complex plane.

The principal branch of :math:`\\ln\\Gamma(z)` is computed first; the Gamma
function and its reciprocal follow by exponentiation.
"""

import numpy as np

from specfun._src.constants import TAU, LOG_PI
from ._utils import coefficient_table, real_type
from .gamma_util import is_gamma_pole, complex_sinpi, lngamma_stirling_series
from .polyseries import eval_poly

__all__ = [
  'complex_loggamma',
  'complex_gamma',
  'complex_rgamma',
]

# Taylor coefficients of ln Gamma(z) around z = 1, highest degree first.
# The expansion is (z - 1) * (-gamma + zeta(2) (z - 1) / 2 - ...).
_TAYLOR = coefficient_table(
  -4.3478266053040259361e-2, 4.5454556293204669442e-2,
  -4.7619070330142227991e-2, 5.000004769810169364e-2,
  -5.2631679379616660734e-2, 5.5555767627403611102e-2,
  -5.8823978658684582339e-2, 6.2500955141213040742e-2,
  -6.6668705882420468033e-2, 7.1432946295361336059e-2,
  -7.6932516411352191473e-2, 8.3353840546109004025e-2,
  -9.0954017145829042233e-2, 1.0009945751278180853e-1,
  -1.1133426586956469049e-1, 1.2550966952474304242e-1,
  -1.4404989676884611812e-1, 1.6955717699740818995e-1,
  -2.0738555102867398527e-1, 2.7058080842778454788e-1,
  -4.0068563438653142847e-1, 8.2246703342411321824e-1,
  -5.7721566490153286061e-1,
)

_MIN_TO_USE_STIRLING = 7.0
_TAYLOR_RADIUS = 0.2
_MAX_TO_REFLECT = 0.1


def _loggamma_taylor(z):
  T = real_type(type(z))
  w = z - 1
  return w * eval_poly(w, _TAYLOR[T])


def _loggamma_recurrence(z):
  """Shift ``z`` into the Stirling region with ``z + 1``, for ``Im z >= 0``.

  Every time the imaginary part of the running product crosses from the
  upper to the lower half plane, the principal logarithm of the product
  jumps by :math:`2\\pi i`. Counting these crossings puts the result back on
  the principal sheet of :math:`\\ln\\Gamma`.
  """
  T = real_type(type(z))
  product = z
  signbit = False
  signflips = 0
  z = z + 1
  while z.real <= _MIN_TO_USE_STIRLING:
    product = product * z
    new_signbit = bool(np.signbit(product.imag))
    if new_signbit and not signbit:
      signflips += 1
    signbit = new_signbit
    z = z + 1
  return lngamma_stirling_series(z) - np.log(product) - 1j * T(signflips * TAU)


def complex_loggamma(z):
  r"""Principal branch of :math:`\ln\Gamma(z)` for a complex scalar.

  The function has a single branch cut along the negative real axis.
  Depending on the region of ``z``, one of the following is used:

  - Stirling's series for :math:`\Re z > 7` or :math:`|\Im z| > 7`;
  - the Taylor series around :math:`z = 1` for :math:`|z - 1| \le 0.2`,
    and around :math:`z = 2` for :math:`|z - 2| \le 0.2`;
  - the reflection formula for :math:`\Re z < 0.1`;
  - the recurrence :math:`\ln\Gamma(z) = \ln\Gamma(z + n) - \ln(z (z+1) \cdots (z+n-1))`
    otherwise.

  Parameters
  ----------
  z: np.complex64, np.complex128
    The argument.

  Returns
  -------
  value: np.complex64, np.complex128
    :math:`\ln\Gamma(z)`. Non-finite arguments are returned unchanged and
    the poles give ``nan + nanj``.
  """
  C = type(z)
  T = real_type(C)
  if not np.isfinite(z):
    return z
  if is_gamma_pole(z):
    return C(complex(np.nan, np.nan))

  if z.real > _MIN_TO_USE_STIRLING or abs(z.imag) > _MIN_TO_USE_STIRLING:
    return C(lngamma_stirling_series(z))
  if abs(z - 1) <= _TAYLOR_RADIUS:
    return C(_loggamma_taylor(z))
  if abs(z - 2) <= _TAYLOR_RADIUS:
    w = z - 1
    return C(np.log(w) + _loggamma_taylor(w))

  if z.real < _MAX_TO_REFLECT:
    # ln sin(pi z) loses track of the winding of sin(pi z) around the origin
    winding = np.copysign(T(TAU), z.imag) * np.floor((2 * z.real + 1) / 4)
    phase = T(LOG_PI) - np.log(complex_sinpi(z))
    return C(phase - complex_loggamma(1 - z) + 1j * winding)

  if not np.signbit(z.imag):
    return C(_loggamma_recurrence(z))
  return C(np.conj(_loggamma_recurrence(np.conj(z))))


def complex_gamma(z):
  """:math:`\\Gamma(z)` for a complex scalar; ``nan + nanj`` at the poles."""
  if is_gamma_pole(z):
    return type(z)(complex(np.nan, np.nan))
  return np.exp(complex_loggamma(z))


def complex_rgamma(z):
  """:math:`1 / \\Gamma(z)` for a complex scalar; exactly zero at the poles."""
  if is_gamma_pole(z):
    return type(z)(0)
  return np.exp(-complex_loggamma(z))
