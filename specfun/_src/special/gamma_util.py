# -*- coding: utf-8 -*-

"""Building blocks shared by the Gamma family.

- pole detection
- Euler's reflection formula
- Stirling series for :math:`\\Gamma(x)` and :math:`\\ln\\Gamma(z)`
"""

import numpy as np

from specfun._src.constants import E, PI, SQRT_TAU, LOG_PI, LOG_SQRT_2_PI, MAX_GAMMA
from ._utils import coefficient_table, real_type
from .polyseries import eval_poly

__all__ = [
  'is_gamma_pole',
  'sinpi',
  'cospi',
  'complex_sinpi',
  'reflection_sine',
  'euler_reflection_prefactor',
  'log_abs_reflection_prefactor',
  'gamma_stirling_series',
  'lngamma_stirling_series',
]

# Stirling's formula for the Gamma function, OEIS A001163 / A001164:
# 1/12, 1/288, -139/51840, -571/2488320, 163879/209018880
_STIR = coefficient_table(
  7.84039221720066615423E-4,
  -2.29472093621399167830E-4,
  -2.68132716049382727186E-3,
  3.47222222222222202948E-3,
  8.33333333333333287074E-2,
)

# Beyond these arguments (x/e)^x overflows before the prefactor sqrt(2 pi / x)
# brings it back into range.
_MAX_STIR = {np.float32: np.float32(26.77), np.float64: np.float64(143.01608)}

# Gamma(x) overflows beyond these arguments.
_MAX_GAMMA = {np.float32: np.float32(35.040095), np.float64: np.float64(MAX_GAMMA)}

# B_2n / (2n (2n - 1)) for n = 8, 7, ..., 1
_LNSTIR = coefficient_table(
  -2.955065359477124183e-2,
  6.4102564102564102564e-3,
  -1.9175269175269175269e-3,
  8.4175084175084175084e-4,
  -5.952380952380952381e-4,
  7.9365079365079365079e-4,
  -2.7777777777777777778e-3,
  8.3333333333333333333e-2,
)


def is_gamma_pole(z) -> bool:
  """Whether ``z`` is a pole of the Gamma function.

  The poles are the non-positive integers, :math:`0, -1, -2, \\ldots`,
  together with :math:`-\\infty`. Complex arguments are poles only when
  their imaginary part is zero.
  """
  re = z.real
  return bool(re <= 0 and re == np.floor(re) and z.imag == 0)


def reflection_sine(x_abs, x_floor):
  """Magnitude of :math:`x \\sin(\\pi x)` for ``x_abs = |x|`` and ``x_floor = floor(|x|)``.

  The fractional part is folded into :math:`[0, 0.5]` before taking the
  sine, which keeps the result accurate near the integers.
  """
  frac = x_abs - x_floor
  if frac > 0.5:
    frac = (x_floor + 1) - x_abs
  return x_abs * np.sin(type(x_abs)(PI) * frac)


def sinpi(x):
  """:math:`\\sin(\\pi x)` for a real ``x``, reduced modulo 2 before scaling by pi."""
  T = type(x)
  s = T(1)
  if x < 0:
    x = -x
    s = T(-1)
  r = np.fmod(x, T(2))
  if r < 0.5:
    return s * np.sin(T(PI) * r)
  if r > 1.5:
    return s * np.sin(T(PI) * (r - 2))
  return -s * np.sin(T(PI) * (r - 1))


def cospi(x):
  """:math:`\\cos(\\pi x)` for a real ``x``; exactly ``+0`` at the half-integers."""
  T = type(x)
  r = np.fmod(abs(x), T(2))
  if r == 0.5:
    return T(0)
  if r < 1:
    return -np.sin(T(PI) * (r - T(0.5)))
  return np.sin(T(PI) * (r - T(1.5)))


def complex_sinpi(z):
  r""":math:`\sin(\pi z)` for a complex ``z``.

  .. math::

     \sin(\pi z) = \sin(\pi x)\cosh(\pi y) + i \cos(\pi x)\sinh(\pi y)

  The real part is reduced exactly, so on the lines :math:`x = k + 1/2`
  the imaginary part is a zero carrying the sign of :math:`y`, and the
  logarithm of the result stays on the side of its branch cut that
  matches the sign of :math:`y`.
  """
  T = real_type(type(z))
  piy = T(PI) * z.imag
  return type(z)(complex(sinpi(z.real) * np.cosh(piy), cospi(z.real) * np.sinh(piy)))


def euler_reflection_prefactor(z):
  r"""The prefactor of Euler's reflection formula.

  .. math::

     \Gamma(-z)\Gamma(z) = -\frac{\pi}{z \sin(\pi z)}

  Parameters
  ----------
  z: np.floating, np.complexfloating
    The argument.

  Returns
  -------
  prefactor: np.floating, np.complexfloating
    :math:`-\pi / (z \sin \pi z)`. It is infinite at the integers.
  """
  if isinstance(z, np.complexfloating):
    pi = real_type(type(z))(PI)
    return -pi / (z * complex_sinpi(z))
  T = type(z)
  x_abs = abs(z)
  x_floor = np.floor(x_abs)
  # x sin(pi x) is even, positive on (2k, 2k + 1) and negative on (2k + 1, 2k + 2)
  sign = T(1) if np.fmod(x_floor, 2) == 1 else T(-1)
  return sign * T(PI) / reflection_sine(x_abs, x_floor)


def log_abs_reflection_prefactor(x):
  """:math:`\\ln |\\pi / (x \\sin \\pi x)|` for a real ``x``."""
  x_abs = abs(x)
  return type(x)(LOG_PI) - np.log(reflection_sine(x_abs, np.floor(x_abs)))


def gamma_stirling_series(x):
  r"""Stirling's series of :math:`\Gamma(x)` for a large positive ``x``.

  .. math::

     \Gamma(x) \approx \sqrt{\frac{2\pi}{x}} \left(\frac{x}{e}\right)^x
     \left(1 + \frac{1}{12 x} + \frac{1}{288 x^2} - \frac{139}{51840 x^3}
     - \frac{571}{2488320 x^4} + \ldots \right)

  It is accurate to double precision for :math:`x > 33`.
  Arguments beyond the overflow threshold of the precision give ``inf``.
  """
  T = type(x)
  if x > _MAX_GAMMA[T]:
    return T(np.inf)
  w = 1 / x
  series = 1 + w * eval_poly(w, _STIR[T])
  if x > _MAX_STIR[T]:
    v = x ** (x / 2 - T(0.25))
    return T(SQRT_TAU) * (v * (v / np.exp(x))) * series
  return T(SQRT_TAU) / np.sqrt(x) * (x / T(E)) ** x * series


def lngamma_stirling_series(z):
  r"""Stirling's series of :math:`\ln\Gamma(z)` for a large ``z``.

  .. math::

     \ln\Gamma(z) \approx \left(z - \frac{1}{2}\right)\ln z - z + \ln\sqrt{2\pi}
     + \sum_{n=1}^{8} \frac{B_{2n}}{2n(2n - 1) z^{2n - 1}}

  ``z`` may be real or complex. The real branch is used for :math:`x \geq 13`
  and the complex one for :math:`\Re z > 7` or :math:`|\Im z| > 7`.
  """
  T = real_type(type(z))
  rz = 1 / z
  rzz = rz / z
  q = (z - T(0.5)) * np.log(z) - z + T(LOG_SQRT_2_PI)
  return q + eval_poly(rzz, _LNSTIR[T]) * rz
