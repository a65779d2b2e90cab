# -*- coding: utf-8 -*-

"""Error function and complementary error function.

The rational approximations are those of the Boost.Math library (64-bit
precision tables). Each one is a minimax fit of the form ``Y + P(t) / Q(t)``
where ``Y`` is a constant chosen so that the rational part is a small
correction.
"""

import numpy as np

from ._utils import coefficient_table, ignore_fp_errors, as_real
from .polyseries import eval_poly

__all__ = [
  'erf',
  'erfc',
]

_C = coefficient_table(1.125, 0.003379167095512573896158903121545171688)

_Y = coefficient_table(
  1.044948577880859375,
  0.405935764312744140625,
  0.50672817230224609375,
  0.5405750274658203125,
  0.55825519561767578125,
)

# erf(x) / x on [0, 0.5), in powers of x^2
_P1 = coefficient_table(
  -0.200305626366151877759e-4,
  -0.000489468651464798669181,
  -0.00904906346158537794396,
  -0.0509602734406067204596,
  -0.338097283075565413695,
  0.0834305892146531988966,
)
_Q1 = coefficient_table(
  0.189532519105655496778e-4,
  0.000650511752687851548735,
  0.0102722652675910031202,
  0.0916537354356241792007,
  0.455817300515875172439,
  1.0,
)

# erfc(x) x exp(x^2) on [0.5, 1.5), in powers of x - 0.5
_P2 = coefficient_table(
  0.266689068336295642561e-7,
  0.000441266654514391746428,
  0.00628431160851156719325,
  0.0384057530342762400273,
  0.127303921703577362312,
  0.222359821619935712378,
  0.159989089922969141329,
  -0.0980905922162812031672,
)
_Q2 = coefficient_table(
  0.00279220237309449026796,
  0.0396649631833002269861,
  0.248025606990021698392,
  0.867940326293760578231,
  1.78355454954969405222,
  2.03237474985469469291,
  1.0,
)

# [1.5, 2.5), in powers of x - 1.5
_P3 = coefficient_table(
  0.515917266698050027934e-4,
  0.00090807914416099524444,
  0.00669349844190354356118,
  0.0257479325917757388209,
  0.0505420824305544949541,
  0.0343522687935671451309,
  -0.024350047620769840217,
)
_Q3 = coefficient_table(
  0.000897871370778031611439,
  0.0158027197831887485261,
  0.120902623051120950935,
  0.512371437838969015941,
  1.26409634824280366218,
  1.71657861671930336344,
  1.0,
)

# [2.5, 4.5), in powers of x - 3.5
_P4 = coefficient_table(
  0.189896043050331257262e-5,
  0.523435380636174008685e-4,
  0.00059065441194877637899,
  0.00343963795976100077626,
  0.0104959584626432293901,
  0.0141853245895495604051,
  0.0029527671653097284033,
)
_Q4 = coefficient_table(
  0.804149464190309799804e-4,
  0.00221657568292893699158,
  0.0259729870946203166468,
  0.165411142458540585835,
  0.603256964363454392857,
  1.19352160185285642574,
  1.0,
)

# [4.5, inf), in powers of 1 / x
_P5 = coefficient_table(
  -16.8865774499799676937,
  -29.2545152747009461519,
  -27.1274948720539821722,
  -13.8677304660245326627,
  -5.47351527796012049443,
  -0.978088201154300548842,
  -0.141597835204583050043,
  0.0280666231009089713937,
  0.00593438793008050214106,
)
_Q5 = coefficient_table(
  30.8365511891224291717,
  104.365251479578577989,
  182.499390505915222699,
  178.167924971283482513,
  131.766251645149522868,
  60.0021517335693186785,
  23.6750543147695749212,
  4.72948911186645394541,
  1.0,
)

# erf(x) rounds to 1 above 6.6, erfc(x) underflows above 110
_MAX_ERF = 6.6
_MAX_ERFC = 110.0


def _exp_minus_square(x):
  """``exp(-x * x)`` with the rounding error of ``x * x`` compensated.

  ``x`` is split into a high part carrying 32 bits of mantissa and a low
  remainder so that the error of the rounded square can be evaluated
  exactly and folded back in.
  """
  mantissa, expon = np.frexp(x)
  hi = np.ldexp(np.floor(np.ldexp(mantissa, 32)), expon - 32)
  lo = x - hi
  sq = x * x
  err_sq = ((hi * hi - sq) + 2 * hi * lo) + lo * lo
  return np.exp(-sq) * np.exp(-err_sq)


def real_erf(x, complement: bool = False):
  """erf(x), or erfc(x) when ``complement`` is set, for a real numpy scalar."""
  T = type(x)
  if np.isnan(x):
    return x
  if np.signbit(x):
    if not complement:
      return -real_erf(-x, complement)
    if x < -0.5:
      return 2 - real_erf(-x, complement)
    return 1 + real_erf(-x, False)

  if x < 0.5:
    # erf is computed here
    if x == 0:
      result = T(0)
    elif x < 1e-10:
      result = x * _C[T][0] + _C[T][1] * x
    else:
      xx = x * x
      result = x * (_Y[T][0] + eval_poly(xx, _P1[T]) / eval_poly(xx, _Q1[T]))
  elif x < (_MAX_ERFC if complement else _MAX_ERF):
    # erfc is computed here
    complement = not complement
    if x < 1.5:
      t = x - T(0.5)
      r = _Y[T][1] + eval_poly(t, _P2[T]) / eval_poly(t, _Q2[T])
    elif x < 2.5:
      t = x - T(1.5)
      r = _Y[T][2] + eval_poly(t, _P3[T]) / eval_poly(t, _Q3[T])
    elif x < 4.5:
      t = x - T(3.5)
      r = _Y[T][3] + eval_poly(t, _P4[T]) / eval_poly(t, _Q4[T])
    else:
      t = 1 / x
      r = _Y[T][4] + eval_poly(t, _P5[T]) / eval_poly(t, _Q5[T])
    result = r * _exp_minus_square(x) / x
  else:
    # erf is 1 and erfc is 0 to working precision
    complement = not complement
    result = T(0)

  if complement:
    return 1 - result
  return result


@ignore_fp_errors
def erf(x):
  r"""The error function.

  .. math::

     \mathrm{erf}(x) = \frac{2}{\sqrt{\pi}} \int_0^x e^{-t^2} dt

  Parameters
  ----------
  x: float
    The argument.

  Returns
  -------
  value: np.floating
    ``erf(x)``, with ``erf(-x) = -erf(x)`` and ``erf(+-inf) = +-1``.
  """
  return real_erf(as_real(x), False)


@ignore_fp_errors
def erfc(x):
  r"""The complementary error function, :math:`1 - \mathrm{erf}(x)`.

  Computed directly for :math:`x \ge 0.5`, so it keeps full relative
  accuracy in the tail where ``1 - erf(x)`` would cancel.

  Parameters
  ----------
  x: float
    The argument.

  Returns
  -------
  value: np.floating
  """
  return real_erf(as_real(x), True)
