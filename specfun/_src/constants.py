# -*- coding: utf-8 -*-

"""Numerical constants shared by the special functions.

Every value is given with more digits than a ``float64`` can hold, so the
literal rounds correctly to double precision.
"""

__all__ = [
  'E',
  'PI',
  'TAU',
  'SQRT_TAU',
  'SQRT_PI',
  'LOG_PI',
  'LOG_SQRT_2_PI',
  'EULER_GAMMA',
  'MAX_GAMMA',
]

# Euler's number, e
E = 2.71828182845904523536028747135

# Archimedes' constant
PI = 3.14159265358979323846264338327

# 2 * pi
TAU = 6.28318530717958647692528676655

# sqrt(2 * pi)
SQRT_TAU = 2.50662827463100050241576528481

# sqrt(pi)
SQRT_PI = 1.77245385090551602729816748334

# ln(pi)
LOG_PI = 1.14472988584940017414342735135

# ln(sqrt(2 * pi))
LOG_SQRT_2_PI = 0.91893853320467274178032973640

# Euler-Mascheroni constant
EULER_GAMMA = 0.57721566490153286060651209008

# Largest argument for which gamma(x) is representable in double precision.
MAX_GAMMA = 171.624376956302725
