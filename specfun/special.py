# -*- coding: utf-8 -*-
# Copyright 2025 specfun Team. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================
"""
Special functions of real and complex scalars.

- the Gamma function and its relatives: ``gamma``, ``lngamma``,
  ``gammasgn``, ``rgamma``, ``loggamma``, ``poch``, ``beta`` and ``lbeta``
- the error functions ``erf`` and ``erfc``
- exact factorials, multifactorials and binomial coefficients
- the Bernoulli, tangent and secant numbers
- the building blocks of the approximations (polynomial and Chebyshev
  series, Euler's reflection formula, Stirling's series)
"""

from specfun._src.special.polyseries import (
  eval_poly as eval_poly,
  eval_cheby as eval_cheby,
)

from specfun._src.special.gamma_util import (
  is_gamma_pole as is_gamma_pole,
  sinpi as sinpi,
  cospi as cospi,
  complex_sinpi as complex_sinpi,
  reflection_sine as reflection_sine,
  euler_reflection_prefactor as euler_reflection_prefactor,
  log_abs_reflection_prefactor as log_abs_reflection_prefactor,
  gamma_stirling_series as gamma_stirling_series,
  lngamma_stirling_series as lngamma_stirling_series,
)

from specfun._src.special.gamma import (
  gamma as gamma,
)

from specfun._src.special.lgamma import (
  lngamma as lngamma,
  lgamma as lgamma,
  loggamma as loggamma,
  gammasgn as gammasgn,
)

from specfun._src.special.rgamma import (
  rgamma as rgamma,
)

from specfun._src.special.poch import (
  poch as poch,
)

from specfun._src.special.beta import (
  beta as beta,
  lbeta as lbeta,
)

from specfun._src.special.erf import (
  erf as erf,
  erfc as erfc,
)

from specfun._src.special.factorial import (
  factorial as factorial,
  factorial2 as factorial2,
  factorialk as factorialk,
  checked_factorial as checked_factorial,
  checked_factorial2 as checked_factorial2,
  checked_factorialk as checked_factorialk,
)

from specfun._src.special.combinatorics import (
  choose as choose,
  choose_rep as choose_rep,
  perm as perm,
  checked_choose as checked_choose,
  checked_choose_rep as checked_choose_rep,
  checked_perm as checked_perm,
)

from specfun._src.special.sequences import (
  bernoulli as bernoulli,
  tangent_numbers as tangent_numbers,
  secant_numbers as secant_numbers,
)
