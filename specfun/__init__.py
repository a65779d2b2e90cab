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

__version__ = "0.1.0"
__version_info__ = tuple(map(int, __version__.split(".")))

from specfun import _errors as errors
# fundamental supporting modules
from specfun import check
from specfun import constants
from specfun import special

# environment settings
from specfun._src.environment import (
  environment as environment,
  set_environment as set_environment,
  set_float as set_float,
  get_float as get_float,
  set_complex as set_complex,
  get_complex as get_complex,
  enable_x64 as enable_x64,
  disable_x64 as disable_x64,
  set_x64 as set_x64,
  is_x64 as is_x64,
)

# errors
from specfun._errors import (
  SpecfunError as SpecfunError,
  UnsupportedError as UnsupportedError,
  PrecisionError as PrecisionError,
)

# special functions
from specfun.special import (
  gamma as gamma,
  lngamma as lngamma,
  lgamma as lgamma,
  loggamma as loggamma,
  gammasgn as gammasgn,
  rgamma as rgamma,
  poch as poch,
  beta as beta,
  lbeta as lbeta,
  erf as erf,
  erfc as erfc,
  factorial as factorial,
  factorial2 as factorial2,
  factorialk as factorialk,
  checked_factorial as checked_factorial,
  checked_factorial2 as checked_factorial2,
  checked_factorialk as checked_factorialk,
  choose as choose,
  choose_rep as choose_rep,
  perm as perm,
  checked_choose as checked_choose,
  checked_choose_rep as checked_choose_rep,
  checked_perm as checked_perm,
  bernoulli as bernoulli,
  tangent_numbers as tangent_numbers,
  secant_numbers as secant_numbers,
)

from specfun._src.deprecations import deprecation_getattr2

__deprecations = {
  'gammaln': ('specfun.gammaln', 'specfun.lngamma', lngamma),
}
__getattr__ = deprecation_getattr2('specfun', __deprecations)
del deprecation_getattr2
