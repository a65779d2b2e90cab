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

from specfun._src.constants import (
  E as E,
  PI as PI,
  TAU as TAU,
  SQRT_TAU as SQRT_TAU,
  SQRT_PI as SQRT_PI,
  LOG_PI as LOG_PI,
  LOG_SQRT_2_PI as LOG_SQRT_2_PI,
  EULER_GAMMA as EULER_GAMMA,
  MAX_GAMMA as MAX_GAMMA,
)
