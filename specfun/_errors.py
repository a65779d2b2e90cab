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

# -*- coding: utf-8 -*-


__all__ = [
    'SpecfunError',
    'UnsupportedError',
    'PrecisionError',
]


class SpecfunError(Exception):
    """General specfun error."""
    __module__ = 'specfun'


class UnsupportedError(SpecfunError):
    """The argument type (or shape) is not supported by a scalar routine."""
    __module__ = 'specfun'


class PrecisionError(UnsupportedError, TypeError):
    """The requested floating precision is not supported."""
    __module__ = 'specfun'

    def __init__(self, dtype):
        super().__init__(f'Data type {dtype} is not supported. Only single '
                         f'and double precision (float32/float64, '
                         f'complex64/complex128) are available.')
