# -*- coding: utf-8 -*-


import functools
import inspect
from typing import Any, Callable, TypeVar, cast

import numpy as np

from specfun._errors import PrecisionError
from . import defaults

__all__ = [
  # context manage for environment setting
  'environment',
  'set_environment',
  'set',

  # default data types
  'set_float', 'get_float',
  'set_complex', 'get_complex',

  # double precision switch
  'enable_x64', 'disable_x64', 'set_x64', 'is_x64',
]

# See https://mypy.readthedocs.io/en/latest/generics.html#declaring-decorators
FuncType = Callable[..., Any]
F = TypeVar('F', bound=FuncType)

_float_types = (np.float32, np.float64)
_complex_types = (np.complex64, np.complex128)


class _DecoratorContextManager:
  """Allow a context manager to be used as a decorator"""

  def __call__(self, func: F) -> F:
    if inspect.isgeneratorfunction(func):
      return self._wrap_generator(func)

    @functools.wraps(func)
    def decorate_context(*args, **kwargs):
      with self.clone():
        return func(*args, **kwargs)

    return cast(F, decorate_context)

  def _wrap_generator(self, func):
    """Wrap each generator invocation with the context manager"""

    @functools.wraps(func)
    def generator_context(*args, **kwargs):
      gen = func(*args, **kwargs)

      # The defaults are re-entered every time the execution flow
      # returns into the wrapped generator, and restored when it
      # returns through our `yield` to our caller.
      try:
        with self.clone():
          response = gen.send(None)

        while True:
          try:
            request = yield response
          except GeneratorExit:
            with self.clone():
              gen.close()
            raise
          except BaseException as e:
            with self.clone():
              response = gen.throw(e)
          else:
            with self.clone():
              response = gen.send(request)

      except StopIteration as e:
        return e.value

    return generator_context

  def __enter__(self) -> None:
    raise NotImplementedError

  def __exit__(self, exc_type: Any, exc_value: Any, traceback: Any) -> None:
    raise NotImplementedError

  def clone(self):
    # override this method if your children class takes __init__ parameters
    return self.__class__()


class environment(_DecoratorContextManager):
  r"""Context-manager that sets the default precision of the special functions.

  Python numbers (``int``, ``float``, ``complex``) carry no precision of
  their own, so the special functions evaluate them in the default float
  (or complex) type. :py:class:`~.environment` temporarily changes these
  defaults and restores the previous ones on exit.

  For instance::

    >>> import numpy as np
    >>> import specfun
    >>>
    >>> with specfun.environment(float_=np.float32):
    >>>   y = specfun.gamma(4.5)   # numpy.float32
    >>>
    >>> @specfun.environment(x64=False)
    >>> def single_precision_beta(a, b):
    >>>   return specfun.beta(a, b)

  """

  def __init__(
      self,
      x64: bool = None,
      complex_: type = None,
      float_: type = None,
  ) -> None:
    super().__init__()

    if x64 is not None:
      assert isinstance(x64, bool), f'"x64" must be a bool.'
      self.old_x64 = is_x64()

    if float_ is not None:
      assert isinstance(float_, type), '"float_" must a type.'
      self.old_float = get_float()

    if complex_ is not None:
      assert isinstance(complex_, type), '"complex_" must a type.'
      self.old_complex = get_complex()

    self.x64 = x64
    self.complex_ = complex_
    self.float_ = float_

  def __enter__(self) -> 'environment':
    if self.x64 is not None: set_x64(self.x64)
    if self.float_ is not None: set_float(self.float_)
    if self.complex_ is not None: set_complex(self.complex_)
    return self

  def __exit__(self, exc_type: Any, exc_value: Any, traceback: Any) -> None:
    if self.x64 is not None: set_x64(self.old_x64)
    if self.float_ is not None: set_float(self.old_float)
    if self.complex_ is not None: set_complex(self.old_complex)

  def clone(self):
    return self.__class__(x64=self.x64,
                          complex_=self.complex_,
                          float_=self.float_)

  def __eq__(self, other):
    return id(self) == id(other)


def set(
    x64: bool = None,
    complex_: type = None,
    float_: type = None,
):
  """Set the default computation environment.

  Parameters
  ----------
  x64: bool
    Enable double precision computation.
  complex_: type
    The complex data type.
  float_
    The floating data type.
  """
  if x64 is not None:
    assert isinstance(x64, bool), f'"x64" must be a bool.'
    set_x64(x64)

  if float_ is not None:
    assert isinstance(float_, type), '"float_" must a float.'
    set_float(float_)

  if complex_ is not None:
    assert isinstance(complex_, type), '"complex_" must a type.'
    set_complex(complex_)


set_environment = set


# default dtype
# --------------------------


def set_float(dtype: type):
  """Set global default float type.

  Parameters
  ----------
  dtype: type
    The float type.
  """
  if dtype not in _float_types:
    raise PrecisionError(dtype)
  defaults.float_ = dtype


def get_float():
  """Get the default float data type.

  Returns
  -------
  dftype: type
    The default float data type.
  """
  return defaults.float_


def set_complex(dtype: type):
  """Set global default complex type.

  Parameters
  ----------
  dtype: type
    The complex type.
  """
  if dtype not in _complex_types:
    raise PrecisionError(dtype)
  defaults.complex_ = dtype


def get_complex():
  """Get the default complex data type.

  Returns
  -------
  dftype: type
    The default complex data type.
  """
  return defaults.complex_


def enable_x64():
  set_float(np.float64)
  set_complex(np.complex128)


def disable_x64():
  set_float(np.float32)
  set_complex(np.complex64)


def set_x64(enable: bool):
  assert isinstance(enable, bool)
  if enable:
    enable_x64()
  else:
    disable_x64()


def is_x64() -> bool:
  """Whether the default float type is double precision."""
  return defaults.float_ is np.float64
