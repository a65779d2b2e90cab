import warnings

__all__ = [
  'deprecation_getattr2',
]


def _deprecate(msg):
  warnings.simplefilter('always', DeprecationWarning)  # turn off filter
  warnings.warn(msg, category=DeprecationWarning, stacklevel=3)
  warnings.simplefilter('default', DeprecationWarning)  # reset filter


def deprecation_getattr2(module, deprecations):
  def getattr(name):
    if name in deprecations:
      old_name, new_name, fn = deprecations[name]
      message = f"{old_name} is deprecated. "
      if new_name is not None:
        message += f'Use {new_name} instead.'
      if fn is None:
        raise AttributeError(message)
      _deprecate(message)
      return fn
    raise AttributeError(f"module {module!r} has no attribute {name!r}")

  return getattr
