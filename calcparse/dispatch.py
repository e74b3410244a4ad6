# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Methods that select an implementation by a key derived from their first argument.
The evaluator uses this to dispatch on node tags.
'''

import inspect
from functools import update_wrapper
from types import MappingProxyType
from typing import Any, Callable, Collection, Hashable, Mapping


class DispatchKeyError(KeyError):
  'Raised when two implementations are registered for the same key.'


KeyFn = Callable[[Any],Hashable]


class KeyDispatchMethod:
  '''
  A method descriptor holding a table from key to implementation.
  Keys without an entry fall through to the default method.
  '''

  def __init__(self, key_fn:KeyFn, default_method:Callable) -> None:
    if key_fn.__closure__ is not None: # type: ignore[attr-defined]
      raise ValueError(f'`key_fn` cannot be a closure; received {key_fn!r}')
    _check_method(default_method)
    self.key_fn = key_fn
    self.default_method = default_method
    self._table:dict[Hashable,Callable] = {}
    self.table:Mapping[Hashable,Callable] = MappingProxyType(self._table)


  def __get__(self, obj:Any, cls:type|None=None) -> Callable:
    table = self._table
    key_fn = self.key_fn
    default_method = self.default_method

    def dispatch(arg:Any, *args:Any, **kwargs:Any) -> Any:
      method = table.get(key_fn(arg), default_method)
      return method(obj, arg, *args, **kwargs)

    update_wrapper(dispatch, default_method)
    return dispatch


  def register(self, *keys:Hashable) -> Callable[[Callable],Callable]:
    'Register the decorated method for each of `keys`.'

    def decorator(method:Callable) -> Callable:
      _check_method(method)
      for key in keys:
        if key in self._table: raise DispatchKeyError(f'{key!r} is already registered to {self._table[key]!r}')
        self._table[key] = method
      if method.__name__ == '_': # Anonymous implementations take the name of the default.
        update_wrapper(method, self.default_method, assigned=('__name__', '__qualname__'), updated=())
      return method

    return decorator


  def missing_keys(self, keys:Collection[Hashable]) -> list[Hashable]:
    'Return the members of `keys` that fall through to the default method.'
    return [k for k in keys if k not in self._table]


def key_dispatched_method(key_fn:KeyFn) -> Callable[[Callable],KeyDispatchMethod]:
  '''
  Decorator to create a method that dispatches on `key_fn(first_arg)`.
  ```
  class C:
    @key_dispatched_method(lambda node: node.t)
    def eval(self, node): ... # Default.

    @eval.register('a', 'b')
    def _(self, node): ... # Nodes tagged 'a' or 'b'.
  ```
  '''
  return lambda default_method: KeyDispatchMethod(key_fn, default_method)


def _check_method(method:Any) -> None:
  if not callable(method): raise TypeError(f'dispatched method is not callable: {method!r}')
  if getattr(method, '__closure__', None) is not None:
    raise ValueError(f'dispatched method cannot be a closure: {method!r}')
  pars = list(inspect.signature(method).parameters.values())
  if len(pars) < 2 or pars[0].name != 'self':
    raise TypeError(f'dispatched method requires `self` and at least one more parameter; received {method!r}')
