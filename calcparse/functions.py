# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The function registry: a table from name to a closure over evaluated arguments.
Names in the registry become call keywords when a `Grammar` is built from it;
the grammar freezes the registry, so every function must be registered before then.
'''

import math
from random import Random
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, Sequence


CalcFn = Callable[[Sequence[float]],float]


class RegistryFrozen(Exception):
  'Raised when registering a function after the registry has been used to build a grammar.'


class ArityError(ValueError):
  'Raised by a registered function when called with an unsupported number of arguments.'

  def __init__(self, name:str, expected:str, received:int) -> None:
    self.name = name
    self.expected = expected
    self.received = received
    super().__init__(f'{name}: expected {expected} argument{"" if expected == "1" else "s"}; received {received}')


class FunctionRegistry:

  def __init__(self) -> None:
    self._fns:dict[str,CalcFn] = {}
    self.fns:Mapping[str,CalcFn] = MappingProxyType(self._fns)
    self.is_frozen = False


  @classmethod
  def with_builtins(cls, rng:Random|None=None) -> 'FunctionRegistry':
    'Create a registry populated with the built-in functions. `rng` is the random source for `rand`.'
    registry = cls()
    for name, fn in builtin_functions(rng or Random()).items():
      registry.register(name, fn)
    return registry


  def __repr__(self) -> str:
    return f'{type(self).__name__}({list(self._fns)}{", frozen" if self.is_frozen else ""})'

  def __contains__(self, name:str) -> bool: return name in self._fns

  def __iter__(self) -> Iterator[str]: return iter(self._fns)

  def __len__(self) -> int: return len(self._fns)


  def register(self, name:str, fn:CalcFn) -> None:
    if self.is_frozen: raise RegistryFrozen(f'cannot register {name!r}: registry is frozen')
    if not name or not all(c.isalnum() or c == '_' for c in name):
      raise ValueError(f'invalid function name: {name!r}')
    self._fns[name] = fn


  def freeze(self) -> None: self.is_frozen = True


  def get(self, name:str) -> CalcFn|None: return self._fns.get(name)


# Built-in functions.
# Math domain errors yield NaN and overflows yield infinity, matching the arithmetic operators.

def unary(name:str, f:Callable[[float],float]) -> CalcFn:
  def unary_fn(args:Sequence[float]) -> float:
    if len(args) != 1: raise ArityError(name, '1', len(args))
    return ieee(f, args[0])
  return unary_fn


def binary(name:str, f:Callable[[float,float],float]) -> CalcFn:
  def binary_fn(args:Sequence[float]) -> float:
    if len(args) != 2: raise ArityError(name, '2', len(args))
    return ieee(f, *args)
  return binary_fn


def ieee(f:Callable[...,float], *args:float) -> float:
  try: return float(f(*args))
  except ValueError: return math.nan
  except OverflowError: return math.inf
  except ZeroDivisionError: return math.nan


def calc_log(args:Sequence[float]) -> float:
  'log(value) is the natural logarithm; log(base, value) is the logarithm of `value` in `base`.'
  if len(args) == 1: return ieee(math.log, args[0])
  if len(args) != 2: raise ArityError('log', '1 or 2', len(args))
  base, val = args
  if base == 2: return ieee(math.log2, val)
  if base == 10: return ieee(math.log10, val)
  return ieee(lambda b, v: math.log(v) / math.log(b), base, val)


def calc_round(args:Sequence[float]) -> float:
  'Round half away from zero, optionally to a number of decimal digits.'
  if len(args) not in (1, 2): raise ArityError('round', '1 or 2', len(args))
  x = args[0]
  scale = ieee(math.pow, 10.0, args[1]) if len(args) == 2 else 1.0
  if not (math.isfinite(x) and math.isfinite(scale) and scale > 0): return x
  return math.copysign(ieee(math.floor, abs(x) * scale + 0.5), x) / scale


def calc_min(args:Sequence[float]) -> float:
  if not args: raise ArityError('min', 'at least 1', 0)
  return min(args)


def calc_max(args:Sequence[float]) -> float:
  if not args: raise ArityError('max', 'at least 1', 0)
  return max(args)


def mk_rand(rng:Random) -> CalcFn:
  def calc_rand(args:Sequence[float]) -> float:
    'rand() is in [0, 1); rand(n) is in [0, n); rand(a, b) is in [a, b).'
    if len(args) == 0: return rng.random()
    if len(args) == 1: return rng.random() * args[0]
    if len(args) == 2: return args[0] + rng.random() * (args[1] - args[0])
    raise ArityError('rand', '0 to 2', len(args))
  return calc_rand


def builtin_functions(rng:Random) -> dict[str,CalcFn]:
  fns:dict[str,CalcFn] = {
    'sqrt': unary('sqrt', math.sqrt),
    'abs': unary('abs', abs),
    'mod': binary('mod', math.fmod),
    'round': calc_round,
    'floor': unary('floor', lambda x: math.floor(x) if math.isfinite(x) else x),
    'ceil': unary('ceil', lambda x: math.ceil(x) if math.isfinite(x) else x),
  }
  for name in ('sin', 'cos', 'tan', 'asin', 'acos', 'atan', 'sinh', 'cosh', 'tanh', 'exp', 'log2', 'log10'):
    fns[name] = unary(name, getattr(math, name))
  fns.update({
    'atan2': binary('atan2', math.atan2),
    'hypot': binary('hypot', math.hypot),
    'log': calc_log,
    'ln': unary('ln', math.log),
    'min': calc_min,
    'max': calc_max,
    'rand': mk_rand(rng),
  })
  return fns
