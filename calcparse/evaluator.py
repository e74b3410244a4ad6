# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Evaluate a tagged tree to a float.

Evaluation is total: it always returns a number.
Anomalies (an unknown tag, an unknown function, a call that the function rejects or fails on)
are reported through the evaluator's `report` function and evaluate to zero.
Arithmetic follows IEEE semantics: zero divisors and domain errors produce infinity or NaN rather than exceptions.
'''

import math
from typing import Callable

from .dispatch import key_dispatched_method
from .functions import ArityError, FunctionRegistry
from .io import mk_err_reporter, Reporter
from .nodes import BinOp, Func, Node, Num, Root


def ieee_div(a:float, b:float) -> float:
  try: return a / b
  except ZeroDivisionError:
    if a == 0 or math.isnan(a): return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def ieee_mod(a:float, b:float) -> float:
  'The remainder of Python float `%`, which takes the sign of the divisor; NaN for a zero divisor.'
  try: return a % b
  except ZeroDivisionError: return math.nan


def ieee_pow(a:float, b:float) -> float:
  try: return math.pow(a, b)
  except OverflowError:
    return -math.inf if (a < 0 and b % 2 == 1) else math.inf
  except ValueError: # Zero to a negative power, or a negative base to a fractional power.
    return math.inf if a == 0 else math.nan


binary_ops:dict[str,Callable[[float,float],float]] = {
  '+': lambda a, b: a + b,
  '-': lambda a, b: a - b,
  '*': lambda a, b: a * b,
  '/': ieee_div,
  '%': ieee_mod,
  '^': ieee_pow,
}


class Evaluator:

  def __init__(self, registry:FunctionRegistry, report:Reporter=mk_err_reporter('calc')) -> None:
    self.registry = registry
    self.report = report


  @key_dispatched_method(lambda node: getattr(node, 't', None))
  def eval(self, node:Node) -> float:
    self.report(f'unrecognized tag: {node!r}')
    return 0.0


  @eval.register('Num')
  def _(self, node:Num) -> float: return float(node.c)


  @eval.register('root')
  def _(self, node:Root) -> float: return self.eval(node.c)


  @eval.register(*binary_ops)
  def _(self, node:BinOp) -> float:
    return binary_ops[node.t](self.eval(node.l), self.eval(node.r))


  @eval.register('func')
  def _(self, node:Func) -> float:
    fn = self.registry.get(node.func)
    if fn is None:
      self.report(f'unrecognized function: {node.func!r}')
      return 0.0
    args = [self.eval(arg) for arg in node.iter_args()]
    try: return float(fn(args))
    except ArityError as e:
      self.report(f'invalid call: {e}')
      return 0.0
    except Exception as e: # Any other failure inside a registered closure.
      self.report(f'invalid call: {node.func}: {e!r}')
      return 0.0
