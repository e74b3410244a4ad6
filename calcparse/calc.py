# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Convenience entry points over a default registry of the built-in functions.

`register_function` must be called before the first `parse`:
the first parse builds the default grammar, which freezes the default registry,
and later registrations raise `RegistryFrozen`.
'''

from typing import Any

from .evaluator import Evaluator
from .functions import CalcFn, FunctionRegistry
from .grammar import Grammar
from .match import absent, failed, Match


default_registry = FunctionRegistry.with_builtins()

_default_grammar:Grammar|None = None
_default_evaluator = Evaluator(default_registry)


def default_grammar() -> Grammar:
  global _default_grammar
  if _default_grammar is None: _default_grammar = Grammar(default_registry)
  return _default_grammar


def register_function(name:str, fn:CalcFn) -> None:
  'Add `fn` to the default registry as `name`.'
  default_registry.register(name, fn)


def parse(text:str, name:str='') -> Match:
  'Parse all of `text` with the default grammar.'
  return default_grammar().parse(text, name=name)


def evaluate(tree:Any) -> float:
  'Evaluate a parsed tree, or the tree held by a successful match.'
  if isinstance(tree, Match):
    if failed(tree): raise ValueError(f'cannot evaluate a failed parse: {tree.msg}')
    tree = tree.val
  if tree is absent: raise ValueError('cannot evaluate an absent value')
  return _default_evaluator.eval(tree)


def calculate(text:str) -> float:
  'Parse and evaluate `text`; raise `ValueError` with the parse diagnostic on failure.'
  m = parse(text)
  if failed(m): raise ValueError(m.diagnostic())
  return evaluate(m)
