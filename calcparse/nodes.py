# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The tagged tree produced by the grammar and consumed by the evaluator.
Each node class carries its tag in `t`; the tag determines which other fields are present.
'''

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, Union


BINARY_TAGS = ('+', '-', '*', '/', '%', '^')


@dataclass(frozen=True)
class Num:
  c:float
  t:ClassVar[str] = 'Num'


@dataclass(frozen=True)
class BinOp:
  t:str
  l:'Node'
  r:'Node'

  def __post_init__(self) -> None:
    if self.t not in BINARY_TAGS: raise ValueError(f'invalid binary operator tag: {self.t!r}')


@dataclass(frozen=True)
class ArgEnd:
  t:ClassVar[str] = 'argend'


@dataclass(frozen=True)
class Arg:
  c:'Node'
  r:'Arg|ArgEnd' = field(default_factory=ArgEnd)
  t:ClassVar[str] = 'arg'


@dataclass(frozen=True)
class Func:
  func:str
  c:Arg|ArgEnd = field(default_factory=ArgEnd)
  t:ClassVar[str] = 'func'

  def iter_args(self) -> Iterator['Node']:
    'Walk the argument list in order.'
    node = self.c
    while isinstance(node, Arg):
      yield node.c
      node = node.r


@dataclass(frozen=True)
class Root:
  c:'Node'
  t:ClassVar[str] = 'root'


Node = Union[Num, BinOp, Func, Arg, ArgEnd, Root]

NODE_TAGS = ('Num', *BINARY_TAGS, 'func', 'arg', 'argend', 'root')


def mk_args(*nodes:Node) -> Arg|ArgEnd:
  'Build an argument list from `nodes`.'
  args:Arg|ArgEnd = ArgEnd()
  for node in reversed(nodes): args = Arg(node, args)
  return args


def skel(node:Any) -> Any:
  '''
  Reduce a tree to nested tuples for inspecting its shape:
  numbers for `Num`, `(op, l, r)` for binary nodes, `(name, *args)` for calls.
  Values that are not nodes are returned unchanged.
  '''
  if isinstance(node, Num): return node.c
  if isinstance(node, BinOp): return (node.t, skel(node.l), skel(node.r))
  if isinstance(node, Func): return (node.func, *(skel(a) for a in node.iter_args()))
  if isinstance(node, Root): return skel(node.c)
  if isinstance(node, Arg): return ('arg', skel(node.c), skel(node.r))
  if isinstance(node, ArgEnd): return ('argend',)
  return node
