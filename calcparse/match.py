# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The match result that every parser produces, and the input cursor that every parser consumes.

A parser is any function from `Cursor` to `Match`.
Failure is an ordinary return value: a `Match` whose `val` is the `absent` sentinel.
'''

from dataclasses import dataclass
from typing import Any, Callable

from .source import Pos, Source


class _Absent:
  'The type of the `absent` sentinel. Distinct from every legitimate payload, including falsy ones.'

  _instance:'_Absent|None' = None

  def __new__(cls) -> '_Absent':
    if cls._instance is None: cls._instance = super().__new__(cls)
    return cls._instance

  def __repr__(self) -> str: return 'absent'

  def __bool__(self) -> bool: return False


absent = _Absent()


@dataclass(frozen=True)
class Cursor:
  '''
  A view of `source.text[pos:end]`.
  Bounding `end` below the text length is how a parser is asked to match exactly a prefix of the input.
  '''
  source:Source
  pos:int
  end:int

  @classmethod
  def for_text(cls, text:str, name:str='') -> 'Cursor':
    return cls(Source(name, text), 0, len(text))

  def __repr__(self) -> str: return f'Cursor({self.pos}, {self.end}, {self.text!r})'

  @property
  def text(self) -> str: return self.source.text[self.pos:self.end]

  @property
  def size(self) -> int: return self.end - self.pos

  @property
  def is_empty(self) -> bool: return self.pos >= self.end

  @property
  def head(self) -> str|None: return None if self.is_empty else self.source.text[self.pos]

  def advance(self, count:int=1) -> 'Cursor':
    assert 0 <= count <= self.size, (count, self)
    return Cursor(self.source, self.pos + count, self.end)

  def until(self, end:int) -> 'Cursor':
    'A view of this cursor bounded to stop at absolute offset `end`.'
    assert self.pos <= end <= self.end, (end, self)
    return Cursor(self.source, self.pos, end)


@dataclass(frozen=True)
class Match:
  '''
  The result of a parse attempt.
  * `val`: the payload; `absent` for a failure.
  * `rem`: on success, the unconsumed input; on failure, the input of the outermost failed attempt.
  * `start`: offset at which the attempt began; negative for results with no input to anchor to.
  * `msg`: the failure diagnostic (innermost message).
  * `err`: offset of the innermost failure.
  '''
  val:Any
  rem:Cursor
  start:int
  msg:str = ''
  err:int = -1

  @property
  def ok(self) -> bool: return self.val is not absent

  @property
  def pos(self) -> Pos: return self.rem.source.pos_for(self.start)

  @property
  def err_pos(self) -> Pos: return self.rem.source.pos_for(self.err)

  def __repr__(self) -> str:
    if self.ok: return f'Match({self.val!r}, pos={self.pos}, rem={self.rem.text!r})'
    return f'Match(absent, pos={self.pos}, err={self.err_pos}, msg={self.msg!r})'

  def diagnostic(self, prefix:str='') -> str:
    'Render a failure with the source line and a caret under the innermost failure position.'
    assert not self.ok, self
    source = self.rem.source
    pos = self.err if self.err >= 0 else max(self.start, 0)
    return source.diagnostic_for_pos(pos, end=pos, prefix=prefix, msg=self.msg)


Parser = Callable[[Cursor], Match]
Combiner = Callable[[Match, Match], Match]


def success(m:Match) -> bool: return m.val is not absent

def failed(m:Match) -> bool: return m.val is absent

def value(m:Match) -> Any: return m.val

def remainder(m:Match) -> Cursor: return m.rem


def mk_match(val:Any, start:int, rem:Cursor) -> Match:
  assert val is not absent
  return Match(val, rem, start)


def mk_fail(inp:Cursor, msg:str, err:int|None=None) -> Match:
  'Create a failure at the start of `inp`; `err` is the offset of the innermost failure, defaulting to `inp.pos`.'
  return Match(absent, inp, inp.pos, msg, inp.pos if err is None else err)


def refail(inp:Cursor, m:Match) -> Match:
  'Rebase a failure `m` onto the outer input `inp`, keeping the innermost message and error offset.'
  assert failed(m)
  return Match(absent, inp, inp.pos, m.msg, m.err)


def parse_text(parser:Parser, text:str, name:str='') -> Match:
  'Run `parser` over all of `text`.'
  return parser(Cursor.for_text(text, name))
