# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The arithmetic expression grammar, built entirely from combinators.

There are no precedence levels in the grammar.
An expression is an ordered choice over the binary operators, then function calls, grouping, and number literals;
the first alternative that succeeds wins.
Each binary rule uses `split_search` to find the shortest left operand that is followed by its operator,
so an operator that appears anywhere in the input splits it before any tighter-binding operator is considered.
Trying `+` and `-` before `*` and `/` therefore makes multiplication bind tighter;
literals come last so that `2*3` is not taken as the bare literal `2`.

Because the left operand is the shortest one that works, chains of one operator group to the right:
`8-4-2` parses as `8-(4-2)`.
'''

from typing import ClassVar

from .chars import comma, digit, dot, exact, keyword, spaces
from .combinators import (alt, alt_chain, consume_all, inclusive_or, left_comb, memoize, modify_value, one_or_more,
  not_, replace_failure_message, right_comb, select_chain, seq, split_search, str_comb, zero_or_more, zero_or_one)
from .functions import FunctionRegistry
from .match import Cursor, Match, mk_match, Parser
from .nodes import Arg, ArgEnd, BinOp, Func, Num, Root


def number_literal(grouping:bool) -> Parser:
  '''
  A decimal literal: digits with an optional fraction, or a bare fraction like `.5`.
  If `grouping` is true, a comma followed by a digit may separate digit groups: `123,456.5`.
  '''
  digit_or_group = alt(digit, seq(comma, digit, str_comb)) if grouping else digit
  integer = seq(digit, zero_or_more(digit_or_group, str_comb), str_comb)
  fraction = seq(dot, one_or_more(digit, str_comb), str_comb)
  literal = modify_value(inclusive_or(integer, fraction, str_comb), lambda s: Num(float(s.replace(',', ''))))
  return replace_failure_message(literal, lambda msg: f'{msg} (expected a number)')


class Grammar:
  '''
  The expression grammar for a particular set of function names.
  Building a grammar freezes `registry`, since the call keywords are fixed at construction.

  `expr` and `arg_expr` are the two recursive rules; they differ only in their number literal:
  inside a call, `,` separates arguments and so cannot group digits.
  '''

  # Tag and accepted spellings for each binary operator, in the order the alternatives are tried.
  operators:ClassVar[tuple[tuple[str,tuple[str,...]],...]] = (
    ('+', ('+', 'plus')),
    ('-', ('-', 'minus')),
    ('*', ('*', '@', 'times')),
    ('/', ('/', 'div')),
    ('%', ('%', 'mod')),
    ('^', ('^', '**')),
  )

  groupings:ClassVar[tuple[tuple[str,str],...]] = (('(', ')'), ('[', ']'), ('{', '}'))


  def __init__(self, registry:FunctionRegistry) -> None:
    registry.freeze()
    self.registry = registry
    self.function_names = tuple(registry)

    self.calls = [self._call(name) for name in self.function_names]
    self._expr = memoize('expr', self._mk_expr(self.expr, number_literal(grouping=True)))
    self._arg_expr = memoize('arg_expr', self._mk_expr(self.arg_expr, number_literal(grouping=False)))
    self._arg_list = seq(self.arg_expr, zero_or_one(select_chain([spaces, comma, spaces, self.arg_list], 3)), _arg_comb)
    self.top = modify_value(consume_all(select_chain([spaces, self.expr, spaces], 1)), Root)


  def __repr__(self) -> str: return f'{type(self).__name__}({self.registry!r})'


  def parse(self, text:str, name:str='') -> Match:
    'Parse all of `text` as an expression. On success the value is a `Root` node.'
    return self.top(Cursor.for_text(text, name))


  def expr(self, inp:Cursor) -> Match:
    'A full expression; number literals may use grouping commas.'
    return self._expr(inp)

  def arg_expr(self, inp:Cursor) -> Match:
    'An expression inside a call argument list, where commas only separate arguments.'
    return self._arg_expr(inp)

  def arg_list(self, inp:Cursor) -> Match:
    'One or more comma separated arguments, as a right-recursive `Arg` chain.'
    return self._arg_list(inp)


  def _mk_expr(self, rule:Parser, number:Parser) -> Parser:
    binaries = [self._binary(rule, tag, spellings) for tag, spellings in self.operators]
    groups = [self._grouped(rule, open_char, close_char) for open_char, close_char in self.groupings]
    return alt_chain([*binaries, *self.calls, *groups, number])


  def _binary(self, rule:Parser, tag:str, spellings:tuple[str,...]) -> Parser:
    op = select_chain([spaces, alt_chain([self._operator_token(s) for s in spellings]), spaces], 1)
    left = split_search(rule, op, left_comb)
    return seq(left, rule, lambda l, r: mk_match(BinOp(tag, l.val, r.val), l.start, r.rem))


  def _operator_token(self, spelling:str) -> Parser:
    'Match `spelling`, unless the input starts with a longer operator spelling that extends it (`*` versus `**`).'
    longer = [s for _, spellings in self.operators for s in spellings if len(s) > len(spelling) and s.startswith(spelling)]
    if not longer: return keyword(spelling)
    return seq(not_(alt_chain([keyword(s) for s in longer])), keyword(spelling), right_comb)


  def _grouped(self, inner:Parser, open_char:str, close_char:str) -> Parser:
    return select_chain([exact(open_char), spaces, inner, spaces, exact(close_char)], 2)


  def _call(self, name:str) -> Parser:
    args = modify_value(zero_or_one(self.arg_list), lambda v: v if isinstance(v, Arg) else ArgEnd())
    grouped_args = alt_chain([self._grouped(args, o, c) for o, c in self.groupings])
    call = select_chain([spaces, keyword(name), spaces, grouped_args, spaces], 3)
    return modify_value(call, lambda args: Func(name, args))


def _arg_comb(a:Match, b:Match) -> Match:
  rest = b.val if isinstance(b.val, Arg) else ArgEnd()
  return mk_match(Arg(a.val, rest), a.start, b.rem)
