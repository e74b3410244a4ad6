# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Parser combinators: functions that build larger parsers from smaller ones.

Every parser is a function from `Cursor` to `Match`.
Failures are values, so every combinator checks for failure before composing further,
and a failed composite always reports the input of the outermost attempt, so no partial consumption escapes.

Binary combinators take an optional combiner, which merges the two sub-matches of a successful composite.
The default combiner pairs the two values as `Pair(l, r)`.
'''

from typing import Any, Callable, NamedTuple, Sequence

from .match import Combiner, Cursor, failed, Match, mk_fail, mk_match, Parser, refail, success


class Pair(NamedTuple):
  l:Any
  r:Any


# Combiners.

def pair_comb(a:Match, b:Match) -> Match: return mk_match(Pair(a.val, b.val), a.start, b.rem)

def str_comb(a:Match, b:Match) -> Match: return mk_match(a.val + b.val, a.start, b.rem)

def left_comb(a:Match, b:Match) -> Match: return mk_match(a.val, a.start, b.rem)

def right_comb(a:Match, b:Match) -> Match: return mk_match(b.val, a.start, b.rem)


def always(v:Any) -> Parser:
  'Succeed with `v` without consuming input.'
  def always_parser(inp:Cursor) -> Match: return mk_match(v, inp.pos, inp)
  return always_parser


def never(msg:str) -> Parser:
  'Fail with `msg` without consuming input.'
  def never_parser(inp:Cursor) -> Match: return mk_fail(inp, msg)
  return never_parser


def not_(p:Parser) -> Parser:
  'Negative lookahead: succeed with the empty string, consuming nothing, if and only if `p` fails.'
  def not_parser(inp:Cursor) -> Match:
    m = p(inp)
    if failed(m): return mk_match('', inp.pos, inp)
    return mk_fail(inp, f'unexpected {inp.text[:m.rem.pos-inp.pos]!r}')
  return not_parser


# Sequencing and alternation.

def seq(a:Parser, b:Parser, comb:Combiner=pair_comb) -> Parser:
  'Run `a`, then run `b` on the remainder; combine the two results.'
  def seq_parser(inp:Cursor) -> Match:
    am = a(inp)
    if failed(am): return refail(inp, am)
    bm = b(am.rem)
    if failed(bm): return refail(inp, bm)
    return comb(am, bm)
  return seq_parser


def alt(a:Parser, b:Parser) -> Parser:
  'Return the result of `a` if it succeeds; otherwise run `b` on the original input.'
  def alt_parser(inp:Cursor) -> Match:
    am = a(inp)
    if success(am): return am
    return b(inp)
  return alt_parser


def both(a:Parser, b:Parser, comb:Combiner=pair_comb) -> Parser:
  'Run `a` and `b` on the same input; succeed only if both succeed. The remainder is that of `b`.'
  def both_parser(inp:Cursor) -> Match:
    am = a(inp)
    if failed(am): return refail(inp, am)
    bm = b(inp)
    if failed(bm): return refail(inp, bm)
    return comb(am, bm)
  return both_parser


def inclusive_or(a:Parser, b:Parser, comb:Combiner=pair_comb) -> Parser:
  'Match `a` followed by `b`, or else just `a`, or else just `b`.'
  return alt(seq(a, b, comb), alt(a, b))


def chain(parsers:Sequence[Parser], comb:Combiner=pair_comb) -> Parser:
  'Sequence all of `parsers`, folding from the right.'
  if not parsers: return never('empty chain')
  if len(parsers) == 1: return parsers[0]
  return seq(parsers[0], chain(parsers[1:], comb), comb)


def select_chain(parsers:Sequence[Parser], index:int=0) -> Parser:
  'Sequence all of `parsers`, keeping only the value matched by `parsers[index]`.'
  if not parsers: return never('empty chain')
  if len(parsers) == 1: return parsers[0]
  return seq(parsers[0], select_chain(parsers[1:], index - 1), left_comb if index == 0 else right_comb)


def alt_chain(parsers:Sequence[Parser]) -> Parser:
  'Try each of `parsers` in order on the original input; return the first success, or else the last failure.'
  if not parsers: return never('no alternatives')
  if len(parsers) == 1: return parsers[0]
  return alt(parsers[0], alt_chain(parsers[1:]))


# Repetition.
# These recurse through `alt` and `seq` rather than looping:
# repetition ends exactly when the next attempt fails.

def zero_or_one(p:Parser) -> Parser:
  'Match `p` or else succeed with the empty string.'
  return alt(p, always(''))


def one_or_more(p:Parser, comb:Combiner=pair_comb) -> Parser:
  def one_or_more_parser(inp:Cursor) -> Match:
    return alt(seq(p, one_or_more(p, comb), comb), p)(inp)
  return one_or_more_parser


def zero_or_more(p:Parser, comb:Combiner=pair_comb) -> Parser:
  return zero_or_one(one_or_more(p, comb))


def zero_or_more_until(body:Parser, stop:Parser, comb:Combiner=pair_comb) -> Parser:
  'Match `body` repeatedly until `stop` matches; the match of `stop` is the final element of the result.'
  def zero_or_more_until_parser(inp:Cursor) -> Match:
    return alt(stop, seq(body, zero_or_more_until(body, stop, comb), comb))(inp)
  return zero_or_more_until_parser


def one_or_more_until(body:Parser, stop:Parser, comb:Combiner=pair_comb) -> Parser:
  return seq(body, alt(stop, zero_or_more_until(body, stop, comb)), comb)


# Backtracking.

def consume_all(p:Parser) -> Parser:
  'Fail if `p` does not consume all of its input.'
  def consume_all_parser(inp:Cursor) -> Match:
    m = p(inp)
    if failed(m): return m
    if not m.rem.is_empty: return mk_fail(inp, f'unconsumed input: {m.rem.text!r}', err=m.rem.pos)
    return m
  return consume_all_parser


def split_search(a:Parser, b:Parser, comb:Combiner=pair_comb) -> Parser:
  '''
  Find the shortest non-empty prefix of the input that `a` consumes entirely,
  such that `b` matches the suffix that follows it.
  Split points are tried in increasing order, and `b` is tried first at each one;
  `a` is only attempted on prefixes where `b` has already matched.
  The first split point where both succeed is chosen; because the search runs left to right,
  the shortest valid left operand always wins.
  This lets a grammar parse `left op right` with a recursive left operand, without left recursion.
  '''
  whole_a = consume_all(a)
  def split_search_parser(inp:Cursor) -> Match:
    last_fail:Match|None = None
    for i in range(1, inp.size):
      bm = b(inp.advance(i))
      if failed(bm): continue
      am = whole_a(inp.until(inp.pos + i))
      if failed(am):
        last_fail = am
        continue
      return comb(am, bm)
    if last_fail is None: return mk_fail(inp, 'no split point matches')
    return refail(inp, last_fail)
  return split_search_parser


def memoize(name:str, p:Parser) -> Parser:
  '''
  Cache the results of `p` per input position, in the memo table of the input `Source`.
  `name` must be unique among the memoized rules that share a source.
  '''
  def memoize_parser(inp:Cursor) -> Match:
    key = (name, inp.pos, inp.end)
    memo = inp.source.memo
    try: return memo[key] # type: ignore[no-any-return]
    except KeyError: pass
    m = p(inp)
    memo[key] = m
    return m
  return memoize_parser


# Result transformation.

def modify_match(p:Parser, f:Callable[[Match],Match]) -> Parser:
  'Transform a successful match with `f`; failures pass through unchanged.'
  def modify_match_parser(inp:Cursor) -> Match:
    m = p(inp)
    return m if failed(m) else f(m)
  return modify_match_parser


def modify_value(p:Parser, f:Callable[[Any],Any]) -> Parser:
  return modify_match(p, lambda m: mk_match(f(m.val), m.start, m.rem))


def replace_value(p:Parser, v:Any) -> Parser:
  return modify_match(p, lambda m: mk_match(v, m.start, m.rem))


def replace_failure_message(p:Parser, msg:str|Callable[[str],str]) -> Parser:
  'Replace the diagnostic of a failure with `msg`, or with `msg(original)` if `msg` is callable.'
  def replace_failure_message_parser(inp:Cursor) -> Match:
    m = p(inp)
    if success(m): return m
    new_msg = msg(m.msg) if callable(msg) else msg
    return Match(m.val, m.rem, m.start, new_msg, m.err)
  return replace_failure_message_parser
