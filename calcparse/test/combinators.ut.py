# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Any

from calcparse.chars import any_char, digit, exact
from calcparse.combinators import (alt, alt_chain, always, both, chain, consume_all, inclusive_or, left_comb, memoize,
  modify_value, never, not_, one_or_more, one_or_more_until, Pair, replace_failure_message, replace_value, select_chain, seq,
  split_search, str_comb, zero_or_more, zero_or_more_until, zero_or_one)
from calcparse.match import absent, Cursor, Match, parse_text, Parser
from utest import utest, utest_val


def res(p:Parser, text:str) -> Any:
  'Summarize a parse as (value, remaining text), or (absent, message) on failure.'
  m = parse_text(p, text)
  return (m.val, m.rem.text) if m.ok else (absent, m.msg)


a = exact('a')
b = exact('b')
c = exact('c')


utest((5, ''), res, always(5), '')
utest((absent, 'stop'), res, never('stop'), 'x')

utest(('', 'b'), res, not_(a), 'b')
utest((absent, "unexpected 'a'"), res, not_(a), 'ab')


# seq.

utest((Pair('a', 'b'), 'c'), res, seq(a, b), 'abc')
utest((('a', 'b'), 'c'), res, seq(a, b), 'abc') # Pair is a tuple.
utest(('ab', 'c'), res, seq(a, b, str_comb), 'abc')
utest((absent, "'x' does not match expected character 'b'"), res, seq(a, b), 'ax')

seq_fail = parse_text(seq(a, b), 'ax')
utest('ax', lambda: seq_fail.rem.text) # No partial consumption.
utest(0, lambda: seq_fail.start)
utest(1, lambda: seq_fail.err)


# alt.

utest(('b', 'c'), res, alt(a, b), 'bc')
utest((absent, "'c' does not match expected character 'b'"), res, alt(a, b), 'c')
utest(('a', 'c'), res, alt(seq(a, b), a), 'ac') # The right branch sees the original input.


# both.

utest((('a', 'a'), 'b'), res, both(a, any_char), 'ab')
utest((absent, "'a' does not match expected character 'b'"), res, both(a, b), 'ab')


# inclusive_or.

ab_or = inclusive_or(a, b, str_comb)
utest(('ab', ''), res, ab_or, 'ab')
utest(('a', 'c'), res, ab_or, 'ac')
utest(('b', ''), res, ab_or, 'b')
utest(False, lambda: parse_text(ab_or, 'c').ok)


# chains.

utest(('abc', 'd'), res, chain([a, b, c], str_comb), 'abcd')
utest((('a', ('b', 'c')), ''), res, chain([a, b, c]), 'abc') # Right fold.
utest(('a', 'b'), res, chain([a]), 'ab')
utest((absent, 'empty chain'), res, chain([]), 'a')
utest(False, lambda: parse_text(chain([a, b, c]), 'abx').ok)

paren_x = [exact('('), exact('x'), exact(')')]
utest(('(', ''), res, select_chain(paren_x, 0), '(x)')
utest(('x', ''), res, select_chain(paren_x, 1), '(x)')
utest((')', ''), res, select_chain(paren_x, 2), '(x)')
utest((absent, "']' does not match expected character ')'"), res, select_chain(paren_x, 1), '(x]')
utest((absent, 'empty chain'), res, select_chain([], 0), 'a')

utest(('c', ''), res, alt_chain([a, b, c]), 'c')
utest((absent, "'d' does not match expected character 'c'"), res, alt_chain([a, b, c]), 'd')
utest((absent, 'no alternatives'), res, alt_chain([]), 'a')


# Repetition.

utest(('', 'b'), res, zero_or_one(a), 'b')
utest(('a', 'a'), res, zero_or_one(a), 'aa')

utest(('123', 'x'), res, one_or_more(digit, str_comb), '123x')
utest((('1', ('2', '3')), ''), res, one_or_more(digit), '123')
utest(('1', ''), res, one_or_more(digit), '1')
utest(False, lambda: parse_text(one_or_more(digit), 'x').ok)

utest(('', 'x'), res, zero_or_more(digit, str_comb), 'x')
utest(('12', 'x'), res, zero_or_more(digit, str_comb), '12x')

utest(('ab;', 'cd'), res, zero_or_more_until(any_char, exact(';'), str_comb), 'ab;cd')
utest((';', ''), res, zero_or_more_until(any_char, exact(';'), str_comb), ';')
utest(False, lambda: parse_text(zero_or_more_until(any_char, exact(';')), 'ab').ok)

utest(('a;', ''), res, one_or_more_until(any_char, exact(';'), str_comb), 'a;')
utest((';;', ''), res, one_or_more_until(any_char, exact(';'), str_comb), ';;')
utest(False, lambda: parse_text(one_or_more_until(any_char, exact(';')), ';').ok)


# consume_all.

utest(('1', ''), res, consume_all(digit), '1')
utest((absent, "unconsumed input: '2'"), res, consume_all(digit), '12')
utest(1, lambda: parse_text(consume_all(digit), '12').err)


# split_search.

plus = exact('+')
anything = one_or_more(any_char, str_comb)

utest(('a', 'b+c'), res, split_search(anything, plus, left_comb), 'a+b+c') # The shortest left side wins.
utest((('a', '+'), 'b+c'), res, split_search(anything, plus), 'a+b+c')

triple = chain([any_char, plus, any_char], str_comb) # Only accepts prefixes like '1+2'.
utest(('1+2', '3'), res, split_search(triple, plus, left_comb), '1+2+3') # Skips splits where the left side fails.

utest((absent, 'no split point matches'), res, split_search(anything, plus), 'abc')
utest((absent, 'no split point matches'), res, split_search(anything, plus), '+')
utest((absent, 'no split point matches'), res, split_search(anything, plus), '')
utest(False, lambda: parse_text(split_search(digit, plus), 'x+1').ok)
utest('x+1', lambda: parse_text(split_search(digit, plus), 'x+1').rem.text)


# memoize.

calls:list[int] = []

def counting(inp:Cursor) -> Match:
  calls.append(inp.pos)
  return any_char(inp)

memo_any = memoize('counting', counting)
utest((('x', 'x'), ''), res, both(memo_any, memo_any), 'x')
utest_val([0], calls, 'memoized parser runs once per position')


# Result transformation.

utest((7, ''), res, modify_value(digit, int), '7')
utest(('plus', '1'), res, replace_value(plus, 'plus'), '+1')
utest((absent, 'need a digit'), res, replace_failure_message(digit, 'need a digit'), 'x')
utest((absent, "'x' does not match expected one of '0123456789'!"), res,
  replace_failure_message(digit, lambda msg: msg + '!'), 'x')
utest(('7', ''), res, replace_failure_message(digit, 'unused'), '7')
utest((absent, "'x' does not match expected one of '0123456789'"), res, modify_value(digit, int), 'x')
