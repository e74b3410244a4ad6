# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Character-level parsers. Each consumes at most one character,
except `keyword` and the scanners built on repetition at the bottom of the module.
'''

from typing import Callable, Iterable

from .combinators import (alt, always, both, modify_value, pair_comb, replace_failure_message, right_comb, seq, str_comb,
  zero_or_more, zero_or_more_until)
from .match import Combiner, Cursor, Match, mk_fail, mk_match, Parser


def read_if(predicate:Callable[[str],bool], desc:str='character matching predicate') -> Parser:
  '''
  Consume exactly one character if `predicate` accepts it.
  `desc` names the expectation in the failure diagnostic.
  '''
  def read_if_parser(inp:Cursor) -> Match:
    char = inp.head
    if char is None: return mk_fail(inp, 'reached end of input string')
    if not predicate(char): return mk_fail(inp, f'{char!r} does not match expected {desc}')
    return mk_match(char, inp.pos, inp.advance())
  return read_if_parser


def one_of(chars:Iterable[str]) -> Parser:
  char_set = frozenset(chars)
  return read_if(char_set.__contains__, desc=f'one of {"".join(sorted(char_set))!r}')


def exact(char:str) -> Parser:
  assert len(char) == 1, char
  return read_if(lambda c: c == char, desc=f'character {char!r}')


def maybe(char:str) -> Parser:
  'Match `char` or else succeed with the empty string.'
  return alt(exact(char), always(''))


any_char = read_if(lambda c: True, desc='any character')


def keyword(word:str) -> Parser:
  '''
  Match `word` character by character.
  The diagnostic names the first mismatching character and the whole expected word.
  '''
  return replace_failure_message(_keyword_chars(word), lambda msg: f'{msg}, in keyword {word!r}')


def _keyword_chars(word:str) -> Parser:
  if not word: return always('')
  return seq(exact(word[0]), _keyword_chars(word[1:]), str_comb)


digit = one_of('0123456789')
space = one_of(' \t\r\n')
spaces = zero_or_more(space, str_comb)
comma = exact(',')
dot = exact('.')


def consume_until(stop:Parser, comb:Combiner=pair_comb) -> Parser:
  'Consume any characters until `stop` matches.'
  return zero_or_more_until(any_char, stop, comb)


# A backslash followed by any character; the value is the escaped character.
escaped_char = both(exact('\\'), seq(any_char, any_char, right_comb), right_comb)

# A double-quoted string with backslash escapes; the value is the unescaped content.
string_literal = modify_value(
  seq(exact('"'), zero_or_more_until(alt(escaped_char, any_char), exact('"'), str_comb), right_comb),
  lambda s: s[:-1]) # Drop the closing quote.
