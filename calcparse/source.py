# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Source text for the parser: line/column positions, caret diagnostics, and a per-input memo table.
'''

from bisect import bisect_right
from typing import Any, NamedTuple


class Pos(NamedTuple):
  'A one-based (line, column) pair.'
  line:int
  col:int

  def __str__(self) -> str: return f'{self.line}:{self.col}'

  @property
  def is_null(self) -> bool: return self.line < 0


NULL_POS = Pos(-1, -1)


class Source:

  def __init__(self, name:str, text:str, *, show_missing_newline:bool=True):
    assert isinstance(text, str)
    self.name = name
    self.text = text
    self.show_missing_newline = show_missing_newline
    self.newline_positions:list[int] = []
    self.memo:dict[tuple[str,int,int],Any] = {} # Sub-parse results keyed by (rule name, pos, end).


  def __repr__(self):
    return f'{self.__class__.__name__}({self.name!r}, text=<{type(self.text).__name__}[{len(self.text)}]>)'


  def __eq__(self, other:object) -> bool:
    'Sources are equal if their names and texts are equal; line positions and memo tables are caches.'
    return isinstance(other, Source) and self.name == other.name and self.text == other.text

  __hash__ = None # type: ignore[assignment]


  def update_line_positions(self, pos:int) -> None:
    'Lazily update newline positions array up to `pos`. `pos` must be less than or equal to the text length.'
    start = self.newline_positions[-1] + 1 if self.newline_positions else 0
    for i in range(start, pos):
      if self.text[i] == '\n': self.newline_positions.append(i)


  def get_line_index(self, pos:int) -> int:
    text = self.text
    if not (0 <= pos <= len(text)): raise IndexError(pos)
    self.update_line_positions(pos)
    if pos == len(text) and text.endswith('\n'):
      return len(self.newline_positions) - 1 # The EOF position does not get a line index beyond the last line.
    return bisect_right(self.newline_positions, pos - 1)


  def get_line_start(self, pos:int) -> int:
    'Return the character index for the start of the line containing `pos`.'
    if pos == len(self.text) and self.text.endswith('\n'): pos -= 1
    return self.text.rfind('\n', 0, pos) + 1 # rfind returns -1 for no match, so just add one.


  def get_line_end(self, pos:int) -> int:
    'Return the character index for the end of the line containing `pos`; the newline is the final character of a line.'
    newline_pos = self.text.find('\n', pos)
    return len(self.text) if newline_pos == -1 else newline_pos + 1


  def pos_for(self, offset:int) -> Pos:
    'The one-based line and column of `offset`; negative offsets have no position.'
    if offset < 0: return NULL_POS
    return Pos(self.get_line_index(offset) + 1, offset - self.get_line_start(offset) + 1)


  def diagnostic_for_pos(self, pos:int, *, end:int, prefix:str='', msg:str='') -> str:
    '''
    Render `msg` as `name:line:col: msg`, followed by the source line and an underline.
    Multiline ranges are truncated to the first line.
    '''
    assert 0 <= pos <= end, (pos, end)
    line_idx = self.get_line_index(pos)
    line_pos = self.get_line_start(pos)
    line_end = self.get_line_end(pos)
    end = min(end, line_end)
    line_str = self.text[line_pos:line_end]

    if line_str.endswith('\n'):
      src_line = line_str[:-1]
      if pos == len(line_str) - 1 + line_pos: src_line += '⏎' # RETURN SYMBOL.
    elif self.show_missing_newline:
      src_line = line_str + '⏎͓' # RETURN SYMBOL, COMBINING X BELOW.
    else:
      src_line = line_str

    under_chars = ['\t' if char == '\t' else ' ' for char in line_str[:(pos - line_pos)]]
    if pos >= end: under_chars.append('^')
    else: under_chars.extend('~' for _ in range(pos, end))
    underline = ''.join(under_chars)

    col = f'{pos-line_pos+1}-{end-line_pos+1}' if pos < end else str(pos - line_pos + 1)
    pre = (prefix + ': ') if prefix else ''
    name_colon = (self.name + ':') if self.name else ''
    msg_space = ' ' if msg else ''
    src_bar = '| ' if src_line else '|'
    return f'{pre}{name_colon}{line_idx+1}:{col}:{msg_space}{msg}\n{src_bar}{src_line}\n  {underline}\n'
