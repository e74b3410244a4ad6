# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Print helpers for results and diagnostics.
The suffix letters describe the separator and terminator: L: sep='', end='\\n'; P: pretty print.
'''

from pprint import pprint
from sys import stderr, stdout
from typing import Any, Callable, TextIO


def writeP(file:TextIO, *labels_and_obj:Any, indent=2, **opts:Any) -> None:
  'Write labels and pretty-print object to file.'
  labels = labels_and_obj[:-1]
  obj = labels_and_obj[-1]
  if labels: print(*labels, end=': ', file=file)
  pprint(obj, stream=file, indent=indent, **opts)


def outL(*items:Any, sep='', flush=False) -> None:
  "Write `items` to std out; sep='', end='\\n'."
  print(*items, sep=sep, flush=flush)

def outP(*labels_and_obj:Any, **opts:Any) -> None:
  'Pretty print to std out.'
  writeP(stdout, *labels_and_obj, **opts)


def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=stderr, flush=flush)


Reporter = Callable[[str],None]

def mk_err_reporter(prefix:str) -> Reporter:
  'Return a function that writes each message to std err, labeled with `prefix`.'
  def report(msg:str) -> None: errL(prefix, ': ', msg)
  return report
