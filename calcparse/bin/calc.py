# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Evaluate an arithmetic expression. Arguments are joined with spaces into a single expression.'

from argparse import ArgumentParser
from random import Random

from ..evaluator import Evaluator
from ..functions import FunctionRegistry
from ..grammar import Grammar
from ..io import mk_err_reporter, outL, outP
from ..match import failed
from ..nodes import skel


def main() -> None:
  parser = ArgumentParser(description='Evaluate an arithmetic expression.')
  parser.add_argument('expr', nargs='+', help='The expression; multiple arguments are joined with spaces.')
  parser.add_argument('-tree', action='store_true', help='Print the parse tree skeleton before the result.')
  parser.add_argument('-name', default='<args>', help='Source name used in diagnostics.')
  parser.add_argument('-seed', type=int, default=None, help='Seed for the `rand` function.')
  args = parser.parse_args()

  registry = FunctionRegistry.with_builtins(rng=Random(args.seed))
  grammar = Grammar(registry)
  evaluator = Evaluator(registry, report=mk_err_reporter('calc'))

  text = ' '.join(args.expr)
  try: m = grammar.parse(text, name=args.name)
  except RecursionError: exit(f'calc error: expression is too deeply nested: {text!r}')
  if failed(m): exit(m.diagnostic(prefix='calc error').rstrip('\n'))

  if args.tree: outP(skel(m.val))
  outL(evaluator.eval(m.val))


if __name__ == '__main__': main()
