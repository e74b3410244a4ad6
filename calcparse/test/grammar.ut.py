# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Any

from calcparse.functions import FunctionRegistry, RegistryFrozen
from calcparse.grammar import Grammar, number_literal
from calcparse.match import absent, parse_text
from calcparse.nodes import ArgEnd, Func, Root, skel
from utest import utest, utest_exc, utest_val


registry = FunctionRegistry.with_builtins()
g = Grammar(registry)


def sk(text:str) -> Any:
  'The skeleton of a successful parse, or (absent, message) for a failure.'
  m = g.parse(text)
  return skel(m.val) if m.ok else (absent, m.msg)


# Number literals.

utest(123.0, sk, '123')
utest(123456.0, sk, '123,456')
utest(123456.5, sk, '123,456.5')
utest(1000000.0, sk, '1,000,000')
utest(0.5, sk, '.5')
utest(2.25, sk, '2.25')
utest(7.0, sk, '  7  ')

utest((absent, "unconsumed input: ','"), sk, '1,')
utest((absent, "unconsumed input: '.'"), sk, '5.')
utest((absent, "unconsumed input: ',,5'"), sk, '1,,5')
utest((absent, "',' does not match expected character '.' (expected a number)"), sk, ',')
utest((absent, 'reached end of input string (expected a number)'), sk, '.')

utest(123.0, lambda: parse_text(number_literal(grouping=False), '123').val.c)
utest(',456', lambda: parse_text(number_literal(grouping=False), '123,456').rem.text)


# Binary operators.

utest(('+', 1.0, 2.0), sk, '1+2')
utest(('+', 1.0, 2.0), sk, '1 + 2')
utest(('+', 1.0, ('+', 2.0, 3.0)), sk, '1+2+3')
utest(('-', 8.0, ('-', 4.0, 2.0)), sk, '8-4-2')
utest(('+', 1.0, ('*', 2.0, 3.0)), sk, '1+2*3')
utest(('+', ('*', 2.0, 3.0), 1.0), sk, '2*3+1')
utest(('*', 2.0, ('+', 6.0, 3.0)), sk, '2*(6+3)')
utest(('+', ('*', 2.0, ('+', 1.0, 2.0)), 3.0), sk, '2*(1+2)+3')
utest(('^', 2.0, ('^', 3.0, 2.0)), sk, '2^3^2')
utest(('+', 1000.0, 1.0), sk, '1,000+1')

utest(('+', 1.0, 2.0), sk, '1 plus 2')
utest(('-', 5.0, 3.0), sk, '5 minus 3')
utest(('*', 2.0, 3.0), sk, '2 times 3')
utest(('*', 2.0, 3.0), sk, '2@3')
utest(('/', 6.0, 3.0), sk, '6 div 3')
utest(('%', 7.0, 3.0), sk, '7 mod 3')
utest(('^', 2.0, 3.0), sk, '2**3')
utest(('^', 2.0, 3.0), sk, '2 ** 3')

# `**` is exponentiation, never two multiplication tokens, so it binds like `^`.
utest(sk('2^3*4'), sk, '2**3*4')
utest(('*', ('^', 2.0, 3.0), 4.0), sk, '2**3*4')
utest(('*', 4.0, ('^', 2.0, 3.0)), sk, '4*2**3')
utest((absent, "unconsumed input: '***3'"), sk, '2***3')


# Grouping.

utest(('*', ('+', 1.0, 2.0), 3.0), sk, '[1+2]*{3}')
utest(('+', 1.0, 2.0), sk, '( 1 + 2 )')
utest(4.0, sk, '((4))')
utest(False, lambda: g.parse('(1+2]').ok)
utest(False, lambda: g.parse('(1+2').ok)


# Calls.

utest(('sqrt', 16.0), sk, 'sqrt(16)')
utest(('sqrt', 16.0), sk, ' sqrt ( 16 ) ')
utest(('sqrt', 16.0), sk, 'sqrt[16]')
utest(('rand',), sk, 'rand()')
utest(('max', 1.0, 0.0), sk, 'max(1,000)') # Commas separate arguments, not digit groups.
utest(('max', ('+', 1.0, 2.0), 3.0), sk, 'max(1+2, 3)')
utest(('max', 1.0, ('min', 2.0, 3.0)), sk, 'max(1, min(2, 3))')
utest(('+', ('max', 1.0, 2.0), 1.0), sk, 'max(1,2)+1')
utest(('log2', 8.0), sk, 'log2(8)')
utest(('log', 2.0, 8.0), sk, 'log(2,8)')
utest(('atan2', 1.0, 1.0), sk, 'atan2(1,1)')
utest(('mod', 7.0, 3.0), sk, 'mod(7,3)')
utest(False, lambda: g.parse('nope(1)').ok)
utest(False, lambda: g.parse('max(1,)').ok)

utest(Root(Func('rand', ArgEnd())), lambda: g.parse('rand()').val)


# Failures.

utest((absent, 'reached end of input string (expected a number)'), sk, '')
utest((absent, 'reached end of input string (expected a number)'), sk, '   ')
utest((absent, "unconsumed input: '+'"), sk, '1+')
utest((absent, "unconsumed input: '2'"), sk, '1 2')
utest((absent, "'x' does not match expected character '.' (expected a number)"), sk, 'x')
utest((absent, "'-' does not match expected character '.' (expected a number)"), sk, '-1')

utest(1, lambda: g.parse('1+').err)
utest(2, lambda: g.parse('1 2').err)
utest("t:1:2: unconsumed input: '+'", lambda: g.parse('1+', name='t').diagnostic().splitlines()[0])


# Failure idempotence and tree determinism.

utest(g.parse('2*(1+'), g.parse, '2*(1+')
utest(g.parse('max(1, 2)^2'), g.parse, 'max(1, 2)^2')
utest(g.parse('1+2').val, lambda: Grammar(FunctionRegistry.with_builtins()).parse('1+2').val)


# Registries.

utest_val(True, registry.is_frozen, 'building a grammar freezes its registry')
utest_exc(RegistryFrozen, registry.register, 'late', lambda args: 0.0)

custom = FunctionRegistry()
custom.register('twice', lambda args: 2 * args[0])
custom_grammar = Grammar(custom)
utest(('twice', 2.0), lambda: skel(custom_grammar.parse('twice(2)').val))
utest(False, lambda: custom_grammar.parse('sqrt(4)').ok)
utest(('twice',), lambda: custom_grammar.function_names)
