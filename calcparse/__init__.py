# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
A small parsing engine: parser combinators, an arithmetic expression grammar built from them,
and an evaluator for the resulting tagged trees.
'''

from .calc import calculate, default_registry, evaluate, parse, register_function
from .evaluator import Evaluator
from .functions import ArityError, FunctionRegistry, RegistryFrozen
from .grammar import Grammar
from .match import absent, Cursor, failed, Match, remainder, success, value
from .nodes import Arg, ArgEnd, BinOp, Func, Num, Root, skel
from .source import NULL_POS, Pos, Source
