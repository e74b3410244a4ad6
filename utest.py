'''
utest is a tiny unit testing library.
Each test is a plain call made at module level; failures are printed to stderr as they occur,
and if any test failed the process exits with status 1.

Set the UTEST_SHOW_EXC environment variable to a truthful value to print unexpected exception tracebacks.
'''


import atexit as _atexit
import inspect as _inspect
from math import isclose as _isclose, isnan as _isnan
from os import environ as _environ
from os.path import basename as _basename
from sys import stderr as _stderr
from traceback import print_exception as _print_exception


__all__ = [
  'utest',
  'utest_approx',
  'utest_exc',
  'utest_seq',
  'utest_val',
]


_test_count = 0
_failure_count = 0
_show_exc = bool(_environ.get('UTEST_SHOW_EXC'))


def utest(exp, fn, *args, _utest_depth=0, **kwargs):
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is raised or the returned value does not equal `exp`.
  '''
  _check_value(_utest_depth, 'value', exp, lambda ret: exp == ret, fn, args, kwargs)


def utest_approx(exp, fn, *args, rel_tol=1e-9, abs_tol=1e-12, _utest_depth=0, **kwargs):
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is raised or the returned float is not close to `exp`.
  NaN is considered close to NaN.
  '''
  def is_close(ret):
    try: return (_isnan(exp) and _isnan(ret)) or _isclose(exp, ret, rel_tol=rel_tol, abs_tol=abs_tol)
    except TypeError: return False
  _check_value(_utest_depth, 'approximate value', exp, is_close, fn, args, kwargs)


def utest_seq(exp_seq, fn, *args, _utest_depth=0, **kwargs):
  '''
  Invoke `fn` with `args` and `kwargs`, and convert the resulting iterable into a list.
  Log a test failure if an exception is raised, or if the items do not equal the items of `exp_seq`.
  '''
  exp = list(exp_seq) # Copy for isolation and a consistent repr.
  _check_value(_utest_depth, 'sequence', exp, lambda ret: exp == ret, lambda *a, **k: list(fn(*a, **k)), args, kwargs,
    subj=fn)


def utest_exc(exp_exc, fn, *args, _utest_depth=0, **kwargs):
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is not raised, or if the raised exception does not match `exp_exc`:
  * if `exp_exc` is a string, it must equal the repr of the raised exception;
  * if `exp_exc` is a type, the raised exception must be an instance of it;
  * otherwise the types and args must be equal.
  '''
  global _test_count
  _test_count += 1
  try: ret = fn(*args, **kwargs)
  except BaseException as exc:
    if not _exc_matches(exp_exc, exc):
      _failure(_utest_depth, 'exception', exp_exc, exc=exc, subj=fn, args=args, kwargs=kwargs)
  else:
    _failure(_utest_depth, 'exception', exp_exc, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_val(exp_val, act_val, desc='<value>'):
  'Log a test failure if `exp_val` does not equal `act_val`, described by `desc`.'
  global _test_count
  _test_count += 1
  if exp_val != act_val:
    _failure(0, 'value', exp_val, ret_label='value', ret=act_val, subj=repr(desc))


def _check_value(depth, exp_label, exp, is_ok, fn, args, kwargs, subj=None):
  global _test_count
  _test_count += 1
  subj = subj or fn
  try: ret = fn(*args, **kwargs)
  except BaseException as exc:
    _failure(depth + 1, exp_label, exp, exc=exc, subj=subj, args=args, kwargs=kwargs)
    return
  if not is_ok(ret):
    _failure(depth + 1, exp_label, exp, ret_label=exp_label.split()[-1], ret=ret, subj=subj, args=args, kwargs=kwargs)


def _exc_matches(exp, act):
  if isinstance(exp, str): return exp == repr(act)
  if isinstance(exp, type): return isinstance(act, exp)
  return type(exp) == type(act) and exp.args == act.args


def _failure(depth, exp_label, exp, ret_label=None, ret=None, exc=None, subj=None, args=(), kwargs={}):
  global _failure_count
  _failure_count += 1
  info = _inspect.getframeinfo(_inspect.stack()[2 + depth].frame) # The test script line.
  name = getattr(subj, '__qualname__', str(subj))
  lines = [f'{_basename(info.filename)}:{info.lineno}: utest failure: {name}']
  lines.extend(f'  arg {i} = {el!r}' for i, el in enumerate(args))
  lines.extend(f'  arg {key} = {val!r}' for key, val in kwargs.items())
  lines.append(f'  expected {exp_label}: {exp!r}')
  if ret_label: lines.append(f'  returned {ret_label}: {ret!r}')
  if exc is not None: lines.append(f'  raised exception:   {exc!r}')
  _errL('\n'.join(lines))
  if exc is not None and _show_exc: _print_exception(exc, file=_stderr)
  _errL()


def _errL(*items): print(*items, sep='', file=_stderr)


@_atexit.register
def report():
  'At exit, if any test failed, print a summary and force the process to exit with status 1.'
  from os import _exit
  if _failure_count > 0:
    _errL(f'\nutest ran: {_test_count}; failed: {_failure_count}')
    _stderr.flush()
    _exit(1) # Raising SystemExit has no effect in an atexit handler.
