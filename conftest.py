# Test-runner plumbing: collect each `calcparse/test/*.ut.py` utest script as one pytest item.
# The script is run in a subprocess; a non-zero exit status (utest's failure signal) fails the item.

import subprocess
import sys

import pytest


def pytest_collect_file(parent, file_path):
  if file_path.name.endswith('.ut.py'):
    return UtestScript.from_parent(parent, path=file_path)


class UtestScript(pytest.File):

  def collect(self):
    yield UtestItem.from_parent(self, name=self.path.name)


class UtestItem(pytest.Item):

  def runtest(self):
    proc = subprocess.run([sys.executable, str(self.path)], capture_output=True, text=True)
    if proc.returncode != 0:
      raise UtestFailure(proc)

  def repr_failure(self, excinfo):
    if isinstance(excinfo.value, UtestFailure):
      proc = excinfo.value.args[0]
      return f'exit status {proc.returncode}\n{proc.stdout}{proc.stderr}'
    return super().repr_failure(excinfo)

  def reportinfo(self):
    return self.path, 0, f'utest script: {self.path.name}'


class UtestFailure(Exception):
  pass
