# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import find_packages, setup


setup(
  name='calcparse',
  version='0.1.0',
  description='Parser combinators, an arithmetic expression grammar built from them, and a tree evaluator.',
  python_requires='>=3.11',

  packages=find_packages(include=['calcparse', 'calcparse.*'], exclude=['calcparse.test']),
  py_modules=['utest'],
  entry_points={'console_scripts': ['calc=calcparse.bin.calc:main']},
)
