import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from symbolic_algebra import Expression, UndefinedVariable
from symbolic_algebra.logging_system import LogLevel, configure_logging


def main():
  configure_logging(LogLevel.VERBOSE)

  # f(x, y) = sin(x * y) + 0 * z
  tree = ('add',
          ('sine', ('multiply', ('variable', 'x'), ('variable', 'y'))),
          ('multiply', ('number', 0), ('variable', 'z')))
  expr = Expression.from_tree(tree)
  print(f"f(x, y)      = {expr}")
  print(f"simplified   = {expr.simplify()}")
  print(f"df/dx        = {expr.derive('x')}")
  print(f"d2f/dx2      = {expr.derive_n('x', 2)}")
  print(f"LaTeX        = {expr.latex()}")
  print(f"f(0.5, 2.0)  = {expr.evaluate({'x': 0.5, 'y': 2.0}):.6f}")

  X = np.random.uniform(-1, 1, (5, 2))
  print(f"batch values = {expr.evaluate_batch(X, ['x', 'y'])}")

  try:
    expr.evaluate({'x': 1.0})
  except UndefinedVariable as e:
    print(f"expected failure: {e}")


if __name__ == "__main__":
  main()
