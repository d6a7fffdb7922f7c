"""Error types raised by the expression engine."""

from typing import Any


class ExpressionError(Exception):
  """Base class for all expression engine failures"""


class UndefinedVariable(ExpressionError, KeyError):
  """A variable was evaluated without a binding in the environment"""

  def __init__(self, name: str):
    super().__init__(name)
    self.name = name

  def __str__(self) -> str:
    return f"Undefined variable {self.name!r}"


class UnknownOperation(ExpressionError, ValueError):
  """A tree description or sympy expression used an unsupported operation"""

  def __init__(self, tag: Any):
    super().__init__(tag)
    self.tag = tag

  def __str__(self) -> str:
    return f"Unknown operation {self.tag!r}"


class MalformedTree(ExpressionError, ValueError):
  """A tree description has the wrong shape or payload"""

  def __init__(self, tree: Any, reason: str):
    super().__init__(tree, reason)
    self.tree = tree
    self.reason = reason

  def __str__(self) -> str:
    return f"Malformed tree description {self.tree!r}: {self.reason}"
