# expression_utils.py
"""Functional entry points over node trees.

    >>> node = build(('add', ('number', 0), ('variable', 'x')))
    >>> simplify(node)
    VariableNode('x')
"""
from typing import Any, Optional, Sequence

from .expression_tree.builder import build as _build
from .expression_tree.core.node import Node, Environment
from .expression_tree.utils.simplifier import ExpressionSimplifier
from .expression_tree.utils.differentiator import ExpressionDifferentiator
from .logging_system import LogLevel, get_logger, log_debug


def _tracing() -> bool:
  return get_logger().is_enabled(LogLevel.VERBOSE)


def build(tree: Sequence[Any]) -> Node:
  """Build a node tree from a nested tuple/list description"""
  node = _build(tree)
  if _tracing():
    log_debug(f"Built {node.to_string()} from {tree!r}")
  return node


def evaluate(node: Node, environment: Optional[Environment] = None):
  """Evaluate ``node`` with variables bound by ``environment``"""
  return node.evaluate(environment)


def is_exact(node: Node) -> bool:
  return node.is_exact()


def simplify(node: Node) -> Node:
  result = ExpressionSimplifier.simplify_expression(node)
  if _tracing():
    log_debug(f"Simplified {node.to_string()} -> {result.to_string()}")
  return result


def derive(node: Node, variable: str) -> Node:
  """Derivative of ``node`` with respect to ``variable``, simplified"""
  result = ExpressionDifferentiator.derive(node, variable)
  if _tracing():
    log_debug(f"d/d{variable} {node.to_string()} -> {result.to_string()}")
  return result


def derive_n(node: Node, variable: str, order: int) -> Node:
  result = ExpressionDifferentiator.derive_n(node, variable, order)
  if _tracing():
    log_debug(f"d^{order}/d{variable}^{order} {node.to_string()} -> {result.to_string()}")
  return result


def to_string(node: Node) -> str:
  return node.to_string()
