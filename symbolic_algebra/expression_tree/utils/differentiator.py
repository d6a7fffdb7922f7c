from ..core.node import (
  Node, NumberNode, VariableNode, NegationNode, SineNode, CosineNode,
  AdditionNode, MultiplicationNode
)
from .simplifier import ExpressionSimplifier
from ...logging_system import log_milestone


class ExpressionDifferentiator:
  """Symbolic differentiation with respect to a single named variable.

  Every rule result is simplified before it is returned, so derivatives of
  composite nodes are built from already-reduced operand derivatives.
  Untouched input subtrees are reused by reference.
  """

  @staticmethod
  def derive(node: Node, variable: str) -> Node:
    if not isinstance(variable, str):
      raise TypeError(f"Variable name must be a string, got {type(variable).__name__}")
    return ExpressionSimplifier.simplify_expression(
      ExpressionDifferentiator._apply_rule(node, variable))

  @staticmethod
  def derive_n(node: Node, variable: str, order: int) -> Node:
    """Derivative of the given order; order 0 is the simplified input"""
    if isinstance(order, bool) or not isinstance(order, int) or order < 0:
      raise ValueError(f"Derivative order must be a non-negative integer, got {order!r}")
    result = ExpressionSimplifier.simplify_expression(node)
    for _ in range(order):
      result = ExpressionDifferentiator.derive(result, variable)
    log_milestone(f"Order {order} derivative in {variable}: {result.size()} nodes")
    return result

  @staticmethod
  def _apply_rule(node: Node, variable: str) -> Node:
    derive = ExpressionDifferentiator.derive

    if isinstance(node, NumberNode):
      return NumberNode(0)

    if isinstance(node, VariableNode):
      return NumberNode(1 if node.name == variable else 0)

    if isinstance(node, NegationNode):
      return NegationNode(derive(node.operand, variable))

    if isinstance(node, SineNode):
      # (sin u)' = u' * cos u
      return MultiplicationNode(derive(node.operand, variable), CosineNode(node.operand))

    if isinstance(node, CosineNode):
      # (cos u)' = u' * -sin u
      return MultiplicationNode(derive(node.operand, variable),
                                NegationNode(SineNode(node.operand)))

    if isinstance(node, AdditionNode):
      return AdditionNode(derive(node.left, variable), derive(node.right, variable))

    if isinstance(node, MultiplicationNode):
      # product rule: u'v + uv'
      return AdditionNode(MultiplicationNode(derive(node.left, variable), node.right),
                          MultiplicationNode(node.left, derive(node.right, variable)))

    raise TypeError(f"Cannot differentiate node of type {type(node).__name__}")
