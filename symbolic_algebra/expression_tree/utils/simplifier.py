from ..core.node import (
  Node, NumberNode, VariableNode, UnaryOpNode, AdditionNode, MultiplicationNode
)
from ..core.operators import ADDITIVE_IDENTITY, MULTIPLICATIVE_IDENTITY


class ExpressionSimplifier:
  """Rewrites expressions using identity elimination and constant folding"""

  @staticmethod
  def simplify_expression(node: Node) -> Node:
    """Return a value-equivalent, reduced tree; the input is left untouched"""
    if isinstance(node, (NumberNode, VariableNode)):
      return node

    if not isinstance(node, Node):
      raise TypeError(f"Cannot simplify object of type {type(node).__name__}")

    if node.is_exact():
      return NumberNode(node.exact_value())

    if isinstance(node, UnaryOpNode):
      return node.rebuild(ExpressionSimplifier.simplify_expression(node.operand))

    if isinstance(node, AdditionNode):
      return ExpressionSimplifier._simplify_addition(node)

    if isinstance(node, MultiplicationNode):
      return ExpressionSimplifier._simplify_multiplication(node)

    raise TypeError(f"Cannot simplify node of type {type(node).__name__}")

  @staticmethod
  def _simplify_addition(node: AdditionNode) -> Node:
    if node.left.is_exact_value(ADDITIVE_IDENTITY):
      return ExpressionSimplifier.simplify_expression(node.right)  # 0 + x = x
    if node.right.is_exact_value(ADDITIVE_IDENTITY):
      return ExpressionSimplifier.simplify_expression(node.left)  # x + 0 = x
    return AdditionNode(ExpressionSimplifier.simplify_expression(node.left),
                        ExpressionSimplifier.simplify_expression(node.right))

  @staticmethod
  def _simplify_multiplication(node: MultiplicationNode) -> Node:
    # x * 0 never gets here, zero-absorbing products are exact
    if node.left.is_exact_value(MULTIPLICATIVE_IDENTITY):
      return ExpressionSimplifier.simplify_expression(node.right)  # 1 * x = x
    if node.right.is_exact_value(MULTIPLICATIVE_IDENTITY):
      return ExpressionSimplifier.simplify_expression(node.left)  # x * 1 = x
    return MultiplicationNode(ExpressionSimplifier.simplify_expression(node.left),
                              ExpressionSimplifier.simplify_expression(node.right))
