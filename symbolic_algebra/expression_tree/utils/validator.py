import math
from numbers import Real
from typing import Optional

from ..core.node import Node, NumberNode, VariableNode, UnaryOpNode, BinaryOpNode
from ..core.node import Environment
from ...errors import ExpressionError
from ...logging_system import log_debug


class ExpressionValidator:

  @staticmethod
  def is_valid_expression(node: Node, environment: Optional[Environment] = None) -> bool:
    if not ExpressionValidator._is_structurally_valid(node):
      return False

    if environment is not None:
      return ExpressionValidator._test_evaluation(node, environment)

    return True

  @staticmethod
  def _is_structurally_valid(node: Node) -> bool:
    if isinstance(node, NumberNode):
      value = node.value
      return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)

    elif isinstance(node, VariableNode):
      return isinstance(node.name, str) and bool(node.name)

    elif isinstance(node, UnaryOpNode):
      return ExpressionValidator._is_structurally_valid(node.operand)

    elif isinstance(node, BinaryOpNode):
      return (ExpressionValidator._is_structurally_valid(node.left) and
              ExpressionValidator._is_structurally_valid(node.right))

    return False

  @staticmethod
  def _test_evaluation(node: Node, environment: Environment) -> bool:
    try:
      result = node.evaluate(environment)
    except (ExpressionError, ArithmeticError) as e:
      log_debug(f"Validation evaluation of {node.to_string()} failed: {e}")
      return False

    if not isinstance(result, Real) or not math.isfinite(result):
      return False

    return True
