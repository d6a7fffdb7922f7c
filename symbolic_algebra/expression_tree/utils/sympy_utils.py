import sympy as sp
from functools import reduce
from typing import Any, Dict, List, Optional, Sequence

from ..core.node import (
  Node, NumberNode, VariableNode, NegationNode, SineNode, CosineNode,
  AdditionNode, MultiplicationNode
)
from ...errors import UnknownOperation
from ...logging_system import get_logger, log_debug


def to_sympy(node: Node) -> sp.Expr:
  return node.to_sympy()


def from_sympy(sympy_expr: sp.Expr) -> Node:
  """Convert a SymPy expression into the node model.

  n-ary sums and products are folded left-associatively and a leading -1
  factor becomes a negation. Anything outside the supported operations
  (powers, other functions, non-real numbers) raises UnknownOperation.
  SymPy reorders arguments canonically, so the result is value-equal but
  not necessarily structurally equal to the node the expression came from.
  """
  if not isinstance(sympy_expr, sp.Basic):
    raise TypeError(f"Expected a SymPy expression, got {type(sympy_expr).__name__}")

  if isinstance(sympy_expr, sp.Symbol):
    return VariableNode(sympy_expr.name)

  if sympy_expr.is_number and sympy_expr.is_real:
    if sympy_expr.is_Integer:
      return NumberNode(int(sympy_expr))
    return NumberNode(float(sympy_expr))

  if isinstance(sympy_expr, sp.Add):
    terms = [from_sympy(arg) for arg in sympy_expr.args]
    return reduce(AdditionNode, terms)

  if isinstance(sympy_expr, sp.Mul):
    args = sympy_expr.args
    if args[0] == sp.S.NegativeOne:
      return NegationNode(from_sympy(sp.Mul(*args[1:])))
    factors = [from_sympy(arg) for arg in args]
    return reduce(MultiplicationNode, factors)

  if isinstance(sympy_expr, sp.sin):
    return SineNode(from_sympy(sympy_expr.args[0]))

  if isinstance(sympy_expr, sp.cos):
    return CosineNode(from_sympy(sympy_expr.args[0]))

  raise UnknownOperation(type(sympy_expr).__name__)


def latex_representation(node: Node) -> str:
  """Get LaTeX representation of the expression"""
  return sp.latex(node.to_sympy())


def is_equivalent(first: Node, second: Node) -> bool:
  """True when SymPy proves both expressions equal for all bindings"""
  return sp.simplify(first.to_sympy() - second.to_sympy()) == 0


class SymPySimplifier:
  """SymPy-driven simplification that stays inside the node model"""

  DEFAULT_STRATEGIES = ('simplify', 'expand', 'factor', 'trigsimp')

  def __init__(self, strategies: Optional[Sequence[str]] = None):
    self.simplification_strategies: List[str] = list(strategies or self.DEFAULT_STRATEGIES)
    unknown = set(self.simplification_strategies) - set(self.DEFAULT_STRATEGIES)
    if unknown:
      raise ValueError(f"Unknown simplification strategies: {sorted(unknown)}")

  def simplify_expression(self, node: Node) -> Dict[str, Any]:
    """
    Simplify expression using multiple SymPy strategies

    Returns:
        Dict with the simplified node and metadata. Strategies whose result
        cannot be expressed with the supported operations are skipped.
    """
    sympy_expr = node.to_sympy()
    original_complexity = self._calculate_complexity(sympy_expr)

    best_node = node
    best_complexity = original_complexity
    best_strategy = 'none'

    for strategy in self.simplification_strategies:
      simplified = self._apply_strategy(strategy, sympy_expr)
      complexity = self._calculate_complexity(simplified)
      if complexity >= best_complexity:
        continue
      try:
        candidate = from_sympy(simplified)
      except UnknownOperation as e:
        log_debug(f"SymPy strategy '{strategy}' produced unsupported form: {e}")
        continue
      best_node = candidate
      best_complexity = complexity
      best_strategy = strategy

    get_logger().operation_summary('sympy simplify', {
      'strategy': best_strategy,
      'original_complexity': original_complexity,
      'simplified_complexity': best_complexity
    })

    return {
      'simplified': best_node,
      'strategy_used': best_strategy,
      'complexity_reduction': original_complexity - best_complexity,
      'original_complexity': original_complexity,
      'simplified_complexity': best_complexity
    }

  @staticmethod
  def _apply_strategy(strategy: str, sympy_expr: sp.Expr) -> sp.Expr:
    if strategy == 'simplify':
      return sp.simplify(sympy_expr)
    elif strategy == 'expand':
      return sp.expand(sympy_expr)
    elif strategy == 'factor':
      return sp.factor(sympy_expr)
    elif strategy == 'trigsimp':
      return sp.trigsimp(sympy_expr)
    raise ValueError(f"Unknown simplification strategy: {strategy}")

  def _calculate_complexity(self, expr: sp.Expr) -> int:
    """Calculate expression complexity for SymPy expressions"""
    return len(expr.free_symbols) + len(expr.atoms(sp.Function)) + expr.count_ops()

  def latex_representation(self, node: Node) -> str:
    return latex_representation(node)
