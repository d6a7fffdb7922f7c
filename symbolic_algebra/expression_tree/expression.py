import numpy as np
import sympy as sp
from typing import Any, Optional, Sequence, Set, Tuple

from .core.node import Node, Environment
from .builder import build
from .utils.simplifier import ExpressionSimplifier
from .utils.differentiator import ExpressionDifferentiator
from .utils.sympy_utils import from_sympy, latex_representation
from .utils.tree_utils import calculate_tree_depth, get_variables, to_tree_description
from ..logging_system import log_milestone, log_warning


class Expression:
  """Expression wrapper around a root node with a cached string form"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    if not isinstance(root, Node):
      raise TypeError(f"Expression root must be a Node, got {type(root).__name__}")
    self.root = root
    self._string_cache: Optional[str] = None

  @classmethod
  def from_tree(cls, tree: Sequence[Any]) -> 'Expression':
    return cls(build(tree))

  @classmethod
  def from_sympy(cls, sympy_expr: sp.Expr) -> 'Expression':
    return cls(from_sympy(sympy_expr))

  def evaluate(self, environment: Optional[Environment] = None):
    return self.root.evaluate(environment)

  def evaluate_batch(self, X: np.ndarray, variable_names: Sequence[str]) -> np.ndarray:
    """Evaluate over every row of ``X``; column ``i`` binds ``variable_names[i]``"""
    X = np.asarray(X, dtype=np.float64)
    if X.ndim == 1:
      X = X.reshape(-1, 1)
    if X.ndim != 2:
      raise ValueError(f"Expected a 2-D sample array, got shape {X.shape}")
    if X.shape[1] != len(variable_names):
      raise ValueError(f"Got {X.shape[1]} columns for {len(variable_names)} variable names")
    if len(set(variable_names)) != len(variable_names):
      raise ValueError(f"Duplicate variable names: {list(variable_names)}")

    n_samples = X.shape[0]
    columns = {name: np.ascontiguousarray(X[:, i]) for i, name in enumerate(variable_names)}
    result = self.root.evaluate_batch(columns, n_samples)

    if not np.all(np.isfinite(result)):
      log_warning(f"Non-finite values while evaluating {self.to_string()}")
    log_milestone(f"Evaluated {self.to_string()} over {n_samples} samples")
    return result

  def is_exact(self) -> bool:
    return self.root.is_exact()

  def simplify(self) -> 'Expression':
    return Expression(ExpressionSimplifier.simplify_expression(self.root))

  def derive(self, variable: str) -> 'Expression':
    return Expression(ExpressionDifferentiator.derive(self.root, variable))

  def derive_n(self, variable: str, order: int) -> 'Expression':
    return Expression(ExpressionDifferentiator.derive_n(self.root, variable, order))

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def to_tree(self) -> Tuple[Any, ...]:
    return to_tree_description(self.root)

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def latex(self) -> str:
    return latex_representation(self.root)

  def copy(self) -> 'Expression':
    return Expression(self.root.copy())

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def variables(self) -> Set[str]:
    return get_variables(self.root)

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.root!r})"
