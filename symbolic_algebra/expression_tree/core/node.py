import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Dict, Mapping, Tuple, Union
from .operators import (
  NodeType, BINARY_OP_MAP, UNARY_OP_MAP, ADDITIVE_IDENTITY,
  evaluate_constant, evaluate_unary_op, evaluate_binary_op,
  evaluate_unary_op_fast, evaluate_binary_op_fast
)
from ...errors import UndefinedVariable

Number = Union[int, float]
Environment = Mapping[str, Number]


class Node(ABC):
  """Immutable expression node with cached structural properties"""

  __slots__ = ('_hash_cache', '_size_cache', '_exact_cache', '_exact_value_cache')

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None
    self._exact_cache: Optional[bool] = None
    self._exact_value_cache: Optional[Number] = None

  def evaluate(self, environment: Optional[Environment] = None):
    if self.is_exact():
      return self.exact_value()
    return self._evaluate(environment)

  @abstractmethod
  def _evaluate(self, environment: Optional[Environment]):
    pass

  @abstractmethod
  def evaluate_batch(self, columns: Dict[str, np.ndarray], n_samples: int) -> np.ndarray:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def operands(self) -> Tuple['Node', ...]:
    pass

  def is_exact(self) -> bool:
    """True when the value does not depend on any variable binding"""
    if self._exact_cache is None:
      self._exact_cache = self._compute_exact()
    return self._exact_cache

  def exact_value(self) -> Number:
    """Value of an exact node, computed once and cached"""
    if self._exact_value_cache is None:
      if not self.is_exact():
        raise ValueError(f"{self.to_string()} depends on variable bindings")
      self._exact_value_cache = self._evaluate(None)
    return self._exact_value_cache

  def is_exact_value(self, value: Number) -> bool:
    """True when the node is exact and evaluates to exactly ``value``"""
    return self.is_exact() and self.exact_value() == value

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.operands())
    return self._size_cache

  def copy(self) -> 'Node':
    # Immutable, so the node serves as its own copy
    return self

  @abstractmethod
  def _compute_exact(self) -> bool:
    pass

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  @abstractmethod
  def _payload(self) -> tuple:
    pass

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if self is other:
      return True
    if type(self) is not type(other):
      return NotImplemented if not isinstance(other, Node) else False
    return self._payload() == other._payload()

  def __str__(self) -> str:
    return self.to_string()


class NumberNode(Node):
  __slots__ = ('_value',)

  def __init__(self, value: Number):
    super().__init__()
    self._value = value

  @property
  def value(self) -> Number:
    return self._value

  def _evaluate(self, environment: Optional[Environment]):
    return self._value

  def evaluate_batch(self, columns: Dict[str, np.ndarray], n_samples: int) -> np.ndarray:
    return evaluate_constant(n_samples, float(self._value))

  def to_string(self) -> str:
    return f"{self._value}"

  def to_sympy(self) -> sp.Expr:
    return sp.sympify(self._value)

  def operands(self) -> Tuple[Node, ...]:
    return ()

  def _compute_exact(self) -> bool:
    return True

  def _compute_hash(self) -> int:
    return hash((NodeType.NUMBER, self._value))

  def _payload(self) -> tuple:
    return (self._value,)

  def __repr__(self) -> str:
    return f"NumberNode({self._value!r})"


class VariableNode(Node):
  __slots__ = ('_name',)

  def __init__(self, name: str):
    super().__init__()
    self._name = name

  @property
  def name(self) -> str:
    return self._name

  def _evaluate(self, environment: Optional[Environment]):
    if environment is None or self._name not in environment:
      raise UndefinedVariable(self._name)
    return environment[self._name]

  def evaluate_batch(self, columns: Dict[str, np.ndarray], n_samples: int) -> np.ndarray:
    if self._name not in columns:
      raise UndefinedVariable(self._name)
    return columns[self._name]

  def to_string(self) -> str:
    return f"{self._name}"

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self._name)

  def operands(self) -> Tuple[Node, ...]:
    return ()

  def _compute_exact(self) -> bool:
    return False

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self._name))

  def _payload(self) -> tuple:
    return (self._name,)

  def __repr__(self) -> str:
    return f"VariableNode({self._name!r})"


class UnaryOpNode(Node):
  """Base for the single-operand variants; ``operator`` names the function"""

  __slots__ = ('_operand',)
  operator = ''

  def __init__(self, operand: Node):
    super().__init__()
    if not isinstance(operand, Node):
      raise TypeError(f"{type(self).__name__} operand must be a Node, got {type(operand).__name__}")
    self._operand = operand

  @property
  def operand(self) -> Node:
    return self._operand

  def _evaluate(self, environment: Optional[Environment]):
    return evaluate_unary_op(self._operand.evaluate(environment), self.operator)

  def evaluate_batch(self, columns: Dict[str, np.ndarray], n_samples: int) -> np.ndarray:
    operand_val = self._operand.evaluate_batch(columns, n_samples)
    return evaluate_unary_op_fast(operand_val, UNARY_OP_MAP[self.operator])

  def to_string(self) -> str:
    return f"{self.operator}({self._operand.to_string()})"

  def operands(self) -> Tuple[Node, ...]:
    return (self._operand,)

  def rebuild(self, operand: Node) -> 'UnaryOpNode':
    return type(self)(operand)

  def _compute_exact(self) -> bool:
    return self._operand.is_exact()

  def _compute_hash(self) -> int:
    return hash((NodeType.UNARY_OP, self.operator, hash(self._operand)))

  def _payload(self) -> tuple:
    return (self._operand,)

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self._operand!r})"


class NegationNode(UnaryOpNode):
  __slots__ = ()
  operator = 'neg'

  def to_string(self) -> str:
    return f"-{self._operand.to_string()}"

  def to_sympy(self) -> sp.Expr:
    return -self._operand.to_sympy()


class SineNode(UnaryOpNode):
  __slots__ = ()
  operator = 'sin'

  def to_sympy(self) -> sp.Expr:
    return sp.sin(self._operand.to_sympy())


class CosineNode(UnaryOpNode):
  __slots__ = ()
  operator = 'cos'

  def to_sympy(self) -> sp.Expr:
    return sp.cos(self._operand.to_sympy())


class BinaryOpNode(Node):
  """Base for the two-operand variants; operand order is significant"""

  __slots__ = ('_left', '_right')
  operator = ''

  def __init__(self, left: Node, right: Node):
    super().__init__()
    if not isinstance(left, Node) or not isinstance(right, Node):
      raise TypeError(f"{type(self).__name__} operands must be Nodes")
    self._left = left
    self._right = right

  @property
  def left(self) -> Node:
    return self._left

  @property
  def right(self) -> Node:
    return self._right

  def _evaluate(self, environment: Optional[Environment]):
    left_val = self._left.evaluate(environment)
    right_val = self._right.evaluate(environment)
    return evaluate_binary_op(left_val, right_val, self.operator)

  def evaluate_batch(self, columns: Dict[str, np.ndarray], n_samples: int) -> np.ndarray:
    left_val = self._left.evaluate_batch(columns, n_samples)
    right_val = self._right.evaluate_batch(columns, n_samples)
    return evaluate_binary_op_fast(left_val, right_val, BINARY_OP_MAP[self.operator])

  def operands(self) -> Tuple[Node, ...]:
    return (self._left, self._right)

  def rebuild(self, left: Node, right: Node) -> 'BinaryOpNode':
    return type(self)(left, right)

  def _compute_exact(self) -> bool:
    return self._left.is_exact() and self._right.is_exact()

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.operator, hash(self._left), hash(self._right)))

  def _payload(self) -> tuple:
    return (self._left, self._right)

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self._left!r}, {self._right!r})"


class AdditionNode(BinaryOpNode):
  __slots__ = ()
  operator = '+'

  def to_string(self) -> str:
    return f"({self._left.to_string()} + {self._right.to_string()})"

  def to_sympy(self) -> sp.Expr:
    return sp.Add(self._left.to_sympy(), self._right.to_sympy())


class MultiplicationNode(BinaryOpNode):
  __slots__ = ()
  operator = '*'

  def has_absorbing_zero(self) -> bool:
    """An exact operand equal to zero makes the whole product zero"""
    return (self._left.is_exact_value(ADDITIVE_IDENTITY) or
            self._right.is_exact_value(ADDITIVE_IDENTITY))

  def _evaluate(self, environment: Optional[Environment]):
    if self.has_absorbing_zero():
      return 0
    return super()._evaluate(environment)

  def evaluate_batch(self, columns: Dict[str, np.ndarray], n_samples: int) -> np.ndarray:
    if self.has_absorbing_zero():
      return np.zeros(n_samples, dtype=np.float64)
    return super().evaluate_batch(columns, n_samples)

  def to_string(self) -> str:
    return f"{self._left.to_string()} * {self._right.to_string()}"

  def to_sympy(self) -> sp.Expr:
    return sp.Mul(self._left.to_sympy(), self._right.to_sympy())

  def _compute_exact(self) -> bool:
    if self._left.is_exact() and self._right.is_exact():
      return True
    return self.has_absorbing_zero()
