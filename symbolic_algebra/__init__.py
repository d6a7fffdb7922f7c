# Python

"""Symbolic Algebra Package

Expression trees with evaluation, symbolic differentiation and algebraic
simplification.
"""

from .expression_tree import (
  Expression, Node, NumberNode, VariableNode, UnaryOpNode, NegationNode, SineNode,
  CosineNode, BinaryOpNode, AdditionNode, MultiplicationNode,
  ExpressionSimplifier, ExpressionDifferentiator, ExpressionValidator, SymPySimplifier,
  to_tree_description, from_sympy, is_equivalent
)
from .expression_utils import build, evaluate, is_exact, simplify, derive, derive_n, to_string
from .errors import ExpressionError, UndefinedVariable, UnknownOperation, MalformedTree
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "NumberNode", "VariableNode", "UnaryOpNode", "NegationNode",
  "SineNode", "CosineNode", "BinaryOpNode", "AdditionNode", "MultiplicationNode",
  "ExpressionSimplifier", "ExpressionDifferentiator", "ExpressionValidator", "SymPySimplifier",
  "to_tree_description", "from_sympy", "is_equivalent",
  "build", "evaluate", "is_exact", "simplify", "derive", "derive_n", "to_string",
  "ExpressionError", "UndefinedVariable", "UnknownOperation", "MalformedTree",
  "LogLevel", "get_logger", "set_log_level", "configure_logging"
]
