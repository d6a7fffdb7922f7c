"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier
from .differentiator import ExpressionDifferentiator
from .sympy_utils import (
    SymPySimplifier, to_sympy, from_sympy, latex_representation, is_equivalent
)
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type, get_variables,
    to_tree_description
)
from .validator import ExpressionValidator

__all__ = [
    'ExpressionSimplifier', 'ExpressionDifferentiator',
    'SymPySimplifier', 'to_sympy', 'from_sympy', 'latex_representation', 'is_equivalent',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type', 'get_variables',
    'to_tree_description',
    'ExpressionValidator'
]
