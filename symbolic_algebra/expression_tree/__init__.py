"""Expression Tree Module

Core expression tree functionality: nodes, builder, simplifier and
differentiator.
"""

from .expression import Expression
from .builder import build
from .core.node import (
    Node,
    NumberNode,
    VariableNode,
    UnaryOpNode,
    NegationNode,
    SineNode,
    CosineNode,
    BinaryOpNode,
    AdditionNode,
    MultiplicationNode
)
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    UNARY_OP_MAP,
    UNARY_TAG_MAP,
    BINARY_TAG_MAP
)
from .utils import (
    ExpressionSimplifier, ExpressionDifferentiator, ExpressionValidator, SymPySimplifier,
    to_tree_description, from_sympy, is_equivalent
)

__all__ = [
    "Expression", "build",
    "Node", "NumberNode", "VariableNode", "UnaryOpNode", "NegationNode", "SineNode",
    "CosineNode", "BinaryOpNode", "AdditionNode", "MultiplicationNode",
    "NodeType", "OpType",
    "BINARY_OP_MAP", "UNARY_OP_MAP", "UNARY_TAG_MAP", "BINARY_TAG_MAP",
    "ExpressionSimplifier", "ExpressionDifferentiator", "ExpressionValidator", "SymPySimplifier",
    "to_tree_description", "from_sympy", "is_equivalent"
]
