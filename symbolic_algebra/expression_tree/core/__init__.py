"""Core expression tree components."""

from .node import (
    Node, NumberNode, VariableNode, UnaryOpNode, NegationNode, SineNode, CosineNode,
    BinaryOpNode, AdditionNode, MultiplicationNode
)
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP, UNARY_TAG_MAP, BINARY_TAG_MAP,
    ADDITIVE_IDENTITY, MULTIPLICATIVE_IDENTITY,
    evaluate_unary_op, evaluate_binary_op, evaluate_unary_op_fast, evaluate_binary_op_fast
)

__all__ = [
    'Node', 'NumberNode', 'VariableNode', 'UnaryOpNode', 'NegationNode', 'SineNode', 'CosineNode',
    'BinaryOpNode', 'AdditionNode', 'MultiplicationNode',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP', 'UNARY_TAG_MAP', 'BINARY_TAG_MAP',
    'ADDITIVE_IDENTITY', 'MULTIPLICATIVE_IDENTITY',
    'evaluate_unary_op', 'evaluate_binary_op', 'evaluate_unary_op_fast', 'evaluate_binary_op_fast'
]
