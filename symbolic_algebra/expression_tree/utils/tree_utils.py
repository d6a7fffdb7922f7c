"""
Tree Utility Functions

Traversal and analysis helpers for expression trees, plus the inverse of
the builder (node -> tree description).
"""

from collections import deque
from typing import Any, List, Set, Tuple, Type, TypeVar

from ..core.node import (
    Node, NumberNode, VariableNode, UnaryOpNode, BinaryOpNode
)
from ..core.operators import NUMBER_TAG, VARIABLE_TAG, CANONICAL_TAGS

T = TypeVar('T', bound=Node)


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.operands())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (iterative, left operand first)"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        stack.extend(reversed(current_node.operands()))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    if isinstance(node, (NumberNode, VariableNode)):
        return 1
    elif isinstance(node, UnaryOpNode):
        return 1 + calculate_tree_depth(node.operand)
    elif isinstance(node, BinaryOpNode):
        left_depth = calculate_tree_depth(node.left)
        right_depth = calculate_tree_depth(node.right)
        return 1 + max(left_depth, right_depth)
    raise TypeError(f"Unsupported node type: {type(node).__name__}")


def find_nodes_by_type(node: Node, node_type: Type[T]) -> List[T]:
    """Find all nodes that are instances of ``node_type``, breadth-first"""
    return [n for n in get_all_nodes(node) if isinstance(n, node_type)]


def get_variables(node: Node) -> Set[str]:
    """Names of all variables referenced anywhere in the tree"""
    return {n.name for n in find_nodes_by_type(node, VariableNode)}


def to_tree_description(node: Node) -> Tuple[Any, ...]:
    """
    Convert a node back into a nested tuple description.

    Canonical tags are always emitted, so ``build(to_tree_description(n)) == n``.
    """
    if isinstance(node, NumberNode):
        return (NUMBER_TAG, node.value)
    elif isinstance(node, VariableNode):
        return (VARIABLE_TAG, node.name)
    elif isinstance(node, UnaryOpNode):
        return (CANONICAL_TAGS[node.operator], to_tree_description(node.operand))
    elif isinstance(node, BinaryOpNode):
        return (CANONICAL_TAGS[node.operator],
                to_tree_description(node.left),
                to_tree_description(node.right))
    raise TypeError(f"Unsupported node type: {type(node).__name__}")
