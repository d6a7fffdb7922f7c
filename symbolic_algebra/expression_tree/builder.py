"""Builds node trees from nested tuple/list descriptions.

A description is either ``(tag, payload_or_subtree)`` for leaves and unary
operations or ``(tag, left, right)`` for binary operations::

    ('add', ('number', 0), ('variable', 'x'))
"""

from numbers import Real
from typing import Any, Dict, Sequence, Type

from .core.node import (
  Node, NumberNode, VariableNode, UnaryOpNode, NegationNode, SineNode, CosineNode,
  BinaryOpNode, AdditionNode, MultiplicationNode
)
from .core.operators import NUMBER_TAG, VARIABLE_TAG, UNARY_TAG_MAP, BINARY_TAG_MAP
from ..errors import UnknownOperation, MalformedTree

UNARY_NODE_CLASSES: Dict[str, Type[UnaryOpNode]] = {
  'neg': NegationNode, 'sin': SineNode, 'cos': CosineNode,
}
BINARY_NODE_CLASSES: Dict[str, Type[BinaryOpNode]] = {
  '+': AdditionNode, '*': MultiplicationNode,
}


def build(tree: Sequence[Any]) -> Node:
  """Build a node from a tree description.

  Raises:
      UnknownOperation: the tag is not a recognised operation.
      MalformedTree: the description has the wrong shape or payload.
  """
  if not isinstance(tree, (list, tuple)):
    raise MalformedTree(tree, "expected a list or tuple")
  if len(tree) > 2:
    return _build_binary(tree)
  return _build_unary(tree)


def _check_tag(tree: Sequence[Any]) -> str:
  tag = tree[0]
  if not isinstance(tag, str):
    raise UnknownOperation(tag)
  return tag


def _build_unary(tree: Sequence[Any]) -> Node:
  if len(tree) < 2:
    raise MalformedTree(tree, "expected a tag and a payload")
  tag = _check_tag(tree)
  payload = tree[1]

  if tag == NUMBER_TAG:
    if isinstance(payload, bool) or not isinstance(payload, Real):
      raise MalformedTree(tree, "number payload must be a real number")
    return NumberNode(payload)

  if tag == VARIABLE_TAG:
    if not isinstance(payload, str) or not payload:
      raise MalformedTree(tree, "variable name must be a non-empty string")
    return VariableNode(payload)

  if tag in UNARY_TAG_MAP:
    return UNARY_NODE_CLASSES[UNARY_TAG_MAP[tag]](build(payload))

  if tag in BINARY_TAG_MAP:
    raise MalformedTree(tree, f"{tag!r} takes two operands")
  raise UnknownOperation(tag)


def _build_binary(tree: Sequence[Any]) -> Node:
  if len(tree) > 3:
    raise MalformedTree(tree, "expected a tag and two operands")
  tag = _check_tag(tree)
  _, left, right = tree

  if tag in BINARY_TAG_MAP:
    return BINARY_NODE_CLASSES[BINARY_TAG_MAP[tag]](build(left), build(right))

  if tag in UNARY_TAG_MAP or tag in (NUMBER_TAG, VARIABLE_TAG):
    raise MalformedTree(tree, f"{tag!r} takes a single operand")
  raise UnknownOperation(tag)
