import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  NUMBER = 0
  VARIABLE = 1
  UNARY_OP = 2
  BINARY_OP = 3

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  MUL = 1
  # Unary ops
  NEG = 2
  SIN = 3
  COS = 4

# Operator symbols used on nodes
BINARY_OP_MAP = {'+': OpType.ADD, '*': OpType.MUL}
UNARY_OP_MAP = {'neg': OpType.NEG, 'sin': OpType.SIN, 'cos': OpType.COS}

# Tree description tags, canonical name first, then accepted aliases
NUMBER_TAG = 'number'
VARIABLE_TAG = 'variable'
UNARY_TAG_MAP = {
    'negate': 'neg', 'neg': 'neg', '-': 'neg',
    'sine': 'sin', 'sin': 'sin',
    'cosine': 'cos', 'cos': 'cos',
}
BINARY_TAG_MAP = {
    'add': '+', '+': '+',
    'multiply': '*', '*': '*',
}
CANONICAL_TAGS = {
    'neg': 'negate', 'sin': 'sine', 'cos': 'cosine',
    '+': 'add', '*': 'multiply',
}

ADDITIVE_IDENTITY = 0
MULTIPLICATIVE_IDENTITY = 1


def _to_python_scalar(value):
  # numpy scalars leak out of np.sin/np.cos; arrays pass through untouched
  if isinstance(value, np.generic):
    return value.item()
  return value

def evaluate_unary_op(operand_val, operator):
  if operator == 'neg':
    return -operand_val
  elif operator == 'sin':
    return _to_python_scalar(np.sin(operand_val))
  elif operator == 'cos':
    return _to_python_scalar(np.cos(operand_val))
  raise ValueError(f"Unsupported unary operator: {operator}")

def evaluate_binary_op(left_val, right_val, operator):
  if operator == '+':
    return left_val + right_val
  elif operator == '*':
    return left_val * right_val
  raise ValueError(f"Unsupported binary operator: {operator}")

@numba.njit(cache=True, inline='always')
def evaluate_constant(n_samples, value):
  return np.full(n_samples, value, dtype=np.float64)

@numba.njit(cache=True)
def evaluate_binary_op_fast(left_val, right_val, op_type):
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.MUL:
    return left_val * right_val
  return np.zeros_like(left_val)

@numba.njit(cache=True)
def evaluate_unary_op_fast(operand_val, op_type):
  if op_type == OpType.NEG:
    return -operand_val
  elif op_type == OpType.SIN:
    return np.sin(operand_val)
  elif op_type == OpType.COS:
    return np.cos(operand_val)
  return np.zeros_like(operand_val)
