"""SymPy bridge: conversion both ways, equivalence and sympy-driven simplification."""

import pytest
import sympy as sp

from symbolic_algebra import (
    build, evaluate, NumberNode, VariableNode, NegationNode, SineNode, CosineNode,
    MultiplicationNode, UnknownOperation
)
from symbolic_algebra.expression_tree.utils.sympy_utils import (
    SymPySimplifier, to_sympy, from_sympy, latex_representation, is_equivalent
)

X = ('variable', 'x')
Y = ('variable', 'y')
x, y = sp.symbols('x y')


def test_to_sympy():
    assert to_sympy(build(('add', X, ('multiply', ('number', 2), Y)))) == x + 2 * y
    assert to_sympy(build(('negate', X))) == -x
    assert to_sympy(build(('sine', X))) == sp.sin(x)
    assert to_sympy(build(('cosine', ('number', 0)))) == 1


@pytest.mark.parametrize("sympy_expr, expected", [
    (x, VariableNode('x')),
    (sp.Integer(3), NumberNode(3)),
    (sp.Rational(1, 2), NumberNode(0.5)),
    (-x, NegationNode(VariableNode('x'))),
    (sp.sin(x), SineNode(VariableNode('x'))),
    (sp.cos(sp.sin(y)), CosineNode(SineNode(VariableNode('y')))),
    (-2 * x, MultiplicationNode(NumberNode(-2), VariableNode('x'))),
])
def test_from_sympy(sympy_expr, expected):
    assert from_sympy(sympy_expr) == expected


def test_from_sympy_integers_stay_integers():
    assert isinstance(from_sympy(sp.Integer(7)).value, int)


def test_from_sympy_folds_nary_sums_and_products():
    node = from_sympy(x + y + sp.sin(x))
    env = {'x': 0.4, 'y': 1.1}
    assert evaluate(node, env) == pytest.approx(0.4 + 1.1 + float(sp.sin(0.4)))
    assert node.size() == 6

    product = from_sympy(3 * x * y)
    assert evaluate(product, {'x': 2, 'y': 5}) == 30


@pytest.mark.parametrize("sympy_expr", [x ** 2, sp.exp(x), sp.tan(x), sp.I, x + sp.I])
def test_from_sympy_rejects_unsupported_operations(sympy_expr):
    with pytest.raises(UnknownOperation):
        from_sympy(sympy_expr)


def test_from_sympy_requires_sympy_input():
    with pytest.raises(TypeError):
        from_sympy(5)


def test_round_trip_preserves_value():
    node = build(('multiply', ('add', X, ('number', 1)), ('cosine', ('negate', Y))))
    env = {'x': 0.25, 'y': 2.0}
    assert evaluate(from_sympy(to_sympy(node)), env) == pytest.approx(evaluate(node, env))


def test_is_equivalent():
    assert is_equivalent(build(('add', X, Y)), build(('add', Y, X)))
    assert is_equivalent(build(('multiply', ('number', 2), X)), build(('add', X, X)))
    assert not is_equivalent(build(X), build(Y))


def test_latex_representation():
    assert latex_representation(build(('sine', X))) == sp.latex(sp.sin(x))


def test_sympy_simplifier_applies_trig_identity():
    node = build(('add',
                  ('multiply', ('sine', X), ('sine', X)),
                  ('multiply', ('cosine', X), ('cosine', X))))
    result = SymPySimplifier().simplify_expression(node)
    assert result['simplified'] == NumberNode(1)
    assert result['strategy_used'] == 'simplify'
    assert result['complexity_reduction'] > 0


def test_sympy_simplifier_keeps_node_when_result_is_unsupported():
    node = build(('multiply', X, X))
    result = SymPySimplifier().simplify_expression(node)
    assert result['simplified'] is node
    assert result['strategy_used'] == 'none'
    assert result['complexity_reduction'] == 0


def test_sympy_simplifier_strategy_selection():
    simplifier = SymPySimplifier(strategies=['expand'])
    assert simplifier.simplification_strategies == ['expand']
    with pytest.raises(ValueError):
        SymPySimplifier(strategies=['magic'])
