"""Expression facade, including vectorised batch evaluation."""

import numpy as np
import pytest
import sympy as sp

from symbolic_algebra import (
    Expression, build, NumberNode, VariableNode, CosineNode, UndefinedVariable
)

X = ('variable', 'x')
Y = ('variable', 'y')


def num(value):
    return ('number', value)


def test_from_tree_and_evaluate():
    expr = Expression.from_tree(('add', X, ('multiply', Y, num(2))))
    assert expr.evaluate({'x': 1, 'y': 2}) == 5
    assert expr.to_string() == "(x + y * 2)"
    assert str(expr) == expr.to_string()


def test_simplify_and_derive_return_expressions():
    expr = Expression.from_tree(('add', num(0), ('sine', X)))
    simplified = expr.simplify()
    assert isinstance(simplified, Expression)
    assert simplified.root == build(('sine', X))
    assert expr.derive('x').root == CosineNode(VariableNode('x'))
    assert expr.derive_n('x', 2).evaluate({'x': 0.0}) == pytest.approx(0.0)


def test_exactness():
    assert Expression.from_tree(('multiply', num(0), X)).is_exact()
    assert not Expression.from_tree(('sine', X)).is_exact()


def test_equality_and_hash_follow_root():
    first = Expression.from_tree(('multiply', X, Y))
    second = Expression(build(('multiply', X, Y)))
    assert first == second
    assert hash(first) == hash(second)
    assert first != Expression.from_tree(('multiply', Y, X))
    assert first != first.root


def test_structure_queries():
    expr = Expression.from_tree(('add', ('multiply', X, Y), ('cosine', X)))
    assert expr.size() == 6
    assert expr.depth() == 3
    assert expr.variables() == {'x', 'y'}
    assert expr.copy() == expr


def test_to_tree_round_trip():
    tree = ('multiply', ('negate', X), ('add', num(1.5), ('cosine', Y)))
    expr = Expression.from_tree(tree)
    assert expr.to_tree() == tree
    assert Expression.from_tree(expr.to_tree()) == expr


def test_sympy_interop():
    expr = Expression.from_tree(('add', X, ('sine', Y)))
    x, y = sp.symbols('x y')
    assert expr.to_sympy() == x + sp.sin(y)
    assert Expression.from_sympy(sp.cos(x)).root == CosineNode(VariableNode('x'))
    assert expr.latex() == sp.latex(x + sp.sin(y))


def test_root_must_be_node():
    with pytest.raises(TypeError):
        Expression(5)


# Batch evaluation

def test_evaluate_batch_matches_scalar_evaluation():
    expr = Expression.from_tree(('add', ('sine', X), ('multiply', Y, ('cosine', X))))
    X_data = np.array([[0.0, 1.0], [0.5, -2.0], [1.5, 3.0]])
    result = expr.evaluate_batch(X_data, ['x', 'y'])
    expected = [expr.evaluate({'x': row[0], 'y': row[1]}) for row in X_data]
    np.testing.assert_allclose(result, expected)


def test_evaluate_batch_linear():
    expr = Expression.from_tree(('add', X, ('multiply', Y, num(2))))
    result = expr.evaluate_batch(np.array([[1.0, 2.0], [3.0, 4.0]]), ['x', 'y'])
    np.testing.assert_allclose(result, [5.0, 11.0])


def test_evaluate_batch_accepts_single_column_vector():
    expr = Expression.from_tree(('negate', X))
    np.testing.assert_allclose(expr.evaluate_batch(np.array([1.0, 2.0, 3.0]), ['x']),
                               [-1.0, -2.0, -3.0])


def test_evaluate_batch_constant():
    expr = Expression.from_tree(num(3))
    np.testing.assert_allclose(expr.evaluate_batch(np.zeros((4, 1)), ['x']), [3.0] * 4)


def test_evaluate_batch_zero_product_skips_unbound_variable():
    expr = Expression.from_tree(('multiply', num(0), ('variable', 'z')))
    np.testing.assert_array_equal(expr.evaluate_batch(np.ones((3, 1)), ['x']), np.zeros(3))


def test_evaluate_batch_unbound_variable():
    expr = Expression.from_tree(('add', X, ('variable', 'z')))
    with pytest.raises(UndefinedVariable):
        expr.evaluate_batch(np.ones((2, 1)), ['x'])


@pytest.mark.parametrize("data, names", [
    (np.ones((2, 2)), ['x']),
    (np.ones((2, 2, 2)), ['x', 'y']),
    (np.ones((2, 2)), ['x', 'x']),
])
def test_evaluate_batch_rejects_bad_columns(data, names):
    with pytest.raises(ValueError):
        Expression.from_tree(X).evaluate_batch(data, names)


def test_evaluate_batch_number_root_uses_constant_kernel():
    expr = Expression(NumberNode(2.5))
    result = expr.evaluate_batch(np.ones((2, 1)), ['x'])
    assert result.dtype == np.float64
    np.testing.assert_allclose(result, [2.5, 2.5])
