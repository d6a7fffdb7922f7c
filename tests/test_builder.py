"""Builder: tree descriptions -> node trees, including failure modes."""

import pytest

from symbolic_algebra import (
    build, NumberNode, VariableNode, NegationNode, SineNode, CosineNode,
    AdditionNode, MultiplicationNode, UnknownOperation, MalformedTree, ExpressionError
)


def test_builds_leaves():
    assert build(('number', 5)) == NumberNode(5)
    assert build(['variable', 'x']) == VariableNode('x')


def test_number_payload_kept_verbatim():
    node = build(('number', 2.5))
    assert node.value == 2.5
    assert isinstance(build(('number', 7)).value, int)


def test_builds_unary_operations():
    x = VariableNode('x')
    assert build(('negate', ('variable', 'x'))) == NegationNode(x)
    assert build(('sine', ('variable', 'x'))) == SineNode(x)
    assert build(('cosine', ('variable', 'x'))) == CosineNode(x)


def test_builds_binary_operations():
    x = VariableNode('x')
    two = NumberNode(2)
    assert build(('add', ('variable', 'x'), ('number', 2))) == AdditionNode(x, two)
    assert build(('multiply', ('number', 2), ('variable', 'x'))) == MultiplicationNode(two, x)


def test_builds_nested_descriptions():
    tree = ['multiply',
            ['add', ['number', 1], ['variable', 'x']],
            ['cosine', ['negate', ['variable', 'y']]]]
    expected = MultiplicationNode(
        AdditionNode(NumberNode(1), VariableNode('x')),
        CosineNode(NegationNode(VariableNode('y'))))
    assert build(tree) == expected


@pytest.mark.parametrize("alias, canonical", [
    (('-', ('variable', 'x')), ('negate', ('variable', 'x'))),
    (('neg', ('variable', 'x')), ('negate', ('variable', 'x'))),
    (('sin', ('variable', 'x')), ('sine', ('variable', 'x'))),
    (('cos', ('variable', 'x')), ('cosine', ('variable', 'x'))),
    (('+', ('number', 1), ('variable', 'x')), ('add', ('number', 1), ('variable', 'x'))),
    (('*', ('number', 1), ('variable', 'x')), ('multiply', ('number', 1), ('variable', 'x'))),
])
def test_operator_symbol_aliases(alias, canonical):
    assert build(alias) == build(canonical)


@pytest.mark.parametrize("tree, tag", [
    (('tangent', ('variable', 'x')), 'tangent'),
    (('divide', ('number', 1), ('variable', 'x')), 'divide'),
    ((5, ('variable', 'x')), 5),
    (('add', ('number', 1), ('log', ('variable', 'x'))), 'log'),
])
def test_unknown_operation_fails_loudly(tree, tag):
    with pytest.raises(UnknownOperation) as exc_info:
        build(tree)
    assert exc_info.value.tag == tag


@pytest.mark.parametrize("tree", [
    'number',
    None,
    ('number',),
    (),
    ('add', ('number', 1), ('number', 2), ('number', 3)),
    ('add', ('number', 1)),
    ('sine', ('number', 1), ('number', 2)),
    ('number', 1, 2),
    ('number', '5'),
    ('number', True),
    ('variable', ''),
    ('variable', 3),
])
def test_malformed_descriptions(tree):
    with pytest.raises(MalformedTree):
        build(tree)


def test_errors_share_a_base_class():
    with pytest.raises(ExpressionError):
        build(('frobnicate', ('number', 1)))
    with pytest.raises(ValueError):
        build(('number', 'one'))
