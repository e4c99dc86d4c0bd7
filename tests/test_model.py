import dataclasses

import pytest

from varcalc.model import Expression, KeyValuePair


def test_int_int_is_ready_without_dependencies():
    expr = Expression(operator="+", variable="x", left=10, right=2)
    assert expr.is_ready()
    assert expr.dependencies() == ()


def test_mixed_operands_not_ready():
    assert not Expression("+", "x", 5, "y").is_ready()
    assert not Expression("+", "x", "y", 5).is_ready()
    assert not Expression("+", "x", "a", "b").is_ready()


def test_dependencies_list_variable_names():
    assert Expression("*", "z", "a", "b").dependencies() == ("a", "b")
    assert Expression("-", "z", 15, "y").dependencies() == ("y",)


def test_dependencies_deduplicated_for_same_variable():
    assert Expression("*", "sq", "x", "x").dependencies() == ("x",)


def test_substitute_left_operand():
    expr = Expression("*", "y", "x", 5)
    updated = expr.substitute(KeyValuePair("x", 7))
    assert updated == Expression("*", "y", 7, 5)
    assert updated.is_ready()


def test_substitute_right_operand():
    expr = Expression("-", "z", 15, "y")
    updated = expr.substitute(KeyValuePair("y", 3))
    assert updated == Expression("-", "z", 15, 3)


def test_substitute_one_of_two_variables_stays_pending():
    expr = Expression("+", "c", "a", "b")
    partial = expr.substitute(KeyValuePair("a", 1))
    assert partial == Expression("+", "c", 1, "b")
    assert not partial.is_ready()
    assert partial.dependencies() == ("b",)
    done = partial.substitute(KeyValuePair("b", 2))
    assert done.is_ready()
    assert done.dependencies() == ()


def test_substitute_same_variable_both_sides():
    expr = Expression("*", "sq", "x", "x")
    updated = expr.substitute(KeyValuePair("x", 4))
    assert updated == Expression("*", "sq", 4, 4)


def test_substitute_unrelated_result_returns_same():
    expr = Expression("+", "x", 1, 2)
    assert expr.substitute(KeyValuePair("q", 9)) is expr


def test_substitute_keeps_original_unchanged():
    expr = Expression("+", "y", "x", 1)
    expr.substitute(KeyValuePair("x", 3))
    assert expr.left == "x"


@pytest.mark.parametrize("bad", [1.5, None, True, [1]])
def test_unsupported_operand_rejected(bad):
    with pytest.raises(TypeError):
        Expression("+", "x", bad, 1)
    with pytest.raises(TypeError):
        Expression("+", "x", 1, bad)


def test_key_value_pair_is_immutable():
    pair = KeyValuePair("x", 5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pair.value = 6
    assert pair == KeyValuePair("x", 5)