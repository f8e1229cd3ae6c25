import pytest

from symbols import (
    FUNCTIONS,
    function,
    getOperatorWeight,
    identifier,
    isFunctionName,
    isRightAssociative,
    leftParen,
    number,
    operator,
    rightParen,
    shouldPop,
)


@pytest.mark.parametrize("symbol, weight", [("+", 1), ("-", 1), ("*", 2), ("/", 2), ("^", 3)])
def test_operator_weight(symbol, weight):
    assert getOperatorWeight(symbol) == weight
    assert operator(symbol).weight == weight


def test_unknown_operator_weight():
    with pytest.raises(ValueError):
        getOperatorWeight("%")


def test_only_power_is_right_associative():
    assert isRightAssociative("^")
    assert operator("^").rightAssociative
    for symbol in "+-*/":
        assert not isRightAssociative(symbol)


@pytest.mark.parametrize(
    "top, incoming, expected",
    [
        ("*", "+", True),
        ("^", "/", True),
        ("+", "*", False),
        ("*", "^", False),
        ("+", "-", True),
        ("-", "+", True),
        ("/", "*", True),
        ("^", "^", False),
    ],
)
def test_should_pop(top, incoming, expected):
    assert shouldPop(top, incoming) is expected


def test_function_names_are_case_insensitive():
    assert isFunctionName("sin")
    assert isFunctionName("COS")
    assert isFunctionName("Tan")
    assert not isFunctionName("log")
    assert isFunctionName("log", {"log": 1})
    assert not isFunctionName("sin", {"log": 1})


def test_default_functions_are_unary():
    assert FUNCTIONS == {"sin": 1, "cos": 1, "tan": 1}


def test_tokens_render_as_text():
    assert str(number("42")) == "42"
    assert repr(identifier("xy")) == "xy"
    assert str(function("sin")) == "sin"
    assert str(leftParen()) == "("
    assert str(rightParen()) == ")"


def test_token_equality_includes_kind():
    assert number("2") == number("2")
    assert number("2") != identifier("2")
    assert function("sin") != identifier("sin")
    assert function("sin").arity == 1
    assert leftParen() == leftParen()
