"""
Tests for expression evaluation in Lox.
"""
import math

import pytest

from loxlang.exceptions import OperandTypeException, UndefinedVariableException
from loxlang.interpreter import is_equal, is_truthy, stringify
from loxlang.tests.utils import evaluate_source, run_source


@pytest.mark.parametrize("literal", ["0", "7", "123", "3.14159", "0.5", "1000000"])
def test_numeric_literals_round_trip(literal):
    """
    Test that a scanned numeric literal evaluates to exactly that number.
    """
    assert evaluate_source(literal) == float(literal)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("1 + 2", 3.0),
        ("2 * 3 - 1", 5.0),
        ("10 / 4", 2.5),
        ("-(3)", -3.0),
        ("--3", 3.0),
        ("1 - 2 - 3", -4.0),
        ('"a" + "b" + "c"', "abc"),
        ('"" + ""', ""),
    ],
)
def test_arithmetic_and_concatenation(source, expected):
    """
    Test the arithmetic operators and string concatenation.
    """
    assert evaluate_source(source) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("1 < 2", True),
        ("2 <= 2", True),
        ("3 > 4", False),
        ("3 >= 4", False),
        ("1 == 1", True),
        ("1 != 2", True),
        ("nil == nil", True),
        ("nil == false", False),
        ("1 == true", False),
        ('"a" == "a"', True),
        ('"1" == 1', False),
        ("0 == false", False),
    ],
)
def test_comparison_and_equality(source, expected):
    """
    Test comparisons and type-strict equality.
    """
    assert evaluate_source(source) is expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("!nil", True),
        ("!0", False),
        ('!""', False),
        ("!false", True),
        ("!!true", True),
    ],
)
def test_truthiness(source, expected):
    """
    Test that only nil and false are falsy.
    """
    assert evaluate_source(source) is expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("false and (1 / 0)", False),
        ("nil and 1", None),
        ("1 and 2", 2.0),
        ("nil or \"x\"", "x"),
        ("0 or 1", 0.0),
        ("false or nil", None),
    ],
)
def test_logical_operators_return_decisive_operand(source, expected):
    """
    Test that 'and' and 'or' return an operand rather than a boolean.
    """
    assert evaluate_source(source) == expected


def test_logical_operators_short_circuit():
    """
    Test that the right operand is skipped once the result is known.
    """
    interpreter = run_source("var a = 0;")
    evaluate_source("false and (a = 1)", interpreter)
    evaluate_source("true or (a = 2)", interpreter)
    assert evaluate_source("a", interpreter) == 0.0
    evaluate_source("true and (a = 3)", interpreter)
    assert evaluate_source("a", interpreter) == 3.0


def test_division_by_zero_follows_ieee():
    """
    Test that dividing by zero yields infinities or NaN instead of an error.
    """
    assert evaluate_source("1 / 0") == math.inf
    assert evaluate_source("-1 / 0") == -math.inf
    assert math.isnan(evaluate_source("0 / 0"))


@pytest.mark.parametrize(
    "source",
    [
        '1 + "a"',
        '"a" - "b"',
        "true * 2",
        '"a" < "b"',
        "nil > 1",
        '-"a"',
        "-nil",
    ],
)
def test_operand_type_errors(source):
    """
    Test that operators reject operands of the wrong type.
    """
    with pytest.raises(OperandTypeException):
        evaluate_source(source)


def test_operand_type_error_names_operator():
    """
    Test the message of an operand type error.
    """
    with pytest.raises(OperandTypeException) as excinfo:
        evaluate_source('1 + "a"')
    assert excinfo.value.op == "+"
    assert "two numbers or two strings" in str(excinfo.value)
    assert 'on line 1 in <test>' in str(excinfo.value)


def test_undefined_variable():
    """
    Test reading a variable that was never declared.
    """
    with pytest.raises(UndefinedVariableException) as excinfo:
        evaluate_source("missing")
    assert excinfo.value.varname == "missing"
    assert excinfo.value.line == 1


@pytest.mark.parametrize(
    "value, expected",
    [
        (3.0, "3"),
        (3.5, "3.5"),
        (-2.0, "-2"),
        (0.1 + 0.2, "0.30000000000000004"),
        (True, "true"),
        (False, "false"),
        (None, "nil"),
        ("text", "text"),
        (math.inf, "inf"),
        (0.00001, "0.00001"),
        (1.5e-07, "0.00000015"),
        (1e23, "100000000000000000000000"),
        (1e16, "10000000000000000"),
    ],
)
def test_stringify(value, expected):
    """
    Test the display form of each kind of value.
    """
    assert stringify(value) == expected


def test_number_display(capsys):
    """
    Test that numbers print as plain decimals, without a fractional part when integral.
    """
    run_source(
        "print 6 / 2; print 7 / 2; print 1 + 2 == 3;"
        " print 0.00001; print 100000000000000000000000; print 0 - 0;"
    )
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ["3", "3.5", "true", "0.00001", "100000000000000000000000", "0"]


def test_value_helpers():
    """
    Test truthiness and equality helpers directly.
    """
    assert is_truthy(0.0)
    assert is_truthy("")
    assert not is_truthy(None)
    assert not is_truthy(False)
    assert is_equal(None, None)
    assert not is_equal(True, 1.0)
    assert not is_equal(math.nan, math.nan)
