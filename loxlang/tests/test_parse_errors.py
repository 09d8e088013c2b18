"""
Tests for syntax errors and multi-error recovery in the Lox parser.
"""
import pytest

from loxlang.exceptions import ParseErrorKind, ParseFailure
from loxlang.lexer import tokenize
from loxlang.nodes import format_expr
from loxlang.parser import Parser
from loxlang.tests.utils import parse_errors, parse_source


def test_invalid_assignment_target():
    """
    Test that only a bare variable may be assigned to.
    """
    errors = parse_errors("1 = 2;")
    assert len(errors) == 1
    assert errors[0].kind == ParseErrorKind.EXPRESSION
    assert "Invalid assignment target" in errors[0].message
    assert errors[0].line == 1


def test_invalid_assignment_target_reported_at_equals_line():
    """
    Test that the error points at the '=' token.
    """
    errors = parse_errors("(a)\n=\n1;")
    assert len(errors) == 1
    assert errors[0].line == 2


def test_unclosed_group():
    """
    Test that a '(' without its ')' is an expression error.
    """
    errors = parse_errors("print (1 + 2;")
    assert len(errors) == 1
    assert errors[0].kind == ParseErrorKind.EXPRESSION
    assert errors[0].message == "Expect ')' after expression."


def test_missing_expression():
    """
    Test a statement whose expression is missing.
    """
    errors = parse_errors("print ;")
    assert len(errors) == 1
    assert errors[0].kind == ParseErrorKind.EXPRESSION
    assert errors[0].message == "Expect expression."


def test_missing_semicolon_keeps_expression():
    """
    Test that an expression statement without ';' keeps its expression.
    """
    errors = parse_errors("1 + 2")
    assert len(errors) == 1
    assert errors[0].kind == ParseErrorKind.STATEMENT
    assert errors[0].message == "Expect ';' after expression."
    assert format_expr(errors[0].expression) == "(+ 1 2)"


def test_other_statement_errors_have_no_expression():
    """
    Test that only expression statements recover their expression.
    """
    errors = parse_errors("print 1")
    assert len(errors) == 1
    assert errors[0].kind == ParseErrorKind.STATEMENT
    assert errors[0].message == "Expect ';' after value."
    assert errors[0].expression is None


def test_var_requires_name():
    """
    Test a var declaration without an identifier.
    """
    errors = parse_errors("var = 1;")
    assert len(errors) == 1
    assert errors[0].message == "Expect variable name."


def test_block_collects_every_error():
    """
    Test that a block with two malformed statements reports both.
    """
    errors = parse_errors("{ var = 1; print ; }")
    assert len(errors) == 2
    assert errors[0].message == "Expect variable name."
    assert errors[1].message == "Expect expression."


def test_errors_collected_across_top_level_statements():
    """
    Test that parsing resumes after an error and records later ones.
    """
    errors = parse_errors("var = 1;\nprint 2;\nprint ;")
    assert [error.line for error in errors] == [1, 3]


def test_block_missing_closing_brace():
    """
    Test a block that runs into the end of input.
    """
    errors = parse_errors("{ print 1;")
    assert len(errors) == 1
    assert errors[0].message == "Expect '}' after block."


def test_error_before_closing_brace_does_not_swallow_it():
    """
    Test that recovery stops at '}' so the block still closes.
    """
    errors = parse_errors("{ print 1 }\nprint 2;")
    assert len(errors) == 1
    assert errors[0].message == "Expect ';' after value."


def test_if_collects_condition_and_branch_errors():
    """
    Test that an 'if' keeps parsing its branch after a bad condition.
    """
    errors = parse_errors("if (1 +) print ;")
    assert len(errors) == 2
    assert all(error.kind == ParseErrorKind.EXPRESSION for error in errors)


def test_while_missing_paren():
    """
    Test a while loop whose condition is not parenthesised.
    """
    errors = parse_errors("while x) print 1;")
    assert len(errors) == 1
    assert errors[0].message == "Expect '(' after 'while'."


def test_for_header_error_still_parses_body():
    """
    Test that a broken for header does not hide errors in the body.
    """
    errors = parse_errors("for (var = 0; i < 3; i = i + 1) print ;")
    assert [error.message for error in errors] == [
        "Expect variable name.",
        "Expect expression.",
    ]


def test_stray_closing_brace():
    """
    Test that a '}' at the top level is reported once and skipped.
    """
    errors = parse_errors("} print 1;")
    assert len(errors) == 1
    assert errors[0].message == "Expect expression."


def test_unsupported_keywords_fail_to_parse():
    """
    Test that class syntax is not part of the grammar.
    """
    errors = parse_errors("class Foo {}")
    assert errors[0].message == "Expect expression."


def test_failure_message_lists_every_error():
    """
    Test the aggregated exception text, one line per error.
    """
    try:
        parse_source("1 = 2;\nprint ;")
    except ParseFailure as failure:
        lines = str(failure).splitlines()
    assert lines == [
        "[Error while parsing Expression at line 1]: Invalid assignment target.",
        "[Error while parsing Expression at line 2]: Expect expression.",
    ]


def test_valid_input_has_no_errors():
    """
    Test that a valid program parses without raising.
    """
    assert len(parse_source("var a = 1;\n{ a = a + 1; }\nprint a;")) == 3


def test_errors_carry_script_name():
    """
    Test that every parse error records the script it was found in.
    """
    errors = parse_errors("{ var = 1; }\nprint ;")
    assert [error.file for error in errors] == ["<test>", "<test>"]

    with pytest.raises(ParseFailure) as excinfo:
        Parser(tokenize("print"), "hello.lox").parse()
    (error,) = excinfo.value.errors
    assert error.file == "hello.lox"
    assert str(error) == "[Error while parsing Expression at line 1]: Expect expression."
