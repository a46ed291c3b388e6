# tests/formula_tests/test_parse_errors.py
# This file is part of Specifications - Reusable Boolean Conditions
#
# Test suite for formula syntax validation and error handling

"""Malformed formulas must raise ParseError with a meaningful message."""

import pytest
from formula import parse, ParseError
from utils.logger import get_logger


class TestFormulaParseErrors:
    """Test cases for rejected formulas."""

    def setup_method(self):
        self.logger = get_logger()

    INVALID_SYNTAX_CASES = [
        # Parenthesis errors
        ("(p & q))", "Unbalanced right parenthesis"),
        ("a | (b & c", "Unclosed parenthesis in nested expression"),
        ("a | b) & c", "Unopened parenthesis"),
        ("()", "Empty expression within parentheses"),
        # Operator errors
        ("p | | q", "Double operator"),
        ("p &", "Trailing operator"),
        ("p q", "Missing operator between leaves"),
        ("p ! q", "Infix NOT operator invalid"),
        ("p & ( | q)", "Operator adjacent to parenthesis"),
        ("!&p", "Invalid operator sequence"),
        ("!(p q)", "Missing operator inside negated group"),
        ("p && q", "Doubled operator"),
        # Words are leaves, not operators
        ("p AND q", "Keyword AND instead of &"),
        ("NOT p", "Keyword NOT instead of !"),
        # Illegal characters
        ("p; q", "Illegal character as separator"),
        ("p @ q", "Illegal character in expression"),
        # Empty/whitespace
        ("", "Empty input string"),
        ("     ", "Whitespace only input"),
        ("\t\n", "Whitespace only with tabs/newlines"),
    ]

    @pytest.mark.parametrize("invalid_input, description", INVALID_SYNTAX_CASES)
    def test_parse_error_handling(self, invalid_input, description):
        self.logger.debug(f"Testing parse error for: '{invalid_input}' ({description})")

        with pytest.raises(ParseError) as exc_info:
            parse(invalid_input)

        assert len(str(exc_info.value)) > 0, "ParseError should have non-empty message"

    @pytest.mark.parametrize(
        "invalid_input, expected_content",
        [
            ("p &", "unexpected end"),
            ("(p", "unexpected end"),
            ("p | | q", "syntax error"),
            ("p @ q", "illegal character"),
        ],
    )
    def test_specific_error_messages(self, invalid_input, expected_content):
        with pytest.raises(ParseError) as exc_info:
            parse(invalid_input)

        assert expected_content in str(exc_info.value).lower()

    def test_illegal_character_cause_is_chained(self):
        with pytest.raises(ParseError) as exc_info:
            parse("p # q")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_parse_error_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            parse("&")
