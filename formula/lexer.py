# formula/lexer.py
# This file is part of Specifications - Reusable Boolean Conditions
#
# Lexical analyzer for formula tokenization using SLY

"""Lexical analyzer for formula strings.

Supported Tokens:
- Operators: !, &, |, (, )
- Keywords: true, false
- Identifiers: leaf names
- Whitespace: ignored during tokenization
"""

import logging

from sly import Lexer

logger = logging.getLogger(__name__)


class FormulaLexer(Lexer):
    """SLY-based lexer for formula tokenization.

    Distinguishes reserved keywords from leaf names.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ID: Identifier pattern with keyword mapping
    """

    tokens = {
        "TRUE",
        "FALSE",
        "ID",
        "NOT",
        "AND",
        "OR",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    NOT = r"!"
    AND = r"&"
    OR = r"\|"
    LPAREN = r"\("
    RPAREN = r"\)"

    ID = r"[a-zA-Z_][a-zA-Z0-9_]*"

    ID["true"] = "TRUE"
    ID["false"] = "FALSE"

    def error(self, t):
        """Reject a character that matches no token pattern.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
