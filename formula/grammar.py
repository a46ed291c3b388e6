# formula/grammar.py
# This file is part of Specifications - Reusable Boolean Conditions
#
# LALR(1) grammar compiling formulas into specifications using SLY

"""Formula grammar implemented with the SLY parser generator.

Each grammar rule builds its result with the public constructors of the
``specifications`` package, so the parser output is an ordinary flat
Specification. Binary operators produce two-operand combinations; chains such
as ``a & b & c`` are kept as nested pairs, exactly as written.

Operator Precedence (lowest to highest):
- OR ('|'): left-associative
- AND ('&'): left-associative
- NOT ('!'): right-associative

Leaves:
- identifiers become string leaves
- ``true`` and ``false`` become boolean leaves
"""

import logging
from typing import Union

from sly import Parser
from .lexer import FormulaLexer
from .exceptions import ParseError
from specifications import Specification, leaf, not_, and_, or_

logger = logging.getLogger(__name__)

FormulaLeaf = Union[str, bool]


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser producing specifications.

    Attributes:
        tokens: Token types from FormulaLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = FormulaLexer.tokens

    precedence = (
        ("left", "OR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    @_("expr")
    def start(self, p) -> Specification[FormulaLeaf]:
        return p.expr

    @_("NOT expr")
    def expr(self, p) -> Specification[FormulaLeaf]:
        return not_(p.expr)

    @_("expr AND expr")
    def expr(self, p) -> Specification[FormulaLeaf]:
        return and_(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Specification[FormulaLeaf]:
        return or_(p.expr0, p.expr1)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Specification[FormulaLeaf]:
        return p.expr

    @_("ID")
    def expr(self, p) -> Specification[FormulaLeaf]:
        return leaf(p.ID)

    @_("TRUE")
    def expr(self, p) -> Specification[FormulaLeaf]:
        return leaf(True)

    @_("FALSE")
    def expr(self, p) -> Specification[FormulaLeaf]:
        return leaf(False)

    def parse(self, text: str) -> Specification[FormulaLeaf]:
        """Compile formula text into a specification.

        Args:
            text: Formula string to compile

        Returns:
            Specification with string and boolean leaves

        Raises:
            ParseError: If the formula is empty or contains syntax errors
        """
        logger.debug(f"Parsing formula: {text}")

        try:
            result = super().parse(FormulaLexer().tokenize(text))

            if result is None and text.strip() == "":
                raise ParseError("Input formula is empty.")

            if result is None:
                raise ParseError("Failed to parse formula (syntax error).")

            logger.debug(f"Successfully parsed formula into {result!r}")
            return result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Report a token that matches no grammar rule.

        Args:
            token: Problematic token or None at end of input

        Raises:
            ParseError: Always
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at line {token.lineno}, position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of formula"

        raise ParseError(error_msg)
