# formula/__init__.py
# This file is part of Specifications - Reusable Boolean Conditions
#
# Textual front-end compiling boolean formulas into specifications

"""Compile boolean formula text into specifications.

Formulas are written with ``!`` (not), ``&`` (and), ``|`` (or), parentheses,
the constants ``true`` and ``false``, and identifiers naming leaves:

    ready & !(failed | paused)

The result is an ordinary ``specifications.Specification`` whose leaves are
the identifier strings and the boolean constants. It can be evaluated with
any Evaluator accepting those leaf types.

Core Functions:
    parse: Converts formula strings into specifications

Example:
    >>> from formula import parse
    >>> spec = parse("ready & !(failed | paused)")
"""

import logging

from .exceptions import ParseError
from .grammar import FormulaLeaf, _FormulaParser
from specifications import Specification

logger = logging.getLogger(__name__)


def parse(source: str) -> Specification[FormulaLeaf]:
    """Compile a formula string into a specification.

    Uses a fresh parser instance for each invocation, so parsing keeps no
    state between calls.

    Args:
        source: Formula string to compile

    Returns:
        Specification with identifier (str) and constant (bool) leaves

    Raises:
        ParseError: Formula syntax is malformed

    Example:
        >>> spec = parse("p & q")
        >>> # Same as and_(leaf("p"), leaf("q"))
    """
    logger.debug(f"Compiling formula: {source}")

    parser = _FormulaParser()

    try:
        result = parser.parse(source)
        logger.debug(f"Formula compiled into {result!r}")
        return result

    except ParseError:
        logger.debug("ParseError encountered during formula compilation")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = ["parse", "ParseError", "FormulaLeaf"]

__version__ = "1.0.0"
__description__ = "Formula text front-end for specifications"
