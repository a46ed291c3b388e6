# specifications/exceptions.py
# This file is part of Specifications - Reusable Boolean Conditions
#
# Contract-violation exceptions for building and evaluating specifications

"""Exceptions raised when a specification is misused.

All of them signal programming errors in the caller (using the zero
specification, combining nothing) rather than environmental failures, so
none of them is worth retrying.
"""


class SpecificationError(RuntimeError):
    """Base class for specification contract violations."""

    pass


class InvalidComposition(SpecificationError):
    """Raised when Not, And or Or is given unusable operands.

    That is the zero specification as an operand, or no operands at all.
    """

    pass


class EmptyExpression(SpecificationError):
    """Raised when the zero specification is passed to evaluate."""

    pass
