# formula/exceptions.py
# This file is part of Specifications - Reusable Boolean Conditions
#
# Exceptions for compiling formula text into specifications

"""Exceptions raised while compiling formula text.

Problems with the text itself (illegal characters, syntax errors, empty
input) are reported as ParseError. Misuse of the resulting specifications is
reported by the ``specifications`` package.
"""


class ParseError(RuntimeError):
    """Exception raised when a formula cannot be compiled.

    Indicates that the input does not conform to the formula grammar.
    """

    pass
