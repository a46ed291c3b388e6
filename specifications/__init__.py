# specifications/__init__.py
# This file is part of Specifications - Reusable Boolean Conditions
#
# Public API for building and evaluating specifications

"""Type-generic implementation of the specification pattern.

Write a boolean condition once and reuse it in different contexts. A single
specification can be used to:

    - generate queries for different databases,
    - check whether a value meets the condition,
    - generate a human-readable description of the condition,
    - explain why a value does not meet the condition.

The package does not provide any of that out of the box. It gives the
plumbing common to all of these uses: building conditions from leaves with
``not_``, ``and_`` and ``or_``, and evaluating them with an ``Evaluator`` that
supplies the meaning.

Primary Components:
    Specification: Immutable condition in flat postfix form
    leaf, not_, and_, or_: Constructors
    Evaluator: Interface giving a specification a meaning
    evaluate: Single-pass stack machine running an Evaluator

Example:
    >>> from specifications import leaf, not_, and_, or_, evaluate
    >>> spec = and_(leaf("ready"), not_(or_(leaf("failed"), leaf("paused"))))
    >>> evaluate(spec, ToBool())  # ToBool: an Evaluator you provide
"""

from .exceptions import EmptyExpression, InvalidComposition, SpecificationError
from .specification import Specification, leaf, not_, and_, or_
from .evaluator import Evaluator, evaluate

__all__ = [
    "Specification",
    "leaf",
    "not_",
    "and_",
    "or_",
    "Evaluator",
    "evaluate",
    "SpecificationError",
    "InvalidComposition",
    "EmptyExpression",
]

__version__ = "1.0.0"
__description__ = "Flat postfix boolean specifications with pluggable evaluators"
