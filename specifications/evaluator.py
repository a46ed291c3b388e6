# specifications/evaluator.py
# This file is part of Specifications - Reusable Boolean Conditions
#
# Evaluator interface and the stack machine that drives it

"""Turning a Specification into some output value.

An Evaluator says what a leaf, a negation, a conjunction and a disjunction
mean in one target domain: a bool, a human-readable description, a query
fragment, an explanation. ``evaluate`` runs a specification against one
Evaluator in a single left-to-right pass over its postfix records, with an
explicit operand stack and no recursion, so the cost is linear in the size of
the specification however deeply it is nested.

Example:
    >>> from specifications import leaf, or_
    >>> class ToBool:
    ...     def evaluate_leaf(self, v): return v
    ...     def evaluate_not(self, v): return not v
    ...     def evaluate_and(self, vs): return all(vs)
    ...     def evaluate_or(self, vs): return any(vs)
    >>> evaluate(or_(leaf(False), leaf(True)), ToBool())
    True
"""

from __future__ import annotations
import logging
from typing import List, Protocol, TypeVar

from .exceptions import EmptyExpression
from .opcodes import Conjunction, Disjunction, LeafRef, Negate
from .specification import Specification

logger = logging.getLogger(__name__)

L = TypeVar("L", contravariant=True)
O = TypeVar("O")


class Evaluator(Protocol[L, O]):
    """Interface converting a Specification[L] to an output of type O.

    Each method receives values that have already been evaluated. Operands of
    ``evaluate_and`` and ``evaluate_or`` come in the order the specifications
    were combined, and there is always at least one of them.
    """

    def evaluate_leaf(self, leaf: L) -> O:
        """Turn a leaf into the output type."""
        ...

    def evaluate_not(self, out: O) -> O:
        """Negate the output of a specification wrapped with not_."""
        ...

    def evaluate_and(self, outs: List[O]) -> O:
        """Combine the outputs of specifications combined with and_."""
        ...

    def evaluate_or(self, outs: List[O]) -> O:
        """Combine the outputs of specifications combined with or_."""
        ...


def evaluate(spec: Specification[L], evaluator: Evaluator[L, O]) -> O:
    """Use ``evaluator`` to convert ``spec`` to an output value.

    Scans the operation records left to right. Leaves push their evaluated
    output; negations replace the top of the stack; conjunctions and
    disjunctions pop their operands, preserving order, and push the combined
    result. Exactly one value is left at the end.

    Exceptions raised by ``evaluator`` propagate unchanged and the partial
    stack is dropped. ``spec`` itself is never modified, so the same
    specification can be evaluated again, with any evaluator.

    Args:
        spec: Specification to evaluate
        evaluator: Meaning of leaves and operators

    Returns:
        Output produced for the whole specification

    Raises:
        EmptyExpression: If ``spec`` is the zero specification
    """
    if spec.is_zero():
        raise EmptyExpression("Evaluate: cannot evaluate the zero specification")

    logger.debug(
        f"Evaluating specification with {type(evaluator).__name__}: "
        f"{len(spec._ops)} ops, {len(spec._leafs)} leafs"
    )

    leafs = spec._leafs
    stack: List[O] = []

    for op in spec._ops:
        if isinstance(op, LeafRef):
            stack.append(evaluator.evaluate_leaf(leafs[op.index]))

        elif isinstance(op, Negate):
            stack.append(evaluator.evaluate_not(stack.pop()))

        elif isinstance(op, Conjunction):
            stack.append(evaluator.evaluate_and(_pop_top(stack, op.count)))

        elif isinstance(op, Disjunction):
            stack.append(evaluator.evaluate_or(_pop_top(stack, op.count)))

    return stack[0]


def _pop_top(stack: List[O], n: int) -> List[O]:
    """Remove and return the top ``n`` values, oldest first."""
    top = stack[len(stack) - n:]
    del stack[len(stack) - n:]
    return top
