# specifications/opcodes.py
# This file is part of Specifications - Reusable Boolean Conditions
#
# Operation records of the postfix specification encoding

"""Operation records for the flat postfix encoding of a specification.

A specification stores its structure as a tuple of these records, read left
to right by a stack machine. Every record is an immutable, hashable value.

Record Types:
    LeafRef: pushes the interpretation of one leaf
    Negate: replaces the top value with its negation
    Conjunction: replaces the top ``count`` values with their conjunction
    Disjunction: replaces the top ``count`` values with their disjunction

A record stream is well formed when, replayed from an empty stack, no record
needs more values than the stack holds and exactly one value remains at the
end. ``stack_effect`` gives the (consumed, produced) pair of one record, so
code that builds or checks record streams can replay them without
evaluating anything.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class LeafRef:
    """Reference to a leaf by its position in the leaf tuple.

    Attributes:
        index: 0-based position of the leaf
    """

    index: int

    def rebased(self, offset: int) -> LeafRef:
        """Return a reference shifted by ``offset`` leaf positions."""
        return LeafRef(self.index + offset)


@dataclass(frozen=True, slots=True)
class Negate:
    """Negation of the single most recent value."""


@dataclass(frozen=True, slots=True)
class Conjunction:
    """Conjunction of the ``count`` most recent values.

    Attributes:
        count: Number of operands, at least 1
    """

    count: int


@dataclass(frozen=True, slots=True)
class Disjunction:
    """Disjunction of the ``count`` most recent values.

    Attributes:
        count: Number of operands, at least 1
    """

    count: int


OpCode = Union[LeafRef, Negate, Conjunction, Disjunction]


def stack_effect(op: OpCode) -> tuple[int, int]:
    """Return how many values ``op`` pops and pushes.

    Args:
        op: Operation record

    Returns:
        Pair of (values consumed, values produced)
    """
    if isinstance(op, LeafRef):
        return 0, 1
    if isinstance(op, Negate):
        return 1, 1
    return op.count, 1
