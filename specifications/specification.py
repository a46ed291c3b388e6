# specifications/specification.py
# This file is part of Specifications - Reusable Boolean Conditions
#
# Flat postfix specification type and its constructors

"""The Specification type and the functions that build it.

A specification describes a boolean condition over leaves: basic conditions
supplied by the client and combined with ``not_``, ``and_`` and ``or_``. It
only describes the structure of the condition; to do anything with it you
also need an Evaluator (see ``specifications.evaluator``).

Instead of a tree of nodes, a specification is stored as two flat tuples:

    leafs  the leaf values, in the order they were combined
    ops    postfix operation records referring to leaves by index

For example ``and_(leaf("p"), not_(leaf("q")))`` is stored as::

    leafs = ("p", "q")
    ops   = (LeafRef(0), LeafRef(1), Negate(), Conjunction(2))

Combining specifications concatenates their tuples, shifting every leaf
reference of an operand by the number of leaves placed before it. Nested
operands are spliced in one pass without being decoded.

The zero value, ``Specification()``, is not a usable specification. Every
function in this package raises when given one.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Generic, Optional, Sequence, Tuple, Type, TypeVar, Union

from .exceptions import InvalidComposition
from .opcodes import Conjunction, Disjunction, LeafRef, Negate, OpCode

logger = logging.getLogger(__name__)

L = TypeVar("L")


@dataclass(frozen=True, slots=True, repr=False)
class Specification(Generic[L]):
    """Immutable boolean condition in flat postfix form.

    Build instances with ``leaf``, ``not_``, ``and_`` and ``or_``. Calling
    the class without arguments gives the zero specification.

    Attributes:
        _ops: Postfix operation records, or None for the zero specification
        _leafs: Leaf values referenced by ``LeafRef`` records, or None
    """

    _ops: Optional[Tuple[OpCode, ...]] = None
    _leafs: Optional[Tuple[L, ...]] = None

    def is_zero(self) -> bool:
        """Check whether this is the zero specification.

        The zero specification is unusable: composing or evaluating it raises.

        Returns:
            True if neither ops nor leafs were ever set
        """
        return self._ops is None and self._leafs is None

    def __repr__(self) -> str:
        if self.is_zero():
            return "Specification(zero)"
        return f"Specification(leafs={len(self._leafs)}, ops={len(self._ops)})"


def leaf(value: L) -> Specification[L]:
    """Create a specification made of a single leaf.

    Args:
        value: The basic condition to wrap

    Returns:
        Specification referring to ``value`` alone
    """
    return Specification((LeafRef(0),), (value,))


def not_(spec: Specification[L]) -> Specification[L]:
    """Create a specification that negates ``spec``.

    It is true when ``spec`` is false and false when ``spec`` is true.

    Args:
        spec: Specification to negate

    Returns:
        New specification sharing the leaves of ``spec``

    Raises:
        InvalidComposition: If ``spec`` is the zero specification
    """
    if spec.is_zero():
        raise InvalidComposition("Not: cannot use zero spec")

    return Specification(spec._ops + (Negate(),), spec._leafs)


def and_(*specs: Specification[L]) -> Specification[L]:
    """Create a specification that is true when all of ``specs`` are true.

    Raises:
        InvalidComposition: If ``specs`` is empty or contains the zero specification
    """
    _verify_parts("And", specs)
    return _combine(Conjunction, specs)


def or_(*specs: Specification[L]) -> Specification[L]:
    """Create a specification that is true when any of ``specs`` is true.

    Raises:
        InvalidComposition: If ``specs`` is empty or contains the zero specification
    """
    _verify_parts("Or", specs)
    return _combine(Disjunction, specs)


def _verify_parts(name: str, specs: Sequence[Specification[L]]) -> None:
    if not specs:
        raise InvalidComposition(f"{name}: cannot combine 0 specifications")
    for spec in specs:
        if spec.is_zero():
            raise InvalidComposition(f"{name}: cannot combine the zero specification")


def _combine(
    closing: Type[Union[Conjunction, Disjunction]],
    specs: Sequence[Specification[L]],
) -> Specification[L]:
    """Concatenate ``specs`` and close them with one n-ary operation.

    The output buffers are sized up front from the operands' lengths, then
    filled operand by operand. Each operand's leaf references are shifted by
    the number of leaves already written, so they keep pointing at the same
    values in the concatenated leaf tuple.

    Args:
        closing: Record type combining the operands (Conjunction or Disjunction)
        specs: Non-empty sequence of non-zero operands, in order

    Returns:
        New specification owning freshly allocated tuples
    """
    op_count = sum(len(spec._ops) for spec in specs) + 1
    leaf_count = sum(len(spec._leafs) for spec in specs)
    ops: list = [None] * op_count
    leafs: list = [None] * leaf_count

    op_pos = leaf_pos = 0
    for spec in specs:
        offset = leaf_pos
        leaf_pos += len(spec._leafs)
        leafs[offset:leaf_pos] = spec._leafs

        op_pos = _rebase(ops, op_pos, spec._ops, offset)

    ops[op_pos] = closing(len(specs))

    logger.debug(
        f"Combined {len(specs)} specifications under {closing.__name__}: "
        f"{leaf_count} leafs, {op_count} ops"
    )
    return Specification(tuple(ops), tuple(leafs))


def _rebase(dst: list, pos: int, src: Sequence[OpCode], offset: int) -> int:
    """Copy ``src`` into ``dst`` from ``pos``, shifting leaf references.

    Only ``LeafRef`` records change; the others carry no leaf positions and
    are copied as they are.

    Returns:
        Position in ``dst`` right after the copied records
    """
    for op in src:
        dst[pos] = op.rebased(offset) if isinstance(op, LeafRef) else op
        pos += 1
    return pos
