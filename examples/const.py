#!/usr/bin/env python3
# examples/const.py
# This file is part of Specifications - Reusable Boolean Conditions
#
# Evaluates constant specifications both to text and to a bool

"""Evaluate the same specifications with two different evaluators.

Prints one line per specification: its description, then its truth value.

    false => False
    true => True
    !false => True
    ...
"""

from typing import List

from specifications import Specification, evaluate, leaf, not_, and_, or_


class ToBool:
    def evaluate_leaf(self, v: bool) -> bool:
        return v

    def evaluate_not(self, v: bool) -> bool:
        return not v

    def evaluate_and(self, vs: List[bool]) -> bool:
        return all(vs)

    def evaluate_or(self, vs: List[bool]) -> bool:
        return any(vs)


class ToString:
    def evaluate_leaf(self, v: bool) -> str:
        return str(v).lower()

    def evaluate_not(self, v: str) -> str:
        return "!" + v

    def evaluate_and(self, vs: List[str]) -> str:
        return self._combine("&&", vs)

    def evaluate_or(self, vs: List[str]) -> str:
        return self._combine("||", vs)

    @staticmethod
    def _combine(op: str, vs: List[str]) -> str:
        if len(vs) == 1:
            return vs[0]
        return "(" + f" {op} ".join(vs) + ")"


EXAMPLES: List[Specification[bool]] = [
    leaf(False),
    leaf(True),
    not_(leaf(False)),
    not_(leaf(True)),
    and_(leaf(True)),
    or_(leaf(False), leaf(True)),
    and_(leaf(False), leaf(True)),
]


def main():
    for spec in EXAMPLES:
        s = evaluate(spec, ToString())
        b = evaluate(spec, ToBool())
        print(f"{s} => {b}")


if __name__ == "__main__":
    main()
