# tests/conftest.py
# This file is part of Specifications - Reusable Boolean Conditions
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures.

Puts the project root on the import path and provides reference evaluators
used across the suites:

- to_bool: leaves are bools, output is their boolean combination
- leaf_collector: output is the list of leaves, in evaluation order
- to_string: output is a fully parenthesized description
- call_recorder: records every callback with its arguments
"""

import logging
import sys
from pathlib import Path
from typing import List

import pytest

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from utils.logger import reset_logging  # noqa: E402


class ToBool:
    def evaluate_leaf(self, v):
        return v

    def evaluate_not(self, v):
        return not v

    def evaluate_and(self, vs):
        out = True
        for v in vs:
            out = out and v
        return out

    def evaluate_or(self, vs):
        out = False
        for v in vs:
            out = out or v
        return out


class LeafCollector:
    """Reproduces the leaves of a specification in operand order."""

    def evaluate_leaf(self, v) -> List:
        return [v]

    def evaluate_not(self, v: List) -> List:
        return v

    def evaluate_and(self, vs: List[List]) -> List:
        return [x for v in vs for x in v]

    def evaluate_or(self, vs: List[List]) -> List:
        return [x for v in vs for x in v]


class ToString:
    def evaluate_leaf(self, v) -> str:
        return str(v)

    def evaluate_not(self, v: str) -> str:
        return f"!{v}"

    def evaluate_and(self, vs: List[str]) -> str:
        return "and(" + ", ".join(vs) + ")"

    def evaluate_or(self, vs: List[str]) -> str:
        return "or(" + ", ".join(vs) + ")"


class CallRecorder:
    """Evaluator with a private accumulator of the calls it received."""

    def __init__(self):
        self.calls = []

    def evaluate_leaf(self, v):
        self.calls.append(("leaf", v))
        return v

    def evaluate_not(self, v):
        self.calls.append(("not", v))
        return f"!{v}"

    def evaluate_and(self, vs):
        self.calls.append(("and", list(vs)))
        return "&".join(str(v) for v in vs)

    def evaluate_or(self, vs):
        self.calls.append(("or", list(vs)))
        return "|".join(str(v) for v in vs)


@pytest.fixture
def to_bool():
    return ToBool()


@pytest.fixture
def leaf_collector():
    return LeafCollector()


@pytest.fixture
def to_string():
    return ToString()


@pytest.fixture
def call_recorder():
    return CallRecorder()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo console logging set up by a test."""
    root = logging.getLogger()
    level = root.level
    yield
    reset_logging()
    root.setLevel(level)
