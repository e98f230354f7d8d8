"""JSON equivalence assertions for test suites."""

from __future__ import annotations

from json_equivalence.api import (
    ShouldContinuation,
    assert_equivalent,
    assert_values_equivalent,
    find_issues,
    is_equivalent,
    should,
)
from json_equivalence.asserter import EquivalenceAsserter
from json_equivalence.cache import DocumentCache
from json_equivalence.comparator import EquivalenceComparator
from json_equivalence.errors import EquivalenceError, MalformedJsonError
from json_equivalence.issue import Issue

__version__: str = "0.1.0"
__all__: list[str] = [
    "DocumentCache",
    "EquivalenceAsserter",
    "EquivalenceComparator",
    "EquivalenceError",
    "Issue",
    "MalformedJsonError",
    "ShouldContinuation",
    "assert_equivalent",
    "assert_values_equivalent",
    "find_issues",
    "is_equivalent",
    "should",
]
