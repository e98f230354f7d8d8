"""Public API functions for json-equivalence.

This module provides the user-facing functions: assert_equivalent,
assert_values_equivalent, find_issues, is_equivalent, and the fluent
``should(actual).be_equivalent_to(expected)`` form. Each call creates a fresh
EquivalenceAsserter to guarantee zero global state between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from json_equivalence.asserter import EquivalenceAsserter

if TYPE_CHECKING:
    from json_equivalence.issue import Issue

__all__ = [
    "ShouldContinuation",
    "assert_equivalent",
    "assert_values_equivalent",
    "find_issues",
    "is_equivalent",
    "should",
]

Document = str | bytes | bytearray


def assert_equivalent(actual: Document, expected: Document) -> None:
    """Assert that the ``actual`` JSON text is equivalent to ``expected``.

    ``actual`` may carry object members that ``expected`` does not mention;
    everything ``expected`` contains must be matched.

    Args:
        actual:   The JSON text produced by the code under test.
        expected: The expected JSON text.

    Raises:
        json.JSONDecodeError: If either text is not a valid JSON document.
        EquivalenceError: If the documents are not equivalent. The message
            has one line per issue, e.g.
            ``Expected value (String) but got true (True) at $.key``.
    """
    EquivalenceAsserter().assert_equivalent(actual, expected)


def assert_values_equivalent(actual: Any, expected: Any) -> None:
    """Assert equivalence of two already-decoded JSON values.

    Args:
        actual:   Decoded JSON value (dict, list, str, int, float, bool, None).
        expected: Decoded JSON value.

    Raises:
        TypeError: If either value contains a non-JSON type.
        EquivalenceError: If the values are not equivalent.
    """
    EquivalenceAsserter().assert_values_equivalent(actual, expected)


def find_issues(actual: Document, expected: Document) -> list[Issue]:
    """Return every issue found comparing ``actual`` against ``expected``.

    Returns:
        The issues in discovery order; an empty list means equivalent.

    Raises:
        json.JSONDecodeError: If either text is not a valid JSON document.
    """
    return EquivalenceAsserter().find_issues(actual, expected)


def is_equivalent(actual: Document, expected: Document) -> bool:
    """Return True if ``actual`` is equivalent to ``expected``."""
    return not find_issues(actual, expected)


class ShouldContinuation:
    """Fluent continuation returned by ``should()``."""

    def __init__(self, actual: Document) -> None:
        self._actual = actual

    def be_equivalent_to(self, expected: Document) -> None:
        """Assert that the wrapped JSON text is equivalent to ``expected``.

        Raises:
            json.JSONDecodeError: If either text is not a valid JSON document.
            EquivalenceError: If the documents are not equivalent.
        """
        assert_equivalent(self._actual, expected)


def should(actual: Document) -> ShouldContinuation:
    """Begin a fluent assertion on the ``actual`` JSON text.

    Example::

        should('{"id": 1, "name": "x"}').be_equivalent_to('{"id": 1}')
    """
    return ShouldContinuation(actual)
