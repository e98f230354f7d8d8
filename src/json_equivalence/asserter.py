"""EquivalenceAsserter: document-level orchestration around the comparator.

Parses both documents, short-circuits the ``null`` vs ``null`` case, runs
``EquivalenceComparator`` and raises ``EquivalenceError`` carrying every
discovered issue when the documents are not equivalent.

Parse errors are never caught here: ``json.JSONDecodeError`` propagates to
the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from json_equivalence.comparator import EquivalenceComparator
from json_equivalence.errors import EquivalenceError
from json_equivalence.tree.builder import TreeBuilder
from json_equivalence.tree.nodes import ValueKind
from json_equivalence.tree.parser import parse_document

if TYPE_CHECKING:
    from json_equivalence.cache import DocumentCache
    from json_equivalence.issue import Issue
    from json_equivalence.tree.nodes import JsonNode

__all__ = ["EquivalenceAsserter"]

logger = logging.getLogger(__name__)


def _is_null_document(root: JsonNode) -> bool:
    return root.kind is ValueKind.NULL


class EquivalenceAsserter:
    """Assert that an actual JSON document is equivalent to an expected one.

    Args:
        cache: Optional ``DocumentCache`` used to parse documents. Without a
            cache every call parses both texts afresh.
    """

    def __init__(self, cache: DocumentCache | None = None) -> None:
        self._cache = cache
        self._comparator = EquivalenceComparator()
        self._builder = TreeBuilder()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def find_issues(
        self, actual: str | bytes | bytearray, expected: str | bytes | bytearray
    ) -> list[Issue]:
        """Parse both documents and return every issue, in discovery order.

        Raises:
            json.JSONDecodeError: If either text is not a valid JSON document.
        """
        actual_root = self._parse(actual)
        expected_root = self._parse(expected)
        return self._issues_between(actual_root, expected_root)

    def assert_equivalent(
        self, actual: str | bytes | bytearray, expected: str | bytes | bytearray
    ) -> None:
        """Raise ``EquivalenceError`` unless ``actual`` satisfies ``expected``.

        Args:
            actual:   The JSON text produced by the code under test.
            expected: The expected JSON text.

        Raises:
            json.JSONDecodeError: If either text is not a valid JSON document.
            EquivalenceError: If one or more mismatches were found. Its
                message lists every issue on its own line.
        """
        self._raise_for(self.find_issues(actual, expected))

    def assert_values_equivalent(self, actual: Any, expected: Any) -> None:
        """Like ``assert_equivalent`` for already-decoded Python values.

        Raises:
            TypeError: If either value is not made of JSON types.
            EquivalenceError: If one or more mismatches were found.
        """
        actual_root = self._builder.build(actual)
        expected_root = self._builder.build(expected)
        self._raise_for(self._issues_between(actual_root, expected_root))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _parse(self, text: str | bytes | bytearray) -> JsonNode:
        if self._cache is not None:
            return self._cache.parse(text)
        return parse_document(text)

    def _issues_between(self, actual: JsonNode, expected: JsonNode) -> list[Issue]:
        if _is_null_document(actual) and _is_null_document(expected):
            return []
        return list(self._comparator.compare(actual, expected))

    @staticmethod
    def _raise_for(issues: list[Issue]) -> None:
        if not issues:
            return
        logger.debug("Documents are not equivalent: %d issue(s)", len(issues))
        raise EquivalenceError(issues)
