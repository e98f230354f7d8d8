"""pytest plugin for json-equivalence.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_equivalence.asserter import EquivalenceAsserter
from json_equivalence.cache import DocumentCache


@pytest.fixture(scope="session")
def json_document_cache() -> DocumentCache:
    """Session-wide cache of parsed JSON documents used by ``assert_json_equivalent``."""
    return DocumentCache()


@pytest.fixture(scope="session")
def assert_json_equivalent(json_document_cache: DocumentCache) -> Any:
    """Fixture that returns a callable JSON equivalence asserter.

    The fixture is session-scoped: the returned callable keeps no state
    besides the parsed-document cache, and parsed documents are immutable.

    Usage in tests::

        def test_response(assert_json_equivalent):
            assert_json_equivalent('{"id": 1, "extra": true}', '{"id": 1}')

        def test_mismatch(assert_json_equivalent):
            with pytest.raises(AssertionError, match=r"at \\$\\.id"):
                assert_json_equivalent('{"id": 2}', '{"id": 1}')

    Returns:
        A callable ``_assert(actual, expected) -> None`` that raises
        ``EquivalenceError`` (an ``AssertionError``) listing every issue.
    """
    asserter = EquivalenceAsserter(cache=json_document_cache)

    def _assert(actual: str | bytes, expected: str | bytes) -> None:
        """Assert that two JSON documents are equivalent.

        Args:
            actual:   The JSON text produced by the code under test.
            expected: The expected JSON text.

        Raises:
            EquivalenceError: When the documents are not equivalent.
            json.JSONDecodeError: When either text is not valid JSON.
        """
        asserter.assert_equivalent(actual, expected)

    return _assert
