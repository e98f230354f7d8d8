"""Tests for EquivalenceAsserter — document-level orchestration."""

from __future__ import annotations

import json
import logging

import pytest

from json_equivalence.asserter import EquivalenceAsserter
from json_equivalence.cache import DocumentCache
from json_equivalence.errors import EquivalenceError


@pytest.fixture
def asserter() -> EquivalenceAsserter:
    return EquivalenceAsserter()


class TestAssertEquivalent:
    def test_equivalent_documents_pass(self, asserter: EquivalenceAsserter) -> None:
        asserter.assert_equivalent('{"a": 1, "b": [true]}', '{"a": 1}')

    def test_null_documents_are_equivalent(self, asserter: EquivalenceAsserter) -> None:
        asserter.assert_equivalent("null", " null ")

    def test_null_vs_value_fails(self, asserter: EquivalenceAsserter) -> None:
        with pytest.raises(EquivalenceError) as exc_info:
            asserter.assert_equivalent("null", "{}")
        assert str(exc_info.value) == "Expected {} (Object) but got null (Null)"

    def test_error_carries_every_issue(self, asserter: EquivalenceAsserter) -> None:
        with pytest.raises(EquivalenceError) as exc_info:
            asserter.assert_equivalent('{"a": 1}', '{"a": 2, "b": 3}')
        assert [issue.render() for issue in exc_info.value.issues] == [
            "Expected 2 (Number) but got 1 (Number) at $.a",
            "key 'b' was not found",
        ]

    @pytest.mark.parametrize("text", ["", "{", "}", "[", "]", "text"])
    def test_malformed_json_propagates(
        self, asserter: EquivalenceAsserter, text: str
    ) -> None:
        with pytest.raises(json.JSONDecodeError):
            asserter.assert_equivalent(text, text)

    def test_malformed_expected_with_valid_actual(
        self, asserter: EquivalenceAsserter
    ) -> None:
        with pytest.raises(json.JSONDecodeError):
            asserter.assert_equivalent("{}", "{")

    def test_logs_issue_count(
        self, asserter: EquivalenceAsserter, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="json_equivalence"):
            with pytest.raises(EquivalenceError):
                asserter.assert_equivalent("[1, 2]", "[3, 4]")
        assert "2 issue(s)" in caplog.text


class TestFindIssues:
    def test_returns_list_in_discovery_order(self, asserter: EquivalenceAsserter) -> None:
        issues = asserter.find_issues("[1, 2, 3]", "[1, 5, 6]")
        assert [issue.path for issue in issues] == ["$[1]", "$[2]"]

    def test_empty_for_equivalent(self, asserter: EquivalenceAsserter) -> None:
        assert asserter.find_issues("[]", "[]") == []

    def test_accepts_bytes(self, asserter: EquivalenceAsserter) -> None:
        assert asserter.find_issues(b'{"a": 1}', '{"a": 1}') == []


class TestAssertValuesEquivalent:
    def test_decoded_values(self, asserter: EquivalenceAsserter) -> None:
        asserter.assert_values_equivalent({"a": [1, 2.0], "extra": None}, {"a": [1, 2]})

    def test_both_none(self, asserter: EquivalenceAsserter) -> None:
        asserter.assert_values_equivalent(None, None)

    def test_mismatch(self, asserter: EquivalenceAsserter) -> None:
        with pytest.raises(EquivalenceError, match=r"^key 'id' was not found$"):
            asserter.assert_values_equivalent({}, {"id": 1})

    def test_non_json_value(self, asserter: EquivalenceAsserter) -> None:
        with pytest.raises(TypeError):
            asserter.assert_values_equivalent({"a": {1, 2}}, {"a": [1, 2]})


class TestWithCache:
    def test_expected_parsed_once(self) -> None:
        cache = DocumentCache()
        asserter = EquivalenceAsserter(cache=cache)
        asserter.assert_equivalent('{"id": 1}', '{"id": 1}')
        asserter.assert_equivalent('{"id": 1, "x": 2}', '{"id": 1}')
        assert cache.curr_size == 2

    def test_cache_does_not_change_result(self) -> None:
        asserter = EquivalenceAsserter(cache=DocumentCache())
        for _ in range(2):
            with pytest.raises(EquivalenceError, match=r"at \$\.id$"):
                asserter.assert_equivalent('{"id": 2}', '{"id": 1}')
